"""
Full schema of the compute route resource.

The router status data source never manages routes; it reuses this schema to
derive the read-only element shape of `best_routes` and
`best_routes_for_router`.
"""

from router_status.engine.attributes import Attribute, ValueType


def compute_route_resource_schema() -> dict[str, Attribute]:
    return {
        "dest_range": Attribute(
            ValueType.STRING,
            description="The destination range of outgoing packets that this route applies to.",
            required=True,
            force_new=True,
        ),
        "name": Attribute(
            ValueType.STRING,
            description="Name of the resource.",
            required=True,
            force_new=True,
        ),
        "network": Attribute(
            ValueType.STRING,
            description="The network that this route applies to.",
            required=True,
            force_new=True,
        ),
        "description": Attribute(
            ValueType.STRING,
            description="An optional description of this resource.",
            optional=True,
            force_new=True,
        ),
        "next_hop_gateway": Attribute(
            ValueType.STRING,
            description="URL to a gateway that should handle matching packets.",
            optional=True,
            force_new=True,
        ),
        "next_hop_ilb": Attribute(
            ValueType.STRING,
            description="The IP address or URL to a forwarding rule of type loadBalancingScheme=INTERNAL.",
            optional=True,
            force_new=True,
        ),
        "next_hop_instance": Attribute(
            ValueType.STRING,
            description="URL to an instance that should handle matching packets.",
            optional=True,
            force_new=True,
        ),
        "next_hop_instance_zone": Attribute(
            ValueType.STRING,
            description="The zone of the instance specified in next_hop_instance.",
            optional=True,
            computed=True,
            force_new=True,
        ),
        "next_hop_ip": Attribute(
            ValueType.STRING,
            description="Network IP address of an instance that should handle matching packets.",
            optional=True,
            computed=True,
            force_new=True,
        ),
        "next_hop_vpn_tunnel": Attribute(
            ValueType.STRING,
            description="URL to a VpnTunnel that should handle matching packets.",
            optional=True,
            force_new=True,
        ),
        "priority": Attribute(
            ValueType.INT,
            description="The priority of this route, used to break ties between routes.",
            optional=True,
            force_new=True,
            default=1000,
        ),
        "tags": Attribute(
            ValueType.SET,
            description="A list of instance tags to which this route applies.",
            optional=True,
            force_new=True,
            elem=Attribute(ValueType.STRING),
        ),
        "next_hop_network": Attribute(
            ValueType.STRING,
            description="URL to a Network that should handle matching packets.",
            computed=True,
        ),
        "project": Attribute(ValueType.STRING, optional=True, computed=True, force_new=True),
        "self_link": Attribute(ValueType.STRING, computed=True),
    }
