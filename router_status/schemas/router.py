"""
Typed records for the Compute API router status response.

The Compute API speaks camelCase JSON and omits empty fields; the engine
speaks snake_case attribute maps.  `RouteRecord` is the typed record between
the two, with an explicit mapping in each direction.
"""

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict


# engine attribute name -> Compute API field name
_ROUTE_API_FIELDS = {
    "dest_range": "destRange",
    "name": "name",
    "network": "network",
    "description": "description",
    "next_hop_gateway": "nextHopGateway",
    "next_hop_ilb": "nextHopIlb",
    "next_hop_ip": "nextHopIp",
    "next_hop_vpn_tunnel": "nextHopVpnTunnel",
    "priority": "priority",
    "tags": "tags",
    "next_hop_network": "nextHopNetwork",
}


class RouterQuery(BaseModel):
    """Lookup keys for a single read; built fresh each time."""

    model_config = ConfigDict(frozen=True)

    name: str
    project: str
    region: str

    @property
    def id(self) -> str:
        """Tracking identifier assigned after a successful read."""
        return f"projects/{self.project}/regions/{self.region}/routers/{self.name}"


class RouteRecord(BaseModel):
    """One route as reported by the router status call."""

    model_config = ConfigDict(frozen=True)

    dest_range: str = ""
    name: str = ""
    network: str = ""
    description: str = ""
    next_hop_gateway: str = ""
    next_hop_ilb: str = ""
    next_hop_ip: str = ""
    next_hop_vpn_tunnel: str = ""
    priority: int = 0
    tags: list[str] = []
    next_hop_network: str = ""

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "RouteRecord":
        """Build from a Compute API ``Route`` JSON object; absent fields stay zero."""
        return cls(
            **{
                field: payload[api_field]
                for field, api_field in _ROUTE_API_FIELDS.items()
                if payload.get(api_field) is not None
            }
        )

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Any]) -> "RouteRecord":
        """Inverse of `to_attributes`; keys outside the route record are ignored."""
        return cls(**{key: attributes[key] for key in _ROUTE_API_FIELDS if attributes.get(key) is not None})

    def to_attributes(self) -> dict[str, Any]:
        """Engine attribute map holding every field verbatim."""
        return self.model_dump()


class RouterStatus(BaseModel):
    """The ``result`` of ``routers.getRouterStatus``."""

    model_config = ConfigDict(frozen=True)

    network: str = ""
    best_routes: list[RouteRecord] = []
    best_routes_for_router: list[RouteRecord] = []

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "RouterStatus":
        return cls(
            network=payload.get("network") or "",
            best_routes=[RouteRecord.from_api(r) for r in payload.get("bestRoutes") or []],
            best_routes_for_router=[
                RouteRecord.from_api(r) for r in payload.get("bestRoutesForRouter") or []
            ],
        )
