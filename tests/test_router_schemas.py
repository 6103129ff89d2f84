import pytest

from router_status.schemas.router import RouteRecord, RouterQuery, RouterStatus

ROUTE_FIELDS = {
    "dest_range",
    "name",
    "network",
    "description",
    "next_hop_gateway",
    "next_hop_ilb",
    "next_hop_ip",
    "next_hop_vpn_tunnel",
    "priority",
    "tags",
    "next_hop_network",
}


def test_route_from_api_maps_camel_case():
    route = RouteRecord.from_api(
        {
            "kind": "compute#route",
            "id": "123",
            "destRange": "0.0.0.0/0",
            "name": "default-route",
            "network": "net",
            "description": "Default route to the Internet.",
            "nextHopGateway": "gw",
            "nextHopIlb": "ilb",
            "nextHopIp": "10.0.0.2",
            "nextHopVpnTunnel": "tunnel",
            "priority": 1000,
            "tags": ["web"],
            "nextHopNetwork": "peer",
        }
    )

    assert route.to_attributes() == {
        "dest_range": "0.0.0.0/0",
        "name": "default-route",
        "network": "net",
        "description": "Default route to the Internet.",
        "next_hop_gateway": "gw",
        "next_hop_ilb": "ilb",
        "next_hop_ip": "10.0.0.2",
        "next_hop_vpn_tunnel": "tunnel",
        "priority": 1000,
        "tags": ["web"],
        "next_hop_network": "peer",
    }


def test_route_from_api_zero_values():
    attributes = RouteRecord.from_api({"destRange": "10.0.0.0/8"}).to_attributes()

    assert set(attributes) == ROUTE_FIELDS
    assert attributes["priority"] == 0
    assert attributes["tags"] == []
    assert attributes["next_hop_vpn_tunnel"] == ""


def test_route_attributes_mapping_is_bidirectional():
    route = RouteRecord(dest_range="10.0.0.0/8", name="r1", priority=100, tags=["a"])
    assert RouteRecord.from_attributes(route.to_attributes()) == route


def test_from_attributes_ignores_other_route_fields():
    route = RouteRecord.from_attributes({"name": "r1", "self_link": "x", "next_hop_instance": None})
    assert route == RouteRecord(name="r1")


@pytest.mark.parametrize(
    "field, value",
    [
        ("dest_range", "10.1.0.0/16"),
        ("name", "r2"),
        ("network", "other"),
        ("description", "d"),
        ("next_hop_gateway", "gw"),
        ("next_hop_ilb", "ilb"),
        ("next_hop_ip", "10.0.0.9"),
        ("next_hop_vpn_tunnel", "t"),
        ("priority", 101),
        ("tags", ["x"]),
        ("next_hop_network", "n"),
    ],
)
def test_flattening_distinguishes_every_field(field, value):
    base = RouteRecord(dest_range="10.0.0.0/8", name="r1", priority=100)
    changed = base.model_copy(update={field: value})

    assert changed.to_attributes() != base.to_attributes()


def test_router_status_from_api_keeps_order():
    status = RouterStatus.from_api(
        {
            "network": "net",
            "bestRoutes": [{"name": "b"}, {"name": "a"}],
            "bestRoutesForRouter": [{"name": "c"}],
        }
    )

    assert [r.name for r in status.best_routes] == ["b", "a"]
    assert [r.name for r in status.best_routes_for_router] == ["c"]


def test_router_query_id():
    query = RouterQuery(name="edge-router", project="proj-1", region="us-central1")
    assert query.id == "projects/proj-1/regions/us-central1/routers/edge-router"
