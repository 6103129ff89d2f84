"""
Pydantic schemas for the router status data source endpoints.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from router_status.schemas.router import RouteRecord

Lookup = Literal["name", "id"]


# ── Request models ────────────────────────────────────────────────────────────

class ReadRouterStatusRequest(BaseModel):
    """Request body for POST /data-sources/router-status/read."""

    lookup: Lookup = Field(
        "name",
        description=(
            "How the router is identified: `name` reads the `name` argument, "
            "`id` reuses the identifier from a previous read or import."
        ),
    )
    id: Optional[str] = Field(
        None,
        examples=["projects/proj-1/regions/us-central1/routers/edge-router"],
        description="Existing identifier of the data source instance.",
    )
    config: dict[str, Any] = Field(
        default_factory=dict,
        examples=[{"name": "edge-router", "project": "proj-1", "region": "us-central1"}],
        description="Configuration map as written by the user.",
    )


# ── Response models ───────────────────────────────────────────────────────────

class RouterStatusState(BaseModel):
    """Attributes of the data source after a successful read."""

    id: str
    name: Optional[str] = None
    project: Optional[str] = None
    region: Optional[str] = None
    network: str
    best_routes: list[RouteRecord]
    best_routes_for_router: list[RouteRecord]

    @classmethod
    def from_state(cls, state: dict[str, Any]) -> "RouterStatusState":
        return cls(
            id=state["id"],
            name=state.get("name"),
            project=state.get("project"),
            region=state.get("region"),
            network=state.get("network") or "",
            best_routes=[RouteRecord.from_attributes(r) for r in state.get("best_routes") or []],
            best_routes_for_router=[
                RouteRecord.from_attributes(r) for r in state.get("best_routes_for_router") or []
            ],
        )


class DataSourceSchemaResponse(BaseModel):
    """Returned by GET /data-sources/router-status/schema."""

    lookup: Lookup
    attributes: dict[str, dict]
