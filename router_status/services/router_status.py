"""
Router status data source: schema declaration and the read operation.

A read is one pass, with no intermediate state:

    resolve_query → get_router_status → network → best_routes
                  → best_routes_for_router → identity

Attributes are written one at a time; if a later step fails, earlier writes
stay on the `ResourceData` and the error is raised to the caller.
"""

import logging
from typing import Callable, Sequence

from googleapiclient.discovery import Resource

from router_status.cloud.compute import get_router_status
from router_status.config import ProviderContext
from router_status.engine.attributes import (
    Attribute,
    ValueType,
    datasource_schema_from_resource_schema,
)
from router_status.engine.resource_data import ResourceData
from router_status.errors import SchemaWriteError
from router_status.schemas.compute_route import compute_route_resource_schema
from router_status.schemas.router import RouteRecord
from router_status.services.resolver import NameResolver, resolve_query

logger = logging.getLogger(__name__)


def data_source_schema(resolver: NameResolver) -> dict[str, Attribute]:
    route_elem_schema = datasource_schema_from_resource_schema(compute_route_resource_schema())

    return {
        "name": resolver.name_attribute(),
        "project": Attribute(
            ValueType.STRING, description="Project ID of the target router.", optional=True
        ),
        "region": Attribute(
            ValueType.STRING, description="Region of the target router.", optional=True
        ),
        "network": Attribute(
            ValueType.STRING,
            description="URI of the network to which this router belongs.",
            computed=True,
        ),
        "best_routes": Attribute(
            ValueType.LIST,
            description="Best routes for this router's network.",
            computed=True,
            elem=route_elem_schema,
        ),
        "best_routes_for_router": Attribute(
            ValueType.LIST,
            description="Best routes learned by this router.",
            computed=True,
            elem=route_elem_schema,
        ),
    }


def map_routes(data: ResourceData, field: str, routes: Sequence[RouteRecord]) -> None:
    """Write *routes* into *field* as a list of attribute maps, order kept."""
    logger.debug("mapping %d routes for %s", len(routes), field)
    data.set(field, [route.to_attributes() for route in routes])


def read_router_status(
    data: ResourceData,
    context: ProviderContext,
    client_factory: Callable[[ProviderContext], Resource],
    resolver: NameResolver,
) -> None:
    """
    Populate *data* with the live status of the router it refers to.

    *client_factory* builds the Compute client; it is only called once the
    lookup keys are resolved.

    Raises
    ------
    ConfigurationError
        Project, region or name could not be resolved.
    RemoteError
        The Compute client could not be built or the API call failed.
    SchemaWriteError
        An attribute write was rejected.
    """
    query = resolve_query(data, context, resolver)
    status = get_router_status(client_factory(context), query)

    try:
        data.set("network", status.network)
    except SchemaWriteError as exc:
        raise SchemaWriteError(f"Error setting network: {exc}") from exc

    for field, routes in (
        ("best_routes", status.best_routes),
        ("best_routes_for_router", status.best_routes_for_router),
    ):
        try:
            map_routes(data, field, routes)
        except SchemaWriteError as exc:
            raise SchemaWriteError(f"Error setting {field}: {exc}") from exc

    resolver.assign_id(data, query)
    logger.info("Read router status for '%s'.", query.id)
