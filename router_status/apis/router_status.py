"""
Router status data source: endpoints under /data-sources/router-status.

Every route requires a valid JWT (via the `get_current_client` dependency).
The provider context and the Compute client factory are injected, so tests can
swap the client for a fake without touching route or service code.

Endpoints
─────────
  GET    /data-sources/router-status/schema   Declared attribute schema
  POST   /data-sources/router-status/read     Read the live router status
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from router_status.config import ProviderContext
from router_status.dependencies.api import get_current_client
from router_status.dependencies.compute import (
    ComputeClientFactory,
    get_compute_client_factory,
    get_provider_context,
)
from router_status.engine.attributes import describe_schema, validate_config
from router_status.engine.resource_data import ResourceData
from router_status.errors import ConfigurationError, RemoteError, SchemaWriteError
from router_status.schemas.data_source import (
    DataSourceSchemaResponse,
    Lookup,
    ReadRouterStatusRequest,
    RouterStatusState,
)
from router_status.services.resolver import resolver_for
from router_status.services.router_status import data_source_schema, read_router_status

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/data-sources/router-status", tags=["Router Status"])


@router.get(
    "/schema",
    response_model=DataSourceSchemaResponse,
    summary="Describe the data source schema",
)
def get_schema(
    lookup: Lookup = Query("name", description="Router lookup strategy."),
    current_client: str = Depends(get_current_client),
) -> DataSourceSchemaResponse:
    """Return the attributes accepted and produced by a read."""
    logger.info("GET schema (%s) called by '%s'", lookup, current_client)
    schema = data_source_schema(resolver_for(lookup))
    return DataSourceSchemaResponse(lookup=lookup, attributes=describe_schema(schema))


@router.post(
    "/read",
    response_model=RouterStatusState,
    summary="Read the status of a Cloud Router",
    description=(
        "Resolves the router from the configuration map (or a previous identifier), "
        "calls the Compute API once and returns the network and both best-route lists."
    ),
)
def read(
    body: ReadRouterStatusRequest,
    current_client: str = Depends(get_current_client),
    context: ProviderContext = Depends(get_provider_context),
    client_factory: ComputeClientFactory = Depends(get_compute_client_factory),
) -> RouterStatusState:
    """Run one read and return the resulting state."""
    logger.info("POST read (%s) called by '%s'", body.lookup, current_client)
    try:
        resolver = resolver_for(body.lookup)
        schema = data_source_schema(resolver)
        validate_config(schema, body.config)
        data = ResourceData(schema, config=body.config, id=body.id or "")
        read_router_status(data, context, client_factory, resolver)
    except ConfigurationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except RemoteError as exc:
        if exc.not_found:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=exc.message,
            ) from exc
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Google Cloud error: {exc.message}",
        ) from exc
    except SchemaWriteError:
        logger.exception("Router status read wrote an invalid attribute")
        raise

    return RouterStatusState.from_state(data.state())
