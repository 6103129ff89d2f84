"""
FastAPI dependencies for the provider context and the Compute client.

Routes declare

    context: ProviderContext = Depends(get_provider_context)
    client_factory: ComputeClientFactory = Depends(get_compute_client_factory)

The factory is only called once the read has resolved its project, region
and name, so configuration errors surface before any credential lookup.
Tests override `get_compute_client_factory` to keep reads offline:

    app.dependency_overrides[get_compute_client_factory] = lambda: fake_factory
"""

from typing import Callable

from googleapiclient.discovery import Resource

from router_status.cloud.compute import compute_client_for
from router_status.config import ProviderContext, settings

ComputeClientFactory = Callable[[ProviderContext], Resource]


def get_provider_context() -> ProviderContext:
    """Return the provider defaults for the current request."""
    return settings.provider_context()


def get_compute_client_factory() -> ComputeClientFactory:
    """Return the cached Compute client builder."""
    return compute_client_for
