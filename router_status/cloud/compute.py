"""
Compute Engine helper: reads the status of a Cloud Router.

`get_router_status` issues exactly one ``routers.getRouterStatus`` call and
returns the typed result.  Every failure surfaces as `RemoteError` carrying
the API's own message; nothing is retried.
"""

import logging
import threading
from functools import lru_cache

import google.auth
import google.auth.exceptions
import httplib2
from google.oauth2 import service_account
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import Resource, build
from googleapiclient.errors import HttpError
from googleapiclient.http import set_user_agent

from router_status.config import ProviderContext
from router_status.errors import RemoteError
from router_status.schemas.router import RouterQuery, RouterStatus

logger = logging.getLogger(__name__)

COMPUTE_SCOPES = ["https://www.googleapis.com/auth/compute.readonly"]


def _credentials(context: ProviderContext):
    if context.credentials_file:
        return service_account.Credentials.from_service_account_file(
            context.credentials_file, scopes=COMPUTE_SCOPES
        )
    credentials, _ = google.auth.default(scopes=COMPUTE_SCOPES)
    return credentials


def build_compute_client(context: ProviderContext) -> Resource:
    """Build a Compute v1 service that sends the provider user agent."""
    try:
        credentials = _credentials(context)
    except (google.auth.exceptions.GoogleAuthError, OSError) as exc:
        logger.error("Could not load Google credentials: %s", exc)
        raise RemoteError(str(exc)) from exc

    http = set_user_agent(AuthorizedHttp(credentials, http=httplib2.Http()), context.user_agent)
    kwargs: dict = {"http": http, "cache_discovery": False}
    if context.compute_endpoint:
        kwargs["client_options"] = {"api_endpoint": context.compute_endpoint}
    return build("compute", "v1", **kwargs)


# httplib2 connections are not thread-safe: one service per context and worker thread
@lru_cache(maxsize=32)
def _cached_compute_client(context: ProviderContext, thread_id: int) -> Resource:
    logger.info("Building Compute client for thread %d.", thread_id)
    return build_compute_client(context)


def compute_client_for(context: ProviderContext) -> Resource:
    """
    Return a Compute service for *context*, built on first use.

    Failed builds are not cached, so a credential problem is retried on the
    next read.
    """
    return _cached_compute_client(context, threading.get_ident())


def clear_compute_clients() -> None:
    _cached_compute_client.cache_clear()


def get_router_status(client: Resource, query: RouterQuery) -> RouterStatus:
    """
    Fetch the live status of the router identified by *query*.

    Parameters
    ----------
    client : Resource
        Compute v1 service, see `build_compute_client`.
    query : RouterQuery
        Resolved project, region and router name.

    Returns
    -------
    RouterStatus
        Network URI plus both best-route collections, in response order.
    """
    logger.info(
        "Reading status of router '%s' in %s/%s", query.name, query.project, query.region
    )
    request = client.routers().getRouterStatus(
        project=query.project, region=query.region, router=query.name
    )
    try:
        response = request.execute()
    except HttpError as exc:
        logger.error("getRouterStatus failed for '%s': %s", query.name, exc)
        raise RemoteError(str(exc), status_code=exc.resp.status) from exc
    except (httplib2.HttpLib2Error, google.auth.exceptions.GoogleAuthError, OSError) as exc:
        logger.error("getRouterStatus could not reach the Compute API: %s", exc)
        raise RemoteError(str(exc)) from exc

    status = RouterStatus.from_api(response.get("result") or {})
    logger.info(
        "Router '%s' reports %d best route(s), %d learned by the router.",
        query.name,
        len(status.best_routes),
        len(status.best_routes_for_router),
    )
    return status
