"""
Resolution of the lookup keys for a router status read.

Project and region come from the configuration map, falling back to the
provider defaults in the `ProviderContext`.  The router name comes from one of
two strategies:

  ExplicitNameResolver     the user's `name` argument; the read then assigns
                           ``projects/{project}/regions/{region}/routers/{name}``
                           as the identifier
  IdentifierNameResolver   the identifier left by a previous read or import;
                           the identifier is kept as is; a full identifier
                           also supplies the project and region
"""

import re
from abc import ABC, abstractmethod
from typing import Optional

from router_status.config import ProviderContext
from router_status.engine.attributes import Attribute, ValueType
from router_status.engine.resource_data import ResourceData
from router_status.errors import ConfigurationError
from router_status.schemas.router import RouterQuery

NAME_DESCRIPTION = (
    "Name of the router to query. This can be the router name, or a fully qualified self-link."
)

_ROUTER_PATH = re.compile(
    r"(?:^|/)projects/(?P<project>[^/]+)/regions/(?P<region>[^/]+)/routers/(?P<name>[^/]+)/?$"
)


def resource_name_from_self_link(value: str) -> str:
    """Return the last path segment of a self-link, or *value* unchanged."""
    return value.rstrip("/").rsplit("/", 1)[-1]


def get_project(data: ResourceData, context: ProviderContext) -> str:
    project, ok = data.get_ok("project")
    if ok:
        return project
    if context.project:
        return context.project
    raise ConfigurationError(
        "Project: required field is not set; configure `project` or a default project."
    )


def get_region(data: ResourceData, context: ProviderContext) -> str:
    region, ok = data.get_ok("region")
    if ok:
        return resource_name_from_self_link(region)
    if context.region:
        return resource_name_from_self_link(context.region)
    raise ConfigurationError(
        "Region: required field is not set; configure `region` or a default region."
    )


class NameResolver(ABC):
    """Strategy that determines which router a read refers to."""

    lookup: str

    @abstractmethod
    def name_attribute(self) -> Attribute:
        """Schema entry declared for ``name`` under this strategy."""

    @abstractmethod
    def resolve(self, data: ResourceData) -> str:
        """Return the router name, or raise `ConfigurationError`."""

    def scope(self, data: ResourceData) -> tuple[Optional[str], Optional[str]]:
        """Project and region fixed by the lookup itself, if any."""
        return None, None

    @abstractmethod
    def assign_id(self, data: ResourceData, query: RouterQuery) -> None:
        """Record the identity of *data* after a successful read."""


class ExplicitNameResolver(NameResolver):
    lookup = "name"

    def name_attribute(self) -> Attribute:
        return Attribute(ValueType.STRING, description=NAME_DESCRIPTION, required=True)

    def resolve(self, data: ResourceData) -> str:
        name, ok = data.get_ok("name")
        if not ok:
            raise ConfigurationError("The argument 'name' is required.")
        return resource_name_from_self_link(name)

    def assign_id(self, data: ResourceData, query: RouterQuery) -> None:
        data.set_id(query.id)


class IdentifierNameResolver(NameResolver):
    """
    Reads the router from the existing identifier.

    A bare name only names the router.  A full
    ``projects/{project}/regions/{region}/routers/{name}`` identifier (or a
    self-link ending in one) also fixes the project and region; an explicit
    `project` or `region` argument that disagrees with it is rejected.
    """

    lookup = "id"

    def name_attribute(self) -> Attribute:
        return Attribute(ValueType.STRING, description=NAME_DESCRIPTION, optional=True, computed=True)

    def _identifier(self, data: ResourceData) -> str:
        if not data.id:
            raise ConfigurationError(
                "No identifier to read from; the data source has not been read or imported yet."
            )
        return data.id

    def resolve(self, data: ResourceData) -> str:
        match = _ROUTER_PATH.search(self._identifier(data))
        if match:
            return match.group("name")
        return resource_name_from_self_link(data.id)

    def scope(self, data: ResourceData) -> tuple[Optional[str], Optional[str]]:
        match = _ROUTER_PATH.search(self._identifier(data))
        if match is None:
            return None, None
        return match.group("project"), match.group("region")

    def assign_id(self, data: ResourceData, query: RouterQuery) -> None:
        data.set("name", query.name)


_RESOLVERS: dict[str, NameResolver] = {
    resolver.lookup: resolver for resolver in (ExplicitNameResolver(), IdentifierNameResolver())
}


def resolver_for(lookup: str) -> NameResolver:
    try:
        return _RESOLVERS[lookup]
    except KeyError:
        raise ConfigurationError(
            f"Unknown lookup '{lookup}'; expected one of {sorted(_RESOLVERS)}."
        ) from None


def resolve_query(data: ResourceData, context: ProviderContext, resolver: NameResolver) -> RouterQuery:
    """Resolve project, region and name for one read."""
    name = resolver.resolve(data)
    scoped_project, scoped_region = resolver.scope(data)
    if scoped_project:
        # the identifier's scope replaces the provider defaults, never the user's arguments
        context = context.model_copy(update={"project": scoped_project, "region": scoped_region})

    project = get_project(data, context)
    region = get_region(data, context)
    if scoped_project and (project, region) != (scoped_project, scoped_region):
        raise ConfigurationError(
            f"Identifier '{data.id}' names project '{scoped_project}' and region "
            f"'{scoped_region}', but the configuration asks for '{project}' in '{region}'."
        )
    return RouterQuery(name=name, project=project, region=region)
