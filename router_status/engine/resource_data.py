"""
Per-read record the engine hands to a data source.

`ResourceData` carries the user's configuration map, the tracking identifier
and every attribute written during the read.  Writes are checked against the
declared schema; a rejected write raises `SchemaWriteError`.
"""

import copy
import logging
from typing import Any, Mapping, Optional

from router_status.engine.attributes import Schema, type_error
from router_status.errors import SchemaWriteError

logger = logging.getLogger(__name__)


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


class ResourceData:
    def __init__(
        self,
        schema: Schema,
        config: Optional[Mapping[str, Any]] = None,
        id: str = "",
    ) -> None:
        self._schema = schema
        self._config = dict(config or {})
        self._attributes: dict[str, Any] = {}
        self._id = id

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, value: str) -> None:
        self._id = value

    def get(self, key: str) -> Any:
        """Return the written value for *key*, falling back to configuration."""
        if key in self._attributes:
            return self._attributes[key]
        return self._config.get(key)

    def get_ok(self, key: str) -> tuple[Any, bool]:
        """Like `get`, plus whether the value is set to something non-zero."""
        value = self.get(key)
        return value, not _is_zero(value)

    def set(self, key: str, value: Any) -> None:
        attr = self._schema.get(key)
        if attr is None:
            raise SchemaWriteError(f"Invalid address to set: '{key}'")
        problem = type_error(attr, value)
        if problem:
            raise SchemaWriteError(f"{key}: {problem}")
        if isinstance(value, (tuple, set, frozenset)):
            value = list(value)
        self._attributes[key] = copy.deepcopy(value)
        logger.debug("Set attribute '%s'.", key)

    def state(self) -> dict[str, Any]:
        """Snapshot of the configuration overlaid with written attributes."""
        snapshot = copy.deepcopy(self._config)
        snapshot.update(copy.deepcopy(self._attributes))
        snapshot["id"] = self._id
        return snapshot
