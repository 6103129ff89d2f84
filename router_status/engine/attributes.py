"""
Declarative attribute schema understood by the infrastructure-as-code engine.

A schema is a plain ``dict[str, Attribute]``.  List and set attributes carry
an element that is either a scalar `Attribute` (e.g. a set of strings) or a
nested schema mapping (a list of records).
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping, Optional, Union

from router_status.errors import ConfigurationError


class ValueType(str, Enum):
    STRING = "string"
    INT = "int"
    BOOL = "bool"
    LIST = "list"
    SET = "set"


@dataclass(frozen=True)
class Attribute:
    type: ValueType
    description: str = ""
    required: bool = False
    optional: bool = False
    computed: bool = False
    force_new: bool = False
    default: Any = None
    elem: Union["Attribute", Mapping[str, "Attribute"], None] = None

    @property
    def computed_only(self) -> bool:
        return self.computed and not (self.required or self.optional)


Schema = Mapping[str, Attribute]


def datasource_schema_from_resource_schema(resource_schema: Schema) -> dict[str, Attribute]:
    """
    Derive a read-only schema from a full resource schema.

    Every attribute becomes computed-only; required/optional flags, defaults
    and ``force_new`` are dropped.  Nested record elements are converted
    recursively.  The input schema is left untouched.
    """
    return {key: _datasource_attribute(attr) for key, attr in resource_schema.items()}


def _datasource_attribute(attr: Attribute) -> Attribute:
    elem = attr.elem
    if isinstance(elem, Attribute):
        elem = _datasource_attribute(elem)
    elif elem is not None:
        elem = datasource_schema_from_resource_schema(elem)
    return replace(
        attr,
        required=False,
        optional=False,
        computed=True,
        force_new=False,
        default=None,
        elem=elem,
    )


def describe_schema(schema: Schema) -> dict[str, dict]:
    """Render *schema* as JSON-compatible data."""
    return {key: _describe_attribute(attr) for key, attr in schema.items()}


def _describe_attribute(attr: Attribute) -> dict:
    described: dict = {
        "type": attr.type.value,
        "description": attr.description,
        "required": attr.required,
        "optional": attr.optional,
        "computed": attr.computed,
    }
    if attr.force_new:
        described["force_new"] = True
    if attr.default is not None:
        described["default"] = attr.default
    if isinstance(attr.elem, Attribute):
        described["elem"] = _describe_attribute(attr.elem)
    elif attr.elem is not None:
        described["elem"] = describe_schema(attr.elem)
    return described


# ── Value checks ──────────────────────────────────────────────────────────────

def type_error(attr: Attribute, value: Any) -> Optional[str]:
    """
    Return a description of why *value* does not fit *attr*, or ``None``.

    ``None`` values always fit; they mean "unset".
    """
    if value is None:
        return None
    if attr.type is ValueType.STRING:
        ok = isinstance(value, str)
    elif attr.type is ValueType.INT:
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif attr.type is ValueType.BOOL:
        ok = isinstance(value, bool)
    else:
        return _collection_error(attr, value)
    if ok:
        return None
    return f"expected {attr.type.value}, got {type(value).__name__}"


def _collection_error(attr: Attribute, value: Any) -> Optional[str]:
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, (list, tuple, set, frozenset)):
        return f"expected {attr.type.value}, got {type(value).__name__}"
    for index, item in enumerate(value):
        if isinstance(attr.elem, Attribute):
            problem = type_error(attr.elem, item)
        elif attr.elem is not None:
            problem = _record_error(attr.elem, item)
        else:
            problem = None
        if problem:
            return f"element {index}: {problem}"
    return None


def _record_error(schema: Schema, item: Any) -> Optional[str]:
    if not isinstance(item, Mapping):
        return f"expected a mapping, got {type(item).__name__}"
    for key, value in item.items():
        if key not in schema:
            return f"unknown attribute '{key}'"
        problem = type_error(schema[key], value)
        if problem:
            return f"{key}: {problem}"
    return None


def validate_config(schema: Schema, config: Mapping[str, Any]) -> None:
    """
    Check a user-supplied configuration map against *schema*.

    Raises `ConfigurationError` for unknown attributes, values given for
    computed-only attributes, missing required attributes and type mismatches.
    """
    for key, value in config.items():
        attr = schema.get(key)
        if attr is None:
            raise ConfigurationError(f"Unsupported argument '{key}'.")
        if value is None:
            continue
        if attr.computed_only:
            raise ConfigurationError(f"'{key}' is computed and cannot be configured.")
        problem = type_error(attr, value)
        if problem:
            raise ConfigurationError(f"Invalid value for '{key}': {problem}.")

    for key, attr in schema.items():
        if attr.required and config.get(key) in (None, ""):
            raise ConfigurationError(f"The argument '{key}' is required.")
