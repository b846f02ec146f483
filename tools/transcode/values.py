"""
Destination value models.

A parsed document is rebuilt as the value tree its output format can hold
before it is serialized. Each output format gets one coercion function. When a
value has no representation in that format, the function raises
IncompatibleValueError instead of silently dropping it.
"""

import math
from datetime import date, datetime, time
from typing import Any, Callable, Dict

from .exceptions import IncompatibleValueError
from .formats import FileFormat

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _json_key(key: Any) -> str:
    # Same text json.dumps would produce for scalar keys
    if isinstance(key, str):
        return key
    if key is True:
        return "true"
    if key is False:
        return "false"
    if key is None:
        return "null"
    if isinstance(key, (date, time)):
        return key.isoformat()
    return str(key)


def to_json_value(value: Any, source: FileFormat) -> Any:
    """Rebuild ``value`` with only the types JSON can hold."""
    if isinstance(value, dict):
        return {_json_key(k): to_json_value(v, source) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_json_value(v, source) for v in value]
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        raise IncompatibleValueError(source, "binary values cannot be represented in JSON")
    return value


def to_toml_value(value: Any, source: FileFormat) -> Dict[str, Any]:
    """
    Rebuild ``value`` as a TOML document.

    Raises:
        IncompatibleValueError: If the root is not a table, or a value is null,
            binary, or an integer outside the signed 64-bit range
    """
    if not isinstance(value, dict):
        raise IncompatibleValueError(
            source, f"TOML documents must be tables, found {_kind(value)}"
        )
    return _toml_table(value, source)


def _toml_table(table: dict, source: FileFormat) -> Dict[str, Any]:
    return {_json_key(k): _toml_item(v, source) for k, v in table.items()}


def _toml_item(value: Any, source: FileFormat) -> Any:
    if value is None:
        raise IncompatibleValueError(source, "TOML has no null value")
    if isinstance(value, dict):
        return _toml_table(value, source)
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_toml_item(v, source) for v in value]
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and not INT64_MIN <= value <= INT64_MAX:
        raise IncompatibleValueError(source, f"integer {value} is out of range for TOML")
    if isinstance(value, (bytes, bytearray)):
        raise IncompatibleValueError(source, "binary values cannot be represented in TOML")
    return value


def to_yaml_value(value: Any, source: FileFormat) -> Any:
    """Rebuild ``value`` from plain containers the safe YAML dumper accepts."""
    if isinstance(value, dict):
        return {k: to_yaml_value(v, source) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_yaml_value(v, source) for v in value]
    if isinstance(value, time):
        return value.isoformat()
    return value


def _kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, list):
        return "an array"
    return f"a {type(value).__name__}"


VALUE_MODELS: Dict[FileFormat, Callable[[Any, FileFormat], Any]] = {
    FileFormat.JSON: to_json_value,
    FileFormat.YAML: to_yaml_value,
    FileFormat.TOML: to_toml_value,
}
