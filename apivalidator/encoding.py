"""Decoding of parameter values in the OpenAPI serialisation styles."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

from . import constants
from .operations import Schema

_DECIMAL_FLOAT = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_HEX_FLOAT = re.compile(r"[+-]?0[xX]([0-9a-fA-F_]*\.?[0-9a-fA-F_]*)[pP][+-]?\d+")
_SPECIAL_FLOAT = re.compile(r"[+-]?(inf|infinity|nan)", re.IGNORECASE)
_INTEGER = re.compile(r"[+-]?\d+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass
class QueryParam:
    """A query parameter key with its values and, for deep objects, its property."""

    key: str
    values: list[str] = field(default_factory=list)
    property: str = ""


def _parse_float(text: str) -> Optional[float]:
    if _SPECIAL_FLOAT.fullmatch(text):
        return float(text)
    if _DECIMAL_FLOAT.fullmatch(text):
        value = float(text)
    elif _HEX_FLOAT.fullmatch(text) and any(c.isalnum() for c in _HEX_FLOAT.fullmatch(text).group(1)):
        try:
            value = float.fromhex(text.replace("_", ""))
        except (OverflowError, ValueError):
            return None
    else:
        return None
    if math.isinf(value):
        return None
    return value


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(text)))


def cast_value(value: str) -> Any:
    """Turn a raw parameter string into a bool, int, float or leave it as a string."""
    if value == "true":
        return True
    if value == "false":
        return False
    number = _parse_float(value)
    if number is None:
        return value
    if constants.PERIOD not in value:
        return _parse_int(value)
    return number


def _wants_array(schema: Optional[Schema]) -> bool:
    if schema is None:
        return False
    if constants.ARRAY in schema.type:
        return True
    extra = schema.additional_properties
    return isinstance(extra, Schema) and constants.ARRAY in extra.type


def construct_param_map_from_deep_object_encoding(
    values: Iterable[QueryParam], schema: Optional[Schema]
) -> dict[str, Any]:
    """Build nested objects from deepObject-encoded query parameters."""
    decoded: dict[str, Any] = {}
    as_array = _wants_array(schema)
    for param in values:
        if as_array:
            value: Any = [cast_value(v) for v in param.values]
        else:
            value = cast_value(param.values[0])
        decoded.setdefault(param.key, {})[param.property] = value
    return decoded


def construct_param_map_from_query_param_input(values: Mapping[str, Sequence[QueryParam]]) -> dict[str, Any]:
    """Map each query parameter key to the cast value of its first value."""
    return {param.key: cast_value(param.values[0]) for group in values.values() for param in group}


def _strict_pairs(text: str, delimiter: str) -> dict[str, Any]:
    parts = text.split(delimiter)
    if len(parts) % 2:
        raise ValueError(f"value {text!r} does not hold complete key/value pairs")
    return {key: cast_value(value) for key, value in zip(parts[0::2], parts[1::2])}


def construct_param_map_from_pipe_encoding(values: Iterable[QueryParam]) -> dict[str, Any]:
    """Decode pipe-delimited key|value pairs for each parameter."""
    return {param.key: _strict_pairs(param.values[0], constants.PIPE) for param in values}


def construct_param_map_from_space_encoding(values: Iterable[QueryParam]) -> dict[str, Any]:
    """Decode space-delimited key value pairs for each parameter."""
    return {param.key: _strict_pairs(param.values[0], constants.SPACE) for param in values}


def construct_param_map_from_form_encoding_array(values: Iterable[QueryParam]) -> dict[str, Any]:
    """Decode comma-delimited key,value pairs for each parameter."""
    return {param.key: _strict_pairs(param.values[0], constants.COMMA) for param in values}


def construct_map_from_csv(csv: str) -> dict[str, Any]:
    """Decode key,value,key,value text; a trailing key without a value is ignored."""
    parts = csv.split(constants.COMMA)
    return {key: cast_value(value) for key, value in zip(parts[0::2], parts[1::2])}


def _key_values(text: str, delimiter: str) -> dict[str, Any]:
    props: dict[str, Any] = {}
    for entry in text.split(delimiter):
        pieces = entry.split(constants.EQUALS)
        if len(pieces) == 2:
            props[pieces[0]] = cast_value(pieces[1])
    return props


def construct_kv_from_csv(values: str) -> dict[str, Any]:
    """Decode key=value pairs separated by commas."""
    return _key_values(values, constants.COMMA)


def construct_kv_from_label_encoding(values: str) -> dict[str, Any]:
    """Decode key=value pairs separated by periods."""
    return _key_values(values, constants.PERIOD)


def construct_kv_from_matrix_csv(values: str) -> dict[str, Any]:
    """Decode key=value pairs separated by semicolons."""
    return _key_values(values, constants.SEMICOLON)


def does_form_param_contain_delimiter(value: str, style: str) -> bool:
    """Tell whether a form-style (or unstyled) value contains a comma."""
    return constants.COMMA in value and style in ("", constants.FORM)


def explode_query_value(value: str, style: str) -> list[str]:
    """Split a query value by the delimiter of its style."""
    if style == constants.SPACE_DELIMITED:
        return value.split(constants.SPACE)
    if style == constants.PIPE_DELIMITED:
        return value.split(constants.PIPE)
    return value.split(constants.COMMA)


def collapse_csv_into_form_style(key: str, value: str) -> str:
    """Rewrite a comma-separated value as repeated form-style query pairs."""
    return f"&{key}=" + f"&{key}=".join(value.split(","))


def collapse_csv_into_space_delimited_style(key: str, values: Sequence[str]) -> str:
    """Join values into a single space-delimited query pair."""
    return f"{key}=" + "%20".join(values)


def collapse_csv_into_pipe_delimited_style(key: str, values: Sequence[str]) -> str:
    """Join values into a single pipe-delimited query pair."""
    return f"{key}=" + constants.PIPE.join(values)