"""Errors for header, cookie and path parameters that do not match their definition.

Positions come from the model's recorded key positions: the parameter's own
keys (``required``, ``schema``), its schema's keys (``type``, ``enum``) and the
``type`` key of the schema's items.
"""

from __future__ import annotations

from typing import Any

from . import constants
from .operations import Parameter, Position, Schema
from .query_errors import _enum_list, _items_type_position, _schema_position
from .validation_errors import (
    HOW_TO_FIX_INVALID_ENCODING,
    HOW_TO_FIX_MISSING_VALUE,
    HOW_TO_FIX_PARAM_INVALID_BOOLEAN,
    HOW_TO_FIX_PARAM_INVALID_ENUM,
    HOW_TO_FIX_PARAM_INVALID_NUMBER,
    ValidationError,
)


def _error(
    sub_type: str,
    message: str,
    reason: str,
    position: Position,
    how_to_fix: str,
    context: Any = None,
) -> ValidationError:
    return ValidationError(
        validation_type=constants.PARAMETER_VALIDATION,
        validation_sub_type=sub_type,
        message=message,
        reason=reason,
        spec_line=position.line,
        spec_col=position.column,
        context=context,
        how_to_fix=how_to_fix,
    )


def _missing(sub_type: str, label: str, param: Parameter) -> ValidationError:
    return _error(
        sub_type,
        f"{label.capitalize()} parameter '{param.name}' is missing",
        f"The {label} parameter '{param.name}' is defined as being required, "
        "however it's missing from the requests",
        param.position("required"),
        HOW_TO_FIX_MISSING_VALUE,
    )


def _not_number(sub_type: str, label: str, param: Parameter, value: str, schema: Schema) -> ValidationError:
    return _error(
        sub_type,
        f"{label.capitalize()} parameter '{param.name}' is not a valid number",
        f"The {label} parameter '{param.name}' is defined as being a number, "
        f"however the value '{value}' is not a valid number",
        param.position("schema"),
        HOW_TO_FIX_PARAM_INVALID_NUMBER.format(value),
        schema,
    )


def _not_bool(sub_type: str, label: str, param: Parameter, value: str, schema: Schema) -> ValidationError:
    return _error(
        sub_type,
        f"{label.capitalize()} parameter '{param.name}' is not a valid boolean",
        f"The {label} parameter '{param.name}' is defined as being a boolean, "
        f"however the value '{value}' is not a valid boolean",
        param.position("schema"),
        HOW_TO_FIX_PARAM_INVALID_BOOLEAN.format(value),
        schema,
    )


def _bad_enum(
    sub_type: str, label: str, param: Parameter, value: str, schema: Schema, set_via: str
) -> ValidationError:
    return _error(
        sub_type,
        f"{label.capitalize()} parameter '{param.name}' does not match allowed values",
        f"The {label} parameter '{param.name}' has pre-defined "
        f"values {set_via} an enum. The value '{value}' is not one of those values.",
        _schema_position(param.schema, "enum"),
        HOW_TO_FIX_PARAM_INVALID_ENUM.format(value, _enum_list(schema.enum)),
        schema,
    )


def _array_not_bool(
    sub_type: str, label: str, param: Parameter, item: str, schema: Schema,
    items_schema: Schema, detail: str,
) -> ValidationError:
    return _error(
        sub_type,
        f"{label.capitalize()} array parameter '{param.name}' is not a valid boolean",
        f"The {label} parameter (which is an array) '{param.name}' is defined as being a boolean, "
        f"however the value '{item}' is not a valid {detail}",
        _items_type_position(schema),
        HOW_TO_FIX_PARAM_INVALID_BOOLEAN.format(item),
        items_schema,
    )


def _array_not_number(
    sub_type: str, label: str, param: Parameter, item: str, schema: Schema, items_schema: Schema
) -> ValidationError:
    return _error(
        sub_type,
        f"{label.capitalize()} array parameter '{param.name}' is not a valid number",
        f"The {label} parameter (which is an array) '{param.name}' is defined as being a number, "
        f"however the value '{item}' is not a valid number",
        _items_type_position(schema),
        HOW_TO_FIX_PARAM_INVALID_NUMBER.format(item),
        items_schema,
    )


_HEADER = constants.PARAMETER_VALIDATION_HEADER
_COOKIE = constants.PARAMETER_VALIDATION_COOKIE
_PATH = constants.PARAMETER_VALIDATION_PATH


def header_parameter_missing(param: Parameter) -> ValidationError:
    """Report a required header that was not sent."""
    return _missing(_HEADER, "header", param)


def header_parameter_cannot_be_decoded(param: Parameter, value: str) -> ValidationError:
    """Report a header value that cannot be decoded into an object."""
    line = _schema_position(param.schema, "type").line
    return ValidationError(
        validation_type=constants.PARAMETER_VALIDATION,
        validation_sub_type=_HEADER,
        message=f"Header parameter '{param.name}' cannot be decoded",
        reason=(
            f"The header parameter '{param.name}' cannot be "
            f"extracted into an object, '{value}' is malformed"
        ),
        spec_line=line,
        spec_col=line,
        how_to_fix=HOW_TO_FIX_INVALID_ENCODING,
    )


def incorrect_header_param_enum(param: Parameter, value: str, schema: Schema) -> ValidationError:
    """Report a header value that is not among the schema's enum values."""
    return _bad_enum(_HEADER, "header", param, value, schema, "set via")


def invalid_header_param_number(param: Parameter, value: str, schema: Schema) -> ValidationError:
    """Report a header value that should be a number but is not."""
    return _not_number(_HEADER, "header", param, value, schema)


def incorrect_header_param_bool(param: Parameter, value: str, schema: Schema) -> ValidationError:
    """Report a header value that should be a boolean but is not."""
    return _not_bool(_HEADER, "header", param, value, schema)


def incorrect_header_param_array_boolean(
    param: Parameter, item: str, schema: Schema, items_schema: Schema
) -> ValidationError:
    """Report a header array item that should be a boolean but is not."""
    return _array_not_bool(_HEADER, "header", param, item, schema, items_schema, "true/false value")


def incorrect_header_param_array_number(
    param: Parameter, item: str, schema: Schema, items_schema: Schema
) -> ValidationError:
    """Report a header array item that should be a number but is not."""
    return _array_not_number(_HEADER, "header", param, item, schema, items_schema)


def incorrect_cookie_param_array_boolean(
    param: Parameter, item: str, schema: Schema, items_schema: Schema
) -> ValidationError:
    """Report a cookie array item that should be a boolean but is not."""
    return _array_not_bool(_COOKIE, "cookie", param, item, schema, items_schema, "true/false value")


def incorrect_cookie_param_array_number(
    param: Parameter, item: str, schema: Schema, items_schema: Schema
) -> ValidationError:
    """Report a cookie array item that should be a number but is not."""
    return _array_not_number(_COOKIE, "cookie", param, item, schema, items_schema)


def invalid_cookie_param_number(param: Parameter, value: str, schema: Schema) -> ValidationError:
    """Report a cookie value that should be a number but is not."""
    return _not_number(_COOKIE, "cookie", param, value, schema)


def incorrect_cookie_param_bool(param: Parameter, value: str, schema: Schema) -> ValidationError:
    """Report a cookie value that should be a boolean but is not."""
    return _not_bool(_COOKIE, "cookie", param, value, schema)


def incorrect_cookie_param_enum(param: Parameter, value: str, schema: Schema) -> ValidationError:
    """Report a cookie value that is not among the schema's enum values."""
    return _bad_enum(_COOKIE, "cookie", param, value, schema, "set via")


def incorrect_path_param_bool(param: Parameter, item: str, schema: Schema) -> ValidationError:
    """Report a path value that should be a boolean but is not."""
    return _not_bool(_PATH, "path", param, item, schema)


def incorrect_path_param_enum(param: Parameter, value: str, schema: Schema) -> ValidationError:
    """Report a path value that is not among the schema's enum values."""
    return _bad_enum(_PATH, "path", param, value, schema, "setvia")


def incorrect_path_param_number(param: Parameter, item: str, schema: Schema) -> ValidationError:
    """Report a path value that should be a number but is not."""
    return _not_number(_PATH, "path", param, item, schema)


def incorrect_path_param_array_number(
    param: Parameter, item: str, schema: Schema, items_schema: Schema
) -> ValidationError:
    """Report a path array item that should be a number but is not."""
    return _array_not_number(_PATH, "path", param, item, schema, items_schema)


def incorrect_path_param_array_boolean(
    param: Parameter, item: str, schema: Schema, items_schema: Schema
) -> ValidationError:
    """Report a path array item that should be a boolean but is not."""
    return _array_not_bool(_PATH, "path", param, item, schema, items_schema, "boolean")