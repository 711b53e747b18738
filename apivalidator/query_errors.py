"""Errors for query parameters that do not match their definition.

Positions come from the model's recorded key positions. The position of a
parameter's ``application/json`` content entry is read from that media type
under the key ``"key"``.
"""

from __future__ import annotations

from typing import Any, Optional
from urllib.parse import quote_plus

from . import constants
from .encoding import (
    QueryParam,
    collapse_csv_into_form_style,
    collapse_csv_into_pipe_delimited_style,
    collapse_csv_into_space_delimited_style,
)
from .operations import Parameter, Position, Schema
from .validation_errors import (
    HOW_TO_FIX_INVALID_JSON,
    HOW_TO_FIX_MISSING_VALUE,
    HOW_TO_FIX_PARAM_INVALID_BOOLEAN,
    HOW_TO_FIX_PARAM_INVALID_DEEP_OBJECT_MULTIPLE_VALUES,
    HOW_TO_FIX_PARAM_INVALID_ENUM,
    HOW_TO_FIX_PARAM_INVALID_FORM_ENCODE,
    HOW_TO_FIX_PARAM_INVALID_NUMBER,
    HOW_TO_FIX_PARAM_INVALID_PIPE_DELIMITED_OBJECT_EXPLODE,
    HOW_TO_FIX_PARAM_INVALID_SPACE_DELIMITED_OBJECT_EXPLODE,
    HOW_TO_FIX_RESERVED_VALUES,
    ValidationError,
)

_OWN_KEY = "key"


def _format_enum_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def _enum_list(values: Optional[list[Any]]) -> str:
    return ", ".join(_format_enum_value(v) for v in values or [])


def _schema_position(schema: Optional[Schema], key: str) -> Position:
    return schema.position(key) if schema is not None else Position()


def _items_type_position(schema: Optional[Schema]) -> Position:
    items = schema.items if schema is not None else None
    return _schema_position(items, "type")


def _query_error(
    param: Parameter,
    message: str,
    reason: str,
    position: Position,
    how_to_fix: str,
    context: Any = None,
) -> ValidationError:
    return ValidationError(
        validation_type=constants.PARAMETER_VALIDATION,
        validation_sub_type=constants.PARAMETER_VALIDATION_QUERY,
        message=message,
        reason=reason,
        spec_line=position.line,
        spec_col=position.column,
        context=context,
        how_to_fix=how_to_fix,
    )


def incorrect_form_encoding(param: Parameter, query_param: QueryParam, index: int) -> ValidationError:
    """Report a form-style value packed with commas instead of being exploded."""
    value = query_param.values[index]
    return _query_error(
        param,
        f"Query parameter '{param.name}' is not exploded correctly",
        f"The query parameter '{param.name}' has a default or 'form' encoding defined, "
        f"however the value '{value}' is encoded as an object or an array using commas. "
        "The contract defines the explode value to set to 'true'",
        param.position("explode"),
        HOW_TO_FIX_PARAM_INVALID_FORM_ENCODE.format(
            collapse_csv_into_form_style(param.name, value)
        ),
        param,
    )


def incorrect_space_delimiting(param: Parameter, query_param: QueryParam) -> ValidationError:
    """Report several values where one space-delimited value was expected."""
    return _query_error(
        param,
        f"Query parameter '{param.name}' delimited incorrectly",
        f"The query parameter '{param.name}' has 'spaceDelimited' style defined, "
        f"and explode is defined as false. There are multiple values ({len(query_param.values)}) "
        "supplied, instead of a single space delimited value",
        param.position("style"),
        HOW_TO_FIX_PARAM_INVALID_SPACE_DELIMITED_OBJECT_EXPLODE.format(
            collapse_csv_into_space_delimited_style(param.name, query_param.values)
        ),
        param,
    )


def incorrect_pipe_delimiting(param: Parameter, query_param: QueryParam) -> ValidationError:
    """Report several values where one pipe-delimited value was expected."""
    return _query_error(
        param,
        f"Query parameter '{param.name}' delimited incorrectly",
        f"The query parameter '{param.name}' has 'pipeDelimited' style defined, "
        f"and explode is defined as false. There are multiple values ({len(query_param.values)}) "
        "supplied, instead of a single space delimited value",
        param.position("style"),
        HOW_TO_FIX_PARAM_INVALID_PIPE_DELIMITED_OBJECT_EXPLODE.format(
            collapse_csv_into_pipe_delimited_style(param.name, query_param.values)
        ),
        param,
    )


def invalid_deep_object(param: Parameter, query_param: QueryParam) -> ValidationError:
    """Report a deepObject property given more than one value."""
    return _query_error(
        param,
        f"Query parameter '{param.name}' is not a valid deepObject",
        f"The query parameter '{param.name}' has the 'deepObject' style defined, "
        f"There are multiple values ({len(query_param.values)}) supplied, instead of a single value",
        param.position("style"),
        HOW_TO_FIX_PARAM_INVALID_DEEP_OBJECT_MULTIPLE_VALUES.format(
            collapse_csv_into_pipe_delimited_style(param.name, query_param.values)
        ),
        param,
    )


def query_parameter_missing(param: Parameter) -> ValidationError:
    """Report a required query parameter that was not sent."""
    return _query_error(
        param,
        f"Query parameter '{param.name}' is missing",
        f"The query parameter '{param.name}' is defined as being required, "
        "however it's missing from the requests",
        param.position("required"),
        HOW_TO_FIX_MISSING_VALUE,
    )


def incorrect_query_param_array_boolean(
    param: Parameter, item: str, schema: Schema, items_schema: Schema
) -> ValidationError:
    """Report an array item that should be a boolean but is not."""
    return _query_error(
        param,
        f"Query array parameter '{param.name}' is not a valid boolean",
        f"The query parameter (which is an array) '{param.name}' is defined as being a boolean, "
        f"however the value '{item}' is not a valid true/false value",
        _items_type_position(schema),
        HOW_TO_FIX_PARAM_INVALID_BOOLEAN.format(item),
        items_schema,
    )


def incorrect_query_param_array_number(
    param: Parameter, item: str, schema: Schema, items_schema: Schema
) -> ValidationError:
    """Report an array item that should be a number but is not."""
    return _query_error(
        param,
        f"Query array parameter '{param.name}' is not a valid number",
        f"The query parameter (which is an array) '{param.name}' is defined as being a number, "
        f"however the value '{item}' is not a valid number",
        _items_type_position(schema),
        HOW_TO_FIX_PARAM_INVALID_NUMBER.format(item),
        items_schema,
    )


def incorrect_param_encoding_json(param: Parameter, value: str, schema: Schema) -> ValidationError:
    """Report a JSON-encoded query parameter whose value is not valid JSON."""
    media = param.content.get(constants.JSON_CONTENT_TYPE)
    position = media.position(_OWN_KEY) if media is not None else Position()
    return _query_error(
        param,
        f"Query parameter '{param.name}' is not valid JSON",
        f"The query parameter '{param.name}' is defined as being a JSON object, "
        f"however the value '{value}' is not valid JSON",
        position,
        HOW_TO_FIX_INVALID_JSON,
        schema,
    )


def incorrect_query_param_bool(param: Parameter, value: str, schema: Schema) -> ValidationError:
    """Report a query value that should be a boolean but is not."""
    return _query_error(
        param,
        f"Query parameter '{param.name}' is not a valid boolean",
        f"The query parameter '{param.name}' is defined as being a boolean, "
        f"however the value '{value}' is not a valid boolean",
        param.position("schema"),
        HOW_TO_FIX_PARAM_INVALID_BOOLEAN.format(value),
        schema,
    )


def invalid_query_param_number(param: Parameter, value: str, schema: Schema) -> ValidationError:
    """Report a query value that should be a number but is not."""
    return _query_error(
        param,
        f"Query parameter '{param.name}' is not a valid number",
        f"The query parameter '{param.name}' is defined as being a number, "
        f"however the value '{value}' is not a valid number",
        param.position("schema"),
        HOW_TO_FIX_PARAM_INVALID_NUMBER.format(value),
        schema,
    )


def incorrect_query_param_enum(param: Parameter, value: str, schema: Schema) -> ValidationError:
    """Report a query value that is not among the schema's enum values."""
    return _query_error(
        param,
        f"Query parameter '{param.name}' does not match allowed values",
        f"The query parameter '{param.name}' has pre-defined "
        f"values set via an enum. The value '{value}' is not one of those values.",
        _schema_position(param.schema, "enum"),
        HOW_TO_FIX_PARAM_INVALID_ENUM.format(value, _enum_list(schema.enum)),
        schema,
    )


def incorrect_query_param_enum_array(param: Parameter, value: str, schema: Schema) -> ValidationError:
    """Report a query array item that is not among the item schema's enum values."""
    items = param.schema.items if param.schema is not None else None
    allowed = _enum_list(items.enum if items is not None else None)
    position = _schema_position(items, "enum")
    return ValidationError(
        validation_type=constants.PARAMETER_VALIDATION,
        validation_sub_type=constants.PARAMETER_VALIDATION_QUERY,
        message=f"Query array parameter '{param.name}' does not match allowed values",
        reason=(
            f"The query array parameter '{param.name}' has pre-defined "
            f"values set via an enum. The value '{value}' is not one of those values."
        ),
        spec_line=position.line,
        spec_col=position.line,
        context=schema,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_ENUM.format(value, allowed),
    )


def incorrect_reserved_values(param: Parameter, value: str, schema: Schema) -> ValidationError:
    """Report a query value holding reserved characters that were not encoded."""
    return _query_error(
        param,
        f"Query parameter '{param.name}' value contains reserved values",
        f"The query parameter '{param.name}' has 'allowReserved' set to false, "
        f"however the value '{value}' contains one of the following characters: "
        ":/?#[]@!$&'()*+,;=",
        param.position("schema"),
        HOW_TO_FIX_RESERVED_VALUES.format(quote_plus(value, safe="")),
        schema,
    )