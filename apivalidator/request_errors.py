"""Errors for requests and responses that do not fit the operation they target.

Positions are read from the model's recorded key positions. A path item's own
key (the path template) is looked up under the key ``"key"``.
"""

from __future__ import annotations

from . import constants
from .operations import HttpResponse, Operation, PathItem, Request, extract_content_type
from .validation_errors import (
    HOW_TO_FIX_INVALID_CONTENT_TYPE,
    HOW_TO_FIX_INVALID_RESPONSE_CODE,
    HOW_TO_FIX_PATH_METHOD,
    ValidationError,
)

_OWN_KEY = "key"


def request_content_type_not_found(operation: Operation, request: Request) -> ValidationError:
    """Report a request body whose content type the operation does not define."""
    content_type = request.headers.get(constants.CONTENT_TYPE_HEADER, "")
    body = operation.request_body
    content = body.content if body is not None else {}
    position = body.position("content") if body is not None else operation.position("requestBody")
    return ValidationError(
        validation_type=constants.REQUEST_BODY_VALIDATION,
        validation_sub_type=constants.REQUEST_BODY_CONTENT_TYPE,
        message=(
            f"{request.method} operation request content type '{content_type}' does not exist"
        ),
        reason=(
            f"The content type '{content_type}' of the {request.method} request submitted has not "
            "been defined, it's an unknown type"
        ),
        spec_line=position.line,
        spec_col=position.column,
        context=operation,
        how_to_fix=HOW_TO_FIX_INVALID_CONTENT_TYPE.format(len(content), ", ".join(content)),
    )


def operation_not_found(path_item: PathItem, request: Request, method: str) -> ValidationError:
    """Report a path that exists but has no operation for the request method."""
    position = path_item.position(_OWN_KEY)
    return ValidationError(
        validation_type=constants.REQUEST_VALIDATION,
        validation_sub_type=constants.REQUEST_MISSING_OPERATION,
        message=f"{request.method} operation request content type '{method}' does not exist",
        reason=(
            f"The path was found, but there was no '{request.method}' method found in the spec"
        ),
        spec_line=position.line,
        spec_col=position.column,
        context=path_item,
        how_to_fix=HOW_TO_FIX_PATH_METHOD,
    )


def response_content_type_not_found(
    operation: Operation,
    request: Request,
    response: HttpResponse,
    code: str,
    is_default: bool,
) -> ValidationError:
    """Report a response whose content type is not defined for its status code.

    With ``is_default`` the operation's default response is consulted instead of
    the one for ``code``; a missing code raises KeyError.
    """
    media_type, _, _ = extract_content_type(
        response.headers.get(constants.CONTENT_TYPE_HEADER, "")
    )
    responses = operation.responses
    if responses is None:
        raise ValueError("operation defines no responses")
    if is_default:
        spec_response = responses.default
        if spec_response is None:
            raise ValueError("operation defines no default response")
    else:
        spec_response = responses.codes[code]
    content = spec_response.content
    position = spec_response.position("content")
    return ValidationError(
        validation_type=constants.RESPONSE_BODY_VALIDATION,
        validation_sub_type=constants.REQUEST_BODY_CONTENT_TYPE,
        message=(
            f"{request.method} / {code} operation response content type "
            f"'{media_type}' does not exist"
        ),
        reason=(
            f"The content type '{media_type}' of the {request.method} response received has not "
            "been defined, it's an unknown type"
        ),
        spec_line=position.line,
        spec_col=position.column,
        context=operation,
        how_to_fix=HOW_TO_FIX_INVALID_CONTENT_TYPE.format(len(content), ", ".join(content)),
    )


def response_code_not_found(operation: Operation, request: Request, code: int) -> ValidationError:
    """Report a response status code the operation does not define."""
    position = operation.position("responses")
    return ValidationError(
        validation_type=constants.RESPONSE_BODY_VALIDATION,
        validation_sub_type=constants.RESPONSE_BODY_RESPONSE_CODE,
        message=f"{request.method} operation request response code '{code}' does not exist",
        reason=(
            f"The reponse code '{code}' of the {request.method} request submitted has not "
            "been defined, it's an unknown type"
        ),
        spec_line=position.line,
        spec_col=position.column,
        context=operation,
        how_to_fix=HOW_TO_FIX_INVALID_RESPONSE_CODE,
    )