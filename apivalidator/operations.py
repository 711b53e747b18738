"""A small OpenAPI document model, HTTP message types and operation lookups."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from . import constants


@dataclass(frozen=True)
class Position:
    """A line and column inside the specification source (0 when unknown)."""

    line: int = 0
    column: int = 0


@dataclass(kw_only=True)
class Located:
    """Base for model objects that remember where their keys sit in the spec."""

    positions: dict[str, Position] = field(default_factory=dict)

    def position(self, key: str) -> Position:
        """Return the position of ``key``, or an empty position if it is unknown."""
        return self.positions.get(key, Position())


@dataclass(kw_only=True)
class Schema(Located):
    type: list[str] = field(default_factory=list)
    enum: Optional[list[Any]] = None
    items: Optional[Schema] = None
    additional_properties: Union[Schema, bool, None] = None
    properties: dict[str, Schema] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)


@dataclass(kw_only=True)
class MediaType(Located):
    schema: Optional[Schema] = None


@dataclass(kw_only=True)
class Parameter(Located):
    name: str = ""
    location: str = ""
    required: Optional[bool] = None
    style: str = ""
    explode: Optional[bool] = None
    allow_reserved: bool = False
    schema: Optional[Schema] = None
    content: dict[str, MediaType] = field(default_factory=dict)


@dataclass(kw_only=True)
class RequestBody(Located):
    content: dict[str, MediaType] = field(default_factory=dict)
    required: Optional[bool] = None


@dataclass(kw_only=True)
class Response(Located):
    content: dict[str, MediaType] = field(default_factory=dict)


@dataclass(kw_only=True)
class Responses(Located):
    codes: dict[str, Response] = field(default_factory=dict)
    default: Optional[Response] = None


@dataclass(kw_only=True)
class Operation(Located):
    operation_id: str = ""
    parameters: list[Parameter] = field(default_factory=list)
    security: list[dict[str, list[str]]] = field(default_factory=list)
    request_body: Optional[RequestBody] = None
    responses: Optional[Responses] = None


@dataclass(kw_only=True)
class PathItem(Located):
    parameters: list[Parameter] = field(default_factory=list)
    get: Optional[Operation] = None
    post: Optional[Operation] = None
    put: Optional[Operation] = None
    delete: Optional[Operation] = None
    options: Optional[Operation] = None
    head: Optional[Operation] = None
    patch: Optional[Operation] = None
    trace: Optional[Operation] = None


class _Headers(MutableMapping):
    """A header mapping whose keys compare without regard to case."""

    def __init__(self, items: Optional[Mapping[str, str]] = None) -> None:
        self._data: dict[str, tuple[str, str]] = {}
        if items:
            self.update(items)

    def __getitem__(self, key: str) -> str:
        return self._data[key.lower()][1]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key.lower()] = (key, value)

    def __delitem__(self, key: str) -> None:
        folded = key.lower()
        if folded not in self._data:
            raise KeyError(key)
        self._data.pop(folded)

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._data.values())

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return repr(dict(self.items()))


@dataclass(kw_only=True)
class Request:
    """An incoming HTTP request."""

    method: str = "GET"
    path: str = "/"
    headers: MutableMapping[str, str] = field(default_factory=_Headers)
    cookies: dict[str, str] = field(default_factory=dict)
    query: dict[str, list[str]] = field(default_factory=dict)
    body: Optional[bytes] = None

    def __post_init__(self) -> None:
        if not isinstance(self.headers, _Headers):
            self.headers = _Headers(self.headers)


@dataclass(kw_only=True)
class HttpResponse:
    """An outgoing HTTP response."""

    status_code: int = 200
    headers: MutableMapping[str, str] = field(default_factory=_Headers)
    body: Optional[bytes] = None

    def __post_init__(self) -> None:
        if not isinstance(self.headers, _Headers):
            self.headers = _Headers(self.headers)


_METHOD_ATTRIBUTES = {
    "GET": "get",
    "POST": "post",
    "PUT": "put",
    "DELETE": "delete",
    "OPTIONS": "options",
    "HEAD": "head",
    "PATCH": "patch",
    "TRACE": "trace",
}


def extract_operation(request: Request, item: PathItem) -> Optional[Operation]:
    """Return the operation of ``item`` matching the request method, or None."""
    attribute = _METHOD_ATTRIBUTES.get(request.method)
    if attribute is None:
        return None
    return getattr(item, attribute)


def extract_content_type(content_type: str) -> tuple[str, str, str]:
    """Split a Content-Type value into (media type, charset, boundary)."""
    charset = ""
    boundary = ""
    if constants.SEMICOLON not in content_type:
        return content_type.strip(), charset, boundary
    media_type, *parameters = content_type.split(constants.SEMICOLON)
    for parameter in parameters:
        pieces = parameter.split(constants.EQUALS)
        if len(pieces) != 2:
            continue
        name = pieces[0].lower().strip()
        if name == constants.CHARSET:
            charset = pieces[1].strip()
        if name == constants.BOUNDARY:
            boundary = pieces[1].strip()
    return media_type.strip(), charset, boundary


def extract_params_for_operation(request: Request, item: PathItem) -> list[Parameter]:
    """Return the path-level parameters followed by those of the matching operation."""
    params = list(item.parameters)
    operation = extract_operation(request, item)
    if operation is not None:
        params.extend(operation.parameters)
    return params


def extract_security_for_operation(request: Request, item: PathItem) -> list[dict[str, list[str]]]:
    """Return the security requirements of the operation matching the request method."""
    operation = extract_operation(request, item)
    if operation is None:
        return []
    return list(operation.security)