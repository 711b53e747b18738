import pytest

from apivalidator.operations import (
    HttpResponse,
    Operation,
    Parameter,
    PathItem,
    Position,
    Request,
    Schema,
    extract_content_type,
    extract_operation,
    extract_params_for_operation,
    extract_security_for_operation,
)


@pytest.fixture
def item():
    return PathItem(
        parameters=[Parameter(name="shared", location="path")],
        get=Operation(operation_id="getIt", parameters=[Parameter(name="q", location="query")],
                      security=[{"apiKey": []}]),
        patch=Operation(operation_id="patchIt"),
    )


def test_extract_operation_matches_method(item):
    assert extract_operation(Request(method="GET"), item) is item.get
    assert extract_operation(Request(method="PATCH"), item) is item.patch


def test_extract_operation_missing_or_unknown(item):
    assert extract_operation(Request(method="POST"), item) is None
    assert extract_operation(Request(method="CONNECT"), item) is None


def test_params_path_level_first(item):
    params = extract_params_for_operation(Request(method="GET"), item)
    assert [p.name for p in params] == ["shared", "q"]
    assert len(item.parameters) == 1


def test_params_without_operation(item):
    params = extract_params_for_operation(Request(method="DELETE"), item)
    assert [p.name for p in params] == ["shared"]


def test_security(item):
    assert extract_security_for_operation(Request(method="GET"), item) == [{"apiKey": []}]
    assert extract_security_for_operation(Request(method="PUT"), item) == []


def test_content_type_plain():
    assert extract_content_type("  application/json ") == ("application/json", "", "")


def test_content_type_with_parameters():
    result = extract_content_type("multipart/form-data; Charset=utf-8; boundary=xyz")
    assert result == ("multipart/form-data", "utf-8", "xyz")


def test_content_type_malformed_parameter_ignored():
    assert extract_content_type("text/plain; charset") == ("text/plain", "", "")


def test_position_defaults_when_unknown():
    schema = Schema(type=["string"], positions={"type": Position(3, 7)})
    assert schema.position("type") == Position(3, 7)
    assert schema.position("enum") == Position(0, 0)


def test_headers_case_insensitive():
    request = Request(headers={"Content-Type": "application/json"})
    assert request.headers.get("content-type") == "application/json"
    response = HttpResponse(headers={"x-thing": "a"})
    assert response.headers["X-Thing"] == "a"