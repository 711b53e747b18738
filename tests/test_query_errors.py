import pytest

from apivalidator import constants
from apivalidator.encoding import (
    QueryParam,
    collapse_csv_into_form_style,
    collapse_csv_into_pipe_delimited_style,
    collapse_csv_into_space_delimited_style,
)
from apivalidator.operations import MediaType, Parameter, Position, Schema
from apivalidator.query_errors import (
    incorrect_form_encoding,
    incorrect_param_encoding_json,
    incorrect_pipe_delimiting,
    incorrect_query_param_array_boolean,
    incorrect_query_param_array_number,
    incorrect_query_param_bool,
    incorrect_query_param_enum,
    incorrect_query_param_enum_array,
    incorrect_reserved_values,
    incorrect_space_delimiting,
    invalid_deep_object,
    invalid_query_param_number,
    query_parameter_missing,
)
from apivalidator.validation_errors import (
    HOW_TO_FIX_INVALID_JSON,
    HOW_TO_FIX_MISSING_VALUE,
    HOW_TO_FIX_PARAM_INVALID_BOOLEAN,
    HOW_TO_FIX_PARAM_INVALID_DEEP_OBJECT_MULTIPLE_VALUES,
    HOW_TO_FIX_PARAM_INVALID_ENUM,
    HOW_TO_FIX_PARAM_INVALID_FORM_ENCODE,
    HOW_TO_FIX_PARAM_INVALID_NUMBER,
    HOW_TO_FIX_PARAM_INVALID_PIPE_DELIMITED_OBJECT_EXPLODE,
    HOW_TO_FIX_PARAM_INVALID_SPACE_DELIMITED_OBJECT_EXPLODE,
    ValidationError,
)


def _param(schema=None, **kwargs):
    positions = {
        "explode": Position(3, 4),
        "style": Position(5, 6),
        "required": Position(7, 8),
        "schema": Position(9, 10),
    }
    return Parameter(
        name="fishy",
        location="query",
        schema=schema,
        positions=positions,
        **kwargs,
    )


def _assert_query(err):
    assert isinstance(err, ValidationError)
    assert err.validation_type == constants.PARAMETER_VALIDATION
    assert err.validation_sub_type == constants.PARAMETER_VALIDATION_QUERY


def test_incorrect_form_encoding():
    param = _param()
    qp = QueryParam(key="fishy", values=["cod", "a,b"])
    err = incorrect_form_encoding(param, qp, 1)
    _assert_query(err)
    assert "'fishy'" in err.message
    assert "'a,b'" in err.reason
    assert (err.spec_line, err.spec_col) == (3, 4)
    assert err.context is param
    assert err.how_to_fix == HOW_TO_FIX_PARAM_INVALID_FORM_ENCODE.format(
        collapse_csv_into_form_style("fishy", "a,b")
    )
    assert "&fishy=a&fishy=b" in err.how_to_fix


def test_incorrect_space_delimiting():
    param = _param()
    qp = QueryParam(key="fishy", values=["a", "b", "c"])
    err = incorrect_space_delimiting(param, qp)
    _assert_query(err)
    assert "(3)" in err.reason
    assert "spaceDelimited" in err.reason
    assert (err.spec_line, err.spec_col) == (5, 6)
    assert err.how_to_fix == HOW_TO_FIX_PARAM_INVALID_SPACE_DELIMITED_OBJECT_EXPLODE.format(
        collapse_csv_into_space_delimited_style("fishy", qp.values)
    )


def test_incorrect_pipe_delimiting():
    param = _param()
    qp = QueryParam(key="fishy", values=["a", "b"])
    err = incorrect_pipe_delimiting(param, qp)
    _assert_query(err)
    assert "pipeDelimited" in err.reason
    assert "(2)" in err.reason
    assert err.how_to_fix == HOW_TO_FIX_PARAM_INVALID_PIPE_DELIMITED_OBJECT_EXPLODE.format(
        collapse_csv_into_pipe_delimited_style("fishy", qp.values)
    )
    assert err.context is param


def test_invalid_deep_object():
    param = _param()
    qp = QueryParam(key="fishy", values=["x", "y"], property="fin")
    err = invalid_deep_object(param, qp)
    _assert_query(err)
    assert "deepObject" in err.message
    assert (err.spec_line, err.spec_col) == (5, 6)
    assert err.how_to_fix == HOW_TO_FIX_PARAM_INVALID_DEEP_OBJECT_MULTIPLE_VALUES.format(
        collapse_csv_into_pipe_delimited_style("fishy", qp.values)
    )


def test_query_parameter_missing():
    param = _param()
    err = query_parameter_missing(param)
    _assert_query(err)
    assert err.message.endswith("is missing")
    assert err.how_to_fix == HOW_TO_FIX_MISSING_VALUE
    assert (err.spec_line, err.spec_col) == (7, 8)
    assert err.context is None


def test_array_boolean_and_number():
    items = Schema(type=["boolean"], positions={"type": Position(12, 14)})
    schema = Schema(type=["array"], items=items)
    param = _param(schema)
    b = incorrect_query_param_array_boolean(param, "nope", schema, items)
    n = incorrect_query_param_array_number(param, "nope", schema, items)
    for err in (b, n):
        _assert_query(err)
        assert (err.spec_line, err.spec_col) == (12, 14)
        assert err.context is items
    assert b.how_to_fix == HOW_TO_FIX_PARAM_INVALID_BOOLEAN.format("nope")
    assert n.how_to_fix == HOW_TO_FIX_PARAM_INVALID_NUMBER.format("nope")


def test_param_encoding_json():
    media = MediaType(positions={"key": Position(20, 2)})
    schema = Schema(type=["object"])
    param = _param(schema, content={constants.JSON_CONTENT_TYPE: media})
    err = incorrect_param_encoding_json(param, "{bad", schema)
    _assert_query(err)
    assert err.how_to_fix == HOW_TO_FIX_INVALID_JSON
    assert (err.spec_line, err.spec_col) == (20, 2)
    assert "'{bad'" in err.reason


def test_bool_and_number():
    schema = Schema(type=["number"])
    param = _param(schema)
    b = incorrect_query_param_bool(param, "maybe", schema)
    n = invalid_query_param_number(param, "maybe", schema)
    assert b.how_to_fix == HOW_TO_FIX_PARAM_INVALID_BOOLEAN.format("maybe")
    assert n.how_to_fix == HOW_TO_FIX_PARAM_INVALID_NUMBER.format("maybe")
    for err in (b, n):
        _assert_query(err)
        assert (err.spec_line, err.spec_col) == (9, 10)
        assert err.context is schema


def test_query_param_enum():
    schema = Schema(type=["string"], enum=["beef", "chicken", "pea protein"], positions={"enum": Position(30, 5)})
    param = _param(schema)
    err = incorrect_query_param_enum(param, "milk", schema)
    _assert_query(err)
    assert err.how_to_fix == "Instead of 'milk', use one of the allowed values: 'beef, chicken, pea protein'"
    assert (err.spec_line, err.spec_col) == (30, 5)


def test_query_param_enum_array_uses_item_enum():
    items = Schema(type=["integer"], enum=[1, 2, 99], positions={"enum": Position(40, 9)})
    schema = Schema(type=["array"], items=items)
    param = _param(schema)
    err = incorrect_query_param_enum_array(param, "2500", schema)
    _assert_query(err)
    assert err.how_to_fix == "Instead of '2500', use one of the allowed values: '1, 2, 99'"
    assert err.spec_line == 40
    assert err.spec_col == err.spec_line
    assert "array" in err.message


def test_enum_formats_booleans():
    schema = Schema(type=["boolean"], enum=[True, False])
    param = _param(schema)
    err = incorrect_query_param_enum(param, "x", schema)
    assert err.how_to_fix == HOW_TO_FIX_PARAM_INVALID_ENUM.format("x", "true, false")


@pytest.mark.parametrize("value", ["a/b", "x y", "q?r=s&t"])
def test_reserved_values_are_escaped(value):
    schema = Schema(type=["string"])
    param = _param(schema)
    err = incorrect_reserved_values(param, value, schema)
    _assert_query(err)
    assert "allowReserved" in err.reason
    escaped = err.how_to_fix.split("'")[1]
    for ch in "/?=& ":
        assert ch not in escaped


def test_reserved_values_example():
    schema = Schema(type=["string"])
    err = incorrect_reserved_values(_param(schema), "a/b c", schema)
    assert err.how_to_fix.endswith("'a%2Fb+c'")
    assert (err.spec_line, err.spec_col) == (9, 10)


def test_missing_positions_default_to_zero():
    param = Parameter(name="fishy")
    err = query_parameter_missing(param)
    assert (err.spec_line, err.spec_col) == (0, 0)
    assert "Line:" not in str(err)