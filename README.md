# apivalidator

Building blocks for checking HTTP traffic against an OpenAPI 3 contract.
It has no dependencies outside the standard library.

## What is in the package

- `apivalidator.constants` – the names used throughout: validation kinds
  (`PARAMETER_VALIDATION`, `REQUEST_BODY_VALIDATION`, ...), encoding styles
  (`SPACE_DELIMITED`, `PIPE_DELIMITED`, `MATRIX_STYLE`, `LABEL_STYLE`,
  `DEEP_OBJECT`, `FORM`) and delimiters.
- `apivalidator.operations` – a small model of the parts of a contract that
  validation needs (`PathItem`, `Operation`, `Parameter`, `Schema`,
  `MediaType`, `RequestBody`, `Response`, `Responses`), plain `Request` and
  `HttpResponse` objects, and lookup helpers.
- `apivalidator.encoding` – decoders for the parameter serialisation styles.
- `apivalidator.validation_errors` – the `ValidationError` and
  `SchemaValidationFailure` types and the `HOW_TO_FIX_*` advice texts.
- `apivalidator.query_errors`, `apivalidator.location_errors`,
  `apivalidator.request_errors` – ready-made constructors for each kind of
  failure.

## The model

Every model class takes keyword arguments only. Each remembers where its keys
sit in the contract through a `positions` dictionary of `Position(line,
column)` values; `obj.position("key")` returns the recorded position, or
`Position(0, 0)` when there is none.

```python
from apivalidator.operations import (
    Operation, Parameter, PathItem, Request, Schema,
    extract_operation, extract_params_for_operation,
)

item = PathItem(
    parameters=[Parameter(name="id", location="path", schema=Schema(type=["integer"]))],
    get=Operation(parameters=[Parameter(name="q", location="query")]),
)
request = Request(method="GET", path="/burgers/1", headers={"content-type": "text/plain"})

extract_operation(request, item) is item.get        # True
[p.name for p in extract_params_for_operation(request, item)]  # ["id", "q"]
request.headers["Content-Type"]                       # "text/plain"
```

`Request` and `HttpResponse` headers compare without regard to case.
`extract_security_for_operation` returns the security requirements of the
operation matching the request method, or an empty list.

## Decoding parameter values

Values from the wire are always strings. `cast_value` turns `"true"` and
`"false"` into booleans, whole numbers into `int`, numbers with a decimal
point into `float`, and leaves anything else a string.

```python
from apivalidator.encoding import (
    cast_value,
    construct_map_from_csv,
    construct_kv_from_csv,
    construct_kv_from_matrix_csv,
    explode_query_value,
)

cast_value("42")        # 42
cast_value("4.2")       # 4.2
cast_value("true")      # True
cast_value("burger")    # "burger"

# simple style, not exploded: key,value,key,value
construct_map_from_csv("pink,true,number,2")
# {"pink": True, "number": 2}

# simple style, exploded: key=value,key=value
construct_kv_from_csv("milk=123,sugar=true")
# {"milk": 123, "sugar": True}

# matrix style, exploded: key=value;key=value
construct_kv_from_matrix_csv("id=1234;vegetarian=false")
# {"id": 1234, "vegetarian": False}

# splitting a query value by its style
explode_query_value("a|b|c", "pipeDelimited")   # ["a", "b", "c"]
explode_query_value("a b c", "spaceDelimited")  # ["a", "b", "c"]
explode_query_value("a,b,c", "form")            # ["a", "b", "c"]
```

`construct_kv_from_label_encoding` does the same for period-separated pairs.

Query parameters that arrive as several key/value pairs are described with
`QueryParam(key, values, property)`.
`construct_param_map_from_deep_object_encoding` builds nested objects from
them (using lists of values when the schema, or its additional properties,
is an array); `construct_param_map_from_pipe_encoding`,
`construct_param_map_from_space_encoding` and
`construct_param_map_from_form_encoding_array` decode the first value of
each as delimited key/value pairs and raise `ValueError` if a key has no
value. `construct_param_map_from_query_param_input` maps each key to the
cast first value.

## Suggesting fixes

When a client encodes a value in the wrong style, the collapse helpers show
what the value should have looked like:

```python
from apivalidator.encoding import (
    collapse_csv_into_form_style,
    collapse_csv_into_pipe_delimited_style,
    collapse_csv_into_space_delimited_style,
    does_form_param_contain_delimiter,
)

does_form_param_contain_delimiter("blue,black", "form")        # True
collapse_csv_into_form_style("color", "blue,black")            # "&color=blue&color=black"
collapse_csv_into_pipe_delimited_style("color", ["a", "b"])    # "color=a|b"
collapse_csv_into_space_delimited_style("color", ["a", "b"])   # "color=a%20b"
```

## Content types

```python
from apivalidator.operations import extract_content_type

extract_content_type("multipart/form-data; charset=utf-8; boundary=xyz")
# ("multipart/form-data", "utf-8", "xyz")
```

## Validation errors

Every failure is a `ValidationError`, which is also an exception. Its
`message` says what went wrong, `reason` explains why, `how_to_fix` suggests
a remedy, `validation_type` and `validation_sub_type` classify it, and
`spec_line` / `spec_col` point at the part of the contract involved.
Failures found while checking a value against a JSON schema are listed as
`SchemaValidationFailure` objects in `schema_validation_errors`.
`str(error)` gives a one-line summary, and `is_path_missing_error()` tells
you whether the error reports a path that was not found.

```python
from apivalidator.operations import Parameter
from apivalidator.location_errors import header_parameter_missing

error = header_parameter_missing(Parameter(name="bash", location="header", required=True))
error.message      # "Header parameter 'bash' is missing"
error.how_to_fix   # "Ensure the value has been set"
```

The constructors are:

- `apivalidator.query_errors`: `incorrect_form_encoding`,
  `incorrect_space_delimiting`, `incorrect_pipe_delimiting`,
  `invalid_deep_object`, `query_parameter_missing`,
  `incorrect_query_param_array_boolean`, `incorrect_query_param_array_number`,
  `incorrect_param_encoding_json`, `incorrect_query_param_bool`,
  `invalid_query_param_number`, `incorrect_query_param_enum`,
  `incorrect_query_param_enum_array`, `incorrect_reserved_values`.
- `apivalidator.location_errors`: header, cookie and path counterparts such
  as `header_parameter_missing`, `header_parameter_cannot_be_decoded`,
  `incorrect_header_param_enum`, `invalid_cookie_param_number`,
  `incorrect_cookie_param_bool`, `incorrect_path_param_number`,
  `incorrect_path_param_enum` and the `*_array_boolean` / `*_array_number`
  variants.
- `apivalidator.request_errors`: `request_content_type_not_found`,
  `operation_not_found`, `response_content_type_not_found` and
  `response_code_not_found`.

## What the package does not do

It does not load or parse OpenAPI documents: the model objects are built by
the caller. It does not match request paths to path templates, and it does
not run the checks themselves – there is no validator that walks a request's
query, header, cookie or path parameters, its body or a response and returns
errors, and no JSON Schema validation. The package supplies the pieces such
a validator is made from: the model, the decoders and the errors.