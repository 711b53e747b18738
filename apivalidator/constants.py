"""Names shared across the validator: validation kinds, encoding styles and delimiters."""

PARAMETER_VALIDATION = "parameter"
PARAMETER_VALIDATION_PATH = "path"
PARAMETER_VALIDATION_QUERY = "query"
PARAMETER_VALIDATION_HEADER = "header"
PARAMETER_VALIDATION_COOKIE = "cookie"
REQUEST_VALIDATION = "request"
REQUEST_BODY_VALIDATION = "requestBody"
SCHEMA = "schema"
RESPONSE_BODY_VALIDATION = "response"
REQUEST_BODY_CONTENT_TYPE = "contentType"
REQUEST_MISSING_OPERATION = "missingOperation"
RESPONSE_BODY_RESPONSE_CODE = "statusCode"
SPACE_DELIMITED = "spaceDelimited"
PIPE_DELIMITED = "pipeDelimited"
DEFAULT_DELIMITED = "default"
MATRIX_STYLE = "matrix"
LABEL_STYLE = "label"
PIPE = "|"
COMMA = ","
SPACE = " "
SEMICOLON = ";"
ASTERISK = "*"
PERIOD = "."
EQUALS = "="
INTEGER = "integer"
NUMBER = "number"
SLASH = "/"
OBJECT = "object"
STRING = "string"
ARRAY = "array"
BOOLEAN = "boolean"
DEEP_OBJECT = "deepObject"
HEADER = "header"
COOKIE = "cookie"
PATH = "path"
FORM = "form"
QUERY = "query"
JSON_CONTENT_TYPE = "application/json"
JSON_TYPE = "json"
CONTENT_TYPE_HEADER = "Content-Type"
AUTHORIZATION_HEADER = "Authorization"
CHARSET = "charset"
BOUNDARY = "boundary"
PREFERRED = "preferred"
FAIL_SEGMENT = "**&&FAIL&&**"