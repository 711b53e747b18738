"""Model, parameter decoders and validation errors for checking HTTP traffic against OpenAPI 3 contracts."""

__version__ = "0.1.0"