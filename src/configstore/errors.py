from __future__ import annotations


class ConfigStoreError(Exception):
    """Base class for every error raised by configstore."""


class SchemaError(ConfigStoreError):
    """The record declaration itself is invalid. Fix the code, not the environment."""


class UnsupportedTypeError(SchemaError):
    def __init__(self, field_name: str, annotation: object):
        self.field_name = field_name
        self.annotation = annotation
        super().__init__(
            f"Field '{field_name}' has unsupported type {annotation!r}. "
            "Supported types are int, bool, str, list[str] and dict[str, int]."
        )


class MissingEnvKeyError(SchemaError):
    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Field '{field_name}' does not declare an 'env' key.")


class ParseError(ConfigStoreError, ValueError):
    """A raw string could not be coerced into the field's declared type."""

    def __init__(self, env_key: str, raw_value: str, expected: str):
        self.env_key = env_key
        self.raw_value = raw_value
        self.expected = expected
        super().__init__(f"Value for {env_key} could not be parsed as {expected}: {raw_value!r}")
