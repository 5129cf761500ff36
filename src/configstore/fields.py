from __future__ import annotations

import dataclasses
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

from configstore.errors import MissingEnvKeyError, SchemaError, UnsupportedTypeError

ENV_KEY = "env"
DEFAULT_KEY = "default"
SECRET_KEY = "secret"


class FieldKind(str, Enum):
    INT = "int"
    BOOL = "bool"
    STR = "str"
    STRINGS = "list[str]"
    INT_MAP = "dict[str, int]"


ZERO_FACTORIES: Dict[FieldKind, Callable[[], Any]] = {
    FieldKind.INT: int,
    FieldKind.BOOL: bool,
    FieldKind.STR: str,
    FieldKind.STRINGS: list,
    FieldKind.INT_MAP: dict,
}


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    name: str
    kind: FieldKind
    env: str
    default: str
    secret: bool


def env_field(env: str, *, default: Optional[str] = None, secret: bool = False) -> Any:
    """
    Declare a record field bound to an environment variable.

    `default` is the raw literal used when the variable is unset; it is parsed the
    same way an environment value would be. Use together with `configclass` so the
    field starts out at the zero value of its annotated type.
    """
    if default is not None and not isinstance(default, str):
        raise SchemaError(f"Default for {env} must be a string literal, got {type(default).__name__}")
    metadata: Dict[str, str] = {ENV_KEY: env}
    if default is not None:
        metadata[DEFAULT_KEY] = default
    if secret:
        metadata[SECRET_KEY] = "true"
    return dataclasses.field(metadata=metadata)


def configclass(cls: type) -> type:
    """Turn `cls` into a dataclass whose env fields default to their type's zero value."""
    hints = typing.get_type_hints(cls)
    for name, annotation in hints.items():
        declared = cls.__dict__.get(name)
        if not isinstance(declared, dataclasses.Field):
            continue
        if declared.default is not dataclasses.MISSING or declared.default_factory is not dataclasses.MISSING:
            continue
        kind = kind_of(name, annotation)
        setattr(
            cls,
            name,
            dataclasses.field(default_factory=ZERO_FACTORIES[kind], metadata=dict(declared.metadata)),
        )
    return dataclass(cls)


def kind_of(name: str, annotation: Any) -> FieldKind:
    # bool first: it is a subclass of int
    if annotation is bool:
        return FieldKind.BOOL
    if annotation is int:
        return FieldKind.INT
    if annotation is str:
        return FieldKind.STR

    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)
    if origin is list and args == (str,):
        return FieldKind.STRINGS
    if origin is dict and args == (str, int):
        return FieldKind.INT_MAP
    raise UnsupportedTypeError(name, annotation)


def is_secret(metadata: Mapping[str, Any]) -> bool:
    """A field is secret when its `secret` marker equals "true", ignoring case."""
    return str(metadata.get(SECRET_KEY, "")).lower() == "true"


def describe(record: Any) -> List[FieldDescriptor]:
    """
    Return one descriptor per field of `record`, in declaration order.

    `record` may be a dataclass instance or the dataclass itself. Descriptors are
    rebuilt on every call.
    """
    if not dataclasses.is_dataclass(record):
        raise SchemaError(f"Configuration records must be dataclasses, got {type(record).__name__}")
    record_type = record if isinstance(record, type) else type(record)
    hints = typing.get_type_hints(record_type)

    descriptors: List[FieldDescriptor] = []
    for f in dataclasses.fields(record_type):
        env = f.metadata.get(ENV_KEY)
        if not env:
            raise MissingEnvKeyError(f.name)
        default = f.metadata.get(DEFAULT_KEY, "")
        if default is None:
            default = ""
        if not isinstance(default, str):
            raise SchemaError(
                f"Default for {env} must be a string literal, got {type(default).__name__}"
            )
        descriptors.append(
            FieldDescriptor(
                name=f.name,
                kind=kind_of(f.name, hints.get(f.name, f.type)),
                env=env,
                default=default,
                secret=is_secret(f.metadata),
            )
        )
    return descriptors
