from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Mapping

from configstore.errors import ParseError, UnsupportedTypeError
from configstore.fields import FieldDescriptor, FieldKind

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def resolve_raw(descriptor: FieldDescriptor, environ: Mapping[str, str]) -> str:
    """The env value when the variable is present (even if empty), else the declared default."""
    if descriptor.env in environ:
        return environ[descriptor.env]
    return descriptor.default


def parse_int(env_key: str, raw: str) -> int:
    # int() would also accept whitespace and underscores
    if not _INT_PATTERN.fullmatch(raw):
        raise ParseError(env_key, raw, "an int32")
    value = int(raw)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ParseError(env_key, raw, "an int32")
    return value


def parse_bool(env_key: str, raw: str) -> bool:
    if raw in _TRUE_LITERALS:
        return True
    if raw in _FALSE_LITERALS:
        return False
    raise ParseError(env_key, raw, "a bool")


def parse_str(env_key: str, raw: str) -> str:
    return raw


def parse_strings(env_key: str, raw: str) -> List[str]:
    if raw == "":
        return []
    return raw.split(",")


def parse_int_map(env_key: str, raw: str) -> Dict[str, int]:
    result: Dict[str, int] = {}
    for entry in parse_strings(env_key, raw):
        pair = entry.split("=")
        if len(pair) != 2:
            raise ParseError(env_key, raw, "a dict[str, int]")
        key, value = pair
        try:
            result[key] = parse_int(env_key, value)
        except ParseError as e:
            raise ParseError(env_key, raw, "a dict[str, int]") from e
    return result


_PARSERS: Dict[FieldKind, Callable[[str, str], Any]] = {
    FieldKind.INT: parse_int,
    FieldKind.BOOL: parse_bool,
    FieldKind.STR: parse_str,
    FieldKind.STRINGS: parse_strings,
    FieldKind.INT_MAP: parse_int_map,
}


def coerce(descriptor: FieldDescriptor, raw: str) -> Any:
    parser = _PARSERS.get(descriptor.kind)
    if parser is None:
        raise UnsupportedTypeError(descriptor.name, descriptor.kind)
    return parser(descriptor.env, raw)


def resolve(descriptor: FieldDescriptor, environ: Mapping[str, str]) -> Any:
    """Resolve the final typed value of one field."""
    return coerce(descriptor, resolve_raw(descriptor, environ))
