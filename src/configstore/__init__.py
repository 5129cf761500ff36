"""Typed configuration records loaded from environment variables."""

from configstore.errors import (
    ConfigStoreError,
    MissingEnvKeyError,
    ParseError,
    SchemaError,
    UnsupportedTypeError,
)
from configstore.fields import FieldDescriptor, FieldKind, configclass, describe, env_field, is_secret
from configstore.gate import LoadGate, load_once
from configstore.loader import load
from configstore.report import ReportSettings, print_config, render

__all__ = [
    "ConfigStoreError",
    "FieldDescriptor",
    "FieldKind",
    "LoadGate",
    "MissingEnvKeyError",
    "ParseError",
    "ReportSettings",
    "SchemaError",
    "UnsupportedTypeError",
    "configclass",
    "describe",
    "env_field",
    "is_secret",
    "load",
    "load_once",
    "print_config",
    "render",
]
