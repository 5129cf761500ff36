from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from configstore import configclass, env_field


@configclass
class SampleConfig:
    int_value: int = env_field("INT_VAL", default="1")
    bool_value: bool = env_field("BOOL_VAL", default="true")
    string_value: str = env_field("STRING_VAL", default="default_value")
    string_value_no_default: str = env_field("NO_DEFAULT_VAL")
    string_slice_value: List[str] = env_field("STRING_SLICE_VAL", default="foo,bar")
    int_map_value: Dict[str, int] = env_field("INT_MAP_VAL", default="foo=1,bar=2")
    secret_int_value: int = env_field("SECRET_INT_VAL", default="3", secret=True)


@dataclass
class PlainConfig:
    api_key: str = field(default="", metadata={"env": "API_KEY", "secret": "TRUE"})
    port: int = field(default=0, metadata={"env": "PORT", "default": "8080"})
    hosts: list[str] = field(default_factory=list, metadata={"env": "HOSTS"})


@dataclass
class MissingEnvConfig:
    name: str = field(default="", metadata={"default": "x"})


@dataclass
class UnsupportedConfig:
    ratio: float = field(default=0.0, metadata={"env": "RATIO"})


SAMPLE_ENV = {
    "INT_VAL": "2",
    "BOOL_VAL": "false",
    "STRING_VAL": "foo",
    "NO_DEFAULT_VAL": "bar",
    "STRING_SLICE_VAL": "a,b",
    "INT_MAP_VAL": "c=3,d=4",
    "SECRET_INT_VAL": "5",
}


@dataclass
class BadDefaultConfig:
    port: int = field(default=0, metadata={"env": "PORT", "default": 8080})


@dataclass
class RequiredArgConfig:
    name: str = field(metadata={"env": "NAME"})


def make_config(name: str) -> PlainConfig:
    return PlainConfig(api_key=name)
