from __future__ import annotations

import sys
from typing import Any, List, Optional, Sequence, TextIO, Tuple

from pydantic import BaseModel, ConfigDict, Field

from configstore.errors import UnsupportedTypeError
from configstore.fields import FieldDescriptor, FieldKind, describe


class ReportSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    mask: str = "********"
    padding: int = Field(default=3, ge=0)
    headers: Tuple[str, str, str] = ("OPTION", "ENV VAR", "SETTING")


def _is_empty(value: Any) -> bool:
    # ints and bools have no "unset" state, so they always count as set
    return isinstance(value, (str, list, dict)) and len(value) == 0


def render_value(descriptor: FieldDescriptor, value: Any, settings: Optional[ReportSettings] = None) -> str:
    settings = settings or ReportSettings()
    if descriptor.secret:
        # An empty secret renders empty so an unset password is distinguishable from a set one
        return "" if _is_empty(value) else settings.mask

    kind = descriptor.kind
    if kind is FieldKind.STR:
        return str(value)
    if kind is FieldKind.INT:
        return str(int(value))
    if kind is FieldKind.BOOL:
        return "true" if value else "false"
    if kind is FieldKind.STRINGS:
        return "[" + " ".join(value) + "]"
    if kind is FieldKind.INT_MAP:
        return "[" + " ".join(f"{k}:{v}" for k, v in sorted(value.items())) + "]"
    raise UnsupportedTypeError(descriptor.name, kind)


def _format_table(rows: Sequence[Sequence[str]], padding: int) -> str:
    widths = [max(len(row[col]) for row in rows) + padding for col in range(2)]
    lines = [row[0].ljust(widths[0]) + row[1].ljust(widths[1]) + row[2] for row in rows]
    return "".join(line + "\n" for line in lines)


def render(record: Any, settings: Optional[ReportSettings] = None) -> str:
    """Render the OPTION / ENV VAR / SETTING table for `record`, secrets masked."""
    settings = settings or ReportSettings()
    rows: List[Sequence[str]] = [settings.headers]
    for descriptor in describe(record):
        value = getattr(record, descriptor.name)
        rows.append((descriptor.name, descriptor.env, render_value(descriptor, value, settings)))
    return _format_table(rows, settings.padding)


def print_config(record: Any, stream: Optional[TextIO] = None, settings: Optional[ReportSettings] = None) -> None:
    """Pretty print the loaded record. Fields declared with secret=true are obscured when set."""
    out = stream if stream is not None else sys.stdout
    out.write(render(record, settings))
    out.flush()
