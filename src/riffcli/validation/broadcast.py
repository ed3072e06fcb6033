"""Broadcast string value: one flag, many destinations.

A :class:`BroadcastStringValue` wraps several caller-owned :class:`StringRef`
cells and writes every assignment into all of them. It is also a Click
parameter type, so declaring ``type=sink`` on an option routes the parsed
value (or the option's default) through :meth:`BroadcastStringValue.set`.

Callers must not write to a destination directly once the sink owns it. This
is a documented contract, not a runtime check: ``str(sink)`` reads only the
first destination and goes stale if another one is written out of band.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import click

from riffcli.validation.errors import WiringError


@dataclass
class StringRef:
    """A mutable string cell owned by the caller."""

    value: str = ""


class BroadcastStringValue(click.ParamType):
    """Settable string value replicated across every wrapped destination."""

    name = "string"

    def __init__(self, refs: tuple[StringRef, ...]) -> None:
        self._refs = refs

    @property
    def refs(self) -> tuple[StringRef, ...]:
        return self._refs

    def set(self, value: str) -> None:
        """Overwrite every destination with *value*."""
        for ref in self._refs:
            ref.value = value

    def type(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self._refs[0].value

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> str:
        text = value if isinstance(value, str) else str(value)
        self.set(text)
        return text

    def __repr__(self) -> str:
        return f"BroadcastStringValue({str(self)!r}, destinations={len(self._refs)})"


def broadcast_string_value(value: str, *refs: StringRef) -> BroadcastStringValue:
    """Create a sink over *refs* and write *value* to each of them immediately."""
    if not refs:
        raise WiringError("At least one string destination must be provided")
    sink = BroadcastStringValue(refs)
    sink.set(value)
    return sink
