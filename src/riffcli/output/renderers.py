"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from riffcli.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from riffcli.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="riff.ok")
    op = Text(f"  {result.op}", style="riff.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="riff.key")
    style = {"name": "riff.name", "image": "riff.image"}.get(key, "")
    console.print(Text.assemble(k, Text(str(value), style=style)))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="riff.error")
    op = Text(f"  {result.op}", style="riff.op")
    console.print(label, op, Text(" — "), msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_create_function(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    for key in ("name", "namespace", "image"):
        if key in result.data:
            _field(console, key, result.data[key])

    manifests: list[dict[str, Any]] = result.data.get("manifests", [])
    if not manifests:
        return
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Kind", style="riff.kind", no_wrap=True)
    table.add_column("Name", style="riff.name")
    table.add_column("Namespace")
    if verbose:
        table.add_column("API Version", style="dim")
    for manifest in manifests:
        meta = manifest.get("metadata", {})
        row = [
            str(manifest.get("kind", "")),
            str(meta.get("name", "")),
            str(meta.get("namespace", "")),
        ]
        if verbose:
            row.append(str(manifest.get("apiVersion", "")))
        table.add_row(*row)
    console.print(table)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "create_function": _render_create_function,
}
