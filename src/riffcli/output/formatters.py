"""Rich/JSON/YAML output helpers.

The CLI renders ServiceResult for humans (Rich output) or machines
(``--json`` / ``--yaml``). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from ruamel.yaml import YAML

from riffcli.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from riffcli.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Resolved output mode for a single command invocation."""

    format: str = "human"
    quiet: bool = False
    verbose: bool = False


def _dump_yaml(result: ServiceResult) -> str:
    yaml = YAML(typ="safe", pure=True)
    yaml.default_flow_style = False
    buf = StringIO()
    yaml.dump(result.model_dump(mode="json"), buf)
    return buf.getvalue().rstrip("\n")


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    ``json`` and ``yaml`` serialize the whole result; ``human`` renders it
    via Rich, or as a single status line when ``quiet`` is set.
    """
    settings = settings or OutputSettings()
    if settings.format == "json":
        return result.model_dump_json(indent=2)
    if settings.format == "yaml":
        return _dump_yaml(result)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
