"""Shared pytest fixtures and test helpers for riff tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import click
import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no ``riff.toml`` or env var leaks in.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RIFF_CONFIG", raising=False)
    for key in ("RIFF_JSON_OUTPUT", "RIFF_QUIET", "RIFF_VERBOSE", "RIFF_LOG_JSON"):
        monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Context builders for validator tests
# ---------------------------------------------------------------------------


def stub_command(*flag_names: str, envvar_prefix: str | None = None) -> click.Command:
    """A do-nothing command declaring one string option per name."""
    params: list[click.Parameter] = [
        click.Option(
            [f"--{name}"],
            default=None,
            envvar=f"{envvar_prefix}_{name.upper()}" if envvar_prefix else None,
        )
        for name in flag_names
    ]
    return click.Command("stub", params=params, callback=lambda **_: None)


@pytest.fixture
def make_ctx() -> Callable[..., click.Context]:
    """Parse *argv* against a stub command declaring *flags* and return its context."""

    def _make(
        flags: Sequence[str],
        argv: Sequence[str] = (),
        *,
        envvar_prefix: str | None = None,
    ) -> click.Context:
        cmd = stub_command(*flags, envvar_prefix=envvar_prefix)
        return cmd.make_context("stub", list(argv))

    return _make
