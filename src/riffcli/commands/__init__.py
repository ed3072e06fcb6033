"""Subcommand modules for riff.

Provides register_commands() which uses deferred imports to keep
``riff --help`` fast as the codebase grows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from riffcli.commands.function import function

    cli.add_command(function)
