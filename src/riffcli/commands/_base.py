"""Custom Click base classes with validation hooks and --examples support.

RiffCommand accepts ``args`` (a positional validator) and ``pre_run`` (a
hook called with the context and positional values) and runs both, in that
order, before the command callback. Both classes also accept an
``examples`` parameter: when ``--examples`` is passed, the command prints
usage examples and exits.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click

from riffcli.validation import PositionalArgValidator, PreRunHook


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


def positional_values(ctx: click.Context) -> list[str]:
    """Collect parsed positional values in declaration order.

    ``nargs=-1`` arguments are flattened; missing optional arguments are skipped.
    """
    values: list[str] = []
    for param in ctx.command.params:
        if not isinstance(param, click.Argument) or param.name is None:
            continue
        value = ctx.params.get(param.name)
        if value is None:
            continue
        if isinstance(value, (tuple, list)):
            values.extend(str(v) for v in value)
        else:
            values.append(str(value))
    return values


class RiffCommand(click.Command):
    """Click Command subclass with pre-execution validation and ``--examples``."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        args_validator: PositionalArgValidator | None = None,
        pre_run: PreRunHook | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.args_validator = args_validator
        self.pre_run = pre_run
        if examples:
            _add_examples_option(self, examples)

    def run_validators(self, ctx: click.Context) -> None:
        positional: Sequence[str] = positional_values(ctx)
        if self.args_validator is not None:
            self.args_validator(ctx, positional)
        if self.pre_run is not None:
            self.pre_run(ctx, positional)

    def invoke(self, ctx: click.Context) -> Any:
        self.run_validators(ctx)
        return super().invoke(ctx)


class RiffGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = RiffCommand`` so all subcommands automatically
    accept ``examples``, ``args_validator`` and ``pre_run`` without an
    explicit ``cls=`` each time.
    """

    command_class = RiffCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)
