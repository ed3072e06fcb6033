"""Flag-set validator combinators.

A flag validator receives the Click context of the command about to run and
inspects its options through :func:`lookup_flag`. Like positional validators,
it returns ``None`` on success and raises
:class:`~riffcli.validation.errors.ValidationError` on bad input.

Naming a flag the command never declared is a wiring bug, not bad input, and
raises :class:`~riffcli.validation.errors.WiringError` instead.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

import click
from click.core import ParameterSource

from riffcli.validation.errors import ValidationError, WiringError

logger = logging.getLogger(__name__)

FlagsValidator = Callable[[click.Context], None]
PreRunHook = Callable[[click.Context, Sequence[str]], None]

# Sources that mean the user supplied the value on this invocation.
_USER_SOURCES = frozenset(
    {ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT, ParameterSource.PROMPT}
)


@dataclass(frozen=True)
class Flag:
    """Read-only view of one declared option."""

    name: str
    changed: bool
    value: Any


def _matches(param: click.Parameter, name: str) -> bool:
    if not isinstance(param, click.Option):
        return False
    long_opt = f"--{name}"
    if long_opt in param.opts or long_opt in param.secondary_opts:
        return True
    return param.name == name.replace("-", "_")


def lookup_flag(ctx: click.Context, name: str) -> Flag | None:
    """Find the option called *name* on this command or an enclosing group.

    Returns None when no command in the context chain declares it.
    """
    current: click.Context | None = ctx
    while current is not None:
        for param in current.command.params:
            if _matches(param, name):
                source = current.get_parameter_source(param.name) if param.name else None
                return Flag(
                    name=name,
                    changed=source in _USER_SOURCES,
                    value=current.params.get(param.name) if param.name else None,
                )
        current = current.parent
    return None


def _require_flag(ctx: click.Context, name: str) -> Flag:
    flag = lookup_flag(ctx, name)
    if flag is None:
        msg = f"Expected to find flag named {name!r} in command {ctx.command_path!r}"
        logger.error(msg)
        raise WiringError(msg)
    return flag


def _flag_list(names: Sequence[str]) -> str:
    return ", ".join(f"--{n}" for n in names)


def flags_validator_as_pre_run(validator: FlagsValidator) -> PreRunHook:
    """Allow a FlagsValidator to be installed as a ``RiffCommand(pre_run=...)`` hook."""

    def _hook(ctx: click.Context, args: Sequence[str]) -> None:
        validator(ctx)

    return _hook


def flags_validation_conjunction(*validators: FlagsValidator) -> FlagsValidator:
    """Return a validator that runs each of *validators* in turn (all must pass)."""

    def _validate(ctx: click.Context) -> None:
        for validator in validators:
            validator(ctx)

    return _validate


def flags_dependency(flag: str, delegate: FlagsValidator) -> FlagsValidator:
    """Evaluate *delegate* only if *flag* has been set.

    Use to enforce scenarios such as "if --foo is set, then --bar must be set
    as well".
    """

    def _validate(ctx: click.Context) -> None:
        if _require_flag(ctx, flag).changed:
            delegate(ctx)

    return _validate


def at_least_one_of(*flag_names: str) -> FlagsValidator:
    """Assert that at least one of the named flags is set."""

    def _validate(ctx: click.Context) -> None:
        for name in flag_names:
            if _require_flag(ctx, name).changed:
                return
        logger.debug("None of %s set for %s", flag_names, ctx.command_path)
        raise ValidationError(f"at least one of {_flag_list(flag_names)} must be set", ctx=ctx)

    return _validate


def at_most_one_of(*flag_names: str) -> FlagsValidator:
    """Assert that at most one of the named flags is set."""

    def _validate(ctx: click.Context) -> None:
        set_count = sum(1 for name in flag_names if _require_flag(ctx, name).changed)
        if set_count > 1:
            logger.debug("%d of %s set for %s", set_count, flag_names, ctx.command_path)
            raise ValidationError(f"at most one of {_flag_list(flag_names)} must be set", ctx=ctx)

    return _validate
