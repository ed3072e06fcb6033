"""Positional-argument validator combinators.

A positional validator receives the Click context and the ordered list of
positional values. It returns ``None`` when the arguments are acceptable and
raises :class:`~riffcli.validation.errors.ValidationError` otherwise.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

import click

from riffcli.validation.errors import ValidationError
from riffcli.validation.naming import is_dns1123_subdomain

logger = logging.getLogger(__name__)

PositionalArgValidator = Callable[[click.Context, Sequence[str]], None]
PositionalArg = Callable[[click.Context, str], None]


def arg_validation_conjunction(*validators: PositionalArgValidator) -> PositionalArgValidator:
    """Return a validator that runs each of *validators* in turn (all must pass).

    The first failure propagates unchanged and later validators are not run.
    """

    def _validate(ctx: click.Context, args: Sequence[str]) -> None:
        for validator in validators:
            validator(ctx, args)

    return _validate


def at_position(i: int, validator: PositionalArg) -> PositionalArgValidator:
    """Apply a single-value *validator* to the *i*-th positional argument.

    The number of arguments is not checked here; declare it on the command's
    ``click.argument`` parameters.
    """

    def _validate(ctx: click.Context, args: Sequence[str]) -> None:
        validator(ctx, args[i])

    return _validate


def kubernetes_validation(rule: Callable[[str], list[str]]) -> PositionalArg:
    """Turn a kubernetes-style ``str -> list[str]`` rule into a PositionalArg."""

    def _validate(ctx: click.Context, arg: str) -> None:
        msgs = rule(arg)
        if msgs:
            logger.debug("Argument %r rejected by %s", arg, getattr(rule, "__name__", rule))
            raise ValidationError(", ".join(msgs), ctx=ctx)

    return _validate


def valid_name() -> PositionalArg:
    """Require a DNS-1123 subdomain, the naming rule for most cluster resources."""
    return kubernetes_validation(is_dns1123_subdomain)
