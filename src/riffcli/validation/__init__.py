"""Composable validators for Click commands.

This layer depends only on stdlib and click.
It must never import from services, commands, output, or config.
"""

from riffcli.validation.args import (
    PositionalArg,
    PositionalArgValidator,
    arg_validation_conjunction,
    at_position,
    kubernetes_validation,
    valid_name,
)
from riffcli.validation.broadcast import BroadcastStringValue, StringRef, broadcast_string_value
from riffcli.validation.errors import ValidationError, WiringError
from riffcli.validation.flags import (
    Flag,
    FlagsValidator,
    PreRunHook,
    at_least_one_of,
    at_most_one_of,
    flags_dependency,
    flags_validation_conjunction,
    flags_validator_as_pre_run,
    lookup_flag,
)

__all__ = [
    "BroadcastStringValue",
    "Flag",
    "FlagsValidator",
    "PositionalArg",
    "PositionalArgValidator",
    "PreRunHook",
    "StringRef",
    "ValidationError",
    "WiringError",
    "arg_validation_conjunction",
    "at_least_one_of",
    "at_most_one_of",
    "at_position",
    "broadcast_string_value",
    "flags_dependency",
    "flags_validation_conjunction",
    "flags_validator_as_pre_run",
    "kubernetes_validation",
    "lookup_flag",
    "valid_name",
]
