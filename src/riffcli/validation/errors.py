"""The two error classes raised by validators.

* :class:`ValidationError` — bad user input. A :class:`click.UsageError`, so
  Click prints the message with usage help and exits with status 2.
* :class:`WiringError` — a defect in how validators were assembled against
  the declared flags. Deliberately *not* a Click exception: it escapes Click's
  handling and aborts the process with a traceback.
"""

from __future__ import annotations

import click


class ValidationError(click.UsageError):
    """A positional argument or flag combination was rejected."""


class WiringError(RuntimeError):
    """A validator references something the command never declared."""
