"""Result envelope returned by the riff services.

Every service method answers with a :class:`ServiceResult` instead of raising,
so the command layer can render success and failure the same way in human,
JSON and YAML output. Usage mistakes never get this far: they are rejected by
the Click validators before a service is called.

The envelope carries no ``meta`` block. Services here only render manifests in
memory, so there is no timing or telemetry to report.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why a service refused its input.

    ``code`` is a stable upper-case token (``INVALID_NAMESPACE``,
    ``INVALID_CHANNEL``) that scripts can match on. ``detail`` holds the
    offending values.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call, named by ``op``.

    On success ``data`` holds the payload (for ``create_function``: name,
    namespace, image and the rendered manifests) and ``warnings`` lists
    anything odd but allowed. On failure ``ok`` is False and ``error`` is set.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Shorthand for a failed result carrying a single :class:`ServiceError`."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
