"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, riff.toml only contains overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class FunctionConfig(BaseModel):
    """[function] section."""

    model_config = {"frozen": True}

    namespace: str = "default"
    registry: str = "dev.local"
    git_revision: str = "master"
    bus: str = "stub"


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    format: Literal["human", "json", "yaml"] = "human"

