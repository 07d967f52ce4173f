"""Runtime settings with environment variable overrides."""

from __future__ import annotations

import os
import re
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator

_HEIGHT_PATTERN = re.compile(r"^~?\d+%?$")


class SelectorSettings(BaseModel):
    """Settings for which programs to run and how to present the picker."""

    model_config = ConfigDict(extra="forbid")

    kubectl: str = "kubectl"
    fzf: str = "fzf"
    fzf_height: str = "20%"
    mode: Literal["fzf", "table"] = "fzf"

    @field_validator("kubectl", "fzf")
    @classmethod
    def validate_binary(cls, v: str) -> str:
        """Binaries must be a single non-empty word."""
        v = v.strip()
        if not v or len(v.split()) != 1:
            raise ValueError("program must be a single word without spaces")
        return v

    @field_validator("fzf_height")
    @classmethod
    def validate_fzf_height(cls, v: str) -> str:
        """Validate height uses fzf's ``N``, ``N%`` or ``~N%`` syntax."""
        if not _HEIGHT_PATTERN.match(v):
            raise ValueError("fzf_height must look like 20, 20% or ~20%")
        return v

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> SelectorSettings:
        """Create settings with environment variable overrides.

        Environment variables take precedence over base_config values.

        Supported environment variables:
            KUBECTL_SELECT_KUBECTL: kubectl program name or path
            KUBECTL_SELECT_FZF: fzf program name or path
            KUBECTL_SELECT_FZF_HEIGHT: value passed to ``fzf --height``
            KUBECTL_SELECT_MODE: default picker (fzf or table)
        """
        config_dict = base_config.copy() if base_config else {}

        if kubectl := os.environ.get("KUBECTL_SELECT_KUBECTL"):
            config_dict["kubectl"] = kubectl

        if fzf := os.environ.get("KUBECTL_SELECT_FZF"):
            config_dict["fzf"] = fzf

        if height := os.environ.get("KUBECTL_SELECT_FZF_HEIGHT"):
            config_dict["fzf_height"] = height

        if mode := os.environ.get("KUBECTL_SELECT_MODE"):
            config_dict["mode"] = mode.lower()

        return cls.model_validate(config_dict)
