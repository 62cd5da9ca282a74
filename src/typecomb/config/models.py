"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, typecomb.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from typecomb.util import DEFAULT_MAX_VALUE_REPR


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True, "populate_by_name": True}

    verbose: bool = False
    json_output: bool = Field(default=False, alias="json")


class DiagnosticsConfig(BaseModel):
    """[diagnostics] section."""

    model_config = {"frozen": True}

    max_value_repr: int = Field(default=DEFAULT_MAX_VALUE_REPR, ge=10)


class UpdateConfig(BaseModel):
    """[update] section."""

    model_config = {"frozen": True}

    freeze_commands: bool = False


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    disabled: list[str] = Field(default_factory=list)
