"""
Configuration — Runtime settings for the CLI and presentation helpers.

Values come from the dataclass defaults, then FORMDFA_* environment
variables, then explicit CLI flags.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping


ENV_LOG_LEVEL = "FORMDFA_LOG_LEVEL"
ENV_JSON_LOGS = "FORMDFA_JSON_LOGS"
ENV_ANIMATION_DELAY_MS = "FORMDFA_ANIMATION_DELAY_MS"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


class ConfigError(ValueError):
    """Raised when a configuration value cannot be parsed."""
    pass


@dataclass
class FormDFAConfig:
    """Settings for logging and replay animation."""
    log_level: str = "WARNING"
    json_logs: bool = False
    animation_delay_ms: int = 250

    def __post_init__(self):
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"Unknown log level: {self.log_level!r}")
        self.log_level = level
        if self.animation_delay_ms < 0:
            raise ConfigError(
                f"animation_delay_ms must be non-negative, got {self.animation_delay_ms}"
            )

    @property
    def animation_delay_seconds(self) -> float:
        return self.animation_delay_ms / 1000.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "FormDFAConfig":
        """
        Build a config from FORMDFA_* environment variables.

        Missing variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        kwargs: dict = {}

        if ENV_LOG_LEVEL in env:
            kwargs["log_level"] = env[ENV_LOG_LEVEL]

        if ENV_JSON_LOGS in env:
            raw = env[ENV_JSON_LOGS].strip().lower()
            if raw in _TRUE:
                kwargs["json_logs"] = True
            elif raw in _FALSE:
                kwargs["json_logs"] = False
            else:
                raise ConfigError(f"{ENV_JSON_LOGS} must be a boolean, got {raw!r}")

        if ENV_ANIMATION_DELAY_MS in env:
            raw = env[ENV_ANIMATION_DELAY_MS]
            try:
                kwargs["animation_delay_ms"] = int(raw)
            except ValueError:
                raise ConfigError(
                    f"{ENV_ANIMATION_DELAY_MS} must be an integer, got {raw!r}"
                ) from None

        return cls(**kwargs)
