"""Shared types: platform tags, prompt answers, settings and the run context."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field, field_validator

DEFAULT_PACKAGE = "ytmp3-js"
DEFAULT_USAGE_COMMAND = "ytmp3"
DEFAULT_MIN_NODE_MAJOR = 16

ENV_PREFIX = "YTMP3_SETUP_"


class Platform(str, Enum):
    POSIX = "posix"
    WIN32 = "win32"
    UNKNOWN = "unknown"


class Answer(Enum):
    YES = "yes"
    NO = "no"


class SetupSettings(BaseModel):
    """Settings read from ``YTMP3_SETUP_*`` environment variables.

    Attributes
    ----------
    package: str
        npm package installed globally.
    usage_command: str
        Executable name shown in the post-install usage tip.
    min_node_major: int
        Oldest supported Node.js major version.
    log_level: str
        Level for the JSON logger (``DEBUG``, ``INFO``, ...).
    """

    package: str = Field(DEFAULT_PACKAGE, min_length=1)
    usage_command: str = Field(DEFAULT_USAGE_COMMAND, min_length=1)
    min_node_major: int = Field(DEFAULT_MIN_NODE_MAJOR, ge=1)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v!r}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SetupSettings:
        env = os.environ if environ is None else environ
        keys = {
            "package": "PACKAGE",
            "usage_command": "COMMAND",
            "min_node_major": "MIN_NODE",
            "log_level": "LOG_LEVEL",
        }
        data = {
            field: env[ENV_PREFIX + key] for field, key in keys.items() if ENV_PREFIX + key in env
        }
        return cls.model_validate(data)


@dataclass(frozen=True)
class SetupContext:
    platform: Platform
    kernel: str = ""
    dry_run: bool = False
    package: str = DEFAULT_PACKAGE
    usage_command: str = DEFAULT_USAGE_COMMAND
    min_node_major: int = DEFAULT_MIN_NODE_MAJOR

    @classmethod
    def from_settings(
        cls, settings: SetupSettings, *, platform: Platform, kernel: str, dry_run: bool
    ) -> SetupContext:
        return cls(
            platform=platform,
            kernel=kernel,
            dry_run=dry_run,
            package=settings.package,
            usage_command=settings.usage_command,
            min_node_major=settings.min_node_major,
        )


@dataclass(frozen=True)
class CommandResult:
    command: tuple[str, ...]
    exit_code: int
    output: str = ""
    simulated: bool = False

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
