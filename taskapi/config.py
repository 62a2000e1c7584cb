"""Application configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DEBUG_MODE = "debug"
RELEASE_MODE = "release"
TEST_MODE = "test"

_DEFAULT_PORT = "8080"
_DEFAULT_ENV = "development"


def _get_env(environ: Mapping[str, str], key: str, default: str) -> str:
    return environ.get(key) or default


def _mode_for(env: str) -> str:
    if env == "production":
        return RELEASE_MODE
    if env == "test":
        return TEST_MODE
    return DEBUG_MODE


@dataclass(frozen=True)
class Config:
    """Server port, run mode and deployment environment."""

    port: str = _DEFAULT_PORT
    mode: str = DEBUG_MODE
    env: str = _DEFAULT_ENV

    @classmethod
    def load(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """Read PORT and APP_ENV, falling back to defaults when unset or empty."""
        if environ is None:
            environ = os.environ
        env = _get_env(environ, "APP_ENV", _DEFAULT_ENV)
        return cls(
            port=_get_env(environ, "PORT", _DEFAULT_PORT),
            mode=_mode_for(env),
            env=env,
        )

    def is_development(self) -> bool:
        return self.env == "development"

    def is_production(self) -> bool:
        return self.env == "production"