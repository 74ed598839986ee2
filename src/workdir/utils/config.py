"""Centralized settings resolution."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from workdir.utils.errors import ConfigError

DEFAULT_LIMIT = 19
SHORT_LIST_LENGTH = 5
COLOR_MODES = ("always", "auto", "never")


@dataclass(frozen=True)
class Settings:
    path_file: str
    limit: int = DEFAULT_LIMIT
    color: str = "always"
    debug: bool = False


def default_path_file(environ: Mapping[str, str] | None = None) -> str:
    """Return the backing file location, unexpanded.

    Resolution order:
        1. $WORKDIR_PATH_FILE  (explicit override)
        2. $XDG_STATE_HOME/workdir  (XDG standard)
        3. ~/.local/state/workdir  (default)
    """
    env = os.environ if environ is None else environ
    if explicit := env.get("WORKDIR_PATH_FILE"):
        return explicit
    xdg = env.get("XDG_STATE_HOME")
    if xdg:
        return os.path.join(xdg, "workdir")
    return "~/.local/state/workdir"


def _parse_limit(raw: str | None) -> int:
    if not raw:
        return DEFAULT_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        raise ConfigError("WORKDIR_LIMIT", raw) from None
    if limit < 1:
        raise ConfigError("WORKDIR_LIMIT", raw)
    return limit


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from the environment."""
    env = os.environ if environ is None else environ
    color = env.get("WORKDIR_COLOR", "always").lower()
    if color not in COLOR_MODES:
        raise ConfigError("WORKDIR_COLOR", color)
    return Settings(
        path_file=default_path_file(env),
        limit=_parse_limit(env.get("WORKDIR_LIMIT")),
        color=color,
        debug=bool(env.get("WORKDIR_DEBUG")),
    )
