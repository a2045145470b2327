"""Editor settings resolved from ``PYNE_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

ENV_PREFIX = "PYNE_"
APP_NAME = "pyne"


def _env(environ: Mapping[str, str], name: str) -> Optional[str]:
    return environ.get(f"{ENV_PREFIX}{name}")


def _env_int(environ: Mapping[str, str], name: str, fallback: int) -> int:
    raw = _env(environ, name)
    if raw is None:
        return fallback
    try:
        value = int(raw)
    except ValueError:
        return fallback
    return value if value >= 0 else fallback


def _env_viewport(
    environ: Mapping[str, str], fallback: Tuple[int, int]
) -> Tuple[int, int]:
    raw = _env(environ, "VIEWPORT")
    if not raw:
        return fallback
    width, sep, height = raw.lower().partition("x")
    if not sep:
        return fallback
    try:
        return (max(0, int(width)), max(0, int(height)))
    except ValueError:
        return fallback


@dataclass(frozen=True, slots=True)
class EditorSettings:
    vertical_padding: int = 6
    horizontal_padding: int = 6
    viewport: Tuple[int, int] = (80, 24)
    tab_text: str = "    "
    scratch_prefix: str = "scratch_"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EditorSettings":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            vertical_padding=_env_int(
                env, "VERTICAL_PADDING", defaults.vertical_padding
            ),
            horizontal_padding=_env_int(
                env, "HORIZONTAL_PADDING", defaults.horizontal_padding
            ),
            viewport=_env_viewport(env, defaults.viewport),
            tab_text=" " * _env_int(env, "TAB_WIDTH", len(defaults.tab_text)),
        )


def config_dir(environ: Mapping[str, str] | None = None) -> Path:
    """Directory used for scratch documents when no starting directory is set."""

    env = os.environ if environ is None else environ
    override = _env(env, "CONFIG_DIR")
    if override:
        return Path(override)
    home = env.get("HOME")
    if home:
        return Path(home) / ".config" / APP_NAME
    appdata = env.get("APPDATA")
    if appdata:
        return Path(appdata) / APP_NAME
    return Path("config")


__all__ = ["EditorSettings", "config_dir"]
