"""Runtime services: telemetry and settings."""

from . import telemetry
from .settings import EditorSettings, config_dir

__all__ = ["EditorSettings", "config_dir", "telemetry"]
