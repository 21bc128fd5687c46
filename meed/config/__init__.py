"""Configuration for meed."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
