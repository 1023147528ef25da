"""Recycle Setup - Config, Logging, Tracing, Dependencies."""

from recycle.setup.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
