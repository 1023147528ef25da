"""Kiosk Setup - Config, Logging."""

from recycle_kiosk.setup.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
