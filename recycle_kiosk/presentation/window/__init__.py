"""OpenCV Kiosk Window."""

from recycle_kiosk.presentation.window.kiosk_window import KioskWindow, OpenCVDisplay

__all__ = ["KioskWindow", "OpenCVDisplay"]
