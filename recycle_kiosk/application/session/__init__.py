"""Kiosk Session - 상태 + 컨트롤러."""

from recycle_kiosk.application.session.controller import KioskController
from recycle_kiosk.application.session.session import KioskSession

__all__ = ["KioskController", "KioskSession"]
