"""Kiosk UI State Enum."""

from enum import Enum


class KioskState(str, Enum):
    """키오스크 화면 상태.

    idle → capturing → awaiting_result → showing_result | showing_error → capturing
    """

    IDLE = "idle"
    CAPTURING = "capturing"
    AWAITING_RESULT = "awaiting_result"
    SHOWING_RESULT = "showing_result"
    SHOWING_ERROR = "showing_error"
