"""Session 상태 전이 예외."""

from __future__ import annotations

from recycle_kiosk.application.common.exceptions.base import KioskError


class InvalidStateTransitionError(KioskError):
    """현재 상태에서 허용되지 않는 동작."""

    def __init__(self, action: str, state: str) -> None:
        super().__init__(f"Cannot {action} while {state}")
        self.action = action
        self.state = state
