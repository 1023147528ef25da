"""Kiosk Domain Enums."""

from recycle_kiosk.domain.enums.facing_mode import FacingMode
from recycle_kiosk.domain.enums.kiosk_state import KioskState
from recycle_kiosk.domain.enums.waste_category import WasteCategory

__all__ = ["FacingMode", "KioskState", "WasteCategory"]
