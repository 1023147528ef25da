"""Recycle Domain Enums."""

from recycle.domain.enums.classification_source import ClassificationSource
from recycle.domain.enums.waste_category import WASTE_CATEGORIES, WasteCategory

__all__ = ["ClassificationSource", "WASTE_CATEGORIES", "WasteCategory"]
