"""Classification Server HTTP Adapter."""

from recycle_kiosk.infrastructure.http.classification_client import HttpClassificationClient

__all__ = ["HttpClassificationClient"]
