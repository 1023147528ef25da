"""Session Ports - Camera, Classification Client, Announcer."""

from recycle_kiosk.application.session.ports.announcer import AnnouncerPort
from recycle_kiosk.application.session.ports.camera import CameraPort, VideoStream
from recycle_kiosk.application.session.ports.classification_client import (
    ClassificationClientPort,
)

__all__ = ["AnnouncerPort", "CameraPort", "ClassificationClientPort", "VideoStream"]
