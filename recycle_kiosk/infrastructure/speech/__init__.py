"""Speech Announcer Adapter."""

from recycle_kiosk.infrastructure.speech.pyttsx3_announcer import Pyttsx3Announcer

__all__ = ["Pyttsx3Announcer"]
