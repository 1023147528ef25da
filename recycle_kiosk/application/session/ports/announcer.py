"""Announcer Port - 음성 안내 추상화."""

from __future__ import annotations

from abc import ABC, abstractmethod

from recycle_kiosk.domain.enums import WasteCategory

ANNOUNCEMENT_TEMPLATE = "Please place this item in the {category} bin."


def announcement_text(category: WasteCategory) -> str:
    return ANNOUNCEMENT_TEMPLATE.format(category=category.value)


class AnnouncerPort(ABC):
    """음성 안내 포트.

    announce()는 fire-and-forget. 진행 중인 발화가 있으면 중단하고 새 발화로 대체한다.
    """

    @property
    @abstractmethod
    def is_available(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def announce(self, category: WasteCategory) -> None:
        raise NotImplementedError

    @abstractmethod
    def stop(self) -> None:
        """진행 중인 발화 중단."""
        raise NotImplementedError

    def close(self) -> None:
        self.stop()
