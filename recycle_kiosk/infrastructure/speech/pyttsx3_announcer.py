"""pyttsx3 Announcer - AnnouncerPort 구현.

엔진은 전용 워커 스레드 하나에서 생성/사용한다 (드라이버가 스레드에 묶임).
새 안내가 들어오면 세대(generation)를 올리고 진행 중 발화를 stop() 으로 끊는다.
큐에 남은 이전 세대 항목은 워커가 건너뛴다. 결과적으로 발화는 겹치지 않고 최신 것만 들린다.
"""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable
from typing import Any

import pyttsx3

from recycle_kiosk.application.session.ports import AnnouncerPort
from recycle_kiosk.application.session.ports.announcer import announcement_text
from recycle_kiosk.domain.enums import WasteCategory

logger = logging.getLogger(__name__)

ENGINE_READY_TIMEOUT = 5.0
WORKER_JOIN_TIMEOUT = 2.0

_STOP = object()


class Pyttsx3Announcer(AnnouncerPort):
    """pyttsx3 음성 안내."""

    def __init__(
        self,
        engine_factory: Callable[[], Any] | None = None,
        language: str = "en",
    ) -> None:
        """초기화. 워커 스레드를 바로 시작한다.

        Args:
            engine_factory: TTS 엔진 생성 함수 (기본 pyttsx3.init)
            language: 선호 음성 언어 prefix
        """
        self._engine_factory = engine_factory or pyttsx3.init
        self._language = language.lower()
        self._engine: Any = None
        self._available = False
        self._ready = threading.Event()
        self._lock = threading.Lock()
        self._generation = 0
        self._speaking = False
        self._closed = False
        self._queue: queue.Queue[Any] = queue.Queue()
        self._worker = threading.Thread(
            target=self._run, name="kiosk-speech", daemon=True
        )
        self._worker.start()

    @property
    def is_available(self) -> bool:
        """엔진 준비가 끝났고 사용 가능한지. 대기하지 않는다."""
        return self._ready.is_set() and self._available

    def wait_until_ready(self, timeout: float = ENGINE_READY_TIMEOUT) -> bool:
        """엔진 초기화 완료까지 대기 후 사용 가능 여부 반환."""
        self._ready.wait(timeout)
        return self.is_available

    def announce(self, category: WasteCategory) -> None:
        # 엔진 초기화 중이면 큐에만 넣고 바로 반환 (이벤트 루프에서 호출됨)
        if self._closed or (self._ready.is_set() and not self._available):
            logger.warning(
                "Speech synthesis unavailable, skipping announcement",
                extra={"category": category.value},
            )
            return

        text = announcement_text(category)
        with self._lock:
            self._generation += 1
            self._queue.put((self._generation, text))
            if self._speaking:
                self._engine.stop()
        logger.info("Announcement queued", extra={"category": category.value})

    def stop(self) -> None:
        with self._lock:
            self._generation += 1
            if self._speaking and self._engine is not None:
                self._engine.stop()

    def wait_until_idle(self) -> None:
        """큐에 넣은 안내가 모두 처리(또는 폐기)될 때까지 대기."""
        self._queue.join()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.stop()
        self._queue.put(_STOP)
        self._worker.join(WORKER_JOIN_TIMEOUT)

    # ─────────────────────────────────────────────────────────────────────
    # Worker thread
    # ─────────────────────────────────────────────────────────────────────

    def _run(self) -> None:
        try:
            self._engine = self._engine_factory()
            self._select_voice(self._engine)
            self._available = True
        except Exception as e:
            logger.warning("Speech synthesis not available", extra={"error": str(e)})
        finally:
            self._ready.set()

        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                if self._available:
                    self._speak(*item)
                else:
                    logger.warning("Speech synthesis unavailable, dropping announcement")
            finally:
                self._queue.task_done()

    def _speak(self, generation: int, text: str) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._speaking = True
            self._engine.say(text)

        try:
            self._engine.runAndWait()
        except Exception:
            logger.exception("Speech playback failed")
        finally:
            with self._lock:
                self._speaking = False

    def _select_voice(self, engine: Any) -> None:
        """언어가 맞는 음성이 있으면 선택. 속도/음량은 엔진 기본값."""
        for voice in engine.getProperty("voices") or []:
            languages = [
                lang.decode(errors="ignore") if isinstance(lang, bytes) else str(lang)
                for lang in (getattr(voice, "languages", None) or [])
            ]
            if any(self._language in lang.lower() for lang in languages):
                engine.setProperty("voice", voice.id)
                return
