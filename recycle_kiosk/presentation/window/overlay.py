"""Kiosk 화면 렌더링 (OpenCV drawing)."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass

import cv2
import numpy as np

from recycle_kiosk.application.session import KioskSession
from recycle_kiosk.domain.enums import KioskState

# BGR
PRIMARY = (80, 175, 76)
ERROR = (54, 67, 244)
WHITE = (255, 255, 255)
MUTED = (200, 200, 200)
PANEL = (32, 32, 32)

FONT = cv2.FONT_HERSHEY_SIMPLEX

LOADING_TEXT = "Analyzing your item..."
RESULT_HINT = "Please place this item in the appropriate bin"
CAMERA_RETRY_HINT = "Press T to retry the camera"
WAITING_TEXT = "Starting camera..."


@dataclass(frozen=True)
class ScreenModel:
    """한 프레임을 그리는 데 필요한 값."""

    state: KioskState
    session: KioskSession
    facing_label: str
    has_camera: bool


def blank_canvas(size: tuple[int, int]) -> np.ndarray:
    width, height = size
    return np.zeros((height, width, 3), dtype=np.uint8)


def fit_to_canvas(image: np.ndarray, size: tuple[int, int]) -> np.ndarray:
    """비율 유지 리사이즈 후 검은 여백으로 채움."""
    width, height = size
    src_h, src_w = image.shape[:2]
    scale = min(width / src_w, height / src_h)
    resized = cv2.resize(image, (max(1, int(src_w * scale)), max(1, int(src_h * scale))))
    canvas = blank_canvas(size)
    y = (height - resized.shape[0]) // 2
    x = (width - resized.shape[1]) // 2
    canvas[y : y + resized.shape[0], x : x + resized.shape[1]] = resized
    return canvas


def _panel(canvas: np.ndarray, top: int, bottom: int, accent: tuple[int, int, int]) -> None:
    width = canvas.shape[1]
    overlay = canvas.copy()
    cv2.rectangle(overlay, (0, top), (width, bottom), PANEL, thickness=-1)
    cv2.addWeighted(overlay, 0.8, canvas, 0.2, 0, dst=canvas)
    cv2.rectangle(canvas, (0, top), (6, bottom), accent, thickness=-1)


def _centered(canvas: np.ndarray, text: str, y: int, scale: float, color, thickness: int = 2) -> None:
    (text_w, _), _ = cv2.getTextSize(text, FONT, scale, thickness)
    x = max(10, (canvas.shape[1] - text_w) // 2)
    cv2.putText(canvas, text, (x, y), FONT, scale, color, thickness, cv2.LINE_AA)


def _wrapped(canvas: np.ndarray, text: str, y: int, scale: float, color) -> int:
    for line in textwrap.wrap(text, width=60) or [""]:
        _centered(canvas, line, y, scale, color, 1)
        y += int(34 * scale) + 8
    return y


def draw_header(canvas: np.ndarray, model: ScreenModel) -> None:
    voice = "ON" if model.session.is_voice_enabled else "OFF"
    cv2.putText(canvas, "Recycling Classifier", (16, 36), FONT, 0.9, PRIMARY, 2, cv2.LINE_AA)
    status = f"Announce: {voice}"
    if model.has_camera:
        status = f"{model.facing_label} camera | {status}"
    (text_w, _), _ = cv2.getTextSize(status, FONT, 0.6, 1)
    cv2.putText(
        canvas, status, (canvas.shape[1] - text_w - 16, 32), FONT, 0.6, WHITE, 1, cv2.LINE_AA
    )


def draw_footer(canvas: np.ndarray, model: ScreenModel) -> None:
    if model.session.is_loading:
        return
    if model.state in (KioskState.SHOWING_RESULT, KioskState.SHOWING_ERROR):
        hint = "[R] new photo  [V] voice  [Q] quit"
    elif model.has_camera:
        hint = "[SPACE] take photo  [S] switch camera  [V] voice  [Q] quit"
    else:
        hint = "[V] voice  [Q] quit"
    _centered(canvas, hint, canvas.shape[0] - 20, 0.6, MUTED, 1)


def draw_loading(canvas: np.ndarray) -> None:
    height = canvas.shape[0]
    _panel(canvas, height // 2 - 40, height // 2 + 40, PRIMARY)
    _centered(canvas, LOADING_TEXT, height // 2 + 12, 1.0, WHITE)


def draw_result(canvas: np.ndarray, model: ScreenModel) -> None:
    category = model.session.classification
    if category is None:
        return
    height = canvas.shape[0]
    top = height - 200
    _panel(canvas, top, height - 50, PRIMARY)
    _centered(canvas, "Classification Result", top + 40, 0.8, MUTED)
    _centered(canvas, category.value.upper(), top + 100, 1.8, PRIMARY, 3)
    _centered(canvas, RESULT_HINT, top + 135, 0.7, WHITE, 1)


def draw_error(canvas: np.ndarray, message: str, title: str = "Error", hint: str | None = None) -> None:
    height = canvas.shape[0]
    top = height - 210
    _panel(canvas, top, height - 50, ERROR)
    _centered(canvas, title, top + 40, 0.9, ERROR)
    y = _wrapped(canvas, message, top + 80, 0.7, WHITE)
    if hint:
        _centered(canvas, hint, y + 10, 0.6, MUTED, 1)


def render_screen(
    model: ScreenModel,
    base: np.ndarray | None,
    size: tuple[int, int],
) -> np.ndarray:
    """현재 상태를 한 장의 BGR 이미지로 그린다.

    Args:
        model: 상태 스냅샷
        base: 라이브 프레임 또는 촬영 이미지 (없으면 검은 화면)
        size: (width, height)
    """
    canvas = fit_to_canvas(base, size) if base is not None else blank_canvas(size)
    session = model.session

    draw_header(canvas, model)

    if session.is_loading:
        draw_loading(canvas)
    elif session.classification is not None:
        draw_result(canvas, model)
    elif session.error_message is not None:
        draw_error(canvas, session.error_message)
    elif session.camera_error is not None:
        draw_error(canvas, session.camera_error, title="Camera Error", hint=CAMERA_RETRY_HINT)
    elif base is None and model.has_camera:
        _centered(canvas, WAITING_TEXT, size[1] // 2, 1.0, MUTED)

    draw_footer(canvas, model)
    return canvas
