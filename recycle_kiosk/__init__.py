"""Recycle Kiosk - 카메라 촬영 → 분류 요청 → 결과 표시/음성 안내 클라이언트."""
