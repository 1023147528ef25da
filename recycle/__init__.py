"""Recycle API - 폐기물 이미지 분류 프록시 서비스."""
