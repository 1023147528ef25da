"""Recycle Domain Layer."""
