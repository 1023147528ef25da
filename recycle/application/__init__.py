"""Recycle Application Layer."""
