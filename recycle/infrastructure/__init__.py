"""Recycle Infrastructure Layer."""
