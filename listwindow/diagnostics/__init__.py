"""Diagnostics serialization helpers."""
