"""List window error taxonomy."""

from __future__ import annotations


class ListWindowError(Exception):
    """Base error for list window failures."""


class ListConfigError(ListWindowError, TypeError):
    """Invalid list configuration detected at construction boundary."""
