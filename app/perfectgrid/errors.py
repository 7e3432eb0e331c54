"""Error types raised by the grid layout code."""

from __future__ import annotations


class GridError(Exception):
    """Base class for every error the layout code raises on purpose."""


class InvalidInput(GridError, ValueError):
    """Ratios or layout parameters that cannot produce a layout.

    Subclasses ValueError so callers already guarding layout helpers with
    ``except ValueError`` keep working.
    """


class DegenerateRow(InvalidInput):
    """A row whose aspect sum or item count leaves its height undefined."""
