from __future__ import annotations


class GeometryInputError(ValueError):
    """Base error for point input the path builders cannot work with."""


class InvalidInputError(GeometryInputError):
    """Too few points, a malformed coordinate list, or a rejected padding."""


class DegenerateInputError(GeometryInputError):
    """A segment of zero length where a direction or normal is required."""
