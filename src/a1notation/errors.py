from __future__ import annotations


class UnboundedDimensionError(RuntimeError):
    """Raised when width or height is requested on an axis the reference leaves open."""
