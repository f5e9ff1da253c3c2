"""
Domain models and value objects.

Contains the Vector2 value type and the RectBounds rectangle model.
"""

from src.core.domain.rect_bounds import RectBounds
from src.core.domain.vector2 import NumericError, Vector2

__all__ = [
    # Vector2 module
    "NumericError",
    "Vector2",
    # RectBounds module
    "RectBounds",
]
