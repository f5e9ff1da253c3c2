"""
RectBounds — Прямоугольник с отступом для Vector2

Immutable Pydantic модель прямоугольника, выровненного по осям, с одним углом
в начале координат и другим в (width, height). Необязательный radius
уменьшает прямоугольник с каждой стороны (например, чтобы шар радиуса
radius целиком помещался внутрь).

Делегирует проверку и clamp в Vector2.is_within_rect / Vector2.clamp_to_rect,
сохраняя их соглашения о границах (строгое / нестрогое).
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.core.domain.vector2 import Vector2
from src.core.math.numerical_safeguards import is_valid_float
from src.core.math.random_source import RandomSource


class RectBounds(BaseModel):
    """
    Параметры прямоугольника для containment и clamp.

    Immutable модель (frozen=True).
    """

    width: float = Field(..., ge=0, description="Ширина прямоугольника (по x)")
    height: float = Field(..., ge=0, description="Высота прямоугольника (по y)")
    radius: float = Field(0.0, ge=0, description="Отступ от каждой стороны")

    model_config = {"frozen": True}  # Immutable

    @field_validator("width", "height", "radius")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """NaN/Inf недопустимы в размерах прямоугольника."""
        if not is_valid_float(v):
            raise ValueError(f"Rect dimension must be finite, got {v}")
        return v

    @classmethod
    def square(cls, size: float, radius: float = 0.0) -> "RectBounds":
        """Квадрат size × size."""
        return cls(width=size, height=size, radius=radius)

    def contains(self, vector: Vector2) -> bool:
        """Строгая проверка: точки на границе не входят."""
        return vector.is_within_rect(self.width, self.height, self.radius)

    def clamp(self, vector: Vector2) -> Vector2:
        """
        In-place clamp вектора в прямоугольник.

        Returns:
            Тот же экземпляр vector
        """
        return vector.clamp_to_rect(self.width, self.height, self.radius)

    def random_point(self, rng: Optional[RandomSource] = None) -> Vector2:
        """
        Случайная точка в [0, width) × [0, height).

        radius не учитывается, как и в Vector2.random_in_box.
        """
        return Vector2.random_in_box(self.width, self.height, rng=rng)
