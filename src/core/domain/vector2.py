"""
Vector2 — Изменяемый двумерный вектор

Value-тип с двумя float-компонентами (x, y) и набором операций
векторной алгебры для графики, физики и симуляций.

Два семейства операций:
- In-place мутаторы: изменяют self и возвращают self (fluent chaining).
  Аргумент (other) никогда не изменяется.
- Чистые запросы: возвращают новое значение или скаляр, self не меняется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Единственная операция, бросающая исключение: assert_finite → NumericError
2. Деление на ноль распространяет ±Inf/NaN (IEEE-754), не бросает исключение
3. set_magnitude на нулевом векторе выбирает случайное направление (через rng)
4. is_within_rect использует строгие неравенства; clamp_to_rect не трогает
   значения, лежащие ровно на границе. Эти соглашения намеренно разные.

Example:
    >>> a = Vector2(4, 0)
    >>> b = Vector2(0, 3)
    >>> a.copy().add(b).magnitude()
    5.0
"""

import logging
import math
from typing import Iterator, Optional

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    floor_float,
    ieee_divide,
    is_close,
    is_nan,
    round_half_away_from_zero,
)
from src.core.math.random_source import RandomSource, resolve_random_source

logger = logging.getLogger("vec2d.vector2")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumericError(ArithmeticError):
    """
    Обнаружена невалидная (NaN) компонента вектора.

    Бросается только из Vector2.assert_finite. Это диагностическое
    утверждение для вызывающего кода, а не фатальная ошибка процесса.
    """

    pass


# =============================================================================
# VECTOR2
# =============================================================================


class Vector2:
    """
    Двумерный вектор с компонентами x, y (float).

    Идентичность определяется значением: два вектора с равными (x, y)
    взаимозаменяемы. Для разрыва aliasing используйте copy().
    """

    __slots__ = ("x", "y")

    def __init__(self, x: float, y: float):
        # Без валидации: NaN/Inf допустимы
        self.x = float(x)
        self.y = float(y)

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def random_angle(
        cls, magnitude: float = 1.0, rng: Optional[RandomSource] = None
    ) -> "Vector2":
        """
        Вектор со случайным направлением и заданной длиной.

        Угол выбирается равномерно из [0, 2π).

        Args:
            magnitude: Длина нового вектора (default: 1.0)
            rng: Источник случайных чисел в [0, 1) (default: random.random)

        Returns:
            Новый Vector2
        """
        rng = resolve_random_source(rng)
        angle = rng() * math.pi * 2
        return cls(math.cos(angle) * magnitude, math.sin(angle) * magnitude)

    @classmethod
    def random_magnitude_and_angle(
        cls, max_magnitude: float = 1.0, rng: Optional[RandomSource] = None
    ) -> "Vector2":
        """
        Вектор со случайным направлением и случайной длиной в [0, max_magnitude).

        Длина распределена равномерно по линейной шкале (не по площади диска):
        точки сгущаются к центру.

        Порядок выборок из rng: сначала угол, затем длина.

        Args:
            max_magnitude: Верхняя граница длины (default: 1.0)
            rng: Источник случайных чисел в [0, 1)

        Returns:
            Новый Vector2
        """
        rng = resolve_random_source(rng)
        return cls.random_angle(rng=rng).multiply(rng() * max_magnitude)

    @classmethod
    def random_in_box(
        cls,
        width: float,
        height: Optional[float] = None,
        rng: Optional[RandomSource] = None,
    ) -> "Vector2":
        """
        Вектор со случайной позицией в прямоугольнике [0, width) × [0, height).

        Args:
            width: Верхняя граница для x
            height: Верхняя граница для y (default: width)
            rng: Источник случайных чисел в [0, 1)

        Returns:
            Новый Vector2
        """
        if height is None:
            height = width
        rng = resolve_random_source(rng)
        x = rng() * width
        y = rng() * height
        return cls(x, y)

    def copy(self) -> "Vector2":
        """Новый экземпляр с теми же компонентами."""
        return type(self)(self.x, self.y)

    # -------------------------------------------------------------------------
    # Мутаторы: присваивание и покомпонентная арифметика
    # -------------------------------------------------------------------------

    def set(self, other: "Vector2") -> "Vector2":
        self.x = other.x
        self.y = other.y
        return self

    def set_xy(self, x: float, y: float) -> "Vector2":
        self.x = float(x)
        self.y = float(y)
        return self

    def add(self, other: "Vector2") -> "Vector2":
        self.x += other.x
        self.y += other.y
        return self

    def add_xy(self, x: float, y: float) -> "Vector2":
        self.x += x
        self.y += y
        return self

    def subtract(self, other: "Vector2") -> "Vector2":
        self.x -= other.x
        self.y -= other.y
        return self

    def subtract_xy(self, x: float, y: float) -> "Vector2":
        self.x -= x
        self.y -= y
        return self

    def multiply(self, scalar: float) -> "Vector2":
        self.x = self.x * scalar
        self.y = self.y * scalar
        return self

    def divide(self, scalar: float) -> "Vector2":
        """
        Деление на скаляр.

        Деление на ноль не защищено: компоненты становятся ±Inf или NaN.
        """
        self.x = ieee_divide(self.x, scalar)
        self.y = ieee_divide(self.y, scalar)
        return self

    def floor(self) -> "Vector2":
        """Округление обеих компонент вниз (к -Inf)."""
        self.x = floor_float(self.x)
        self.y = floor_float(self.y)
        return self

    def round(self) -> "Vector2":
        """Округление обеих компонент до ближайшего целого (половины от нуля)."""
        self.x = round_half_away_from_zero(self.x)
        self.y = round_half_away_from_zero(self.y)
        return self

    # -------------------------------------------------------------------------
    # Мутаторы: длина и направление
    # -------------------------------------------------------------------------

    def set_magnitude(
        self, new_magnitude: float, rng: Optional[RandomSource] = None
    ) -> "Vector2":
        """
        Установка длины вектора с сохранением направления.

        У нулевого вектора направления нет, поэтому оно выбирается случайно
        (Vector2.random_angle). Для детерминизма передайте rng.

        Args:
            new_magnitude: Новая длина
            rng: Источник случайных чисел для нулевого вектора

        Returns:
            self
        """
        magnitude = self.magnitude()
        if magnitude == 0:
            logger.debug(
                "set_magnitude(%s) on zero vector; picking random direction",
                new_magnitude,
            )
            return self.set(type(self).random_angle(rng=rng).multiply(new_magnitude))

        return self.multiply(new_magnitude / magnitude)

    def normalize(self, rng: Optional[RandomSource] = None) -> "Vector2":
        """Приведение к единичной длине: set_magnitude(1)."""
        return self.set_magnitude(1.0, rng=rng)

    def set_angle(self, angle: float) -> "Vector2":
        """
        Поворот вектора так, чтобы его угол стал равен angle (радианы).

        Длина сохраняется.
        """
        magnitude = self.magnitude()
        self.x = math.cos(angle) * magnitude
        self.y = math.sin(angle) * magnitude
        return self

    def rotate(self, delta_angle: float) -> "Vector2":
        """Поворот на delta_angle радиан против часовой стрелки."""
        return self.set_angle(self.angle() + delta_angle)

    def lerp_towards(self, other: "Vector2", t: float) -> "Vector2":
        """
        Линейная интерполяция к other на долю t расстояния.

        self += (other - self) * t

        t не ограничивается: 0 — остаться на месте, 1 — совпасть с other,
        значения вне [0, 1] экстраполируют.
        """
        return self.add(other.copy().subtract(self).multiply(t))

    def clamp_to_rect(
        self, width: float, height: float, radius: float = 0.0
    ) -> "Vector2":
        """
        Помещение вектора в прямоугольник [radius, width - radius] × [radius, height - radius].

        Компонента изменяется только если строго выходит за границу;
        значение ровно на границе не трогается. Сначала применяются нижние
        границы, затем верхние.

        Args:
            width: Ширина прямоугольника (от начала координат)
            height: Высота прямоугольника (от начала координат)
            radius: Отступ от каждой стороны, например радиус шара (default: 0)

        Returns:
            self
        """
        if self.x < radius:
            self.x = float(radius)
        if self.y < radius:
            self.y = float(radius)
        if self.x > width - radius:
            self.x = float(width - radius)
        if self.y > height - radius:
            self.y = float(height - radius)
        return self

    # -------------------------------------------------------------------------
    # Чистые запросы
    # -------------------------------------------------------------------------

    def squared_magnitude(self) -> float:
        # x * x даёт Inf при переполнении, x**2 бросает OverflowError
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.squared_magnitude())

    def distance_to(self, other: "Vector2") -> float:
        """Расстояние до other. Ни self, ни other не изменяются."""
        return self.copy().subtract(other).magnitude()

    def angle(self) -> float:
        """Угол вектора: atan2(y, x), диапазон (-π, π]."""
        return math.atan2(self.y, self.x)

    def dot_product(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def has_nan(self) -> bool:
        """True если хотя бы одна компонента NaN. Inf не считается."""
        return is_nan(self.x) or is_nan(self.y)

    def assert_finite(self) -> None:
        """
        Диагностическое утверждение: компоненты не NaN.

        Raises:
            NumericError: Если has_nan() == True
        """
        if self.has_nan():
            logger.warning("NaN component detected in %r", self)
            raise NumericError("Vector2 has NaN component")

    def is_within_rect(
        self, width: float, height: float, radius: float = 0.0
    ) -> bool:
        """
        Проверка, лежит ли вектор строго внутри (radius, width - radius) × (radius, height - radius).

        Точки на границе считаются снаружи.

        Args:
            width: Ширина прямоугольника (от начала координат)
            height: Высота прямоугольника (от начала координат)
            radius: Отступ от каждой стороны (default: 0)

        Returns:
            True если вектор внутри
        """
        return (
            self.x > radius
            and self.y > radius
            and self.x < width - radius
            and self.y < height - radius
        )

    def is_close(
        self,
        other: "Vector2",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Покомпонентное сравнение с толерантностью (см. numerical_safeguards.is_close)."""
        return is_close(self.x, other.x, rel_tol, abs_tol) and is_close(
            self.y, other.y, rel_tol, abs_tol
        )

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    # -------------------------------------------------------------------------
    # Python протокол
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    # Изменяемый тип: не хешируется
    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vector2(x={self.x!r}, y={self.y!r})"
