"""
Random Source — Injectable Uniform Random Generator

Источник равномерно распределённых чисел в [0, 1) для фабрик Vector2
(random_angle, random_magnitude_and_angle, random_in_box) и для
fallback-направления в Vector2.set_magnitude.

Любой callable без аргументов, возвращающий float в [0, 1), является
RandomSource. По умолчанию используется глобальный генератор random.random.

Для воспроизводимых прогонов:
- SeededRandomSource(seed): собственный random.Random, не трогает глобальное состояние
- SequenceRandomSource(values): воспроизводит фиксированную последовательность
"""

import random
from typing import Callable, Iterable, Optional

RandomSource = Callable[[], float]


def default_random_source() -> float:
    """Глобальный генератор процесса (random.random)."""
    return random.random()


def resolve_random_source(rng: Optional[RandomSource]) -> RandomSource:
    """
    Выбор источника: переданный rng или default_random_source.

    Args:
        rng: Источник случайных чисел или None

    Returns:
        Callable, возвращающий float в [0, 1)
    """
    if rng is None:
        return default_random_source
    return rng


class SeededRandomSource:
    """
    Детерминированный источник на основе собственного random.Random.

    Одинаковый seed → одинаковая последовательность значений.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._random = random.Random(seed)

    def __call__(self) -> float:
        return self._random.random()


class SequenceRandomSource:
    """
    Источник, воспроизводящий заранее заданные значения по порядку.

    Используется в тестах, чтобы зафиксировать каждую выборку фабрик Vector2.

    Raises:
        ValueError: Если значение вне [0, 1)
        RuntimeError: Если последовательность исчерпана
    """

    def __init__(self, values: Iterable[float]):
        self._values = list(values)
        for value in self._values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Random value must be in [0, 1), got {value}")
        self._index = 0

    @property
    def remaining(self) -> int:
        """Количество ещё не выданных значений."""
        return len(self._values) - self._index

    def __call__(self) -> float:
        if self._index >= len(self._values):
            raise RuntimeError(
                f"SequenceRandomSource exhausted after {len(self._values)} values"
            )
        value = self._values[self._index]
        self._index += 1
        return value
