"""
Стратегии выбора кандидатов.

TeamDirectory принимает любой объект с методом ``sample(population, k)``,
который возвращает k различных элементов population. В тестах подставляется
детерминированная выборка.
"""
import random
from typing import Protocol, Sequence


class Sampler(Protocol):
    def sample(self, population: Sequence[str], k: int) -> list:
        ...


class RandomSampler:
    """Равновероятная выборка без возвращения"""

    def __init__(self, seed=None):
        self._random = random.Random(seed)

    def sample(self, population: Sequence[str], k: int) -> list:
        k = min(k, len(population))
        if k <= 0:
            return []
        return self._random.sample(list(population), k)
