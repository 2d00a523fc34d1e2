"""Identifier allocation for workspace records."""
import itertools
import random
import uuid
from typing import Protocol

BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
MAX_RANDOM_LENGTH = 13


class IdGenerator(Protocol):
    def __call__(self) -> str: ...


class RandomIdGenerator:
    """
    Short pseudo-random base-36 ids.

    Not guaranteed unique; collisions are negligible at in-memory record counts.
    Pass a seeded random.Random for reproducible sequences.
    """

    def __init__(self, length: int = 11, rng: random.Random | None = None):
        if not 1 <= length <= MAX_RANDOM_LENGTH:
            raise ValueError(f"id length must be between 1 and {MAX_RANDOM_LENGTH}, got {length}")
        self.length = length
        self._rng = rng or random.Random()

    def __call__(self) -> str:
        return "".join(self._rng.choices(BASE36, k=self.length))


class CounterIdGenerator:
    """Monotonic ids: prefix + 1, 2, 3..."""

    def __init__(self, prefix: str = ""):
        self.prefix = prefix
        self._counter = itertools.count(1)

    def __call__(self) -> str:
        return f"{self.prefix}{next(self._counter)}"


class UuidIdGenerator:
    def __call__(self) -> str:
        return uuid.uuid4().hex


def make_id_generator(strategy: str = "random", length: int = 11) -> IdGenerator:
    """
    Build an id generator by name.

    Args:
        strategy: random, counter, or uuid
        length: Length of random ids (ignored by the other strategies)
    """
    if strategy == "random":
        return RandomIdGenerator(length)
    if strategy == "counter":
        return CounterIdGenerator()
    if strategy == "uuid":
        return UuidIdGenerator()
    raise ValueError(f"Unknown id strategy: {strategy}")
