"""Random source that replays scripted draws before falling back to a seeded RNG."""

import random
from typing import Iterable, List


class ScriptedRandom:
    def __init__(self, draws: Iterable[int], seed: int = 0) -> None:
        self.draws: List[int] = list(draws)
        self.fallback = random.Random(seed)
        self.calls: List[tuple] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if not self.draws:
            return self.fallback.randint(a, b)
        value = self.draws.pop(0)
        if not a <= value <= b:
            raise AssertionError(f"scripted draw {value} outside [{a}, {b}]")
        return value

    def shuffle(self, x) -> None:
        # Keep the given order so scripts can target words predictably.
        pass
