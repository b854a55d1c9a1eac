"""Reincarnation simulator: weighted random birthplace and gender."""

from __future__ import annotations

import json
import random
from bisect import bisect_left
from itertools import accumulate
from typing import Iterable, Sequence

GENDERS: tuple[tuple[str, int], ...] = (
    ("男孩子", 50707),
    ("女孩子", 48292),
    ("雌雄同体", 1001),
)
SURVIVAL_THRESHOLD = 1 << 27
FAILURE_TEXT = "投胎失败！\n您没能活到出生，祝您下次好运！"


class _Chooser:
    """Picks items with probability proportional to integer weights."""

    def __init__(self, choices: Iterable[tuple[str, int]]) -> None:
        pairs = list(choices)
        self.items = [item for item, _ in pairs]
        self.totals = list(accumulate(max(int(w), 0) for _, w in pairs))
        if not self.totals or self.totals[-1] <= 0:
            raise ValueError("no choice with a positive weight")

    def pick(self, rng: random.Random) -> str:
        r = rng.randrange(self.totals[-1]) + 1
        return self.items[bisect_left(self.totals, r)]


class Reborn:
    """Holds the country weights and draws a new life."""

    def __init__(self, areas: Iterable[tuple[str, float]]) -> None:
        self.areas: Sequence[tuple[str, float]] = list(areas)
        self._countries = _Chooser(
            (name, int(weight * 1e9)) for name, weight in self.areas
        )
        self._genders = _Chooser(GENDERS)

    @classmethod
    def from_json(cls, text: str) -> "Reborn":
        """Build from a JSON list of {"name": ..., "weight": ...} objects."""
        data = json.loads(text)
        return cls((entry["name"], float(entry["weight"])) for entry in data)

    def country(self, rng: random.Random) -> str:
        return self._countries.pick(rng)

    def gender(self, rng: random.Random) -> str:
        return self._genders.pick(rng)

    def reborn(self, rng: random.Random) -> str:
        """Return the announcement of a birth, or of dying before it."""
        if rng.getrandbits(31) > SURVIVAL_THRESHOLD:
            return f"投胎成功！\n您出生在 {self.country(rng)}, 是 {self.gender(rng)}。"
        return FAILURE_TEXT