"""Dictionary-matched replies: mode bits, trigger probability and templates."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Iterable, Optional

import yaml

MODE_MASK = 3
PROBABILITY_SHIFT = 59


class Mode(IntEnum):
    """Which reply dictionary a chat uses."""

    KIMO = 0
    DERE = 1
    KAWA = 2


def set_mode(data: int, mode: Mode) -> int:
    """Replace the mode bits of the chat's stored data."""
    return (data & ~MODE_MASK) | int(mode)


def set_probability(data: int, digit: int) -> int:
    """Store a trigger probability of 0.``digit``; the digit must be 1 to 8."""
    if digit <= 0 or digit >= 9:
        raise ValueError("概率越界")
    return (data & MODE_MASK) | ((digit - 1) << PROBABILITY_SHIFT)


def can_match(data: int, mode: Mode, rng: random.Random) -> bool:
    """Whether a reply from ``mode``'s dictionary should be tried this time."""
    return data & MODE_MASK == int(mode) and rng.randrange(10) <= data >> PROBABILITY_SHIFT


def load_simai(text: str) -> tuple[dict[str, list[str]], dict[str, list[str]]]:
    """Read the YAML word list; return its (tsundere, cute) dictionaries."""
    data = yaml.safe_load(text) or {}
    return dict(data.get("傲娇") or {}), dict(data.get("可爱") or {})


def match(text: str, keys: Iterable[str]) -> Optional[str]:
    """The key that the whole text equals, else the leftmost longest key in it."""
    keyset = {key for key in keys if key}
    if text in keyset:
        return text
    by_length = sorted(keyset, key=len, reverse=True)
    for start in range(len(text)):
        for key in by_length:
            if text.startswith(key, start):
                return key
    return None


def render_reply(template: str, name: str, me: str) -> list[str]:
    """Fill in the names and split the reply into the messages to send."""
    text = template.replace("{name}", name).replace("{me}", me)
    return text.split("{segment}")