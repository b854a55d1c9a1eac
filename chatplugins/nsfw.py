"""Verdicts on image classification scores."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

THRESHOLD = 0.3


@dataclass(frozen=True)
class Prediction:
    """Classifier scores of one picture, each in 0..1."""

    drawings: float = 0.0
    hentai: float = 0.0
    neutral: float = 0.0
    porn: float = 0.0
    sexy: float = 0.0


def _flags(p: Prediction) -> list[str]:
    labels = (("hentai", p.hentai), ("porn", p.porn), ("hso", p.sexy))
    return [label for label, score in labels if score > THRESHOLD]


def judge(p: Prediction) -> str:
    """The verdict sent when someone asks for a score."""
    if p.neutral > THRESHOLD:
        return "普通哦"
    kind = "二次元" if p.drawings > THRESHOLD or p.neutral < THRESHOLD else "三次元"
    return kind + "".join(f" {flag}" for flag in _flags(p))


def auto_judge(p: Prediction) -> Optional[str]:
    """The unprompted verdict, or None when the picture needs no remark."""
    if p.neutral > THRESHOLD:
        return None
    flags = _flags(p)
    if not flags:
        return None
    kind = "二次元" if p.drawings > THRESHOLD else "三次元"
    return kind + "".join(f" {flag}" for flag in flags)