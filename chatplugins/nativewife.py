"""Per-group collection of wife pictures kept on local disk."""

from __future__ import annotations

import hashlib
import random
from datetime import date
from os import PathLike
from pathlib import Path
from typing import Union

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
NO_WIFE = "一个wife也没有哦~"
NO_NAME = "没有找到wife的名字！"


def _base36(n: int) -> str:
    if n == 0:
        return "0"
    sign = "-" if n < 0 else ""
    n = abs(n)
    digits = []
    while n:
        n, r = divmod(n, 36)
        digits.append(_DIGITS[r])
    return sign + "".join(reversed(digits))


class WifeStore:
    """Pictures stored as base/<group id in base 36>/<name>."""

    def __init__(self, base: Union[str, PathLike]) -> None:
        self.base = Path(base)

    def folder(self, gid: int) -> Path:
        return self.base / _base36(int(gid))

    def names(self, gid: int) -> list[str]:
        """The group's wife names, sorted; empty when the group has none."""
        try:
            return sorted(entry.name for entry in self.folder(gid).iterdir())
        except FileNotFoundError:
            return []

    def add(self, gid: int, name: str, data: bytes) -> Path:
        """Save a picture under ``name`` and return its path."""
        if not name:
            raise ValueError(NO_NAME)
        folder = self.folder(gid)
        folder.mkdir(mode=0o755, exist_ok=True)
        path = folder / name
        path.write_bytes(data)
        return path

    def remove(self, gid: int, name: str) -> None:
        """Delete a picture; FileNotFoundError when there is none of that name."""
        if not name:
            raise ValueError(NO_NAME)
        (self.folder(gid) / name).unlink()

    def draw(self, gid: int, nickname: str, today: date) -> str:
        """Today's wife of ``nickname``: fixed for the same name and day."""
        names = self.names(gid)
        if not names:
            raise LookupError(NO_WIFE)
        if len(names) == 1:
            return names[0]
        key = f"{nickname}{today.year}{today.month}{today.day}".encode("utf-8")
        seed = int.from_bytes(hashlib.md5(key).digest()[:8], "little")
        return names[random.Random(seed).randrange(len(names))]


def extract_name(text: str, command: str) -> str:
    """The name after the last ``command`` in ``text``, without spaces or slashes."""
    text = text.replace(" ", "")
    index = text.rfind(command)
    if index >= 0:
        text = text[index + len(command):]
    return text.replace("/", "").replace("\\", "")


def can_add(data: int, gid: int, is_admin: bool) -> bool:
    """Whether a group member may add pictures: everyone when allowed, else admins."""
    if gid <= 0:
        return False
    return data & 1 == 1 or is_admin