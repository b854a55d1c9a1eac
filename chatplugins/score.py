"""Sign-in counts, experience levels and the score ranking."""

from __future__ import annotations

import sqlite3
import threading
from dataclasses import dataclass
from datetime import datetime
from os import PathLike
from typing import Optional, Union

BACKGROUND_URL = "https://img.moehu.org/pic.php?id=pc"
SIGNIN_MAX = 1
SCORE_MAX = 1200
RANK_ARRAY: tuple[int, ...] = (0, 10, 20, 50, 100, 200, 350, 550, 750, 1000, 1200)

_SCORE_TABLE_SQL = (
    "CREATE TABLE IF NOT EXISTS score ("
    "uid INTEGER PRIMARY KEY NOT NULL, "
    "score INTEGER NOT NULL DEFAULT 0)"
)
_SIGN_IN_TABLE_SQL = (
    "CREATE TABLE IF NOT EXISTS sign_in ("
    "uid INTEGER PRIMARY KEY NOT NULL, "
    "count INTEGER NOT NULL DEFAULT 0, "
    "updated_at TEXT NOT NULL)"
)


@dataclass(frozen=True)
class SignIn:
    """How often a user signed in, and when the record last changed."""

    uid: int
    count: int
    updated_at: datetime

    def signed_today(self, now: datetime) -> bool:
        """Whether the daily sign-in allowance is already used up on ``now``'s day."""
        return (
            self.count >= SIGNIN_MAX
            and self.updated_at.strftime("%Y%m%d") == now.strftime("%Y%m%d")
        )


class ScoreDB:
    """Experience scores and sign-in records kept in SQLite."""

    def __init__(self, path: Union[str, PathLike]) -> None:
        self._lock = threading.RLock()
        self._db = sqlite3.connect(str(path), check_same_thread=False)
        with self._lock, self._db:
            self._db.execute(_SCORE_TABLE_SQL)
            self._db.execute(_SIGN_IN_TABLE_SQL)

    def __enter__(self) -> "ScoreDB":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        with self._lock:
            self._db.close()

    def score_of(self, uid: int) -> int:
        """The user's score; a fresh record with score 0 is created if missing."""
        with self._lock, self._db:
            row = self._db.execute(
                "SELECT score FROM score WHERE uid = ?", (int(uid),)
            ).fetchone()
            if row is None:
                self._db.execute(
                    "INSERT INTO score (uid, score) VALUES (?, 0)", (int(uid),)
                )
                return 0
            return int(row[0])

    def set_score(self, uid: int, score: int) -> None:
        with self._lock, self._db:
            self._db.execute(
                "INSERT INTO score (uid, score) VALUES (?, ?) "
                "ON CONFLICT(uid) DO UPDATE SET score = excluded.score",
                (int(uid), int(score)),
            )

    def sign_in_of(self, uid: int) -> SignIn:
        """The user's sign-in record; a fresh one is created if missing."""
        with self._lock, self._db:
            row = self._db.execute(
                "SELECT count, updated_at FROM sign_in WHERE uid = ?", (int(uid),)
            ).fetchone()
            if row is None:
                created = datetime.now()
                self._db.execute(
                    "INSERT INTO sign_in (uid, count, updated_at) VALUES (?, 0, ?)",
                    (int(uid), created.isoformat()),
                )
                return SignIn(int(uid), 0, created)
            return SignIn(int(uid), int(row[0]), datetime.fromisoformat(row[1]))

    def set_sign_in(self, uid: int, count: int, now: datetime) -> None:
        with self._lock, self._db:
            self._db.execute(
                "INSERT INTO sign_in (uid, count, updated_at) VALUES (?, ?, ?) "
                "ON CONFLICT(uid) DO UPDATE SET count = excluded.count, "
                "updated_at = excluded.updated_at",
                (int(uid), int(count), now.isoformat()),
            )

    def top_scores(self, n: int) -> list[tuple[int, int]]:
        """The ``n`` highest (uid, score) pairs, best first."""
        with self._lock, self._db:
            rows = self._db.execute(
                "SELECT uid, score FROM score ORDER BY score DESC LIMIT ?", (int(n),)
            ).fetchall()
        return [(int(uid), int(score)) for uid, score in rows]


def get_rank(count: int) -> int:
    """The level reached with ``count`` experience, or -1 when out of range."""
    for rank, threshold in enumerate(RANK_ARRAY):
        if count == threshold:
            return rank
        if count < threshold:
            return rank - 1
    return -1


def next_rank_score(rank: int) -> int:
    """Experience needed for the level after ``rank``."""
    if rank < len(RANK_ARRAY) - 1:
        return RANK_ARRAY[rank + 1]
    return SCORE_MAX


def hour_word(t: datetime) -> str:
    """The greeting for the hour of ``t``."""
    h = t.hour
    if 6 <= h < 12:
        return "早上好"
    if 12 <= h < 14:
        return "中午好"
    if 14 <= h < 19:
        return "下午好"
    if 19 <= h < 24:
        return "晚上好"
    if 0 <= h < 6:
        return "凌晨好"
    return ""


def _optional_rank(level: Optional[int]) -> int:
    return get_rank(level) if level is not None else -1