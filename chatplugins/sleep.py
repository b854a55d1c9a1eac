"""Good-night and good-morning bookkeeping: who slept or woke, and when."""

from __future__ import annotations

import sqlite3
import threading
from datetime import datetime, timedelta
from os import PathLike
from typing import Union

EVENING_HOUR = 21
LATE_NIGHT_HOUR = 3
MORNING_HOUR = 6
NOON_HOUR = 12

_TABLE_SQL = (
    "CREATE TABLE IF NOT EXISTS sleep_manage ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT, "
    "group_id INTEGER NOT NULL, "
    "user_id INTEGER NOT NULL, "
    "sleep_time TEXT NOT NULL)"
)


def _stamp(t: datetime) -> str:
    return t.isoformat(sep=" ", timespec="microseconds")


def _evening_start(now: datetime) -> datetime:
    """Start of tonight's counting window: 21:00, or no lower bound by day."""
    if now.hour >= EVENING_HOUR:
        return now.replace(hour=EVENING_HOUR, minute=0, second=0)
    if now.hour <= LATE_NIGHT_HOUR:
        return (now - timedelta(days=1)).replace(hour=EVENING_HOUR, minute=0, second=0)
    return datetime.min


def _morning_start(now: datetime) -> datetime:
    return now.replace(hour=MORNING_HOUR, minute=0, second=0)


class SleepDB:
    """Last sleep or wake time of every user in every group."""

    def __init__(self, path: Union[str, PathLike]) -> None:
        self._lock = threading.RLock()
        self._db = sqlite3.connect(str(path), check_same_thread=False)
        with self._lock, self._db:
            self._db.execute(_TABLE_SQL)

    def __enter__(self) -> "SleepDB":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        with self._lock:
            self._db.close()

    def _mark(self, gid: int, uid: int, now: datetime, since: datetime) -> tuple[int, timedelta]:
        key = (int(gid), int(uid))
        with self._lock, self._db:
            row = self._db.execute(
                "SELECT sleep_time FROM sleep_manage "
                "WHERE group_id = ? AND user_id = ? ORDER BY id LIMIT 1",
                key,
            ).fetchone()
            if row is None:
                elapsed = timedelta(0)
                self._db.execute(
                    "INSERT INTO sleep_manage (group_id, user_id, sleep_time) "
                    "VALUES (?, ?, ?)",
                    (*key, _stamp(now)),
                )
            else:
                elapsed = now - datetime.fromisoformat(row[0])
                self._db.execute(
                    "UPDATE sleep_manage SET sleep_time = ? "
                    "WHERE group_id = ? AND user_id = ?",
                    (_stamp(now), *key),
                )
            (position,) = self._db.execute(
                "SELECT COUNT(*) FROM sleep_manage "
                "WHERE group_id = ? AND sleep_time <= ? AND sleep_time >= ?",
                (int(gid), _stamp(now), _stamp(since)),
            ).fetchone()
        return int(position), elapsed

    def sleep(self, gid: int, uid: int, now: datetime) -> tuple[int, timedelta]:
        """Record going to bed; return (place among tonight's sleepers, time awake)."""
        return self._mark(gid, uid, now, _evening_start(now))

    def get_up(self, gid: int, uid: int, now: datetime) -> tuple[int, timedelta]:
        """Record getting up; return (place among this morning's risers, time asleep)."""
        return self._mark(gid, uid, now, _morning_start(now))


def split_duration(delta: timedelta) -> tuple[int, int, int]:
    """Split into whole (hours, minutes, seconds), truncating toward zero."""
    micro = delta // timedelta(microseconds=1)
    sign = -1 if micro < 0 else 1
    seconds = abs(micro) // 1_000_000
    hours, rest = divmod(seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return sign * hours, sign * minutes, sign * seconds


def is_morning(now: datetime) -> bool:
    """Good mornings count from 6 to 12 o'clock."""
    return MORNING_HOUR <= now.hour <= NOON_HOUR


def is_evening(now: datetime) -> bool:
    """Good nights count from 21 o'clock to 3 o'clock."""
    return now.hour >= EVENING_HOUR or now.hour <= LATE_NIGHT_HOUR