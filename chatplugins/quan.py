"""Parsing of the account weight lookup reply."""

from __future__ import annotations

import re
from typing import Union

QUAN_URL = "http://tc.tfkapi.top/API/qqqz.php?qq={}"
PREFIX_BYTES = 24
MAINTENANCE = "网站维护中"

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_quan(body: Union[bytes, str], qq: Union[int, str]) -> str:
    """Build the reply for account ``qq`` from the service's response body.

    The weight follows a fixed 24-byte prefix and must be an integer;
    otherwise ValueError is raised with the maintenance notice.
    """
    raw = body.encode("utf-8") if isinstance(body, str) else bytes(body)
    if len(raw) <= PREFIX_BYTES:
        raise ValueError(MAINTENANCE)
    weight = raw[PREFIX_BYTES:].decode("utf-8", errors="replace")
    if not _INTEGER.fullmatch(weight):
        raise ValueError(MAINTENANCE)
    return f"查询账号:{qq}\n查询状态:成功\n您的权重为:{weight}"