"""Expansion of pinyin-initial abbreviations."""

from __future__ import annotations

import json
import re
from typing import Union

GUESS_URL = "https://lab.magiconch.com/api/nbnhhsh/guess"
COMMAND = re.compile(r"^[?？]{1,2} ?([a-z0-9]+)$")


def _as_text(value: object) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    return json.dumps(value, ensure_ascii=False)


def parse_nbnhhsh(data: Union[str, bytes]) -> list[str]:
    """Meanings from the service's reply: "trans" if present, else "inputting"."""
    try:
        parsed = json.loads(data)
    except (ValueError, TypeError):
        return []
    if not isinstance(parsed, list) or not parsed or not isinstance(parsed[0], dict):
        return []
    first = parsed[0]
    values = first["trans"] if "trans" in first else first.get("inputting")
    if not isinstance(values, list):
        return []
    return [_as_text(value) for value in values]