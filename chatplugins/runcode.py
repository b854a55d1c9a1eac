"""Output trimming for code run results."""

from __future__ import annotations

MAX_LINES = 30
MAX_CHARS = 1000
TRUNCATION = "\n............\n............"


def cut_too_long(text: str) -> str:
    """Cut output after more than 30 line breaks or 1000 characters."""
    count = 0
    for i, char in enumerate(text):
        if char == "\r" and text[i + 1 : i + 2] == "\n":
            pass  # the following "\n" counts for the pair
        elif char in "\r\n":
            count += 1
        if count > MAX_LINES or i > MAX_CHARS:
            return text[: i - 1] + TRUNCATION
    return text