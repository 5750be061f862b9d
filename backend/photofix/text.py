"""Weighted character counting for mixed Chinese/Latin captions."""

from __future__ import annotations

from .constants import FULL_WIDTH_RANGES, MSG_TEXT_EMPTY, MSG_TEXT_TOO_LONG
from .models import TextVerdict


def _is_full_width(char: str) -> bool:
    code = ord(char)
    return any(lo <= code <= hi for lo, hi in FULL_WIDTH_RANGES)


def count_text_chars(text: str | None) -> float:
    """Count characters with CJK and full-width forms as 1 and all else as 0.5."""
    if not text:
        return 0
    return sum(1 if _is_full_width(ch) else 0.5 for ch in text)


def _format_count(count: float) -> str:
    return str(int(count)) if float(count).is_integer() else str(count)


def check_text(text: str | None, max_chars: float) -> TextVerdict:
    """Check a caption against its weighted length limit.

    Args:
        text: Caption text.
        max_chars: Maximum weighted character count.

    Returns:
        TextVerdict with the weighted count.
    """
    if not text or not text.strip():
        return TextVerdict(valid=False, char_count=0, max_chars=max_chars, errors=[MSG_TEXT_EMPTY])

    count = count_text_chars(text)
    errors: list[str] = []
    if count > max_chars:
        errors.append(
            MSG_TEXT_TOO_LONG.format(count=_format_count(count), max_chars=_format_count(max_chars))
        )

    return TextVerdict(valid=not errors, char_count=count, max_chars=max_chars, errors=errors)
