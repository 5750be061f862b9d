"""Shared constants for PhotoFix."""

from __future__ import annotations

# User-facing validation messages
MSG_CORRUPT = "图片损坏"
MSG_WRONG_FORMAT = "格式为{actual}"
MSG_WRONG_SIZE = "尺寸为{width}*{height}应为{expected_width}*{expected_height}"
MSG_NOT_TRANSPARENT = "非透明底"

# Shown when neither the MIME type nor the decoder names a format
FORMAT_UNKNOWN = "UNKNOWN"

# User-facing fix messages
MSG_BACKGROUND_TOO_COMPLEX = "背景复杂无法自动修复"
MSG_ENCODE_FAILED = "转换失败"
MSG_FIX_FAILED = "修复失败: {reason}"
MSG_LOAD_FAILED = "图片加载失败"

# User-facing text messages
MSG_TEXT_EMPTY = "内容为空"
MSG_TEXT_TOO_LONG = "有{count}个字符超过{max_chars}"

# Photo profiles: (format, (width, height), need_transparent)
PHOTO_PRESETS = {
    "ID Photo (400x400)": ("PNG", (400, 400), True),
    "Life Photo (900x1200)": ("PNG", (900, 1200), True),
}

# Caption limit for life photos, in weighted characters
LIFE_PHOTO_CAPTION_MAX_CHARS = 59

# Code point ranges that count as one full character
FULL_WIDTH_RANGES = (
    (0x4E00, 0x9FFF),  # CJK unified ideographs
    (0x3000, 0x303F),  # CJK symbols and punctuation
    (0xFF00, 0xFFEF),  # Half-width and full-width forms
)


def format_from_mime(mime_type: str | None) -> str | None:
    """Return the uppercased MIME subtype, e.g. ``image/jpeg`` -> ``JPEG``."""
    if not mime_type or "/" not in mime_type:
        return None
    subtype = mime_type.split("/", 1)[1].strip()
    return subtype.upper() or None
