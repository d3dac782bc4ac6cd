"""Source text coordinates."""

from tydpy.text.text import ZERO_POSITION, TextPosition, TextRange, slice_text_range

__all__ = [
    "ZERO_POSITION",
    "TextPosition",
    "TextRange",
    "slice_text_range",
]
