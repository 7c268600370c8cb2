"""Utility functions for ReviewPack."""

from reviewpack.utils.binary import (
    decode_source,
    detect_binary,
    is_binary_content,
    is_binary_extension,
)
from reviewpack.utils.tokens import CHARS_PER_TOKEN, estimate_tokens, split_lines

__all__ = [
    "CHARS_PER_TOKEN",
    "decode_source",
    "detect_binary",
    "estimate_tokens",
    "is_binary_content",
    "is_binary_extension",
    "split_lines",
]
