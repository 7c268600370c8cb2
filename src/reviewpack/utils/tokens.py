"""Token estimation and line splitting shared by the chunker and analyzers."""

import math

CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    """Estimate token count at a fixed ratio of 4 characters per token.

    The estimate is deterministic and monotone: a text never estimates lower
    than any of its prefixes.
    """
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def split_lines(text: str) -> list[str]:
    """Split text on newlines, keeping each line's terminator.

    ``"".join(split_lines(text)) == text`` always holds. A trailing newline does
    not produce an extra empty line, and empty text yields no lines.
    """
    lines = [line + "\n" for line in text.split("\n")]
    lines[-1] = lines[-1][:-1]
    if not lines[-1]:
        lines.pop()
    return lines


def line_starts(lines: list[str]) -> list[int]:
    """Return the character offset at which each line begins."""
    offsets = []
    position = 0
    for line in lines:
        offsets.append(position)
        position += len(line)
    return offsets
