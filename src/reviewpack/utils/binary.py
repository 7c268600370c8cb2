"""Binary file detection and text decoding for review inputs."""

from pathlib import Path

from reviewpack.errors import InputError

# Extensions that never hold reviewable source text
BINARY_EXTENSIONS = {
    ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ico", ".webp", ".tiff",
    ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx",
    ".zip", ".tar", ".gz", ".rar", ".7z", ".bz2", ".xz",
    ".exe", ".dll", ".so", ".dylib", ".bin",
    ".mp3", ".mp4", ".wav", ".mov",
    ".pyc", ".pyo", ".class", ".o", ".obj", ".wasm",
    ".ttf", ".otf", ".woff", ".woff2",
    ".db", ".sqlite", ".sqlite3", ".reviewpack",
}

# Printable ASCII plus tab, LF and CR
_TEXT_BYTES = frozenset(range(32, 127)) | {9, 10, 13}


def is_binary_extension(path: str | Path) -> bool:
    """Check if file extension indicates binary content."""
    return Path(path).suffix.lower() in BINARY_EXTENSIONS


def is_binary_content(content: bytes, sample_size: int = 8192) -> bool:
    """Detect binary content from NUL bytes or a high share of control bytes.

    Bytes >= 0x80 are not counted against the sample, since UTF-8 source
    files routinely contain them.

    Args:
        content: Raw file content
        sample_size: Number of bytes to sample from the start

    Returns:
        True if content appears to be binary
    """
    if not content:
        return False

    sample = content[:sample_size]
    if b"\x00" in sample:
        return True

    control = sum(1 for byte in sample if byte < 128 and byte not in _TEXT_BYTES)
    return (control / len(sample)) > 0.30


def detect_binary(path: str | Path, content: bytes) -> bool:
    """Detect if a file is binary using both extension and content analysis."""
    if is_binary_extension(path):
        return True
    return is_binary_content(content)


def decode_source(path: str | Path, content: bytes) -> str:
    """Decode raw bytes as UTF-8 source text.

    Args:
        path: File path, used for binary detection and error messages
        content: Raw file content

    Returns:
        The decoded text

    Raises:
        InputError: If the content is binary or not valid UTF-8
    """
    if detect_binary(path, content):
        raise InputError(f"Not a text file: {path}")
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputError(f"Not valid UTF-8: {path} ({exc.reason} at byte {exc.start})") from exc
