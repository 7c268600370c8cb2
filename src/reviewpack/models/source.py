"""Source files and language-family detection."""

from dataclasses import dataclass
from pathlib import Path

# Extension -> language family
LANGUAGE_EXTENSIONS: dict[str, str] = {
    ".py": "python",
    ".pyi": "python",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".go": "go",
}

DEFAULT_LANGUAGE = "text"


def language_for_path(path: str | Path) -> str:
    """Return the language family for a file path, from its extension."""
    return LANGUAGE_EXTENSIONS.get(Path(path).suffix.lower(), DEFAULT_LANGUAGE)


@dataclass(frozen=True)
class SourceFile:
    """A source file read once at the start of a review. Never mutated."""

    path: str
    text: str
    language: str = DEFAULT_LANGUAGE

    @classmethod
    def from_text(cls, path: str | Path, text: str) -> "SourceFile":
        """Build a SourceFile, detecting the language from the path."""
        return cls(path=str(path), text=text, language=language_for_path(path))
