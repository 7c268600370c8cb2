"""Exception types raised by ReviewPack."""


class ReviewPackError(RuntimeError):
    """Base class for every error ReviewPack raises on purpose."""


class ConfigurationError(ReviewPackError):
    """Raised when budgets or settings are invalid. Values are never clamped."""


class InputError(ReviewPackError):
    """Raised when a source file cannot be read as UTF-8 text."""


class AlignmentError(ReviewPackError):
    """Raised when per-chunk findings and chunk offsets do not line up.

    This is a bookkeeping defect, not a recoverable condition: guessing an
    alignment would silently shift line numbers in the final report.
    """
