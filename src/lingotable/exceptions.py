"""Custom exception hierarchy for the lingotable package."""

from __future__ import annotations

from pathlib import Path


class LingotableError(Exception):
    """Base class for all lingotable specific errors."""


class LocaleFileError(LingotableError):
    """Raised when a locale file cannot be turned into translation entries."""

    def __init__(self, message: str, *, path: Path | str) -> None:
        super().__init__(message)
        self.path = Path(path)


class MissingLocaleFileError(LocaleFileError):
    """Raised when a requested locale file or directory does not exist."""


class MalformedLocaleFileError(LocaleFileError):
    """Raised when a locale file is not a flat JSON object of strings."""


class FlushWriteError(LingotableError):
    """Describes a fuzzy file that could not be written for one locale."""

    def __init__(self, message: str, *, locale: str, path: Path | str) -> None:
        super().__init__(message)
        self.locale = locale
        self.path = Path(path)
