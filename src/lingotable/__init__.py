"""lingotable: runtime string translation with fuzzy-text tracking."""

from .codec import LocaleFileCodec
from .config import BASE_LOCALE, FUZZY_EXTENSION, LOCALE_EXTENSION, TranslatorSettings
from .exceptions import (
    FlushWriteError,
    LingotableError,
    LocaleFileError,
    MalformedLocaleFileError,
    MissingLocaleFileError,
)
from .i18n import Translator
from .misses import MissTracker
from .models import FlushReport, LoadReport
from .ops import StructuredLogger
from .store import LocaleStore

__all__ = [
    "BASE_LOCALE",
    "FUZZY_EXTENSION",
    "LOCALE_EXTENSION",
    "FlushReport",
    "FlushWriteError",
    "LingotableError",
    "LoadReport",
    "LocaleFileCodec",
    "LocaleFileError",
    "LocaleStore",
    "MalformedLocaleFileError",
    "MissTracker",
    "MissingLocaleFileError",
    "StructuredLogger",
    "Translator",
    "TranslatorSettings",
]
