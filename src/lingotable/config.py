"""Configuration constants for lingotable."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

BASE_LOCALE = "en_US"
LOCALE_EXTENSION = ".json"
FUZZY_EXTENSION = ".fuzzy"
FUZZY_MARKER = "~"

LOCALE_DIR_ENV = "LINGOTABLE_LOCALE_DIR"
DEFAULT_LOCALE_ENV = "LINGOTABLE_DEFAULT_LOCALE"
FUZZY_DIR_ENV = "LINGOTABLE_FUZZY_DIR"
LOG_FILE_ENV = "LINGOTABLE_LOG_FILE"


@dataclass(slots=True)
class TranslatorSettings:
    """Startup options for a :class:`~lingotable.i18n.Translator`."""

    locale_dir: Optional[Path] = None
    default_locale: str = BASE_LOCALE
    fuzzy_dir: Path = Path(".")
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "TranslatorSettings":
        env = os.environ if environ is None else environ
        locale_dir = env.get(LOCALE_DIR_ENV) or None
        log_file = env.get(LOG_FILE_ENV) or None
        return cls(
            locale_dir=Path(locale_dir) if locale_dir else None,
            default_locale=env.get(DEFAULT_LOCALE_ENV) or BASE_LOCALE,
            fuzzy_dir=Path(env.get(FUZZY_DIR_ENV) or "."),
            log_file=Path(log_file) if log_file else None,
        )


__all__ = [
    "BASE_LOCALE",
    "LOCALE_EXTENSION",
    "FUZZY_EXTENSION",
    "FUZZY_MARKER",
    "LOCALE_DIR_ENV",
    "DEFAULT_LOCALE_ENV",
    "FUZZY_DIR_ENV",
    "LOG_FILE_ENV",
    "TranslatorSettings",
]
