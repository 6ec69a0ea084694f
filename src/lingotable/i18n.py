"""Runtime translation lookups with miss tracking."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional

from .codec import LocaleFileCodec
from .config import BASE_LOCALE, TranslatorSettings
from .exceptions import FlushWriteError, LocaleFileError
from .misses import MissTracker
from .models import FlushReport, LoadReport
from .ops import StructuredLogger
from .store import LocaleStore


class Translator:
    """Translate interface strings and remember the ones nobody translated yet.

    Each instance owns its own tables, so independent translators never share
    loaded locales or recorded misses.
    """

    def __init__(
        self,
        default_locale: str = BASE_LOCALE,
        *,
        translations: Optional[Mapping[str, Mapping[str, str]]] = None,
        fuzzy_dir: Path | str = ".",
        codec: Optional[LocaleFileCodec] = None,
        logger: Optional[StructuredLogger] = None,
    ) -> None:
        self.default_locale = default_locale
        self.fuzzy_dir = Path(fuzzy_dir)
        self._store = LocaleStore()
        self._misses = MissTracker()
        self._codec = codec or LocaleFileCodec()
        self._logger = logger or StructuredLogger()
        if translations:
            for locale, mapping in translations.items():
                if locale != BASE_LOCALE:
                    self._store.load(locale, mapping)

    @classmethod
    def from_settings(cls, settings: TranslatorSettings) -> "Translator":
        translator = cls(
            settings.default_locale,
            fuzzy_dir=settings.fuzzy_dir,
            logger=StructuredLogger(path=settings.log_file),
        )
        if settings.locale_dir is not None:
            translator.load_all_locales(settings.locale_dir)
        return translator

    # ------------------------------------------------------------------
    # Default locale
    # ------------------------------------------------------------------
    def get_default_locale(self) -> str:
        return self.default_locale

    def set_default_locale(self, locale: str) -> None:
        self.default_locale = locale

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def translate(self, text: str, locale: str = "") -> str:
        """Return ``text`` translated into ``locale`` (or the default locale).

        Untranslated strings come back unchanged and are queued for the next
        :meth:`flush_misses`. The base locale needs no translation file.
        """

        target_locale = locale or self.default_locale
        if target_locale == BASE_LOCALE:
            return text
        translated = self._store.lookup(target_locale, text)
        if translated is not None:
            return translated
        if text:
            self._misses.record(target_locale, text)
        return text

    _ = translate
    __call__ = translate

    def available_locales(self) -> tuple[str, ...]:
        return self._store.locales()

    def misses(self, locale: str) -> tuple[str, ...]:
        return self._misses.entries(locale)

    @property
    def logger(self) -> StructuredLogger:
        return self._logger

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load_locale_file(self, name: Path | str) -> str:
        """Load one locale file and return its locale identifier."""

        locale, entries = self._codec.decode_file(name)
        path = self._codec.locale_path(name)
        if locale == BASE_LOCALE:
            self._logger.log("base_locale_ignored", path=str(path))
            return locale
        self._store.load(locale, entries)
        self._logger.log("locale_loaded", locale=locale, path=str(path), entries=len(entries))
        return locale

    def load_all_locales(self, directory: Path | str) -> LoadReport:
        """Load every locale file in ``directory``, skipping files that fail."""

        report = LoadReport(directory=Path(directory))
        for path in self._codec.scan_directory(directory):
            try:
                report.loaded.append(self.load_locale_file(path))
            except LocaleFileError as exc:
                report.skipped[path] = str(exc)
                self._logger.log("locale_skipped", path=str(path), error=str(exc))
        self._logger.log(
            "locales_scanned",
            directory=str(report.directory),
            loaded=list(report.loaded),
            skipped=len(report.skipped),
        )
        return report

    # ------------------------------------------------------------------
    # Fuzzy export
    # ------------------------------------------------------------------
    def flush_misses(self, directory: Path | str | None = None) -> FlushReport:
        """Write a fuzzy file per locale with misses; I/O failures are logged, not raised."""

        target_dir = Path(directory) if directory is not None else self.fuzzy_dir
        report = FlushReport()
        for locale, strings in self._misses.items():
            path = self._codec.fuzzy_path(locale, target_dir)
            try:
                self._codec.write_fuzzy(locale, strings, target_dir)
            except (OSError, ValueError) as exc:
                error = FlushWriteError(
                    f"Failed to save fuzzy text for locale {locale}: {exc}", locale=locale, path=path
                )
                error.__cause__ = exc
                report.failed[locale] = error
                self._logger.log("fuzzy_write_failed", locale=locale, path=str(path), error=str(error))
                continue
            report.written[locale] = path
            self._logger.log("fuzzy_written", locale=locale, path=str(path), entries=len(strings))
        return report


__all__ = ["Translator"]
