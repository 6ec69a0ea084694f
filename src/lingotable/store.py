"""In-memory translation tables keyed by locale."""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Tuple


class LocaleStore:
    """Hold the source-to-translation mapping for each loaded locale."""

    def __init__(self) -> None:
        self._tables: Dict[str, Dict[str, str]] = {}

    def load(self, locale: str, entries: Mapping[str, str]) -> None:
        """Merge ``entries`` into ``locale``; later loads overwrite earlier keys."""

        self._tables.setdefault(locale, {}).update(entries)

    def lookup(self, locale: str, text: str) -> Optional[str]:
        table = self._tables.get(locale)
        if table is None:
            return None
        return table.get(text)

    def entries(self, locale: str) -> Dict[str, str]:
        return dict(self._tables.get(locale, {}))

    def locales(self) -> Tuple[str, ...]:
        return tuple(sorted(self._tables))

    def __contains__(self, locale: object) -> bool:
        return locale in self._tables

    def __len__(self) -> int:
        return len(self._tables)


__all__ = ["LocaleStore"]
