"""Track strings that were requested for translation but not found."""

from __future__ import annotations

from typing import Dict, Iterator, List, Set, Tuple


class MissTracker:
    """Ordered, duplicate-free log of untranslated strings per locale."""

    def __init__(self) -> None:
        self._ordered: Dict[str, List[str]] = {}
        self._seen: Dict[str, Set[str]] = {}

    def record(self, locale: str, text: str) -> bool:
        """Append ``text`` to the locale's log; return ``False`` if already present."""

        seen = self._seen.setdefault(locale, set())
        if text in seen:
            return False
        seen.add(text)
        self._ordered.setdefault(locale, []).append(text)
        return True

    def entries(self, locale: str) -> Tuple[str, ...]:
        return tuple(self._ordered.get(locale, ()))

    def locales(self) -> Tuple[str, ...]:
        return tuple(self._ordered)

    def items(self) -> Iterator[Tuple[str, Tuple[str, ...]]]:
        for locale, strings in self._ordered.items():
            yield locale, tuple(strings)

    def __len__(self) -> int:
        return sum(len(strings) for strings in self._ordered.values())


__all__ = ["MissTracker"]
