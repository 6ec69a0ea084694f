"""Read locale files and write fuzzy files.

Locale files are named ``<locale>.json`` and hold a flat JSON object mapping
source strings to translated strings. Fuzzy files are named
``<locale>.fuzzy`` and list the strings still awaiting translation, each
mapped to a ``~placeholder~`` so they stand out from confirmed entries::

    {
        "Hello, json!": "~Hello, json!~"
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from .config import FUZZY_EXTENSION, FUZZY_MARKER, LOCALE_EXTENSION
from .exceptions import LocaleFileError, MalformedLocaleFileError, MissingLocaleFileError


class LocaleFileCodec:
    """Translate between locale/fuzzy files and in-memory entries."""

    def __init__(
        self,
        *,
        locale_extension: str = LOCALE_EXTENSION,
        fuzzy_extension: str = FUZZY_EXTENSION,
        marker: str = FUZZY_MARKER,
    ) -> None:
        self.locale_extension = locale_extension
        self.fuzzy_extension = fuzzy_extension
        self.marker = marker

    # ------------------------------------------------------------------
    # Locale files
    # ------------------------------------------------------------------
    def locale_path(self, name: Path | str) -> Path:
        """Return ``name`` as a path, appending the locale extension if absent."""

        text = str(name)
        if not text.endswith(self.locale_extension):
            text += self.locale_extension
        return Path(text)

    def locale_name(self, path: Path | str) -> str:
        name = Path(path).name
        if name.endswith(self.locale_extension):
            name = name[: -len(self.locale_extension)]
        return name

    def decode_file(self, name: Path | str) -> Tuple[str, Dict[str, str]]:
        """Decode one locale file into ``(locale, entries)``.

        Raises :class:`MissingLocaleFileError` when the file does not exist and
        :class:`MalformedLocaleFileError` when it is not a flat JSON object whose
        values are all strings.
        """

        path = self.locale_path(name)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise MissingLocaleFileError(f"Locale file not found: {path}", path=path) from exc
        except IsADirectoryError as exc:
            raise MissingLocaleFileError(f"Locale path is a directory: {path}", path=path) from exc
        except UnicodeDecodeError as exc:
            raise MalformedLocaleFileError(f"Locale file is not valid UTF-8: {path}", path=path) from exc
        except OSError as exc:
            raise LocaleFileError(f"Cannot read locale file {path}: {exc}", path=path) from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise MalformedLocaleFileError(f"Invalid JSON in {path}: {exc.msg} (line {exc.lineno})", path=path) from exc
        except RecursionError as exc:
            raise MalformedLocaleFileError(f"JSON in {path} is nested too deeply", path=path) from exc

        if not isinstance(data, dict):
            raise MalformedLocaleFileError(
                f"Locale file {path} must contain a JSON object, got {type(data).__name__}", path=path
            )
        for key, value in data.items():
            if not isinstance(value, str):
                raise MalformedLocaleFileError(
                    f"Translation for {key!r} in {path} must be a string, got {type(value).__name__}",
                    path=path,
                )
        return self.locale_name(path), data

    def scan_directory(self, directory: Path | str) -> List[Path]:
        """Return the locale files directly inside ``directory``, sorted by name."""

        root = Path(directory)
        if not root.is_dir():
            raise MissingLocaleFileError(f"Locale directory not found: {root}", path=root)
        return sorted(
            (entry for entry in root.iterdir() if entry.is_file() and entry.name.endswith(self.locale_extension)),
            key=lambda entry: entry.name,
        )

    # ------------------------------------------------------------------
    # Fuzzy files
    # ------------------------------------------------------------------
    def fuzzy_path(self, locale: str, directory: Path | str = ".") -> Path:
        return Path(directory) / f"{locale}{self.fuzzy_extension}"

    def encode_fuzzy(self, strings: Iterable[str]) -> str:
        payload = {text: f"{self.marker}{text}{self.marker}" for text in strings}
        return json.dumps(payload, ensure_ascii=False, indent=4)

    def write_fuzzy(self, locale: str, strings: Iterable[str], directory: Path | str = ".") -> Path:
        """Write (overwriting) the fuzzy file for ``locale`` and return its path.

        The content is encoded before the file is opened, so text that cannot
        be stored as UTF-8 raises ``UnicodeEncodeError`` and leaves any
        previous fuzzy file untouched.
        """

        path = self.fuzzy_path(locale, directory)
        data = (self.encode_fuzzy(strings) + "\n").encode("utf-8")
        with path.open("wb") as handle:
            handle.write(data)
        return path


__all__ = ["LocaleFileCodec"]
