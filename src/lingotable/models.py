"""Result records returned by the bulk locale operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from .exceptions import FlushWriteError


@dataclass(slots=True)
class LoadReport:
    """Outcome of loading every locale file found in a directory."""

    directory: Path
    loaded: List[str] = field(default_factory=list)
    skipped: Dict[Path, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.skipped


@dataclass(slots=True)
class FlushReport:
    """Outcome of writing fuzzy files for every locale with misses."""

    written: Dict[str, Path] = field(default_factory=dict)
    failed: Dict[str, FlushWriteError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


__all__ = ["FlushReport", "LoadReport"]
