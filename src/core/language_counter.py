from __future__ import annotations

from collections import Counter
from typing import Dict


class LanguageCounter:
    # Tally of accepted files per language id
    def __init__(self) -> None:
        self._counts: "Counter[str]" = Counter()

    def increment(self, language_id: str) -> None:
        self._counts[language_id] += 1

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def to_dict(self) -> Dict[str, int]:
        # Snapshot; later increments do not leak into it
        return dict(self._counts)
