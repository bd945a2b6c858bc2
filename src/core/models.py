"""Immutable dataclasses shared by the reader, sources and tools.

File is the unit handed to the prompt pipeline; TextDocument is what a
file source returns when a path is opened; RepositoryReadResult bundles
the accepted files with the numbers reported to telemetry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class File:
    """One accepted source file."""

    path: str
    content: str
    language_id: str


@dataclass(frozen=True)
class TextDocument:
    text: str
    language_id: str


@dataclass(frozen=True)
class RepositoryReadResult:
    """Outcome of one read pass.

    Field groups:
    - Accepted: files, total_tokens, languages
    - Found: total_candidates
    """

    files: List[File]
    total_tokens: int
    total_candidates: int
    languages: Dict[str, int] = field(default_factory=dict)

    @property
    def truncated(self) -> bool:
        return len(self.files) < self.total_candidates
