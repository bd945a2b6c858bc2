"""Core protocol and interface definitions.

The reader depends only on these contracts, so the host capabilities
(file search, file open, token counting, notifications, telemetry) can
be swapped for fakes in tests or for other hosts.
"""

from __future__ import annotations

from typing import Awaitable, Callable, List, Mapping, Optional, Protocol

from core.models import File, TextDocument


# Async callable from encoded text to a token cost estimate.
TokenCounter = Callable[[str], Awaitable[int]]

# Encodes a File the way the prompt builder will send it downstream.
PromptEncoder = Callable[[File], str]

# Language id of the document currently focused in the host, if any.
ActiveLanguageAccessor = Callable[[], Optional[str]]


class FileSource(Protocol):
    """Contract for searching and opening files under a base folder."""
    async def find_files(
        self,
        *,
        base: str = ".",
        include: str = "**/*",
        exclude: Optional[str] = None,
        max_results: Optional[int] = None,
    ) -> List[str]:
        ...

    async def open_text_document(self, *, path: str) -> TextDocument:
        ...


class Notifier(Protocol):
    """Shows a short informational message to the user."""
    async def show_information_message(self, message: str) -> None:
        ...


class TelemetrySink(Protocol):
    """Records named events with property and measurement maps."""
    async def send_event(
        self,
        name: str,
        properties: Optional[Mapping[str, str]] = None,
        measurements: Optional[Mapping[str, float]] = None,
    ) -> None:
        ...

    async def send_error_event(
        self,
        name: str,
        properties: Optional[Mapping[str, Optional[str]]] = None,
    ) -> None:
        ...
