"""Token counting with tiktoken.

TiktokenCounter is an async callable so it can be injected wherever a
TokenCounter is expected, next to remote tokenizers that really await.
"""

from __future__ import annotations

from typing import Any, Optional

import tiktoken


class TiktokenCounter:
    def __init__(self, encoding_name: str = "cl100k_base") -> None:
        self.encoding_name = encoding_name
        self._encoding: Optional[Any] = None

    @property
    def encoding(self) -> Any:
        # Resolved once; loading an encoding reads its BPE ranks
        if self._encoding is None:
            self._encoding = tiktoken.get_encoding(self.encoding_name)
        return self._encoding

    def count(self, text: str) -> int:
        if not text:
            return 0
        return len(self.encoding.encode(text, disallowed_special=()))

    async def __call__(self, text: str) -> int:
        return self.count(text)
