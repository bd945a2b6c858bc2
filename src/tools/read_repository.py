"""MCP tool that gathers a folder's source files within a token budget.

Registers the 'read_repository' tool which runs the RepositoryReader
against the local project and returns the accepted files together with
the numbers the reader reported.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from config import MAX_TOKENS, PROJECT_ROOT, TIKTOKEN_ENCODING
from core.errors import ValidationError
from core.interfaces import TelemetrySink, TokenCounter
from core.notifications import CollectingNotifier
from core.settings import ConfigurationSource, EnvConfiguration
from core.telemetry import LoggingTelemetry
from core.tokenizer import TiktokenCounter
from reader.repository_reader import RepositoryReader
from sources.local_source import LocalSource


def register(
    mcp: FastMCP,
    *,
    telemetry: Optional[TelemetrySink] = None,
    token_counter: Optional[TokenCounter] = None,
    configuration: Optional[ConfigurationSource] = None,
) -> None:
    sink = telemetry or LoggingTelemetry()
    counter = token_counter or TiktokenCounter(TIKTOKEN_ENCODING)
    settings = configuration or EnvConfiguration()

    @mcp.tool(name="read_repository")
    async def read_repository(root: str = ".", max_tokens: int = MAX_TOKENS) -> Dict[str, Any]:
        """Read the source files under a folder that fit in an LLM token budget.

        Files are matched against the configured extensions and exclude
        patterns, then accepted in order while the token total stays
        within max_tokens.

        Params:
          - root: folder relative to the project root (default: ".").
          - max_tokens: token budget for all returned files (default from config).

        Returns:
          Dict with 'files' (path, language_id, content), 'total_tokens',
          'total_files' (candidates found), 'languages' and 'messages'.

        Raises:
          ValidationError for a non-positive budget; ConfigurationError when
          no file extensions are configured; NoFilesFoundError when nothing
          matches; AccessDeniedError for roots outside the project.
        """
        if int(max_tokens) <= 0:
            raise ValidationError("max_tokens must be positive")

        notifier = CollectingNotifier()
        reader = RepositoryReader(
            root,
            counter,
            max_tokens,
            source=LocalSource(project_root=PROJECT_ROOT),
            configuration=settings,
            notifier=notifier,
            telemetry=sink,
        )

        result = await reader.read_repository()

        return {
            "files": [
                {"path": f.path, "language_id": f.language_id, "content": f.content}
                for f in result.files
            ],
            "total_tokens": result.total_tokens,
            "total_files": result.total_candidates,
            "languages": result.languages,
            "messages": notifier.messages,
        }
