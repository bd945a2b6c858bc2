"""Repository reader: gather source files that fit a token budget.

Files matching the configured extensions (minus the exclude patterns)
are opened one at a time, encoded the way the prompt builder sends them,
and accepted greedily while the running token total stays within
max_tokens. Acceptance is a single pass in search order: a file that
does not fit is skipped and never revisited.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from core.errors import NoFilesFoundError
from core.interfaces import (
    ActiveLanguageAccessor,
    FileSource,
    Notifier,
    PromptEncoder,
    TelemetrySink,
    TokenCounter,
)
from core.language_counter import LanguageCounter
from core.models import File, RepositoryReadResult
from core.notifications import LoggingNotifier
from core.settings import ConfigurationSource, ReaderSettings
from core.telemetry import LoggingTelemetry
from prompts.prompt_builder import encode_file

logger = logging.getLogger(__name__)

NO_FILES_FOUND_MESSAGE = (
    "The selected folder does not contain any file that matches the configured file types. "
    'You can update the supported types in "swark.fileExtensions" setting.'
)


class RepositoryReader:
    def __init__(
        self,
        base_folder: Union[str, Path],
        token_counter: TokenCounter,
        max_tokens: int,
        *,
        source: FileSource,
        configuration: ConfigurationSource,
        notifier: Optional[Notifier] = None,
        telemetry: Optional[TelemetrySink] = None,
        encoder: PromptEncoder = encode_file,
        active_language_id: Optional[ActiveLanguageAccessor] = None,
    ) -> None:
        self._base_folder = Path(base_folder).as_posix()
        self._token_counter = token_counter
        self._max_tokens = int(max_tokens)
        self._source = source
        self._config = configuration
        self._notifier = notifier or LoggingNotifier()
        self._telemetry = telemetry or LoggingTelemetry()
        self._encoder = encoder
        self._active_language_id = active_language_id

    async def read_files(self) -> List[File]:
        result = await self.read_repository()
        return result.files

    async def read_repository(self) -> RepositoryReadResult:
        """Search, open and budget-filter the base folder's files.

        Raises:
          ConfigurationError when no file extensions are configured.
          NoFilesFoundError when the search matches nothing (after
          reporting a 'noFilesFound' telemetry error event).
        """
        # Settings are read once per call
        settings = ReaderSettings.from_configuration(self._config)

        query = settings.search_query()

        paths = await self._source.find_files(
            base=self._base_folder,
            include=query.include,
            exclude=query.exclude,
            max_results=query.max_results,
        )
        logger.info("Found %d candidate files under %s", len(paths), self._base_folder)

        if not paths:
            await self._send_no_files_found_telemetry()
            raise NoFilesFoundError(NO_FILES_FOUND_MESSAGE)

        return await self._open_files(paths)

    async def _send_no_files_found_telemetry(self) -> None:
        language_id = self._get_current_document_language_id()
        await self._telemetry.send_error_event(
            "noFilesFound", {"currentDocumentLanguageId": language_id}
        )

    def _get_current_document_language_id(self) -> Optional[str]:
        if self._active_language_id is None:
            return None
        return self._active_language_id()

    async def _open_files(self, paths: List[str]) -> RepositoryReadResult:
        files: List[File] = []
        total_tokens = 0
        language_counter = LanguageCounter()

        for path in paths:
            file = await self._open_file(path)
            num_tokens = await self._token_counter(self._encoder(file))

            if total_tokens + num_tokens <= self._max_tokens:
                total_tokens += num_tokens
                files.append(file)
                language_counter.increment(file.language_id)
                logger.debug("Accepted %s (%d tokens, total %d)", path, num_tokens, total_tokens)
            else:
                logger.debug("Skipped %s (%d tokens, total %d)", path, num_tokens, total_tokens)

        languages = language_counter.to_dict()
        await self._show_processing_message(len(files), len(paths))
        await self._send_telemetry_event(len(files), len(paths), languages)

        return RepositoryReadResult(
            files=files,
            total_tokens=total_tokens,
            total_candidates=len(paths),
            languages=languages,
        )

    async def _open_file(self, path: str) -> File:
        document = await self._source.open_text_document(path=path)
        return File(path=path, content=document.text, language_id=document.language_id)

    async def _show_processing_message(self, num_processed: int, total: int) -> None:
        if num_processed < total:
            message = f"Processing {num_processed}/{total} files due to LLM token limit"
        else:
            message = f"Processing {num_processed} files"
        await self._notifier.show_information_message(message)

    async def _send_telemetry_event(self, num_processed: int, total: int, languages: dict) -> None:
        measurements = {"numProcessedFiles": num_processed, "totalFiles": total, **languages}
        await self._telemetry.send_event("filesProcessed", {}, measurements)
