from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import List, Optional

from core.errors import AccessDeniedError, NotFoundError, ValidationError
from core.languages import language_id_for
from core.models import TextDocument
from core.paths import directory_prefixes, glob_match, is_pruned_directory


"""Local filesystem FileSource implementation.

Provides sandboxed search and read access to files under PROJECT_ROOT
with strong containment checks to prevent access outside the project.
"""


class LocalSource:
    # Local filesystem implementation of FileSource.

    def __init__(self, *, project_root: Path) -> None:
        self._project_root = project_root.resolve()

    def _resolve_under_root(self, rel_path: str) -> Path:
        raw = (rel_path or "").strip()
        if not raw:
            raise ValidationError("Path is empty")

        p = (self._project_root / raw).resolve()

        # Strong containment check to prevent directory traversal/outside access
        try:
            p.relative_to(self._project_root)
        except ValueError as e:
            raise AccessDeniedError("Access outside project root is not allowed") from e

        return p

    async def find_files(
        self,
        *,
        base: str = ".",
        include: str = "**/*",
        exclude: Optional[str] = None,
        max_results: Optional[int] = None,
    ) -> List[str]:
        # include is matched relative to base; exclude and results are relative to project root
        base_dir = self._resolve_under_root(base)
        limit = max_results if max_results is not None and max_results > 0 else None
        pruned = directory_prefixes(exclude)

        def _do() -> List[str]:
            if not base_dir.exists() or not base_dir.is_dir():
                raise NotFoundError(f"Not a directory: {base}")

            matches: List[str] = []
            for dirpath, dirnames, filenames in os.walk(base_dir):
                current = Path(dirpath)

                # Skip directories whose whole subtree is excluded
                dirnames[:] = sorted(
                    d for d in dirnames
                    if not is_pruned_directory((current / d).relative_to(self._project_root).as_posix(), pruned)
                )

                for name in sorted(filenames):
                    p = current / name
                    rel_path = p.relative_to(self._project_root).as_posix()
                    if not glob_match(p.relative_to(base_dir).as_posix(), include):
                        continue
                    if exclude and glob_match(rel_path, exclude):
                        continue
                    matches.append(rel_path)

            # Use POSIX-style paths to keep results stable across OSes
            matches.sort()
            return matches[:limit] if limit is not None else matches

        # Offload blocking filesystem IO to a thread to keep async loop responsive
        return await asyncio.to_thread(_do)

    async def open_text_document(self, *, path: str) -> TextDocument:
        p = self._resolve_under_root(path)

        def _do() -> TextDocument:
            if not p.exists():
                raise NotFoundError(f"File not found: {path}")
            if not p.is_file():
                raise ValidationError(f"Not a file: {path}")

            # Read text with replacement to avoid decode errors on bad files
            text = p.read_text(encoding="utf-8", errors="replace")
            return TextDocument(text=text, language_id=language_id_for(p.name))

        return await asyncio.to_thread(_do)
