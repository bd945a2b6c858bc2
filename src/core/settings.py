"""Configuration sources for the repository reader.

A configuration source exposes namespaced keys ('fileExtensions',
'excludePatterns', 'maxFiles') the way an editor settings group does.
EnvConfiguration reads them from SWARK_* environment variables at call
time; MappingConfiguration serves them from an in-memory mapping.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Protocol

import config
from config import _env_int, _env_list
from core.errors import ConfigurationError
from core.paths import build_exclude_glob, build_include_glob, clean_entries

NO_EXTENSIONS_MESSAGE = (
    "No file extensions specified in the configuration. "
    "Please go to the settings and specify the file extensions."
)


class ConfigurationSource(Protocol):
    def get(self, key: str, default: Any = None) -> Any:
        ...


def _env_name(section: str, key: str) -> str:
    # 'swark', 'fileExtensions' -> 'SWARK_FILE_EXTENSIONS'
    snake = re.sub(r"(?<!^)(?=[A-Z])", "_", key).upper()
    return f"{section.upper()}_{snake}"


class EnvConfiguration:
    """Settings group backed by environment variables."""

    _DEFAULTS: Dict[str, Any] = {
        "fileExtensions": config.DEFAULT_FILE_EXTENSIONS,
        "excludePatterns": config.DEFAULT_EXCLUDE_PATTERNS,
        "maxFiles": config.DEFAULT_MAX_FILES,
    }

    def __init__(self, section: str = config.SETTINGS_SECTION) -> None:
        self._section = section

    def get(self, key: str, default: Any = None) -> Any:
        name = _env_name(self._section, key)
        fallback = self._DEFAULTS.get(key, default)

        if key == "maxFiles":
            return _env_int(name, fallback)
        if key in ("fileExtensions", "excludePatterns"):
            return _env_list(name, fallback)
        return os.environ.get(name, fallback)


class MappingConfiguration:
    """Settings group served from a plain mapping."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)


def _as_list(key: str, value: Any) -> List[str]:
    # A single string is one entry, not a sequence of characters
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return list(value)
    raise ConfigurationError(f"Setting '{key}' must be a list of strings")


@dataclass(frozen=True)
class SearchQuery:
    """Arguments for FileSource.find_files built from the settings."""

    include: str
    exclude: Optional[str] = None
    max_results: Optional[int] = None


@dataclass(frozen=True)
class ReaderSettings:
    """Read-only snapshot of the reader's settings."""

    file_extensions: List[str] = field(default_factory=list)
    exclude_patterns: List[str] = field(default_factory=list)
    max_files: Optional[int] = None

    @classmethod
    def from_configuration(cls, source: ConfigurationSource) -> "ReaderSettings":
        return cls(
            file_extensions=_as_list("fileExtensions", source.get("fileExtensions")),
            exclude_patterns=_as_list("excludePatterns", source.get("excludePatterns")),
            max_files=source.get("maxFiles"),
        )

    def search_query(self) -> SearchQuery:
        """Build the include/exclude globs.

        Raises ConfigurationError when no file extension is configured.
        """
        extensions = clean_entries(self.file_extensions)
        if not extensions:
            raise ConfigurationError(NO_EXTENSIONS_MESSAGE)

        return SearchQuery(
            include=build_include_glob(extensions),
            exclude=build_exclude_glob(clean_entries(self.exclude_patterns)),
            max_results=self.max_files,
        )
