"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
PROJECT_ROOT, default reader settings, tokenizer, telemetry and logging).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Sequence


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def _env_list(name: str, default: Optional[Sequence[str]]) -> Optional[List[str]]:
    # Comma-separated list; a set-but-empty variable means an empty list
    raw = os.environ.get(name)
    if raw is None:
        return None if default is None else list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


# Project root for LocalSource security boundary
PROJECT_ROOT = Path(os.environ.get("PROJECT_ROOT", ".")).resolve()

# Settings section read by the repository reader (SWARK_* variables)
SETTINGS_SECTION = "swark"

DEFAULT_FILE_EXTENSIONS = [
    "py", "js", "jsx", "ts", "tsx", "java", "kt", "go", "rs", "rb", "php",
    "cs", "c", "h", "cpp", "hpp", "swift", "scala", "vue", "svelte",
]

DEFAULT_EXCLUDE_PATTERNS = [
    "**/.*",
    "**/.*/**",
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/out/**",
    "**/venv/**",
    "**/__pycache__/**",
    "**/*.min.js",
]

DEFAULT_MAX_FILES = 1000

# Token budget for one read when the caller does not pass one
MAX_TOKENS = _env_int("SWARK_MAX_TOKENS", 100_000)

# Tokenizer
TIKTOKEN_ENCODING = os.environ.get("TIKTOKEN_ENCODING", "cl100k_base").strip()

# Network / HTTP
HTTP_VERIFY = _env_bool("HTTP_VERIFY", False)

# Telemetry collector (empty: events are only logged)
TELEMETRY_URL = os.environ.get("TELEMETRY_URL", "").strip()
TELEMETRY_TIMEOUT = _env_float("TELEMETRY_TIMEOUT", 5.0)

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
