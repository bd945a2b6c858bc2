"""Editor-style language identifiers for source files.

Identifiers follow the names code editors use for documents
(e.g. 'typescriptreact' for .tsx). They are used to label files in the
encoded prompt and to group accepted files in telemetry.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Dict

PLAINTEXT = "plaintext"

LANGUAGE_IDS: Dict[str, str] = {
    ".py": "python", ".pyi": "python", ".pyw": "python",
    ".js": "javascript", ".mjs": "javascript", ".cjs": "javascript",
    ".jsx": "javascriptreact",
    ".ts": "typescript", ".mts": "typescript", ".cts": "typescript",
    ".tsx": "typescriptreact",
    ".java": "java", ".kt": "kotlin", ".kts": "kotlin", ".scala": "scala",
    ".groovy": "groovy", ".gradle": "groovy",
    ".cs": "csharp", ".fs": "fsharp", ".vb": "vb",
    ".go": "go", ".rs": "rust", ".swift": "swift", ".dart": "dart",
    ".c": "c", ".h": "c",
    ".cpp": "cpp", ".cc": "cpp", ".cxx": "cpp", ".hpp": "cpp", ".hh": "cpp",
    ".m": "objective-c", ".mm": "objective-cpp",
    ".rb": "ruby", ".php": "php", ".pl": "perl", ".pm": "perl",
    ".lua": "lua", ".r": "r", ".jl": "julia",
    ".ex": "elixir", ".exs": "elixir", ".erl": "erlang", ".hs": "haskell",
    ".clj": "clojure", ".ml": "ocaml",
    ".html": "html", ".htm": "html", ".vue": "vue", ".svelte": "svelte",
    ".css": "css", ".scss": "scss", ".sass": "sass", ".less": "less",
    ".json": "json", ".jsonc": "jsonc",
    ".yaml": "yaml", ".yml": "yaml", ".toml": "toml", ".xml": "xml",
    ".ini": "ini", ".cfg": "ini",
    ".sh": "shellscript", ".bash": "shellscript", ".zsh": "shellscript",
    ".ps1": "powershell", ".psm1": "powershell", ".bat": "bat", ".cmd": "bat",
    ".sql": "sql", ".graphql": "graphql", ".gql": "graphql",
    ".md": "markdown", ".markdown": "markdown", ".rst": "restructuredtext",
    ".tf": "terraform", ".proto": "proto3",
}

FILENAME_IDS: Dict[str, str] = {
    "Dockerfile": "dockerfile",
    "Makefile": "makefile",
    "CMakeLists.txt": "cmake",
    "Jenkinsfile": "groovy",
}


def language_id_for(path: str) -> str:
    """Classify a path by file name first, then by suffix (case-insensitive)."""
    p = PurePosixPath((path or "").replace("\\", "/"))
    if p.name in FILENAME_IDS:
        return FILENAME_IDS[p.name]
    return LANGUAGE_IDS.get(p.suffix.lower(), PLAINTEXT)
