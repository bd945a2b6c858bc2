from __future__ import annotations

import fnmatch
from typing import Iterable, List, Optional, Sequence, Tuple

"""
Path and glob utilities used across the project.

Provides consistent POSIX-style normalization, glob construction from
configured extensions and exclude patterns, brace expansion, and a
component-wise '**' supporting glob matcher used by sources and tools.
"""


def split_posix(p: str) -> Tuple[str, ...]:
    """Split a POSIX path into non-empty segments."""
    s = (p or "").strip().replace("\\", "/").strip("/")
    if not s:
        return tuple()
    return tuple(seg for seg in s.split("/") if seg)


def clean_entries(values: Optional[Iterable[str]]) -> List[str]:
    """Drop empty and whitespace-only entries from a configured list."""
    if not values:
        return []
    return [v.strip() for v in values if isinstance(v, str) and v.strip()]


def build_include_glob(extensions: Sequence[str]) -> str:
    """Build '**/*.{ext1,ext2}' from file extensions (leading dots ignored)."""
    exts = [e.lstrip(".") for e in extensions]
    return "**/*.{" + ",".join(exts) + "}"


def build_exclude_glob(patterns: Sequence[str]) -> Optional[str]:
    """Combine exclude patterns into one '{p1,p2}' glob, or None when empty."""
    if not patterns:
        return None
    return "{" + ",".join(patterns) + "}"


def _split_top_level(body: str) -> List[str]:
    # Split on commas that are not nested inside another brace group
    parts: List[str] = []
    depth = 0
    current: List[str] = []
    for ch in body:
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        if ch == "," and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return parts


def expand_braces(pattern: str) -> List[str]:
    """Expand '{a,b}' alternatives into plain glob patterns.

    Nested groups are supported. An unbalanced '{' is kept literally.
    """
    s = pattern or ""
    start = s.find("{")
    if start < 0:
        return [s]

    depth = 0
    for end in range(start, len(s)):
        if s[end] == "{":
            depth += 1
        elif s[end] == "}":
            depth -= 1
            if depth == 0:
                break
    else:
        return [s]

    prefix, body, suffix = s[:start], s[start + 1 : end], s[end + 1 :]

    out: List[str] = []
    for alt in _split_top_level(body):
        out.extend(expand_braces(prefix + alt + suffix))

    # Keep first occurrence order, drop duplicates
    return list(dict.fromkeys(out))


def _match_single(parts: Tuple[str, ...], pattern: str) -> bool:
    pat = (pattern or "").strip().replace("\\", "/").strip("/")
    if not pat:
        pat = "**/*"  # Default: match everything.
    pats = split_posix(pat)

    def rec(i: int, j: int) -> bool:
        if j == len(pats):
            return i == len(parts)

        token = pats[j]
        if token == "**":
            return rec(i, j + 1) or (i < len(parts) and rec(i + 1, j))

        return (
            i < len(parts)
            and fnmatch.fnmatchcase(parts[i], token)
            and rec(i + 1, j + 1)
        )

    return rec(0, 0)


def glob_match(rel_path: str, pattern: str) -> bool:
    """Match a relative path against a glob pattern with '**' and '{}' support."""
    parts = split_posix(rel_path)
    return any(_match_single(parts, p) for p in expand_braces(pattern))


def directory_prefixes(pattern: Optional[str]) -> List[str]:
    """Return the 'X' of every 'X/**' alternative in an exclude glob.

    A directory matching one of these has all of its contents excluded,
    so a walker can skip it without looking inside.
    """
    if not pattern:
        return []
    return [p[: -len("/**")] for p in expand_braces(pattern) if p.endswith("/**") and len(p) > 3]


def is_pruned_directory(rel_dir: str, prefixes: Sequence[str]) -> bool:
    return any(_match_single(split_posix(rel_dir), p) for p in prefixes)
