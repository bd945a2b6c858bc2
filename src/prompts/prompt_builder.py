"""Per-file encoding used when files are placed into the diagram prompt.

Token costs are measured on this exact representation, so the budget
applied by the reader matches what the prompt builder sends downstream.
"""

from __future__ import annotations

from core.models import File

FENCE = "```"


def encode_file(file: File) -> str:
    return f"File: {file.path}\n{FENCE}{file.language_id}\n{file.content}\n{FENCE}\n"
