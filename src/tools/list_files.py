"""MCP tool that lists the files the repository reader would consider.

Registers the 'list_files' tool which applies the configured extensions,
exclude patterns and file limit without reading or counting anything.
"""

from __future__ import annotations

from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from config import PROJECT_ROOT
from core.settings import ConfigurationSource, EnvConfiguration, ReaderSettings
from sources.local_source import LocalSource


def register(mcp: FastMCP, *, configuration: Optional[ConfigurationSource] = None) -> None:
    source_config = configuration or EnvConfiguration()

    @mcp.tool(name="list_files")
    async def list_files(root: str = ".") -> List[str]:
        """List candidate source files under a folder.

        Params:
          - root: folder relative to the project root (default: ".").

        Returns:
          Sorted list of project-relative paths, bounded by the configured
          maximum file count.

        Raises:
          ConfigurationError when no file extensions are configured;
          NotFoundError or AccessDeniedError for an invalid root.
        """
        query = ReaderSettings.from_configuration(source_config).search_query()

        src = LocalSource(project_root=PROJECT_ROOT)
        return await src.find_files(
            base=root,
            include=query.include,
            exclude=query.exclude,
            max_results=query.max_results,
        )
