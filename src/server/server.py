"""Server bootstrap for the Swark repository reader service.

Creates the FastMCP instance, wires the telemetry sink and token counter
into the tools, and starts the MCP server (stdio transport).
"""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from clients.telemetry_client import TelemetryClient
from config import HTTP_VERIFY, LOG_LEVEL, TELEMETRY_TIMEOUT, TELEMETRY_URL, TIKTOKEN_ENCODING
from core.telemetry import LoggingTelemetry
from core.tokenizer import TiktokenCounter

from tools.list_files import register as register_list_files
from tools.read_repository import register as register_read_repository

mcp = FastMCP("swark-repo-reader")


def configure_logging() -> None:
    # stdout carries the MCP protocol; logs go to stderr
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def register_tools() -> None:
    if TELEMETRY_URL:
        telemetry = TelemetryClient(base_url=TELEMETRY_URL, timeout=TELEMETRY_TIMEOUT, verify=HTTP_VERIFY)
    else:
        telemetry = LoggingTelemetry()
    token_counter = TiktokenCounter(TIKTOKEN_ENCODING)

    register_list_files(mcp)
    register_read_repository(mcp, telemetry=telemetry, token_counter=token_counter)


register_tools()


def main() -> None:
    configure_logging()
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
