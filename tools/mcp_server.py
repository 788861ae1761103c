# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (every Interzoid API as a tool)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Turns each ToolDescriptor in the catalog into an MCP tool.  The tools are
#   thin: they pick up the caller's API key, hand the call to the core
#   Dispatcher, log it, and return the dispatcher's text.
#
# HOW IT WORKS (the flow):
#   1. The agent calls a tool by name via MCP (e.g. "interzoid_org_standard")
#   2. FastMCP routes the call to that tool's CatalogTool.run()
#   3. run() reads the Authorization header (HTTP transport only) and calls
#      Dispatcher.call() with the raw arguments
#   4. The Outcome is rendered as text: pretty JSON on success, the x402
#      payment envelope on 402, a one-line message on failure.  Failures are
#      flagged isError so the host sees a failed call; a 402 is not.
#
# WHY A Tool SUBCLASS INSTEAD OF @mcp.tool()?
#   The decorator derives the schema from a Python signature and validates
#   arguments before our code runs.  The catalog is data, and argument
#   problems must come back as readable tool output, so each tool carries
#   the descriptor's JSON schema and receives the raw argument dict.
#
# RUNNING THIS SERVER:
#   a) Via the entry point:  python main.py --transport stdio|http
#   b) Standalone (stdio):   python -m tools.mcp_server
# =============================================================================

import json
import logging
import sys
from typing import Any, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.server.dependencies import get_http_headers
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import TextContent
from pydantic import PrivateAttr

from core.catalog import ToolCatalog
from core.client import RequestExecutor
from core.config import SERVER_NAME, SERVER_VERSION, Settings
from core.credentials import credential_from_authorization
from core.dispatcher import Dispatcher, render_outcome
from core.models import ErrorOutcome, PaymentRequiredOutcome, ToolDescriptor
from core.tool_definitions import default_catalog

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because on the stdio transport STDOUT *is* the MCP
# message stream; a stray log line there would corrupt the protocol.
#
# ANSI COLOR CODES:
#   - CYAN for incoming requests (tool name + arguments)
#   - YELLOW for status lines (which credential the call is using)
#   - GREEN for successful / payment-required responses
#   - RED for failures reported back to the agent
#
# The API key itself is NEVER logged, only where it came from.
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, arguments: dict[str, Any]) -> None:
    """Log an incoming tool call with its arguments in CYAN."""
    arg_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    logging.info(f"{_CYAN}{tool_name} called with: {arg_str}{_RESET}")


def _log_status(message: str) -> None:
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str, failed: bool = False) -> None:
    if failed:
        logging.info(f"{_RED}  ← {tool_name} failed: {text}{_RESET}")
        return
    # Re-dump compactly so one response is one log line.
    compact = json.dumps(json.loads(text), separators=(",", ":"), ensure_ascii=False)
    logging.info(f"{_GREEN}  ← {tool_name} response: {compact}{_RESET}")


def _incoming_credential() -> str:
    """API key from the connecting client's Authorization header, if any.

    Only the HTTP transport carries headers; on stdio this is always "".
    """
    headers = get_http_headers(include_all=True)
    return credential_from_authorization(headers.get("authorization"))


# =============================================================================
# CatalogTool — one MCP tool backed by one ToolDescriptor
# =============================================================================
class CatalogTool(Tool):
    _descriptor: ToolDescriptor = PrivateAttr()
    _dispatcher: Dispatcher = PrivateAttr()

    @classmethod
    def from_descriptor(cls, descriptor: ToolDescriptor, dispatcher: Dispatcher) -> "CatalogTool":
        tool = cls(
            name=descriptor.name,
            description=descriptor.description,
            parameters=descriptor.input_schema(),
        )
        tool._descriptor = descriptor
        tool._dispatcher = dispatcher
        return tool

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        arguments = arguments or {}
        _log_request(self.name, arguments)

        incoming = _incoming_credential()
        credential = self._dispatcher.credential_for(incoming)
        if credential.is_empty:
            _log_status("no API key: expecting x402 payment requirements")
        else:
            _log_status(f"using API key from {credential.source.value}")

        outcome = await self._dispatcher.call(self.name, arguments, incoming)
        text = render_outcome(outcome)

        if isinstance(outcome, PaymentRequiredOutcome):
            _log_status(f"{self._descriptor.endpoint} answered 402 Payment Required")
        failed = isinstance(outcome, ErrorOutcome)
        _log_response(self.name, text, failed=failed)

        # FastMCP turns ToolError into a result with isError set and this text.
        if failed:
            raise ToolError(text)
        return ToolResult(content=[TextContent(type="text", text=text)])


# =============================================================================
# Server factory
# =============================================================================
def create_server(
    settings: Settings,
    executor: Optional[RequestExecutor] = None,
    catalog: Optional[ToolCatalog] = None,
) -> FastMCP:
    """Build the FastMCP server with one tool per catalog entry.

    The process-wide API key comes from `settings` and is fixed for the life
    of the server.
    """
    if catalog is None:
        catalog = default_catalog()
    if executor is None:
        executor = RequestExecutor(settings.base_url)

    dispatcher = Dispatcher(catalog, executor, process_credential=settings.api_key)

    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)
    for descriptor in catalog:
        mcp.add_tool(CatalogTool.from_descriptor(descriptor, dispatcher))
    return mcp


# =============================================================================
# Server entry point
# =============================================================================
# python -m tools.mcp_server serves over stdio with settings from the
# environment (no .env loading; use main.py for that).
# =============================================================================
if __name__ == "__main__":
    _settings = Settings.from_env()
    configure_logging(_settings.log_level)
    create_server(_settings).run()
