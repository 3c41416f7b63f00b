# =============================================================================
# usescraper_mcp/mcp_server.py  —  MCP Tool Server (stdio)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the usescraper package as an MCP server with one tool, "scrape".
#   It owns everything protocol-shaped; the scraping logic stays in
#   usescraper/.
#
# HOW A CALL FLOWS:
#   1. The MCP client sends tools/call {name, arguments}
#   2. _call_tool() hands them to usescraper.tool.dispatch()
#   3. dispatch() validates, then awaits UseScraperClient.scrape()
#   4. The ScrapeResult becomes a CallToolResult (isError on failure)
#
# ERROR MAPPING:
#   UnknownToolError       →  JSON-RPC error -32601 (method not found)
#   InvalidArgumentsError  →  JSON-RPC error -32602 (invalid params)
#   ScrapeFailure          →  normal result with isError=true
#   anything else          →  logged as "[MCP Error]" and re-raised to the
#                             SDK, which answers with a generic error
#
# RAW tools/call HANDLER:
#   tools/call is registered directly in request_handlers, not through the
#   @server.call_tool() decorator.  The decorator turns every exception into
#   an isError result; a raw handler lets McpError reach the client as a
#   JSON-RPC error.
#
# RUNNING THIS SERVER:
#   a) usescraper-mcp                        (console script)
#   b) python -m usescraper_mcp.mcp_server
#   c) python main.py
#   USESCRAPER_API_KEY must be set (environment or .env).
# =============================================================================

import logging
import os
import signal
import sys
from typing import Any

import anyio
import anyio.abc
from dotenv import load_dotenv
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from usescraper.client import UseScraperClient
from usescraper.config import Settings
from usescraper.errors import ConfigError, InvalidArgumentsError, UnknownToolError
from usescraper.models import ScrapeResult, ToolDescriptor
from usescraper.tool import Scraper, dispatch, list_tools

SERVER_NAME = "usescraper-server"
SERVER_VERSION = "0.1.0"

logger = logging.getLogger(__name__)

# =============================================================================
# Logging helpers
# =============================================================================
# Everything goes to STDERR: STDOUT carries the MCP JSON-RPC stream and a
# stray log line there would corrupt it.
#
#   CYAN    incoming tool calls
#   YELLOW  status along the way
#   GREEN   successful responses
#   RED     error responses
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

LOG_FORMAT = "%(asctime)s [MCP] %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def _log_request(tool_name: str, arguments: Any) -> None:
    """Log an incoming tool call with its arguments in CYAN."""
    if isinstance(arguments, dict):
        param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    else:
        param_str = repr(arguments)
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: ScrapeResult) -> ScrapeResult:
    """Log the outcome of a call, then return it.

    Scraped pages can be large, so success is logged by size only.
    """
    if result.is_error:
        logger.info(f"{_RED}  ← {tool_name} error: {result.text}{_RESET}")
    else:
        logger.info(f"{_GREEN}  ← {tool_name} response: {len(result.text)} chars{_RESET}")
    return result


# =============================================================================
# Server construction
# =============================================================================
def _to_mcp_tool(descriptor: ToolDescriptor) -> types.Tool:
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.input_schema,
    )


def _to_call_tool_result(result: ScrapeResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=result.text)],
        isError=result.is_error,
    )


def build_server(client: Scraper) -> Server:
    """Create an MCP server whose "scrape" tool is backed by ``client``.

    ``client`` is only read from, so a single instance serves every call.
    """
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def _list_tools() -> list[types.Tool]:
        return [_to_mcp_tool(descriptor) for descriptor in list_tools()]

    async def _call_tool(req: types.CallToolRequest) -> types.ServerResult:
        name = req.params.name
        arguments = req.params.arguments
        _log_request(name, arguments)

        try:
            result = await dispatch(name, arguments, client)
        except UnknownToolError as exc:
            _log_status(str(exc))
            raise McpError(types.ErrorData(code=types.METHOD_NOT_FOUND, message=str(exc))) from exc
        except InvalidArgumentsError as exc:
            _log_status(str(exc))
            raise McpError(types.ErrorData(code=types.INVALID_PARAMS, message=str(exc))) from exc
        except Exception:
            logger.exception("[MCP Error] unexpected failure in tool %r", name)
            raise

        return types.ServerResult(_to_call_tool_result(_log_response(name, result)))

    # Raw handler: McpError raised here reaches the caller as a JSON-RPC error.
    server.request_handlers[types.CallToolRequest] = _call_tool

    return server


# =============================================================================
# Lifecycle
# =============================================================================
# The stdio transport reads stdin in a worker thread that cannot be
# cancelled, so an interrupt does not wait for it: the HTTP client is closed
# and the process exits straight away with status 0.  Closing stdin ends the
# server through the normal path instead.
# =============================================================================
async def _shutdown_on_signal(
    client: UseScraperClient,
    *,
    task_status: anyio.abc.TaskStatus[None] = anyio.TASK_STATUS_IGNORED,
) -> None:
    """Wait for SIGINT/SIGTERM once, release the client and exit."""
    with anyio.open_signal_receiver(signal.SIGINT, signal.SIGTERM) as signals:
        task_status.started()
        async for signum in signals:
            logger.info("Received %s, shutting down", signal.Signals(signum).name)
            await client.aclose()
            logger.info("UseScraper MCP server stopped")
            sys.stdout.flush()
            sys.stderr.flush()
            os._exit(0)


async def serve(settings: Settings) -> None:
    """Serve MCP over stdio until interrupted or stdin closes."""
    async with UseScraperClient(settings) as client:
        server = build_server(client)
        async with anyio.create_task_group() as tg:
            await tg.start(_shutdown_on_signal, client)
            async with stdio_server() as (read_stream, write_stream):
                logger.info("UseScraper MCP server running on stdio")
                await server.run(
                    read_stream,
                    write_stream,
                    server.create_initialization_options(),
                )
            # stdin closed: stop waiting for signals
            tg.cancel_scope.cancel()


def configure_logging() -> None:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stderr,
    )


def main() -> None:
    """Console entry point."""
    load_dotenv()
    configure_logging()

    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        logger.critical("%s", exc)
        sys.exit(1)

    logger.info("Starting %s %s with %r", SERVER_NAME, SERVER_VERSION, settings)
    anyio.run(serve, settings)
    logger.info("UseScraper MCP server stopped")


if __name__ == "__main__":
    main()
