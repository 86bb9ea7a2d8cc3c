# =============================================================================
# tools/mcp_server.py  —  FastMCP Server Wiring
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Answers the two MCP tool requests from core/ and is the only module that
#   imports FastMCP or the MCP SDK.
#
# HOW IT WORKS (the flow):
#   1. tools/list  → every descriptor from core.registry.list_capabilities()
#   2. tools/call  → InvocationRequest → InvocationHandler.invoke()
#   3. Success     → the response text goes back as a single text block
#      Failure     → InvocationError is raised as McpError(code, message)
#
# Both requests are registered straight on FastMCP's low-level server.  The
# SDK's @call_tool decorator turns every exception into a result flagged
# isError; a McpError raised from a raw request handler instead becomes a
# JSON-RPC error carrying its code (-32600, -32601, -32602 or -32603).
# =============================================================================

import logging
import sys

from fastmcp import FastMCP
from mcp import types
from mcp.shared.exceptions import McpError

from core.errors import InvocationError
from core.models import InvocationRequest
from core.registry import list_capabilities
from core.search import InvocationHandler

SERVER_NAME = "get-image-mcp"
SERVER_VERSION = "1.0.0"

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: STDOUT carries the MCP JSON-RPC stream.
#
#   CYAN    incoming tool calls with their arguments
#   YELLOW  intermediate status
#   GREEN   successful responses
#   RED     errors, with their MCP error code
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

logger = logging.getLogger("get_image_mcp")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, params: dict) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the size of a tool's text response in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {len(text)} chars{_RESET}")
    logger.debug(text)
    return text


def _log_error(tool_name: str, error: InvocationError) -> None:
    logger.error(f"{_RED}  ✗ {tool_name} failed [{error.code.name}]: {error.message}{_RESET}")




# =============================================================================
# Server factory
# =============================================================================
def create_server(handler: InvocationHandler) -> FastMCP:
    """Build the MCP server around a ready InvocationHandler.

    The handler (and the access key inside its client) is passed in rather
    than read from the environment here, so tests can run the full server
    in-process against a fake Unsplash client.
    """
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    async def list_tools(req: types.ListToolsRequest) -> types.ServerResult:
        tools = [types.Tool(**descriptor.to_dict()) for descriptor in list_capabilities()]
        return types.ServerResult(types.ListToolsResult(tools=tools))

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        name = req.params.name
        arguments = req.params.arguments
        _log_request(name, arguments or {})

        _log_status(f"Dispatching {name}")
        try:
            response = handler.invoke(InvocationRequest(capability_name=name, arguments=arguments))
        except InvocationError as e:
            _log_error(name, e)
            raise McpError(types.ErrorData(code=int(e.code), message=e.message)) from e

        text = _log_response(name, response.text)
        return types.ServerResult(
            types.CallToolResult(content=[types.TextContent(type="text", text=text)])
        )

    lowlevel = mcp._mcp_server
    lowlevel.request_handlers[types.ListToolsRequest] = list_tools
    lowlevel.request_handlers[types.CallToolRequest] = call_tool

    return mcp
