"""
notesmcp MCP Server - Apple Notes operations for MCP clients.

This exposes note management (create, search, read, edit, delete, move,
list folders and accounts) as MCP tools. Each tool call is validated,
rate limited, and carried out through generated AppleScript.

Security Features:
- Schema validation and sanitization of every tool argument
- Caller text reaches AppleScript only as escaped string literals
- Secure error handling with no information disclosure
- Structured logging for debugging

Usage:
    notesmcp  # Start MCP server (stdio transport)
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import (
    TextContent,
    Tool,
)

from notesmcp.config import get_config
from notesmcp.mcp.handlers import HANDLERS, VALIDATORS
from notesmcp.mcp.handlers.notes import ToolFailure
from notesmcp.mcp.tool_definitions import TOOLS
from notesmcp.notes import NotesManager
from notesmcp.rate_limit import get_rate_limiter
from notesmcp.scripting.executor import ScriptExecutor

logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = Server("apple-notes")


class RateLimitExceeded(Exception):
    """A tool was called more often than its window allows."""


def set_notes_manager(manager: Optional[NotesManager]) -> None:
    """Replace the NotesManager for this MCP session (``None`` rebuilds it)."""
    if manager is None:
        if hasattr(get_notes_manager, "_instance"):
            delattr(get_notes_manager, "_instance")
        return
    get_notes_manager._instance = manager  # type: ignore[attr-defined]


def get_notes_manager() -> NotesManager:
    """Get or create the NotesManager built from configuration."""
    if not hasattr(get_notes_manager, "_instance"):
        config = get_config()
        executor = ScriptExecutor(interpreter=config["interpreter"], timeout=config["timeout"])
        get_notes_manager._instance = NotesManager(  # type: ignore[attr-defined]
            executor, account=config["account"]
        )
    return get_notes_manager._instance  # type: ignore[attr-defined]


# =============================================================================
# INPUT VALIDATION & ERROR HANDLING
# =============================================================================


def validate_tool_input(name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Validate and sanitize MCP tool inputs."""
    try:
        if not isinstance(name, str):
            raise ValueError(f"tool name must be a string, got {type(name).__name__}")
        if not name:
            raise ValueError("tool name must not be empty")
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise ValueError(f"arguments must be an object, got {type(arguments).__name__}")

        validator = VALIDATORS.get(name)
        if validator is None:
            raise ValueError(f"Unknown tool: {name}")
        return validator(arguments)

    except (ValueError, TypeError) as e:
        logger.warning(f"Input validation failed for tool {name}: {e}")
        raise ValueError(f"Invalid input: {str(e)}")


def check_rate_limit(name: str) -> None:
    allowed, message = get_rate_limiter().check(name)
    if not allowed:
        raise RateLimitExceeded(message)


def handle_tool_error(e: Exception, tool_name: str, arguments: Any) -> List[TextContent]:
    """Handle tool errors securely."""
    if isinstance(e, ToolFailure):
        # Operation-level failure with a caller-safe message
        logger.info(f"Tool {tool_name} failed: {e}")
        return [TextContent(type="text", text=str(e))]

    elif isinstance(e, RateLimitExceeded):
        logger.warning(f"Rate limit exceeded for tool {tool_name}")
        return [TextContent(type="text", text=str(e))]

    elif isinstance(e, ValueError):
        logger.warning(f"Invalid input for tool {tool_name}: {e}")
        message = str(e)
        if not message.startswith("Invalid input"):
            message = f"Invalid input: {message}"
        return [TextContent(type="text", text=message)]

    else:
        # Unknown error - log full details but return generic message
        argument_keys = list(arguments.keys()) if isinstance(arguments, dict) else []
        logger.error(
            f"Internal error in tool {tool_name}",
            extra={
                "tool_name": tool_name,
                "arguments_keys": argument_keys,
                "error_type": type(e).__name__,
                "error_message": str(e),
            },
            exc_info=True,
        )
        return [TextContent(type="text", text="Internal server error")]


# =============================================================================
# MCP PROTOCOL HANDLERS
# =============================================================================


@mcp.list_tools()
async def list_tools() -> list[Tool]:
    """List available note tools."""
    return list(TOOLS)


@mcp.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls with validation, rate limiting and error handling."""
    try:
        sanitized_args = validate_tool_input(name, arguments)
        check_rate_limit(name)

        handler = HANDLERS.get(name)
        if handler is None:
            # Should not reach here due to validation, but handle gracefully
            logger.error(f"Unexpected tool name after validation: {name}")
            return [TextContent(type="text", text=f"Tool '{name}' is not available")]

        result = await handler(sanitized_args, get_notes_manager())
        return [TextContent(type="text", text=result)]

    except Exception as e:
        return handle_tool_error(e, name, arguments)


async def run_server():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await mcp.run(
            read_stream,
            write_stream,
            mcp.create_initialization_options(),
        )


def main(account: Optional[str] = None, timeout: Optional[float] = None):
    """Entry point for MCP server.

    Explicit arguments override the environment configuration.
    """
    if account is not None or timeout is not None:
        config = get_config()
        executor = ScriptExecutor(
            interpreter=config["interpreter"],
            timeout=timeout if timeout is not None else config["timeout"],
        )
        set_notes_manager(NotesManager(executor, account=account or config["account"]))

    manager = get_notes_manager()
    logger.info(f"Starting Apple Notes MCP server for account {manager.account}")
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
