#!/usr/bin/env python3
"""Steam Web API MCP server.

Serves every SteamClient operation as a Model Context Protocol tool over
stdio. Tools accept an optional format (json/xml/vdf) and dotted selector.
"""

import asyncio
import logging
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from steam_webapi.client import ConfigurationError, SteamClient
from steam_webapi.endpoints import ENDPOINT_CLASSES, EndpointManager


logger = logging.getLogger(__name__)

SERVER_NAME = "steam-webapi"


def create_server(manager: EndpointManager) -> Server:
    """Build an MCP server whose tools are routed through the manager."""
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return manager.get_all_tools()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        try:
            return await manager.call_tool(name, arguments)
        except ValueError as e:
            return [TextContent(type="text", text=f"Error: {e}")]

    return server


async def run_server() -> None:
    """Serve tools on stdin/stdout until the client disconnects."""
    try:
        client = SteamClient.from_env()
    except ConfigurationError as e:
        logger.error(f"Cannot start without a Steam Web API key: {e}")
        sys.exit(1)

    async with client:
        manager = EndpointManager(client, ENDPOINT_CLASSES)
        logger.info(f"Serving {len(manager.get_all_tools())} Steam tools")
        server = create_server(manager)

        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream, write_stream, server.create_initialization_options()
            )


def main() -> None:
    """Console entry point."""
    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    try:
        asyncio.run(run_server())
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")


if __name__ == "__main__":
    main()
