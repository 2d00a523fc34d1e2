"""MCP server exposing the productivity suite tools over stdio.

Run with: python -m productivity_suite.ui.mcp.server
Or add to an MCP client: productivity-suite-mcp
"""
import json
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool, ToolAnnotations

from productivity_suite.core import config
from productivity_suite.core.dispatcher import Dispatcher
from productivity_suite.core.logging_setup import setup_logging
from productivity_suite.core.registry import ToolRegistry, ToolSpec
from productivity_suite.core.results import fail
from productivity_suite.core.store import Workspace

logger = logging.getLogger(__name__)


def _serialize(obj: Any) -> str:
    """Serialize result to JSON string."""
    def default(o):
        if hasattr(o, 'isoformat'):
            return o.isoformat()
        if hasattr(o, 'model_dump'):
            return o.model_dump(mode="json", by_alias=True)
        return str(o)
    return json.dumps(obj, default=default, indent=2)


def to_mcp_tool(spec: ToolSpec) -> Tool:
    annotations = ToolAnnotations(readOnlyHint=True) if spec.read_only else None
    return Tool(
        name=spec.name,
        description=spec.description,
        inputSchema=spec.input_schema,
        annotations=annotations,
    )


def render_result(result: dict) -> list[TextContent]:
    return [TextContent(type="text", text=_serialize(result))]


def create_server(
    workspace: Workspace | None = None,
    registry: ToolRegistry | None = None,
) -> Server:
    """
    Build an MCP server bound to one workspace.

    Args:
        workspace: Stores for this server; a fresh one from config if omitted
        registry: Tool registry; discovered from the domains if omitted
    """
    dispatcher = Dispatcher(workspace or Workspace.from_config(), registry)
    server = Server(config.SERVER_NAME, version=config.SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [to_mcp_tool(spec) for spec in dispatcher.list_tools()]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        try:
            result = dispatcher.call(name, arguments)
        except Exception as e:
            logger.exception("Unhandled error in %s", name)
            result = fail(str(e))
        return render_result(result)

    logger.debug("Server %s ready with %d tools", config.SERVER_NAME, len(dispatcher.list_tools()))
    return server


async def main():
    """Run the MCP server."""
    setup_logging()
    if config.is_file_logging_enabled():
        logger.info("Also logging to %s", config.LOG_FILE)
    server = create_server()
    logger.info("AI Productivity Suite MCP Server running on stdio")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run():
    """Console script entry point."""
    import asyncio
    asyncio.run(main())


if __name__ == "__main__":
    run()
