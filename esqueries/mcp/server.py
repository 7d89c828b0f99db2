"""Elasticsearch MCP server: search-by-date and semantic search tools over one index."""

import argparse
import asyncio
import logging
import sys
from contextlib import asynccontextmanager

import mcp.server.stdio
import mcp.types as types
import uvicorn
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.server.sse import SseServerTransport
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from pydantic import AnyUrl
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.routing import Mount, Route

from esqueries.client import SearchClient
from esqueries.config import SearchConfig, get_host, get_log_dir, get_port
from esqueries.mcp.tools import TOOLS, ToolResult, UnknownToolError, dispatch
from esqueries.mcp.resources import get_index_schema, get_service_overview

logger = logging.getLogger(__name__)

DEFAULT_SERVER_NAME = "Elasticsearch MCP"
DEFAULT_SERVER_VERSION = "1.0.0"
MESSAGE_PATH = "/es-queries/"
INTERNAL_ERROR = "INTERNAL_ERROR"

INDEX_SCHEMA_URI = "file:///schema/index"
OVERVIEW_URI = "file:///overview/service"


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    """Wrap a ToolResult in the MCP response type, error codes go to _meta.code."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=result.text)],
        isError=result.is_error,
        _meta={"code": result.error_code} if result.error_code else None,
    )


async def call_tool(name: str, arguments: dict | None, client) -> types.CallToolResult:
    """
    Dispatch a tool call and convert the outcome for the transport.

    Search failures are logged with their traceback and reported to the caller
    as a generic internal error. Unknown tool names are raised to the MCP server.
    """
    try:
        result = await dispatch(name, arguments, client)
    except UnknownToolError:
        raise
    except Exception:
        logger.exception("Tool %s failed with arguments %s", name, arguments)
        result = ToolResult.error("Internal error while querying the search index", INTERNAL_ERROR)
    return to_call_tool_result(result)


def build_server(client: SearchClient, name: str = DEFAULT_SERVER_NAME) -> Server:
    """Create the MCP server with its tools and resources bound to the given client."""
    server = Server(name)
    index = client.config.index

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        """List available tools."""
        return [
            types.Tool(
                name=spec.name.value,
                description=spec.description,
                inputSchema=spec.input_schema,
            )
            for spec in TOOLS.values()
        ]

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict | None) -> types.CallToolResult:
        """Handle tool execution requests."""
        return await call_tool(name, arguments, client)

    @server.list_resources()
    async def list_resources() -> list[types.Resource]:
        """List available resources."""
        return [
            types.Resource(
                uri=INDEX_SCHEMA_URI,
                name="Index Schema",
                description="Fields queried by the search tools and the accepted date formats.",
                mimeType="application/json"
            ),
            types.Resource(
                uri=OVERVIEW_URI,
                name="Service Overview",
                description="What this server searches and how results are returned.",
                mimeType="text/plain"
            ),
        ]

    @server.read_resource()
    async def read_resource(uri: AnyUrl) -> str:
        """Read a resource by URI."""
        if str(uri) == INDEX_SCHEMA_URI:
            return get_index_schema(index)
        elif str(uri) == OVERVIEW_URI:
            return get_service_overview(index, client.config.max_results)
        raise ValueError("Resource not found")

    return server


def create_app(server: Server, client: SearchClient) -> Starlette:
    """
    HTTP application serving the MCP server.

    Routes:
        GET  /             health check
        GET  /sse          SSE stream, messages are posted to /es-queries/?session_id=...
        *    /mcp          streamable HTTP transport
    """
    sse = SseServerTransport(MESSAGE_PATH)
    session_manager = StreamableHTTPSessionManager(app=server)

    async def handle_sse(request: Request) -> Response:
        async with sse.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
        return Response()

    async def handle_streamable_http(scope, receive, send):
        await session_manager.handle_request(scope, receive, send)

    async def health(request: Request) -> PlainTextResponse:
        return PlainTextResponse("MCP server is running!")

    @asynccontextmanager
    async def lifespan(app: Starlette):
        async with session_manager.run():
            try:
                yield
            finally:
                await client.close()

    return Starlette(
        routes=[
            Route("/", endpoint=health, methods=["GET"]),
            Route("/sse", endpoint=handle_sse, methods=["GET"]),
            Mount(MESSAGE_PATH, app=sse.handle_post_message),
            Mount("/mcp", app=handle_streamable_http),
        ],
        lifespan=lifespan,
    )


async def run_stdio(server: Server, client: SearchClient,
                    server_name: str = DEFAULT_SERVER_NAME, server_version: str = DEFAULT_SERVER_VERSION):
    """Run the server on stdin/stdout."""
    try:
        async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=server_name,
                    server_version=server_version,
                    capabilities=server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={},
                    ),
                )
            )
    finally:
        await client.close()


def setup_logging(level: int = logging.INFO):
    """Log to stderr (stdout carries the stdio protocol) and to server.log in the log dir."""
    log_dir = get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_dir / 'server.log'),
            logging.StreamHandler(sys.stderr)
        ]
    )


def main():
    """Main entry point with argument parsing."""
    parser = argparse.ArgumentParser(description='Run the Elasticsearch MCP server')
    parser.add_argument('--transport', choices=['http', 'stdio'], default='http',
                        help='http serves the SSE and streamable HTTP transports, stdio is for local MCP clients (default: http)')
    parser.add_argument('--host', default=get_host(),
                        help='Address to bind the HTTP server to (default: HOST or 0.0.0.0)')
    parser.add_argument('--port', type=int, default=get_port(),
                        help='HTTP port (default: PORT or 3001)')
    parser.add_argument('--index',
                        help='Index to search (default: INDEX_NAME)')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging')
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.debug else logging.INFO)

    try:
        config = SearchConfig.from_env(index=args.index)
    except ValueError as e:
        parser.error(str(e))

    client = SearchClient(config)
    server = build_server(client)

    if args.transport == 'stdio':
        asyncio.run(run_stdio(server, client))
    else:
        logger.info("Server is running at http://%s:%d (index %s)", args.host, args.port, config.index)
        uvicorn.run(create_app(server, client), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
