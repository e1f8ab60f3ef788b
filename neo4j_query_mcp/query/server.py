"""
Neo4j Query MCP Server

Exposes one tool, ``neo4j-query``, that runs a Cypher query and returns
the records as readable text.  The Neo4j driver is opened once when the
server starts and closed when it stops, on every exit path.

Run as:  python -m neo4j_query_mcp                   (stdio transport)
         python -m neo4j_query_mcp --transport sse   (SSE on host:port)
"""

import logging

import uvicorn
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Mount, Route

from neo4j_query_mcp import __version__
from neo4j_query_mcp.query.dispatcher import QueryDispatcher
from neo4j_query_mcp.query.executor import QueryExecutor
from neo4j_query_mcp.shared.database import Neo4jHandler

logger = logging.getLogger("neo4j_query.server")


class Neo4jQueryServer:
    """Wires the dispatcher into an MCP server and owns its lifecycle."""

    def __init__(self, handler: Neo4jHandler, name: str = "neo4j-mcp"):
        self.handler = handler
        self.dispatcher = QueryDispatcher(QueryExecutor(handler))
        self.server: Server = Server(name, version=__version__)
        self._setup_handlers()

    # ─── Handlers ───────────────────────────────────────────

    def _setup_handlers(self) -> None:
        @self.server.list_tools()
        async def handle_list_tools() -> list[types.Tool]:
            return self.dispatcher.list_tools()

        # Registered directly rather than through @server.call_tool():
        # the decorator converts every exception into a tool result, and an
        # unknown tool name has to reach the client as METHOD_NOT_FOUND.
        self.server.request_handlers[types.CallToolRequest] = self.handle_call_tool

    async def handle_call_tool(self, request: types.CallToolRequest) -> types.ServerResult:
        """Dispatch a ``tools/call`` request."""
        params = request.params
        try:
            result = await self.dispatcher.call_tool(params.name, params.arguments)
        except McpError:
            raise
        except Exception:
            logger.exception("[MCP Error] tool call %r failed", params.name)
            raise
        return types.ServerResult(result)

    # ─── Transports ─────────────────────────────────────────

    async def run_stdio(self) -> None:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Neo4j MCP server running on stdio")
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )

    def sse_app(self) -> Starlette:
        """Build the Starlette ASGI app serving MCP over SSE."""
        sse = SseServerTransport("/messages/")

        async def handle_sse(request: Request) -> Response:
            async with sse.connect_sse(
                request.scope, request.receive, request._send
            ) as (read_stream, write_stream):
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.server.create_initialization_options(),
                )
            return Response()

        return Starlette(
            routes=[
                Route("/sse", endpoint=handle_sse, methods=["GET"]),
                Mount("/messages/", app=sse.handle_post_message),
            ],
        )

    async def run_sse(self, host: str, port: int, log_level: str = "info") -> None:
        logger.info("Neo4j MCP server running on SSE at http://%s:%d/sse", host, port)
        config = uvicorn.Config(self.sse_app(), host=host, port=port, log_level=log_level.lower())
        await uvicorn.Server(config).serve()

    # ─── Lifecycle ──────────────────────────────────────────

    async def run(
        self,
        transport: str = "stdio",
        host: str = "127.0.0.1",
        port: int = 8005,
        log_level: str = "info",
    ) -> None:
        """Open the driver, serve until the transport closes, then clean up.

        In-flight queries are not awaited on shutdown.
        """
        await self.handler.connect()
        try:
            if transport == "sse":
                await self.run_sse(host, port, log_level)
            else:
                await self.run_stdio()
        except Exception:
            logger.exception("[MCP Error] %s transport stopped with an error", transport)
            raise
        finally:
            await self.handler.close()
            logger.info("Neo4j MCP server stopped")
