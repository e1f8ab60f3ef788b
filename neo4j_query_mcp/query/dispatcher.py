"""
Tool registry and dispatcher.

The server advertises a single tool, ``neo4j-query``.  Database failures
are turned into a normal tool result flagged ``isError`` so the calling
agent can read and react to them; an unknown tool name is a protocol
error and propagates.
"""

import logging
from typing import Any

from mcp import types

from neo4j_query_mcp.query.executor import QueryExecutor
from neo4j_query_mcp.query.formatter import format_results
from neo4j_query_mcp.shared.exceptions import QueryExecutionError, UnknownToolError

logger = logging.getLogger("neo4j_query.dispatcher")

QUERY_TOOL_NAME = "neo4j-query"

QUERY_TOOL = types.Tool(
    name=QUERY_TOOL_NAME,
    description="Execute a Cypher query against the Neo4j database",
    inputSchema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "The Cypher query to execute",
            },
            "parameters": {
                "type": "object",
                "description": "Query parameters (optional)",
                "additionalProperties": True,
            },
        },
        "required": ["query"],
    },
)


def _text_result(text: str, is_error: bool = False) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


class QueryDispatcher:
    """Routes tool calls to the query executor."""

    def __init__(self, executor: QueryExecutor):
        self._executor = executor

    def list_tools(self) -> list[types.Tool]:
        return [QUERY_TOOL]

    async def call_tool(
        self,
        name: str,
        arguments: dict[str, Any] | None,
    ) -> types.CallToolResult:
        """Handle one ``tools/call`` request.

        Args:
            name: Tool name; matched exactly (case-sensitive).
            arguments: Tool arguments; ``query`` and optional ``parameters``.

        Returns:
            CallToolResult with the formatted records, or with
            ``Neo4j error: <message>`` and ``isError=True`` when the query
            failed.

        Raises:
            UnknownToolError: If ``name`` is not a registered tool.
        """
        if name != QUERY_TOOL_NAME:
            logger.warning("Rejected call to unknown tool %r", name)
            raise UnknownToolError(name)

        args = arguments or {}
        query = args.get("query")
        query = "" if query is None else str(query)
        parameters = args.get("parameters") or {}

        try:
            records = await self._executor.execute(query, parameters)
        except QueryExecutionError as exc:
            return _text_result(f"Neo4j error: {exc.message}", is_error=True)

        return _text_result(format_results(records))
