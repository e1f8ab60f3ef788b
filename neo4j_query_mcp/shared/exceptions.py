"""
Custom exception hierarchy for the Neo4j query server.

Server errors inherit from Neo4jMcpError so they can be caught
uniformly at the entry point.  Unknown tool names are protocol errors
and therefore subclass the MCP SDK's McpError instead.
"""

from mcp.shared.exceptions import McpError
from mcp.types import METHOD_NOT_FOUND, ErrorData


class Neo4jMcpError(Exception):
    """Base exception for all server errors."""

    def __init__(self, message: str, component: str = "unknown"):
        self.message = message
        self.component = component
        super().__init__(f"[{component}] {message}")


class ConfigurationError(Neo4jMcpError):
    """Connection parameters are missing or incomplete."""

    def __init__(self, message: str, missing: list[str] | None = None):
        self.missing = missing or []
        super().__init__(message, component="config")


class QueryExecutionError(Neo4jMcpError):
    """The database rejected or failed to run a query."""

    def __init__(self, message: str):
        super().__init__(message, component="database")


class UnknownToolError(McpError):
    """A tool call named a tool this server does not provide."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(
            ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {tool_name}")
        )
