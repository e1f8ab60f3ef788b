"""Query server: the neo4j-query tool, its executor and result formatter."""

from neo4j_query_mcp.query.dispatcher import QueryDispatcher
from neo4j_query_mcp.query.executor import QueryExecutor
from neo4j_query_mcp.query.formatter import format_results, format_value

__all__ = [
    "QueryDispatcher",
    "QueryExecutor",
    "format_results",
    "format_value",
]
