"""
Query Executor: runs one Cypher query on a fresh session.

Every call borrows its own session from the shared driver and gives it
back when the ``async with`` block exits, whether the query succeeded or
not.  Results are collected fully into memory.
"""

import logging
from typing import Any

from neo4j import Record
from neo4j.exceptions import Neo4jError

from neo4j_query_mcp.shared.database import Neo4jHandler
from neo4j_query_mcp.shared.exceptions import QueryExecutionError

logger = logging.getLogger("neo4j_query.executor")


def _driver_message(exc: Exception) -> str:
    """The driver's own message, without the ``{code: …}`` prefix.

    Only server errors carry a meaningful ``message``; client-side driver
    errors (ServiceUnavailable, SessionExpired) expose a generic GQL
    placeholder there, so their text comes from ``str()``.
    """
    if isinstance(exc, Neo4jError) and exc.message:
        return exc.message
    return str(exc) or exc.__class__.__name__


class QueryExecutor:
    """Executes Cypher against the handler's driver."""

    def __init__(self, handler: Neo4jHandler):
        self._handler = handler

    async def execute(
        self,
        query: str,
        parameters: dict[str, Any] | None = None,
    ) -> list[Record]:
        """Run a query and return all of its records.

        Args:
            query: Cypher query string, passed through unchanged.
            parameters: Optional query parameters.

        Returns:
            List of ``neo4j.Record`` in the order the database returned them.

        Raises:
            QueryExecutionError: If the driver fails to run the query
                (syntax errors, constraint violations, auth or network
                failures).
        """
        logger.debug("Executing query: %s", query)
        try:
            async with self._handler.session() as session:
                result = await session.run(query, parameters or {})
                records = [record async for record in result]
        except Exception as exc:
            message = _driver_message(exc)
            logger.warning("Query failed: %s", message)
            raise QueryExecutionError(message) from exc

        logger.debug("Query returned %d record(s)", len(records))
        return records
