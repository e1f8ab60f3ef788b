"""
Neo4j Connection Handler

Owns the single async Neo4j driver used for the lifetime of the process.
The handler is built from a resolved ConnectionConfig and handed to the
query executor explicitly; nothing looks it up globally.
"""

import logging

from neo4j import AsyncDriver, AsyncGraphDatabase, AsyncSession, basic_auth

from neo4j_query_mcp.shared.config import ConnectionConfig

logger = logging.getLogger("neo4j_query.neo4j_handler")


class Neo4jHandler:
    """
    Manages a single async Neo4j driver.

    Usage
    -----
    handler = Neo4jHandler(config)
    await handler.connect()
    async with handler.session() as session:
        await session.run("MATCH (n) RETURN n LIMIT 5")
    await handler.close()

    The handler can also be used as an async context-manager:

        async with Neo4jHandler(config) as handler:
            ...
    """

    def __init__(self, config: ConnectionConfig):
        self._config = config
        self._driver: AsyncDriver | None = None

    # ─── Lifecycle ──────────────────────────────────────────

    async def connect(self) -> "Neo4jHandler":
        """Create the async driver.

        No round trip is made here: authentication and network problems
        only show up when the first query runs.

        Returns:
            Self for method chaining.
        """
        if self._driver is not None:
            return self

        self._driver = AsyncGraphDatabase.driver(
            self._config.uri,
            auth=basic_auth(self._config.user, self._config.password),
        )
        logger.info(
            "Neo4j driver created for %s (db=%s)",
            self._config.uri,
            self._config.database or "<default>",
        )
        return self

    async def close(self) -> None:
        """Close the underlying driver. Safe to call more than once."""
        if self._driver:
            driver, self._driver = self._driver, None
            await driver.close()
            logger.info("Neo4j connection closed")

    async def __aenter__(self) -> "Neo4jHandler":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # ─── Properties ─────────────────────────────────────────

    @property
    def driver(self) -> AsyncDriver:
        """Return the raw async driver.

        Raises:
            RuntimeError: If handler is not connected (call connect() first).
        """
        if self._driver is None:
            raise RuntimeError("Neo4jHandler is not connected, call connect() first")
        return self._driver

    @property
    def database(self) -> str | None:
        """Return the configured database name (None = server default)."""
        return self._config.database

    @property
    def uri(self) -> str:
        return self._config.uri

    @property
    def connected(self) -> bool:
        return self._driver is not None

    # ─── Sessions ───────────────────────────────────────────

    def session(self) -> AsyncSession:
        """Open a new single-use session on the shared driver."""
        return self.driver.session(database=self._config.database)

    async def verify(self) -> bool:
        """Quick health-check: returns True if the database is reachable."""
        try:
            await self.driver.verify_connectivity()
            return True
        except Exception:
            logger.warning("Neo4j at %s is not reachable", self._config.uri, exc_info=True)
            return False
