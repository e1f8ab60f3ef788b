"""
Unit tests for the Neo4j connection handler.

The driver factory is patched; no database is contacted.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from neo4j_query_mcp.shared.config import ConnectionConfig
from neo4j_query_mcp.shared.database import Neo4jHandler

CONFIG = ConnectionConfig(uri="bolt://localhost:7687", user="neo4j", password="secret")


@pytest.fixture
def graph_database():
    with patch("neo4j_query_mcp.shared.database.neo4j_handler.AsyncGraphDatabase") as mock_gdb:
        driver = MagicMock()
        driver.close = AsyncMock()
        driver.verify_connectivity = AsyncMock()
        mock_gdb.driver.return_value = driver
        yield mock_gdb, driver


class TestLifecycle:

    async def test_connect_uses_basic_auth(self, graph_database):
        mock_gdb, driver = graph_database

        handler = await Neo4jHandler(CONFIG).connect()

        assert handler.driver is driver
        args, kwargs = mock_gdb.driver.call_args
        assert args == ("bolt://localhost:7687",)
        auth = kwargs["auth"]
        assert auth.scheme == "basic"
        assert auth.principal == "neo4j"
        assert auth.credentials == "secret"

    async def test_connect_is_lazy_and_idempotent(self, graph_database):
        mock_gdb, driver = graph_database
        handler = Neo4jHandler(CONFIG)

        await handler.connect()
        await handler.connect()

        assert mock_gdb.driver.call_count == 1
        driver.verify_connectivity.assert_not_awaited()

    async def test_close_only_once(self, graph_database):
        _, driver = graph_database
        handler = await Neo4jHandler(CONFIG).connect()

        await handler.close()
        await handler.close()

        driver.close.assert_awaited_once()
        assert not handler.connected

    async def test_context_manager(self, graph_database):
        _, driver = graph_database

        async with Neo4jHandler(CONFIG) as handler:
            assert handler.connected

        driver.close.assert_awaited_once()

    def test_driver_before_connect_raises(self):
        with pytest.raises(RuntimeError, match="not connected"):
            Neo4jHandler(CONFIG).driver


class TestSessions:

    async def test_session_targets_configured_database(self, graph_database):
        _, driver = graph_database
        config = ConnectionConfig(uri=CONFIG.uri, user="u", password="p", database="movies")
        handler = await Neo4jHandler(config).connect()

        handler.session()

        driver.session.assert_called_once_with(database="movies")

    async def test_session_default_database(self, graph_database):
        _, driver = graph_database
        handler = await Neo4jHandler(CONFIG).connect()

        handler.session()

        driver.session.assert_called_once_with(database=None)

    async def test_verify_reachable(self, graph_database):
        handler = await Neo4jHandler(CONFIG).connect()

        assert await handler.verify() is True

    async def test_verify_unreachable(self, graph_database):
        _, driver = graph_database
        driver.verify_connectivity.side_effect = OSError("connection refused")
        handler = await Neo4jHandler(CONFIG).connect()

        assert await handler.verify() is False
