"""Entry point for the Neo4j query MCP server.

Run with:
  python -m neo4j_query_mcp                   # MCP stdio transport (default)
  python -m neo4j_query_mcp --transport sse   # SSE transport via uvicorn
"""

import argparse
import asyncio
import sys

from pydantic import ValidationError

from neo4j_query_mcp.query.config import TRANSPORTS, QueryServerSettings
from neo4j_query_mcp.query.server import Neo4jQueryServer
from neo4j_query_mcp.shared.config import USAGE
from neo4j_query_mcp.shared.database import Neo4jHandler
from neo4j_query_mcp.shared.exceptions import ConfigurationError
from neo4j_query_mcp.shared.logging import set_level, setup_logging

logger = setup_logging("neo4j_query", level="INFO")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="neo4j-query-mcp",
        description="MCP server exposing a single Cypher query tool.",
    )
    parser.add_argument("--transport", choices=TRANSPORTS, default=None)
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--log-level", default=None)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Load settings, start the server and return the process exit code."""
    args = _parse_args(argv)
    try:
        settings = QueryServerSettings()
    except ValidationError as exc:
        print(f"\nError: Invalid configuration:\n{exc}\n", file=sys.stderr)
        return 1

    overrides = {
        key: value
        for key, value in (
            ("transport", args.transport),
            ("host", args.host),
            ("port", args.port),
            ("log_level", args.log_level),
        )
        if value is not None
    }
    if overrides:
        settings = settings.model_copy(update=overrides)
    set_level(settings.log_level)

    try:
        config = settings.connection_config()
    except ConfigurationError as exc:
        print(f"\nError: {exc.message}\n\n{USAGE}", file=sys.stderr)
        return 1

    logger.info("Connecting to Neo4j at %s as %s", config.uri, config.user)
    server = Neo4jQueryServer(Neo4jHandler(config), name=settings.server_name)

    try:
        asyncio.run(
            server.run(
                transport=settings.transport,
                host=settings.host,
                port=settings.port,
                log_level=settings.log_level,
            )
        )
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    return 0


def run() -> None:
    """Console-script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    run()
