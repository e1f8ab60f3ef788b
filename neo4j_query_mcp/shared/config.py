"""
Base configuration for the Neo4j query server.

Uses Pydantic Settings for environment-based configuration.
Connection parameters come either from discrete NEO4J_URI / NEO4J_USER /
NEO4J_PASSWORD variables or from a single comma-delimited NEO4J_CONNECTION
string, which takes precedence when both are present.
"""

from dataclasses import dataclass

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from neo4j_query_mcp.shared.exceptions import ConfigurationError

CONNECTION_DELIMITER = ","

USAGE = """\
You can provide these variables in two ways:

1. Using separate environment variables:
   NEO4J_URI=<your-uri> NEO4J_USER=<your-user> NEO4J_PASSWORD=<your-password> neo4j-query-mcp

2. Using a single connection string:
   NEO4J_CONNECTION=<uri>,<user>,<password> neo4j-query-mcp

Example:
   NEO4J_CONNECTION=neo4j+s://example.databases.neo4j.io,neo4j,your-password neo4j-query-mcp
"""


@dataclass(frozen=True)
class ConnectionConfig:
    """Resolved Neo4j connection parameters."""

    uri: str
    user: str
    password: str
    database: str | None = None


class BaseServerSettings(BaseSettings):
    """Settings shared by every part of the server."""

    server_name: str = "neo4j-mcp"

    # Neo4j connection
    neo4j_uri: str = ""
    neo4j_user: str = Field(
        default="",
        validation_alias=AliasChoices("neo4j_user", "neo4j_username"),
    )
    neo4j_password: str = ""
    neo4j_connection: str = ""
    neo4j_database: str | None = None

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    def connection_config(self) -> ConnectionConfig:
        """Resolve the connection parameters, all-or-nothing.

        Returns:
            ConnectionConfig built from the combined string when present,
            otherwise from the discrete variables.

        Raises:
            ConfigurationError: If the URI, user or password is missing.
        """
        uri, user, password = self.neo4j_uri, self.neo4j_user, self.neo4j_password

        if self.neo4j_connection:
            # No escaping: anything past the third comma is dropped.
            parts = self.neo4j_connection.split(CONNECTION_DELIMITER)
            parts += [""] * (3 - len(parts))
            uri, user, password = parts[:3]

        missing = [
            name
            for name, value in (
                ("NEO4J_URI", uri),
                ("NEO4J_USER", user),
                ("NEO4J_PASSWORD", password),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}",
                missing=missing,
            )

        return ConnectionConfig(
            uri=uri,
            user=user,
            password=password,
            database=self.neo4j_database or None,
        )
