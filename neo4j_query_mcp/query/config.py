"""Query server configuration."""

from pydantic import Field

from neo4j_query_mcp.shared.config import BaseServerSettings

TRANSPORTS = ("stdio", "sse")


class QueryServerSettings(BaseServerSettings):
    """Settings specific to the query server's transport."""

    transport: str = Field(default="stdio", validation_alias="neo4j_mcp_transport")
    host: str = Field(default="127.0.0.1", validation_alias="neo4j_mcp_host")
    port: int = Field(default=8005, validation_alias="neo4j_mcp_port")
