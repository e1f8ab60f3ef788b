"""Neo4j Query MCP Server - run Cypher queries via Model Context Protocol."""

__version__ = "1.0.2"
