"""
Database package: the shared Neo4j connection handler.
"""

from .neo4j_handler import Neo4jHandler

__all__ = ["Neo4jHandler"]
