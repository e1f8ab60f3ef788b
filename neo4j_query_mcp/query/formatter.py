"""
Result Formatter: renders query records as a text block for the caller.

Driver values are first converted into a small closed set of graph value
types (node, relationship, path, list, map, scalar) and then rendered by
a single total function.  Nothing in here raises: unknown shapes fall back
to ``str()``.
"""

import json
import warnings
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from neo4j.graph import Node, Path, Relationship

NO_RESULTS = "No results found."
RESULTS_HEADER = "Results:"


# ─── Graph value types ───────────────────────────────────────


@dataclass(frozen=True)
class GraphNode:
    """A vertex: identity, label set and property map."""

    identity: Any
    labels: tuple[str, ...] = ()
    properties: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GraphRelationship:
    """An edge: identity, type and property map."""

    identity: Any
    type: str
    properties: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GraphPath:
    """Alternating nodes and relationships; ``len(relationships)`` segments."""

    nodes: tuple[GraphNode, ...] = ()
    relationships: tuple[GraphRelationship, ...] = ()

    @property
    def length(self) -> int:
        return len(self.relationships)


class ValueKind(str, Enum):
    NULL = "null"
    NODE = "node"
    RELATIONSHIP = "relationship"
    PATH = "path"
    LIST = "list"
    MAP = "map"
    SCALAR = "scalar"


def classify(value: Any) -> ValueKind:
    """Tag a (converted) value with its kind."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, GraphNode):
        return ValueKind.NODE
    if isinstance(value, GraphRelationship):
        return ValueKind.RELATIONSHIP
    if isinstance(value, GraphPath):
        return ValueKind.PATH
    if isinstance(value, list):
        return ValueKind.LIST
    if isinstance(value, Mapping):
        return ValueKind.MAP
    return ValueKind.SCALAR


# ─── Driver → graph value conversion ─────────────────────────


def _identity(entity: Node | Relationship) -> Any:
    """The integer id the server reports, or the element id when it has none."""
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", DeprecationWarning)
        legacy_id = getattr(entity, "id", None)
    return legacy_id if legacy_id is not None else entity.element_id


def _node_from_driver(node: Node) -> GraphNode:
    return GraphNode(
        identity=_identity(node),
        labels=tuple(sorted(node.labels)),
        properties=dict(node.items()),
    )


def _relationship_from_driver(rel: Relationship) -> GraphRelationship:
    return GraphRelationship(
        identity=_identity(rel),
        type=rel.type,
        properties=dict(rel.items()),
    )


def to_graph_value(value: Any) -> Any:
    """Convert a value returned by the neo4j driver into a graph value.

    Nodes, relationships and paths become GraphNode / GraphRelationship /
    GraphPath; lists, tuples and maps are converted element-wise; anything
    else (strings, numbers, temporal and spatial types) is returned as is.
    """
    if isinstance(value, Node):
        return _node_from_driver(value)
    if isinstance(value, Relationship):
        return _relationship_from_driver(value)
    if isinstance(value, Path):
        return GraphPath(
            nodes=tuple(_node_from_driver(n) for n in value.nodes),
            relationships=tuple(_relationship_from_driver(r) for r in value.relationships),
        )
    if isinstance(value, Mapping):
        return {str(k): to_graph_value(v) for k, v in value.items()}
    # Duration and Point are tuple subclasses and must stay scalars.
    if type(value) in (list, tuple):
        return [to_graph_value(v) for v in value]
    return value


# ─── Rendering ───────────────────────────────────────────────


def _jsonable(value: Any) -> Any:
    """Reduce a value to what ``json.dumps`` encodes faithfully."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (GraphNode, GraphRelationship, GraphPath)):
        return format_value(value)
    if isinstance(value, Mapping):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if type(value) in (list, tuple):
        return [_jsonable(v) for v in value]
    return str(value)


def _to_json(value: Any) -> str:
    return json.dumps(_jsonable(value), separators=(",", ":"), ensure_ascii=False)


def _format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_value(value: Any) -> str:
    """Render one field value.

    Rules, first match wins:
      null          → ``null``
      node          → ``Node(id=…, labels=[…], properties={…})``
      relationship  → ``Relationship(id=…, type=…, properties={…})``
      path          → ``Path(length=n, nodes=n+1)``
      list          → ``[a, b, …]`` with each element rendered recursively
      map           → compact JSON
      anything else → ``str()`` (booleans as ``true`` / ``false``)
    """
    value = to_graph_value(value)
    kind = classify(value)

    if kind is ValueKind.NULL:
        return "null"
    if kind is ValueKind.NODE:
        return (
            f"Node(id={value.identity}, labels=[{', '.join(value.labels)}], "
            f"properties={_to_json(value.properties)})"
        )
    if kind is ValueKind.RELATIONSHIP:
        return (
            f"Relationship(id={value.identity}, type={value.type}, "
            f"properties={_to_json(value.properties)})"
        )
    if kind is ValueKind.PATH:
        return f"Path(length={value.length}, nodes={value.length + 1})"
    if kind is ValueKind.LIST:
        return f"[{', '.join(format_value(v) for v in value)}]"
    if kind is ValueKind.MAP:
        return _to_json(value)
    return _format_scalar(value)


def _record_items(record: Any) -> list[tuple[str, Any]]:
    """Field (key, value) pairs in the record's own declaration order."""
    if hasattr(record, "items"):
        return list(record.items())
    return [(str(i), v) for i, v in enumerate(record)]


def format_results(records: Sequence[Any]) -> str:
    """Render a full result set.

    Args:
        records: ``neo4j.Record`` objects (or any mapping-like rows).

    Returns:
        ``No results found.`` for an empty set, otherwise a ``Results:``
        header followed by one ``Record <n>:`` block per record.
    """
    if not records:
        return NO_RESULTS

    output = [RESULTS_HEADER]
    for index, record in enumerate(records, start=1):
        output.append(f"\nRecord {index}:")
        for key, value in _record_items(record):
            output.append(f"{key}: {format_value(value)}")
    return "\n".join(output)
