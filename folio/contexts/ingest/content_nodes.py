"""
Content Node Model

Raw portfolio content is an arbitrarily nested tree of plain values. Each node
is classified into exactly one variant of a closed union:

- ScalarNode: str, number, bool, None (and anything else opaque)
- SequenceNode: list or tuple of nodes
- TaggedNode: {"format": <str>, "content": <any>} wrapper naming a content format
- MappingNode: any other dict

Traversals (normalization, format detection) classify once per node and branch
on the variant instead of probing keys ad hoc.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Union

FORMAT_KEY = "format"
CONTENT_KEY = "content"


@dataclass(frozen=True)
class ScalarNode:
    value: Any


@dataclass(frozen=True)
class SequenceNode:
    items: List[Any]


@dataclass(frozen=True)
class MappingNode:
    entries: Dict[Any, Any]


@dataclass(frozen=True)
class TaggedNode:
    """
    A value wrapped with the format its content is written in.

    Attributes:
        format: Raw format string as supplied (resolved by format_processors)
        content: Content to parse, normally a string
    """

    format: str
    content: Any


ContentNode = Union[ScalarNode, SequenceNode, MappingNode, TaggedNode]


def is_tagged(value: Any) -> bool:
    """True if value is a {"format": str, "content": ...} wrapper."""
    return (
        isinstance(value, dict)
        and isinstance(value.get(FORMAT_KEY), str)
        and CONTENT_KEY in value
    )


def classify(value: Any) -> ContentNode:
    """
    Classify a raw value into its content node variant.

    Args:
        value: Any raw content value

    Returns:
        The matching ContentNode variant wrapping the value
    """
    if is_tagged(value):
        return TaggedNode(format=value[FORMAT_KEY], content=value[CONTENT_KEY])
    if isinstance(value, dict):
        return MappingNode(entries=value)
    if isinstance(value, (list, tuple)):
        return SequenceNode(items=list(value))
    return ScalarNode(value=value)


def child_path(path: str, key: Any) -> str:
    """Dotted path of a child node (list indices in brackets)."""
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}" if path else str(key)
