"""
Placement rules.

``containment`` and ``sibling`` are the two tables every insert and drag
operation is checked against. The cursor-level helpers below only combine
them; drop-target highlighting and menu enablement should call these
helpers rather than repeat the rules.
"""

from typing import Union

from .node import Node, NodeType
from .tree import Cursor, parent

# Containers accepting any non-Option child
_GENERAL_CONTAINERS = frozenset(
    {
        NodeType.DOCUMENT,
        NodeType.PAGE,
        NodeType.ROW,
        NodeType.COLUMN,
        NodeType.TEXT_COLUMN,
    }
)


def _check(value: object) -> NodeType:
    if not isinstance(value, NodeType):
        raise TypeError(f"Expected NodeType, got {type(value).__name__}")
    return value


def containment(container: NodeType, candidate: NodeType) -> bool:
    """Return True if a ``candidate`` node may be a child of a ``container`` node.

    Option is accepted only by Radio. Document, Page, Row, Column and
    TextColumn accept any non-Option type. Every other type accepts nothing.

    Raises
    ------
    TypeError
        If either argument is not a NodeType
    """
    container = _check(container)
    candidate = _check(candidate)
    if container is NodeType.RADIO:
        return candidate is NodeType.OPTION
    if container in _GENERAL_CONTAINERS:
        return candidate is not NodeType.OPTION
    return False


def sibling(neighbor: NodeType, candidate: NodeType) -> bool:
    """Return True if a ``candidate`` node may sit next to a ``neighbor`` node.

    Option only beside Option, Page only beside Page; any other type is
    compatible with any other type that is neither Option nor Page.

    Raises
    ------
    TypeError
        If either argument is not a NodeType
    """
    neighbor = _check(neighbor)
    candidate = _check(candidate)
    special = (NodeType.OPTION, NodeType.PAGE)
    if neighbor in special or candidate in special:
        return neighbor is candidate
    return True


def _type_of(node: Union[Node, NodeType]) -> NodeType:
    return node.type if isinstance(node, Node) else _check(node)


def can_drop_into(cursor: Cursor, node: Union[Node, NodeType]) -> bool:
    """Return True if ``node`` may be appended as a child of the focus.

    On top of ``containment``, pages may only live directly under the
    document and the document holds nothing but pages.
    """
    container = cursor.label.type
    candidate = _type_of(node)
    if not containment(container, candidate):
        return False
    return (container is NodeType.DOCUMENT) == (candidate is NodeType.PAGE)


def can_drop_sibling(cursor: Cursor, node: Union[Node, NodeType]) -> bool:
    """Return True if ``node`` may be inserted right before or after the focus."""
    up = parent(cursor)
    if up is None:
        return False
    candidate = _type_of(node)
    return sibling(cursor.label.type, candidate) and can_drop_into(up, candidate)
