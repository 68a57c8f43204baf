"""
The document: tree, viewport and outline collapse state.

A ``Document`` is the unit of persistence and of undo/redo. The functions
below are the user-intent edits. Each one validates the placement, assigns
ids through an explicitly passed ``Seed`` and returns a new document. When
an edit is not allowed the input document is returned unchanged, so
callers can compare by identity to decide whether to push a history
snapshot.
"""

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Dict, FrozenSet, Optional, Tuple, Union

from . import rules, templates
from .ids import Seed, duplicate
from .node import Node, NodeType
from .tree import (
    Cursor,
    Tree,
    append_child,
    find_by_id,
    from_tree,
    ids,
    insert,
    insert_after,
    insert_before,
    parent,
    remove,
    replace_label,
    to_tree,
)

logger = logging.getLogger(__name__)

# Bumped whenever the persisted layout of Document changes
SCHEMA_VERSION = 4

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Orientation(Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@dataclass(frozen=True)
class Fluid:
    """The page fills the editor window."""


@dataclass(frozen=True)
class Device:
    name: str
    width: int
    height: int
    orientation: Orientation = Orientation.PORTRAIT


@dataclass(frozen=True)
class Custom:
    width: int
    height: int
    orientation: Orientation = Orientation.PORTRAIT


Viewport = Union[Fluid, Device, Custom]

DEVICES: Dict[str, Device] = {
    "iPhone 11": Device("iPhone 11", 414, 896),
    "iPhone SE": Device("iPhone SE", 375, 667),
    "iPad": Device("iPad", 768, 1024),
    "Pixel 5": Device("Pixel 5", 393, 851),
    "Galaxy S20": Device("Galaxy S20", 360, 800),
    "Desktop": Device("Desktop", 1440, 1024, Orientation.LANDSCAPE),
}


def viewport_size(viewport: Viewport) -> Optional[Tuple[int, int]]:
    """Width and height honoring orientation, or None for a fluid viewport."""
    if isinstance(viewport, Fluid):
        return None
    if viewport.orientation is Orientation.LANDSCAPE:
        return (viewport.height, viewport.width)
    return (viewport.width, viewport.height)


@dataclass(frozen=True)
class Document:
    """A complete design: the unit of persistence and of undo/redo.

    Attributes
    ----------
    schema_version : int
        Layout version, checked on load
    last_updated_on : datetime
        Set by the caller with ``touch``
    viewport : Viewport
        Device the pages are previewed on
    collapsed : frozenset of str
        Ids of nodes collapsed in the outline view
    root : Tree
        The node tree; its root is always a Document node
    """

    root: Tree
    viewport: Viewport = Fluid()
    collapsed: FrozenSet[str] = frozenset()
    schema_version: int = SCHEMA_VERSION
    last_updated_on: datetime = EPOCH

    def cursor(self) -> Cursor:
        return from_tree(self.root)

    def select(self, node_id: str) -> Optional[Cursor]:
        """Cursor on ``node_id``, or None if the node is not in the document."""
        return find_by_id(self.cursor(), node_id)

    @property
    def pages(self) -> Tuple[Node, ...]:
        return tuple(child.label for child in self.root.children)


class Drop(Enum):
    """Where a dragged node lands relative to the drop target."""

    INTO = "into"
    BEFORE = "before"
    AFTER = "after"


def _with_tree(document: Document, cursor: Cursor) -> Document:
    return replace(document, root=to_tree(cursor))


def default_document(seed: Seed) -> Tuple[Document, Seed]:
    """A new document with a single empty page."""
    root, seed = templates.instantiate(templates.document(), seed)
    page, seed = templates.instantiate(templates.page(1), seed)
    return Document(Tree(root.label, (page,))), seed


def touch(document: Document, when: datetime) -> Document:
    return replace(document, last_updated_on=when)


def set_viewport(document: Document, viewport: Viewport) -> Document:
    return replace(document, viewport=viewport)


def toggle_collapsed(document: Document, node_id: str) -> Document:
    if node_id in document.collapsed:
        return replace(document, collapsed=document.collapsed - {node_id})
    return replace(document, collapsed=document.collapsed | {node_id})


def add_page(document: Document, seed: Seed) -> Tuple[Document, Seed, str]:
    """Append a new page named after its position.

    Returns
    -------
    tuple of (Document, Seed, str)
        The new document, the next seed and the id of the new page
    """
    page, seed = templates.instantiate(templates.page(len(document.root.children) + 1), seed)
    cursor = append_child(document.cursor(), page)
    return _with_tree(document, cursor), seed, page.label.id


def _insert_target_ok(cursor: Cursor, node: Node) -> bool:
    """Check the placement ``tree.insert`` would pick for ``node``."""
    inserted = insert(cursor, Tree(node))
    up = parent(inserted)
    if up is None or not rules.can_drop_into(up, node):
        return False
    for neighbor in inserted.crumbs[0].before[-1:] + inserted.crumbs[0].after[:1]:
        if not rules.sibling(neighbor.label.type, node.type):
            return False
    return True


def insert_node(
    document: Document, selected_id: str, template: Tree, seed: Seed
) -> Tuple[Document, Seed, Optional[str]]:
    """Instantiate ``template`` and insert it at the selection.

    A container selection receives the new node as its last child; any
    other selection gets it right after its parent. Placements rejected by
    the rules leave the document and seed unchanged.

    Returns
    -------
    tuple of (Document, Seed, str or None)
        The new document, the next seed and the new node id, or None if
        nothing was inserted
    """
    cursor = document.select(selected_id)
    if cursor is None or not _insert_target_ok(cursor, template.label):
        logger.debug("insert_node: %s not allowed at %s", template.label.type.value, selected_id)
        return document, seed, None
    subtree, seed = templates.instantiate(template, seed)
    inserted = insert(cursor, subtree)
    return _with_tree(document, inserted), seed, subtree.label.id


def remove_node(document: Document, node_id: str) -> Document:
    """Delete a node and its subtree.

    The root and the last remaining page cannot be removed.
    """
    cursor = document.select(node_id)
    if cursor is None or cursor.is_root():
        logger.debug("remove_node: %s not removable", node_id)
        return document
    if cursor.label.type is NodeType.PAGE and len(document.root.children) == 1:
        logger.debug("remove_node: refusing to remove the last page")
        return document
    gone = set(ids(cursor.focus))
    return replace(_with_tree(document, remove(cursor)), collapsed=document.collapsed - gone)


def duplicate_node(document: Document, node_id: str, seed: Seed) -> Tuple[Document, Seed, Optional[str]]:
    """Clone a node and its subtree with fresh ids, right after the original."""
    cursor = document.select(node_id)
    if cursor is None or cursor.is_root():
        return document, seed, None
    copied, seed = duplicate(cursor, seed)
    return _with_tree(document, copied), seed, copied.label.id


def update_node(document: Document, node_id: str, fn: Callable[[Node], Node]) -> Document:
    """Replace a node's label with ``fn(node)``. Ids and types cannot change."""
    cursor = document.select(node_id)
    if cursor is None:
        return document
    updated = fn(cursor.label)
    if updated.id != cursor.label.id or updated.type is not cursor.label.type:
        raise ValueError(f"update_node cannot change the id or type of node {node_id}")
    return _with_tree(document, replace_label(cursor, lambda _: updated))


def move_node(document: Document, node_id: str, target_id: str, where: Drop) -> Document:
    """Complete a drag: move ``node_id`` into, before or after ``target_id``.

    Moves rejected by the rules, moves of the root and moves into the node's
    own subtree leave the document unchanged.
    """
    cursor = document.select(node_id)
    if cursor is None or cursor.is_root() or target_id in ids(cursor.focus):
        logger.debug("move_node: cannot move %s to %s", node_id, target_id)
        return document
    subtree = cursor.focus
    target = find_by_id(remove(cursor), target_id)
    if target is None:
        return document
    if where is Drop.INTO:
        if not rules.can_drop_into(target, subtree.label):
            return document
        moved = append_child(target, subtree)
    else:
        if not rules.can_drop_sibling(target, subtree.label):
            return document
        place = insert_before if where is Drop.BEFORE else insert_after
        moved = place(target, subtree)
    return _with_tree(document, moved)
