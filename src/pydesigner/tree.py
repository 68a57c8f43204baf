"""
Immutable n-ary tree of design nodes and a cursor (zipper) over it.

A ``Cursor`` is the focused subtree plus a tuple of ``Crumb`` records, one
per level, nearest parent first. Each crumb holds the parent's label and the
left and right siblings of the step taken, which is enough to rebuild the
parent without back-references.

Every mutating function returns a new cursor. Subtrees that are not on the
path from the root to the focus are shared with the input, and the input
cursor and tree are never modified.

Example usage:
    >>> from pydesigner.tree import Tree, from_tree, append_child, to_tree
    >>> cursor = append_child(from_tree(Tree(document)), Tree(page))
    >>> new_tree = to_tree(cursor)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple, TypeVar

from .node import Node, is_container

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Tree:
    """A node label with an ordered tuple of child trees."""

    label: Node
    children: Tuple["Tree", ...] = ()


@dataclass(frozen=True)
class Crumb:
    """One step down from a parent: its label and the siblings around the step."""

    label: Node
    before: Tuple[Tree, ...] = ()
    after: Tuple[Tree, ...] = ()


@dataclass(frozen=True)
class Cursor:
    """A focused position inside a tree."""

    focus: Tree
    crumbs: Tuple[Crumb, ...] = ()

    @property
    def label(self) -> Node:
        return self.focus.label

    @property
    def tree(self) -> Tree:
        return self.focus

    def is_root(self) -> bool:
        return not self.crumbs


# Construction


def from_tree(tree: Tree) -> Cursor:
    """Return a cursor focused on the root of ``tree``."""
    return Cursor(tree)


def label(cursor: Cursor) -> Node:
    return cursor.focus.label


def root(cursor: Cursor) -> Cursor:
    """Move to the root of the tree."""
    while cursor.crumbs:
        cursor = _up(cursor)
    return cursor


def to_tree(cursor: Cursor) -> Tree:
    """Rebuild the whole tree the cursor points into."""
    return root(cursor).focus


# Navigation


def _up(cursor: Cursor) -> Cursor:
    crumb = cursor.crumbs[0]
    parent_tree = Tree(crumb.label, crumb.before + (cursor.focus,) + crumb.after)
    return Cursor(parent_tree, cursor.crumbs[1:])


def parent(cursor: Cursor) -> Optional[Cursor]:
    """Move to the parent, or return None at the root."""
    if not cursor.crumbs:
        return None
    return _up(cursor)


def child_at(cursor: Cursor, index: int) -> Optional[Cursor]:
    """Move to the child at ``index``, or return None if there is no such child."""
    children = cursor.focus.children
    if index < 0 or index >= len(children):
        return None
    crumb = Crumb(cursor.focus.label, children[:index], children[index + 1 :])
    return Cursor(children[index], (crumb,) + cursor.crumbs)


def first_child(cursor: Cursor) -> Optional[Cursor]:
    return child_at(cursor, 0)


def last_child(cursor: Cursor) -> Optional[Cursor]:
    return child_at(cursor, len(cursor.focus.children) - 1)


def next_sibling(cursor: Cursor) -> Optional[Cursor]:
    """Move to the next sibling, or return None if the focus is the last child."""
    if not cursor.crumbs or not cursor.crumbs[0].after:
        return None
    crumb = cursor.crumbs[0]
    moved = Crumb(crumb.label, crumb.before + (cursor.focus,), crumb.after[1:])
    return Cursor(crumb.after[0], (moved,) + cursor.crumbs[1:])


def previous_sibling(cursor: Cursor) -> Optional[Cursor]:
    """Move to the previous sibling, or return None if the focus is the first child."""
    if not cursor.crumbs or not cursor.crumbs[0].before:
        return None
    crumb = cursor.crumbs[0]
    moved = Crumb(crumb.label, crumb.before[:-1], (cursor.focus,) + crumb.after)
    return Cursor(crumb.before[-1], (moved,) + cursor.crumbs[1:])


def index_in_parent(cursor: Cursor) -> Optional[int]:
    if not cursor.crumbs:
        return None
    return len(cursor.crumbs[0].before)


def depth(cursor: Cursor) -> int:
    return len(cursor.crumbs)


def ancestors(cursor: Cursor) -> List[Node]:
    """Labels of all ancestors, nearest parent first."""
    return [crumb.label for crumb in cursor.crumbs]


# Search


def _path_to(tree: Tree, predicate: Callable[[Node], bool]) -> Optional[List[int]]:
    if predicate(tree.label):
        return []
    for index, child in enumerate(tree.children):
        path = _path_to(child, predicate)
        if path is not None:
            return [index] + path
    return None


def find(cursor: Cursor, predicate: Callable[[Node], bool]) -> Optional[Cursor]:
    """Find the first node, in pre-order from the root, matching ``predicate``.

    Parameters
    ----------
    cursor : Cursor
        Any cursor into the tree; the search always starts at the root
    predicate : callable
        A function that takes a Node and returns bool

    Returns
    -------
    Cursor or None
        A cursor focused on the match, or None if nothing matches
    """
    top = root(cursor)
    path = _path_to(top.focus, predicate)
    if path is None:
        return None
    found: Optional[Cursor] = top
    for index in path:
        found = child_at(found, index) if found is not None else None
    return found


def find_by_id(cursor: Cursor, node_id: str) -> Optional[Cursor]:
    """Find the node with ``node_id``, or None if it is not in the tree."""
    return find(cursor, lambda node: node.id == node_id)


def walk(cursor: Cursor) -> Iterator[Cursor]:
    """Yield a cursor for the focus and each of its descendants, in pre-order."""
    yield cursor
    child = first_child(cursor)
    while child is not None:
        yield from walk(child)
        child = next_sibling(child)


# Mutation


def replace_label(cursor: Cursor, transform: Callable[[Node], Node]) -> Cursor:
    """Replace the focused node with ``transform(node)``, keeping the position."""
    focus = cursor.focus
    return Cursor(Tree(transform(focus.label), focus.children), cursor.crumbs)


def replace_tree(cursor: Cursor, tree: Tree) -> Cursor:
    """Replace the whole focused subtree, keeping the position."""
    return Cursor(tree, cursor.crumbs)


def append_child(cursor: Cursor, tree: Tree) -> Cursor:
    """Add ``tree`` as the last child of the focus and move to it."""
    focus = cursor.focus
    crumb = Crumb(focus.label, focus.children, ())
    return Cursor(tree, (crumb,) + cursor.crumbs)


def insert_before(cursor: Cursor, tree: Tree) -> Cursor:
    """Add ``tree`` as the previous sibling of the focus and move to it.

    The root has no siblings; at the root the cursor is returned unchanged.
    """
    if not cursor.crumbs:
        logger.debug("insert_before at root ignored")
        return cursor
    crumb = cursor.crumbs[0]
    moved = Crumb(crumb.label, crumb.before, (cursor.focus,) + crumb.after)
    return Cursor(tree, (moved,) + cursor.crumbs[1:])


def insert_after(cursor: Cursor, tree: Tree) -> Cursor:
    """Add ``tree`` as the next sibling of the focus and move to it.

    The root has no siblings; at the root the cursor is returned unchanged.
    """
    if not cursor.crumbs:
        logger.debug("insert_after at root ignored")
        return cursor
    crumb = cursor.crumbs[0]
    moved = Crumb(crumb.label, crumb.before + (cursor.focus,), crumb.after)
    return Cursor(tree, (moved,) + cursor.crumbs[1:])


def remove(cursor: Cursor) -> Cursor:
    """Detach the focused subtree and move to its parent.

    Removing the root is not allowed; the cursor is returned unchanged.
    """
    if not cursor.crumbs:
        logger.debug("remove at root ignored")
        return cursor
    crumb = cursor.crumbs[0]
    return Cursor(Tree(crumb.label, crumb.before + crumb.after), cursor.crumbs[1:])


def insert(cursor: Cursor, tree: Tree) -> Cursor:
    """Insert ``tree`` relative to the focus.

    If the focus is a container, ``tree`` becomes its last child. Otherwise
    ``tree`` is placed right after the focus' parent. A focus without a parent
    falls back to the tree root as the anchor, where inserting a sibling is a
    no-op, so the cursor comes back unchanged.

    Parameters
    ----------
    cursor : Cursor
        Current selection
    tree : Tree
        Subtree to insert

    Returns
    -------
    Cursor
        A cursor focused on the inserted subtree
    """
    if is_container(cursor.label):
        return append_child(cursor, tree)
    anchor = parent(cursor)
    if anchor is None:
        logger.debug("insert: %s has no parent, anchoring at root", cursor.label.id)
        anchor = root(cursor)
    return insert_after(anchor, tree)


# Traversal


def fold(tree: Tree, fn: Callable[[Node, List[T]], T]) -> T:
    """Bottom-up transform: ``fn(label, folded_children)`` for every node."""
    return fn(tree.label, [fold(child, fn) for child in tree.children])


def map_labels(tree: Tree, fn: Callable[[Node], Node]) -> Tree:
    """Apply ``fn`` to every label, keeping the shape."""
    return Tree(fn(tree.label), tuple(map_labels(child, fn) for child in tree.children))


def flatten(tree: Tree) -> List[Node]:
    """All labels in pre-order."""
    nodes = [tree.label]
    for child in tree.children:
        nodes.extend(flatten(child))
    return nodes


def ids(tree: Tree) -> List[str]:
    return [node.id for node in flatten(tree)]


def count(tree: Tree) -> int:
    return 1 + sum(count(child) for child in tree.children)
