"""
Resolution of inheritable style properties.

A property set to ``Local(value)`` resolves to ``value``. A property set to
``Inherit`` resolves to the nearest ancestor's ``Local`` value, or to the
caller-supplied default when no ancestor sets one. Nothing is cached: the
result depends on where the node sits, so resolve again after a node is
moved or edited.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, TypeVar

from .node import Node
from .style import DEFAULT_FONT_COLOR, DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE, Color, Inheritable, Local
from .tree import Cursor, Tree, first_child, from_tree, next_sibling

T = TypeVar("T")


def resolve(cursor: Cursor, getter: Callable[[Node], Inheritable], default: Any) -> Any:
    """Resolve an inheritable property at the focus.

    Parameters
    ----------
    cursor : Cursor
        Focus on the node to resolve
    getter : callable
        Takes a Node and returns its ``Local`` or ``Inherit`` setting
    default : any
        Value returned when neither the node nor any ancestor sets one

    Returns
    -------
    any
        The resolved value
    """
    setting = getter(cursor.label)
    if isinstance(setting, Local):
        return setting.value
    for crumb in cursor.crumbs:
        setting = getter(crumb.label)
        if isinstance(setting, Local):
            return setting.value
    return default


def resolve_font_family(cursor: Cursor, default: str = DEFAULT_FONT_FAMILY) -> str:
    return resolve(cursor, lambda node: node.font_family, default)


def resolve_font_size(cursor: Cursor, default: int = DEFAULT_FONT_SIZE) -> int:
    return resolve(cursor, lambda node: node.font_size, default)


def resolve_font_color(cursor: Cursor, default: Color = DEFAULT_FONT_COLOR) -> Color:
    return resolve(cursor, lambda node: node.font_color, default)


@dataclass(frozen=True)
class ResolvedFont:
    family: str = DEFAULT_FONT_FAMILY
    size: int = DEFAULT_FONT_SIZE
    color: Color = DEFAULT_FONT_COLOR


def resolve_font(cursor: Cursor, defaults: ResolvedFont = ResolvedFont()) -> ResolvedFont:
    """Resolve family, size and color together."""
    return ResolvedFont(
        resolve_font_family(cursor, defaults.family),
        resolve_font_size(cursor, defaults.size),
        resolve_font_color(cursor, defaults.color),
    )


def fold_resolved(
    tree: Tree,
    fn: Callable[[Node, ResolvedFont, List[T]], T],
    defaults: ResolvedFont = ResolvedFont(),
) -> T:
    """Bottom-up transform handing each node its resolved font.

    This is what renderers consume: ``fn(node, font, rendered_children)`` is
    called once per node, children first.
    """

    def go(cursor: Cursor) -> T:
        rendered = []
        child = first_child(cursor)
        while child is not None:
            rendered.append(go(child))
            child = next_sibling(child)
        return fn(cursor.label, resolve_font(cursor, defaults), rendered)

    return go(from_tree(tree))
