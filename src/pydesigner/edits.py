"""
Property edits driven by text input.

Every ``apply_*`` function takes a node and the raw text typed by the user
and returns an updated copy of the node. Numeric text is clamped into its
range; text that does not parse falls back to 0. Setting one edge of a
locked padding, spacing, border width or corner radius sets all of them.
"""

from dataclasses import replace
from typing import Optional

from .node import Node
from .style import (
    INHERIT,
    MAX_FONT_SIZE,
    MAX_LENGTH,
    MAX_OFFSET,
    MAX_SCALE,
    MIN_FONT_SIZE,
    MIN_LENGTH,
    MIN_OFFSET,
    MIN_SCALE,
    Color,
    Fixed,
    Length,
    Local,
    clamp,
    parse_float,
    parse_int,
)


def _length_value(text: str) -> int:
    return clamp(parse_int(text), MIN_LENGTH, MAX_LENGTH)


def _bound(text: str) -> Optional[int]:
    """Min/max bounds are cleared by empty text."""
    if not text.strip():
        return None
    return _length_value(text)


def _offset_value(text: str) -> float:
    return clamp(parse_float(text), MIN_OFFSET, MAX_OFFSET)


# Sizing


def apply_width_px(node: Node, text: str) -> Node:
    return replace(node, width=replace(node.width, strategy=Fixed(_length_value(text))))


def apply_height_px(node: Node, text: str) -> Node:
    return replace(node, height=replace(node.height, strategy=Fixed(_length_value(text))))


def apply_width_min(node: Node, text: str) -> Node:
    return replace(node, width=replace(node.width, minimum=_bound(text)))


def apply_width_max(node: Node, text: str) -> Node:
    return replace(node, width=replace(node.width, maximum=_bound(text)))


def apply_height_min(node: Node, text: str) -> Node:
    return replace(node, height=replace(node.height, minimum=_bound(text)))


def apply_height_max(node: Node, text: str) -> Node:
    return replace(node, height=replace(node.height, maximum=_bound(text)))


def apply_width(node: Node, width: Length) -> Node:
    return replace(node, width=width)


def apply_height(node: Node, height: Length) -> Node:
    return replace(node, height=height)


# Spacing and padding


def apply_spacing_x(node: Node, text: str) -> Node:
    value = _length_value(text)
    spacing = node.spacing
    if spacing.locked:
        return replace(node, spacing=replace(spacing, x=value, y=value))
    return replace(node, spacing=replace(spacing, x=value))


def apply_spacing_y(node: Node, text: str) -> Node:
    value = _length_value(text)
    spacing = node.spacing
    if spacing.locked:
        return replace(node, spacing=replace(spacing, x=value, y=value))
    return replace(node, spacing=replace(spacing, y=value))


def _apply_padding(node: Node, edge: str, text: str) -> Node:
    value = _length_value(text)
    padding = node.padding
    if padding.locked:
        return replace(node, padding=replace(padding, top=value, right=value, bottom=value, left=value))
    return replace(node, padding=replace(padding, **{edge: value}))


def apply_padding_top(node: Node, text: str) -> Node:
    return _apply_padding(node, "top", text)


def apply_padding_right(node: Node, text: str) -> Node:
    return _apply_padding(node, "right", text)


def apply_padding_bottom(node: Node, text: str) -> Node:
    return _apply_padding(node, "bottom", text)


def apply_padding_left(node: Node, text: str) -> Node:
    return _apply_padding(node, "left", text)


def set_padding_lock(node: Node, locked: bool) -> Node:
    """Lock or unlock padding. Locking copies the top edge to all edges."""
    padding = node.padding
    if locked:
        top = padding.top
        return replace(node, padding=replace(padding, right=top, bottom=top, left=top, locked=True))
    return replace(node, padding=replace(padding, locked=False))


def set_spacing_lock(node: Node, locked: bool) -> Node:
    spacing = node.spacing
    if locked:
        return replace(node, spacing=replace(spacing, y=spacing.x, locked=True))
    return replace(node, spacing=replace(spacing, locked=False))


# Transformation


def apply_offset_x(node: Node, text: str) -> Node:
    return replace(node, transformation=replace(node.transformation, offset_x=_offset_value(text)))


def apply_offset_y(node: Node, text: str) -> Node:
    return replace(node, transformation=replace(node.transformation, offset_y=_offset_value(text)))


def apply_rotation(node: Node, text: str) -> Node:
    return replace(node, transformation=replace(node.transformation, rotation=parse_float(text) % 360))


def apply_scale(node: Node, text: str) -> Node:
    scale = clamp(parse_float(text, 1.0), MIN_SCALE, MAX_SCALE)
    return replace(node, transformation=replace(node.transformation, scale=scale))


# Border


def _apply_border_width(node: Node, edge: str, text: str) -> Node:
    value = _length_value(text)
    width = node.border.width
    if width.locked:
        width = replace(width, top=value, right=value, bottom=value, left=value)
    else:
        width = replace(width, **{edge: value})
    return replace(node, border=replace(node.border, width=width))


def apply_border_width_top(node: Node, text: str) -> Node:
    return _apply_border_width(node, "top", text)


def apply_border_width_right(node: Node, text: str) -> Node:
    return _apply_border_width(node, "right", text)


def apply_border_width_bottom(node: Node, text: str) -> Node:
    return _apply_border_width(node, "bottom", text)


def apply_border_width_left(node: Node, text: str) -> Node:
    return _apply_border_width(node, "left", text)


def _apply_corner_radius(node: Node, corner: str, text: str) -> Node:
    value = _length_value(text)
    radius = node.border.corner
    if radius.locked:
        radius = replace(radius, top_left=value, top_right=value, bottom_right=value, bottom_left=value)
    else:
        radius = replace(radius, **{corner: value})
    return replace(node, border=replace(node.border, corner=radius))


def apply_corner_radius_top_left(node: Node, text: str) -> Node:
    return _apply_corner_radius(node, "top_left", text)


def apply_corner_radius_top_right(node: Node, text: str) -> Node:
    return _apply_corner_radius(node, "top_right", text)


def apply_corner_radius_bottom_right(node: Node, text: str) -> Node:
    return _apply_corner_radius(node, "bottom_right", text)


def apply_corner_radius_bottom_left(node: Node, text: str) -> Node:
    return _apply_corner_radius(node, "bottom_left", text)


# Shadow


def apply_shadow_offset_x(node: Node, text: str) -> Node:
    return replace(node, shadow=replace(node.shadow, offset_x=_offset_value(text)))


def apply_shadow_offset_y(node: Node, text: str) -> Node:
    return replace(node, shadow=replace(node.shadow, offset_y=_offset_value(text)))


def apply_shadow_size(node: Node, text: str) -> Node:
    return replace(node, shadow=replace(node.shadow, size=_offset_value(text)))


def apply_shadow_blur(node: Node, text: str) -> Node:
    return replace(node, shadow=replace(node.shadow, blur=float(_length_value(text))))


# Typography and content


def apply_font_size(node: Node, text: str) -> Node:
    """Set a local font size; empty text switches back to inheriting."""
    if not text.strip():
        return replace(node, font_size=INHERIT)
    return replace(node, font_size=Local(clamp(parse_int(text), MIN_FONT_SIZE, MAX_FONT_SIZE)))


def apply_font_family(node: Node, family: Optional[str]) -> Node:
    """Set a local font family, or inherit when ``family`` is None."""
    return replace(node, font_family=INHERIT if family is None else Local(family))


def apply_font_color(node: Node, color: Optional[Color]) -> Node:
    """Set a local font color, or inherit when ``color`` is None."""
    return replace(node, font_color=INHERIT if color is None else Local(color))


def apply_label(node: Node, text: str) -> Node:
    """Rename a node; blank names are ignored."""
    if not text.strip():
        return node
    return replace(node, name=text.strip())


def apply_text(node: Node, text: str) -> Node:
    return node.with_text(text)
