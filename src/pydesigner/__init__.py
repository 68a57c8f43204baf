"""
pydesigner - document tree model for visual UI design
======================================================

Build and edit a tree of typed UI elements (pages, containers, text, images,
form controls) through an immutable cursor, checked by placement rules,
with inherited typography and snapshot undo/redo.

Editing example:
  >>> from pydesigner import Seed, default_document, insert_node, History, templates
  >>> doc, seed = default_document(Seed.from_int(1))
  >>> history = History.fresh(doc)
  >>> page_id = doc.pages[0].id
  >>> doc, seed, new_id = insert_node(doc, page_id, templates.heading(), seed)
  >>> history = history.push(doc)
  >>> history = history.undo()

Cursor example:
  >>> from pydesigner import from_tree, find_by_id, append_child, to_tree
  >>> cursor = find_by_id(from_tree(doc.root), page_id)
  >>> tree = to_tree(append_child(cursor, templates.text()))
"""

import logging

from . import edits as edits
from . import templates as templates

# Style records
from .style import (
    Color as Color,
    Local as Local,
    Inherit as Inherit,
    INHERIT as INHERIT,
    Length as Length,
    Fixed as Fixed,
    Fill as Fill,
    Fit as Fit,
    Unspecified as Unspecified,
    Spacing as Spacing,
    Padding as Padding,
    Transformation as Transformation,
    Border as Border,
    BorderStyle as BorderStyle,
    BorderWidth as BorderWidth,
    BorderCorner as BorderCorner,
    Shadow as Shadow,
    ShadowKind as ShadowKind,
    NoBackground as NoBackground,
    SolidBackground as SolidBackground,
    ImageBackground as ImageBackground,
    Alignment as Alignment,
    Stacking as Stacking,
    TextAlignment as TextAlignment,
    FontWeight as FontWeight,
    LabelPosition as LabelPosition,
    # Limits
    MIN_LENGTH as MIN_LENGTH,
    MAX_LENGTH as MAX_LENGTH,
    MIN_OFFSET as MIN_OFFSET,
    MAX_OFFSET as MAX_OFFSET,
    parse_int as parse_int,
    parse_float as parse_float,
    clamp as clamp,
)

# Nodes
from .node import (
    Node as Node,
    NodeType as NodeType,
    CONTAINER_TYPES as CONTAINER_TYPES,
    is_container as is_container,
)

# Tree and cursor
from .tree import (
    Tree as Tree,
    Crumb as Crumb,
    Cursor as Cursor,
    from_tree as from_tree,
    to_tree as to_tree,
    root as root,
    label as label,
    parent as parent,
    first_child as first_child,
    last_child as last_child,
    next_sibling as next_sibling,
    previous_sibling as previous_sibling,
    find as find,
    find_by_id as find_by_id,
    replace_label as replace_label,
    replace_tree as replace_tree,
    append_child as append_child,
    insert_before as insert_before,
    insert_after as insert_after,
    insert as insert,
    remove as remove,
    fold as fold,
    flatten as flatten,
)

# Rules
from .rules import (
    containment as containment,
    sibling as sibling,
    can_drop_into as can_drop_into,
    can_drop_sibling as can_drop_sibling,
)

# Identity
from .ids import (
    Seed as Seed,
    generate_id as generate_id,
    stamp as stamp,
    duplicate as duplicate,
)

# Inherited properties
from .resolve import (
    resolve as resolve,
    resolve_font_family as resolve_font_family,
    resolve_font_size as resolve_font_size,
    resolve_font_color as resolve_font_color,
    resolve_font as resolve_font,
    ResolvedFont as ResolvedFont,
    fold_resolved as fold_resolved,
)

# Document and history
from .document import (
    Document as Document,
    Drop as Drop,
    Fluid as Fluid,
    Device as Device,
    Custom as Custom,
    Orientation as Orientation,
    SCHEMA_VERSION as SCHEMA_VERSION,
    default_document as default_document,
    add_page as add_page,
    insert_node as insert_node,
    remove_node as remove_node,
    duplicate_node as duplicate_node,
    move_node as move_node,
    update_node as update_node,
    toggle_collapsed as toggle_collapsed,
    set_viewport as set_viewport,
    touch as touch,
)
from .history import History as History

# Persistence
from .codec import (
    encode as encode,
    decode as decode,
    save as save,
    load as load,
    DecodeError as DecodeError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())
