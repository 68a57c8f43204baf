"""Tests for pydesigner.document module."""

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from pydesigner import edits, templates
from pydesigner.document import (
    DEVICES,
    SCHEMA_VERSION,
    Custom,
    Device,
    Document,
    Drop,
    Fluid,
    Orientation,
    add_page,
    default_document,
    duplicate_node,
    insert_node,
    move_node,
    remove_node,
    set_viewport,
    toggle_collapsed,
    touch,
    update_node,
    viewport_size,
)
from pydesigner.ids import Seed
from pydesigner.node import NodeType
from pydesigner.tree import ids, index_in_parent, parent


@pytest.fixture
def start():
    return default_document(Seed.from_int(11))


@pytest.fixture
def built(start):
    """page -> [column -> [heading, paragraph], radio -> [option x3]]"""
    doc, seed = start
    page_id = doc.pages[0].id
    doc, seed, column_id = insert_node(doc, page_id, templates.column(), seed)
    doc, seed, heading_id = insert_node(doc, column_id, templates.heading(), seed)
    doc, seed, paragraph_id = insert_node(doc, column_id, templates.paragraph(), seed)
    doc, seed, radio_id = insert_node(doc, page_id, templates.radio(), seed)
    names = {
        "page": page_id,
        "column": column_id,
        "heading": heading_id,
        "paragraph": paragraph_id,
        "radio": radio_id,
    }
    return doc, seed, names


def child_ids(doc, node_id):
    return [c.label.id for c in doc.select(node_id).focus.children]


class TestDefaultDocument:
    """Tests for the initial document."""

    def test_root_is_document(self, start):
        doc, _ = start
        assert doc.root.label.type is NodeType.DOCUMENT
        assert doc.schema_version == SCHEMA_VERSION

    def test_one_page(self, start):
        doc, _ = start
        assert len(doc.pages) == 1
        assert doc.pages[0].type is NodeType.PAGE
        assert doc.pages[0].name == "Page 1"

    def test_ids_stamped(self, start):
        doc, _ = start
        assert "template" not in ids(doc.root)
        assert len(set(ids(doc.root))) == 2

    def test_defaults(self, start):
        doc, _ = start
        assert doc.viewport == Fluid()
        assert doc.collapsed == frozenset()


class TestPages:
    """Tests for add_page."""

    def test_add_page(self, start):
        doc, seed = start
        doc, seed, page_id = add_page(doc, seed)
        assert [p.name for p in doc.pages] == ["Page 1", "Page 2"]
        assert doc.pages[1].id == page_id

    def test_remove_last_page_refused(self, start):
        doc, _ = start
        assert remove_node(doc, doc.pages[0].id) is doc

    def test_remove_one_of_two_pages(self, start):
        doc, seed = start
        doc, seed, page_id = add_page(doc, seed)
        doc = remove_node(doc, page_id)
        assert len(doc.pages) == 1


class TestInsertNode:
    """Tests for insert_node."""

    def test_into_container(self, built):
        doc, _, names = built
        assert child_ids(doc, names["column"]) == [names["heading"], names["paragraph"]]

    def test_after_parent_for_leaf(self, built):
        doc, seed, names = built
        doc, seed, button_id = insert_node(doc, names["heading"], templates.button(), seed)
        assert child_ids(doc, names["page"]) == [names["column"], button_id, names["radio"]]

    def test_radio_template_has_options(self, built):
        doc, _, names = built
        options = doc.select(names["radio"]).focus.children
        assert [o.label.type for o in options] == [NodeType.OPTION] * 3

    def test_option_into_radio(self, built):
        doc, seed, names = built
        doc, seed, option_id = insert_node(doc, names["radio"], templates.option(), seed)
        assert child_ids(doc, names["radio"])[-1] == option_id

    def test_option_into_column_rejected(self, built):
        doc, seed, names = built
        result = insert_node(doc, names["column"], templates.option(), seed)
        assert result == (doc, seed, None)

    def test_heading_into_radio_rejected(self, built):
        doc, seed, names = built
        result = insert_node(doc, names["radio"], templates.heading(), seed)
        assert result == (doc, seed, None)

    def test_option_next_to_option_lands_after_radio(self, built):
        doc, seed, names = built
        option_id = child_ids(doc, names["radio"])[0]
        result = insert_node(doc, option_id, templates.option(), seed)
        assert result == (doc, seed, None)

    def test_heading_into_document_rejected(self, built):
        doc, seed, names = built
        result = insert_node(doc, doc.root.label.id, templates.heading(), seed)
        assert result[2] is None

    def test_page_into_document(self, built):
        doc, seed, _ = built
        doc, seed, page_id = insert_node(doc, doc.root.label.id, templates.page(2), seed)
        assert page_id == doc.pages[-1].id

    def test_unknown_selection(self, built):
        doc, seed, _ = built
        assert insert_node(doc, "missing", templates.text(), seed) == (doc, seed, None)

    def test_input_document_unchanged(self, built):
        doc, seed, names = built
        before = ids(doc.root)
        insert_node(doc, names["column"], templates.text(), seed)
        assert ids(doc.root) == before


class TestRemoveNode:
    """Tests for remove_node."""

    def test_remove_subtree(self, built):
        doc, _, names = built
        doc = remove_node(doc, names["column"])
        assert doc.select(names["column"]) is None
        assert doc.select(names["heading"]) is None

    def test_remove_root_is_noop(self, built):
        doc, _, _ = built
        assert remove_node(doc, doc.root.label.id) is doc

    def test_remove_missing_is_noop(self, built):
        doc, _, _ = built
        assert remove_node(doc, "missing") is doc

    def test_remove_prunes_collapsed(self, built):
        doc, _, names = built
        doc = toggle_collapsed(doc, names["column"])
        doc = remove_node(doc, names["column"])
        assert names["column"] not in doc.collapsed


class TestDuplicateNode:
    """Tests for duplicate_node."""

    def test_duplicate_column(self, built):
        doc, seed, names = built
        new_doc, seed, copy_id = duplicate_node(doc, names["column"], seed)
        copy = new_doc.select(copy_id)
        assert index_in_parent(copy) == 1
        assert len(copy.focus.children) == 2
        assert set(ids(copy.focus)).isdisjoint(ids(doc.root))

    def test_duplicate_root_is_noop(self, built):
        doc, seed, _ = built
        assert duplicate_node(doc, doc.root.label.id, seed) == (doc, seed, None)


class TestUpdateNode:
    """Tests for update_node."""

    def test_apply_edit(self, built):
        doc, _, names = built
        doc = update_node(doc, names["column"], lambda n: edits.apply_width_min(n, "99999"))
        assert doc.select(names["column"]).label.width.minimum == 9999

    def test_missing_is_noop(self, built):
        doc, _, _ = built
        assert update_node(doc, "missing", lambda n: n) is doc

    def test_cannot_change_id(self, built):
        doc, _, names = built
        with pytest.raises(ValueError):
            update_node(doc, names["column"], lambda n: replace(n, id="other"))


class TestMoveNode:
    """Tests for move_node (drag and drop completion)."""

    def test_move_into(self, built):
        doc, _, names = built
        doc = move_node(doc, names["heading"], names["page"], Drop.INTO)
        assert child_ids(doc, names["page"])[-1] == names["heading"]
        assert child_ids(doc, names["column"]) == [names["paragraph"]]

    def test_move_before(self, built):
        doc, _, names = built
        doc = move_node(doc, names["paragraph"], names["heading"], Drop.BEFORE)
        assert child_ids(doc, names["column"]) == [names["paragraph"], names["heading"]]

    def test_move_after(self, built):
        doc, _, names = built
        doc = move_node(doc, names["heading"], names["column"], Drop.AFTER)
        assert child_ids(doc, names["page"]) == [names["column"], names["heading"], names["radio"]]

    def test_move_into_own_subtree_is_noop(self, built):
        doc, _, names = built
        assert move_node(doc, names["column"], names["heading"], Drop.INTO) is doc
        assert move_node(doc, names["column"], names["column"], Drop.INTO) is doc

    def test_move_option_out_of_radio_rejected(self, built):
        doc, _, names = built
        option_id = child_ids(doc, names["radio"])[0]
        assert move_node(doc, option_id, names["column"], Drop.INTO) is doc
        assert move_node(doc, option_id, names["heading"], Drop.AFTER) is doc

    def test_reorder_options(self, built):
        doc, _, names = built
        first, second, third = child_ids(doc, names["radio"])
        doc = move_node(doc, first, third, Drop.AFTER)
        assert child_ids(doc, names["radio"]) == [second, third, first]

    def test_move_root_is_noop(self, built):
        doc, _, names = built
        assert move_node(doc, doc.root.label.id, names["page"], Drop.INTO) is doc

    def test_move_page_into_column_rejected(self, built):
        doc, seed, names = built
        doc, seed, page_id = add_page(doc, seed)
        assert move_node(doc, page_id, names["column"], Drop.INTO) is doc

    def test_reorder_pages(self, built):
        doc, seed, names = built
        doc, seed, page_id = add_page(doc, seed)
        doc = move_node(doc, page_id, names["page"], Drop.BEFORE)
        assert [p.id for p in doc.pages] == [page_id, names["page"]]

    def test_ids_preserved(self, built):
        doc, _, names = built
        moved = move_node(doc, names["column"], names["radio"], Drop.AFTER)
        assert sorted(ids(moved.root)) == sorted(ids(doc.root))
        assert parent(moved.select(names["heading"])).label.id == names["column"]


class TestViewportAndState:
    """Tests for viewport, collapse state and timestamps."""

    def test_toggle_collapsed(self, built):
        doc, _, names = built
        doc = toggle_collapsed(doc, names["column"])
        assert names["column"] in doc.collapsed
        doc = toggle_collapsed(doc, names["column"])
        assert names["column"] not in doc.collapsed

    def test_set_viewport(self, start):
        doc, _ = start
        doc = set_viewport(doc, DEVICES["iPad"])
        assert doc.viewport == Device("iPad", 768, 1024)

    def test_viewport_size(self):
        assert viewport_size(Fluid()) is None
        assert viewport_size(Custom(300, 500)) == (300, 500)
        assert viewport_size(Custom(300, 500, Orientation.LANDSCAPE)) == (500, 300)

    def test_touch(self, start):
        doc, _ = start
        when = datetime(2024, 5, 1, tzinfo=timezone.utc)
        assert touch(doc, when).last_updated_on == when

    def test_document_is_frozen(self, start):
        doc, _ = start
        assert isinstance(doc, Document)
        with pytest.raises(AttributeError):
            doc.root = None
