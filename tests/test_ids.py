"""Tests for pydesigner.ids module."""

import uuid

import pytest

from pydesigner import templates
from pydesigner.ids import Seed, duplicate, generate_id, stamp
from pydesigner.node import ColumnData, DocumentData, Node, PageData
from pydesigner.tree import Tree, find_by_id, from_tree, ids, next_sibling, parent, to_tree


def five_node_subtree():
    """column -> [heading, paragraph, radio -> [option]]"""
    radio = Tree(templates.radio().label, (templates.option(),))
    return Tree(
        Node("template", "Column", ColumnData()),
        (templates.heading(), templates.paragraph(), radio),
    )


class TestSeed:
    """Tests for Seed construction."""

    def test_from_int_deterministic(self):
        assert Seed.from_int(7) == Seed.from_int(7)
        assert Seed.from_int(7) != Seed.from_int(8)

    def test_words_masked_to_32_bits(self):
        seed = Seed((2**40, 1, 2, 3))
        assert all(0 <= w <= 0xFFFFFFFF for w in seed.words)

    def test_zero_state_replaced(self):
        assert any(Seed((0, 0, 0, 0)).words)

    def test_wrong_word_count(self):
        with pytest.raises(ValueError):
            Seed((1, 2, 3))

    def test_from_entropy(self):
        seed = Seed.from_entropy()
        assert len(seed.words) == 4

    def test_immutable(self):
        seed = Seed.from_int(1)
        with pytest.raises(AttributeError):
            seed.words = (1, 2, 3, 4)


class TestGenerateId:
    """Tests for generate_id."""

    def test_same_seed_same_id(self):
        seed = Seed.from_int(42)
        assert generate_id(seed) == generate_id(seed)

    def test_seed_advances(self):
        seed = Seed.from_int(42)
        first, seed2 = generate_id(seed)
        second, _ = generate_id(seed2)
        assert seed2 != seed
        assert first != second

    def test_uuid_format(self):
        node_id, _ = generate_id(Seed.from_int(5))
        parsed = uuid.UUID(node_id)
        assert parsed.version == 4
        assert str(parsed) == node_id

    def test_many_ids_unique(self):
        seed = Seed.from_int(0)
        seen = set()
        for _ in range(2000):
            node_id, seed = generate_id(seed)
            seen.add(node_id)
        assert len(seen) == 2000


class TestStamp:
    """Tests for stamping fresh ids onto subtrees."""

    def test_every_node_gets_new_id(self):
        tree, _ = stamp(five_node_subtree(), Seed.from_int(1))
        stamped = ids(tree)
        assert len(stamped) == 5
        assert len(set(stamped)) == 5
        assert "template" not in stamped

    def test_shape_preserved(self):
        original = five_node_subtree()
        tree, _ = stamp(original, Seed.from_int(1))
        assert [n.name for n in (c.label for c in tree.children)] == [
            c.label.name for c in original.children
        ]
        assert tree.children[2].children[0].label.type is original.children[2].children[0].label.type

    def test_seed_threads_through(self):
        seed = Seed.from_int(9)
        _, after = stamp(five_node_subtree(), seed)
        expected = seed
        for _ in range(5):
            _, expected = generate_id(expected)
        assert after == expected

    def test_preorder_assignment(self):
        seed = Seed.from_int(9)
        tree, _ = stamp(five_node_subtree(), seed)
        expected = []
        for _ in range(5):
            node_id, seed = generate_id(seed)
            expected.append(node_id)
        assert ids(tree) == expected

    def test_deterministic(self):
        assert stamp(five_node_subtree(), Seed.from_int(3)) == stamp(five_node_subtree(), Seed.from_int(3))


class TestDuplicate:
    """Tests for duplicating a focused subtree."""

    @pytest.fixture
    def doc_tree(self):
        subtree, seed = stamp(five_node_subtree(), Seed.from_int(100))
        page = Tree(Node("page", "Page 1", PageData()), (subtree,))
        return Tree(Node("doc", "Document", DocumentData()), (page,)), seed

    def test_five_new_ids(self, doc_tree):
        tree, seed = doc_tree
        column_id = tree.children[0].children[0].label.id
        cursor, _ = duplicate(find_by_id(from_tree(tree), column_id), seed)
        clone_ids = ids(cursor.focus)
        assert len(clone_ids) == 5
        assert len(set(clone_ids)) == 5
        assert set(clone_ids).isdisjoint(ids(tree))

    def test_clone_placed_after_original(self, doc_tree):
        tree, seed = doc_tree
        column_id = tree.children[0].children[0].label.id
        original = find_by_id(from_tree(tree), column_id)
        cursor, _ = duplicate(original, seed)
        page = parent(cursor)
        assert [c.label.name for c in page.focus.children] == ["Column", "Column"]
        assert next_sibling(find_by_id(cursor, column_id)).label.id == cursor.label.id

    def test_duplicate_root_is_noop(self, doc_tree):
        tree, seed = doc_tree
        cursor = from_tree(tree)
        assert duplicate(cursor, seed) == (cursor, seed)

    def test_ids_stay_unique_in_document(self, doc_tree):
        tree, seed = doc_tree
        column_id = tree.children[0].children[0].label.id
        cursor = find_by_id(from_tree(tree), column_id)
        for _ in range(3):
            cursor, seed = duplicate(cursor, seed)
        all_ids = ids(to_tree(cursor))
        assert len(all_ids) == len(set(all_ids)) == 2 + 5 * 4
