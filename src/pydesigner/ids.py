"""
Deterministic node id generation.

There is no module-level counter or random state. A ``Seed`` is passed in
and a new one is returned by every call that needs fresh ids, so the same
seed always produces the same ids. The seed is a 128-bit xorshift state;
each id is the next full state formatted as a UUID.

Example usage:
    >>> seed = Seed.from_int(42)
    >>> node_id, seed = generate_id(seed)
    >>> tree, seed = stamp(template, seed)
"""

import secrets
import uuid
from dataclasses import dataclass, replace
from typing import Tuple

from .tree import Cursor, Tree, insert_after

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

# Used in place of an all-zero state, which xorshift never leaves
_FALLBACK_STATE = (0x193A6754, 0xA8A7D469, 0x97830E05, 0x113BA7BB)


@dataclass(frozen=True)
class Seed:
    """Immutable id generator state: four 32-bit words."""

    words: Tuple[int, int, int, int]

    def __post_init__(self) -> None:
        words = tuple(w & MASK32 for w in self.words)
        if len(words) != 4:
            raise ValueError(f"Seed needs 4 words, got {len(words)}")
        if not any(words):
            words = _FALLBACK_STATE
        object.__setattr__(self, "words", words)

    @classmethod
    def from_int(cls, value: int) -> "Seed":
        """Expand a single integer into a seed with splitmix64."""
        state = value & MASK64
        words = []
        for _ in range(2):
            state = (state + 0x9E3779B97F4A7C15) & MASK64
            z = state
            z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
            z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
            z ^= z >> 31
            words.extend([z >> 32, z & MASK32])
        return cls((words[0], words[1], words[2], words[3]))

    @classmethod
    def from_entropy(cls) -> "Seed":
        """Build a seed from operating system randomness.

        Meant to be called once by the host application at start-up.
        """
        a, b, c, d = (secrets.randbits(32) for _ in range(4))
        return cls((a, b, c, d))


def _step(words: Tuple[int, int, int, int]) -> Tuple[int, int, int, int]:
    x, y, z, w = words
    t = x ^ ((x << 11) & MASK32)
    t ^= t >> 8
    return (y, z, w, (w ^ (w >> 19) ^ t) & MASK32)


def generate_id(seed: Seed) -> Tuple[str, Seed]:
    """Return a fresh id and the seed to use for the next one."""
    words = seed.words
    for _ in range(4):
        words = _step(words)
    value = (words[0] << 96) | (words[1] << 64) | (words[2] << 32) | words[3]
    return str(uuid.UUID(int=value, version=4)), Seed(words)


def stamp(tree: Tree, seed: Seed) -> Tuple[Tree, Seed]:
    """Give every node in ``tree`` a new id.

    Nodes are visited once each, parent before children, children in order.

    Parameters
    ----------
    tree : Tree
        Subtree to clone, e.g. a template or a subtree being duplicated
    seed : Seed
        Current seed

    Returns
    -------
    tuple of (Tree, Seed)
        The re-stamped copy and the next seed
    """
    node_id, seed = generate_id(seed)
    children = []
    for child in tree.children:
        child, seed = stamp(child, seed)
        children.append(child)
    return Tree(replace(tree.label, id=node_id), tuple(children)), seed


def duplicate(cursor: Cursor, seed: Seed) -> Tuple[Cursor, Seed]:
    """Clone the focused subtree with fresh ids and insert it right after the original.

    The root cannot be duplicated; the cursor and seed come back unchanged.
    """
    if cursor.is_root():
        return cursor, seed
    clone, seed = stamp(cursor.focus, seed)
    return insert_after(cursor, clone), seed
