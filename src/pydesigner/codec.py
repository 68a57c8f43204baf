"""
JSON persistence for documents.

Records are written as objects tagged with their class name under
``"$type"``, enums as ``{"$enum": name, "value": value}``. The top level
object is the Document itself, so ``schema_version`` is always present at
the top and is checked before anything else is decoded.

Example usage:
    >>> from pydesigner.codec import encode, decode
    >>> text = encode(document)
    >>> assert decode(text) == document
"""

import json
import logging
from dataclasses import fields, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Set, get_args

from . import document as _document
from . import node as _node
from . import resolve as _resolve
from . import rules as _rules
from . import style as _style
from . import tree as _tree
from .document import SCHEMA_VERSION, Document

logger = logging.getLogger(__name__)


class DecodeError(ValueError):
    """Raised when a persisted document cannot be loaded."""


def _collect(module, base) -> Dict[str, type]:
    return {
        name: obj
        for name, obj in vars(module).items()
        if isinstance(obj, type) and issubclass(obj, base) and obj.__module__ == module.__name__
    }


_MODULES = (_style, _node, _tree, _document, _resolve)

_RECORDS: Dict[str, type] = {}
_ENUMS: Dict[str, type] = {}
for _module in _MODULES:
    _RECORDS.update({k: v for k, v in _collect(_module, object).items() if is_dataclass(v)})
    _ENUMS.update(_collect(_module, Enum))

# Upgrades from an older schema, keyed by the version they upgrade from.
# Each takes and returns the raw decoded JSON object.
MIGRATIONS: Dict[int, Callable[[Dict[str, Any]], Dict[str, Any]]] = {}


def _to_data(value: Any) -> Any:
    if isinstance(value, Enum):
        return {"$enum": type(value).__name__, "value": value.value}
    if is_dataclass(value) and not isinstance(value, type):
        data: Dict[str, Any] = {"$type": type(value).__name__}
        for f in fields(value):
            data[f.name] = _to_data(getattr(value, f.name))
        return data
    if isinstance(value, (tuple, list)):
        return [_to_data(v) for v in value]
    if isinstance(value, frozenset):
        return {"$set": sorted(_to_data(v) for v in value)}
    if isinstance(value, datetime):
        return {"$datetime": value.isoformat()}
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    raise TypeError(f"Cannot encode {type(value).__name__}")


def _from_data(data: Any) -> Any:
    if isinstance(data, list):
        return tuple(_from_data(v) for v in data)
    if not isinstance(data, dict):
        return data
    if "$enum" in data:
        enum = _ENUMS.get(data["$enum"])
        if enum is None:
            raise DecodeError(f"Unknown enum: {data['$enum']}")
        try:
            return enum(data["value"])
        except (KeyError, ValueError) as exc:
            raise DecodeError(f"Invalid {data['$enum']} value: {data.get('value')!r}") from exc
    if "$set" in data:
        return frozenset(_from_data(v) for v in data["$set"])
    if "$datetime" in data:
        try:
            return datetime.fromisoformat(data["$datetime"])
        except (TypeError, ValueError) as exc:
            raise DecodeError(f"Invalid timestamp: {data['$datetime']!r}") from exc
    record = _RECORDS.get(data.get("$type", ""))
    if record is None:
        raise DecodeError(f"Unknown record type: {data.get('$type')!r}")
    kwargs = {k: _from_data(v) for k, v in data.items() if k != "$type"}
    try:
        return record(**kwargs)
    except TypeError as exc:
        raise DecodeError(f"Invalid {record.__name__} record: {exc}") from exc


_NODE_KINDS = get_args(_node.NodeKind)


def _check_tree(tree: Any, seen: Set[str]) -> None:
    if not isinstance(tree, _tree.Tree) or not isinstance(tree.children, tuple):
        raise DecodeError(f"Expected a Tree, got {type(tree).__name__}")
    node = tree.label
    if not isinstance(node, _node.Node) or not isinstance(node.kind, _NODE_KINDS):
        raise DecodeError(f"Tree label is not a Node: {node!r}")
    if not isinstance(node.id, str):
        raise DecodeError(f"Node id must be a string, got {node.id!r}")
    if node.id in seen:
        raise DecodeError(f"Duplicate node id {node.id!r}")
    seen.add(node.id)
    for child in tree.children:
        _check_tree(child, seen)
        if not _rules.can_drop_into(_tree.Cursor(tree), child.label):
            raise DecodeError(f"{child.label} cannot be a child of {node}")


def _check_document(document: Document) -> None:
    """Raise DecodeError if a decoded document breaks the tree invariants.

    The root must be a Document node holding only pages, every label a
    Node, every parent/child pair allowed by the placement rules and every
    id unique.
    """
    _check_tree(document.root, set())
    if document.root.label.type is not _node.NodeType.DOCUMENT:
        raise DecodeError("Tree root is not a Document node")
    if not isinstance(document.collapsed, frozenset) or not all(
        isinstance(node_id, str) for node_id in document.collapsed
    ):
        raise DecodeError("collapsed must be a set of node ids")


def encode(document: Document, indent: int = 2) -> str:
    """Serialize a document to JSON text."""
    return json.dumps(_to_data(document), indent=indent)


def decode(content: str) -> Document:
    """Parse JSON text into a Document.

    Parameters
    ----------
    content : str
        Text produced by ``encode``

    Returns
    -------
    Document
        The decoded document

    Raises
    ------
    DecodeError
        If the text is not valid JSON, the schema version is missing or
        unsupported, a record cannot be rebuilt, or the tree breaks the
        placement rules or repeats an id
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Invalid JSON: {exc}") from exc

    if not isinstance(data, dict) or data.get("$type") != "Document":
        raise DecodeError("Top level object is not a Document")
    version = data.get("schema_version")
    if not isinstance(version, int):
        raise DecodeError("Missing schema_version")
    while version < SCHEMA_VERSION and version in MIGRATIONS:
        logger.debug("Migrating document from schema %d", version)
        data = MIGRATIONS[version](data)
        version = data.get("schema_version", version + 1)
    if version != SCHEMA_VERSION:
        raise DecodeError(f"Unsupported schema version {version}, expected {SCHEMA_VERSION}")

    document = _from_data(data)
    _check_document(document)
    return document


def save(document: Document, filepath: str) -> None:
    """Write a document to a file as JSON."""
    content = encode(document)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(content)


def load(filepath: str) -> Document:
    """Read a document written by ``save``."""
    with open(filepath, "r", encoding="utf-8") as f:
        content = f.read()
    return decode(content)
