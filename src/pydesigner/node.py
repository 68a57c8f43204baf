"""
Design node records.

A node is a frozen record carrying an id, a display name, a ``kind`` payload
and the full set of style properties. The ``kind`` is a closed union of
small payload records, each tagged with a ``NodeType`` so that rules can be
written as plain tables over the tag.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar, FrozenSet, Optional, Union

from .style import (
    INHERIT,
    Alignment,
    Background,
    Border,
    FontWeight,
    Inheritable,
    LabelPosition,
    Length,
    NoBackground,
    Padding,
    Shadow,
    Spacing,
    Stacking,
    TextAlignment,
    Transformation,
)


class NodeType(Enum):
    """Tag of every node kind."""

    DOCUMENT = "document"
    PAGE = "page"
    ROW = "row"
    COLUMN = "column"
    TEXT_COLUMN = "text_column"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    TEXT = "text"
    IMAGE = "image"
    BUTTON = "button"
    CHECKBOX = "checkbox"
    TEXT_FIELD = "text_field"
    TEXT_FIELD_MULTILINE = "text_field_multiline"
    RADIO = "radio"
    OPTION = "option"


# Node types that may hold children
CONTAINER_TYPES: FrozenSet[NodeType] = frozenset(
    {
        NodeType.DOCUMENT,
        NodeType.PAGE,
        NodeType.ROW,
        NodeType.COLUMN,
        NodeType.TEXT_COLUMN,
        NodeType.RADIO,
    }
)


# Kind payloads


@dataclass(frozen=True)
class DocumentData:
    TYPE: ClassVar[NodeType] = NodeType.DOCUMENT


@dataclass(frozen=True)
class PageData:
    TYPE: ClassVar[NodeType] = NodeType.PAGE


@dataclass(frozen=True)
class RowData:
    TYPE: ClassVar[NodeType] = NodeType.ROW

    wrapped: bool = False


@dataclass(frozen=True)
class ColumnData:
    TYPE: ClassVar[NodeType] = NodeType.COLUMN


@dataclass(frozen=True)
class TextColumnData:
    TYPE: ClassVar[NodeType] = NodeType.TEXT_COLUMN


@dataclass(frozen=True)
class HeadingData:
    TYPE: ClassVar[NodeType] = NodeType.HEADING

    text: str = ""
    level: int = 1


@dataclass(frozen=True)
class ParagraphData:
    TYPE: ClassVar[NodeType] = NodeType.PARAGRAPH

    text: str = ""


@dataclass(frozen=True)
class TextData:
    TYPE: ClassVar[NodeType] = NodeType.TEXT

    text: str = ""


@dataclass(frozen=True)
class ImageData:
    TYPE: ClassVar[NodeType] = NodeType.IMAGE

    src: str = ""
    description: str = ""


@dataclass(frozen=True)
class ButtonData:
    TYPE: ClassVar[NodeType] = NodeType.BUTTON

    text: str = ""


@dataclass(frozen=True)
class CheckboxData:
    TYPE: ClassVar[NodeType] = NodeType.CHECKBOX

    text: str = ""
    checked: bool = False


@dataclass(frozen=True)
class TextFieldData:
    TYPE: ClassVar[NodeType] = NodeType.TEXT_FIELD

    text: str = ""


@dataclass(frozen=True)
class TextFieldMultilineData:
    TYPE: ClassVar[NodeType] = NodeType.TEXT_FIELD_MULTILINE

    text: str = ""


@dataclass(frozen=True)
class RadioData:
    TYPE: ClassVar[NodeType] = NodeType.RADIO

    text: str = ""


@dataclass(frozen=True)
class OptionData:
    TYPE: ClassVar[NodeType] = NodeType.OPTION

    text: str = ""
    selected: bool = False


NodeKind = Union[
    DocumentData,
    PageData,
    RowData,
    ColumnData,
    TextColumnData,
    HeadingData,
    ParagraphData,
    TextData,
    ImageData,
    ButtonData,
    CheckboxData,
    TextFieldData,
    TextFieldMultilineData,
    RadioData,
    OptionData,
]

# Kinds carrying an editable ``text`` field
TEXT_KINDS = (
    HeadingData,
    ParagraphData,
    TextData,
    ButtonData,
    CheckboxData,
    TextFieldData,
    TextFieldMultilineData,
    RadioData,
    OptionData,
)


@dataclass(frozen=True)
class Node:
    """One element instance in the design tree.

    Attributes
    ----------
    id : str
        Opaque identifier, unique within a document and never reused
    name : str
        Display name shown in the outline
    kind : NodeKind
        Kind-specific payload; ``kind.TYPE`` is the node type tag
    """

    id: str
    name: str
    kind: NodeKind
    width: Length = Length()
    height: Length = Length()
    spacing: Spacing = Spacing()
    padding: Padding = Padding()
    transformation: Transformation = Transformation()
    border: Border = Border()
    shadow: Shadow = Shadow()
    background: Background = NoBackground()
    font_family: Inheritable = INHERIT
    font_color: Inheritable = INHERIT
    font_size: Inheritable = INHERIT
    font_weight: FontWeight = FontWeight.REGULAR
    text_alignment: TextAlignment = TextAlignment.LEFT
    label_position: LabelPosition = LabelPosition.ABOVE
    align_x: Alignment = Alignment.NONE
    align_y: Alignment = Alignment.NONE
    position: Stacking = Stacking.NORMAL

    @property
    def type(self) -> NodeType:
        return self.kind.TYPE

    @property
    def text(self) -> Optional[str]:
        """Text content of the node, or None for kinds without text."""
        if isinstance(self.kind, TEXT_KINDS):
            return self.kind.text
        return None

    def with_text(self, text: str) -> "Node":
        """Return a copy with new text content; kinds without text are unchanged."""
        if isinstance(self.kind, TEXT_KINDS):
            return replace(self, kind=replace(self.kind, text=text))
        return self

    def __str__(self) -> str:
        return f"{self.type.value} {self.name!r} ({self.id})"


def is_container(node: Union[Node, NodeType]) -> bool:
    """Return True if ``node`` (or node type) belongs to the container set."""
    node_type = node.type if isinstance(node, Node) else node
    return node_type in CONTAINER_TYPES
