"""
Templates for new nodes.

A template is a complete subtree whose ids are all ``TEMPLATE_ID``. New
nodes are never built directly by the editor; a template is instantiated
with ``instantiate``, which stamps a fresh id on every node.
"""

from typing import Dict, Tuple

from .ids import Seed, stamp
from .node import (
    ButtonData,
    CheckboxData,
    ColumnData,
    DocumentData,
    HeadingData,
    ImageData,
    Node,
    NodeType,
    OptionData,
    PageData,
    ParagraphData,
    RadioData,
    RowData,
    TextColumnData,
    TextData,
    TextFieldData,
    TextFieldMultilineData,
)
from .style import (
    Alignment,
    Border,
    BorderCorner,
    BorderWidth,
    Color,
    Fill,
    Fit,
    FontWeight,
    Length,
    Local,
    Padding,
    SolidBackground,
    Spacing,
)
from .tree import Tree

TEMPLATE_ID = "template"

LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua."
)

_FILL = Length(Fill())
_FIT = Length(Fit())
_INPUT_BORDER = Border(Color(170, 170, 170), width=BorderWidth(1, 1, 1, 1), corner=BorderCorner(3, 3, 3, 3))


def document() -> Tree:
    return Tree(Node(TEMPLATE_ID, "Document", DocumentData()))


def page(index: int = 1) -> Tree:
    return Tree(
        Node(
            TEMPLATE_ID,
            f"Page {index}",
            PageData(),
            width=_FILL,
            height=_FILL,
            background=SolidBackground(Color(255, 255, 255)),
        )
    )


def row() -> Tree:
    return Tree(Node(TEMPLATE_ID, "Row", RowData(), width=_FILL, spacing=Spacing(20, 20, True)))


def column() -> Tree:
    return Tree(Node(TEMPLATE_ID, "Column", ColumnData(), width=_FILL, spacing=Spacing(20, 20, True)))


def text_column() -> Tree:
    return Tree(
        Node(TEMPLATE_ID, "Text Column", TextColumnData(), width=_FILL, spacing=Spacing(10, 10, True))
    )


def heading(level: int = 1) -> Tree:
    sizes = {1: 32, 2: 24, 3: 20}
    return Tree(
        Node(
            TEMPLATE_ID,
            f"Heading {level}",
            HeadingData("Heading", level),
            font_size=Local(sizes.get(level, 20)),
            font_weight=FontWeight.BOLD,
        )
    )


def paragraph() -> Tree:
    return Tree(Node(TEMPLATE_ID, "Paragraph", ParagraphData(LOREM), width=_FILL))


def text() -> Tree:
    return Tree(Node(TEMPLATE_ID, "Text", TextData("Text")))


def image() -> Tree:
    return Tree(Node(TEMPLATE_ID, "Image", ImageData("", "Image"), width=_FIT, height=_FIT))


def button() -> Tree:
    return Tree(
        Node(
            TEMPLATE_ID,
            "Button",
            ButtonData("Button"),
            padding=Padding(10, 20, 10, 20, False),
            border=Border(Color(0, 0, 0), corner=BorderCorner(4, 4, 4, 4)),
            background=SolidBackground(Color(52, 101, 164)),
            font_color=Local(Color(255, 255, 255)),
            align_x=Alignment.START,
        )
    )


def checkbox() -> Tree:
    return Tree(Node(TEMPLATE_ID, "Checkbox", CheckboxData("Checkbox")))


def text_field() -> Tree:
    return Tree(
        Node(
            TEMPLATE_ID,
            "Text Field",
            TextFieldData("Label"),
            width=_FILL,
            padding=Padding.each(10),
            border=_INPUT_BORDER,
        )
    )


def text_field_multiline() -> Tree:
    return Tree(
        Node(
            TEMPLATE_ID,
            "Multiline Field",
            TextFieldMultilineData("Label"),
            width=_FILL,
            padding=Padding.each(10),
            border=_INPUT_BORDER,
        )
    )


def option(label: str = "Option") -> Tree:
    return Tree(Node(TEMPLATE_ID, "Option", OptionData(label)))


def radio() -> Tree:
    """A radio group with three options."""
    return Tree(
        Node(TEMPLATE_ID, "Radio Selection", RadioData("Radio Selection"), spacing=Spacing(10, 10, True)),
        (option("Option 1"), option("Option 2"), option("Option 3")),
    )


# Palette of templates offered to the user, by node type
TEMPLATES: Dict[NodeType, Tree] = {
    NodeType.PAGE: page(),
    NodeType.ROW: row(),
    NodeType.COLUMN: column(),
    NodeType.TEXT_COLUMN: text_column(),
    NodeType.HEADING: heading(),
    NodeType.PARAGRAPH: paragraph(),
    NodeType.TEXT: text(),
    NodeType.IMAGE: image(),
    NodeType.BUTTON: button(),
    NodeType.CHECKBOX: checkbox(),
    NodeType.TEXT_FIELD: text_field(),
    NodeType.TEXT_FIELD_MULTILINE: text_field_multiline(),
    NodeType.RADIO: radio(),
    NodeType.OPTION: option(),
}


def instantiate(template: Tree, seed: Seed) -> Tuple[Tree, Seed]:
    """Stamp out a new subtree from ``template``, with a fresh id on every node."""
    return stamp(template, seed)
