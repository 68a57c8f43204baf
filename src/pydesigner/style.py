"""
Style records attached to every design node.

All records are frozen dataclasses so that a node can be shared between
tree versions. Numeric input coming from text fields is parsed with
``parse_int`` / ``parse_float`` and clamped into the fixed ranges defined
below instead of being rejected.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

# Limits for lengths, spacing, padding, border widths and radii (pixels)
MIN_LENGTH = 0
MAX_LENGTH = 9999

# Limits for offsets
MIN_OFFSET = -9999
MAX_OFFSET = 9999

MIN_SCALE = 0.0
MAX_SCALE = 10.0

MIN_FONT_SIZE = 1
MAX_FONT_SIZE = 999

# Typography defaults used when no ancestor sets a value locally
DEFAULT_FONT_SIZE = 16
DEFAULT_FONT_FAMILY = "Sans Serif"


def clamp(value, low, high):
    """Clamp ``value`` into the closed range ``[low, high]``."""
    return max(low, min(high, value))


def parse_int(text: Any, default: int = 0) -> int:
    """Parse an integer, returning default on failure."""
    try:
        return int(str(text).strip())
    except (ValueError, TypeError):
        return default


def parse_float(text: Any, default: float = 0.0) -> float:
    """Parse a finite float, returning default on failure.

    ``nan`` and infinities, including overflowing text such as ``1e400``,
    count as failures.
    """
    try:
        value = float(str(text).strip())
    except (ValueError, TypeError):
        return default
    if not math.isfinite(value):
        return default
    return value


@dataclass(frozen=True)
class Color:
    """An RGBA color. Channels are 0-255, alpha is 0.0-1.0."""

    r: int
    g: int
    b: int
    a: float = 1.0

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @classmethod
    def from_hex(cls, text: str, default: Optional["Color"] = None) -> "Color":
        """Build a color from ``#rrggbb`` or ``#rgb`` text.

        Parameters
        ----------
        text : str
            Hex color, with or without the leading ``#``
        default : Color, optional
            Returned when ``text`` cannot be parsed (black if not given)

        Returns
        -------
        Color
        """
        value = text.strip().lstrip("#")
        if len(value) == 3:
            value = "".join(c * 2 for c in value)
        if len(value) != 6:
            return default if default is not None else BLACK
        try:
            return cls(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))
        except ValueError:
            return default if default is not None else BLACK

    def __str__(self) -> str:
        return self.to_hex()


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)

DEFAULT_FONT_COLOR = BLACK


# Local / Inherit settings


@dataclass(frozen=True)
class Local:
    """A style value set on the node itself."""

    value: Any


@dataclass(frozen=True)
class Inherit:
    """A style value taken from the nearest ancestor that sets it."""


INHERIT = Inherit()

Inheritable = Union[Local, Inherit]


# Sizing


@dataclass(frozen=True)
class Fixed:
    """Fixed size in pixels."""

    px: int


@dataclass(frozen=True)
class Fill:
    """Fill the available space, proportionally to ``portion``."""

    portion: int = 1


@dataclass(frozen=True)
class Fit:
    """Shrink to the size of the content."""


@dataclass(frozen=True)
class Unspecified:
    """No explicit sizing; the renderer decides."""


Strategy = Union[Fixed, Fill, Fit, Unspecified]


@dataclass(frozen=True)
class Length:
    """Width or height of a node, with optional min/max bounds."""

    strategy: Strategy = Unspecified()
    minimum: Optional[int] = None
    maximum: Optional[int] = None


# Spacing and padding


@dataclass(frozen=True)
class Spacing:
    """Space between children. A locked spacing keeps ``x == y``."""

    x: int = 0
    y: int = 0
    locked: bool = False


@dataclass(frozen=True)
class Padding:
    """Inner padding. A locked padding keeps all four edges equal."""

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0
    locked: bool = False

    @classmethod
    def each(cls, value: int) -> "Padding":
        return cls(value, value, value, value, True)


@dataclass(frozen=True)
class Transformation:
    offset_x: float = 0.0
    offset_y: float = 0.0
    rotation: float = 0.0
    scale: float = 1.0


# Border


class BorderStyle(Enum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"


@dataclass(frozen=True)
class BorderWidth:
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0
    locked: bool = True


@dataclass(frozen=True)
class BorderCorner:
    top_left: int = 0
    top_right: int = 0
    bottom_right: int = 0
    bottom_left: int = 0
    locked: bool = True


@dataclass(frozen=True)
class Border:
    color: Color = BLACK
    style: BorderStyle = BorderStyle.SOLID
    width: BorderWidth = field(default_factory=BorderWidth)
    corner: BorderCorner = field(default_factory=BorderCorner)


# Shadow


class ShadowKind(Enum):
    INNER = "inner"
    OUTER = "outer"


@dataclass(frozen=True)
class Shadow:
    offset_x: float = 0.0
    offset_y: float = 0.0
    size: float = 0.0
    blur: float = 0.0
    color: Color = BLACK
    kind: ShadowKind = ShadowKind.OUTER


# Background


@dataclass(frozen=True)
class NoBackground:
    pass


@dataclass(frozen=True)
class SolidBackground:
    color: Color


@dataclass(frozen=True)
class ImageBackground:
    url: str


Background = Union[NoBackground, SolidBackground, ImageBackground]


# Alignment and stacking


class Alignment(Enum):
    NONE = "none"
    START = "start"
    CENTER = "center"
    END = "end"
    STRETCH = "stretch"


class Stacking(Enum):
    """How a node is stacked relative to its siblings."""

    NORMAL = "normal"
    IN_FRONT = "in_front"


class TextAlignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class FontWeight(Enum):
    THIN = 100
    EXTRA_LIGHT = 200
    LIGHT = 300
    REGULAR = 400
    MEDIUM = 500
    SEMI_BOLD = 600
    BOLD = 700
    EXTRA_BOLD = 800
    HEAVY = 900


class LabelPosition(Enum):
    """Where a form control draws its label."""

    LEFT = "left"
    ABOVE = "above"
    HIDDEN = "hidden"
