# geometry.py

import re
from enum import Enum
from dataclasses import dataclass
from typing import Optional, Tuple

from rich.color import Color as RichColor
from rich.style import Style

_HEX_COLOR = re.compile(r'^#?([0-9a-fA-F]{6})([0-9a-fA-F]{2})?$')

@dataclass
class EdgeInsets:
    """Inset distances for each edge of a rectangle."""
    top: float = 0
    left: float = 0
    bottom: float = 0
    right: float = 0

    @classmethod
    def zero(cls) -> 'EdgeInsets':
        return cls()

    @property
    def is_zero(self) -> bool:
        return not any((self.top, self.left, self.bottom, self.right))

    def as_padding(self) -> Tuple[int, int, int, int]:
        """Return (top, right, bottom, left) in whole cells, the order rich expects."""
        return tuple(max(0, int(v)) for v in (self.top, self.right, self.bottom, self.left))

@dataclass
class Size:
    width: float = 0
    height: float = 0

    @classmethod
    def zero(cls) -> 'Size':
        return cls()

@dataclass(frozen=True)
class Color:
    """
    RGBA color with components in the 0..1 range.

    Fully transparent colors have no rich equivalent and map to None,
    which leaves the terminal default in place.
    """
    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 1.0

    @classmethod
    def clear(cls) -> 'Color':
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def black(cls) -> 'Color':
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def white(cls) -> 'Color':
        return cls(1.0, 1.0, 1.0, 1.0)

    @classmethod
    def from_hex(cls, value: str) -> 'Color':
        """
        Parse '#rrggbb' or '#rrggbbaa'.

        Raises:
            ValueError: If value is not a 6 or 8 digit hex color.
        """
        match = _HEX_COLOR.match(value.strip())
        if not match:
            raise ValueError(f"Invalid hex color '{value}'")
        rgb, alpha = match.groups()
        r, g, b = (int(rgb[i:i + 2], 16) / 255 for i in (0, 2, 4))
        a = int(alpha, 16) / 255 if alpha else 1.0
        return cls(r, g, b, a)

    @property
    def is_transparent(self) -> bool:
        return self.alpha <= 0

    def to_hex(self) -> str:
        return '#' + ''.join(f'{round(c * 255):02x}' for c in (self.red, self.green, self.blue))

    def to_rich(self) -> Optional[RichColor]:
        if self.is_transparent:
            return None
        return RichColor.from_rgb(*(round(c * 255) for c in (self.red, self.green, self.blue)))

@dataclass(frozen=True)
class Font:
    name: str = "system"
    size: float = 14
    bold: bool = False
    italic: bool = False

    @classmethod
    def system(cls, size: float = 14, bold: bool = False) -> 'Font':
        """Default system font at the given point size."""
        return cls(name="system", size=size, bold=bold)

    def to_rich_style(self) -> Style:
        # Terminals have a single point size; only the weight and slant carry over.
        return Style(bold=self.bold or None, italic=self.italic or None)

@dataclass(frozen=True)
class Image:
    """Reference to an image resource; loading it is the host's job."""
    name: str
    path: Optional[str] = None

class ContentMode(Enum):
    SCALE_TO_FILL = "scale_to_fill"
    SCALE_ASPECT_FIT = "scale_aspect_fit"
    SCALE_ASPECT_FILL = "scale_aspect_fill"
    REDRAW = "redraw"
    CENTER = "center"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

class TextAlignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFIED = "justified"
    NATURAL = "natural"

    @property
    def justify(self) -> str:
        """Equivalent rich justify method."""
        return {
            TextAlignment.JUSTIFIED: "full",
            TextAlignment.NATURAL: "default",
        }.get(self, self.value)

class LineBreakMode(Enum):
    WORD_WRAPPING = "word_wrapping"
    CHAR_WRAPPING = "char_wrapping"
    CLIPPING = "clipping"
    TRUNCATING_HEAD = "truncating_head"
    TRUNCATING_TAIL = "truncating_tail"
    TRUNCATING_MIDDLE = "truncating_middle"

    @property
    def overflow(self) -> str:
        """
        Equivalent rich overflow method.

        rich only truncates at the tail, so head and middle truncation
        fall back to an ellipsis at the end of the line.
        """
        if self in (LineBreakMode.WORD_WRAPPING, LineBreakMode.CHAR_WRAPPING):
            return "fold"
        if self is LineBreakMode.CLIPPING:
            return "crop"
        return "ellipsis"

    @property
    def no_wrap(self) -> bool:
        return self not in (LineBreakMode.WORD_WRAPPING, LineBreakMode.CHAR_WRAPPING)

class ControlState(Enum):
    NORMAL = "normal"
    HIGHLIGHTED = "highlighted"
    SELECTED = "selected"
    DISABLED = "disabled"
