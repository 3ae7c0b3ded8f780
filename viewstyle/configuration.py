# configuration.py

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar

from .geometry import (
    Color, ContentMode, ControlState, EdgeInsets, Font, Image,
    LineBreakMode, Size, TextAlignment
)

T = TypeVar("T")

# Attribute keys understood by the renderers in this package
PARAGRAPH_STYLE = "paragraph_style"
KERN = "kern"
FONT = "font"
FOREGROUND_COLOR = "foreground_color"
BACKGROUND_COLOR = "background_color"

@dataclass
class ViewConfiguration:
    """Visual properties shared by every kind of view."""
    background_color: Optional[Color] = field(default_factory=Color.clear)
    border_width: float = 0
    border_color: Optional[Color] = field(default_factory=Color.clear)
    corner_radius: float = 0
    clips_to_bounds: bool = False
    content_mode: ContentMode = ContentMode.SCALE_TO_FILL
    padding: EdgeInsets = field(default_factory=EdgeInsets.zero)
    size: Size = field(default_factory=Size.zero)

@dataclass
class ParagraphStyle:
    """Paragraph layout portion of a label's text attributes."""
    line_spacing: float = 0
    line_break_mode: LineBreakMode = LineBreakMode.TRUNCATING_TAIL
    alignment: TextAlignment = TextAlignment.LEFT

@dataclass
class LabelConfiguration:
    view: ViewConfiguration = field(default_factory=ViewConfiguration)
    number_of_lines: int = 1
    text_color: Optional[Color] = field(default_factory=Color.black)
    text_background_color: Optional[Color] = field(default_factory=Color.clear)
    font: Optional[Font] = field(default_factory=Font.system)
    text_alignment: TextAlignment = TextAlignment.LEFT
    line_break_mode: LineBreakMode = LineBreakMode.TRUNCATING_TAIL
    line_spacing: float = 0
    character_spacing: float = 0

    @property
    def attributes(self) -> Dict[str, Any]:
        """
        Text attributes for styled text, built from the current field values.

        Paragraph style and kern are always present. Font and color entries
        are left out when the corresponding field is None.
        """
        attributes: Dict[str, Any] = {
            PARAGRAPH_STYLE: ParagraphStyle(
                line_spacing=self.line_spacing,
                line_break_mode=self.line_break_mode,
                alignment=self.text_alignment,
            ),
            KERN: self.character_spacing,
        }
        if self.font is not None:
            attributes[FONT] = self.font
        if self.text_color is not None:
            attributes[FOREGROUND_COLOR] = self.text_color
        if self.text_background_color is not None:
            attributes[BACKGROUND_COLOR] = self.text_background_color
        return attributes

@dataclass
class StateStyle(Generic[T]):
    """One optional value per control state. States never fall back to each other."""
    normal: Optional[T] = None
    highlighted: Optional[T] = None
    selected: Optional[T] = None
    disabled: Optional[T] = None

    def for_state(self, state: ControlState) -> Optional[T]:
        return getattr(self, state.value)

    def set_for_state(self, state: ControlState, value: Optional[T]) -> None:
        setattr(self, state.value, value)

@dataclass
class ButtonConfiguration:
    view: ViewConfiguration = field(default_factory=ViewConfiguration)
    title_font: Font = field(default_factory=Font.system)
    title: StateStyle[str] = field(default_factory=StateStyle)
    title_color: StateStyle[Color] = field(default_factory=StateStyle)
    image: StateStyle[Image] = field(default_factory=StateStyle)
    background_image: StateStyle[Image] = field(default_factory=StateStyle)
    content_edge_insets: EdgeInsets = field(default_factory=EdgeInsets.zero)
    image_edge_insets: EdgeInsets = field(default_factory=EdgeInsets.zero)
    title_edge_insets: EdgeInsets = field(default_factory=EdgeInsets.zero)

@dataclass
class ImageConfiguration:
    view: ViewConfiguration = field(default_factory=ViewConfiguration)
    image: Optional[Image] = None
