# views.py

from io import StringIO
from typing import Optional

from rich import box
from rich.text import Text
from rich.panel import Panel
from rich.align import Align
from rich.style import Style
from rich.segment import Segment
from rich.padding import Padding
from rich.measure import Measurement
from rich.console import Console, ConsoleOptions, Group, RenderableType, RenderResult

from .configurable import ViewStyleConfigurable
from .configuration import (
    BACKGROUND_COLOR, FONT, FOREGROUND_COLOR, KERN, PARAGRAPH_STYLE,
    ButtonConfiguration, ImageConfiguration, LabelConfiguration, ViewConfiguration
)
from .geometry import Color, ContentMode, ControlState, Font

def _color(color: Optional[Color]):
    return color.to_rich() if color is not None else None

def _cells(value: float) -> Optional[int]:
    return max(0, int(value)) or None

def render_to_str(renderable: RenderableType, width: int = 80, color: bool = True) -> str:
    """
    Render a view's output to a string.

    Args:
        renderable: Result of a view's render()
        width: Console width in cells
        color: Emit truecolor ANSI codes; plain text when False

    Returns:
        Captured console output
    """
    console = Console(
        file=StringIO(),
        width=width,
        force_terminal=color,
        color_system="truecolor" if color else None,
        highlight=False
    )
    with console.capture() as capture:
        console.print(renderable)
    return capture.get()

class Clipped:
    """
    Renders at most max_lines displayed lines, within width cells when given.

    Lines are counted after wrapping, so a wrapped paragraph is cut like
    any other block of text.
    """
    def __init__(self, renderable: RenderableType,
                 max_lines: Optional[int] = None,
                 width: Optional[int] = None):
        self.renderable = renderable
        self.max_lines = max_lines
        self.width = width

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        if self.width:
            options = options.update_width(min(self.width, options.max_width))
        lines = console.render_lines(self.renderable, options, pad=False)
        if self.max_lines:
            lines = lines[:self.max_lines]
        new_line = Segment.line()
        for line in lines:
            yield from line
            yield new_line

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> Measurement:
        measurement = Measurement.get(console, options, self.renderable)
        return measurement.clamp(max_width=self.width) if self.width else measurement

class StyledView:
    """Base for the rich-backed views; holds the frame drawn around the content."""

    def __init__(self):
        self.frame = ViewConfiguration()

    def apply_frame(self, config: ViewConfiguration) -> None:
        self.frame = config

    def wrap(self, content: RenderableType) -> RenderableType:
        """Draw background, padding and border from the current frame, within its size."""
        frame = self.frame
        background = Style(bgcolor=_color(frame.background_color))
        width = _cells(frame.size.width)
        height = _cells(frame.size.height)

        if frame.border_width > 0:
            return Panel(
                content,
                box=box.ROUNDED if frame.corner_radius > 0 else box.SQUARE,
                border_style=Style(color=_color(frame.border_color), bold=frame.border_width > 1),
                style=background,
                padding=frame.padding.as_padding(),
                expand=False,
                width=width,
                height=height
            )
        if not frame.padding.is_zero or background:
            content = Padding(content, frame.padding.as_padding(), style=background, expand=False)
        if width or height:
            return Clipped(content, max_lines=height, width=width)
        return content

class LabelView(StyledView, ViewStyleConfigurable[LabelConfiguration]):
    """Text label drawn with rich."""

    def __init__(self, text: str = ""):
        super().__init__()
        self.text = text
        self.text_style = Style()
        self.justify = "left"
        self.overflow = "ellipsis"
        self.no_wrap = True
        self.number_of_lines = 1
        self.line_spacing = 0
        self.character_spacing = 0

    def update_style(self, style: LabelConfiguration) -> None:
        attributes = style.attributes
        paragraph = attributes[PARAGRAPH_STYLE]
        font: Optional[Font] = attributes.get(FONT)

        text_style = Style(
            color=_color(attributes.get(FOREGROUND_COLOR)),
            bgcolor=_color(attributes.get(BACKGROUND_COLOR))
        )
        self.text_style = text_style + font.to_rich_style() if font else text_style
        self.justify = paragraph.alignment.justify
        self.overflow = paragraph.line_break_mode.overflow
        self.no_wrap = paragraph.line_break_mode.no_wrap
        self.line_spacing = max(0, int(paragraph.line_spacing))
        self.character_spacing = max(0, int(attributes[KERN]))
        self.number_of_lines = style.number_of_lines
        self.apply_frame(style.view)

    def _lines(self):
        lines = self.text.splitlines() or [""]
        if self.character_spacing > 0:
            gap = " " * self.character_spacing
            lines = [gap.join(line) for line in lines]
        return lines

    def render(self) -> RenderableType:
        separator = "\n" * (self.line_spacing + 1)
        text = Text(
            separator.join(self._lines()),
            style=self.text_style,
            justify=self.justify,
            overflow=self.overflow,
            no_wrap=self.no_wrap
        )
        # 0 lines means no limit
        return self.wrap(Clipped(text, max_lines=max(0, self.number_of_lines)))

class ButtonView(StyledView, ViewStyleConfigurable[ButtonConfiguration]):
    """Button showing the title, color and images configured for its current state."""

    def __init__(self, state: ControlState = ControlState.NORMAL):
        super().__init__()
        self.state = state
        self.config = ButtonConfiguration()

    def update_style(self, style: ButtonConfiguration) -> None:
        self.config = style
        self.apply_frame(style.view)

    def render(self) -> RenderableType:
        config = self.config
        title = config.title.for_state(self.state) or ""
        image = config.image.for_state(self.state)
        background_image = config.background_image.for_state(self.state)

        text = Text(style=Style(color=_color(config.title_color.for_state(self.state))))
        if image is not None:
            text.append(f"[{image.name}]")
            text.append(" " * max(1, int(config.image_edge_insets.right)))
        text.append(title, style=config.title_font.to_rich_style())

        content: RenderableType = Padding(text, config.title_edge_insets.as_padding(), expand=False)
        if background_image is not None:
            content = Group(Text(f"<{background_image.name}>", style="dim"), content)
        return self.wrap(Padding(content, config.content_edge_insets.as_padding(), expand=False))

class ImageView(StyledView, ViewStyleConfigurable[ImageConfiguration]):
    """Placeholder for an image; terminals only show the image's name."""

    _ALIGNMENT = {
        ContentMode.CENTER: ("center", "middle"),
        ContentMode.TOP: ("center", "top"),
        ContentMode.BOTTOM: ("center", "bottom"),
        ContentMode.LEFT: ("left", "middle"),
        ContentMode.RIGHT: ("right", "middle"),
    }

    def __init__(self):
        super().__init__()
        self.image = None
        self.content_mode = ContentMode.SCALE_TO_FILL

    def update_style(self, style: ImageConfiguration) -> None:
        self.image = style.image
        self.content_mode = style.view.content_mode
        self.apply_frame(style.view)

    def render(self) -> RenderableType:
        label = Text(f"<{self.image.name}>" if self.image else "", style="dim")
        if self.content_mode in self._ALIGNMENT:
            align, vertical = self._ALIGNMENT[self.content_mode]
            return self.wrap(Align(label, align, vertical=vertical, height=_cells(self.frame.size.height)))
        # Scaling modes fill the frame; the placeholder sits top left
        return self.wrap(label)
