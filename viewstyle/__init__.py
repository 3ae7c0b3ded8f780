# __init__.py

from .logger import Logger
from .configurable import ViewStyleConfigurable
from .geometry import (
    Color, ContentMode, ControlState, EdgeInsets, Font, Image,
    LineBreakMode, Size, TextAlignment
)
from .configuration import (
    ButtonConfiguration, ImageConfiguration, LabelConfiguration,
    ParagraphStyle, StateStyle, ViewConfiguration
)
from .views import ButtonView, ImageView, LabelView, render_to_str
from .formatted import label_style_string, to_formatted_text

__all__ = [
    "Logger", "ViewStyleConfigurable",
    "Color", "ContentMode", "ControlState", "EdgeInsets", "Font", "Image",
    "LineBreakMode", "Size", "TextAlignment",
    "ButtonConfiguration", "ImageConfiguration", "LabelConfiguration",
    "ParagraphStyle", "StateStyle", "ViewConfiguration",
    "ButtonView", "ImageView", "LabelView", "render_to_str",
    "label_style_string", "to_formatted_text",
]
