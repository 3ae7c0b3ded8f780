# test_configuration.py

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from viewstyle.configuration import (
    BACKGROUND_COLOR, FONT, FOREGROUND_COLOR, KERN, PARAGRAPH_STYLE,
    ButtonConfiguration, ImageConfiguration, LabelConfiguration,
    ParagraphStyle, StateStyle, ViewConfiguration
)
from viewstyle.geometry import (
    Color, ContentMode, ControlState, EdgeInsets, Font, Image,
    LineBreakMode, Size, TextAlignment
)


class TestViewConfiguration:
    """Defaults and mutation of the base view configuration."""

    def test_defaults(self):
        config = ViewConfiguration()
        assert config.background_color == Color.clear()
        assert config.background_color.is_transparent
        assert config.border_width == 0
        assert config.border_color == Color.clear()
        assert config.corner_radius == 0
        assert config.clips_to_bounds is False
        assert config.content_mode is ContentMode.SCALE_TO_FILL
        assert config.padding == EdgeInsets.zero()
        assert config.size == Size.zero()

    def test_mutation_is_visible_immediately(self):
        config = ViewConfiguration()
        config.border_width = 2
        config.padding = EdgeInsets(top=1, left=2)
        assert config.border_width == 2
        assert config.padding.left == 2

    def test_values_are_not_validated(self):
        config = ViewConfiguration()
        config.size = Size(width=-10, height=-1)
        config.corner_radius = -3
        assert config.size.width == -10
        assert config.corner_radius == -3

    def test_instances_do_not_share_mutable_defaults(self):
        first, second = ViewConfiguration(), ViewConfiguration()
        first.padding.top = 5
        assert second.padding.top == 0


class TestLabelConfiguration:
    """Label defaults and the derived text attributes."""

    def setup_method(self):
        self.config = LabelConfiguration()

    def test_defaults(self):
        assert self.config.number_of_lines == 1
        assert self.config.text_color == Color.black()
        assert self.config.text_background_color == Color.clear()
        assert self.config.font == Font.system(14)
        assert self.config.font.size == 14
        assert self.config.text_alignment is TextAlignment.LEFT
        assert self.config.line_break_mode is LineBreakMode.TRUNCATING_TAIL
        assert self.config.line_spacing == 0
        assert self.config.character_spacing == 0
        assert self.config.view == ViewConfiguration()

    def test_attributes_with_defaults(self):
        attributes = self.config.attributes
        assert set(attributes) == {
            PARAGRAPH_STYLE, KERN, FONT, FOREGROUND_COLOR, BACKGROUND_COLOR
        }
        assert attributes[PARAGRAPH_STYLE] == ParagraphStyle()
        assert attributes[KERN] == 0

    def test_attributes_skip_missing_values(self):
        color = Color.from_hex("#336699")
        self.config.font = None
        self.config.text_color = color
        self.config.text_background_color = None

        attributes = self.config.attributes
        assert attributes[FOREGROUND_COLOR] == color
        assert FONT not in attributes
        assert BACKGROUND_COLOR not in attributes
        assert PARAGRAPH_STYLE in attributes
        assert KERN in attributes

    def test_attributes_recomputed_on_every_read(self):
        before = self.config.attributes
        self.config.line_spacing = 4
        self.config.text_alignment = TextAlignment.CENTER
        self.config.line_break_mode = LineBreakMode.WORD_WRAPPING
        self.config.character_spacing = 2

        after = self.config.attributes
        assert before[PARAGRAPH_STYLE].line_spacing == 0
        assert after[PARAGRAPH_STYLE] == ParagraphStyle(
            line_spacing=4,
            line_break_mode=LineBreakMode.WORD_WRAPPING,
            alignment=TextAlignment.CENTER
        )
        assert after[KERN] == 2
        assert before is not after


class TestButtonConfiguration:
    """Per-state bundles on buttons."""

    def setup_method(self):
        self.config = ButtonConfiguration()

    def test_defaults(self):
        assert self.config.title_font == Font.system(14)
        assert self.config.title == StateStyle()
        assert self.config.content_edge_insets == EdgeInsets.zero()
        assert self.config.image_edge_insets == EdgeInsets.zero()
        assert self.config.title_edge_insets == EdgeInsets.zero()

    def test_states_do_not_inherit(self):
        self.config.title.normal = "OK"
        assert self.config.title.highlighted is None
        assert self.config.title.selected is None
        assert self.config.title.disabled is None

    def test_bundles_are_independent(self):
        self.config.title_color.selected = Color.white()
        assert self.config.image.selected is None
        assert self.config.background_image.selected is None
        assert ButtonConfiguration().title_color.selected is None

    def test_state_accessors(self):
        self.config.image.set_for_state(ControlState.DISABLED, Image("lock"))
        assert self.config.image.disabled == Image("lock")
        assert self.config.image.for_state(ControlState.DISABLED) == Image("lock")
        assert self.config.image.for_state(ControlState.NORMAL) is None


class TestImageConfiguration:

    def test_defaults(self):
        config = ImageConfiguration()
        assert config.image is None
        assert config.view.content_mode is ContentMode.SCALE_TO_FILL

    def test_set_image(self):
        config = ImageConfiguration(image=Image("avatar", path="avatar.png"))
        assert config.image.path == "avatar.png"
