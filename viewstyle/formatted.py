# formatted.py

from prompt_toolkit.formatted_text import FormattedText

from .configuration import BACKGROUND_COLOR, FONT, FOREGROUND_COLOR, LabelConfiguration

def label_style_string(config: LabelConfiguration) -> str:
    """
    Build a prompt_toolkit style string from a label configuration.

    Missing or fully transparent colors are left out so the surrounding
    application style shows through.
    """
    attributes = config.attributes
    parts = []
    for key, prefix in ((FOREGROUND_COLOR, 'fg'), (BACKGROUND_COLOR, 'bg')):
        color = attributes.get(key)
        if color is not None and not color.is_transparent:
            parts.append(f'{prefix}:{color.to_hex()}')
    font = attributes.get(FONT)
    if font is not None:
        if font.bold:
            parts.append('bold')
        if font.italic:
            parts.append('italic')
    return ' '.join(parts)

def to_formatted_text(text: str, config: LabelConfiguration) -> FormattedText:
    """Wrap text in a single styled fragment, honoring the label's line limit."""
    if config.number_of_lines > 0:
        text = '\n'.join(text.splitlines()[:config.number_of_lines])
    return FormattedText([(label_style_string(config), text)])
