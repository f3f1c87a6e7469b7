"""
Style sheet loader for rendered documents.

The CSS placed in the document <style> block is either the built-in default
shipped with the package (assets/style.css) or, when given, the verbatim
contents of a user style sheet.
"""

from pathlib import Path
from typing import Optional

from .loader import text_read
from .log import LOG

DEFAULT_STYLE_PATH = Path(__file__).parent.parent / "assets" / "style.css"


class StyleError(Exception):
    """Raised when a style sheet cannot be read"""
    pass


def stylePath_resolve(config_path: Optional[str] = None) -> Path:
    """
    Path of the style sheet to use

    Args:
        config_path: User style sheet, or None for the built-in default

    Returns:
        Path to the selected CSS file
    """
    return Path(config_path) if config_path else DEFAULT_STYLE_PATH


def style_load(config_path: Optional[str] = None) -> str:
    """
    Read the style sheet text

    Args:
        config_path: User style sheet overriding the built-in default

    Returns:
        Raw CSS text (not validated or escaped)

    Raises:
        StyleError: If the selected file cannot be read
    """
    style_path = stylePath_resolve(config_path)
    try:
        style = text_read(style_path)
    except (OSError, UnicodeDecodeError) as e:
        raise StyleError(f"Couldn't read style sheet {style_path}: {e}")

    LOG(f"Loaded style sheet: {style_path} ({len(style)} characters)", level=2)
    return style
