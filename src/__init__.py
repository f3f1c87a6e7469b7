"""
mdlive - Markup to HTML converter with live reload

Converts a small line-oriented markup language into a standalone HTML
document, and optionally serves it with automatic browser refresh.
"""

__version__ = "1.0.0"

from .lib import Converter, html_render, ReloadSignal, LOG, state_connectToLogger

__all__ = ["Converter", "html_render", "ReloadSignal", "LOG", "state_connectToLogger", "__version__"]
