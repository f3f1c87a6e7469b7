"""
mdlive - Markup to HTML converter with live reload

Converts a small line-oriented markup language into a standalone HTML
document, and optionally serves it with automatic browser refresh.
"""

__version__ = "1.0.0"

from .converter import Converter, html_render
from .server import ReloadSignal, server_start
from .watcher import watcher_start
from .log import LOG, state_connectToLogger

__all__ = [
    "Converter",
    "html_render",
    "ReloadSignal",
    "server_start",
    "watcher_start",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
