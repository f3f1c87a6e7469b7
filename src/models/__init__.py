"""
Models package for mdlive

Contains data structures and type definitions for the conversion pipeline.
"""

from .state import ProgramState, pipeline
from .document import BlockState, Line, Document

__all__ = [
    "ProgramState",
    "pipeline",
    "BlockState",
    "Line",
    "Document",
]
