"""
Document data models

Line values, per-line block states and the Document pairing them. These are
the only structures that travel between the Loader, Classifier, Inline
Transformer and Block Renderer.
"""

from enum import Enum
from dataclasses import dataclass
from typing import List


class BlockState(Enum):
    """
    Structural role assigned to one source line

    Exactly one state per line. Assigned by the Block Classifier and consumed
    by the Block Renderer to open and close wrapper tags.
    """
    NORMAL = "normal"                   # paragraph text, headings, blanks
    ORDERED_LIST = "ordered_list"       # 1. item
    UNORDERED_LIST = "unordered_list"   # - item
    CODE = "code"                       # inside a ``` fence


@dataclass(frozen=True)
class Line:
    """
    One logical source line

    Attributes:
        index: 0-based position of the line in the source
        text: Line text (a trailing carriage return is kept until the
              Inline Transformer trims it)

    Lines are immutable: transformation stages build replacement values with
    text_replace() rather than editing in place.
    """
    index: int
    text: str

    def text_replace(self, text: str) -> "Line":
        """Return a new Line at the same position carrying ``text``"""
        return Line(index=self.index, text=text)


@dataclass
class Document:
    """
    Positionally aligned lines and block states

    Attributes:
        lines: Ordered source (or transformed) lines
        states: Block state of each line, states[i] belongs to lines[i]

    Raises:
        ValueError: If the two sequences differ in length
    """
    lines: List[Line]
    states: List[BlockState]

    def __post_init__(self) -> None:
        if len(self.lines) != len(self.states):
            raise ValueError(
                f"Document misaligned: {len(self.lines)} lines, "
                f"{len(self.states)} block states"
            )

    def __len__(self) -> int:
        return len(self.lines)

    def texts(self) -> List[str]:
        """Plain list of line texts, in order"""
        return [line.text for line in self.lines]
