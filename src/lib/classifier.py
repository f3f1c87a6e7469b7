"""
Block classifier

Assigns every source line exactly one BlockState. Classification runs three
independent passes over the whole line sequence, in this order:

1. Unordered-list pass: ``- item`` lines
2. Ordered-list pass: ``1. item`` / ``a. item`` lines (wins over pass 1)
3. Code-fence pass: lines inside ``` fences (wins over everything)

The code-fence pass toggles an "inside code" flag on each fence line. The
opening fence is marked CODE along with every line after it; the closing
fence line keeps whatever the earlier passes gave it.
"""

from typing import List, Optional, Sequence

from ..models.document import BlockState, Line, Document
from .log import LOG

FENCE_MARKER = "```"
UNORDERED_MARKER = "- "


def orderedMarker_end(text: str) -> Optional[int]:
    """
    Find the end of a leading ordered-list marker

    The marker is one or more alphanumeric characters immediately followed
    by ``.`` and a single space. Scanning stops at the first character that
    is neither alphanumeric nor the start of that pattern.

    Args:
        text: Line text

    Returns:
        Index of the first content character after the marker, or None

    Example:
        >>> orderedMarker_end("12. twelve")
        4
        >>> orderedMarker_end(". nothing") is None
        True
    """
    for i, char in enumerate(text):
        if char.isalnum():
            continue
        if char == '.' and i > 0 and text[i + 1:i + 2] == ' ':
            return i + 2
        return None
    return None


def fence_is(text: str) -> bool:
    """True if the line opens or closes a fenced code block"""
    return text.rstrip('\r').startswith(FENCE_MARKER)


class BlockClassifier:
    """
    Line-classification state machine

    Pure function of the whole line sequence: the same lines always produce
    the same states, and the result has exactly one state per line.
    """

    def states_classify(self, texts: Sequence[str]) -> List[BlockState]:
        """
        Classify raw line texts

        Args:
            texts: Line texts in source order

        Returns:
            BlockState per line, same length as ``texts``
        """
        states = [BlockState.NORMAL] * len(texts)
        self.unorderedLists_mark(texts, states)
        self.orderedLists_mark(texts, states)
        self.codeFences_mark(texts, states)
        return states

    def unorderedLists_mark(self, texts: Sequence[str], states: List[BlockState]) -> None:
        for i, text in enumerate(texts):
            if text.startswith(UNORDERED_MARKER):
                states[i] = BlockState.UNORDERED_LIST

    def orderedLists_mark(self, texts: Sequence[str], states: List[BlockState]) -> None:
        for i, text in enumerate(texts):
            if orderedMarker_end(text) is not None:
                states[i] = BlockState.ORDERED_LIST

    def codeFences_mark(self, texts: Sequence[str], states: List[BlockState]) -> None:
        """
        Mark fenced code lines

        A closing fence flips the flag and is skipped, so it retains its
        earlier classification. An unterminated fence runs to end of input.
        """
        inside_code = False
        for i, text in enumerate(texts):
            if fence_is(text):
                if inside_code:
                    inside_code = False
                    continue
                inside_code = True

            if inside_code:
                states[i] = BlockState.CODE

        if inside_code:
            LOG("Unterminated code fence runs to end of input", level=2)

    def document_classify(self, lines: List[Line]) -> Document:
        """
        Pair lines with their block states

        Args:
            lines: Output of the Line Loader

        Returns:
            Document with one state per line
        """
        states = self.states_classify([line.text for line in lines])
        LOG(f"Classified {len(lines)} lines", level=3)
        return Document(lines=list(lines), states=states)
