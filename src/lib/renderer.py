"""
Block renderer

Walks transformed lines together with their block states and emits the HTML
body: wrapper tags at block-state transitions, and runs of plain lines joined
into paragraphs.
"""

from typing import List

from ..models.document import BlockState, Document
from .log import LOG

# Tag opened in front of the first line of a block
BLOCK_OPEN = {
    BlockState.ORDERED_LIST: "<ol>",
    BlockState.UNORDERED_LIST: "<ul>",
}

# Tag appended after the first NORMAL line following a block
BLOCK_CLOSE = {
    BlockState.ORDERED_LIST: "</ol>",
    BlockState.UNORDERED_LIST: "</ul>",
}

CODE_OPEN = "<pre><code>"
CODE_CLOSE = "</code></pre>"


class BlockRenderer:
    """
    Block-level HTML emitter

    Renderer state lives only for one body_render() call:
        previous_state: State of the last non-plain line (starts NORMAL)
        in_paragraph: A <p> has been opened and not yet closed

    A line is plain when it is NORMAL, non-empty and does not already start
    with a tag. Plain lines never update previous_state, so a block opened
    before a paragraph is closed at the next non-plain line.
    """

    def __init__(self) -> None:
        self.previous_state = BlockState.NORMAL
        self.in_paragraph = False
        self.parts: List[str] = []

    def plain_is(self, text: str, state: BlockState) -> bool:
        return state == BlockState.NORMAL and bool(text) and not text.startswith('<')

    def paragraph_extend(self, text: str) -> None:
        """Open a paragraph, or continue the open one with a single space"""
        if not self.in_paragraph:
            self.parts.append("<p>")
            self.in_paragraph = True
        else:
            self.parts.append(" ")
        self.parts.append(text)

    def paragraph_close(self) -> None:
        self.parts.append("</p>\n")
        self.in_paragraph = False

    def transition_wrap(self, text: str, state: BlockState) -> str:
        """
        Wrap a line whose state differs from the previous one

        Entering a code block drops the fence text for <pre><code>; leaving
        one replaces the current line with </code></pre>. List blocks keep
        the line text and gain an opening prefix or closing suffix.
        """
        if state == self.previous_state:
            return text

        if state in BLOCK_OPEN:
            return f"{BLOCK_OPEN[state]}\n{text}"
        if state == BlockState.CODE:
            return CODE_OPEN

        # state is NORMAL here
        if self.previous_state in BLOCK_CLOSE:
            return f"{text}\n{BLOCK_CLOSE[self.previous_state]}"
        if self.previous_state == BlockState.CODE:
            return CODE_CLOSE
        return text

    def line_render(self, text: str, state: BlockState) -> None:
        if self.plain_is(text, state):
            self.paragraph_extend(text)
            return

        if self.in_paragraph:
            self.paragraph_close()

        text = self.transition_wrap(text, state)
        self.previous_state = state

        self.parts.append(text)
        self.parts.append("\n")

    def body_render(self, document: Document) -> str:
        """
        Render a transformed Document to an HTML body fragment

        Args:
            document: Output of the Inline Transformer

        Returns:
            Body HTML; an unclosed paragraph is closed with </p> and no
            trailing newline
        """
        self.previous_state = BlockState.NORMAL
        self.in_paragraph = False
        self.parts = []

        for line, state in zip(document.lines, document.states):
            self.line_render(line.text, state)

        if self.in_paragraph:
            self.parts.append("</p>")
            self.in_paragraph = False

        body = "".join(self.parts)
        LOG(f"Rendered body: {len(body)} characters", level=3)
        return body
