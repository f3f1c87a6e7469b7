"""
Inline transformer

Rewrites headings, list markers and inline spans of every non-code line into
HTML fragments. Code lines pass through untouched.

Per line, in strict order:
1. Heading:    ``### Title``            → ``<h3>Title</h3>``
2. List item:  ``- a`` / ``1. a``       → ``<li>a</li>``
3. Spans:      bold, italic, link, horizontal rule, inline code
4. Fence:      a leftover ``` line is blanked
"""

import re
from typing import List, Tuple

from ..models.document import BlockState, Document
from .classifier import FENCE_MARKER, UNORDERED_MARKER, orderedMarker_end
from .log import LOG

# Applied in order. Bold must run before italic so ``**x**`` is consumed
# before the single-asterisk pattern can see it.
SPAN_RULES: List[Tuple[re.Pattern[str], str]] = [
    (re.compile(r'\*\*(.*?)\*\*'), r'<strong>\1</strong>'),
    (re.compile(r'\*(.*?)\*'), r'<em>\1</em>'),
    (re.compile(r'\[(.*?)\]\((.*?)\)'), r'<a href="\2">\1</a>'),
    (re.compile(r'^---$'), '<hr/>'),
    (re.compile(r'`(.*?)`'), r'<code>\1</code>'),
]

MAX_HEADING_LEVEL = 6


def heading_apply(text: str) -> str:
    """
    Convert a ``#`` heading marker into an <hN> element

    Levels are tried from 6 down to 1; the marker must be exactly N hashes
    followed by a space, so seven hashes match nothing.

    Example:
        >>> heading_apply("## Section")
        '<h2>Section</h2>'
        >>> heading_apply("####### x")
        '####### x'
    """
    for level in range(MAX_HEADING_LEVEL, 0, -1):
        marker = '#' * level + ' '
        if text.startswith(marker):
            return f"<h{level}>{text[level + 1:]}</h{level}>"
    return text


def listItem_apply(text: str) -> str:
    """
    Unwrap an unordered or ordered list marker into an <li> element

    Example:
        >>> listItem_apply("- milk")
        '<li>milk</li>'
        >>> listItem_apply("3. eggs")
        '<li>eggs</li>'
    """
    if text.startswith(UNORDERED_MARKER):
        return f"<li>{text[len(UNORDERED_MARKER):]}</li>"

    content_start = orderedMarker_end(text)
    if content_start is not None:
        return f"<li>{text[content_start:]}</li>"
    return text


def spans_apply(text: str) -> str:
    """Substitute every inline span pattern, in SPAN_RULES order"""
    for pattern, replacement in SPAN_RULES:
        text = pattern.sub(replacement, text)
    return text


class InlineTransformer:
    """
    Per-line inline rewriting

    Produces a new Document; line order, line count and block states are
    carried over unchanged.
    """

    def line_transform(self, text: str) -> str:
        """
        Transform one non-code line

        Args:
            text: Raw line text (a trailing carriage return is trimmed)

        Returns:
            HTML fragment for the line
        """
        text = text.rstrip('\r')
        text = heading_apply(text)
        text = listItem_apply(text)

        # Tested before the spans run: the inline-code pattern would
        # otherwise rewrite the backticks themselves.
        fence_left = text.startswith(FENCE_MARKER)

        text = spans_apply(text)
        if fence_left:
            text = ''
        return text

    def document_transform(self, document: Document) -> Document:
        """
        Transform every line not classified CODE

        Args:
            document: Classified source document

        Returns:
            New Document with transformed line values
        """
        lines = [
            line if state == BlockState.CODE else line.text_replace(self.line_transform(line.text))
            for line, state in zip(document.lines, document.states)
        ]
        LOG(f"Transformed inline markup on {len(lines)} lines", level=3)
        return Document(lines=lines, states=list(document.states))
