"""
Line loader

Splits raw markup text into the ordered Line sequence every later stage
works on.
"""

from pathlib import Path
from typing import List, Union

from ..config import appsettings
from ..models.document import Line


def lines_split(text: str) -> List[Line]:
    r"""
    Split source text into newline-delimited lines

    Only ``\n`` separates lines; carriage returns stay on the line text and
    are trimmed later by the Inline Transformer. A trailing empty segment
    (text ending in a newline) does not produce a line.

    Args:
        text: Whole source text

    Returns:
        Lines numbered from 0

    Example:
        >>> [l.text for l in lines_split("# Title\r\n\nbody\n")]
        ['# Title\r', '', 'body']
    """
    segments = text.split('\n')
    if segments and segments[-1] == '':
        segments.pop()
    return [Line(index=i, text=segment) for i, segment in enumerate(segments)]


def text_read(path: Union[str, Path]) -> str:
    r"""
    Read a text file with line endings left exactly as stored

    No newline translation: ``\r`` and ``\r\n`` come back unchanged.

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the bytes are not valid in the source encoding
    """
    with Path(path).open(encoding=appsettings.source_encoding, newline='') as f:
        return f.read()


def source_read(path: Union[str, Path]) -> str:
    """
    Read a markup source file as text

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the bytes are not valid in the source encoding
    """
    return text_read(path)
