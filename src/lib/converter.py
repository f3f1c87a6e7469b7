"""
Converter for markup source to HTML

Runs the full conversion pipeline for one source file:

    source text → Line Loader → Block Classifier → Inline Transformer
                → Block Renderer → Document Wrapper → output file

Nothing is carried over between runs; every convert() rebuilds the Document
from the current file contents.
"""

from pathlib import Path
from typing import Any, Dict, Union

from ..config import appsettings
from ..models.document import Document
from .classifier import BlockClassifier
from .inline import InlineTransformer
from .loader import lines_split, source_read
from .log import LOG
from .renderer import BlockRenderer
from .wrapper import htmlDocument_build


def document_build(source: str) -> Document:
    """
    Split, classify and inline-transform markup text

    Returns:
        Document with one transformed line per source line
    """
    document = BlockClassifier().document_classify(lines_split(source))
    return InlineTransformer().document_transform(document)


def html_render(source: str, title: str, style: str, live: bool = False) -> str:
    """
    Convert markup text to a complete HTML document

    Deterministic: the same source, title and style always give the same
    output.

    Args:
        source: Markup text
        title: Document title
        style: Raw CSS for the <style> block
        live: Include the live-reload script

    Returns:
        Complete HTML document
    """
    return document_html(document_build(source), title, style, live)


def document_html(document: Document, title: str, style: str, live: bool = False) -> str:
    """Render a transformed Document and wrap it as a standalone page"""
    body = BlockRenderer().body_render(document)
    return htmlDocument_build(body, title, style, live)


class Converter:
    """
    Converts one markup file into one standalone HTML file

    Responsibilities:
    - Read the source file
    - Run the conversion pipeline
    - Write the rendered document
    """

    def __init__(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
        style: str,
        live: bool = False,
    ) -> None:
        """
        Initialize converter

        Args:
            input_path: Markup source; its text form is also the document title
            output_path: Destination of the rendered HTML
            style: Raw CSS inserted into every rendered document
            live: Include the live-reload script in the output
        """
        self.input_path = Path(input_path)
        self.output_path = Path(output_path)
        self.title = str(input_path)
        self.style = style
        self.live = live

    def convert(self) -> Dict[str, Any]:
        """
        Convert the source file and write the result

        Returns:
            dict with conversion results and statistics

        Raises:
            OSError: If the source cannot be read or the output written
            UnicodeDecodeError: If the source is not valid text
        """
        source = source_read(self.input_path)
        LOG(f"Read {len(source)} characters from {self.input_path}", level=2)

        document = document_build(source)
        html = document_html(document, self.title, self.style, self.live)

        with self.output_path.open("w", encoding=appsettings.source_encoding, newline='') as f:
            f.write(html)
        LOG(f"Wrote {self.output_path}", level=2)

        return {
            'status': True,
            'output_file': str(self.output_path),
            'line_count': len(document),
        }
