"""
Block classifier tests

Tests the three classification passes (unordered list, ordered list, code
fence), their precedence, and the closing-fence carry-over.
"""

import pytest

from mdlive.lib.classifier import BlockClassifier, orderedMarker_end, fence_is
from mdlive.lib.loader import lines_split
from mdlive.models.document import BlockState, Document, Line

N = BlockState.NORMAL
OL = BlockState.ORDERED_LIST
UL = BlockState.UNORDERED_LIST
CODE = BlockState.CODE


def classify(source: str):
    return BlockClassifier().states_classify([line.text for line in lines_split(source)])


class TestOrderedMarker:
    """Test the leading alphanumeric + '. ' scan"""

    @pytest.mark.parametrize("text,expected", [
        ("1. first", 3),
        ("12. twelve", 4),
        ("a. letter", 3),
        ("IV. roman", 4),
        ("12. ", 4),
    ])
    def test_marker_found(self, text, expected):
        """Alphanumerics, dot and one space form a marker"""
        assert orderedMarker_end(text) == expected

    @pytest.mark.parametrize("text", [
        "",
        ". no prefix",
        "1.no space",
        "1.",
        "1) paren",
        "v1.2. version",
        "- 1. dash first",
        " 1. indented",
        "plain words",
    ])
    def test_marker_absent(self, text):
        """Anything else is not an ordered marker"""
        assert orderedMarker_end(text) is None


class TestListPasses:
    """Test unordered and ordered list classification"""

    def test_unordered_items(self):
        """Lines starting with '- ' are unordered list items"""
        assert classify("- a\n- b") == [UL, UL]

    def test_dash_without_space(self):
        """'-a' is not a list item"""
        assert classify("-a") == [N]

    def test_ordered_items(self):
        """Numbered lines are ordered list items"""
        assert classify("1. a\n2. b") == [OL, OL]

    def test_sentence_with_period_is_ordered(self):
        """A leading word followed by '. ' also matches the marker"""
        assert classify("Hello. World") == [OL]

    def test_mixed_document(self):
        """Each line gets its own state"""
        source = "# Title\n- a\n1. b\ntext\n"
        assert classify(source) == [N, UL, OL, N]


class TestCodeFencePass:
    """Test fence toggling and the closing-fence carry-over"""

    def test_simple_block(self):
        """Opening fence and body are CODE; closing fence is not"""
        assert classify("```\ncode\n```") == [CODE, CODE, N]

    def test_fence_with_language(self):
        """Text after the marker still opens a fence"""
        assert classify("```python\nx = 1\n```") == [CODE, CODE, N]

    def test_code_overrides_lists(self):
        """List markers inside a fence are code"""
        assert classify("```\n- a\n1. b\n```") == [CODE, CODE, CODE, N]

    def test_unterminated_fence(self):
        """An unclosed fence runs to the end of input"""
        assert classify("text\n```\nx\ny") == [N, CODE, CODE, CODE]

    def test_two_blocks(self):
        """Fences toggle independently"""
        source = "```\na\n```\nmid\n```\nb\n```"
        assert classify(source) == [CODE, CODE, N, N, CODE, CODE, N]

    def test_adjacent_fences(self):
        """Empty block: opening is CODE, closing keeps NORMAL"""
        assert classify("```\n```") == [CODE, N]

    def test_crlf_fence(self):
        """Fence detection ignores a trailing carriage return"""
        assert classify("```\r\nx\r\n```\r\n") == [CODE, CODE, N]

    def test_fence_is(self):
        """Only a leading triple backtick is a fence"""
        assert fence_is("```")
        assert fence_is("```js\r")
        assert not fence_is("``")
        assert not fence_is(" ```")


class TestClassificationProperties:
    """Test totality and determinism"""

    @pytest.mark.parametrize("source", [
        "",
        "\n",
        "# h\n\n- a\n- b\n1. c\n```\nx\n```\n---\n",
        "```\n```\n```\n",
        "**a** *b* `c` [d](e)\n\n\n",
        "- \n1. \n. \n",
    ])
    def test_one_state_per_line(self, source):
        """State count always equals line count"""
        lines = lines_split(source)
        assert len(BlockClassifier().states_classify([l.text for l in lines])) == len(lines)

    def test_deterministic(self):
        """Same lines, same states"""
        source = "- a\n```\nb\n```\n1. c"
        assert classify(source) == classify(source)

    def test_document_classify_pairs_lines(self):
        """document_classify keeps the Line values and aligns states"""
        lines = lines_split("- a\nb")
        document = BlockClassifier().document_classify(lines)

        assert document.lines == lines
        assert document.states == [UL, N]


class TestDocumentAlignment:
    """Test the Document length invariant"""

    def test_misaligned_document_rejected(self):
        """Lines and states must have the same length"""
        with pytest.raises(ValueError, match="misaligned"):
            Document(lines=[Line(0, "a")], states=[])
