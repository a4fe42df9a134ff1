import logging
from unittest.mock import MagicMock, patch

import pytest

from fencekit.core import (
    WRAP_FENCES,
    copy_fence_content,
    describe_failure,
    remove_fence,
    select_fence_content,
    wrap_selection,
)
from fencekit.document import LineDocument
from fencekit.errors import FailureKind
from fencekit.models.fence import FenceFamily
from fencekit.models.matches import NotFound, Position, Selection


def test_copy_block_content(make_doc):
    doc = make_doc(["```", "line1", "line2", "```"], line=1)
    clipboard = MagicMock(return_value=True)
    result = copy_fence_content(doc, clipboard=clipboard)
    assert result.ok
    assert result.text == "line1\nline2"
    assert result.message == "Code content copied!"
    clipboard.assert_called_once_with("line1\nline2")
    assert doc.lines == ["```", "line1", "line2", "```"]


def test_copy_inline_content(make_doc):
    doc = make_doc(["see $x^2$ here"], line=0, column=6)
    clipboard = MagicMock(return_value=True)
    result = copy_fence_content(doc, clipboard=clipboard)
    assert result.text == "x^2"
    assert result.message == "LaTeX content copied!"


def test_copy_reports_clipboard_failure_after_extraction(make_doc):
    doc = make_doc([":::box-info", "hello", ":::end-box-info"], line=1)
    result = copy_fence_content(doc, clipboard=MagicMock(return_value=False))
    assert not result.ok
    assert result.failure is FailureKind.CLIPBOARD_FAILURE
    assert result.text == "hello"
    assert result.message == "Block Utility: Error copying Box Info content."


def test_copy_treats_clipboard_exception_as_failure(make_doc):
    doc = make_doc(["`a`"], line=0, column=1)
    result = copy_fence_content(doc, clipboard=MagicMock(side_effect=OSError("denied")))
    assert result.failure is FailureKind.CLIPBOARD_FAILURE


@patch("fencekit.system._which", return_value=False)
def test_copy_uses_system_clipboard_by_default(mock_which, make_doc):
    doc = make_doc(["`a`"], line=0, column=1)
    result = copy_fence_content(doc)
    assert result.failure is FailureKind.CLIPBOARD_FAILURE
    assert result.text == "a"


def test_copy_outside_fence(make_doc):
    clipboard = MagicMock()
    result = copy_fence_content(make_doc(["plain"], line=0), clipboard=clipboard)
    assert result.failure is FailureKind.NO_ENCLOSING_FENCE
    assert result.message == "Cursor is not inside a recognized Markdown fence."
    clipboard.assert_not_called()


def test_select_block(make_doc):
    doc = make_doc(["$$", "a", "b", "$$"], line=2)
    result = select_fence_content(doc)
    assert result.ok
    assert result.message == ""
    assert doc.list_selections() == [Selection(Position(1, 0), Position(2, 1))]


def test_select_inline(make_doc):
    doc = make_doc(["x ==mark== y"], line=0, column=5)
    result = select_fence_content(doc)
    assert result.match.family is FenceFamily.INLINE_HIGHLIGHT
    assert result.selection == Selection(Position(0, 4), Position(0, 8))


@pytest.mark.parametrize("fence", sorted(WRAP_FENCES))
def test_wrap_selection_fences(fence, make_doc):
    open_token, close_token, family = WRAP_FENCES[fence]
    doc = make_doc(["body"], line=0, column=0, head=(0, 4))
    result = wrap_selection(doc, fence)
    assert result.ok
    assert doc.lines == [open_token, "body", close_token]
    assert result.message == f"{family.label} fence inserted."
    assert result.selection == Selection(Position(1, 0), Position(1, 4))


def test_wrap_selection_rejects_unknown_fence(make_doc):
    with pytest.raises(ValueError):
        wrap_selection(make_doc(["x"]), "warning")


def test_wrap_then_remove_round_trip(make_doc):
    doc = make_doc(["keep", "wrap me", "keep"], line=1, column=0, head=(1, 7))
    assert wrap_selection(doc, "tag-info").ok
    result = remove_fence(doc)
    assert result.ok
    assert result.message == "Tag Info fences removed."
    assert doc.lines == ["keep", "wrap me", "keep"]
    assert doc.list_selections() == [Selection(Position(1, 0), Position(1, 7))]


def test_remove_peels_inline_spans_outward(make_doc):
    doc = make_doc(["**see `code` now**"], line=0, column=8)
    assert remove_fence(doc).message == "Bold fences removed."
    assert doc.lines == ["see `code` now"]
    result = remove_fence(doc)
    assert result.message == "Inline Code fences removed."
    assert doc.lines == ["see code now"]


def test_remove_reports_unterminated_fence(make_doc):
    doc = make_doc(["```js", "x"], line=1)
    result = remove_fence(doc)
    assert result.failure is FailureKind.UNTERMINATED_FENCE
    assert result.message == "Could not find a closing fence (```) for this Code."
    assert doc.lines == ["```js", "x"]


def test_remove_reports_host_failure(caplog):
    doc = LineDocument(["```", "x", "```"], cursor=Position(1, 0))
    doc.replace_range = MagicMock(side_effect=RuntimeError("read-only"))
    with caplog.at_level(logging.ERROR):
        result = remove_fence(doc, log=True)
    assert result.failure is FailureKind.MUTATION_FAILURE
    assert result.message == "Block Utility: Error editing Code fences."
    assert any("mutation_failure" in rec.getMessage() for rec in caplog.records)


@pytest.mark.parametrize(
    "failure, expected",
    [
        (NotFound(FailureKind.CURSOR_UNAVAILABLE), "Could not get cursor position."),
        (
            NotFound(FailureKind.CURSOR_OUTSIDE_CONTENT, 0, 2, FenceFamily.BOX_INFO, ":::end-box-info"),
            "Cursor is not inside this Box Info fence's content area.",
        ),
        (
            NotFound(FailureKind.UNTERMINATED_FENCE, 0, -1, FenceFamily.GENERIC, ":::"),
            "Could not find a closing fence (:::) for this Markdown fence.",
        ),
        (FailureKind.EXTRACTION_FAILURE, "Block Utility: Error extracting content from Fence."),
    ],
)
def test_describe_failure(failure, expected):
    assert describe_failure(failure) == expected
