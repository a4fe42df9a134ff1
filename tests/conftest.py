# conftest.py - pytest configuration
import pytest

from fencekit.document import LineDocument
from fencekit.models.matches import Position, Selection


@pytest.fixture
def make_doc():
    """Build a LineDocument with a caret, or with a selection when `head` is given."""

    def _make(lines, line=0, column=0, head=None):
        cursor = Position(line, column)
        if head is None:
            return LineDocument(lines, cursor=cursor)
        return LineDocument(lines, selections=[Selection(cursor, Position(*head))])

    return _make
