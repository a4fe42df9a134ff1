from fencekit.document import LineDocument
from fencekit.resolve.state import compute_cursor_state


def test_state_toggles_per_family():
    doc = LineDocument(["```", "x", "~~~", "$$"])
    state = compute_cursor_state(doc, 3)
    assert state.backtick and state.tilde and state.dollar


def test_state_is_parity_not_depth():
    doc = LineDocument(["```", "a", "````", "b", "```"])
    assert compute_cursor_state(doc, 1).backtick is True
    assert compute_cursor_state(doc, 3).backtick is False
    assert compute_cursor_state(doc, 4).backtick is True


def test_state_includes_target_line():
    doc = LineDocument(["```", "a", "```"])
    assert compute_cursor_state(doc, 0).backtick is True
    assert compute_cursor_state(doc, 2).backtick is False


def test_only_bare_double_dollar_toggles_math():
    doc = LineDocument(["$$x$$", "$$ ", "y"])
    state = compute_cursor_state(doc, 2)
    assert state.dollar is True


def test_is_open_defaults_true_for_untracked_families():
    state = compute_cursor_state(LineDocument(["text"]), 0)
    assert state.is_open(None)
    assert not state.is_open("backtick")
