import pytest

from fencekit.models.fence import FenceFamily
from fencekit.resolve.catalog import detect_fence_start


@pytest.mark.parametrize(
    "line, family, start_marker, parity",
    [
        ("```", FenceFamily.CODE, "```", "backtick"),
        ("```python title=x", FenceFamily.CODE, "```", "backtick"),
        ("`````", FenceFamily.CODE, "`````", "backtick"),
        ("~~~~", FenceFamily.CODE, "~~~~", "tilde"),
        ("  $$  ", FenceFamily.LATEX, "$$", "dollar"),
        (":::box-info", FenceFamily.BOX_INFO, ":::box-info", None),
        (":::Tag-Info extra", FenceFamily.TAG_INFO, ":::tag-info", None),
        (":::LATEX", FenceFamily.LATEX, ":::latex", None),
        (":::note", FenceFamily.GENERIC, ":::note", None),
    ],
)
def test_detects_openers(line, family, start_marker, parity):
    detection = detect_fence_start(line)
    assert detection is not None
    assert detection.family is family
    assert detection.start_marker == start_marker
    assert detection.parity_key == parity


@pytest.mark.parametrize("line", ["", "   ", "``", "plain text", ":::", ":::end-note", ":::END-box-info", "$$x$$"])
def test_rejects_non_openers(line):
    assert detect_fence_start(line) is None


def test_indent_is_captured():
    detection = detect_fence_start("    ```js")
    assert detection.indent == "    "


def test_code_closer_requires_exact_run_length():
    closes = detect_fence_start("````").closes
    assert closes("````")
    assert closes("````   ")
    assert not closes("```")
    assert not closes("`````")
    assert not closes("```` python")


def test_tilde_fence_is_not_closed_by_backticks():
    closes = detect_fence_start("~~~").closes
    assert closes("~~~")
    assert not closes("```")


def test_admonition_closers_are_exact_and_case_insensitive():
    closes = detect_fence_start(":::box-info").closes
    assert closes(":::END-BOX-INFO")
    assert not closes(":::end-tag-info")
    assert not closes(":::")


def test_generic_fence_closes_on_bare_or_matching_end_label():
    closes = detect_fence_start(":::Warning").closes
    assert closes(":::")
    assert closes(":::end-warning")
    assert not closes(":::end-note")
    assert not closes("text")
