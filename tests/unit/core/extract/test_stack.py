"""Unit tests for core/extract/stack.py"""

from mdblocks.core.extract.stack import HeadingPathStack


def _push_all(stack, *headings):
    for depth, title in headings:
        stack.push(depth, title)


def test_empty_stack():
    stack = HeadingPathStack()
    assert len(stack) == 0
    assert not stack
    assert stack.current_top() is None
    assert stack.current_path() == []


def test_push_nested():
    """Deeper headings extend the path."""
    stack = HeadingPathStack()
    _push_all(stack, (1, "A"), (2, "B"), (3, "C"))
    assert stack.current_top().title == "C"
    assert stack.current_top().depth == 3
    assert stack.current_path() == ["A", "B"]


def test_sibling_replaces_top():
    """A heading at the same depth closes the previous sibling."""
    stack = HeadingPathStack()
    _push_all(stack, (1, "A"), (2, "B"), (2, "B2"))
    assert stack.current_path() == ["A"]
    assert stack.current_top().title == "B2"


def test_shallower_heading_pops_deeper_entries():
    """A shallower heading closes every deeper open section."""
    stack = HeadingPathStack()
    _push_all(stack, (1, "A"), (2, "B"), (4, "D"), (2, "E"))
    assert [stack.current_top().title] == ["E"]
    assert stack.current_path() == ["A"]


def test_skipped_levels_not_synthesized():
    """A level-3 heading directly under a level-1 keeps its depth and a one-entry path."""
    stack = HeadingPathStack()
    _push_all(stack, (1, "Root"), (3, "Deep"))
    assert stack.current_path() == ["Root"]
    assert stack.current_top().depth == 3
    assert len(stack) == 2


def test_push_returns_entry_with_raw_title():
    stack = HeadingPathStack()
    entry = stack.push(2, "Links", "[Links](https://x.io)")
    assert entry.raw_title == "[Links](https://x.io)"
    assert stack.current_top() is entry


def test_clear():
    stack = HeadingPathStack()
    _push_all(stack, (1, "A"), (2, "B"))
    stack.clear()
    assert stack.current_top() is None
