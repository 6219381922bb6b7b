"""Tests for the outline-aware key handling."""

import pytest

from goodbuddi.editor import BufferState, StructuredEditor, handle_editor_keydown
from goodbuddi.scratchpad import parse_scratchpad


def press(key, text, start, end=None, shift=False):
    return handle_editor_keydown(key, BufferState(text=text, selection_start=start, selection_end=end), shift=shift)


@pytest.mark.parametrize("key", ["a", "Backspace", "ArrowUp", " ", "•"])
def test_other_keys_pass_through(key):
    assert press(key, "• foo", 5) is None


# ---- "-" ----

def test_dash_on_blank_line_starts_a_bullet():
    r = press("-", "", 0)
    assert r.text == "• "
    assert r.caret_start == r.caret_end == 2


def test_dash_after_tabs_keeps_indent():
    r = press("-", "\t", 1)
    assert r.text == "\t• "
    assert r.caret_start == 3


def test_dash_with_caret_before_tabs_inserts_after_them():
    r = press("-", "\t\t", 0)
    assert r.text == "\t\t• "
    assert r.caret_start == 4


def test_dash_at_start_of_text_promotes_line():
    r = press("-", "foo", 0)
    assert r.text == "• foo"
    assert r.caret_start == 2


def test_dash_on_following_line():
    r = press("-", "• A\n", 4)
    assert r.text == "• A\n• "
    assert r.caret_start == 6


def test_dash_mid_content_is_literal():
    r = press("-", "ab", 1)
    assert r.text == "a-b"
    assert r.caret_start == 2


def test_dash_replaces_selection_mid_content():
    r = press("-", "abcd", 1, 3)
    assert r.text == "a-d"
    assert r.caret_start == r.caret_end == 2


# ---- Tab ----

def test_tab_indents_bulleted_line():
    r = press("Tab", "• foo", 5)
    assert r.text == "\t• foo"
    assert r.caret_start == 6


def test_tab_is_capped_at_two_levels():
    r = press("Tab", "\t\t• foo", 7)
    assert r is not None
    assert r.text == "\t\t• foo"
    assert r.caret_start == 7


def test_tab_without_bullet_is_noop():
    r = press("Tab", "foo", 3)
    assert r.text == "foo"
    assert r.caret_start == 3


def test_tab_only_touches_current_line():
    r = press("Tab", "• A\n• B\n• C", 7)
    assert r.text == "• A\n\t• B\n• C"
    assert r.caret_start == 8


def test_shift_tab_outdents():
    r = press("Tab", "\t\t• foo", 6, shift=True)
    assert r.text == "\t• foo"
    assert r.caret_start == 5


def test_shift_tab_works_without_bullet():
    r = press("Tab", "\tplain", 6, shift=True)
    assert r.text == "plain"
    assert r.caret_start == 5


def test_shift_tab_caret_stays_on_line():
    r = press("Tab", "• A\n\tx", 4, shift=True)
    assert r.text == "• A\nx"
    assert r.caret_start == 4


def test_shift_tab_at_top_level_is_noop():
    r = press("Tab", "• foo", 3, shift=True)
    assert r.text == "• foo"
    assert r.caret_start == 3


# ---- Enter ----

def test_enter_on_empty_nested_bullet_outdents_in_place():
    r = press("Enter", "\t• ", 3)
    assert r.text == "• "
    assert r.caret_start == 2


def test_enter_on_empty_top_level_bullet_clears_it():
    r = press("Enter", "• A\n• ", 6)
    assert r.text == "• A\n"
    assert r.caret_start == 4


def test_enter_continues_list():
    r = press("Enter", "• Buy milk", 10)
    assert r.text == "• Buy milk\n• "
    assert r.caret_start == 13


def test_enter_continues_list_at_same_depth():
    r = press("Enter", "• E\n\t• Act", 10)
    assert r.text == "• E\n\t• Act\n\t• "
    assert r.caret_start == 14


def test_enter_splits_at_caret():
    r = press("Enter", "• Buy milk", 6)
    assert r.text == "• Buy \n• milk"
    assert r.caret_start == 9


def test_enter_on_plain_line_inserts_newline():
    r = press("Enter", "hello", 5)
    assert r.text == "hello\n"
    assert r.caret_start == 6


def test_out_of_range_selection_is_clamped():
    r = press("Enter", "abc", 99)
    assert r.text == "abc\n"
    assert r.caret_start == 4


# ---- editor session ----

def test_editor_builds_an_outline_the_parser_reads():
    ed = StructuredEditor()
    ed.type("-Morning")
    ed.press("Enter")
    ed.press("Tab")
    ed.type("Stretch")
    ed.press("Enter")
    ed.press("Tab")
    ed.type("yoga")
    ed.press("Enter")
    ed.press("Enter")
    ed.press("Enter")
    ed.press("Enter")

    assert ed.text == "• Morning\n\t• Stretch\n\t\t• yoga\n"
    assert ed.selection_start == ed.selection_end == len(ed.text)

    [event] = parse_scratchpad(ed.text)
    assert event.title == "Morning"
    assert event.activities[0].name == "Stretch"
    assert event.activities[0].details == ["yoga"]


def test_editor_ignores_unhandled_keys():
    ed = StructuredEditor("• foo")
    assert ed.press("x") is False
    assert ed.text == "• foo"


def test_editor_hyphen_inside_words():
    ed = StructuredEditor()
    ed.type("-Follow-up")
    assert ed.text == "• Follow-up"
