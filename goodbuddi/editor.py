"""Outline-aware key handling for a plain multi-line text buffer.

Three keys are intercepted: "-" turns the start of a line into a bullet,
Tab / Shift+Tab indent and outdent bulleted lines (two levels at most) and
Enter continues or closes a bulleted list. Anything else is left to the
text box.
"""
import re

from pydantic import BaseModel

BULLET = "• "
MAX_INDENT = 2

KEY_BULLET = "-"
KEY_TAB = "Tab"
KEY_ENTER = "Enter"
HANDLED_KEYS = (KEY_BULLET, KEY_TAB, KEY_ENTER)

TABS_ONLY_RE = re.compile(r"\t*")
BULLET_LINE_RE = re.compile(r"(\t*)• (.*)")


class BufferState(BaseModel):
    text: str = ""
    selection_start: int = 0
    selection_end: int | None = None


class EditResult(BaseModel):
    text: str
    caret_start: int
    caret_end: int


class _Line:
    def __init__(self, text: str, start: int, end: int):
        self.start = max(0, min(start, len(text)))
        self.end = max(self.start, min(end, len(text)))
        self.line_start = text.rfind("\n", 0, self.start) + 1
        line_end = text.find("\n", self.end)
        self.line_end = len(text) if line_end == -1 else line_end
        self.line = text[self.line_start:self.line_end]
        self.indent = len(self.line) - len(self.line.lstrip("\t"))


def _caret(text: str, pos: int) -> EditResult:
    return EditResult(text=text, caret_start=pos, caret_end=pos)


def _on_bullet(text: str, cur: _Line) -> EditResult:
    before_caret = text[cur.line_start:cur.start]
    if TABS_ONLY_RE.fullmatch(before_caret) or not cur.line.strip():
        pos = cur.line_start + cur.indent
        new_text = text[:pos] + BULLET + text[max(pos, cur.end):]
        return _caret(new_text, pos + len(BULLET))

    new_text = text[:cur.start] + "-" + text[cur.end:]
    return _caret(new_text, cur.start + 1)


def _on_tab(text: str, cur: _Line, shift: bool) -> EditResult:
    unchanged = EditResult(text=text, caret_start=cur.start, caret_end=cur.end)

    if shift:
        if cur.indent == 0:
            return unchanged
        new_line = cur.line[1:]
        caret = max(cur.line_start, cur.start - 1)
    else:
        if not BULLET_LINE_RE.match(cur.line) or cur.indent >= MAX_INDENT:
            return unchanged
        new_line = "\t" + cur.line
        caret = cur.start + 1

    new_text = text[:cur.line_start] + new_line + text[cur.line_end:]
    return _caret(new_text, caret)


def _on_enter(text: str, cur: _Line) -> EditResult:
    m = BULLET_LINE_RE.match(cur.line)
    if not m:
        new_text = text[:cur.start] + "\n" + text[cur.end:]
        return _caret(new_text, cur.start + 1)

    tabs, content = m.group(1), m.group(2)
    if content.strip():
        continuation = "\n" + tabs + BULLET
        new_text = text[:cur.start] + continuation + text[cur.end:]
        return _caret(new_text, cur.start + len(continuation))

    head, tail = text[:cur.line_start], text[cur.line_end:]
    if cur.indent > 0:
        # empty nested bullet: step out one level on the same line
        seed = "\t" * (cur.indent - 1) + BULLET
        return _caret(head + seed + tail, cur.line_start + len(seed))
    return _caret(head + tail, cur.line_start)


def handle_editor_keydown(key: str, state: BufferState, shift: bool = False) -> EditResult | None:
    """Return the rewritten buffer and caret for `key`, or None to let it through.

    A returned result always means the default key behaviour is suppressed,
    even when the text comes back unchanged (Tab past the nesting limit).
    """
    if key not in HANDLED_KEYS:
        return None

    text = state.text or ""
    end = state.selection_start if state.selection_end is None else state.selection_end
    cur = _Line(text, state.selection_start, end)

    if key == KEY_BULLET:
        return _on_bullet(text, cur)
    if key == KEY_TAB:
        return _on_tab(text, cur, shift)
    return _on_enter(text, cur)


class StructuredEditor:
    """A text buffer plus selection that applies intercepted keys in place.

    Each handled key is applied in two steps: the buffer is replaced first,
    then the caret is moved against the new buffer.
    """

    def __init__(self, text: str = "", caret: int | None = None):
        self.text = text
        pos = len(text) if caret is None else caret
        self.selection_start = pos
        self.selection_end = pos

    def select(self, start: int, end: int | None = None):
        self.selection_start = start
        self.selection_end = start if end is None else end

    def press(self, key: str, shift: bool = False) -> bool:
        state = BufferState(
            text=self.text,
            selection_start=self.selection_start,
            selection_end=self.selection_end,
        )
        result = handle_editor_keydown(key, state, shift=shift)
        if result is None:
            return False
        self._commit_text(result.text)
        self._set_caret(result.caret_start, result.caret_end)
        return True

    def type(self, chars: str):
        """Type plain characters at the caret, routing handled keys through `press`."""
        for ch in chars:
            if ch == "\t":
                self.press(KEY_TAB)
            elif ch == "\n":
                self.press(KEY_ENTER)
            elif not self.press(ch):
                self._commit_text(self.text[:self.selection_start] + ch + self.text[self.selection_end:])
                self._set_caret(self.selection_start + 1)

    def _commit_text(self, text: str):
        self.text = text

    def _set_caret(self, start: int, end: int | None = None):
        self.selection_start = max(0, min(start, len(self.text)))
        self.selection_end = self.selection_start if end is None else max(self.selection_start, min(end, len(self.text)))
