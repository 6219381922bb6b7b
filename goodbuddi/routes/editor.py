from fastapi import APIRouter
from ..editor import BufferState, handle_editor_keydown
from ..schemas import KeydownIn, KeydownOut

router = APIRouter(prefix="/api/editor", tags=["editor"])

@router.post("/keydown", response_model=KeydownOut)
def keydown(payload: KeydownIn):
    state = BufferState(
        text=payload.text,
        selection_start=payload.selectionStart,
        selection_end=payload.selectionEnd,
    )
    result = handle_editor_keydown(payload.key, state, shift=payload.shiftKey)
    if result is None:
        return KeydownOut(handled=False)
    return KeydownOut(
        handled=True,
        newText=result.text,
        newCaretStart=result.caret_start,
        newCaretEnd=result.caret_end,
    )
