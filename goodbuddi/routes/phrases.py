from fastapi import APIRouter, Depends, HTTPException
from ..deps import get_phrase_book
from ..phrases import PhraseBook
from ..schemas import PhraseSelectionIn, PhrasesIn

router = APIRouter(prefix="/api/phrases", tags=["phrases"])

def _phrases_dto(book: PhraseBook):
    return {"items": book.list_phrases(), "selected": book.selected_index()}

@router.get("")
def list_phrases(book: PhraseBook = Depends(get_phrase_book)):
    return _phrases_dto(book)

@router.put("")
def replace_phrases(payload: PhrasesIn, book: PhraseBook = Depends(get_phrase_book)):
    book.replace_phrases(payload.phrases)
    return _phrases_dto(book)

@router.put("/selection")
def select_phrase(payload: PhraseSelectionIn, book: PhraseBook = Depends(get_phrase_book)):
    try:
        book.select(payload.index)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _phrases_dto(book)

@router.get("/daily")
def daily_phrase(book: PhraseBook = Depends(get_phrase_book)):
    return {"phrase": book.daily_phrase()}
