from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session
from .db import get_db
from .phrases import PhraseBook
from .store import CalendarStore
from .utils import parse_date_key
from .viewer import ViewerRegistry, viewers

def get_store(db: Session = Depends(get_db)) -> CalendarStore:
    return CalendarStore(db)

def get_phrase_book(db: Session = Depends(get_db)) -> PhraseBook:
    return PhraseBook(db)

def get_viewers() -> ViewerRegistry:
    return viewers

def valid_date(date: str) -> str:
    try:
        parse_date_key(date)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return date
