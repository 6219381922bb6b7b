from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from ..deps import get_store, get_viewers, valid_date
from ..schemas import ScratchpadIn
from ..store import CalendarStore
from ..utils import date_key, format_week_range, local_today, monday_of_week, parse_date_key
from ..viewer import ViewerRegistry
from .days import day_to_dto

router = APIRouter(prefix="/api/week", tags=["week"])

@router.get("")
def week_overview(
    start: Optional[str] = Query(default=None),  # any YYYY-MM-DD inside the week
    store: CalendarStore = Depends(get_store),
):
    try:
        anchor = parse_date_key(start) if start else local_today()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    monday = monday_of_week(anchor)
    return {
        "weekStart": date_key(monday),
        "label": format_week_range(monday),
        "days": store.week(monday),
    }

@router.put("/{date}")
def save_week_note(
    payload: ScratchpadIn,
    date: str = Depends(valid_date),
    store: CalendarStore = Depends(get_store),
    viewers: ViewerRegistry = Depends(get_viewers),
):
    day = store.commit_day(date, payload.text)
    # fresh ids, so open viewers on this day point at nothing
    viewers.drop_date(date)
    return {"item": day_to_dto(date, day)}
