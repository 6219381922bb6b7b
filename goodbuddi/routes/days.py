from fastapi import APIRouter, Depends, HTTPException
from ..deps import get_store, get_viewers, valid_date
from ..entities import Event
from ..models import Day
from ..schemas import ReflectionIn, ScratchpadIn
from ..scratchpad import parse_scratchpad
from ..store import CalendarStore, NotFoundError
from ..utils import day_name, format_date, parse_date_key, to_iso
from ..viewer import ViewerRegistry

router = APIRouter(prefix="/api", tags=["days"])

def event_to_dto(e: Event):
    return {
        "id": e.id,
        "title": e.title,
        "time": e.time,
        "duration": e.duration,
        "isMaybe": e.is_maybe,
        "kind": e.kind,
        "completed": e.completed,
        "progress": e.progress,
        "activities": [
            {
                "id": a.id,
                "name": a.name,
                "details": a.details,
                "completed": a.completed,
                "skipped": a.skipped,
            }
            for a in e.activities
        ],
    }

def day_to_dto(key: str, day: Day | None):
    d = parse_date_key(key)
    return {
        "date": key,
        "dayName": day_name(d),
        "label": format_date(d),
        "scratchpadText": day.scratchpad_text if day else "",
        "events": [event_to_dto(e) for e in day.get_events()] if day else [],
        "reflection": day.reflection if day else None,
        "updatedAt": to_iso(day.updated_at) if day else None,
    }

@router.post("/scratchpad/parse")
def parse_text(payload: ScratchpadIn):
    return {"events": [event_to_dto(e) for e in parse_scratchpad(payload.text)]}

@router.get("/days/{date}")
def get_day(date: str = Depends(valid_date), store: CalendarStore = Depends(get_store)):
    return {"item": day_to_dto(date, store.get_day(date))}

@router.put("/days/{date}")
def commit_day(
    payload: ScratchpadIn,
    date: str = Depends(valid_date),
    store: CalendarStore = Depends(get_store),
    viewers: ViewerRegistry = Depends(get_viewers),
):
    day = store.commit_day(date, payload.text)
    # fresh ids, so open viewers on this day point at nothing
    viewers.drop_date(date)
    return {"item": day_to_dto(date, day)}

@router.post("/days/{date}/events/{event_id}/activities/{activity_id}/complete")
def complete_activity(event_id: str, activity_id: str, date: str = Depends(valid_date), store: CalendarStore = Depends(get_store)):
    try:
        event = store.complete_activity(date, event_id, activity_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"item": event_to_dto(event)}

@router.post("/days/{date}/events/{event_id}/activities/{activity_id}/skip")
def skip_activity(event_id: str, activity_id: str, date: str = Depends(valid_date), store: CalendarStore = Depends(get_store)):
    try:
        event = store.skip_activity(date, event_id, activity_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"item": event_to_dto(event)}

@router.get("/days/{date}/summary")
def end_of_day(date: str = Depends(valid_date), store: CalendarStore = Depends(get_store)):
    day = store.get_day(date)
    return {
        "date": date,
        "completed": store.completed_items(date),
        "reflection": day.reflection if day else None,
    }

@router.put("/days/{date}/reflection")
def save_reflection(payload: ReflectionIn, date: str = Depends(valid_date), store: CalendarStore = Depends(get_store)):
    day = store.save_reflection(date, payload.text)
    return {"date": date, "reflection": day.reflection}
