from fastapi import APIRouter, Depends, HTTPException
from ..deps import get_store, get_viewers
from ..schemas import TimerSelectIn, ViewerOpenIn
from ..store import CalendarStore, NotFoundError
from ..timer import PRESETS
from ..utils import parse_date_key
from ..viewer import ViewerRegistry, ViewerSession
from .days import event_to_dto

router = APIRouter(prefix="/api", tags=["viewer"])

def session_to_dto(store: CalendarStore, s: ViewerSession):
    event = store.get_event(s.date_key, s.event_id)
    current = event.find_activity(s.activity_id)
    return {
        "id": s.id,
        "date": s.date_key,
        "index": s.index,
        "event": event_to_dto(event),
        "current": {
            "id": s.activity_id,
            "name": current.name if current else s.activity_name,
            "details": " • ".join(current.details) if current else "",
        },
        "allDone": event.completed,
        "timer": s.timer.to_dict(),
        "showCompletion": s.timer.completed_shown,
    }

def _closed(session_id: str):
    return {"id": session_id, "closed": True}

@router.get("/timer/presets")
def timer_presets():
    return {"items": [{"value": m, "label": label} for m, label in PRESETS]}

@router.post("/viewer")
def open_viewer(payload: ViewerOpenIn, store: CalendarStore = Depends(get_store), viewers: ViewerRegistry = Depends(get_viewers)):
    try:
        parse_date_key(payload.date)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    try:
        s = viewers.open(store, payload.date, payload.eventId)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"item": session_to_dto(store, s)}

@router.get("/viewer/{session_id}")
def get_viewer(session_id: str, store: CalendarStore = Depends(get_store), viewers: ViewerRegistry = Depends(get_viewers)):
    try:
        s = viewers.get(session_id)
        return {"item": session_to_dto(store, s)}
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/viewer/{session_id}")
def close_viewer(session_id: str, viewers: ViewerRegistry = Depends(get_viewers)):
    viewers.close(session_id)
    return {"ok": True}

@router.post("/viewer/{session_id}/complete")
def complete_current(session_id: str, store: CalendarStore = Depends(get_store), viewers: ViewerRegistry = Depends(get_viewers)):
    try:
        s = viewers.complete(store, session_id)
        if s is None:
            return {"item": _closed(session_id)}
        return {"item": session_to_dto(store, s)}
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.post("/viewer/{session_id}/skip")
def skip_current(session_id: str, store: CalendarStore = Depends(get_store), viewers: ViewerRegistry = Depends(get_viewers)):
    try:
        s = viewers.skip(store, session_id)
        if s is None:
            return {"item": _closed(session_id)}
        return {"item": session_to_dto(store, s)}
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.post("/viewer/{session_id}/goto/{index}")
def goto_activity(index: int, session_id: str, store: CalendarStore = Depends(get_store), viewers: ViewerRegistry = Depends(get_viewers)):
    try:
        s = viewers.goto(session_id, index)
        return {"item": session_to_dto(store, s)}
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

@router.post("/viewer/{session_id}/timer/select")
def select_timer(session_id: str, payload: TimerSelectIn, store: CalendarStore = Depends(get_store), viewers: ViewerRegistry = Depends(get_viewers)):
    try:
        s = viewers.select_timer(session_id, payload.minutes)
        return {"item": session_to_dto(store, s)}
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.post("/viewer/{session_id}/timer/toggle")
def toggle_timer(session_id: str, store: CalendarStore = Depends(get_store), viewers: ViewerRegistry = Depends(get_viewers)):
    try:
        s = viewers.toggle_timer(session_id)
        return {"item": session_to_dto(store, s)}
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.post("/viewer/{session_id}/timer/reset")
def reset_timer(session_id: str, store: CalendarStore = Depends(get_store), viewers: ViewerRegistry = Depends(get_viewers)):
    try:
        s = viewers.reset_timer(session_id)
        return {"item": session_to_dto(store, s)}
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
