import logging
from datetime import date

from sqlalchemy.orm import Session

from .entities import Event
from .models import Day
from .scratchpad import parse_scratchpad
from .utils import date_key, day_name, local_today, parse_date_key, week_days

log = logging.getLogger("goodbuddi.store")

WEEK_PREVIEW_TITLES = 3


class NotFoundError(LookupError):
    pass


class CalendarStore:
    """Per-date store of scratchpad text and its parsed events.

    Every commit re-parses the text and replaces the stored events wholesale,
    so activity progress recorded against an earlier parse is dropped.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_day(self, key: str) -> Day | None:
        parse_date_key(key)
        return self.db.get(Day, key)

    def _require_day(self, key: str) -> Day:
        day = self.get_day(key)
        if day is None:
            raise NotFoundError(f"no plan stored for {key}")
        return day

    def _get_or_create(self, key: str) -> Day:
        day = self.get_day(key)
        if day is None:
            day = Day(date=key, scratchpad_text="", events=[])
            self.db.add(day)
        return day

    def commit_day(self, key: str, text: str) -> Day:
        day = self._get_or_create(key)
        events = parse_scratchpad(text)
        day.scratchpad_text = text or ""
        day.set_events(events)
        self.db.commit()
        self.db.refresh(day)
        log.info("Committed %s: %d events", key, len(events))
        return day

    def get_event(self, key: str, event_id: str) -> Event:
        for event in self._require_day(key).get_events():
            if event.id == event_id:
                return event
        raise NotFoundError(f"event {event_id} not found on {key}")

    def _update_activity(self, key: str, event_id: str, activity_id: str, **changes) -> Event:
        day = self._require_day(key)
        events = day.get_events()
        event = next((e for e in events if e.id == event_id), None)
        if event is None:
            raise NotFoundError(f"event {event_id} not found on {key}")
        activity = event.find_activity(activity_id)
        if activity is None:
            raise NotFoundError(f"activity {activity_id} not found in event {event_id}")

        for field, value in changes.items():
            setattr(activity, field, value)
        day.set_events(events)
        self.db.commit()
        return event

    def complete_activity(self, key: str, event_id: str, activity_id: str) -> Event:
        event = self._update_activity(key, event_id, activity_id, completed=True)
        if event.completed:
            log.info("Event %r on %s completed", event.title, key)
        return event

    def skip_activity(self, key: str, event_id: str, activity_id: str) -> Event:
        return self._update_activity(key, event_id, activity_id, skipped=True)

    def save_reflection(self, key: str, text: str) -> Day:
        day = self._get_or_create(key)
        day.reflection = text
        self.db.commit()
        self.db.refresh(day)
        return day

    def completed_items(self, key: str) -> list[str]:
        day = self.get_day(key)
        if day is None:
            return []
        return [
            f"✓ {a.name}"
            for e in day.get_events()
            for a in e.activities
            if a.completed
        ]

    def week(self, start: date, today: date | None = None) -> list[dict]:
        today = today or local_today()
        days = week_days(start)
        keys = [date_key(d) for d in days]
        stored = {
            d.date: d
            for d in self.db.query(Day).filter(Day.date.between(keys[0], keys[-1])).all()
        }

        out = []
        for d, key in zip(days, keys):
            rec = stored.get(key)
            events = rec.get_events() if rec else []
            out.append({
                "date": key,
                "dayName": day_name(d),
                "dayNumber": d.day,
                "isToday": d == today,
                "preview": [e.title for e in events][:WEEK_PREVIEW_TITLES],
                "hasNote": bool(rec and rec.scratchpad_text),
            })
        return out
