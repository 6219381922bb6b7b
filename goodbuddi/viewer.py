import logging
import threading
import uuid
from typing import Callable

from .chimes import play_cue
from .store import CalendarStore, NotFoundError
from .timer import CountdownTimer, Cue

log = logging.getLogger("goodbuddi.viewer")


class ViewerSession:
    def __init__(self, date_key: str, event_id: str, activity_ids: list[str], activity_names: list[str]):
        self.id = uuid.uuid4().hex
        self.date_key = date_key
        self.event_id = event_id
        self.activity_ids = activity_ids
        self.activity_names = activity_names
        self.index = 0
        self.timer = CountdownTimer()
        self.lock = threading.Lock()

    @property
    def activity_id(self) -> str:
        return self.activity_ids[self.index]

    @property
    def activity_name(self) -> str:
        return self.activity_names[self.index]

    @property
    def is_last(self) -> bool:
        return self.index >= len(self.activity_ids) - 1


class ViewerRegistry:
    """Open activity viewers, one per event being worked through.

    Handlers and the ticking job touch sessions from different threads, so
    every access goes through the lock.
    """

    def __init__(self, chime: Callable[[Cue, str], None] = play_cue):
        self.chime = chime
        self._sessions: dict[str, ViewerSession] = {}
        self._lock = threading.Lock()

    def open(self, store: CalendarStore, date_key: str, event_id: str) -> ViewerSession:
        event = store.get_event(date_key, event_id)
        if not event.activities:
            raise NotFoundError(f"event {event_id} has no activities")
        session = ViewerSession(
            date_key,
            event_id,
            [a.id for a in event.activities],
            [a.name for a in event.activities],
        )
        with self._lock:
            self._sessions[session.id] = session
        log.info("Viewer %s opened for %r on %s", session.id, event.title, date_key)
        return session

    def get(self, session_id: str) -> ViewerSession:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise NotFoundError(f"viewer {session_id} not found")
        return session

    def close(self, session_id: str):
        with self._lock:
            self._sessions.pop(session_id, None)

    def goto(self, session_id: str, index: int) -> ViewerSession:
        session = self.get(session_id)
        if not 0 <= index < len(session.activity_ids):
            raise ValueError(f"activity index {index} out of range")
        with session.lock, self._lock:
            session.index = index
        return session

    def drop_date(self, date_key: str) -> int:
        """Close every session opened on `date_key`, e.g. after the day is re-committed."""
        with self._lock:
            stale = [sid for sid, s in self._sessions.items() if s.date_key == date_key]
            for sid in stale:
                self._sessions.pop(sid)
        if stale:
            log.info("Dropped %d viewer(s) for re-committed %s", len(stale), date_key)
        return len(stale)

    def _step(self, session_id: str, mark: Callable[[str, str, str], object]) -> ViewerSession | None:
        session = self.get(session_id)
        # one step at a time per session: mark the current activity, then advance
        with session.lock:
            with self._lock:
                if self._sessions.get(session_id) is not session:
                    raise NotFoundError(f"viewer {session_id} not found")
            mark(session.date_key, session.event_id, session.activity_id)
            with self._lock:
                if session.is_last:
                    self._sessions.pop(session.id, None)
                    return None
                session.index += 1
                session.timer.clear()
            return session

    def complete(self, store: CalendarStore, session_id: str) -> ViewerSession | None:
        """Complete the current activity and move on; None once the last one is done."""
        return self._step(session_id, store.complete_activity)

    def skip(self, store: CalendarStore, session_id: str) -> ViewerSession | None:
        return self._step(session_id, store.skip_activity)

    def select_timer(self, session_id: str, minutes: int) -> ViewerSession:
        session = self.get(session_id)
        with self._lock:
            session.timer.select(minutes)
        return session

    def toggle_timer(self, session_id: str) -> ViewerSession:
        session = self.get(session_id)
        with self._lock:
            session.timer.toggle()
        return session

    def reset_timer(self, session_id: str) -> ViewerSession:
        session = self.get(session_id)
        with self._lock:
            session.timer.reset()
        return session

    def tick_all(self) -> int:
        fired = []
        with self._lock:
            running = [s for s in self._sessions.values() if s.timer.running]
            for s in running:
                for cue in s.timer.tick():
                    fired.append((cue, s.activity_name))

        for cue, label in fired:
            self.chime(cue, label)
        return len(running)

    def __len__(self):
        with self._lock:
            return len(self._sessions)


viewers = ViewerRegistry()
