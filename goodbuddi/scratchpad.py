import re

from .entities import Activity, Event

# unit alternatives are listed longest first so "hours" is not cut to "hour"
TIME_RE = re.compile(r"@\s*(\d{1,2}(?::\d{2})?\s*(?:AM|PM)?)", re.I)
DURATION_RE = re.compile(
    r"\*\s*(\d+(?:\.\d+)?)\s*(hours|hour|hrs|hr|minutes|minute|mins|min)?", re.I
)
MAYBE_RE = re.compile(r"^maybe:\s*", re.I)

INDENT_RE = re.compile(r"^(\t*)")
DOT_BULLET_RE = re.compile(r"^\t*•\s*")
DASH_BULLET_RE = re.compile(r"^\t*-\s*")

DEFAULT_UNIT = "hours"


def _line_fields(content: str):
    time_m = TIME_RE.search(content)
    duration_m = DURATION_RE.search(content)
    is_maybe = bool(MAYBE_RE.search(content))

    title = TIME_RE.sub("", content, count=1)
    title = DURATION_RE.sub("", title, count=1)
    title = MAYBE_RE.sub("", title, count=1)
    title = title.strip()

    time = time_m.group(1) if time_m else None
    duration = None
    if duration_m:
        duration = f"{duration_m.group(1)} {duration_m.group(2) or DEFAULT_UNIT}"
    return title, time, duration, is_maybe


def parse_scratchpad(text: str) -> list[Event]:
    """
    Turn scratchpad text into events, one forward pass:
    - "• Event"            (no tabs)  -> Event
    - "\\t• Activity"       (1 tab)    -> Activity of the last event
    - "\\t\\t• detail"       (2 tabs)   -> detail line of the last activity
    - "@ 2:30 PM"          time, kept as typed
    - "*1.5 hours" / "*30" duration, unit defaults to hours
    - "maybe: ..."         tentative event

    "- " works as a bullet too. Lines that fit nowhere are dropped quietly.
    """
    events: list[Event] = []
    current_event: Event | None = None
    current_activity: Activity | None = None

    for line in (text or "").split("\n"):
        if not line.strip():
            continue

        indent = len(INDENT_RE.match(line).group(1))
        content = DASH_BULLET_RE.sub("", DOT_BULLET_RE.sub("", line, count=1), count=1).strip()
        if not content:
            continue

        stripped = line.strip()
        has_bullet = stripped.startswith("•") or stripped.startswith("-")
        if not has_bullet:
            continue

        title, time, duration, is_maybe = _line_fields(content)

        if indent == 0:
            current_event = Event(title=title, time=time, duration=duration, is_maybe=is_maybe)
            events.append(current_event)
            current_activity = None
        elif indent == 1 and current_event is not None:
            current_activity = Activity(name=title)
            current_event.activities.append(current_activity)
        elif indent == 2 and current_activity is not None:
            current_activity.details.append(title)

    return events
