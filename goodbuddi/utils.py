import re
from datetime import date, datetime, timedelta, timezone

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

DATE_KEY_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def to_iso(dt):
    if not dt:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00","Z")


def date_key(d: date) -> str:
    # YYYY-MM-DD, zero padded; doubles as the sort key of stored days
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date_key(key: str) -> date:
    if not isinstance(key, str) or not DATE_KEY_RE.fullmatch(key):
        raise ValueError(f"invalid date key: {key!r} (expected YYYY-MM-DD)")
    return date.fromisoformat(key)


def format_date(d: date) -> str:
    return f"{MONTH_NAMES[d.month - 1]} {d.day}, {d.year}"


def day_name(d: date) -> str:
    return DAY_NAMES[d.weekday()]


def format_clock(seconds: int) -> str:
    seconds = max(0, int(seconds))
    return f"{seconds // 60}:{seconds % 60:02d}"


def monday_of_week(d: date) -> date:
    return d - timedelta(days=d.weekday())


def week_days(start: date) -> list[date]:
    monday = monday_of_week(start)
    return [monday + timedelta(days=i) for i in range(7)]


def format_week_range(start: date) -> str:
    monday = monday_of_week(start)
    sunday = monday + timedelta(days=6)
    return f"{MONTH_NAMES[monday.month - 1][:3]} {monday.day} - {MONTH_NAMES[sunday.month - 1][:3]} {sunday.day}"


def local_today() -> date:
    return datetime.now().date()
