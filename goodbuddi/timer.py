import enum

from .utils import format_clock

MILESTONES = (50, 75, 90)

# minutes -> label
PRESETS = [
    (5, "5 min"),
    (10, "10 min"),
    (15, "15 min"),
    (30, "30 min"),
    (45, "45 min"),
    (60, "1 hour"),
    (90, "1.5 hours"),
    (120, "2 hours"),
]


class Cue(str, enum.Enum):
    MILESTONE = "milestone"
    COMPLETE = "complete"


class CountdownTimer:
    """Countdown in whole seconds, advanced one second per `tick()`.

    Crossing 50, 75 and 90 percent elapsed each yields one milestone cue,
    reaching zero stops the timer and yields a completion cue.
    """

    def __init__(self):
        self.duration = 0
        self.remaining = 0
        self.running = False
        self.milestones = {m: False for m in MILESTONES}
        self.completed_shown = False

    def select(self, minutes: int) -> bool:
        if minutes <= 0:
            return False
        self.duration = self.remaining = int(minutes) * 60
        self.running = False
        self.milestones = {m: False for m in MILESTONES}
        self.completed_shown = False
        return True

    def toggle(self) -> bool:
        if self.running:
            self.running = False
        elif self.remaining > 0:
            self.running = True
        return self.running

    def reset(self):
        self.duration = 0
        self.remaining = 0
        self.running = False

    def clear(self):
        """Stop and zero the countdown, used when moving to another activity."""
        self.reset()
        self.milestones = {m: False for m in MILESTONES}
        self.completed_shown = False

    def tick(self) -> list[Cue]:
        if not self.running or self.remaining <= 0:
            return []

        self.remaining -= 1
        cues = []
        percent = self.progress
        for m in MILESTONES:
            if percent >= m and not self.milestones[m]:
                self.milestones[m] = True
                cues.append(Cue.MILESTONE)

        if self.remaining <= 0:
            self.running = False
            self.completed_shown = True
            cues.append(Cue.COMPLETE)
        return cues

    @property
    def progress(self) -> float:
        if self.duration == 0:
            return 0.0
        return (self.duration - self.remaining) / self.duration * 100

    @property
    def state_class(self) -> str:
        if self.duration == 0:
            return ""
        left = self.remaining / self.duration * 100
        if left <= 10:
            return "critical"
        if left <= 25:
            return "warning"
        return "running" if self.running else ""

    @property
    def display(self) -> str:
        return format_clock(self.remaining)

    def to_dict(self) -> dict:
        return {
            "duration": self.duration,
            "remaining": self.remaining,
            "running": self.running,
            "display": self.display,
            "progress": round(self.progress, 2),
            "stateClass": self.state_class,
            "milestones": {str(m): passed for m, passed in self.milestones.items()},
            "completedShown": self.completed_shown,
        }
