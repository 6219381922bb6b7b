import logging

from .timer import Cue

log = logging.getLogger("goodbuddi.chimes")

# Hz
MILESTONE_TONES = (523.25, 659.25)
COMPLETION_MELODY = (523.25, 659.25, 783.99, 1046.50)


def tones_for(cue: Cue) -> tuple[float, ...]:
    if cue == Cue.COMPLETE:
        return COMPLETION_MELODY
    return MILESTONE_TONES


def play_cue(cue: Cue, label: str):
    """Default feedback sink: the audio itself is played by the client."""
    if cue == Cue.COMPLETE:
        log.info("Timer done for %r, keep your momentum going! tones=%s", label, tones_for(cue))
    else:
        log.info("Milestone chime for %r tones=%s", label, tones_for(cue))
