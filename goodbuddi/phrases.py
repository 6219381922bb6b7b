import random

from sqlalchemy.orm import Session

from .models import Phrase, Preference

DEFAULT_PHRASES = [
    "Let's get it poppin!",
    "Today is your canvas. Paint it with intention.",
    "Small steps create great journeys.",
    "You have everything you need right now.",
    "Energy flows where attention goes.",
]

SEEDED_KEY = "phrases_seeded"
SELECTED_KEY = "phrase_selected"


class PhraseBook:
    """Light-up phrases shown on the billboard, plus the pinned choice."""

    def __init__(self, db: Session, rng: random.Random | None = None):
        self.db = db
        self.rng = rng or random.Random()

    def _pref(self, key: str) -> dict | None:
        pref = self.db.get(Preference, key)
        return pref.value if pref else None

    def _set_pref(self, key: str, value: dict | None):
        pref = self.db.get(Preference, key)
        if pref is None:
            pref = Preference(key=key)
            self.db.add(pref)
        pref.value = value

    def _ensure_seeded(self):
        if self._pref(SEEDED_KEY):
            return
        for i, text in enumerate(DEFAULT_PHRASES):
            self.db.add(Phrase(position=i, text=text))
        self._set_pref(SEEDED_KEY, {"seeded": True})
        self.db.commit()

    def list_phrases(self) -> list[str]:
        self._ensure_seeded()
        rows = self.db.query(Phrase).order_by(Phrase.position.asc(), Phrase.id.asc()).all()
        return [r.text for r in rows]

    def replace_phrases(self, phrases: list[str]) -> list[str]:
        self._ensure_seeded()
        cleaned = [p.strip() for p in phrases if p and p.strip()]
        self.db.query(Phrase).delete()
        for i, text in enumerate(cleaned):
            self.db.add(Phrase(position=i, text=text))

        selected = self.selected_index()
        if selected is not None and selected >= len(cleaned):
            self._set_pref(SELECTED_KEY, None)
        self.db.commit()
        return cleaned

    def selected_index(self) -> int | None:
        value = self._pref(SELECTED_KEY)
        if not value:
            return None
        return value.get("index")

    def select(self, index: int | None) -> int | None:
        if index is not None:
            count = len(self.list_phrases())
            if not 0 <= index < count:
                raise ValueError(f"phrase index {index} out of range")
            self._set_pref(SELECTED_KEY, {"index": index})
        else:
            self._set_pref(SELECTED_KEY, None)
        self.db.commit()
        return index

    def daily_phrase(self) -> str:
        phrases = self.list_phrases()
        if not phrases:
            return ""
        selected = self.selected_index()
        if selected is not None and 0 <= selected < len(phrases):
            return phrases[selected]
        return self.rng.choice(phrases)
