from datetime import datetime
from sqlalchemy import String, DateTime, Integer, Text, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column
from .db import Base
from .entities import Event


class Day(Base):
    __tablename__ = "days"

    # YYYY-MM-DD (local wall-clock date)
    date: Mapped[str] = mapped_column(String(10), primary_key=True)
    scratchpad_text: Mapped[str] = mapped_column(Text, default="")
    events: Mapped[list] = mapped_column(JSON, default=list)
    reflection: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def get_events(self) -> list[Event]:
        return [Event.from_dict(e) for e in (self.events or [])]

    def set_events(self, events: list[Event]):
        # always assign a fresh list so the JSON column is flagged dirty
        self.events = [e.to_dict() for e in events]


class Phrase(Base):
    __tablename__ = "phrases"
    __table_args__ = (
        Index("ix_phrases_position", "position"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    position: Mapped[int] = mapped_column(Integer, default=0)
    text: Mapped[str] = mapped_column(String(280))

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)


class Preference(Base):
    __tablename__ = "preferences"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
