from __future__ import annotations

import logging
from urllib.parse import urlencode, urlsplit, urlunsplit, parse_qsl

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from .settings import settings

log = logging.getLogger("goodbuddi.db")


class Base(DeclarativeBase):
    pass


_engine = None
_SessionLocal = None


def _add_connect_timeout(url: str, seconds: int = 5) -> str:
    parts = urlsplit(url)
    q = dict(parse_qsl(parts.query, keep_blank_values=True))
    if "connect_timeout" in q:
        return url
    q["connect_timeout"] = str(seconds)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(q), parts.fragment))


def normalize_database_url(url: str) -> str:
    url = (url or "").strip()
    if not url:
        return "sqlite:///./goodbuddi.db"
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    if url.startswith("postgresql://"):
        url = "postgresql+psycopg://" + url[len("postgresql://"):]
    if url.startswith("postgresql"):
        url = _add_connect_timeout(url, 5)
    return url


def make_engine(url: str):
    url = normalize_database_url(url)
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


def get_engine():
    global _engine
    if _engine is None:
        _engine = make_engine(settings.DATABASE_URL)
    return _engine


def get_sessionmaker():
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(bind=get_engine(), autoflush=False, autocommit=False)
    return _SessionLocal


def get_db():
    SessionLocal = get_sessionmaker()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(engine=None):
    # Import models so Base.metadata is populated
    from . import models  # noqa: F401

    engine = engine or get_engine()
    Base.metadata.create_all(bind=engine)
    log.info("Database ready (%s)", engine.url.get_backend_name())
