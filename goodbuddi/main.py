import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .db import init_db
from .routes import days, editor, phrases, viewer, week
from .scheduler import start_scheduler, stop_scheduler
from .settings import settings

logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger("goodbuddi")

app = FastAPI(title="GoodBuddi - Create a Great Day", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(days.router)
app.include_router(week.router)
app.include_router(editor.router)
app.include_router(viewer.router)
app.include_router(phrases.router)


@app.on_event("startup")
async def startup():
    init_db()
    if settings.DISABLE_SCHEDULER:
        logger.info("Timer ticker disabled")
    else:
        start_scheduler()


@app.on_event("shutdown")
async def shutdown():
    stop_scheduler()


@app.get("/health")
async def health():
    return {"ok": True}


@app.exception_handler(Exception)
async def any_error(request: Request, exc: Exception):
    logger.exception("Unhandled error")
    return JSONResponse(status_code=500, content={"success": False, "error": "Internal server error"})
