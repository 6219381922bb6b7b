from apscheduler.schedulers.asyncio import AsyncIOScheduler
import logging

from .settings import settings
from .viewer import viewers

log = logging.getLogger("goodbuddi.scheduler")

scheduler = AsyncIOScheduler()

async def tick_timers():
    try:
        viewers.tick_all()
    except Exception as e:
        log.exception("Scheduler: timer tick failed: %s", e)

def start_scheduler():
    if scheduler.running:
        return
    scheduler.add_job(
        tick_timers,
        "interval",
        seconds=settings.TIMER_TICK_SECONDS,
        id="timer_tick",
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    scheduler.start()
    log.info("Timer ticker started (every %ss)", settings.TIMER_TICK_SECONDS)

def stop_scheduler():
    if scheduler.running:
        scheduler.shutdown(wait=False)
