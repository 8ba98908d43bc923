import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .db import Base, engine, get_db
from .cleanup import purge_stale_reports
from .settings import settings
from .routers import health, narrative, reports

logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


def _purge_once() -> None:
	try:
		db = next(get_db())
		removed = purge_stale_reports(db)
		if removed:
			logger.info("Purged %d stale reports", removed)
	except Exception:
		logger.exception("Report cleanup failed")


async def _cleanup_watcher():
	# Startup already purged once; repeat daily
	while True:
		await asyncio.sleep(24 * 60 * 60)
		_purge_once()


@asynccontextmanager
async def lifespan(app: FastAPI):
	Base.metadata.create_all(bind=engine)
	_purge_once()
	task = asyncio.create_task(_cleanup_watcher())
	try:
		yield
	finally:
		task.cancel()


app = FastAPI(title="Exam Mentor API", lifespan=lifespan)
app.include_router(health.router)
app.include_router(reports.router)
app.include_router(narrative.router)


@app.get("/info")
def root():
	return {
		"status": "ok",
		"gemini_configured": bool(settings.gemini_api_key),
		"product": settings.product_name,
	}
