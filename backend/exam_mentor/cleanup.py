from __future__ import annotations
from datetime import datetime, timedelta
from sqlalchemy import delete
from sqlalchemy.orm import Session

from .models import StoredReport
from .settings import settings


def purge_stale_reports(db: Session, *, days: int | None = None, now: datetime | None = None) -> int:
	# Reports not touched (uploaded or regenerated) within the retention window are dropped
	threshold = (now or datetime.utcnow()) - timedelta(days=days if days is not None else settings.retention_days)
	res = db.execute(delete(StoredReport).where(StoredReport.updated_at < threshold))
	db.commit()
	return res.rowcount or 0
