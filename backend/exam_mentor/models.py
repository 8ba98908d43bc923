from __future__ import annotations
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Integer, Text
from .db import Base


class StoredReport(Base):
	__tablename__ = "exam_reports"
	id = Column(String(36), primary_key=True, index=True)
	report_json = Column(Text, nullable=False)
	score = Column(Integer, nullable=False)
	category = Column(String(32), nullable=False)
	# Raw narratives as returned upstream; sections are re-parsed on read
	analysis_text = Column(Text, nullable=True)
	plan_text = Column(Text, nullable=True)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
