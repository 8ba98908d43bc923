from __future__ import annotations
import json
import logging
import uuid
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from ..db import get_db
from ..demo_data import DEMO_REPORT
from ..errors import MalformedInputError
from ..gemini_client import GeminiClient
from ..mentor import generate_analysis, generate_study_plan
from ..models import StoredReport
from ..narrative.render import render_sections
from ..narrative.segmenter import parse_sections
from ..narrative.share import build_share_text
from ..report import ExamReport, parse_report
from ..scoring import summarize_report

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])


async def get_gemini_client():
	try:
		client = GeminiClient()
	except ValueError as e:
		raise HTTPException(status_code=503, detail=str(e))
	try:
		yield client
	finally:
		await client.aclose()


def _narrative(text: Optional[str]) -> Optional[Dict[str, Any]]:
	if text is None:
		return None
	return {"text": text, "sections": render_sections(parse_sections(text))}


def _load(db: Session, report_id: str) -> StoredReport:
	row = db.get(StoredReport, report_id)
	if row is None:
		raise HTTPException(status_code=404, detail="report not found")
	return row


def _report_of(row: StoredReport) -> ExamReport:
	return parse_report(row.report_json)


@router.get("/demo")
def demo_report():
	return DEMO_REPORT


@router.post("")
async def upload_report(request: Request, db: Session = Depends(get_db)):
	body = await request.body()
	try:
		report = parse_report(body)
	except MalformedInputError as e:
		# Nothing is stored; earlier uploads stay available
		raise HTTPException(status_code=400, detail=str(e))
	summary = summarize_report(report)
	row = StoredReport(
		id=str(uuid.uuid4()),
		report_json=json.dumps(report.to_json_dict(), ensure_ascii=False),
		score=summary["score"],
		category=summary["category"],
	)
	db.add(row)
	db.commit()
	logger.info("Stored report %s (score=%s, category=%s)", row.id, row.score, row.category)
	return {"id": row.id, "summary": summary}


@router.get("/{report_id}")
def get_report(report_id: str, db: Session = Depends(get_db)):
	row = _load(db, report_id)
	return {
		"id": row.id,
		"summary": summarize_report(_report_of(row)),
		"analysis": _narrative(row.analysis_text),
		"plan": _narrative(row.plan_text),
	}


@router.post("/{report_id}/analysis")
async def create_analysis(
	report_id: str,
	db: Session = Depends(get_db),
	client: GeminiClient = Depends(get_gemini_client),
):
	row = _load(db, report_id)
	text = await generate_analysis(client, _report_of(row))
	row.analysis_text = text
	db.add(row)
	db.commit()
	return _narrative(text)


@router.post("/{report_id}/plan")
async def create_plan(
	report_id: str,
	db: Session = Depends(get_db),
	client: GeminiClient = Depends(get_gemini_client),
):
	row = _load(db, report_id)
	text = await generate_study_plan(client, _report_of(row))
	row.plan_text = text
	db.add(row)
	db.commit()
	return _narrative(text)


@router.get("/{report_id}/share", response_class=PlainTextResponse)
def share_report(report_id: str, db: Session = Depends(get_db)):
	row = _load(db, report_id)
	if not row.analysis_text:
		raise HTTPException(status_code=409, detail="generate the analysis before sharing")
	return build_share_text(row.analysis_text, row.plan_text)
