from __future__ import annotations
from typing import Optional

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from ..narrative.render import render_sections
from ..narrative.segmenter import parse_sections
from ..narrative.share import build_share_text

router = APIRouter(prefix="/narrative", tags=["narrative"])


class ParseRequest(BaseModel):
	text: str = ""


class ShareRequest(BaseModel):
	analysis: str
	plan: Optional[str] = None


@router.post("/parse")
def parse_narrative(req: ParseRequest):
	return {"sections": render_sections(parse_sections(req.text))}


@router.post("/share", response_class=PlainTextResponse)
def share_narrative(req: ShareRequest):
	return build_share_text(req.analysis, req.plan)
