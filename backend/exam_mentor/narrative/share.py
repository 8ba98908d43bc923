from __future__ import annotations
from typing import Optional

from ..settings import settings
from .emphasis import strip_bold


def build_share_text(analysis: str, plan: Optional[str] = None, *, product: Optional[str] = None) -> str:
	"""Plain-text export of the narrative report and, when present, the study plan."""
	name = product or settings.product_name
	text = f"*{name} Report*\n\nANALYSIS:\n{strip_bold(analysis)}\n\n"
	if plan:
		text += f"STUDY PLAN:\n{strip_bold(plan)}"
	return text
