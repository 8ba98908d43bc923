from __future__ import annotations
import logging

from .errors import UpstreamGenerationError
from .gemini_client import GeminiClient
from .prompts import SYSTEM_PROMPT, build_analysis_prompt, build_plan_prompt
from .report import ExamReport
from .scoring import calculate_total_score, get_category
from .settings import settings

logger = logging.getLogger(__name__)

ANALYSIS_FAILED = "Failed to generate analysis. Please check your API key and try again."
ANALYSIS_EMPTY = "No analysis generated."
PLAN_FAILED = "Failed to generate study plan."
PLAN_EMPTY = "No plan generated."


async def generate_analysis(client: GeminiClient, report: ExamReport) -> str:
	"""Narrative performance report. Upstream failures come back as a fixed message."""
	score = calculate_total_score(report)
	prompt = build_analysis_prompt(report, score=score, category=get_category(score))
	try:
		text = await client.generate(prompt, system_instruction=SYSTEM_PROMPT)
	except UpstreamGenerationError:
		logger.exception("Analysis generation failed")
		return ANALYSIS_FAILED
	return text.strip() or ANALYSIS_EMPTY


async def generate_study_plan(client: GeminiClient, report: ExamReport) -> str:
	try:
		text = await client.generate(build_plan_prompt(report), temperature=settings.plan_temperature)
	except UpstreamGenerationError:
		logger.exception("Study plan generation failed")
		return PLAN_FAILED
	return text.strip() or PLAN_EMPTY
