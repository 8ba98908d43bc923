"""Tests for narrative generation and its failure strings."""
import asyncio

from exam_mentor.mentor import (
	ANALYSIS_EMPTY,
	ANALYSIS_FAILED,
	PLAN_EMPTY,
	PLAN_FAILED,
	generate_analysis,
	generate_study_plan,
)
from exam_mentor.narrative.segmenter import SectionType, classify_line, parse_sections
from exam_mentor.prompts import REPORT_HEADINGS, SYSTEM_PROMPT, format_heading


class TestGenerateAnalysis:
	def test_returns_model_text(self, make_gemini, demo_report) -> None:
		client = make_gemini(replies=["  Strength:\n- Calculus  "])
		assert asyncio.run(generate_analysis(client, demo_report)) == "Strength:\n- Calculus"
		assert client.calls[0]["system_instruction"] == SYSTEM_PROMPT

	def test_prompt_carries_score_and_headings(self, make_gemini, demo_report) -> None:
		client = make_gemini(replies=["x"])
		asyncio.run(generate_analysis(client, demo_report))
		prompt = client.prompts[0]
		assert "274" in prompt
		assert "Excellent" in prompt
		assert "chaperWisePerformance" in prompt
		for heading in REPORT_HEADINGS:
			assert heading in prompt

	def test_upstream_failure_becomes_fixed_string(self, failing_gemini, demo_report) -> None:
		assert asyncio.run(generate_analysis(failing_gemini, demo_report)) == ANALYSIS_FAILED

	def test_empty_reply(self, make_gemini, demo_report) -> None:
		assert asyncio.run(generate_analysis(make_gemini(replies=["   "]), demo_report)) == ANALYSIS_EMPTY


class TestGenerateStudyPlan:
	def test_returns_model_text(self, make_gemini, demo_report) -> None:
		client = make_gemini(replies=["**Day 1: Physics**\n- Morning: magnetism"])
		assert asyncio.run(generate_study_plan(client, demo_report)).startswith("**Day 1")
		assert "temperature" in client.calls[0]
		assert "Weekend Strategy" in client.prompts[0]

	def test_upstream_failure_becomes_fixed_string(self, failing_gemini, demo_report) -> None:
		assert asyncio.run(generate_study_plan(failing_gemini, demo_report)) == PLAN_FAILED

	def test_empty_reply(self, make_gemini, demo_report) -> None:
		assert asyncio.run(generate_study_plan(make_gemini(replies=[""]), demo_report)) == PLAN_EMPTY


class TestReportHeadings:
	def test_every_requested_heading_opens_a_section(self) -> None:
		for heading in REPORT_HEADINGS:
			kind = classify_line(format_heading(heading))
			assert kind.is_header, heading
			assert kind.clean_title == heading

	def test_prompt_lists_headings_in_parseable_form(self, make_gemini, demo_report) -> None:
		client = make_gemini(replies=["x"])
		asyncio.run(generate_analysis(client, demo_report))
		for heading in REPORT_HEADINGS:
			assert f"\n{format_heading(heading)}\n" in client.prompts[0]

	def test_recommendation_block_is_its_own_section(self) -> None:
		text = (
			f"{format_heading('Your Focus Areas')}\n"
			"- **Physics**: revise\n"
			f"{format_heading('Recommendation (Category-Specific Strategy)')}\n"
			"- Do 30 questions daily\n"
		)
		sections = parse_sections(text)
		assert [s.title for s in sections] == ["Your Focus Areas", "Recommendation (Category-Specific Strategy)"]
		assert sections[1].type is SectionType.STRATEGY
		assert sections[1].content == ["Do 30 questions daily"]
