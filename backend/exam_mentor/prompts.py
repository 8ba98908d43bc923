from __future__ import annotations
import json

from .report import ExamReport


SYSTEM_PROMPT = (
	"You are an Academic Performance Analyst & Entrance Exam Mentor AI (specializing in JEE & NEET).\n"
	"Analyze a test performance report provided in JSON and produce a category-specific, actionable improvement plan.\n"
	"Behave like a senior mentor, a test-analysis expert and a rank-improvement strategist; "
	"not a motivational speaker, a generic study advisor or a content summarizer.\n\n"
	"PRINCIPLES\n"
	"- Strategy must change by performance level (marks band).\n"
	"- Every conclusion must be tied to the JSON data; never invent missing data.\n"
	"- Advice must be actionable, time-bound and exam-oriented (marks, accuracy, speed, selection).\n"
	"- No generic lines such as 'study more' or 'revise properly'.\n\n"
	"SCORING\n"
	"If the JSON contains totalMarks or totalScore, use it. Otherwise +4 per correct, -1 per incorrect, 0 unattempted.\n\n"
	"ERROR TAXONOMY\n"
	"Classify improvement points as conceptual gap, formula recall gap, calculation mistake, careless mistake "
	"or time-management/question-selection issue, and split them into forced and unforced errors.\n\n"
	"CHAPTER SELECTION\n"
	"Strong chapters: (correct >= 1) AND (incorrect = 0) AND (unanswered <= 1) in chaperWisePerformance.\n"
	"Weak chapters: (incorrect >= 1) OR (unanswered >= 1 AND correct = 0).\n"
	"If there are too few chapters, state: 'Insufficient chapter-level attempts to label reliably.'\n\n"
	"OUTPUT DISCIPLINE\n"
	"Use only the requested headings, bullet points and compact tables. No emojis, no storytelling, no filler. "
	"Phrase recommendations as 'do X for Y days with Z measurable target'."
)

REPORT_HEADINGS = (
	"Category & Overall Diagnosis",
	"Strength",
	"Areas to Improve",
	"Strong Chapters",
	"Weak Chapters",
	"Your Focus Areas",
	"Recommendation (Category-Specific Strategy)",
	"Subject-Wise Action Plan",
	"Timeline & Milestones",
	"Mentor Action Items",
)


def format_heading(title: str) -> str:
	# Whole-line bold is recognized as a section header regardless of length or punctuation
	return f"**{title}**"


def _report_json(report: ExamReport) -> str:
	return json.dumps(report.to_json_dict(), ensure_ascii=False)


def build_analysis_prompt(report: ExamReport, *, score: int, category: str) -> str:
	headings = "\n".join(format_heading(h) for h in REPORT_HEADINGS)
	return (
		"TASK: Generate a category-wise Test Analysis & Improvement Report derived strictly from the JSON "
		"for a JEE/NEET aspirant.\n\n"
		f"User JSON Data:\n{_report_json(report)}\n\n"
		f"Computed score (4*correct - 1*incorrect): {score}. Category: {category}.\n"
		"Category bands out of 300: 275+ Elite, 250 Excellent, 225 Very Strong, 200 Strong, 175 Good, "
		"150 Improving, 125 Average, 100 Weak, 75 Very Weak, below 75 Critical.\n\n"
		"REPORT STRUCTURE (follow these headings in this order, each alone on its own line and wrapped in bold exactly as shown):\n"
		f"{headings}\n\n"
		"Under 'Your Focus Areas' list 3-5 bullets formatted as '**[Topic/Skill]**: [specific actionable advice]'.\n"
		"Under 'Timeline & Milestones' give a 6-week goal, 3-month target, 6-month target and 1-year outcome.\n"
		"Under 'Mentor Action Items' give current category, target next category, expected mark jump, "
		"chapters to monitor and risk flags.\n"
		"If a required field is missing in the JSON, say what is missing and proceed with the available data."
	)


def build_plan_prompt(report: ExamReport) -> str:
	return (
		"TASK: Create a 1-Week Intensive Personalized Study Plan based on this test report.\n"
		f"User JSON Data: {_report_json(report)}\n\n"
		"OBJECTIVE: Fix the specific weak chapters and time management issues found in the report while maintaining strengths.\n\n"
		"OUTPUT FORMAT RULES:\n"
		"1. Use bold headers for days (e.g. \"**Day 1: Physics Fix & Chemistry Recall**\").\n"
		"2. For each day provide 3 blocks: Morning (high focus, hard weak areas), "
		"Afternoon (timed question practice), Evening (revision, formula lists, error log).\n"
		"3. Name the chapters from the JSON 'incorrect' or 'unattempted' lists to study.\n"
		"4. Include a \"Weekend Strategy\" section at the end for mock tests.\n\n"
		"Do not give generic advice. Be specific: \"Solve 30 Questions on [Weak Chapter Name]\"."
	)
