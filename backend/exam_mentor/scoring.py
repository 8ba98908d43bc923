from __future__ import annotations
from typing import Any, Dict, List, Tuple

from .report import ChapterPerformance, ExamReport


MARKS_CORRECT = 4
MARKS_INCORRECT = -1

# (lower bound, label), checked top-down; anything below the last bound is Critical.
CATEGORY_BANDS: List[Tuple[int, str]] = [
	(275, "Elite"),
	(250, "Excellent"),
	(225, "Very Strong"),
	(200, "Strong"),
	(175, "Good"),
	(150, "Improving"),
	(125, "Average"),
	(100, "Weak"),
	(75, "Very Weak"),
]
LOWEST_CATEGORY = "Critical"


def calculate_total_score(report: ExamReport) -> int:
	return sum(s.correct * MARKS_CORRECT + s.incorrect * MARKS_INCORRECT for s in report.subject_wise)


def get_category(score: int) -> str:
	for lower, label in CATEGORY_BANDS:
		if score >= lower:
			return label
	return LOWEST_CATEGORY


def _all_chapters(report: ExamReport) -> List[ChapterPerformance]:
	return [ch for subject in report.chapter_wise for ch in subject.chapters]


def is_strong_chapter(ch: ChapterPerformance) -> bool:
	return ch.correct >= 1 and ch.incorrect == 0 and ch.unanswered <= 1


def is_weak_chapter(ch: ChapterPerformance) -> bool:
	return ch.incorrect >= 1 or (ch.unanswered >= 1 and ch.correct == 0)


def identify_strong_chapters(report: ExamReport) -> List[ChapterPerformance]:
	return [ch for ch in _all_chapters(report) if is_strong_chapter(ch)]


def identify_weak_chapters(report: ExamReport) -> List[ChapterPerformance]:
	return [ch for ch in _all_chapters(report) if is_weak_chapter(ch)]


def _attempt_distribution(report: ExamReport) -> List[Dict[str, Any]]:
	return [
		{
			"subject": s.subject,
			"correct": s.correct,
			"incorrect": s.incorrect,
			"unattempted": s.unattempted,
			"score": s.correct * MARKS_CORRECT + s.incorrect * MARKS_INCORRECT,
		}
		for s in report.subject_wise
	]


def _difficulty_breakdown(report: ExamReport) -> Dict[str, Dict[str, int]] | None:
	overall = next((lvl for lvl in report.level_wise if lvl.subject == "Overall"), None)
	if overall is None:
		return None
	return {
		level: {
			"correct": getattr(overall.correct, level),
			"incorrect": getattr(overall.incorrect, level),
			"skipped": getattr(overall.unattempted, level),
		}
		for level in ("easy", "medium", "tough")
	}


def summarize_report(report: ExamReport) -> Dict[str, Any]:
	score = calculate_total_score(report)
	total_correct = sum(s.correct for s in report.subject_wise)
	total_incorrect = sum(s.incorrect for s in report.subject_wise)
	total_unattempted = sum(s.unattempted for s in report.subject_wise)
	attempted = total_correct + total_incorrect
	# Accuracy is measured over attempted questions only
	accuracy = round(total_correct / attempted * 100) if attempted else 0
	return {
		"score": score,
		"category": get_category(score),
		"total_questions": attempted + total_unattempted,
		"total_correct": total_correct,
		"total_attempted": attempted,
		"accuracy": accuracy,
		"strong_chapters": [ch.model_dump() for ch in identify_strong_chapters(report)],
		"weak_chapters": [ch.model_dump() for ch in identify_weak_chapters(report)],
		"subjects": _attempt_distribution(report),
		"difficulty": _difficulty_breakdown(report),
	}
