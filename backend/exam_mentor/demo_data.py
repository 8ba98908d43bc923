from __future__ import annotations
from typing import Any, Dict


DEMO_REPORT: Dict[str, Any] = {
	"subjectWiseAnalysis": [
		{"subject": "Physics", "correct": 23, "incorrect": 1, "unattempted": 1},
		{"subject": "Chemistry", "correct": 23, "incorrect": 1, "unattempted": 1},
		{"subject": "Mathematics", "correct": 23, "incorrect": 0, "unattempted": 2},
	],
	"accuracyAndAttemptAnalysis": [
		{"subject": "Physics", "accuracyPercent": "95.8", "attemptPercent": "96.0"},
		{"subject": "Chemistry", "accuracyPercent": "95.8", "attemptPercent": "96.0"},
		{"subject": "Mathematics", "accuracyPercent": "100.0", "attemptPercent": "92.0"},
	],
	"speedAndTimeAnalysis": [
		{"subject": "Physics", "timeTaken": "56m 26s", "avgTimeForCorrectQues": "2m 24s", "avgTimeSpentInIncorrectQues": "2m 20s", "avgTimeSpentInUnattemptedQues": "5s", "marksEarnedPerMin": "1.6"},
		{"subject": "Chemistry", "timeTaken": "57m 48s", "avgTimeForCorrectQues": "2m 7s", "avgTimeSpentInIncorrectQues": "2m 16s", "avgTimeSpentInUnattemptedQues": "3m 19s", "marksEarnedPerMin": "1.6"},
		{"subject": "Mathematics", "timeTaken": "1h 45s", "avgTimeForCorrectQues": "2m 11s", "avgTimeSpentInIncorrectQues": "2m 11s", "avgTimeSpentInUnattemptedQues": "5m 14s", "marksEarnedPerMin": "1.5"},
	],
	"questionWiseAnalysis": [],
	"chaperWisePerformance": [
		{"subject": "Physics", "chapters": [
			{"chapter": "Unit and Dimension", "correct": 1, "incorrect": 0, "unanswered": 0, "subtopic": "Applications of Dimensions"},
			{"chapter": "Magnetic Effect of Current", "correct": 2, "incorrect": 1, "unanswered": 1, "subtopic": "Magnetic Force"},
		]},
		{"subject": "Chemistry", "chapters": [
			{"chapter": "Chemical Bonding", "correct": 2, "incorrect": 0, "unanswered": 0, "subtopic": "Hybridisation"},
			{"chapter": "POC", "correct": 0, "incorrect": 1, "unanswered": 0, "subtopic": "Quantitative analysis"},
		]},
		{"subject": "Mathematics", "chapters": [
			{"chapter": "Vector -Math", "correct": 1, "incorrect": 0, "unanswered": 1, "subtopic": "Geometry of Vectors"},
			{"chapter": "Calculus", "correct": 2, "incorrect": 0, "unanswered": 0, "subtopic": "Limits"},
		]},
	],
	"levelWiseAnalysis": [
		{"subject": "Overall", "correct": {"easy": 28, "medium": 40, "tough": 1}, "incorrect": {"easy": 1, "medium": 1, "tough": 0}, "unattempted": {"easy": 1, "medium": 3, "tough": 0}},
	],
}
