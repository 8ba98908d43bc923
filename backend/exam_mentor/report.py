from __future__ import annotations
import json
from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from .errors import MalformedInputError


def _as_text(value: Any) -> Any:
	# Exports mix "95.8" and 95.8 for the same field
	if isinstance(value, (int, float)) and not isinstance(value, bool):
		return str(value)
	return value


NumberText = Annotated[str, BeforeValidator(_as_text)]


class _ReportModel(BaseModel):
	model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SubjectAnalysis(_ReportModel):
	subject: str
	correct: int = Field(ge=0)
	incorrect: int = Field(ge=0)
	unattempted: int = Field(ge=0)


class AccuracyAttempt(_ReportModel):
	subject: str
	accuracy_percent: NumberText = Field(alias="accuracyPercent")
	attempt_percent: NumberText = Field(alias="attemptPercent")


class SpeedAnalysis(_ReportModel):
	subject: str
	time_taken: NumberText = Field(alias="timeTaken")
	avg_time_correct: NumberText = Field(alias="avgTimeForCorrectQues")
	avg_time_incorrect: NumberText = Field(alias="avgTimeSpentInIncorrectQues")
	avg_time_unattempted: NumberText = Field(alias="avgTimeSpentInUnattemptedQues")
	marks_per_minute: NumberText = Field(alias="marksEarnedPerMin")


class Question(_ReportModel):
	q_no: int = Field(alias="qNo")
	status: Literal["Correct", "Incorrect", "Unattempted"]
	chapter: str
	subtopic: str = ""
	incorrect_reason: str = Field(default="", alias="incorrectReason")
	student_correct_percentage: float = Field(default=0, alias="studentCorrectPercentage")
	time_vs_others: NumberText = Field(default="", alias="timeTaken/AvgCorrectTimeByOthers")


class QuestionAnalysis(_ReportModel):
	subject: str
	questions: List[Question] = Field(default_factory=list)


class ChapterPerformance(_ReportModel):
	chapter: str
	correct: int = Field(ge=0)
	incorrect: int = Field(ge=0)
	unanswered: int = Field(ge=0)
	subtopic: str = ""


class SubjectChapterPerformance(_ReportModel):
	subject: str
	chapters: List[ChapterPerformance] = Field(default_factory=list)


class DifficultyCounts(_ReportModel):
	easy: int = 0
	medium: int = 0
	tough: int = 0


class LevelAnalysis(_ReportModel):
	subject: str
	correct: DifficultyCounts
	incorrect: DifficultyCounts
	unattempted: DifficultyCounts


class ExamReport(_ReportModel):
	subject_wise: List[SubjectAnalysis] = Field(alias="subjectWiseAnalysis")
	accuracy_and_attempt: List[AccuracyAttempt] = Field(default_factory=list, alias="accuracyAndAttemptAnalysis")
	speed_and_time: List[SpeedAnalysis] = Field(default_factory=list, alias="speedAndTimeAnalysis")
	question_wise: List[QuestionAnalysis] = Field(default_factory=list, alias="questionWiseAnalysis")
	# Upstream exports spell this key "chaper"; the corrected spelling is accepted too.
	chapter_wise: List[SubjectChapterPerformance] = Field(
		default_factory=list,
		validation_alias=AliasChoices("chaperWisePerformance", "chapterWisePerformance", "chapter_wise"),
		serialization_alias="chaperWisePerformance",
	)
	level_wise: List[LevelAnalysis] = Field(default_factory=list, alias="levelWiseAnalysis")

	def to_json_dict(self) -> Dict[str, Any]:
		return self.model_dump(by_alias=True)


def parse_report(raw: Union[str, bytes, Dict[str, Any]]) -> ExamReport:
	"""Validate an uploaded report, raising MalformedInputError on any defect."""
	data: Any = raw
	if isinstance(raw, (str, bytes)):
		if not raw.strip():
			raise MalformedInputError("Please enter JSON data.")
		try:
			data = json.loads(raw)
		except (json.JSONDecodeError, UnicodeDecodeError) as err:
			raise MalformedInputError(f"Invalid JSON: {err}") from err
	if not isinstance(data, dict):
		raise MalformedInputError("Report must be a JSON object.")
	try:
		return ExamReport.model_validate(data)
	except ValidationError as err:
		first = err.errors()[0]
		where = ".".join(str(p) for p in first.get("loc", ()))
		raise MalformedInputError(f"Invalid report at {where or 'root'}: {first.get('msg')}") from err
