from __future__ import annotations
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple


DEFAULT_TITLE = "Executive Summary"


class SectionType(str, Enum):
	NEUTRAL = "neutral"
	POSITIVE = "positive"
	NEGATIVE = "negative"
	INFO = "info"
	STRATEGY = "strategy"


@dataclass
class Section:
	title: str
	type: SectionType = SectionType.NEUTRAL
	content: List[str] = field(default_factory=list)

	def to_dict(self) -> dict:
		return {"title": self.title, "type": self.type.value, "content": list(self.content)}


@dataclass(frozen=True)
class LineClass:
	is_header: bool
	clean_title: str = ""


CONTENT = LineClass(is_header=False)

# Order matters: titles can contain several keywords and the first hit wins.
SECTION_KEYWORDS: Tuple[Tuple[str, SectionType], ...] = (
	("strength", SectionType.POSITIVE),
	("strong", SectionType.POSITIVE),
	("weak", SectionType.NEGATIVE),
	("improve", SectionType.NEGATIVE),
	("risk", SectionType.NEGATIVE),
	("diagnosis", SectionType.NEUTRAL),
	("recommendation", SectionType.STRATEGY),
	("plan", SectionType.STRATEGY),
	("action", SectionType.STRATEGY),
	("strategy", SectionType.STRATEGY),
	("timeline", SectionType.INFO),
	("mentor", SectionType.INFO),
	("category", SectionType.INFO),
	("summary", SectionType.NEUTRAL),
)

# Study-plan day headers always render as schedule blocks.
SCHEDULE_KEYWORDS: Tuple[str, ...] = ("day", "weekend")

BOLD = "**"
BULLETS = ("•", "-", "*")
LONG_LINE_LIMIT = 60
SHORT_LABEL_LIMIT = 40

# Generated text sometimes closes "**" with "__"; either delimiter may end the run.
_WHOLE_BOLD_RE = re.compile(r"^(?:\*\*|__)(.+?)(?:\*\*|__)$")
_HEADING_MARKER_RE = re.compile(r"^#{1,6}\s+")
_LABEL_COLON_RE = re.compile(r"^[A-Z][\w\s&]+:$")
_NUMBERED_BOLD_RE = re.compile(r"^\d+[.)]\s+\*\*[^*]+\*\*:?$")
_TITLE_LEAD_RE = re.compile(r"^(?:[#*_•\-\s]|\d+[.)])+")
_TITLE_TRAIL_RE = re.compile(r"[#*_:\s]+$")


def is_whole_line_bold(line: str) -> bool:
	return bool(_WHOLE_BOLD_RE.match(line))


def has_heading_marker(line: str) -> bool:
	return bool(_HEADING_MARKER_RE.match(line))


def is_capitalized_label(line: str) -> bool:
	return bool(_LABEL_COLON_RE.match(line))


def is_numbered_bold(line: str) -> bool:
	return bool(_NUMBERED_BOLD_RE.match(line))


MARKUP_HEADER_RULES: Tuple[Callable[[str], bool], ...] = (
	is_whole_line_bold,
	has_heading_marker,
	is_capitalized_label,
	is_numbered_bold,
)


def is_markup_header(line: str) -> bool:
	return any(rule(line) for rule in MARKUP_HEADER_RULES)


def is_inline_bold_sentence(line: str) -> bool:
	"""A long line that opens with a bold key ("**Note:** ...") but keeps going.

	Such lines carry emphasis on a key phrase inside ordinary content and must
	not become section boundaries.
	"""
	return (
		line.startswith(BOLD)
		and BOLD in line[len(BOLD):]
		and len(line) > LONG_LINE_LIMIT
		and not line.endswith(BOLD)
	)


def is_short_label(line: str) -> bool:
	return line.endswith(":") and len(line) < SHORT_LABEL_LIMIT


def clean_title(line: str) -> str:
	title = _TITLE_LEAD_RE.sub("", line)
	return _TITLE_TRAIL_RE.sub("", title).strip()


def classify_line(line: str) -> LineClass:
	"""Decide whether a trimmed, non-empty line opens a new section."""
	if is_markup_header(line):
		if is_inline_bold_sentence(line):
			return CONTENT
	elif not is_short_label(line):
		return CONTENT
	title = clean_title(line)
	if not title:
		return CONTENT
	return LineClass(is_header=True, clean_title=title)


def infer_section_type(title: str) -> SectionType:
	lowered = title.lower()
	section_type = SectionType.NEUTRAL
	for keyword, mapped in SECTION_KEYWORDS:
		if keyword in lowered:
			section_type = mapped
			break
	if any(keyword in lowered for keyword in SCHEDULE_KEYWORDS):
		section_type = SectionType.INFO
	return section_type


def normalize_content_line(line: str) -> str:
	"""Drop one leading bullet marker; a leading bold opener is kept."""
	text = line.strip()
	if not text.strip("*"):
		return ""
	if text.startswith(BOLD):
		return text
	if text.startswith(BULLETS):
		text = text[1:]
	return text.strip()


def _split_lines(text: str) -> List[str]:
	lines = (raw.strip() for raw in text.split("\n"))
	return [line for line in lines if line and line != "•"]


def _flush(sections: List[Section], current: Section) -> None:
	if current.content:
		sections.append(current)


def parse_sections(text: Optional[str]) -> List[Section]:
	"""Split generated narrative text into ordered, typed sections.

	Content that precedes the first recognized header is collected under
	``DEFAULT_TITLE``. A header only produces a section once at least one
	content line follows it, so consecutive headers collapse into the last one.
	"""
	if not text:
		return []
	sections: List[Section] = []
	current = Section(title=DEFAULT_TITLE)
	for line in _split_lines(text):
		kind = classify_line(line)
		if kind.is_header:
			_flush(sections, current)
			current = Section(title=kind.clean_title, type=infer_section_type(kind.clean_title))
			continue
		content = normalize_content_line(line)
		if content:
			current.content.append(content)
	_flush(sections, current)
	return sections


def sections_to_dicts(sections: Sequence[Section]) -> List[dict]:
	return [section.to_dict() for section in sections]
