from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List


_BOLD_SPLIT_RE = re.compile(r"(\*\*.*?\*\*)")
_BOLD_RE = re.compile(r"\*\*")


@dataclass(frozen=True)
class EmphasisSpan:
	text: str
	emphasized: bool = False

	def to_dict(self) -> dict:
		return {"text": self.text, "emphasized": self.emphasized}


def split_emphasis(line: str) -> List[EmphasisSpan]:
	"""Break a content line into plain and bold runs.

	Only balanced ``**...**`` pairs become emphasized runs; a stray delimiter
	stays in the surrounding plain text.
	"""
	spans: List[EmphasisSpan] = []
	for part in _BOLD_SPLIT_RE.split(line or ""):
		if not part:
			continue
		if len(part) >= 4 and part.startswith("**") and part.endswith("**"):
			inner = part[2:-2]
			if inner:
				spans.append(EmphasisSpan(inner, True))
			continue
		spans.append(EmphasisSpan(part))
	return spans


def strip_bold(text: str) -> str:
	return _BOLD_RE.sub("", text or "")
