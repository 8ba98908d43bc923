from __future__ import annotations
from typing import Any, Dict, List, Sequence

from .emphasis import split_emphasis
from .segmenter import Section, SectionType


# Color family and icon a client uses for each section type.
SECTION_STYLES: Dict[SectionType, Dict[str, str]] = {
	SectionType.POSITIVE: {"color": "emerald", "icon": "✅"},
	SectionType.NEGATIVE: {"color": "rose", "icon": "⚠️"},
	SectionType.STRATEGY: {"color": "blue", "icon": "🎯"},
	SectionType.INFO: {"color": "indigo", "icon": "📅"},
	SectionType.NEUTRAL: {"color": "gray", "icon": "📝"},
}


def render_section(section: Section) -> Dict[str, Any]:
	style = SECTION_STYLES[section.type]
	return {
		**section.to_dict(),
		"color": style["color"],
		"icon": style["icon"],
		"lines": [[span.to_dict() for span in split_emphasis(line)] for line in section.content],
	}


def render_sections(sections: Sequence[Section]) -> List[Dict[str, Any]]:
	return [render_section(s) for s in sections]
