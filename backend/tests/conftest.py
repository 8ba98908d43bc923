from __future__ import annotations
import copy
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from exam_mentor.db import Base, get_db
from exam_mentor.demo_data import DEMO_REPORT
from exam_mentor.errors import UpstreamGenerationError
from exam_mentor.main import app
from exam_mentor.report import parse_report
from exam_mentor.routers.reports import get_gemini_client


SAMPLE_ANALYSIS = """Category & Overall Diagnosis:
Score indicates **Excellent** performance.
**Strength**
- Physics conceptual clarity
Weak Chapters:
- POC: 1 incorrect
"""

SAMPLE_PLAN = """**Day 1: Physics Fix & Chemistry Recall**
- Morning: Magnetic Effect of Current, 30 questions
Weekend Strategy:
- Full mock on Sunday
"""


class FakeGemini:
	"""Stands in for GeminiClient; replies from a queue or raises."""

	def __init__(self, replies: Optional[List[str]] = None, error: Optional[Exception] = None) -> None:
		self.replies = list(replies or [])
		self.error = error
		self.prompts: List[str] = []
		self.calls: List[dict] = []

	async def generate(self, prompt: str, **kwargs) -> str:
		self.prompts.append(prompt)
		self.calls.append(kwargs)
		if self.error is not None:
			raise self.error
		return self.replies.pop(0) if self.replies else ""

	async def aclose(self) -> None:
		pass


@pytest.fixture
def demo_payload() -> dict:
	return copy.deepcopy(DEMO_REPORT)


@pytest.fixture
def demo_report(demo_payload):
	return parse_report(demo_payload)


@pytest.fixture
def make_gemini():
	return FakeGemini


@pytest.fixture
def fake_gemini() -> FakeGemini:
	return FakeGemini(replies=[SAMPLE_ANALYSIS, SAMPLE_PLAN])


@pytest.fixture
def failing_gemini() -> FakeGemini:
	return FakeGemini(error=UpstreamGenerationError("boom"))


@pytest.fixture
def api(tmp_path, fake_gemini):
	engine = create_engine(
		f"sqlite:///{tmp_path / 'test.db'}",
		connect_args={"check_same_thread": False},
		future=True,
	)
	Base.metadata.create_all(bind=engine)
	TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)

	def _get_db():
		db = TestingSession()
		try:
			yield db
		finally:
			db.close()

	app.dependency_overrides[get_db] = _get_db
	app.dependency_overrides[get_gemini_client] = lambda: fake_gemini
	try:
		yield TestClient(app)
	finally:
		app.dependency_overrides.clear()
		engine.dispose()
