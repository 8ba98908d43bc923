"""Tests for the httpx-based Gemini client, using httpx.MockTransport."""
import asyncio
import json

import httpx
import pytest

from exam_mentor.errors import UpstreamGenerationError
from exam_mentor.gemini_client import GeminiClient
from exam_mentor.settings import settings


def _gemini_reply(text: str) -> dict:
	return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


@pytest.fixture(autouse=True)
def _ai_studio(monkeypatch):
	monkeypatch.setattr(settings, "gemini_provider", "ai_studio")
	monkeypatch.setattr(settings, "openrouter_api_key", None)


def _run(client: GeminiClient, prompt: str = "hi", **kwargs) -> str:
	async def go() -> str:
		try:
			return await client.generate(prompt, **kwargs)
		finally:
			await client.aclose()

	return asyncio.run(go())


class TestGeminiClient:
	def test_requires_api_key(self, monkeypatch) -> None:
		monkeypatch.setattr(settings, "gemini_api_key", None)
		with pytest.raises(ValueError):
			GeminiClient()

	def test_returns_candidate_text(self) -> None:
		seen = {}

		def handler(request: httpx.Request) -> httpx.Response:
			seen["key"] = request.url.params.get("key")
			seen["body"] = json.loads(request.content)
			return httpx.Response(200, json=_gemini_reply("Strength:\n- Calculus"))

		client = GeminiClient("test-key", model="gemini-test", transport=httpx.MockTransport(handler))
		text = _run(client, "analyze", system_instruction="be a mentor", temperature=0.7)
		assert text == "Strength:\n- Calculus"
		assert seen["key"] == "test-key"
		assert seen["body"]["systemInstruction"] == {"parts": [{"text": "be a mentor"}]}
		assert seen["body"]["generationConfig"] == {"temperature": 0.7}
		assert seen["body"]["contents"][0]["parts"][0]["text"] == "analyze"

	def test_joins_multiple_parts(self) -> None:
		def handler(request: httpx.Request) -> httpx.Response:
			body = {"candidates": [{"content": {"parts": [{"text": "a"}, {"text": "b"}]}}]}
			return httpx.Response(200, json=body)

		client = GeminiClient("k", transport=httpx.MockTransport(handler))
		assert _run(client) == "ab"

	def test_http_error_raises(self) -> None:
		client = GeminiClient("k", transport=httpx.MockTransport(lambda r: httpx.Response(500, text="down")))
		with pytest.raises(UpstreamGenerationError, match="500"):
			_run(client)

	def test_unexpected_payload_raises(self) -> None:
		client = GeminiClient("k", transport=httpx.MockTransport(lambda r: httpx.Response(200, json={"candidates": []})))
		with pytest.raises(UpstreamGenerationError):
			_run(client)

	def test_vertex_uses_header_auth(self, monkeypatch) -> None:
		monkeypatch.setattr(settings, "gemini_provider", "vertex")
		seen = {}

		def handler(request: httpx.Request) -> httpx.Response:
			seen["header"] = request.headers.get("x-goog-api-key")
			seen["host"] = request.url.host
			return httpx.Response(200, json=_gemini_reply("ok"))

		client = GeminiClient("vk", transport=httpx.MockTransport(handler))
		assert _run(client) == "ok"
		assert seen["header"] == "vk"
		assert seen["host"].endswith("aiplatform.googleapis.com")

	def test_openrouter_fallback(self, monkeypatch) -> None:
		monkeypatch.setattr(settings, "openrouter_api_key", "or-key")

		def handler(request: httpx.Request) -> httpx.Response:
			if request.url.host == "openrouter.ai":
				body = json.loads(request.content)
				assert body["messages"][-1] == {"role": "user", "content": "hi"}
				return httpx.Response(200, json={"choices": [{"message": {"content": "from fallback"}}]})
			return httpx.Response(503)

		client = GeminiClient("k", transport=httpx.MockTransport(handler))
		assert _run(client) == "from fallback"

	def test_fallback_failure_raises(self, monkeypatch) -> None:
		monkeypatch.setattr(settings, "openrouter_api_key", "or-key")
		client = GeminiClient("k", transport=httpx.MockTransport(lambda r: httpx.Response(502)))
		with pytest.raises(UpstreamGenerationError, match="fallback"):
			_run(client)
