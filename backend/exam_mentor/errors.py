from __future__ import annotations


class MalformedInputError(ValueError):
	"""The uploaded test report is not valid JSON or does not match the report schema."""


class UpstreamGenerationError(RuntimeError):
	"""The text-generation service failed or returned an unusable payload."""
