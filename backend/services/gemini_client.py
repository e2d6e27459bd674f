"""Google Gemini API wrapper with error handling.

Model output is untrusted: it may be wrapped in code fences or surrounded by
prose. ``parse_json_response`` strips fences and keeps the span from the
first ``{`` to the last ``}``. That span is wrong when the model emits several
JSON-like blocks or unbalanced braces inside strings; such responses simply
fail to parse and callers fall back.
"""

import asyncio
import json
import logging
import re

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None

_LEADING_FENCE_RE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_TRAILING_FENCE_RE = re.compile(r"\s*```$")


def is_configured() -> bool:
    return bool(settings.gemini_api_key)


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


async def generate_text(
    prompt: str,
    temperature: float = 0.3,
    max_output_tokens: int = 2048,
    timeout: float | None = None,
) -> str | None:
    """Send a prompt to Gemini. Returns ``None`` on any failure or timeout."""
    client = get_client()
    if client is None:
        return None

    timeout = settings.llm_timeout_seconds if timeout is None else timeout
    try:
        response = await asyncio.wait_for(
            client.aio.models.generate_content(
                model=settings.gemini_model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=temperature,
                    max_output_tokens=max_output_tokens,
                ),
            ),
            timeout=timeout,
        )
        return response.text or None
    except asyncio.TimeoutError:
        logger.warning("Gemini request timed out after %.1fs", timeout)
        return None
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None


def parse_json_response(text: str | None) -> dict | None:
    """Parse a model response that should contain a single JSON object."""
    if not text:
        return None

    cleaned = _LEADING_FENCE_RE.sub("", text.strip())
    cleaned = _TRAILING_FENCE_RE.sub("", cleaned)

    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start != -1 and end > start:
        cleaned = cleaned[start:end + 1]

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        return None

    if not isinstance(data, dict):
        logger.error("Gemini response is JSON but not an object: %s", type(data).__name__)
        return None
    return data


async def generate_json(
    prompt: str,
    temperature: float = 0.3,
    max_output_tokens: int = 2048,
    timeout: float | None = None,
) -> dict | None:
    """Send a prompt to Gemini and parse the JSON response."""
    text = await generate_text(
        prompt,
        temperature=temperature,
        max_output_tokens=max_output_tokens,
        timeout=timeout,
    )
    return parse_json_response(text)
