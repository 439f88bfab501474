"""
Claude API key must be defined in a .env file in the backend root:

ANTHROPIC_API_KEY=your_real_key_here

The app loads environment variables automatically using python-dotenv.

Structured generation is done with a single forced tool whose input_schema is
the requested output schema, so the model answers with a JSON object instead
of free text.
"""

import json
import logging
import os
from pathlib import Path

from anthropic import Anthropic
from dotenv import load_dotenv

from errors import GenerationError

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

logger = logging.getLogger(__name__)

CLAUDE_MODEL = os.getenv("CLAUDE_MODEL", "").strip() or "claude-3-5-sonnet-latest"
TEMPERATURE = float(os.getenv("CLAUDE_TEMPERATURE", "0.2"))
MAX_TOKENS = int(os.getenv("CLAUDE_MAX_TOKENS", "4000"))

TOOL_NAME = "submit_seo_report"
TOOL_DESCRIPTION = "Submit the complete SEO analysis report for the website."

SYSTEM_MESSAGE = """You are a senior SEO analyst.
Always answer by calling the provided tool with a complete report.
Recommendations must be specific to the provided URL and page content."""


def _extract_json(text: str) -> dict | None:
    if not text:
        return None

    text = text.strip()

    # Remove markdown fences
    if text.startswith("```"):
        text = text.replace("```json", "").replace("```", "").strip()

    start = text.find("{")
    end = text.rfind("}")

    if start == -1 or end == -1:
        return None

    json_str = text[start : end + 1]

    # Replace smart quotes
    json_str = (
        json_str
        .replace("“", '"')
        .replace("”", '"')
        .replace("‘", "'")
        .replace("’", "'")
    )

    try:
        parsed = json.loads(json_str)
    except ValueError:
        logger.warning("Could not parse JSON from text response (%d chars)", len(json_str))
        return None
    return parsed if isinstance(parsed, dict) else None


def _extract_tool_input(response: object) -> dict | None:
    for block in getattr(response, "content", []) or []:
        if getattr(block, "type", None) == "tool_use" and getattr(block, "name", None) == TOOL_NAME:
            payload = getattr(block, "input", None)
            if isinstance(payload, dict):
                return payload
    return None


def _extract_response_text(response: object) -> str:
    content = ""
    for block in getattr(response, "content", []) or []:
        text = getattr(block, "text", None)
        if text:
            content += text
    return content.strip()


class ClaudeStructuredGenerator:
    """Ask Claude for an object that conforms to a JSON schema."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = CLAUDE_MODEL,
        max_tokens: int = MAX_TOKENS,
        temperature: float = TEMPERATURE,
        client: Anthropic | None = None,
    ):
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._api_key = api_key if api_key is not None else os.getenv("ANTHROPIC_API_KEY", "")
        self._client = client

    @property
    def client(self) -> Anthropic:
        if self._client is None:
            if not self._api_key:
                raise GenerationError("ANTHROPIC_API_KEY not found in environment.")
            self._client = Anthropic(api_key=self._api_key)
        return self._client

    def generate_structured(self, prompt: str, schema: dict) -> dict:
        """
        Return the structured object produced for `prompt`.
        Raises GenerationError on API failure or when no object is returned.
        """
        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                system=SYSTEM_MESSAGE,
                tools=[
                    {
                        "name": TOOL_NAME,
                        "description": TOOL_DESCRIPTION,
                        "input_schema": schema,
                    }
                ],
                tool_choice={"type": "tool", "name": TOOL_NAME},
                messages=[{"role": "user", "content": prompt}],
            )
        except GenerationError:
            raise
        except Exception as exc:
            raise GenerationError(f"Claude request failed: {exc}") from exc

        if getattr(response, "stop_reason", None) == "max_tokens":
            logger.warning("Claude output hit max_tokens for model=%s", self.model)

        payload = _extract_tool_input(response)
        if payload is None:
            # Some models answer in text despite tool_choice; accept a JSON object there.
            payload = _extract_json(_extract_response_text(response))
        if payload is None:
            raise GenerationError("Claude returned no structured output.")

        logger.info("Claude structured output received (model=%s, keys=%d)", self.model, len(payload))
        return payload
