"""IScriptSegmenter adapter using the Gemini REST API (structured JSON output)."""

import json
import logging
import re
from typing import Any, Dict, List

import requests

from broll_organizer.domain.errors import InvalidCredential, SegmentationEmpty, SegmentationError
from broll_organizer.domain.models import ScriptSegment
from broll_organizer.ports.interfaces import IScriptSegmenter

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are a professional video editor specializing in B-Roll. "
    "You prioritize fast-paced hooks and complete coverage of the script."
)

PROMPT_TEMPLATE = """
Analyze the ENTIRE video script provided below.

Script Content:
\"\"\"
{script}
\"\"\"

TASK:
Break down the text above into logical visual segments (scenes) from start to finish.

PACING RULES:
1. THE HOOK (first 20% of text): rapid cuts. Split the first 3-5 sentences into short
   sub-segments of 4-8 words or one per specific action.
2. THE BODY (remaining text): natural pacing, one visual per sentence or complete thought.

CRITICAL INSTRUCTIONS:
1. Process every sentence until the very last word. Do not truncate.
2. Ignore the original formatting and paragraphs.
3. Do not group multiple sentences into one segment unless they are very short.

For each segment, generate 3 VISUAL SEARCH TERMS for stock footage:
- Always in English, even if the script is not.
- Keywords only, no sentences, no "cinematic shot", "video of" or "4k".
Order them from specific to broad:
1. Descriptive: subject + action + mood/setting (max 5-6 words), e.g. "Sad business woman crying rain window"
2. Standard: main subject + action (max 3-4 words), e.g. "Woman crying window"
3. Broad: a single very broad noun or category, e.g. "Rain"
If term 1 finds nothing the system tries term 2, and term 3 must always work.
"""

RESPONSE_SCHEMA = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "text": {"type": "STRING", "description": "The text segment"},
            "search_terms": {
                "type": "ARRAY",
                "items": {"type": "STRING"},
                "description": "List of 3 terms: [Descriptive, Standard, Broad]",
            },
        },
        "required": ["text", "search_terms"],
    },
}


def flatten_script(script: str) -> str:
    """Collapse paragraphs and whitespace runs so the model reads one continuous stream."""
    return re.sub(r"\s+", " ", script or "").strip()


def parse_segments(raw: Any) -> List[ScriptSegment]:
    """Turn the model's JSON array into segments, dropping unusable entries."""
    if not isinstance(raw, list):
        raise SegmentationError("Gemini returned an unexpected response shape")
    segments = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        text = str(item.get("text") or "").strip()
        terms = [str(t).strip() for t in item.get("search_terms") or [] if str(t).strip()]
        if not text or not terms:
            continue
        segments.append(ScriptSegment(text=text, search_terms=tuple(terms)))
    return segments


class GeminiScriptSegmenter(IScriptSegmenter):
    """Asks Gemini to split a script into scenes with three ranked search terms each."""

    BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"

    def __init__(self, api_key: str, model: str = "gemini-2.5-flash", timeout_sec: float = 60):
        self._api_key = api_key
        self._model = model
        self._timeout = timeout_sec

    def segment(self, script: str) -> List[ScriptSegment]:
        clean = flatten_script(script)
        if not clean:
            raise SegmentationEmpty("Script is empty")
        if not self._api_key:
            raise InvalidCredential("A Gemini API key is required. Set GEMINI_API_KEY in .env")

        text = self._generate(PROMPT_TEMPLATE.format(script=clean))
        try:
            raw = json.loads(text) if text else []
        except ValueError as e:
            raise SegmentationError("Gemini returned invalid JSON") from e

        segments = parse_segments(raw)
        if not segments:
            raise SegmentationEmpty("The AI did not return any valid segment")
        logger.info("Gemini produced %d segments", len(segments))
        return segments

    def _generate(self, prompt: str) -> str:
        url = f"{self.BASE_URL}/{self._model}:generateContent"
        data: Dict[str, Any] = {
            "systemInstruction": {"parts": [{"text": SYSTEM_INSTRUCTION}]},
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
            },
        }
        headers = {
            "x-goog-api-key": self._api_key,
            "Content-Type": "application/json",
        }
        try:
            response = requests.post(url, headers=headers, json=data, timeout=self._timeout)
        except requests.exceptions.Timeout as e:
            raise SegmentationError(f"Gemini request timed out after {self._timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise SegmentationError(f"Could not reach Gemini: {e}") from e

        if response.status_code != 200:
            message = _error_message(response)
            if response.status_code in (401, 403) or "api key" in message.lower():
                raise InvalidCredential(f"Gemini API key is invalid: {message}")
            raise SegmentationError(f"Gemini API returned status {response.status_code}: {message}")

        try:
            result = response.json()
        except ValueError as e:
            raise SegmentationError("Gemini returned a non-JSON body") from e

        candidate = (result.get("candidates") or [{}])[0]
        parts = (candidate.get("content") or {}).get("parts") or []
        if candidate.get("finishReason") == "MAX_TOKENS":
            logger.warning("Gemini response hit the token limit; the last scenes may be missing")
        return "".join(p.get("text", "") for p in parts)


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:300]
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        return body["error"].get("message") or response.text[:300]
    return response.text[:300]
