"""
Normalization pipeline: free-text emergency reports to incident records.

The raw report is wrapped in a fixed extraction prompt, sent to the oracle,
and the JSON object in its reply is reshaped into the seven known record
fields. Whenever the oracle fails or its reply is not a JSON object, a
fallback record that keeps the raw text as the summary is stored instead.
"""

import json
import re
from datetime import datetime
from typing import Any, Protocol

from ..config import get_logger
from ..core.exceptions import EmptyTextError, OracleError, SirenError
from ..models import RECORD_FIELDS, TIME_FORMAT, Department
from .bridge import IncidentBridgeService

ERROR_PAYLOAD = {"error": "Failed to call the oracle or parse its response"}

FALLBACK_STATUS = "Unknown"

EXTRACTION_PROMPT_TEMPLATE = """You are an intelligent JSON extractor for emergency cases.
Analyze the given emergency report text and extract the following fields:
- name
- department (always one of: {departments})
- time
- priority
- location
- summary
- status

Rules:
1. Always return ONLY valid JSON (no markdown, no explanations).
2. If a field is missing in text, omit it (do not output null).
3. Department must be one of the allowed values above.
4. If time is not mentioned, leave it out (backend will auto-fill).

Example Input:
"There is a fire in Building B and two cars are burning."

Example Output:
{{
  "department": "fire",
  "priority": "high",
  "location": "Building B",
  "summary": "Fire incident with two cars burning"
}}

Text: "{text}"
"""

_FENCE_RE = re.compile(r"```(?:json)?")


class Oracle(Protocol):
    async def generate(self, prompt: str) -> str: ...


def build_extraction_prompt(text: str) -> str:
    """Embed a raw report in the extraction instructions."""
    departments = ", ".join(department.value for department in Department.routable())
    return EXTRACTION_PROMPT_TEMPLATE.format(departments=departments, text=text)


def strip_code_fences(reply: str) -> str:
    """Remove markdown code fence markers and surrounding whitespace."""
    return _FENCE_RE.sub("", reply).strip()


def current_timestamp() -> str:
    return datetime.now().strftime(TIME_FORMAT)


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def reshape_extraction(extracted: dict[str, Any]) -> dict[str, str]:
    """Keep the known record fields that hold a value, as strings."""
    return {field: _as_text(extracted[field]) for field in RECORD_FIELDS if extracted.get(field) is not None}


class IncidentExtractionService:
    """Converts unstructured report text into a stored incident record."""

    def __init__(self, oracle: Oracle, bridge: IncidentBridgeService):
        self.oracle = oracle
        self.bridge = bridge
        self.logger = get_logger("service.extraction")

    async def extract_and_store(self, text: str | None) -> dict[str, Any]:
        """Extract a record from a report, persist it once and return it.

        Args:
            text: The raw report

        Returns:
            The extracted fields, the fallback record, or the generic error payload

        Raises:
            EmptyTextError: If there is no text; the oracle is not called
            RecordProcessingError: If the record cannot be saved
            RepositoryError: If the store fails
        """
        if text is None or not text.strip():
            raise EmptyTextError()

        try:
            result = await self._extract(text)
        except SirenError:
            raise
        except Exception as e:
            self.logger.error("Extraction failed unexpectedly", error=str(e), error_type=type(e).__name__, exc_info=True)
            return dict(ERROR_PAYLOAD)

        await self.bridge.ingest(result)
        return result

    async def _extract(self, text: str) -> dict[str, Any]:
        try:
            reply = await self.oracle.generate(build_extraction_prompt(text))
        except OracleError as e:
            self.logger.warning("Oracle call failed, storing fallback record", error=str(e))
            return self._fallback(text)

        cleaned = strip_code_fences(reply)
        try:
            extracted = json.loads(cleaned)
        except json.JSONDecodeError:
            self.logger.warning("Failed to parse oracle reply as JSON, storing fallback record", reply=cleaned[:500])
            return self._fallback(text)

        if not isinstance(extracted, dict):
            self.logger.warning("Oracle reply is not a JSON object, storing fallback record", reply_type=type(extracted).__name__)
            return self._fallback(text)

        result = reshape_extraction(extracted)
        result.setdefault("time", current_timestamp())

        self.logger.info("Incident extracted", fields=sorted(result), department=result.get("department"))
        return result

    def _fallback(self, text: str) -> dict[str, Any]:
        return {"summary": text, "status": FALLBACK_STATUS, "time": current_timestamp()}
