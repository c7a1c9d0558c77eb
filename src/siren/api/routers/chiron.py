"""
Text intake router.

Receives transcribed emergency reports and runs them through the
normalization pipeline.
"""

from typing import Any

from fastapi import APIRouter

from ...config import get_logger
from ...models import AudioTextRequest
from ...services import IncidentExtractionService
from ..dependencies import ExtractionService
from ..responses import TextValidationException

router = APIRouter(prefix="/chiron", tags=["intake"])

logger = get_logger("api.chiron")


@router.post("/audio-output")
async def process_audio_text(
    request: AudioTextRequest | None = None,
    extraction_service: IncidentExtractionService = ExtractionService,
) -> dict[str, Any]:
    """
    Extract and store an incident record from report text.

    Returns the extracted fields, the fallback record when extraction
    failed, or ``{"error": ...}`` when the pipeline broke unexpectedly.

    A missing body, a null or empty ``text``, and whitespace-only text are
    all answered with 400 ``Text is missing``; blank reports never reach
    the oracle.
    """
    if request is None or request.text is None or not request.text.strip():
        raise TextValidationException()

    logger.info("Report text received", text_length=len(request.text))
    return await extraction_service.extract_and_store(request.text)


__all__ = ["router"]
