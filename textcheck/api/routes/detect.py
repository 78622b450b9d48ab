# textcheck/api/routes/detect.py
import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...models.schemas import AnalyzeRequest, DetectResponse
from ...api.deps import get_transport
from ...core.config import settings
from ...core.errors import AnalysisError
from ...services.input_gate import is_eligible
from ...services.providers import GeminiProvider
from ...services.session import run_pipeline
from ...services.transport import Transport

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(DetectResponse(error=message).model_dump(exclude_none=True), status_code=status_code)


@router.post("/detect", response_model=DetectResponse, response_model_exclude_none=True)
async def detect_route(request: AnalyzeRequest, transport: Transport = Depends(get_transport)):
    """
    Proxy backend: the browser only sends text, the Gemini key stays on the server.
    Answers {human_percentage, ai_percentage, conclusion} or {error}.
    """
    text = (request.text or "").strip()
    if not is_eligible(text):
        return _error(400, f"Please enter at least {settings.MIN_CHARS} characters to analyze.")
    if len(text) > settings.MAX_CHARS:
        return _error(413, f"Text is too long (maximum {settings.MAX_CHARS} characters).")
    if not settings.GEMINI_API_KEY:
        logger.warning("/api/detect called but GEMINI_API_KEY is not configured")
        return _error(503, "The detection service is not configured.")

    try:
        result = await run_pipeline(text, GeminiProvider(settings.GEMINI_API_URL), settings.GEMINI_API_KEY, transport)
    except AnalysisError as e:
        logger.warning(f"Upstream detection failed: {e.message}")
        return _error(502, e.message)

    return DetectResponse(
        human_percentage=result.human_score,
        ai_percentage=result.ai_score,
        conclusion=result.verdict,
    )
