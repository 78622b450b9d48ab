# textcheck/api/routes/analyze.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...models.schemas import AnalyzeRequest, DisplayState, InputRequest, InputState
from ...api.deps import get_session
from ...core.errors import AnalysisInProgressError
from ...services.presentation import present_error
from ...services.session import AnalysisSession

router = APIRouter(prefix="/api")


@router.post("/input", response_model=InputState)
async def input_changed(request: InputRequest, session: AnalysisSession = Depends(get_session)):
    return session.on_input(request.text, request.seq)


@router.post("/analyze", response_model=DisplayState)
async def analyze_text_route(request: AnalyzeRequest, session: AnalysisSession = Depends(get_session)):
    """
    Runs one analysis against the configured provider.
    Every failure comes back as a 200 with an ``error`` display state. A
    second click while a request is still running gets a 409, whose body is
    also an ``error`` display state so the page can draw it the same way.
    """
    try:
        return await session.analyze(request.text)
    except AnalysisInProgressError as e:
        return JSONResponse(present_error(e.message).model_dump(mode="json"), status_code=409)
