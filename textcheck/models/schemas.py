from enum import Enum
from pydantic import BaseModel, Field

class AnalyzeRequest(BaseModel):
    text: str

class InputRequest(BaseModel):
    text: str
    # echoed back so the page can drop replies to older keystrokes
    seq: int | None = None

class CredentialUpdate(BaseModel):
    api_key: str

class CredentialStatus(BaseModel):
    configured: bool
    display_value: str
    provider: str

class InputState(BaseModel):
    length: int
    max_chars: int
    counter_text: str
    eligible: bool
    results_hidden: bool = True
    seq: int | None = None

class NormalizedResult(BaseModel):
    human_score: int = Field(ge=0, le=100)
    ai_score: int = Field(ge=0, le=100)
    verdict: str

class Severity(str, Enum):
    SUCCESS = "success"
    CAUTION = "caution"
    WARNING_MILD = "warning-mild"
    WARNING = "warning"
    ERROR = "error"

class DisplayState(BaseModel):
    human_score: int
    ai_score: int
    verdict: str
    severity: Severity
    human_bar: str
    ai_bar: str
    css_class: str

class DetectResponse(BaseModel):
    """Body of the proxy backend contract (``POST /api/detect``)."""
    human_percentage: int | None = None
    ai_percentage: int | None = None
    conclusion: str | None = None
    error: str | None = None
