import logging

from ..core.config import settings
from ..core.errors import AnalysisError, AnalysisInProgressError, TextTooShortError
from ..models.schemas import DisplayState, InputState, NormalizedResult
from .credentials import CredentialStore
from .input_gate import is_eligible, on_input
from .normalizer import normalize
from .presentation import present, present_error
from .providers import Provider
from .transport import Transport

logger = logging.getLogger(__name__)


async def run_pipeline(text: str, provider: Provider, credential: str | None, transport: Transport) -> NormalizedResult:
    """Build, send and normalize one request. Raises AnalysisError subclasses."""
    request = provider.build_request(text, credential)
    response = await transport.send(request)
    return normalize(response, provider)


class AnalysisSession:
    """Page-level state: the provider picked at startup, the credential and
    whether a request is currently in flight."""

    def __init__(self, provider: Provider, credentials: CredentialStore, transport: Transport | None = None):
        self.provider = provider
        self.credentials = credentials
        self.transport = transport or Transport()
        self.in_flight = False

    def on_input(self, text: str | None, seq: int | None = None) -> InputState:
        return on_input(text, seq)

    def save_credential(self, candidate: str | None) -> None:
        self.credentials.save(candidate)

    async def analyze(self, text: str | None) -> DisplayState:
        if self.in_flight:
            raise AnalysisInProgressError("An analysis is already running.")
        self.in_flight = True
        try:
            text = (text or "").strip()
            if not is_eligible(text):
                raise TextTooShortError(f"Please enter at least {settings.MIN_CHARS} characters to analyze.")
            result = await run_pipeline(text, self.provider, self.credentials.credential, self.transport)
        except AnalysisError as exc:
            logger.warning("Analysis failed (%s): %s", exc.__class__.__name__, exc.message)
            return present_error(exc.message)
        finally:
            self.in_flight = False

        logger.info("Analysis done: ai=%s human=%s", result.ai_score, result.human_score)
        return present(result, self.provider)
