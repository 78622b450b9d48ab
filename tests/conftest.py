import httpx
import pytest

from textcheck.services.credentials import CredentialStore
from textcheck.services.providers import GeminiProvider, ProxyProvider
from textcheck.services.session import AnalysisSession
from textcheck.services.transport import Transport

PROXY_URL = "http://detector.test/api/detect"
GEMINI_URL = "https://gemini.test/v1beta/models/test:generateContent"

LONG_TEXT = (
    "The committee met on Thursday to review the budget for the coming year. "
    "Several members raised concerns about the rising cost of maintenance, "
    "and the chair agreed to revisit the figures before the next meeting."
)


def gemini_body(generated: str) -> dict:
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": generated}]}}]}


@pytest.fixture
def store(tmp_path):
    return CredentialStore(db_file=str(tmp_path / "textcheck.db"))


@pytest.fixture
def proxy():
    return ProxyProvider(PROXY_URL)


@pytest.fixture
def gemini():
    return GeminiProvider(GEMINI_URL)


@pytest.fixture
def make_session(store):
    """Build a session whose upstream is answered by ``handler``."""
    def _make(provider, handler):
        transport = Transport(transport=httpx.MockTransport(handler))
        return AnalysisSession(provider, store, transport)
    return _make
