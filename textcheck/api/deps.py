from functools import lru_cache

from ..services.credentials import CredentialStore
from ..services.providers import get_provider
from ..services.session import AnalysisSession
from ..services.transport import Transport


@lru_cache
def get_transport() -> Transport:
    return Transport()


@lru_cache
def get_session() -> AnalysisSession:
    # one session per process; the stored credential is read once here
    store = CredentialStore()
    store.load()
    return AnalysisSession(get_provider(), store, get_transport())
