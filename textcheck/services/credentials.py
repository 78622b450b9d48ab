import logging

from ..core.config import settings
from ..core.errors import InvalidCredentialError
from ..db.database import init_db
from ..db.repository import get_preference, set_preference

logger = logging.getLogger(__name__)


class CredentialStore:
    """Keeps the single user-supplied API key.

    The raw value is only handed out through ``credential``; anything
    meant for display goes through ``display_value``, which is the mask.
    """

    def __init__(self, db_file: str | None = None, storage_key: str = settings.CREDENTIAL_STORAGE_KEY,
                 mask: str = settings.CREDENTIAL_MASK):
        self.db_file = db_file
        self.storage_key = storage_key
        self.mask = mask
        self._credential: str | None = None
        init_db(db_file)

    @property
    def credential(self) -> str | None:
        return self._credential

    @property
    def display_value(self) -> str:
        return self.mask if self._credential else ""

    def load(self) -> str | None:
        self._credential = get_preference(self.storage_key, self.db_file) or None
        if self._credential:
            logger.info("Stored credential found")
        return self._credential

    def save(self, candidate: str | None) -> None:
        candidate = (candidate or "").strip()
        if not candidate or candidate == self.mask:
            raise InvalidCredentialError("Please enter a valid API key.")
        set_preference(self.storage_key, candidate, self.db_file)
        self._credential = candidate
        logger.info("Credential saved")
