import os
from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name)
    if not raw:
        return None
    return float(raw)


class Settings:
    # proxy | gemini, chosen once at startup
    PROVIDER: str = os.getenv("TEXTCHECK_PROVIDER", "proxy")
    PROXY_URL: str = os.getenv("TEXTCHECK_PROXY_URL", "http://127.0.0.1:8000/api/detect")
    GEMINI_API_URL: str = os.getenv(
        "GEMINI_API_URL",
        "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.5-flash:generateContent",
    )
    # server-side key used only by the /api/detect relay
    GEMINI_API_KEY: str | None = os.getenv("GEMINI_API_KEY")
    HTTP_TIMEOUT: float | None = _optional_float("TEXTCHECK_HTTP_TIMEOUT")

    MIN_CHARS = 100
    MAX_CHARS = 25000
    CREDENTIAL_STORAGE_KEY = "gemini_api_key"
    CREDENTIAL_MASK = "************"

    # paths
    BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    PROJECT_ROOT = os.path.dirname(BASE_DIR)
    STATIC_DIR = os.path.join(PROJECT_ROOT, "static")
    DATA_DIR = os.path.join(PROJECT_ROOT, "data")
    DB_FILE = os.getenv("TEXTCHECK_DB_FILE", os.path.join(DATA_DIR, "textcheck.db"))

settings = Settings()
