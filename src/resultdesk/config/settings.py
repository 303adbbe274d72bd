from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


DEFAULT_BACKEND_URL = "http://localhost:8000"

_backend_url = os.getenv("RESULTDESK_BACKEND_URL") or os.getenv("BACKEND_URL") or DEFAULT_BACKEND_URL


@dataclass(frozen=True)
class Settings:
    backend_url: str = _backend_url
    request_timeout: float = float(os.getenv("RESULTDESK_REQUEST_TIMEOUT", "15"))
    connectivity_test_url: str = os.getenv(
        "RESULTDESK_CONNECTIVITY_TEST_URL",
        f"{_backend_url.rstrip('/')}/test",
    )

    web_mode: bool = os.getenv("RESULTDESK_WEB", "0") == "1"
    port: int = int(os.getenv("PORT", "8550"))

    log_level: str = os.getenv("RESULTDESK_LOG_LEVEL", "INFO").upper()
    log_file: str = os.getenv("RESULTDESK_LOG_FILE", "")


settings = Settings()
