import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_FLASK_API_URL = "http://host.docker.internal:5000"


@dataclass(frozen=True)
class Settings:
    flask_api_url: str = DEFAULT_FLASK_API_URL
    upstream_timeout: Optional[float] = None
    allowed_origins: Optional[List[str]] = None
    log_level: str = "INFO"


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid UpstreamTimeout %r", raw)
        return None


def get_settings() -> Settings:
    """Read gateway settings from the environment on every call."""
    flask_api_url = (
        os.getenv("FlaskApiUrl")
        or os.getenv("FLASK_API_URL")
        or DEFAULT_FLASK_API_URL
    )
    origins = os.getenv("ALLOWED_ORIGINS", "*")
    return Settings(
        flask_api_url=flask_api_url,
        upstream_timeout=_parse_timeout(os.getenv("UpstreamTimeout")),
        allowed_origins=[o.strip() for o in origins.split(",") if o.strip()] or ["*"],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
