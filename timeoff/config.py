import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

_FALSEY = {"0", "false", "no", "off"}


class FormSettings(BaseModel):
    endpoint_url: Optional[str] = None
    include_quote: bool = True
    quotes_file: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    @property
    def configured(self) -> bool:
        return bool(self.endpoint_url)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSEY


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}, expected a number")
        return default


def load_settings(dotenv: bool = True) -> FormSettings:
    """Build settings from the environment (and ``.env`` when present)."""
    if dotenv:
        load_dotenv()

    endpoint = (os.getenv("TIMEOFF_ENDPOINT_URL") or "").strip() or None
    settings = FormSettings(
        endpoint_url=endpoint,
        include_quote=_env_flag("TIMEOFF_INCLUDE_QUOTE", True),
        quotes_file=os.getenv("TIMEOFF_QUOTES_FILE") or None,
        timeout=_env_float("TIMEOFF_TIMEOUT", DEFAULT_TIMEOUT),
    )
    if not settings.configured:
        logger.warning("TIMEOFF_ENDPOINT_URL is not set; submissions will be refused")
    return settings
