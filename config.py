"""
Runtime configuration for the NeoWs feed proxy.

Values come from the process environment first and then from a ``key.env``
dotenv file, and are read once at startup into a ``ProxyConfig``.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

# constants
DEFAULT_ENV_FILE = "key.env"
DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_START_DATE = "2025-01-01"
DEFAULT_END_DATE = "2025-01-07"
FEED_URL_TEMPLATE = (
    "https://api.nasa.gov/neo/rest/v1/feed"
    "?start_date={start}&end_date={end}&api_key={api_key}"
)


@dataclass(frozen=True)
class ProxyConfig:
    api_key: Optional[str] = None
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    default_start: str = DEFAULT_START_DATE
    default_end: str = DEFAULT_END_DATE
    feed_url_template: str = FEED_URL_TEMPLATE
    request_timeout: Optional[float] = None  # None waits forever


def load_config(env_file: str = DEFAULT_ENV_FILE, environ: Optional[Mapping[str, str]] = None) -> ProxyConfig:
    """Build a ProxyConfig from the dotenv file overlaid with the environment.

    Empty values are treated as unset, so ``PORT=`` still means port 3000.
    """
    values = {k: v for k, v in dotenv_values(env_file).items() if v is not None}
    values.update(os.environ if environ is None else environ)

    api_key = values.get("YOUR_API_KEY") or None
    if not api_key:
        logger.warning("YOUR_API_KEY not set. Put YOUR_API_KEY=... in %s", env_file)

    timeout = values.get("REQUEST_TIMEOUT")
    return ProxyConfig(
        api_key=api_key,
        port=int(values.get("PORT") or DEFAULT_PORT),
        host=values.get("HOST") or DEFAULT_HOST,
        request_timeout=float(timeout) if timeout else None,
    )
