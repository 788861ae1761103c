# =============================================================================
# core/config.py  —  Startup configuration
# =============================================================================
#
# Settings are read ONCE, at startup, from the environment (main.py loads a
# .env file first via python-dotenv).  The resulting Settings object is handed
# to the server explicitly; nothing in core/ reads os.environ at call time.
#
#   INTERZOID_API_KEY    process-wide API key (unset → x402 payment flow)
#   INTERZOID_BASE_URL   API base address (default https://api.interzoid.com)
#   INTERZOID_LOG_LEVEL  logging level name (default INFO)
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://api.interzoid.com"
HTTP_TIMEOUT_SECONDS = 30.0

SERVER_NAME = "Interzoid Data Quality APIs"
SERVER_VERSION = "1.0.0"


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            api_key=env.get("INTERZOID_API_KEY", "").strip(),
            base_url=env.get("INTERZOID_BASE_URL", "").strip() or DEFAULT_BASE_URL,
            log_level=env.get("INTERZOID_LOG_LEVEL", "").strip().upper() or "INFO",
        )
