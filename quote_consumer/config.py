"""Environment-driven settings.

All knobs are plain environment variables read once when the app is
built; `Settings` is passed explicitly to `create_app`.
"""

import os
from dataclasses import dataclass

DEFAULT_QUOTE_SERVICE_URL = "http://gturnquist-quoters.cfapps.io"


@dataclass(frozen=True)
class Settings:
    quote_service_url: str = DEFAULT_QUOTE_SERVICE_URL
    # Seconds; bounds connect, read and pool waits of each upstream call
    quote_service_timeout: float = 10.0
    startup_probe: bool = True

    @property
    def random_quote_url(self) -> str:
        return self.quote_service_url.rstrip("/") + "/api/random"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            quote_service_url=os.getenv(
                "QUOTE_SERVICE_URL", DEFAULT_QUOTE_SERVICE_URL
            ),
            quote_service_timeout=float(os.getenv("QUOTE_SERVICE_TIMEOUT", "10")),
            # Startup probe can be toggled via env var (0 means disabled)
            startup_probe=os.getenv("QUOTE_STARTUP_PROBE", "1") != "0",
        )
