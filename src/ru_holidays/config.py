"""
Configuration for the holiday calendar.
Read from environment variables and an optional .env file.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load .env file (only relevant in production)
load_dotenv()


def _as_bool(value: Optional[str], default: bool) -> bool:
    if value is None or value == "":
        return default
    return value.lower() == "true"


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime settings."""

    strict_regions: bool = False
    overrides_path: Optional[str] = None
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        """Builds settings from RU_HOLIDAYS_* variables."""
        port = os.getenv("RU_HOLIDAYS_PORT", "8000")
        try:
            port_int = int(port)
        except ValueError:
            raise ValueError(f"RU_HOLIDAYS_PORT must be an integer, got {port!r}")

        return cls(
            strict_regions=_as_bool(os.getenv("RU_HOLIDAYS_STRICT_REGIONS"), False),
            overrides_path=os.getenv("RU_HOLIDAYS_OVERRIDES_PATH") or None,
            log_level=os.getenv("RU_HOLIDAYS_LOG_LEVEL", "INFO").upper(),
            host=os.getenv("RU_HOLIDAYS_HOST", "0.0.0.0"),
            port=port_int,
        )
