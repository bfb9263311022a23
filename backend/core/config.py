"""
SDI Designer Configuration
==========================
Environment-driven settings, loaded once from `.env` and the process env.

Variables:
    SDI_LOG_LEVEL       Minimum log level (default INFO)
    SDI_LOG_TO_FILE     Enable rotating file log (default false)
    SDI_LOG_DIR         Directory for the file log (default backend/logs)
    SDI_CORS_ORIGINS    Comma separated allowed origins
    SDI_API_HOST        Bind address for uvicorn
    SDI_API_PORT        Bind port for uvicorn
    SDI_ERROR_FACTOR    Default fittings/bends contingency multiplier
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv()


BACKEND_DIR = Path(__file__).parent.parent


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: List[str]) -> List[str]:
    value = os.getenv(name)
    if not value:
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Runtime settings for the API, CLI and logger."""
    log_level: str = "INFO"
    log_to_file: bool = False
    log_dir: Path = BACKEND_DIR / "logs"
    cors_origins: List[str] = field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    error_factor: float = 1.1

    @classmethod
    def from_env(cls) -> "Settings":
        defaults = cls()
        return cls(
            log_level=os.getenv("SDI_LOG_LEVEL", defaults.log_level).upper(),
            log_to_file=_env_bool("SDI_LOG_TO_FILE", defaults.log_to_file),
            log_dir=Path(os.getenv("SDI_LOG_DIR", str(defaults.log_dir))),
            cors_origins=_env_list("SDI_CORS_ORIGINS", defaults.cors_origins),
            api_host=os.getenv("SDI_API_HOST", defaults.api_host),
            api_port=int(os.getenv("SDI_API_PORT", str(defaults.api_port))),
            error_factor=float(os.getenv("SDI_ERROR_FACTOR", str(defaults.error_factor))),
        )


settings = Settings.from_env()
