"""Server configuration via environment variables, plus logging setup."""

from __future__ import annotations
import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    """Runtime settings for the HTTP server."""
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    @classmethod
    def from_env(cls) -> Settings:
        """Read FLOORPLAN_* variables, loading a .env file first if present."""
        load_dotenv()
        origins = os.getenv("FLOORPLAN_CORS_ORIGINS", "*")
        return cls(
            host=os.getenv("FLOORPLAN_HOST", "0.0.0.0"),
            port=int(os.getenv("FLOORPLAN_PORT", "8000")),
            log_level=os.getenv("FLOORPLAN_LOG_LEVEL", "INFO").upper(),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
