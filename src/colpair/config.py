"""Configuration management for colpair."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    """Read a boolean flag from the environment."""
    return os.getenv(name, default).lower() == "true"


class Settings(BaseModel):
    """Application settings."""

    # Number of display colours cycled over pair positions
    palette_size: int = Field(default=int(os.getenv("COLPAIR_PALETTE_SIZE", "10")), ge=1)

    # Raise on stale reorder/remove/toggle references instead of ignoring them
    strict_references: bool = _env_flag("COLPAIR_STRICT_REFERENCES")

    # Initial pairing modes ('bulk_positional' or 'self_paired')
    mapping_default_mode: str = os.getenv("COLPAIR_MAPPING_MODE", "bulk_positional")
    key_validation_default_mode: str = os.getenv("COLPAIR_KEY_VALIDATION_MODE", "bulk_positional")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    debug: bool = _env_flag("DEBUG")


settings = Settings()
