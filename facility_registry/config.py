from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Registry settings loaded from environment variables / .env file."""

    APP_NAME: str = "Facility Registry"
    LOG_LEVEL: str = "INFO"

    # Principal that owns admin rights when a registry is created
    REGISTRY_ADMIN: str = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
    # Logical clock value a fresh BlockHeightClock starts at
    INITIAL_BLOCK_HEIGHT: int = Field(default=100, ge=0)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "FACILITY_",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
