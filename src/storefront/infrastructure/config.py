"""Runtime configuration, read from ``STOREFRONT_*`` environment variables.

A ``.env`` file in the working directory is honoured as well.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        extra="ignore",
    )

    data_dir: Path = Path("data")
    currency: str = "INR"
    # How long a catalog snapshot is served before re-reading the store.
    catalog_revalidate_seconds: int = Field(default=3600, ge=0)
    # Serve the static seed catalog to shoppers while the store is empty
    # or unreadable.
    catalog_seed_fallback: bool = True
    # Lens names offered with frames; an empty list offers every lens.
    offered_lenses: list[str] = Field(
        default_factory=lambda: [
            "ClearBlue Lenses",
            "Photochromic Lenses",
            "Technoii Drive Lens",
        ]
    )
    recent_orders_limit: int = Field(default=5, ge=1)
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    return Settings()
