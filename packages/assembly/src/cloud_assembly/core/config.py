from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogFormat = Literal["json", "console"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CLOUD_ASSEMBLY_",
        env_file=".env",
        extra="ignore",
    )

    # None means a fresh temp directory per synthesis run
    outdir: Optional[Path] = Field(default=None)
    log_level: str = Field(default="INFO")
    log_format: LogFormat = Field(default="console")
    version_reporting: bool = Field(default=True)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    return Settings()
