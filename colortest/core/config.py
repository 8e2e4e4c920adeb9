from __future__ import annotations

from typing import Annotated, List
from pathlib import Path
from dotenv import load_dotenv

from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import field_validator, model_validator

# Load .env file explicitly
ENV_FILE_NAME = ".env"
env_path = Path(__file__).parent.parent.parent / ENV_FILE_NAME
load_dotenv(env_path)


class Settings(BaseSettings):
    DEFAULT_LANG: str = "ar"
    FALLBACK_LANG: str = "en"
    # Comma-separated in the environment: SUPPORTED_LANGS=ar,en
    SUPPORTED_LANGS: Annotated[List[str], NoDecode] = ["ar", "en"]
    LOCALES_PACKAGE: str = "colortest.locales"
    BASE_URL: str = ""
    DEBUG: bool = False
    LOG_TO_FILE: bool = False
    LOG_DIR: str = "logs"

    @field_validator("SUPPORTED_LANGS", mode="before")
    @classmethod
    def parse_supported_langs(cls, v):  # type: ignore
        if v in (None, "", []):
            return ["ar", "en"]
        if isinstance(v, str):
            return [x.strip().lower() for x in v.split(",") if x.strip()]
        if isinstance(v, (list, tuple)):
            return [str(x).strip().lower() for x in v]
        return v

    @field_validator("DEFAULT_LANG", "FALLBACK_LANG", mode="before")
    @classmethod
    def normalize_lang(cls, v):  # type: ignore
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode="after")
    def check_languages(self) -> "Settings":
        if self.FALLBACK_LANG not in self.SUPPORTED_LANGS:
            raise ValueError(f"FALLBACK_LANG {self.FALLBACK_LANG!r} is not in SUPPORTED_LANGS")
        if self.DEFAULT_LANG not in self.SUPPORTED_LANGS:
            raise ValueError(f"DEFAULT_LANG {self.DEFAULT_LANG!r} is not in SUPPORTED_LANGS")
        return self

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
