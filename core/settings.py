import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    app_title: str
    max_words: int
    log_level: str
    cors_allow_origins: List[str]


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        app_title=os.getenv("APP_TITLE", "Transcription Scorer API"),
        max_words=int(os.getenv("SCORER_MAX_WORDS", "5000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_allow_origins=_split_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")),
    )
