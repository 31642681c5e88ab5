import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    max_distance: int = int(os.getenv("SPELLCHECK_MAX_DISTANCE", "2"))
    search_policy: str = os.getenv("SPELLCHECK_SEARCH_POLICY", "first").strip().lower()
    dictionary_path: str | None = os.getenv("SPELLCHECK_DICTIONARY_PATH") or None
    log_level: str = os.getenv("SPELLCHECK_LOG_LEVEL", "INFO").upper()


settings = Settings()
