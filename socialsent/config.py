from dataclasses import dataclass
import logging, os
from dotenv import load_dotenv
load_dotenv()

@dataclass(frozen=True)
class Settings:
    lexicon_path: str
    review_path: str
    log_level: int

def _to_level(x):
    level = logging.getLevelName((x or "").strip().upper())
    return level if isinstance(level, int) else logging.WARNING

def load_settings() -> Settings:
    return Settings(
        lexicon_path=os.getenv("SOCIALSENT_LEXICON", "socialsent.csv"),
        review_path=os.getenv("SOCIALSENT_REVIEW", "review.txt"),
        log_level=_to_level(os.getenv("SOCIALSENT_LOG_LEVEL", "WARNING")),
    )

SETTINGS = load_settings()
