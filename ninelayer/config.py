from pydantic import field_validator
from pydantic_settings import BaseSettings
import os

from ninelayer.core.validation import parse_layer_id

class Settings(BaseSettings):
    db_dsn: str = os.getenv("DB_DSN", "sqlite:///./data/ninelayer.db")
    draws_url: str = os.getenv("DRAWS_URL", "https://myip.xigoodone.workers.dev/api/lottery")
    fetch_timeout: float = float(os.getenv("FETCH_TIMEOUT", 10))
    key_code_count: int = int(os.getenv("KEY_CODE_COUNT", 3))
    reference_layer: str = os.getenv("REFERENCE_LAYER", "L6")
    history_limit: int = int(os.getenv("HISTORY_LIMIT", 500))
    sample_size: int = int(os.getenv("SAMPLE_SIZE", 50))
    api_key: str | None = os.getenv("API_KEY")

    @field_validator("reference_layer")
    @classmethod
    def _known_layer(cls, v: str) -> str:
        if parse_layer_id(v) is None:
            raise ValueError(f"REFERENCE_LAYER must be one of L1..L9, got {v!r}")
        return v.upper()

settings = Settings()
