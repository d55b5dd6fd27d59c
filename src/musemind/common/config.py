"""Runtime configuration loaded from the environment (and a local .env)."""
from __future__ import annotations
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel

GEMINI_BASE_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "gemini-2.0-flash:generateContent"
)


class GenerationConfig(BaseModel, frozen=True):
    """Fixed sampling parameters sent with every upstream request."""
    temperature: float = 0.9
    top_k: int = 40
    top_p: float = 0.95
    max_output_tokens: int = 1024

    def to_payload(self) -> dict[str, float | int]:
        return {
            "temperature": self.temperature,
            "topK": self.top_k,
            "topP": self.top_p,
            "maxOutputTokens": self.max_output_tokens,
        }


class Settings(BaseModel):
    gemini_api_key: str = ""
    gemini_base_url: str = GEMINI_BASE_URL
    request_timeout: float = 30.0
    host: str = "0.0.0.0"
    port: int = 3000
    public_dir: str = "public"
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"
    generation: GenerationConfig = GenerationConfig()

    @property
    def has_api_key(self) -> bool:
        return bool(self.gemini_api_key.strip())

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
            gemini_base_url=os.getenv("GEMINI_BASE_URL", GEMINI_BASE_URL),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT", "30")),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            public_dir=os.getenv("PUBLIC_DIR", "public"),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()] or ["*"],
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
