import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MODEL = "openchat/openchat-3.5-0106"
DEFAULT_URL = "https://openrouter.ai/api/v1/chat/completions"


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, captured once at startup."""
    api_key: Optional[str] = None
    model_name: str = DEFAULT_MODEL
    api_url: str = DEFAULT_URL
    referer: str = "http://localhost:3000"
    app_title: str = "AI Interview Tool"
    timeout: float = 60.0
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: Tuple[str, ...] = ("*",)

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def load_settings() -> Settings:
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        api_key=os.getenv("OPENROUTER_API_KEY") or None,
        model_name=os.getenv("MODEL_NAME", DEFAULT_MODEL),
        api_url=os.getenv("OPENROUTER_URL", DEFAULT_URL),
        referer=os.getenv("APP_REFERER", "http://localhost:3000"),
        app_title=os.getenv("APP_TITLE", "AI Interview Tool"),
        timeout=float(os.getenv("LLM_TIMEOUT", "60")),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
    )
