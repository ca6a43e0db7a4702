# quimica/config.py
import os
from typing import Optional

from dotenv import load_dotenv
from openai import OpenAI
from pydantic import BaseModel

from quimica.messages import DEFAULT_LOCALE, MESSAGES

load_dotenv()

OUTPUT_MODES = ("text", "json")

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


class Settings(BaseModel):
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    openai_timeout: float = 10.0
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    locale: str = DEFAULT_LOCALE
    output_mode: str = "text"
    strict_parsing: bool = False
    separate_unavailable: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the process environment (and .env, via dotenv)."""
        settings = cls(
            openai_api_key=os.getenv("OPENAI_API_KEY"),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
            openai_timeout=float(os.getenv("OPENAI_TIMEOUT", "10")),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            locale=os.getenv("LOCALE", DEFAULT_LOCALE),
            output_mode=os.getenv("OUTPUT_MODE", "text").lower(),
            strict_parsing=_env_bool("STRICT_PARSING"),
            separate_unavailable=_env_bool("SEPARATE_UNAVAILABLE"),
        )
        settings.check()
        return settings

    def check(self) -> None:
        if self.output_mode not in OUTPUT_MODES:
            raise ValueError(f"Unknown OUTPUT_MODE: {self.output_mode}")
        if self.locale not in MESSAGES:
            raise ValueError(f"Unknown LOCALE: {self.locale}")

    @property
    def messages(self) -> dict:
        return MESSAGES[self.locale]


def build_client(settings: Settings) -> OpenAI:
    # sem retry: uma falha transitória vira "indisponível" direto
    return OpenAI(
        api_key=settings.openai_api_key,
        timeout=settings.openai_timeout,
        max_retries=0,
    )
