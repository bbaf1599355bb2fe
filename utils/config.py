from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import os


@dataclass
class AppConfig:
    openai_api_key: Optional[str]
    anthropic_api_key: Optional[str]
    model_preference: str
    request_timeout_seconds: int
    temperature: float
    questions_path: str
    log_level: str


def load_config() -> AppConfig:
    return AppConfig(
        openai_api_key=(
            os.getenv("OPENAI_API_KEY")
            or os.getenv("OPENAI_KEY")
            or os.getenv("OPEN_API_KEY")
        ),
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY"),
        model_preference=os.getenv("MODEL_PREFERENCE", "openai:gpt-4o-mini"),
        request_timeout_seconds=int(os.getenv("REQUEST_TIMEOUT_SECONDS", "30")),
        temperature=float(os.getenv("EVALUATION_TEMPERATURE", "0.7")),
        questions_path=os.getenv("QUESTIONS_PATH", os.path.join("data", "questions.json")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


def parse_model_preference(pref: str) -> tuple[str, str]:
    if ":" in pref:
        provider, model = pref.split(":", 1)
    else:
        provider, model = "openai", pref
    return provider, model


def credential_for(config: AppConfig) -> Optional[str]:
    provider, _ = parse_model_preference(config.model_preference)
    if provider == "openai":
        return config.openai_api_key
    if provider == "anthropic":
        return config.anthropic_api_key
    return None
