from __future__ import annotations

import asyncio
from typing import List, Optional

import pytest

from models import UpstreamUnavailable
from tools.llm_client import ChatMessage
from utils.config import AppConfig


def make_config(openai_api_key: Optional[str] = None, anthropic_api_key: Optional[str] = None, model_preference: str = "openai:gpt-4o-mini", timeout=30) -> AppConfig:
    return AppConfig(
        openai_api_key=openai_api_key,
        anthropic_api_key=anthropic_api_key,
        model_preference=model_preference,
        request_timeout_seconds=timeout,
        temperature=0.7,
        questions_path="does-not-exist.json",
        log_level="INFO",
    )


class FakeLLM:
    """Stands in for LLMClient; replies with a canned string or raises."""

    def __init__(self, reply: str = "", error: Optional[Exception] = None, hang: bool = False):
        self.config = make_config(openai_api_key="sk-test")
        self.reply = reply
        self.error = error
        self.hang = hang
        self.calls: List[dict] = []

    async def acomplete_json(self, system_prompt: str, messages: List[ChatMessage], temperature: float = 0.7) -> str:
        self.calls.append({"system": system_prompt, "messages": messages, "temperature": temperature})
        if self.hang:
            await asyncio.Event().wait()
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def offline_config() -> AppConfig:
    return make_config()


@pytest.fixture
def failing_llm() -> FakeLLM:
    return FakeLLM(error=UpstreamUnavailable("openai: Error code: 500"))
