from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional
import asyncio

from models import UpstreamUnavailable
from utils.config import AppConfig, load_config, parse_model_preference
from utils.logging import get_logger
from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv(), override=False)


logger = get_logger(__name__)


@dataclass
class ChatMessage:
    role: str
    content: str


class LLMClient:
    """Single-shot chat completion against the configured provider.

    Every failure surfaces as ``UpstreamUnavailable``; there are no retries.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config or load_config()
        self._provider, self._model = parse_model_preference(self.config.model_preference)
        self._ready: bool = True
        self._unavailable_reason: Optional[str] = None
        if self._provider == "openai":
            if not self.config.openai_api_key:
                self._ready = False
                self._unavailable_reason = "missing_openai_api_key"
        elif self._provider == "anthropic":
            if not self.config.anthropic_api_key:
                self._ready = False
                self._unavailable_reason = "missing_anthropic_api_key"
        else:
            self._ready = False
            self._unavailable_reason = f"unsupported_provider:{self._provider}"
        status = "ready" if self._ready else f"unavailable:{self._unavailable_reason}"
        logger.info(f"LLM preflight provider={self._provider} model={self._model} status={status}")

    @property
    def ready(self) -> bool:
        return self._ready

    async def acomplete_json(self, system_prompt: str, messages: List[ChatMessage], temperature: float = 0.7) -> str:
        """Return the raw text of a completion that was asked to be a JSON object."""
        if not self._ready:
            raise UpstreamUnavailable(self._unavailable_reason or "provider_unavailable")
        timeout = self.config.request_timeout_seconds
        if self._provider == "openai":
            return await self._openai_complete(system_prompt, messages, temperature, timeout)
        return await self._anthropic_complete(system_prompt, messages, temperature, timeout)

    async def _openai_complete(self, system_prompt: str, messages: List[ChatMessage], temperature: float, timeout: int) -> str:
        try:
            import openai
            client = openai.AsyncOpenAI(api_key=self.config.openai_api_key, max_retries=0)
            full_messages = ([{"role": "system", "content": system_prompt}] +
                             [{"role": m.role, "content": m.content} for m in messages])
            resp = await asyncio.wait_for(
                client.chat.completions.create(
                    model=self._model,
                    messages=full_messages,
                    temperature=temperature,
                    response_format={"type": "json_object"},
                ),
                timeout=timeout,
            )
            return resp.choices[0].message.content or ""
        except Exception as e:
            raise UpstreamUnavailable(f"openai: {e}") from e

    async def _anthropic_complete(self, system_prompt: str, messages: List[ChatMessage], temperature: float, timeout: int) -> str:
        try:
            from anthropic import AsyncAnthropic
            client = AsyncAnthropic(api_key=self.config.anthropic_api_key, max_retries=0)
            # no JSON response mode here; the prompt itself demands a bare object
            resp = await asyncio.wait_for(
                client.messages.create(
                    model=self._model,
                    system=system_prompt,
                    max_tokens=800,
                    temperature=temperature,
                    messages=[{"role": m.role, "content": m.content} for m in messages],
                ),
                timeout=timeout,
            )
            return resp.content[0].text if resp.content else ""
        except Exception as e:
            raise UpstreamUnavailable(f"anthropic: {e}") from e
