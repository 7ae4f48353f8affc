import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import httpx

from pantry_recipes.app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class LLMConfigurationError(RuntimeError):
    """The chat backend cannot be called with the current settings."""


class LLMRequestError(RuntimeError):
    """The chat backend was unreachable or answered with a failure."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: str


@dataclass(frozen=True)
class ChatResult:
    model: str
    content: str


class OllamaChatClient:
    """Minimal client for the Ollama ``/api/chat`` endpoint (non-streaming)."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def _headers(self) -> Dict[str, str]:
        if not self.settings.ollama_api_key:
            raise LLMConfigurationError("Missing OLLAMA_API_KEY.")
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.settings.ollama_api_key}",
        }

    async def chat(self, messages: Sequence[ChatMessage]) -> ChatResult:
        headers = self._headers()
        payload = {
            "model": self.settings.ollama_model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
            "stream": False,
        }
        url = f"{self.settings.ollama_base_url.rstrip('/')}/api/chat"
        timeout = httpx.Timeout(self.settings.ollama_timeout_seconds, connect=10.0)

        logger.info("Calling chat model %s with %d messages", self.settings.ollama_model, len(messages))
        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                resp = await client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("Chat request to %s failed: %s", url, exc)
            raise LLMRequestError(f"Chat request failed: {exc}") from exc

        if resp.status_code < 200 or resp.status_code >= 300:
            body = resp.text
            logger.warning("Chat model returned status %s: %s", resp.status_code, body[:500])
            raise LLMRequestError(
                f"Ollama request failed ({resp.status_code}): {body}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise LLMRequestError("Could not parse Ollama response.") from exc
        return _to_chat_result(data, self.settings.ollama_model)


def _to_chat_result(data: Any, default_model: str) -> ChatResult:
    if not isinstance(data, dict):
        raise LLMRequestError("Could not parse Ollama response.")
    message = data.get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    result = ChatResult(model=data.get("model") or default_model, content=content or "")
    logger.info("Chat model %s returned %d characters", result.model, len(result.content))
    return result


def build_messages(system_prompt: str, user_prompt: str) -> List[ChatMessage]:
    return [ChatMessage("system", system_prompt), ChatMessage("user", user_prompt)]
