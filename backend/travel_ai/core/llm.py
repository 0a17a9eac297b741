# backend/travel_ai/core/llm.py

from typing import Any, Dict, Optional, Protocol

from openai import AsyncOpenAI

from travel_ai.core.config_loader import Settings, settings
from travel_ai.core.logger import get_logger
from travel_ai.models.chat_models import ChatChoice, ChatMessage, ChatRequest, ChatResponse


log = get_logger("llm")


class ChatEndpoint(Protocol):
    async def get_completion(self, request: ChatRequest) -> ChatResponse:
        ...


# ---------------------------------------------------------------------------
# OpenAI chat completions
# ---------------------------------------------------------------------------
class OpenAIChatEndpoint:
    """
    ChatEndpoint backed by ``AsyncOpenAI``.

    The SDK client is built on first use so a missing key surfaces as a
    failed completion instead of an import-time crash.
    """

    def __init__(self, config: Settings = settings, client: Optional[AsyncOpenAI] = None):
        self.config = config
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            kwargs: Dict[str, Any] = {
                "api_key": self.config.OPENAI_API_KEY or None,
                "organization": self.config.OPENAI_ORGANIZATION,
                "project": self.config.OPENAI_PROJECT,
                "base_url": self.config.OPENAI_BASE_URL,
            }
            if self.config.openai_timeout is not None:
                kwargs["timeout"] = self.config.openai_timeout
            self._client = AsyncOpenAI(**kwargs)
        return self._client

    async def get_completion(self, request: ChatRequest) -> ChatResponse:
        params: Dict[str, Any] = {
            "model": request.model,
            "messages": [{"role": m.role, "content": m.content} for m in request.messages],
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
        }
        if request.json_schema is not None:
            params["response_format"] = request.json_schema.to_response_format()

        completion = await self._get_client().chat.completions.create(**params)

        choices = []
        for choice in completion.choices or []:
            if choice.message.refusal:
                log.warning(f"Model refused the request: {choice.message.refusal}")
            choices.append(ChatChoice(
                index=choice.index,
                message=ChatMessage(role=choice.message.role, content=choice.message.content),
                finish_reason=choice.finish_reason,
            ))

        return ChatResponse(choices=choices, model=completion.model)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
