"""Provider adapters: request shapes and response normalization.

Each adapter knows how one API family wants its payload built and how
its response reports content and token usage. Everything above this
layer only sees ``(content, TokenUsage)``.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from article_engine.common.errors import InvalidResponseError
from article_engine.common.models import Content, TokenUsage

from .models import ProviderKind

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 0.3


class ProviderAdapter:
    """Base adapter. Subclasses define ``build_request``, ``send`` and ``parse_response``."""

    kind: ProviderKind = ProviderKind.CHAT

    def __init__(self, client: Any, temperature: float = DEFAULT_TEMPERATURE) -> None:
        self.client = client
        self.temperature = temperature

    def build_request(
        self,
        model_id: str,
        prompt: str,
        *,
        max_tokens: int,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        json_mode: bool = False,
    ) -> dict[str, Any]:
        raise NotImplementedError

    def send(self, request: dict[str, Any]) -> Any:
        raise NotImplementedError

    def parse_response(self, response: Any, model_id: str) -> tuple[Content, TokenUsage]:
        raise NotImplementedError

    def complete(
        self,
        model_id: str,
        prompt: str,
        *,
        max_tokens: int,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        json_mode: bool = False,
    ) -> tuple[Content, TokenUsage]:
        """Build, send and normalize one completion request.

        Raises:
            InvalidResponseError: The provider answered without content.
            Exception: Provider/network errors are logged and re-raised.
        """
        request = self.build_request(
            model_id,
            prompt,
            max_tokens=max_tokens,
            system_prompt=system_prompt,
            temperature=temperature,
            json_mode=json_mode,
        )
        logger.debug(
            "Sending %s request to %s (%d messages)",
            self.kind.value, model_id, len(request["messages"]),
        )
        try:
            response = self.send(request)
        except Exception as exc:
            _log_provider_error(self.kind, model_id, exc)
            raise
        return self.parse_response(response, model_id)


class ChatAdapter(ProviderAdapter):
    """OpenAI chat completions: system + user messages, low temperature."""

    kind = ProviderKind.CHAT

    def build_request(
        self,
        model_id: str,
        prompt: str,
        *,
        max_tokens: int,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        json_mode: bool = False,
    ) -> dict[str, Any]:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        request: dict[str, Any] = {
            "model": model_id,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": self.temperature if temperature is None else temperature,
        }
        if json_mode:
            request["response_format"] = {"type": "json_object"}
        return request

    def send(self, request: dict[str, Any]) -> Any:
        return self.client.chat.completions.create(**request)

    def parse_response(self, response: Any, model_id: str) -> tuple[Content, TokenUsage]:
        choices = getattr(response, "choices", None) or []
        message = getattr(choices[0], "message", None) if choices else None
        content = getattr(message, "content", None)
        if not content:
            logger.error(
                "Empty %s response from %s: choices=%d, has_message=%s",
                self.kind.value, model_id, len(choices), message is not None,
            )
            raise InvalidResponseError(model_id)

        usage = getattr(response, "usage", None)
        return content, TokenUsage.from_counts(
            getattr(usage, "prompt_tokens", 0) or 0,
            getattr(usage, "completion_tokens", 0) or 0,
        )


class ReasoningAdapter(ChatAdapter):
    """OpenAI o-series: user role only, completion-token cap, no temperature."""

    kind = ProviderKind.REASONING

    def build_request(
        self,
        model_id: str,
        prompt: str,
        *,
        max_tokens: int,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        json_mode: bool = False,
    ) -> dict[str, Any]:
        return {
            "model": model_id,
            "messages": [{"role": "user", "content": _fold_system_prompt(system_prompt, prompt)}],
            "max_completion_tokens": max_tokens,
        }


class MessagesAdapter(ProviderAdapter):
    """Anthropic messages API. Content stays a list of blocks."""

    kind = ProviderKind.MESSAGES

    def build_request(
        self,
        model_id: str,
        prompt: str,
        *,
        max_tokens: int,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        json_mode: bool = False,
    ) -> dict[str, Any]:
        request: dict[str, Any] = {
            "model": model_id,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": _fold_system_prompt(system_prompt, prompt)}],
        }
        if temperature is not None:
            request["temperature"] = temperature
        return request

    def send(self, request: dict[str, Any]) -> Any:
        return self.client.messages.create(**request)

    def parse_response(self, response: Any, model_id: str) -> tuple[Content, TokenUsage]:
        blocks = [_block_to_dict(b) for b in (getattr(response, "content", None) or [])]
        if not any(b.get("text") for b in blocks):
            logger.error(
                "Empty %s response from %s: blocks=%d, stop_reason=%s",
                self.kind.value, model_id, len(blocks), getattr(response, "stop_reason", None),
            )
            raise InvalidResponseError(model_id)

        usage = getattr(response, "usage", None)
        return blocks, TokenUsage.from_counts(
            getattr(usage, "input_tokens", 0) or 0,
            getattr(usage, "output_tokens", 0) or 0,
        )


ADAPTERS: dict[ProviderKind, type[ProviderAdapter]] = {
    ProviderKind.CHAT: ChatAdapter,
    ProviderKind.REASONING: ReasoningAdapter,
    ProviderKind.MESSAGES: MessagesAdapter,
}


def _fold_system_prompt(system_prompt: Optional[str], prompt: str) -> str:
    if not system_prompt:
        return prompt
    return f"{system_prompt}\n\n{prompt}"


def _block_to_dict(block: Any) -> dict[str, Any]:
    if isinstance(block, dict):
        return block
    return {"type": getattr(block, "type", "text"), "text": getattr(block, "text", "")}


def _log_provider_error(kind: ProviderKind, model_id: str, exc: Exception) -> None:
    response = getattr(exc, "response", None)
    body = getattr(exc, "body", None)
    logger.error(
        "%s request to %s failed: %s (status=%s, body=%s, response=%s)",
        kind.value,
        model_id,
        exc,
        getattr(exc, "status_code", None),
        body,
        getattr(response, "text", None) if response is not None else None,
    )
