"""LLM gateway: one entry point for every completion in the pipeline.

Usage:
    gateway = LLMGateway()
    response = gateway.complete("claude-3-5-sonnet", prompt, max_tokens=1000)
    print(response.text, response.usage.total_tokens, response.cost.total_cost)
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from article_engine.common.config import get_anthropic_api_key, get_openai_api_key

from .adapters import ADAPTERS, DEFAULT_TEMPERATURE, ProviderAdapter
from .models import LLMResponse, ProviderKind
from .pricing import calculate_cost
from .resolver import resolve_model_id, select_provider

logger = logging.getLogger(__name__)


class LLMGateway:
    """Dispatches completions to the right provider adapter.

    Client handles are injected for tests, or built lazily from the API
    keys in the environment on first use.
    """

    def __init__(
        self,
        openai_client: Any = None,
        anthropic_client: Any = None,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> None:
        self._openai_client = openai_client
        self._anthropic_client = anthropic_client
        self.temperature = temperature

    def _get_openai_client(self) -> Any:
        """Lazy-initialize the OpenAI client."""
        if self._openai_client is None:
            from openai import OpenAI
            self._openai_client = OpenAI(api_key=get_openai_api_key())
        return self._openai_client

    def _get_anthropic_client(self) -> Any:
        """Lazy-initialize the Anthropic client."""
        if self._anthropic_client is None:
            from anthropic import Anthropic
            self._anthropic_client = Anthropic(api_key=get_anthropic_api_key())
        return self._anthropic_client

    def adapter_for(self, kind: ProviderKind) -> ProviderAdapter:
        client = (
            self._get_anthropic_client()
            if kind == ProviderKind.MESSAGES
            else self._get_openai_client()
        )
        return ADAPTERS[kind](client, temperature=self.temperature)

    def complete(
        self,
        model: str,
        prompt: str,
        *,
        max_tokens: int,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        json_mode: bool = False,
    ) -> LLMResponse:
        """Run one completion and attach usage and cost.

        Args:
            model: Short model name; used for provider selection and pricing.
            prompt: User prompt.
            max_tokens: Output token cap.
            system_prompt: Optional system instructions (folded into the user
                message for providers without a system role).
            temperature: Override for the default temperature. Ignored by
                reasoning models.
            json_mode: Ask chat models for a JSON object response.

        Returns:
            LLMResponse with normalized usage and cost.
        """
        kind = select_provider(model)
        model_id = resolve_model_id(model)
        adapter = self.adapter_for(kind)

        logger.info("Calling %s via %s adapter", model_id, kind.value)
        content, usage = adapter.complete(
            model_id,
            prompt,
            max_tokens=max_tokens,
            system_prompt=system_prompt,
            temperature=temperature,
            json_mode=json_mode,
        )
        cost = calculate_cost(usage.prompt_tokens, usage.completion_tokens, model)
        logger.info(
            "%s: %d prompt + %d completion tokens ($%.4f)",
            model, usage.prompt_tokens, usage.completion_tokens, cost.total_cost,
        )
        return LLMResponse(content=content, usage=usage, cost=cost, model=model, provider=kind)
