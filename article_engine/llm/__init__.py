# LLM: provider adapters, model resolution and cost accounting
"""
LLM layer shared by every stage of the article pipeline.

Resolves short model names to provider identifiers, builds the request
shape each provider family expects, normalizes responses into
``TokenUsage`` and prices every call.
"""

from .adapters import ChatAdapter, MessagesAdapter, ProviderAdapter, ReasoningAdapter
from .client import LLMGateway
from .models import LLMResponse, ModelRateEntry, ProviderKind
from .pricing import MODEL_RATES, calculate_cost
from .resolver import resolve_model_id, select_provider

__all__ = [
    "ChatAdapter",
    "LLMGateway",
    "LLMResponse",
    "MODEL_RATES",
    "MessagesAdapter",
    "ModelRateEntry",
    "ProviderAdapter",
    "ProviderKind",
    "ReasoningAdapter",
    "calculate_cost",
    "resolve_model_id",
    "select_provider",
]
