"""Model name resolution and provider selection.

Users configure short model names ("gpt-4o", "claude-3-5-sonnet"). The
resolver maps them to the identifier the provider API expects and picks
the request-shape family from the name prefix.
"""

from __future__ import annotations

from .models import ProviderKind

REASONING_PREFIXES = ("o1", "o3")
MESSAGES_PREFIX = "claude-"

# Canonical short names with a pinned provider identifier
ANTHROPIC_MODELS: dict[str, str] = {
    "claude-3-5-sonnet": "claude-3-5-sonnet-20241022",
    "claude-3-5-haiku": "claude-3-5-haiku-20241022",
    "claude-3-sonnet": "claude-3-sonnet-20240229",
    "claude-3-haiku": "claude-3-haiku-20240307",
}

# Common shortened or alternate spellings
MODEL_ALIASES: dict[str, str] = {
    "claude-3.5-sonnet": "claude-3-5-sonnet-20241022",
    "claude-3-5-sonnet-latest": "claude-3-5-sonnet-20241022",
    "claude-sonnet": "claude-3-5-sonnet-20241022",
    "claude-3.5-haiku": "claude-3-5-haiku-20241022",
    "claude-3-5-haiku-latest": "claude-3-5-haiku-20241022",
    "claude-haiku": "claude-3-5-haiku-20241022",
    "claude-3-opus": "claude-3-opus-20240229",
}


def resolve_model_id(short_name: str) -> str:
    """Return the provider identifier for a short model name.

    Unknown names pass through unchanged so newer provider models can be
    used without a code change.
    """
    if short_name in ANTHROPIC_MODELS:
        return ANTHROPIC_MODELS[short_name]
    if short_name in MODEL_ALIASES:
        return MODEL_ALIASES[short_name]
    return short_name


def select_provider(short_name: str) -> ProviderKind:
    """Pick the adapter family from the (unresolved) model name."""
    if short_name.startswith(REASONING_PREFIXES):
        return ProviderKind.REASONING
    if short_name.startswith(MESSAGES_PREFIX):
        return ProviderKind.MESSAGES
    return ProviderKind.CHAT
