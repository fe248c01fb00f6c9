"""Per-model token pricing.

Rates are keyed by the short model name the user configured, not by the
resolved provider identifier.
"""

from __future__ import annotations

import logging

from article_engine.common.models import CostBreakdown

from .models import ModelRateEntry

logger = logging.getLogger(__name__)

_PER_MILLION = 1_000_000

MODEL_RATES: dict[str, ModelRateEntry] = {
    "gpt-4o": ModelRateEntry("gpt-4o", 2.50 / _PER_MILLION, 10.00 / _PER_MILLION),
    "gpt-4o-mini": ModelRateEntry("gpt-4o-mini", 0.150 / _PER_MILLION, 0.600 / _PER_MILLION),
    "o1": ModelRateEntry("o1", 15.00 / _PER_MILLION, 60.00 / _PER_MILLION),
    "o1-mini": ModelRateEntry("o1-mini", 3.00 / _PER_MILLION, 12.00 / _PER_MILLION),
    "claude-3-5-sonnet": ModelRateEntry("claude-3-5-sonnet", 3.00 / _PER_MILLION, 15.00 / _PER_MILLION),
    "claude-3-5-haiku": ModelRateEntry("claude-3-5-haiku", 0.80 / _PER_MILLION, 4.00 / _PER_MILLION),
    "claude-3-sonnet": ModelRateEntry("claude-3-sonnet", 3.00 / _PER_MILLION, 15.00 / _PER_MILLION),
    "claude-3-haiku": ModelRateEntry("claude-3-haiku", 0.25 / _PER_MILLION, 1.25 / _PER_MILLION),
}

DEFAULT_RATE_MODEL = "gpt-4o"


def get_rate(model_name: str) -> ModelRateEntry:
    """Look up the rate entry for a model, falling back to the default tier."""
    rate = MODEL_RATES.get(model_name)
    if rate is None:
        logger.warning(
            "Unknown model %s, defaulting to %s rates", model_name, DEFAULT_RATE_MODEL,
        )
        rate = MODEL_RATES[DEFAULT_RATE_MODEL]
    return rate


def calculate_cost(input_tokens: int, output_tokens: int, model_name: str) -> CostBreakdown:
    """Compute the USD cost of a call. No rounding; callers round for display."""
    rate = get_rate(model_name)
    input_cost = input_tokens * rate.input_rate
    output_cost = output_tokens * rate.output_rate
    return CostBreakdown(
        input_cost=input_cost,
        output_cost=output_cost,
        total_cost=input_cost + output_cost,
    )
