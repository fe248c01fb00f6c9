"""Token and cost accounting for one keyword run."""

from __future__ import annotations

from collections import Counter

from article_engine.common.models import CostBreakdown, RunUsageTotals, TokenUsage


class UsageAggregator:
    """Accumulates usage from summary, synthesis and title calls.

    Owned by the pipeline for a single keyword; call ``reset()`` (or
    create a new instance) before the next keyword.
    """

    def __init__(self) -> None:
        self.totals = RunUsageTotals()
        self.calls: Counter[str] = Counter()

    def record(
        self,
        stage: str,
        usage: TokenUsage | None,
        cost: CostBreakdown | None,
    ) -> None:
        """Add one call's usage. Missing usage or cost counts as zero."""
        self.calls[stage] += 1
        if usage is not None:
            self.totals.input_tokens += usage.prompt_tokens
            self.totals.output_tokens += usage.completion_tokens
        if cost is not None:
            self.totals.cost += cost.total_cost

    def reset(self) -> None:
        self.totals = RunUsageTotals()
        self.calls = Counter()

    def snapshot(self) -> RunUsageTotals:
        return self.totals.model_copy()
