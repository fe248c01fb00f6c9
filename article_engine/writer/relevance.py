"""Theme analysis of local sources.

Extracts the main topics and concepts of the local documents so the
synthesis prompt can frame the article around them, and checks whether
those themes overlap the requested topic. Never fails a run: any model
or parse error yields a fallback analysis.
"""

from __future__ import annotations

import json
from typing import Any

from article_engine.common.errors import ParseError
from article_engine.common.logging import setup_logging
from article_engine.common.models import SourceAnalysis
from article_engine.llm.client import LLMGateway

from .prompts import build_relevance_prompt

logger = setup_logging(module_name="writer.relevance")

ANALYSIS_TEMPERATURE = 0.1


class SourceRelevanceAnalyzer:
    """Run one JSON-mode analysis call over all local sources."""

    def __init__(
        self,
        gateway: LLMGateway,
        model: str = "gpt-4o-mini",
        max_tokens: int = 1000,
    ):
        self.gateway = gateway
        self.model = model
        self.max_tokens = max_tokens

    def analyze(self, topic: str, local_sources: list[str]) -> SourceAnalysis:
        """Extract themes from the local sources and assess topic overlap.

        Args:
            topic: The article topic.
            local_sources: Non-empty local source texts.

        Returns:
            SourceAnalysis; the fallback analysis on any failure.
        """
        try:
            response = self.gateway.complete(
                self.model,
                build_relevance_prompt(local_sources),
                max_tokens=self.max_tokens,
                temperature=ANALYSIS_TEMPERATURE,
                json_mode=True,
            )
            data = parse_analysis_json(response.text)
        except ParseError as exc:
            logger.warning("Source analysis returned unparseable JSON: %s", exc)
            return fallback_analysis(topic)
        except Exception:
            logger.error("Error analyzing source relevance", exc_info=True)
            return fallback_analysis(topic)

        logger.info(
            "Source analysis used %d tokens ($%.4f)",
            response.usage.total_tokens, response.cost.total_cost,
        )
        return build_analysis(topic, data)


def parse_analysis_json(text: str) -> dict[str, Any]:
    """Parse the analysis response, tolerating markdown code fences.

    Raises:
        ParseError: The text is not a JSON object.
    """
    content = text.strip()
    if content.startswith("```"):
        lines = [line for line in content.split("\n") if not line.strip().startswith("```")]
        content = "\n".join(lines)

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ParseError(f"invalid JSON: {content[:200]}") from exc
    if not isinstance(data, dict):
        raise ParseError(f"expected a JSON object, got {type(data).__name__}")
    return data


def build_analysis(topic: str, data: dict[str, Any]) -> SourceAnalysis:
    """Turn the parsed JSON into a SourceAnalysis."""
    main_topics = _string_list(data.get("mainTopics"))
    concepts = _string_list(data.get("concepts"))
    technologies = _string_list(data.get("technologies"))
    applications = _string_list(data.get("applications"))

    is_relevant = topic_overlaps(topic, main_topics + concepts + technologies)
    if is_relevant:
        focus = (
            f"These sources discuss {', '.join(main_topics)}, which relate to {topic} "
            f"through shared concepts in {', '.join(concepts)}"
        )
    else:
        focus = (
            f"While these sources focus on {', '.join(main_topics)}, they contain relevant "
            f"technological and conceptual frameworks that can inform our understanding of {topic}"
        )

    return SourceAnalysis(
        main_topic="; ".join(main_topics) or topic,
        concepts=concepts,
        technologies=technologies,
        applications=applications,
        is_relevant=is_relevant,
        suggested_focus=focus,
    )


def topic_overlaps(topic: str, themes: list[str]) -> bool:
    """True if any whitespace-separated topic term appears in any theme (case-insensitive)."""
    terms = topic.lower().split()
    lowered = [t.lower() for t in themes]
    return any(term in theme for term in terms for theme in lowered)


def fallback_analysis(topic: str) -> SourceAnalysis:
    """Analysis used when the model call or parsing fails."""
    return SourceAnalysis(
        main_topic=topic,
        concepts=[],
        is_relevant=True,
        suggested_focus=f"Analyzing {topic} using available source materials",
    )


def _string_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [str(v) for v in value if v is not None]
    return [str(value)]
