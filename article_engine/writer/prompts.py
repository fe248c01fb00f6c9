"""Prompt builders for summarization, source analysis, synthesis and titles.

All prompts enforce the rule: only state what the sources state.
The synthesis prompt is built by one function parameterized by
``PromptConfig`` rather than one template per provider.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from article_engine.common.models import SourceAnalysis
from article_engine.llm.models import ProviderKind

SOURCE_SEPARATOR = "\n\n---\n\n"
MIN_WORD_COUNT = 1700

PRIMARY_SECTION = "PRIMARY SOURCE MATERIALS"
SUPPORTING_SECTION = "SUPPORTING WEB RESEARCH"
WEB_ONLY_SECTION = "WEB RESEARCH MATERIALS"


@dataclass(frozen=True)
class PromptConfig:
    """Selects the synthesis prompt variant."""
    has_local_sources: bool
    provider: ProviderKind = ProviderKind.CHAT


@dataclass(frozen=True)
class Prompt:
    """A user prompt plus optional system instructions."""
    user: str
    system: Optional[str] = None


# === Summarization ===

SUMMARY_SYSTEM_PROMPT = (
    "You are an expert at creating concise, accurate summaries. Focus on extracting "
    "key facts and maintaining original context without inference or assumptions."
)


def build_summary_prompt(content: str) -> str:
    """Build the fact-extraction prompt for one fetched page."""
    return f"""\
TASK: Create a detailed summary of the provided content.

OUTPUT REQUIREMENTS:
1. Extract key facts and events with their exact source
2. Preserve important quotes verbatim with attribution
3. Include specific dates and numbers exactly as stated
4. Maintain original context without inference
5. Focus on concrete details over analysis
6. For biographical information:
   - Only include facts explicitly stated in the source
   - Do not make assumptions about education, affiliations, or career paths
   - If information is unclear or missing, explicitly state that
   - Use qualifying language like "according to [source]" for each claim

CONTENT TO SUMMARIZE:
{content}"""


# === Source analysis ===

def build_relevance_prompt(local_sources: list[str]) -> str:
    """Ask for the themes of the local sources as a strict JSON object."""
    return f"""\
TASK: Analyze these academic/technical source materials and extract their key themes and topics.

SOURCE MATERIALS:
{SOURCE_SEPARATOR.join(local_sources)}

OUTPUT REQUIREMENTS:
1. Main Topics: List the primary topics/themes discussed across all sources
2. Key Concepts: Extract important theoretical frameworks and concepts
3. Technologies: Identify specific technologies, systems, or implementations mentioned
4. Applications: List concrete applications or use cases described

Format the output as JSON with these exact keys:
{{
  "mainTopics": [],
  "concepts": [],
  "technologies": [],
  "applications": []
}}"""


# === Synthesis ===

ARTICLE_SYSTEM_PROMPT = (
    "You are an expert at creating engaging web content that makes complex topics "
    "accessible while maintaining strict source accuracy. You excel at drawing "
    "meaningful connections while clearly separating fact from analysis."
)


def format_web_source(url: str, content: str) -> str:
    return f"WEB SOURCE: {url}\n{content}"


def build_synthesis_prompt(
    topic: str,
    local_sources: list[str],
    web_sources: list[str],
    config: PromptConfig,
    analysis: SourceAnalysis | None = None,
    min_word_count: int = MIN_WORD_COUNT,
) -> Prompt:
    """Build the article prompt.

    Args:
        topic: Article topic (the keyword).
        local_sources: Primary source texts.
        web_sources: Formatted web summaries (see ``format_web_source``).
        config: Variant selector (local sources present, provider family).
        analysis: Theme analysis of the local sources, if any.
        min_word_count: Minimum article length.

    Returns:
        Prompt; only chat models get a separate system prompt.
    """
    sections = [
        f"TASK: Write an engaging web article about {topic} based on the provided sources.",
        _CONTEXT,
        _source_context(config),
        _contextual_guidance(topic, config, analysis),
        "CRITICAL REQUIREMENTS:\n" + _source_requirements(config) + "\n" + _TRACEABILITY,
        "PROCESS:\n" + _process_steps(config) + "\n" + _PROCESS_TAIL,
        _output_requirements(min_word_count),
        "SOURCE MATERIALS:\n" + _source_materials(local_sources, web_sources, config),
        "Begin by analyzing the sources, then write the article following the process "
        "above while strictly adhering to the critical requirements.",
    ]
    user = "\n\n".join(s for s in sections if s)
    system = ARTICLE_SYSTEM_PROMPT if config.provider == ProviderKind.CHAT else None
    return Prompt(user=user, system=system)


_CONTEXT = """\
CONTEXT:
- Target audience: Web readers seeking informative, accessible content
- Purpose: Educate and inform while maintaining reader engagement
- Style: Conversational but authoritative"""

_TRACEABILITY = """\
- Only use information explicitly present in the provided source materials
- Do not infer, speculate, or fabricate details
- If the source materials do not mention specific facts, clearly state that the information is unavailable
- Each claim must be traceable to a specific source"""

_PROCESS_TAIL = """\
4. Write in clear, accessible language while maintaining accuracy
5. Include relevant quotes with proper attribution
6. Structure content for web readability"""


def _source_context(config: PromptConfig) -> str:
    if config.has_local_sources:
        return """\
SOURCE HIERARCHY:
1. PRIMARY SOURCES: Direct, authoritative materials that must be heavily quoted and prioritized
2. WEB SOURCES: Supporting information to provide additional context only"""
    return """\
SOURCE CONTEXT:
All sources are from web research and should be treated with equal weight"""


def _source_requirements(config: PromptConfig) -> str:
    if config.has_local_sources:
        return """\
- Start with and heavily quote from PRIMARY SOURCE MATERIALS
- Use primary source framework and concepts as the foundation
- Each major section must begin with primary source content
- Only use web sources to supplement primary source information
- Maintain original terminology from primary sources
- Clearly mark any comparative analysis or connections
- If source material differs from the topic, explain how concepts relate
- Include explicit source attributions for all claims"""
    return """\
- Use information only from provided web sources
- Include relevant quotes with proper attribution
- Maintain consistent terminology
- Clearly state when making interpretations
- Mark any uncertain information with qualifying language"""


def _contextual_guidance(
    topic: str, config: PromptConfig, analysis: SourceAnalysis | None
) -> str:
    if config.has_local_sources and analysis is not None:
        lines = [
            "CONTENT APPROACH:",
            f"- Primary source focuses on: {analysis.main_topic}",
            f"- Key concepts to incorporate: {', '.join(analysis.concepts)}",
            f"- Use these concepts as analytical framework when examining {topic}",
            "- Draw connections while maintaining factual accuracy",
            "- Clearly indicate when making comparative analyses",
        ]
        if analysis.suggested_focus:
            lines.append(f"- Suggested focus: {analysis.suggested_focus}")
        return "\n".join(lines)
    return """\
NOTE: Use available sources to:
- Identify relevant technological and conceptual parallels
- Compare methodological approaches
- Draw appropriate connections
- Maintain clear source attribution
- Be explicit about analytical scope"""


def _process_steps(config: PromptConfig) -> str:
    if config.has_local_sources:
        return """\
1. First analyze PRIMARY SOURCES to identify key themes and verified facts
2. Then review WEB SOURCES for supporting context
3. Organize information prioritizing PRIMARY SOURCE content"""
    return """\
1. Analyze all sources to identify key themes and verified facts
2. Cross-reference information across multiple sources when possible
3. Organize information into a coherent narrative"""


def _output_requirements(min_word_count: int) -> str:
    return f"""\
OUTPUT REQUIREMENTS:
1. Format: Clean Markdown with clear section headers
2. Length: Minimum {min_word_count} words
3. Structure:
   - Engaging opening hook based on verified information
   - Clear section breaks with descriptive headers
   - Short, focused paragraphs
   - Natural transitions between ideas
   - Concluding "Key Takeaways" section
4. Content:
   - Use direct quotes with proper attribution
   - Include only specific examples and data points from sources
   - Explain complex concepts simply
   - Maintain strict factual accuracy
   - Indicate source for each major claim"""


def _source_materials(
    local_sources: list[str], web_sources: list[str], config: PromptConfig
) -> str:
    if config.has_local_sources:
        supporting = (
            f"{SUPPORTING_SECTION}:\n{SOURCE_SEPARATOR.join(web_sources)}"
            if web_sources
            else "No web sources available"
        )
        return (
            f"{PRIMARY_SECTION} (direct quotes and key ideas must be used from these):\n"
            f"{SOURCE_SEPARATOR.join(local_sources)}\n\n{supporting}"
        )
    return f"{WEB_ONLY_SECTION}:\n{SOURCE_SEPARATOR.join(web_sources)}"


# === Titles ===

def build_title_prompt(keyword: str, count: int = 10) -> str:
    """Ask for SEO titles, one per line."""
    return (
        f"Generate {count} SEO-optimized titles for the following keyword: {keyword}.\n"
        "Return one title per line with no numbering, quotes or extra commentary."
    )
