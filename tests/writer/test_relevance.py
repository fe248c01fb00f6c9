"""Tests for local source theme analysis."""

import json

import pytest

from article_engine.common.errors import ParseError
from article_engine.writer.relevance import (
    SourceRelevanceAnalyzer,
    build_analysis,
    fallback_analysis,
    parse_analysis_json,
    topic_overlaps,
)

ANALYSIS = {
    "mainTopics": ["Memory safety", "Ownership model"],
    "concepts": ["borrowing", "lifetimes"],
    "technologies": ["Rust compiler"],
    "applications": ["systems programming"],
}


class TestParseAnalysisJson:
    def test_plain_json(self):
        assert parse_analysis_json(json.dumps(ANALYSIS)) == ANALYSIS

    def test_code_fenced_json(self):
        text = "```json\n" + json.dumps(ANALYSIS) + "\n```"
        assert parse_analysis_json(text) == ANALYSIS

    def test_invalid_json(self):
        with pytest.raises(ParseError):
            parse_analysis_json("not json at all")

    def test_non_object(self):
        with pytest.raises(ParseError):
            parse_analysis_json("[1, 2, 3]")


class TestBuildAnalysis:
    def test_relevant_when_terms_overlap(self):
        analysis = build_analysis("rust ownership", ANALYSIS)

        assert analysis.is_relevant
        assert analysis.concepts == ["borrowing", "lifetimes"]
        assert "Memory safety" in analysis.main_topic
        assert "relate to rust ownership" in analysis.suggested_focus

    def test_not_relevant_without_overlap(self):
        analysis = build_analysis("gardening", ANALYSIS)

        assert not analysis.is_relevant
        assert "can inform our understanding of gardening" in analysis.suggested_focus

    def test_missing_keys_default_to_empty(self):
        analysis = build_analysis("rust", {})
        assert analysis.main_topic == "rust"
        assert analysis.concepts == []

    def test_topic_overlaps_is_case_insensitive(self):
        assert topic_overlaps("RUST", ["rust compiler"])
        assert not topic_overlaps("python", ["rust compiler"])


class TestSourceRelevanceAnalyzer:
    def test_single_json_mode_call(self, gateway, openai_client, make_chat_response):
        openai_client.chat.completions.create.return_value = make_chat_response(json.dumps(ANALYSIS))

        analysis = SourceRelevanceAnalyzer(gateway).analyze("rust ownership", ["doc one", "doc two"])

        assert analysis.is_relevant
        assert openai_client.chat.completions.create.call_count == 1
        kwargs = openai_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["temperature"] == 0.1
        assert kwargs["response_format"] == {"type": "json_object"}
        assert "doc one\n\n---\n\ndoc two" in kwargs["messages"][-1]["content"]

    def test_unparseable_response_falls_back(self, gateway, openai_client, make_chat_response):
        openai_client.chat.completions.create.return_value = make_chat_response("Sure! Here you go")

        analysis = SourceRelevanceAnalyzer(gateway).analyze("rust", ["doc"])

        assert analysis == fallback_analysis("rust")

    def test_provider_error_falls_back(self, gateway, openai_client):
        openai_client.chat.completions.create.side_effect = RuntimeError("boom")

        analysis = SourceRelevanceAnalyzer(gateway).analyze("rust", ["doc"])

        assert analysis.is_relevant
        assert analysis.main_topic == "rust"
        assert analysis.concepts == []
        assert analysis.suggested_focus == "Analyzing rust using available source materials"
