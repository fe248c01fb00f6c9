"""Tests for provider adapters and the LLM gateway."""

from unittest.mock import MagicMock

import pytest

from article_engine.common.errors import InvalidResponseError
from article_engine.llm.adapters import ChatAdapter, MessagesAdapter, ReasoningAdapter
from article_engine.llm.client import LLMGateway
from article_engine.llm.models import ProviderKind
from article_engine.llm.pricing import calculate_cost


class TestChatAdapter:
    def test_request_shape(self):
        adapter = ChatAdapter(MagicMock())
        request = adapter.build_request(
            "gpt-4o", "Summarize this", max_tokens=1000, system_prompt="Be precise",
        )

        assert request["model"] == "gpt-4o"
        assert request["messages"] == [
            {"role": "system", "content": "Be precise"},
            {"role": "user", "content": "Summarize this"},
        ]
        assert request["max_tokens"] == 1000
        assert request["temperature"] == 0.3
        assert "max_completion_tokens" not in request
        assert "response_format" not in request

    def test_json_mode_and_temperature_override(self):
        request = ChatAdapter(MagicMock()).build_request(
            "gpt-4o-mini", "Analyze", max_tokens=500, temperature=0.1, json_mode=True,
        )
        assert request["temperature"] == 0.1
        assert request["response_format"] == {"type": "json_object"}
        assert [m["role"] for m in request["messages"]] == ["user"]

    def test_parse_response(self, make_chat_response):
        content, usage = ChatAdapter(MagicMock()).parse_response(
            make_chat_response("Article body", 120, 80), "gpt-4o",
        )
        assert content == "Article body"
        assert usage.prompt_tokens == 120
        assert usage.completion_tokens == 80
        assert usage.total_tokens == 200

    @pytest.mark.parametrize("content", [None, ""])
    def test_empty_content_is_invalid(self, make_chat_response, content):
        with pytest.raises(InvalidResponseError):
            ChatAdapter(MagicMock()).parse_response(make_chat_response(content), "gpt-4o")

    def test_no_choices_is_invalid(self, make_chat_response):
        response = make_chat_response("x")
        response.choices = []
        with pytest.raises(InvalidResponseError):
            ChatAdapter(MagicMock()).parse_response(response, "gpt-4o")

    def test_complete_sends_request(self, make_chat_response):
        client = MagicMock()
        client.chat.completions.create.return_value = make_chat_response("ok")

        content, usage = ChatAdapter(client).complete("gpt-4o", "hi", max_tokens=10)

        assert content == "ok"
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["max_tokens"] == 10

    def test_provider_error_is_reraised(self):
        client = MagicMock()
        client.chat.completions.create.side_effect = RuntimeError("rate limited")

        with pytest.raises(RuntimeError, match="rate limited"):
            ChatAdapter(client).complete("gpt-4o", "hi", max_tokens=10)


class TestReasoningAdapter:
    def test_request_shape(self):
        request = ReasoningAdapter(MagicMock()).build_request(
            "o1-mini", "Write", max_tokens=4000, system_prompt="You are an expert", temperature=0.5,
        )

        assert request["messages"] == [{"role": "user", "content": "You are an expert\n\nWrite"}]
        assert request["max_completion_tokens"] == 4000
        assert "max_tokens" not in request
        assert "temperature" not in request

    def test_parse_response_matches_chat(self, make_chat_response):
        content, usage = ReasoningAdapter(MagicMock()).parse_response(
            make_chat_response("reasoned", 10, 20), "o1-mini",
        )
        assert content == "reasoned"
        assert usage.total_tokens == 30


class TestMessagesAdapter:
    def test_request_shape(self):
        request = MessagesAdapter(MagicMock()).build_request(
            "claude-3-5-sonnet-20241022", "Write", max_tokens=4000,
        )
        assert request == {
            "model": "claude-3-5-sonnet-20241022",
            "max_tokens": 4000,
            "messages": [{"role": "user", "content": "Write"}],
        }

    def test_usage_is_normalized(self, make_messages_response):
        content, usage = MessagesAdapter(MagicMock()).parse_response(
            make_messages_response("Summary", input_tokens=100, output_tokens=50),
            "claude-3-5-sonnet-20241022",
        )
        assert usage.prompt_tokens == 100
        assert usage.completion_tokens == 50
        assert usage.total_tokens == 150
        assert content == [{"type": "text", "text": "Summary"}]

    def test_empty_blocks_are_invalid(self, make_messages_response):
        with pytest.raises(InvalidResponseError):
            MessagesAdapter(MagicMock()).parse_response(
                make_messages_response(None), "claude-3-5-sonnet-20241022",
            )

    def test_blank_text_is_invalid(self, make_messages_response):
        with pytest.raises(InvalidResponseError):
            MessagesAdapter(MagicMock()).parse_response(
                make_messages_response(""), "claude-3-5-sonnet-20241022",
            )


class TestLLMGateway:
    def test_chat_dispatch_with_cost(self, gateway, openai_client, make_chat_response):
        openai_client.chat.completions.create.return_value = make_chat_response("hello", 1000, 500)

        response = gateway.complete("gpt-4o", "prompt", max_tokens=100, system_prompt="sys")

        assert response.text == "hello"
        assert response.provider == ProviderKind.CHAT
        assert response.cost == calculate_cost(1000, 500, "gpt-4o")
        kwargs = openai_client.chat.completions.create.call_args.kwargs
        assert kwargs["messages"][0]["role"] == "system"

    def test_reasoning_dispatch(self, gateway, openai_client, make_chat_response):
        openai_client.chat.completions.create.return_value = make_chat_response("ok")

        response = gateway.complete("o1-mini", "prompt", max_tokens=100, system_prompt="sys")

        assert response.provider == ProviderKind.REASONING
        kwargs = openai_client.chat.completions.create.call_args.kwargs
        assert kwargs["max_completion_tokens"] == 100
        assert "temperature" not in kwargs

    def test_anthropic_dispatch_resolves_model_and_prices_short_name(
        self, gateway, anthropic_client, openai_client, make_messages_response,
    ):
        anthropic_client.messages.create.return_value = make_messages_response("claude says", 100, 50)

        response = gateway.complete("claude-3-5-sonnet", "prompt", max_tokens=100)

        assert response.provider == ProviderKind.MESSAGES
        assert response.text == "claude says"
        assert response.usage.total_tokens == 150
        assert response.cost == calculate_cost(100, 50, "claude-3-5-sonnet")
        assert anthropic_client.messages.create.call_args.kwargs["model"] == "claude-3-5-sonnet-20241022"
        openai_client.chat.completions.create.assert_not_called()

    def test_lazy_clients_need_api_keys(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with pytest.raises(ValueError):
            LLMGateway().complete("gpt-4o", "prompt", max_tokens=10)
