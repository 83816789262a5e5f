# tests/unit/llms/test_openai.py

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from report_kit.llms.base import Message, Role
from report_kit.llms.openai import OpenAILLMClient


@pytest.fixture
def mock_openai_response() -> MagicMock:
    """Create a mock OpenAI response."""
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = '{"venueData": []}'
    response.choices[0].finish_reason = "stop"
    response.usage.prompt_tokens = 10
    response.usage.completion_tokens = 8
    response.usage.total_tokens = 18
    return response


class TestOpenAILLMClient:
    @pytest.mark.asyncio
    async def test_complete_basic(self, mock_openai_response: MagicMock) -> None:
        """Test basic completion."""
        with patch("report_kit.llms.openai.AsyncOpenAI") as mock_openai:
            mock_client = MagicMock()
            mock_client.chat.completions.create = AsyncMock(
                return_value=mock_openai_response
            )
            mock_openai.return_value = mock_client

            client = OpenAILLMClient(api_key="test-key", model="gpt-4o")
            response = await client.complete(
                messages=[Message(role=Role.USER, content="Hello!")]
            )

            assert response.content == '{"venueData": []}'
            assert response.finish_reason == "stop"
            assert response.usage.total_tokens == 18
            assert response.latency_ms > 0

    def test_message_conversion(self) -> None:
        """Test message conversion to OpenAI format."""
        with patch("report_kit.llms.openai.AsyncOpenAI"):
            client = OpenAILLMClient(api_key="test-key")

            messages = [
                Message(role=Role.SYSTEM, content="You are helpful."),
                Message(role=Role.USER, content="Hello"),
                Message(role=Role.ASSISTANT, content="Hi there!"),
            ]

            converted = client._convert_messages(messages)

            assert converted == [
                {"role": "system", "content": "You are helpful."},
                {"role": "user", "content": "Hello"},
                {"role": "assistant", "content": "Hi there!"},
            ]

    @pytest.mark.asyncio
    async def test_finish_reason_mapping(self, mock_openai_response: MagicMock) -> None:
        with patch("report_kit.llms.openai.AsyncOpenAI") as mock_openai:
            mock_client = MagicMock()
            mock_client.chat.completions.create = AsyncMock(
                return_value=mock_openai_response
            )
            mock_openai.return_value = mock_client
            client = OpenAILLMClient(api_key="test-key")

            for raw, expected in [
                ("stop", "stop"),
                ("length", "length"),
                ("content_filter", "error"),
            ]:
                mock_openai_response.choices[0].finish_reason = raw
                response = await client.complete(
                    messages=[Message(role=Role.USER, content="x")]
                )
                assert response.finish_reason == expected

    @pytest.mark.asyncio
    async def test_metrics_recorded(self, mock_openai_response: MagicMock) -> None:
        with patch("report_kit.llms.openai.AsyncOpenAI") as mock_openai:
            mock_client = MagicMock()
            mock_client.chat.completions.create = AsyncMock(
                return_value=mock_openai_response
            )
            mock_openai.return_value = mock_client

            metrics_hook = MagicMock()
            client = OpenAILLMClient(api_key="test-key", metrics_hook=metrics_hook)
            await client.complete(messages=[Message(role=Role.USER, content="Hi")])

            metrics_hook.record_latency.assert_called_once()
            counted = [c[0][0] for c in metrics_hook.increment.call_args_list]
            assert "llm_requests_total" in counted
            assert "llm_tokens_total" in counted
