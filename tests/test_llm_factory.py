"""
单元测试 - LLM 工厂与文本生成器
===============================
Provider 配置、温度读取、JSON 模式绑定与消息构造（Mock LLM，不发网络请求）
"""

import asyncio
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from itinerary_agent.llm.factory import (
    create_llm,
    get_default_provider,
    get_default_temperature,
)
from itinerary_agent.llm.generator import (
    JSON_RESPONSE_FORMAT,
    ChatModelTextGenerator,
    create_itinerary_generator,
)

# ==================== Factory ====================


class TestProviderConfig:
    def test_default_provider_is_openai(self):
        with patch.dict(os.environ, {}, clear=True):
            assert get_default_provider() == "openai"

    def test_unknown_provider_falls_back(self):
        with patch.dict(os.environ, {"LLM_PROVIDER": "mystery"}, clear=True):
            assert get_default_provider() == "openai"

    def test_provider_from_env(self):
        with patch.dict(os.environ, {"LLM_PROVIDER": "Qwen"}, clear=True):
            assert get_default_provider() == "qwen"

    @patch("itinerary_agent.llm.factory.ChatOpenAI")
    def test_openai_default_model(self, mock_chat):
        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-test"}, clear=True):
            create_llm()

        assert mock_chat.call_args.kwargs["model"] == "gpt-4o-mini"

    def test_unsupported_provider_raises(self):
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_llm(provider="nope")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "env, expected",
    [({}, 0.6), ({"ITINERARY_TEMPERATURE": "0.2"}, 0.2), ({"ITINERARY_TEMPERATURE": "hot"}, 0.6)],
)
def test_default_temperature(env, expected):
    with patch.dict(os.environ, env, clear=True):
        assert get_default_temperature() == expected


def test_create_llm_requires_api_key():
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(ValueError, match="OPENAI_API_KEY"):
            create_llm()


@patch("itinerary_agent.llm.factory.ChatOpenAI")
def test_create_llm_passes_model_and_temperature(mock_chat):
    env = {"OPENAI_API_KEY": "sk-test", "OPENAI_MODEL": "gpt-4o"}
    with patch.dict(os.environ, env, clear=True):
        create_llm(temperature=0.3)

    kwargs = mock_chat.call_args.kwargs
    assert kwargs["model"] == "gpt-4o"
    assert kwargs["temperature"] == 0.3
    assert kwargs["base_url"] is None
    assert kwargs["api_key"].get_secret_value() == "sk-test"


# ==================== Text Generator ====================


@pytest.fixture
def mock_llm() -> MagicMock:
    """创建 Mock LLM，bind() 返回带 ainvoke 的 runnable"""
    llm = MagicMock()
    bound = MagicMock()
    bound.ainvoke = AsyncMock(return_value=AIMessage(content='{"days": []}'))
    llm.bind = MagicMock(return_value=bound)
    return llm


def test_generator_binds_json_mode(mock_llm):
    ChatModelTextGenerator(mock_llm)

    mock_llm.bind.assert_called_once_with(response_format=JSON_RESPONSE_FORMAT)


def test_generator_sends_system_and_user_messages(mock_llm):
    generator = ChatModelTextGenerator(mock_llm)

    text = asyncio.run(generator.generate("be a planner", '{"destination": "Lisbon"}'))

    assert text == '{"days": []}'
    messages = mock_llm.bind.return_value.ainvoke.call_args.args[0]
    assert isinstance(messages[0], SystemMessage)
    assert messages[0].content == "be a planner"
    assert isinstance(messages[1], HumanMessage)
    assert messages[1].content == '{"destination": "Lisbon"}'


def test_generator_joins_content_parts(mock_llm):
    mock_llm.bind.return_value.ainvoke.return_value = AIMessage(
        content=[{"type": "text", "text": '{"a": '}, {"type": "text", "text": "1}"}]
    )
    generator = ChatModelTextGenerator(mock_llm)

    assert asyncio.run(generator.generate("s", "u")) == '{"a": 1}'


def test_generator_returns_empty_text_for_empty_content(mock_llm):
    mock_llm.bind.return_value.ainvoke.return_value = AIMessage(content="")
    generator = ChatModelTextGenerator(mock_llm)

    assert asyncio.run(generator.generate("s", "u")) == ""


@patch("itinerary_agent.llm.generator.create_llm")
def test_create_itinerary_generator_uses_env_temperature(mock_create_llm):
    with patch.dict(os.environ, {"ITINERARY_TEMPERATURE": "0.9"}, clear=True):
        generator = create_itinerary_generator()

    assert isinstance(generator, ChatModelTextGenerator)
    mock_create_llm.assert_called_once_with(provider=None, temperature=0.9)
