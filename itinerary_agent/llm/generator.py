"""
Text Generator
==============
The external generation service as an injectable collaborator

Contract: ``await generator.generate(system_prompt, user_payload) -> str``.
The API receives a generator instance instead of reaching for a shared client,
so tests can hand in a fake.
"""

import logging
from typing import Any, Protocol

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from itinerary_agent.llm.factory import LLMProvider, create_llm, get_default_temperature

logger = logging.getLogger(__name__)

JSON_RESPONSE_FORMAT = {"type": "json_object"}


class TextGenerator(Protocol):
    """Anything that turns a system prompt plus a user payload into text"""

    async def generate(self, system_prompt: str, user_payload: str) -> str: ...


def _message_text(content: Any) -> str:
    """提取消息文本（content 可能是 str 或分段列表）"""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(str(part.get("text", "")))
        return "".join(parts)
    return ""


class ChatModelTextGenerator:
    """
    基于 LangChain Chat Model 的文本生成器

    The model is bound to JSON output mode; one request per call, no retry.
    """

    def __init__(self, llm: BaseChatModel) -> None:
        self._json_llm = llm.bind(response_format=JSON_RESPONSE_FORMAT)

    async def generate(self, system_prompt: str, user_payload: str) -> str:
        messages = [
            SystemMessage(content=system_prompt),
            HumanMessage(content=user_payload),
        ]
        response = await self._json_llm.ainvoke(messages)
        text = _message_text(getattr(response, "content", None))
        logger.info(f"Model returned {len(text)} characters")
        return text


def create_itinerary_generator(
    provider: LLMProvider | None = None,
    temperature: float | None = None,
) -> ChatModelTextGenerator:
    """
    创建默认的行程生成器

    Args:
        provider: LLM 提供商（默认从 LLM_PROVIDER 读取）
        temperature: 温度（默认从 ITINERARY_TEMPERATURE 读取，0.6）

    Raises:
        ValueError: 缺少 API Key
    """
    if temperature is None:
        temperature = get_default_temperature()
    return ChatModelTextGenerator(create_llm(provider=provider, temperature=temperature))
