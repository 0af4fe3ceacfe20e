"""
LLM Module
==========
LLM 工厂与行程文本生成器

Usage:
    from itinerary_agent.llm import create_itinerary_generator, create_llm

    # 使用默认 provider (从 LLM_PROVIDER 环境变量读取，默认 openai)
    generator = create_itinerary_generator()
    text = await generator.generate(system_prompt, user_payload)

    # 指定 provider
    llm = create_llm(provider="qwen", temperature=0.0)
"""

from itinerary_agent.llm.factory import (
    LLMProvider,
    create_llm,
    get_default_provider,
    get_default_temperature,
)
from itinerary_agent.llm.generator import (
    ChatModelTextGenerator,
    TextGenerator,
    create_itinerary_generator,
)

__all__ = [
    "LLMProvider",
    "create_llm",
    "get_default_provider",
    "get_default_temperature",
    "TextGenerator",
    "ChatModelTextGenerator",
    "create_itinerary_generator",
]
