"""
LLM Factory Module
==================
行程生成所用的聊天模型工厂

Every provider speaks the OpenAI chat protocol, so one ChatOpenAI class covers
them all; the table below only maps a provider to its env variable names and
default model. Callers own the returned instance.
"""

import logging
import os
from typing import Literal

from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI
from pydantic import SecretStr

logger = logging.getLogger(__name__)

LLMProvider = Literal["openai", "qwen", "gemini", "deepseek"]
DEFAULT_PROVIDER: LLMProvider = "openai"
DEFAULT_TEMPERATURE = 0.6

# provider -> env variable names + default model
PROVIDER_CONFIG: dict[str, dict[str, str]] = {
    "openai": {
        "api_key_var": "OPENAI_API_KEY",
        "base_url_var": "OPENAI_BASE_URL",
        "model_var": "OPENAI_MODEL",
        "default_model": "gpt-4o-mini",
    },
    "qwen": {
        "api_key_var": "QWEN_API_KEY",
        "base_url_var": "QWEN_BASE_URL",
        "model_var": "QWEN_MODEL",
        "default_model": "qwen-plus-latest",
    },
    "gemini": {
        "api_key_var": "GEMINI_API_KEY",
        "base_url_var": "GEMINI_BASE_URL",
        "model_var": "GEMINI_MODEL",
        "default_model": "gemini-2.0-flash",
    },
    "deepseek": {
        "api_key_var": "DEEPSEEK_API_KEY",
        "base_url_var": "DEEPSEEK_BASE_URL",
        "model_var": "DEEPSEEK_MODEL",
        "default_model": "deepseek-chat",
    },
}


def get_default_provider() -> LLMProvider:
    """获取默认 Provider（从环境变量读取，默认 openai）"""
    provider = os.getenv("LLM_PROVIDER", DEFAULT_PROVIDER).lower()
    if provider not in PROVIDER_CONFIG:
        logger.warning(f"Unknown LLM_PROVIDER '{provider}', falling back to '{DEFAULT_PROVIDER}'")
        return DEFAULT_PROVIDER
    return provider  # type: ignore


def get_default_temperature() -> float:
    """获取行程生成温度（ITINERARY_TEMPERATURE，默认 0.6）"""
    raw = os.getenv("ITINERARY_TEMPERATURE")
    if not raw:
        return DEFAULT_TEMPERATURE
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid ITINERARY_TEMPERATURE '{raw}', using {DEFAULT_TEMPERATURE}")
        return DEFAULT_TEMPERATURE


def create_llm(
    provider: LLMProvider | None = None,
    temperature: float = DEFAULT_TEMPERATURE,
    **kwargs,
) -> BaseChatModel:
    """
    Build a chat model for the itinerary call

    Model and base URL come from the provider's env variables; an empty
    base URL means the provider default endpoint. Extra keyword arguments go
    straight to ChatOpenAI.

    Raises:
        ValueError: unknown provider, or its API key variable is unset
    """
    provider = provider or get_default_provider()
    config = PROVIDER_CONFIG.get(provider)

    if not config:
        raise ValueError(f"Unsupported provider: {provider}")

    api_key = os.getenv(config["api_key_var"])
    if not api_key:
        raise ValueError(f"Provider '{provider}' needs an API key: set {config['api_key_var']}")

    base_url = os.getenv(config["base_url_var"]) or None
    model = os.getenv(config["model_var"], config["default_model"])

    logger.debug(f"Creating LLM: provider={provider}, model={model}, temperature={temperature}")

    return ChatOpenAI(
        model=model,
        api_key=SecretStr(api_key),
        base_url=base_url,
        temperature=temperature,
        **kwargs,
    )
