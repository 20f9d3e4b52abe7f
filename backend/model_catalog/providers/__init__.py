"""LLM model provider abstractions and registry."""

from .base import ModelProvider
from .registry import (
    create_chat_model,
    get_available_models,
    get_provider,
    validate_api_keys,
)

__all__ = [
    "ModelProvider",
    "create_chat_model",
    "get_available_models",
    "get_provider",
    "validate_api_keys",
]
