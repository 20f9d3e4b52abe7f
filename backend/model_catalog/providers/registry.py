"""Model registry — the single source of truth for all catalog models."""

import logging

from pydantic_ai.models import Model as PydanticAIModel

from model_catalog.core.exceptions import AppException, ExternalServiceError, NotFoundError
from model_catalog.core.messages import get_message
from model_catalog.providers.anthropic import AnthropicModelProvider
from model_catalog.providers.base import API_KEY_SETTINGS, ModelProvider, has_api_key
from model_catalog.providers.google import GoogleModelProvider
from model_catalog.providers.groq import GroqModelProvider
from model_catalog.providers.openai import OpenAIModelProvider
from model_catalog.schemas.models import ModelDescriptor, ProviderName

logger = logging.getLogger(__name__)

MODEL_REGISTRY: dict[str, ModelProvider] = {
    # OpenAI
    "gpt-4o-mini": OpenAIModelProvider(
        model_id="gpt-4o-mini",
        api_model_id="gpt-4o-mini",
        display_name="GPT-4o Mini",
        max_tokens=4096,
    ),
    "gpt-4o": OpenAIModelProvider(
        model_id="gpt-4o",
        api_model_id="gpt-4o",
        display_name="GPT-4o",
        max_tokens=4096,
    ),
    # Anthropic
    "claude-3-5-haiku": AnthropicModelProvider(
        model_id="claude-3-5-haiku",
        api_model_id="claude-3-5-haiku-latest",
        display_name="Claude 3.5 Haiku",
        max_tokens=4000,
    ),
    "claude-sonnet-4": AnthropicModelProvider(
        model_id="claude-sonnet-4",
        api_model_id="claude-sonnet-4-0",
        display_name="Claude Sonnet 4",
        max_tokens=4000,
    ),
    # Groq
    "llama-3.1-8b-instant": GroqModelProvider(
        model_id="llama-3.1-8b-instant",
        api_model_id="llama-3.1-8b-instant",
        display_name="Llama 3.1 8B",
        max_tokens=8000,
    ),
    "llama-3.3-70b-versatile": GroqModelProvider(
        model_id="llama-3.3-70b-versatile",
        api_model_id="llama-3.3-70b-versatile",
        display_name="Llama 3.3 70B",
        max_tokens=8000,
    ),
    # Google Gemini
    "gemini-2.5-flash": GoogleModelProvider(
        model_id="gemini-2.5-flash",
        api_model_id="gemini-2.5-flash",
        display_name="Gemini 2.5 Flash",
        max_tokens=8192,
    ),
    "gemini-2.5-pro": GoogleModelProvider(
        model_id="gemini-2.5-pro",
        api_model_id="gemini-2.5-pro",
        display_name="Gemini 2.5 Pro",
        max_tokens=8192,
    ),
}


def get_available_models() -> list[ModelDescriptor]:
    """Return every catalog model in registry order, regardless of key state."""
    return [provider.descriptor() for provider in MODEL_REGISTRY.values()]


def validate_api_keys() -> dict[ProviderName, bool]:
    """Report, per provider, whether a usable API key is configured.

    Read from settings on every call so key changes show up immediately.
    """
    return {provider: has_api_key(provider) for provider in API_KEY_SETTINGS}


def get_provider(model_id: str) -> ModelProvider:
    """Return the ModelProvider for the given model ID.

    Raises:
        NotFoundError: If the model is not in the catalog.
    """
    try:
        return MODEL_REGISTRY[model_id]
    except KeyError:
        raise NotFoundError(
            get_message("model_not_found"),
            details={"model_id": model_id},
        ) from None


def create_chat_model(
    model_id: str,
    temperature: float | None = None,
    max_tokens: int | None = None,
) -> PydanticAIModel:
    """Build a ready-to-use PydanticAI model for a catalog entry.

    Option overrides fall back to the catalog defaults.

    Raises:
        NotFoundError: Unknown model ID.
        ProviderNotConfiguredError: The provider's API key is missing.
        ExternalServiceError: The vendor SDK failed to construct the model.
    """
    provider = get_provider(model_id)
    logger.info(
        "Creating %s model %s (temperature=%s, max_tokens=%s)",
        provider.provider.value,
        provider.api_model_id,
        provider.temperature if temperature is None else temperature,
        provider.max_tokens if max_tokens is None else max_tokens,
    )
    try:
        return provider.create_pydantic_model(temperature=temperature, max_tokens=max_tokens)
    except AppException:
        raise
    except Exception as e:
        logger.exception("Failed to create %s model %s", provider.provider.value, model_id)
        raise ExternalServiceError(
            f"Failed to create {provider.provider.value} model: {e}",
            details={"model_id": model_id},
        ) from e
