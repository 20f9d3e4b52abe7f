"""Anthropic model provider."""

from pydantic_ai.models import Model as PydanticAIModel
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.settings import ModelSettings

from model_catalog.providers.base import ModelProvider
from model_catalog.schemas.models import ProviderName


class AnthropicModelProvider(ModelProvider):
    """Provider for Claude models served by the Anthropic API."""

    provider = ProviderName.ANTHROPIC

    def _build_model(self, model_settings: ModelSettings) -> PydanticAIModel:
        return AnthropicModel(
            self.api_model_id,
            provider=AnthropicProvider(api_key=self.api_key),
            settings=model_settings,
        )
