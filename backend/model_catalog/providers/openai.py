"""OpenAI model provider."""

from pydantic_ai.models import Model as PydanticAIModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider
from pydantic_ai.settings import ModelSettings

from model_catalog.providers.base import ModelProvider
from model_catalog.schemas.models import ProviderName


class OpenAIModelProvider(ModelProvider):
    """Provider for chat models served by the OpenAI API."""

    provider = ProviderName.OPENAI

    def _build_model(self, model_settings: ModelSettings) -> PydanticAIModel:
        return OpenAIChatModel(
            self.api_model_id,
            provider=OpenAIProvider(api_key=self.api_key),
            settings=model_settings,
        )
