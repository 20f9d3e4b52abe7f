"""Google Gemini (direct API) model provider."""

from pydantic_ai.models import Model as PydanticAIModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.settings import ModelSettings

from model_catalog.providers.base import ModelProvider
from model_catalog.schemas.models import ProviderName


class GoogleModelProvider(ModelProvider):
    """Provider for Gemini models accessed with a Google AI Studio key.

    `max_tokens` is forwarded by PydanticAI as Gemini's `max_output_tokens`.
    """

    provider = ProviderName.GOOGLE

    def _build_model(self, model_settings: ModelSettings) -> PydanticAIModel:
        return GoogleModel(
            self.api_model_id,
            provider=GoogleProvider(api_key=self.api_key),
            settings=model_settings,
        )
