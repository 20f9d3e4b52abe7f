"""Groq model provider."""

from pydantic_ai.models import Model as PydanticAIModel
from pydantic_ai.models.groq import GroqModel
from pydantic_ai.providers.groq import GroqProvider
from pydantic_ai.settings import ModelSettings

from model_catalog.providers.base import ModelProvider
from model_catalog.schemas.models import ProviderName


class GroqModelProvider(ModelProvider):
    """Provider for open-weight models hosted on Groq.

    Groq enforces tighter per-request token limits than the other vendors,
    so catalog entries keep `max_tokens` conservative.
    """

    provider = ProviderName.GROQ

    def _build_model(self, model_settings: ModelSettings) -> PydanticAIModel:
        return GroqModel(
            self.api_model_id,
            provider=GroqProvider(api_key=self.api_key),
            settings=model_settings,
        )
