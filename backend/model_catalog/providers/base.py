"""Abstract base class for LLM model providers."""

from abc import ABC, abstractmethod

from pydantic_ai.models import Model as PydanticAIModel
from pydantic_ai.settings import ModelSettings

from model_catalog.core.config import settings
from model_catalog.core.exceptions import ProviderNotConfiguredError
from model_catalog.schemas.models import ModelDescriptor, ProviderName

# Settings field holding each vendor's credential.
API_KEY_SETTINGS: dict[ProviderName, str] = {
    ProviderName.OPENAI: "OPENAI_API_KEY",
    ProviderName.ANTHROPIC: "ANTHROPIC_API_KEY",
    ProviderName.GROQ: "GROQ_API_KEY",
    ProviderName.GOOGLE: "GOOGLE_API_KEY",
}


def get_api_key(provider: ProviderName) -> str:
    """Current credential for `provider`, empty when not configured."""
    return getattr(settings, API_KEY_SETTINGS[provider]) or ""


def has_api_key(provider: ProviderName) -> bool:
    """Whether a usable (non-blank) API key is configured for `provider`."""
    return bool(get_api_key(provider).strip())


class ModelProvider(ABC):
    """Abstract base for one catalog model served by a vendor.

    Subclasses fix the vendor (`provider`) and know how to build a
    PydanticAI model for it. Credentials are looked up in API_KEY_SETTINGS.
    """

    provider: ProviderName

    def __init__(
        self,
        model_id: str,
        api_model_id: str,
        display_name: str,
        max_tokens: int = 4096,
        temperature: float = 0.7,
        streaming: bool = True,
    ) -> None:
        self.model_id = model_id
        self.api_model_id = api_model_id
        self.display_name = display_name
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.streaming = streaming

    @property
    def api_key(self) -> str:
        """Credential for this vendor, empty when not configured."""
        return get_api_key(self.provider)

    @abstractmethod
    def _build_model(self, model_settings: ModelSettings) -> PydanticAIModel:
        """Return the vendor-specific PydanticAI model."""

    @property
    def is_configured(self) -> bool:
        """Whether a usable API key is present."""
        return bool(self.api_key.strip())

    def descriptor(self) -> ModelDescriptor:
        return ModelDescriptor(
            id=self.model_id,
            provider=self.provider,
            name=self.api_model_id,
            display_name=self.display_name,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            streaming=self.streaming,
        )

    def create_pydantic_model(
        self,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> PydanticAIModel:
        """Create a PydanticAI model, validating the credential is configured.

        Args:
            temperature: Overrides the catalog default when given.
            max_tokens: Overrides the catalog default when given.

        Raises:
            ProviderNotConfiguredError: If the vendor's API key is missing.
        """
        if not self.is_configured:
            raise ProviderNotConfiguredError(
                f"{self.provider.value} API key is not configured. "
                f"Cannot load model '{self.model_id}'.",
                details={"provider": self.provider.value, "model_id": self.model_id},
            )
        model_settings = ModelSettings(
            temperature=self.temperature if temperature is None else temperature,
            max_tokens=self.max_tokens if max_tokens is None else max_tokens,
        )
        return self._build_model(model_settings)
