"""Schemas for the model catalog endpoints."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ProviderName(str, Enum):
    """Language-model vendors known to the catalog."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GROQ = "groq"
    GOOGLE = "google"


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys for the frontend."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )


class ModelDescriptor(CamelModel):
    """One catalog entry returned by the /models endpoint."""

    id: str
    provider: ProviderName
    name: str
    display_name: str
    max_tokens: int
    temperature: float = 0.7
    streaming: bool = True


class ModelListResponse(CamelModel):
    """Models whose provider has a key, plus the full provider key map."""

    models: list[ModelDescriptor]
    api_keys: dict[ProviderName, bool]


class ModelDetail(ModelDescriptor):
    """Catalog entry together with its current availability."""

    available: bool


class ModelTestRequest(BaseModel):
    """Prompt sent to a model by the connectivity test."""

    prompt: str = Field(default="Hello, please reply with 'test successful'.", min_length=1)


class ModelTestResult(CamelModel):
    """Outcome of a connectivity test against a model."""

    model_id: str
    response: str
    response_time_ms: int
    usage: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Generic failure body."""

    error: str
