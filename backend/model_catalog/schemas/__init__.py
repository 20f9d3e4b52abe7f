"""Pydantic schemas."""

from model_catalog.schemas.models import (
    ErrorResponse,
    ModelDescriptor,
    ModelDetail,
    ModelListResponse,
    ModelTestRequest,
    ModelTestResult,
    ProviderName,
)

__all__ = [
    "ErrorResponse",
    "ModelDescriptor",
    "ModelDetail",
    "ModelListResponse",
    "ModelTestRequest",
    "ModelTestResult",
    "ProviderName",
]
