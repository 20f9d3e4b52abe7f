"""Models endpoints — which LLM models the frontend can use right now."""

import logging
import time

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic_ai import Agent

from model_catalog.core.exceptions import ProviderCallError
from model_catalog.core.messages import get_message
from model_catalog.providers.registry import (
    create_chat_model,
    get_available_models,
    get_provider,
    validate_api_keys,
)
from model_catalog.schemas.models import (
    ErrorResponse,
    ModelDetail,
    ModelListResponse,
    ModelTestRequest,
    ModelTestResult,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/models",
    response_model=ModelListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_models() -> ModelListResponse | JSONResponse:
    """Return the models whose provider has an API key configured.

    `apiKeys` always carries every known provider, so the caller can tell
    "provider known but unconfigured" apart from "provider unknown".

    Any failure is logged and reported as a generic 500; no partial
    results are returned.
    """
    try:
        models = get_available_models()
        api_keys = validate_api_keys()
        available = [model for model in models if api_keys.get(model.provider, False)]
        return ModelListResponse(models=available, api_keys=api_keys)
    except Exception:
        logger.exception("Error fetching model information")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=get_message("models_fetch_failed")).model_dump(),
        )


@router.get("/models/{model_id}", response_model=ModelDetail)
async def get_model(model_id: str) -> ModelDetail:
    """Return one catalog entry and whether its provider is configured.

    Raises:
        NotFoundError: If the model is not in the catalog (404).
    """
    provider = get_provider(model_id)
    return ModelDetail(
        **provider.descriptor().model_dump(),
        available=provider.is_configured,
    )


@router.post("/models/{model_id}/test", response_model=ModelTestResult)
async def test_model(
    model_id: str,
    payload: ModelTestRequest | None = None,
) -> ModelTestResult:
    """Send one prompt to a model and report the reply and latency.

    Raises:
        NotFoundError: Unknown model (404).
        ProviderNotConfiguredError: Provider has no API key (503).
        ProviderCallError: The provider call failed (502).
    """
    model = create_chat_model(model_id)
    agent = Agent(model)

    start = time.perf_counter()
    try:
        result = await agent.run((payload or ModelTestRequest()).prompt)
    except Exception as e:
        logger.exception("Model test failed for %s", model_id)
        raise ProviderCallError(
            get_message("model_test_failed"),
            details={"model_id": model_id, "reason": str(e)},
        ) from e
    elapsed_ms = int((time.perf_counter() - start) * 1000)

    # `usage` is a method on pydantic-ai 1.x results and a property on 2.x
    usage = result.usage() if callable(result.usage) else result.usage
    return ModelTestResult(
        model_id=model_id,
        response=result.output,
        response_time_ms=elapsed_ms,
        usage={
            "requests": usage.requests,
            "input_tokens": usage.input_tokens,
            "output_tokens": usage.output_tokens,
            "total_tokens": usage.total_tokens,
        },
    )
