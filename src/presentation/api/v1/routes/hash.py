from typing import Annotated

from fastapi import APIRouter, Depends, Header, Query, Request

from src.application.interfaces import IHashService
from src.infrastructure.config.settings import Settings, get_settings
from src.presentation.api.dependencies import get_hash_service
from src.presentation.api.rate_limit import limiter
from src.presentation.api.v1.renderers import (algorithms_response,
                                               hash_response)
from src.presentation.api.v1.schemas.hash import (AlgorithmResponse,
                                                  ErrorResponseSchema,
                                                  HashResponse)

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponseSchema, "description": "Invalid algorithm or input"},
    403: {"model": ErrorResponseSchema, "description": "Deprecated algorithm requested"},
    500: {"model": ErrorResponseSchema, "description": "Computation or configuration failure"},
}


@router.get(
    "/hash",
    responses={200: {"model": HashResponse, "content": {"text/html": {}}}, **_ERROR_RESPONSES},
)
@limiter.limit(get_settings().rate_limit)
async def generate_hash(
    request: Request,
    service: Annotated[IHashService, Depends(get_hash_service)],
    settings: Annotated[Settings, Depends(get_settings)],
    algorithm: Annotated[str | None, Query(description="Digest algorithm")] = None,
    data: Annotated[str, Query(description="Text appended to the server label")] = "",
    accept: Annotated[str | None, Header()] = None,
):
    """
    Compute a digest of the server label combined with caller data.

    Responds with JSON or HTML depending on the Accept header. Failures are
    raised to the application exception handlers, which return a generic
    message and an X-Correlation-ID header.
    """
    result = service.compute_hash(f"{settings.hash_data_label} {data}", algorithm)
    return hash_response(result, accept)


@router.get(
    "/algorithms",
    responses={200: {"model": list[AlgorithmResponse], "content": {"text/html": {}}}},
)
async def list_algorithms(
    service: Annotated[IHashService, Depends(get_hash_service)],
    accept: Annotated[str | None, Header()] = None,
):
    """List the secure algorithms available for hashing"""
    return algorithms_response(service.list_supported_algorithms(), accept)
