# This file defines the studio listing endpoints: filtered list, lookup, create, replace, and delete.
# Routers stay transport-focused; filter resolution and record shaping live in `StudioService`.
# Missing records answer 404 with an empty body; draft violations surface as 400 through the error handlers.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from studio_api.api.dependencies import get_studio_service
from studio_api.api.schemas.common import ErrorResponse, ValidationErrorResponse
from studio_api.api.schemas.studio_schemas import StudioDraft, StudioResponse
from studio_api.api.services.studio_service import StudioService

router = APIRouter(prefix="/studios", tags=["studios"])
StudioServiceDep = Annotated[StudioService, Depends(get_studio_service)]
# Ids are BIGINT columns; anything outside the signed 64-bit range is a malformed request.
StudioId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]

_NOT_FOUND: dict[int | str, dict[str, object]] = {404: {"description": "Studio not found."}}
_INVALID: dict[int | str, dict[str, object]] = {
    400: {"model": ValidationErrorResponse, "description": "Draft failed validation."},
}
_BAD_QUERY: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse, "description": "Malformed query parameters."},
}


@router.get("", response_model=list[StudioResponse], responses=_BAD_QUERY)
def list_studios(
    service: StudioServiceDep,
    location: str | None = Query(default=None),
    max_price: float | None = Query(default=None, alias="maxPrice"),
    search: str | None = Query(default=None),
    available_only: bool = Query(default=False, alias="availableOnly"),
) -> list[dict[str, object]]:
    return service.list_studios(
        location=location,
        max_price=max_price,
        search=search,
        available_only=available_only,
    )


@router.get("/{studio_id}", response_model=StudioResponse, responses=_NOT_FOUND)
def get_studio(studio_id: StudioId, service: StudioServiceDep) -> object:
    studio = service.get_studio(studio_id)
    if studio is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return studio


@router.post(
    "",
    response_model=StudioResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_INVALID,
)
def create_studio(draft: StudioDraft, service: StudioServiceDep) -> dict[str, object]:
    return service.create_studio(draft)


@router.put("/{studio_id}", response_model=StudioResponse, responses={**_NOT_FOUND, **_INVALID})
def update_studio(studio_id: StudioId, draft: StudioDraft, service: StudioServiceDep) -> object:
    studio = service.update_studio(studio_id, draft)
    if studio is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return studio


@router.delete(
    "/{studio_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
)
def delete_studio(studio_id: StudioId, service: StudioServiceDep) -> Response:
    if not service.delete_studio(studio_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
