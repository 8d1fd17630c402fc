"""
WEB 420 API: Composer Route Handlers
====================================

What:  Full CRUD for /api/composers.
"""

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from web420.database import get_db_session
from web420.schemas.common import ErrorResponse
from web420.schemas.composer import ComposerRequest, ComposerResponse
from web420.services.composer_service import composer_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Composers"])

_NOT_FOUND = {404: {"description": "Composer not found", "model": ErrorResponse}}
_DB_ERROR = {501: {"description": "Database Exception", "model": ErrorResponse}}


@router.get(
    "/composers",
    response_model=List[ComposerResponse],
    responses={**_DB_ERROR},
    summary="Returns a list of composer documents",
)
async def find_all_composers(db: AsyncSession = Depends(get_db_session)) -> List[ComposerResponse]:
    return await composer_service.list_composers(db)


@router.get(
    "/composers/{composer_id}",
    response_model=ComposerResponse,
    responses={**_NOT_FOUND, **_DB_ERROR},
    summary="Returns a composer document",
)
async def find_composer_by_id(
    composer_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> ComposerResponse:
    """Invalid UUIDs are rejected by FastAPI with 422 before reaching the service."""
    return await composer_service.get_composer(db, composer_id)


@router.post(
    "/composers",
    response_model=ComposerResponse,
    responses={**_DB_ERROR},
    summary="Creates a new composer object",
)
async def create_composer(
    body: ComposerRequest,
    db: AsyncSession = Depends(get_db_session),
) -> ComposerResponse:
    return await composer_service.create_composer(db, body)


@router.put(
    "/composers/{composer_id}",
    response_model=ComposerResponse,
    responses={**_NOT_FOUND, **_DB_ERROR},
    summary="Updates an existing composer document",
)
async def update_composer_by_id(
    composer_id: UUID,
    body: ComposerRequest,
    db: AsyncSession = Depends(get_db_session),
) -> ComposerResponse:
    return await composer_service.update_composer(db, composer_id, body)


@router.delete(
    "/composers/{composer_id}",
    response_model=ComposerResponse,
    responses={**_NOT_FOUND, **_DB_ERROR},
    summary="Deletes a composer document",
)
async def delete_composer_by_id(
    composer_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> ComposerResponse:
    return await composer_service.delete_composer(db, composer_id)
