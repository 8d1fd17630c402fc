"""WEB 420 API: Person route handlers (GET/POST /api/persons)."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from web420.database import get_db_session
from web420.schemas.common import ErrorResponse
from web420.schemas.person import PersonRequest, PersonResponse
from web420.services.person_service import person_service

router = APIRouter(prefix="/api", tags=["Persons"])


@router.get(
    "/persons",
    response_model=List[PersonResponse],
    responses={501: {"description": "Database Exception", "model": ErrorResponse}},
    summary="Returns a list of person documents",
)
async def find_all_persons(db: AsyncSession = Depends(get_db_session)) -> List[PersonResponse]:
    return await person_service.list_persons(db)


@router.post(
    "/persons",
    response_model=PersonResponse,
    responses={501: {"description": "Database Exception", "model": ErrorResponse}},
    summary="Creates a new person document",
)
async def create_person(
    body: PersonRequest,
    db: AsyncSession = Depends(get_db_session),
) -> PersonResponse:
    return await person_service.create_person(db, body)
