"""
WEB 420 API: User Route Handlers
================================

What:  POST /api/signup (register) and POST /api/login (authenticate).
How:   Validate the body with Pydantic, delegate to AuthService.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from web420.database import get_db_session
from web420.schemas.common import ErrorResponse, MessageResponse
from web420.schemas.user import LoginRequest, SignupRequest, UserResponse
from web420.services.auth_service import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Users"])


@router.post(
    "/signup",
    response_model=UserResponse,
    responses={
        200: {"description": "User added to the database", "model": UserResponse},
        401: {"description": "Username is already in use", "model": ErrorResponse},
        500: {"description": "Server Exception", "model": ErrorResponse},
        501: {"description": "Database Exception", "model": ErrorResponse},
    },
    summary="Register user",
)
async def signup(
    body: SignupRequest,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    """
    Register a new user.

    The password is bcrypt-hashed before storage; the response carries the
    stored user without the hash.
    """
    return await auth_service.register(
        db=db,
        username=body.username,
        password=body.password,
        email_addresses=[e.model_dump(by_alias=True) for e in body.email_addresses],
    )


@router.post(
    "/login",
    response_model=MessageResponse,
    responses={
        200: {"description": "User logged in", "model": MessageResponse},
        401: {"description": "Invalid username and/or password", "model": ErrorResponse},
        500: {"description": "Server Exception", "model": ErrorResponse},
        501: {"description": "Database Exception", "model": ErrorResponse},
    },
    summary="Logs the user in",
)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    """Check credentials. Returns a status message only; no session is created."""
    return await auth_service.authenticate(db=db, username=body.username, password=body.password)
