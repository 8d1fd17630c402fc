"""
WEB 420 API: Credential Registration & Authentication
=====================================================

What:  The signup and login flows.
How:   Sequential, dependent store calls through UserStore; bcrypt for
       hashing and verification, run in Starlette's worker thread pool.
Who:   Called by routes/users.py.

Register(username, password, email_addresses):
    1. find_by_username          → found? DuplicateUsernameError
    2. bcrypt hash (work factor) → off the event loop
    3. insert                    → unique-index conflict? DuplicateUsernameError
    4. return the created user (without the hash)

Authenticate(username, password):
    1. find_by_username          → missing? InvalidCredentialsError
    2. bcrypt checkpw            → mismatch? InvalidCredentialsError
    3. return {"message": "User logged in"}; no session or token is issued

Error Handling:
    Every failure inside a flow leaves as one of four kinds:
    DuplicateUsernameError / InvalidCredentialsError / DatabaseError /
    UnexpectedError. Anything else is wrapped in UnexpectedError.
"""

import logging
from typing import Any, Dict, List, Optional

import bcrypt
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from web420.config import settings
from web420.exceptions import (
    DatabaseError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    UnexpectedError,
)
from web420.models.user import User
from web420.schemas.common import MessageResponse
from web420.schemas.user import UserResponse
from web420.services.user_store import UserStore

logger = logging.getLogger(__name__)

LOGIN_SUCCESS_MESSAGE = "User logged in"


class AuthService:
    """
    Signup/login business logic.

    Args:
        work_factor: bcrypt cost factor used for new hashes. Verification
                     reads the cost stored in each hash, so changing it
                     does not invalidate existing passwords.
    """

    def __init__(self, work_factor: int):
        self.work_factor = work_factor
        # Hash checked against when the username is unknown, so both login
        # failure paths spend the same bcrypt time. Built once, up front.
        self._dummy_hash: str = bcrypt.hashpw(
            b"not-a-real-password", bcrypt.gensalt(rounds=work_factor)
        ).decode("utf-8")

    # ── Hashing ───────────────────────────────────────────────────────────

    async def hash_password(self, password: str) -> str:
        """Salted bcrypt hash of `password`, as a str ready for storage."""
        salt = bcrypt.gensalt(rounds=self.work_factor)
        hashed = await run_in_threadpool(bcrypt.hashpw, password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    async def verify_password(self, password: str, password_hash: str) -> bool:
        """
        Constant-time check of `password` against a stored bcrypt hash.

        A malformed stored hash or an over-long password counts as a mismatch.
        """
        try:
            return await run_in_threadpool(
                bcrypt.checkpw, password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except ValueError:
            return False

    async def _burn_verify(self, password: str) -> None:
        await self.verify_password(password, self._dummy_hash)

    # ── Flows ─────────────────────────────────────────────────────────────

    async def register(
        self,
        db: AsyncSession,
        username: str,
        password: str,
        email_addresses: Optional[List[Dict[str, Any]]] = None,
    ) -> UserResponse:
        """
        Create a user unless the username is taken.

        Returns:
            UserResponse for the stored row.

        Raises:
            DuplicateUsernameError: Username already registered (no write happens)
            DatabaseError: Lookup or insert failed
            UnexpectedError: Any other failure
        """
        store = UserStore(db)
        try:
            existing = await store.find_by_username(username)
            if existing is not None:
                logger.info("Signup rejected: username %r is already in use", username)
                raise DuplicateUsernameError(username=username)

            password_hash = await self.hash_password(password)

            user = await store.insert(
                User(
                    username=username,
                    password=password_hash,
                    email_addresses=list(email_addresses or []),
                )
            )
            logger.info("User registered: %s (%s)", user.username, user.id)
            return UserResponse.model_validate(user)

        except (DuplicateUsernameError, DatabaseError):
            raise
        except Exception as e:
            logger.error("Unexpected error during signup: %s", str(e), exc_info=True)
            raise UnexpectedError(context={"error_type": type(e).__name__}) from e

    async def authenticate(
        self,
        db: AsyncSession,
        username: str,
        password: str,
    ) -> MessageResponse:
        """
        Check a username/password pair.

        Raises:
            InvalidCredentialsError: Unknown username or wrong password (indistinguishable)
            DatabaseError: Lookup failed
            UnexpectedError: Any other failure
        """
        store = UserStore(db)
        try:
            user = await store.find_by_username(username)

            if user is None:
                await self._burn_verify(password)
                logger.info("Login failed: invalid username and/or password")
                raise InvalidCredentialsError()

            if not await self.verify_password(password, user.password):
                logger.info("Login failed: invalid username and/or password")
                raise InvalidCredentialsError()

            logger.info("User logged in: %s", user.username)
            return MessageResponse(message=LOGIN_SUCCESS_MESSAGE)

        except (InvalidCredentialsError, DatabaseError):
            raise
        except Exception as e:
            logger.error("Unexpected error during login: %s", str(e), exc_info=True)
            raise UnexpectedError(context={"error_type": type(e).__name__}) from e


# ── Singleton Instance ────────────────────────────────────────────────────
auth_service = AuthService(work_factor=settings.bcrypt_rounds)
