"""
WEB 420 API: User Store
=======================

What:  Persistence collaborator for the signup/login flow.
How:   Wraps one AsyncSession; exposes exactly the two operations the
       credential flow needs and translates SQLAlchemy failures into
       application exceptions.
Who:   Created per call by AuthService with the request's session.

Contract:
    find_by_username(username) -> User | None
    insert(user)               -> User
        raises DuplicateUsernameError on the users.username unique index
        raises DatabaseError on any other store failure

The store does not commit. get_db_session commits when the request
succeeds and rolls back when it raises.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from web420.exceptions import DatabaseError, DuplicateUsernameError
from web420.models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """Username-keyed access to the `users` table."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Look up a user by exact username.

        Returns:
            The User row, or None when no user has this username.

        Raises:
            DatabaseError: The query failed.
        """
        try:
            result = await self._session.execute(
                select(User).where(User.username == username)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("User lookup failed: %s", str(e))
            raise DatabaseError(
                context={"operation": "find_by_username", "error_type": type(e).__name__},
            ) from e

    async def insert(self, user: User) -> User:
        """
        Add a user and flush it so the INSERT runs now.

        Flushing (not committing) assigns id/created_at and surfaces a unique
        violation inside the signup call rather than at commit time.
        """
        self._session.add(user)
        try:
            await self._session.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent signup for the same username
            logger.warning("Unique constraint rejected username %r", user.username)
            raise DuplicateUsernameError(
                username=user.username,
                context={"source": "unique_constraint"},
            ) from e
        except SQLAlchemyError as e:
            logger.error("User insert failed: %s", str(e))
            raise DatabaseError(
                context={"operation": "insert", "error_type": type(e).__name__},
            ) from e
        return user
