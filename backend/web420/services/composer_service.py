"""
WEB 420 API: Composer Service
=============================

What:  CRUD for composers.
Who:   Called by routes/composers.py.

Error Handling Strategy:
    Missing rows become NotFoundError (404). Any other failure is logged
    and wrapped in DatabaseError, which hides driver details from clients.
"""

import logging
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from web420.exceptions import DatabaseError, NotFoundError
from web420.models.composer import Composer
from web420.schemas.composer import ComposerRequest, ComposerResponse

logger = logging.getLogger(__name__)


class ComposerService:
    """Stateless; receives the request's session on every call."""

    async def list_composers(self, db: AsyncSession) -> List[ComposerResponse]:
        try:
            result = await db.execute(select(Composer).order_by(Composer.created_at))
            return [ComposerResponse.model_validate(c) for c in result.scalars().all()]
        except Exception as e:
            logger.error("Database error listing composers: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve composers. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def get_composer(self, db: AsyncSession, composer_id: UUID) -> ComposerResponse:
        """
        Raises:
            NotFoundError: No composer with this id (→ 404)
            DatabaseError: Query execution failed
        """
        try:
            composer = await self._load(db, composer_id)
            return ComposerResponse.model_validate(composer)
        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Database error fetching composer %s: %s", composer_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the composer. Please try again.",
                context={"composer_id": str(composer_id)},
            )

    async def create_composer(self, db: AsyncSession, data: ComposerRequest) -> ComposerResponse:
        try:
            composer = Composer(first_name=data.first_name, last_name=data.last_name)
            db.add(composer)
            await db.flush()
            logger.info("Composer created: %s", composer.id)
            return ComposerResponse.model_validate(composer)
        except Exception as e:
            logger.error("Database error creating composer: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the composer. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def update_composer(
        self, db: AsyncSession, composer_id: UUID, data: ComposerRequest
    ) -> ComposerResponse:
        """Replace both name fields on an existing composer."""
        try:
            composer = await self._load(db, composer_id)
            composer.first_name = data.first_name
            composer.last_name = data.last_name
            await db.flush()
            logger.info("Composer updated: %s", composer.id)
            return ComposerResponse.model_validate(composer)
        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Database error updating composer %s: %s", composer_id, str(e))
            raise DatabaseError(
                message="Could not update the composer. Please try again.",
                context={"composer_id": str(composer_id)},
            )

    async def delete_composer(self, db: AsyncSession, composer_id: UUID) -> ComposerResponse:
        """Delete a composer and return it as it was before deletion."""
        try:
            composer = await self._load(db, composer_id)
            deleted = ComposerResponse.model_validate(composer)
            await db.delete(composer)
            await db.flush()
            logger.info("Composer deleted: %s", composer_id)
            return deleted
        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Database error deleting composer %s: %s", composer_id, str(e))
            raise DatabaseError(
                message="Could not delete the composer. Please try again.",
                context={"composer_id": str(composer_id)},
            )

    async def _load(self, db: AsyncSession, composer_id: UUID) -> Composer:
        result = await db.execute(select(Composer).where(Composer.id == composer_id))
        composer = result.scalar_one_or_none()
        if composer is None:
            raise NotFoundError(resource="composer", resource_id=str(composer_id))
        return composer


composer_service = ComposerService()
