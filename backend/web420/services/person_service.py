"""
WEB 420 API: Person Service
===========================

What:  List and create persons. Roles and dependents are stored as JSON
       documents on the person row, in their camelCase wire form.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from web420.exceptions import DatabaseError
from web420.models.person import Person
from web420.schemas.person import PersonRequest, PersonResponse

logger = logging.getLogger(__name__)


class PersonService:

    async def list_persons(self, db: AsyncSession) -> List[PersonResponse]:
        try:
            result = await db.execute(select(Person).order_by(Person.created_at))
            return [PersonResponse.model_validate(p) for p in result.scalars().all()]
        except Exception as e:
            logger.error("Database error listing persons: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve persons. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def create_person(self, db: AsyncSession, data: PersonRequest) -> PersonResponse:
        try:
            person = Person(
                first_name=data.first_name,
                last_name=data.last_name,
                roles=[role.model_dump(by_alias=True) for role in data.roles],
                dependents=[dep.model_dump(by_alias=True) for dep in data.dependents],
                birth_date=data.birth_date,
            )
            db.add(person)
            await db.flush()
            logger.info("Person created: %s", person.id)
            return PersonResponse.model_validate(person)
        except Exception as e:
            logger.error("Database error creating person: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the person. Please try again.",
                context={"error_type": type(e).__name__},
            )


person_service = PersonService()
