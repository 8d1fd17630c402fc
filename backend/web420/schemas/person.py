"""Person request/response schemas (roles and dependents are embedded)."""

import uuid
from typing import List, Optional

from pydantic import Field

from web420.schemas.common import CamelModel


class Role(CamelModel):
    text: Optional[str] = None


class Dependent(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class PersonRequest(CamelModel):
    """Body of POST /api/persons."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    roles: List[Role] = Field(default_factory=list)
    dependents: List[Dependent] = Field(default_factory=list)
    birth_date: Optional[str] = Field(default=None, description="Birth date, stored as given")


class PersonResponse(PersonRequest):
    id: uuid.UUID
