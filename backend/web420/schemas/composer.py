"""Composer request/response schemas."""

import uuid
from typing import Optional

from pydantic import Field

from web420.schemas.common import CamelModel


class ComposerRequest(CamelModel):
    """Body of POST /api/composers and PUT /api/composers/{id}."""

    first_name: Optional[str] = Field(default=None, description="Composer's first name")
    last_name: Optional[str] = Field(default=None, description="Composer's last name")


class ComposerResponse(CamelModel):
    id: uuid.UUID
    first_name: Optional[str] = None
    last_name: Optional[str] = None
