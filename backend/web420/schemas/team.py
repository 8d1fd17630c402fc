"""Team and player request/response schemas."""

import uuid
from typing import List, Optional

from pydantic import Field

from web420.schemas.common import CamelModel


class Player(CamelModel):
    """Body of POST /api/teams/{id}/players, and one entry of Team.players."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    salary: Optional[float] = Field(default=None, description="Annual salary")


class TeamRequest(CamelModel):
    """Body of POST /api/teams. New teams start with no players."""

    name: Optional[str] = None
    mascot: Optional[str] = None


class TeamResponse(TeamRequest):
    id: uuid.UUID
    players: List[Player] = Field(default_factory=list)
