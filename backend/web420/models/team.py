"""
WEB 420 API: Team SQLAlchemy Model
==================================

What:  ORM model for the `teams` table.

Players are an embedded JSON array on the team row:
    [{"firstName": str, "lastName": str, "salary": float}]
TeamService appends to it by assigning a new list (plain JSON columns do
not track in-place mutation).
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List

from sqlalchemy import DateTime, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from web420.database import Base, JSONDocument


class Team(Base):
    __tablename__ = "teams"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    mascot: Mapped[str | None] = mapped_column(Text, nullable=True)
    players: Mapped[List[Dict[str, Any]]] = mapped_column(JSONDocument, nullable=False, default=list)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Team(id={self.id}, name='{self.name}', players={len(self.players or [])})>"
