"""
WEB 420 API: Composer SQLAlchemy Model
======================================

What:  ORM model for the `composers` table.
Who:   Used by ComposerService for full CRUD.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from web420.database import Base


class Composer(Base):
    """A composer: first and last name only."""

    __tablename__ = "composers"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_name: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Composer(id={self.id}, name='{self.first_name} {self.last_name}')>"
