"""
WEB 420 API: Person SQLAlchemy Model
====================================

What:  ORM model for the `persons` table.

Document Columns:
    roles:       [{"text": str}]
    dependents:  [{"firstName": str, "lastName": str}]
    Both are written once at creation and returned as stored.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List

from sqlalchemy import DateTime, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from web420.database import Base, JSONDocument


class Person(Base):
    __tablename__ = "persons"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    roles: Mapped[List[Dict[str, Any]]] = mapped_column(JSONDocument, nullable=False, default=list)
    dependents: Mapped[List[Dict[str, Any]]] = mapped_column(JSONDocument, nullable=False, default=list)

    # Free-form string, stored exactly as the client sent it
    birth_date: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Person(id={self.id}, name='{self.first_name} {self.last_name}')>"
