"""
WEB 420 API: User SQLAlchemy Model
==================================

What:  ORM model for the `users` table holding signup credentials.
Who:   Read and written by UserStore on behalf of AuthService.

Table Design:
    - username: unbounded TEXT with a unique index; signup sets no length
      limit, so the column must not either. The signup flow checks for an existing row
      first; the index is the guard when two signups race past that check.
    - password: bcrypt hash string ($2b$<cost>$<salt><digest>), never plaintext.
    - email_addresses: JSON array of {"email": ...} records, stored as given.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List

from sqlalchemy import DateTime, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from web420.database import Base, JSONDocument


class User(Base):
    """
    A registered user.

    Lifecycle:
        Created by POST /api/signup. Never updated or deleted by the API.
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    username: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        unique=True,
        index=True,
        comment="Login name, unique across users",
    )

    password: Mapped[str] = mapped_column(
        String(60),
        nullable=False,
        comment="bcrypt hash of the user's password",
    )

    email_addresses: Mapped[List[Dict[str, Any]]] = mapped_column(
        JSONDocument,
        nullable=False,
        default=list,
        comment="Ordered contact records: [{email: str}]",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        # password hash deliberately omitted
        return f"<User(id={self.id}, username='{self.username}')>"
