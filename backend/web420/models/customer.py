"""
WEB 420 API: Customer SQLAlchemy Model
======================================

What:  ORM model for the `customers` table (the "node shopper" API).
Who:   Used by CustomerService.

Table Design:
    - username: unique index; invoices are addressed by customer username
      (/api/customers/{username}/invoices), so it must identify one row.
    - invoices: JSON array, each entry
        {"subtotal", "tax", "dateCreated", "dateShipped",
         "lineItems": [{"name", "price", "quantity"}]}
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List

from sqlalchemy import DateTime, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from web420.database import Base, JSONDocument


class Customer(Base):
    __tablename__ = "customers"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    username: Mapped[str] = mapped_column(Text, nullable=False, unique=True, index=True)
    invoices: Mapped[List[Dict[str, Any]]] = mapped_column(JSONDocument, nullable=False, default=list)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, username='{self.username}')>"
