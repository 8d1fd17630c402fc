"""
WEB 420 API: Customer / Invoice Schemas
=======================================

What:  Contracts for the customer ("node shopper") endpoints.
Note:  Invoice amounts are plain floats; no totals are recomputed
       server-side, the client's subtotal and tax are stored as sent.
"""

import uuid
from typing import List, Optional

from pydantic import Field

from web420.schemas.common import CamelModel


class LineItem(CamelModel):
    name: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None


class Invoice(CamelModel):
    """Body of POST /api/customers/{username}/invoices."""

    subtotal: Optional[float] = None
    tax: Optional[float] = None
    date_created: Optional[str] = None
    date_shipped: Optional[str] = None
    line_items: List[LineItem] = Field(default_factory=list)


class CustomerRequest(CamelModel):
    """Body of POST /api/customers."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: str = Field(min_length=1, description="Unique customer username")


class CustomerResponse(CustomerRequest):
    id: uuid.UUID
    invoices: List[Invoice] = Field(default_factory=list)
