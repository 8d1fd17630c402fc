"""
WEB 420 API: Customer Route Handlers
====================================

What:  Customer creation and per-customer invoices.
How:   Invoices are addressed by the customer's username in the path.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from web420.database import get_db_session
from web420.schemas.common import ErrorResponse
from web420.schemas.customer import CustomerRequest, CustomerResponse, Invoice
from web420.services.customer_service import customer_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Customers"])

_DB_ERROR = {501: {"description": "Database Exception", "model": ErrorResponse}}


@router.post(
    "/customers",
    response_model=CustomerResponse,
    responses={
        400: {"description": "Customer username already in use", "model": ErrorResponse},
        **_DB_ERROR,
    },
    summary="Creates a new customer",
)
async def create_customer(
    body: CustomerRequest,
    db: AsyncSession = Depends(get_db_session),
) -> CustomerResponse:
    return await customer_service.create_customer(db, body)


@router.post(
    "/customers/{username}/invoices",
    response_model=CustomerResponse,
    responses={404: {"description": "Customer not found", "model": ErrorResponse}, **_DB_ERROR},
    summary="Creates an invoice for a customer",
)
async def create_invoice_by_username(
    username: str,
    body: Invoice,
    db: AsyncSession = Depends(get_db_session),
) -> CustomerResponse:
    return await customer_service.create_invoice(db, username, body)


@router.get(
    "/customers/{username}/invoices",
    response_model=List[Invoice],
    responses={404: {"description": "Customer not found", "model": ErrorResponse}, **_DB_ERROR},
    summary="Returns a customer's invoices",
)
async def find_all_invoices_by_username(
    username: str,
    db: AsyncSession = Depends(get_db_session),
) -> List[Invoice]:
    return await customer_service.list_invoices(db, username)
