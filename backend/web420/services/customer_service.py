"""
WEB 420 API: Customer Service
=============================

What:  Customers and their embedded invoices (the "node shopper" API).
How:   Customers are addressed by username. Invoices live in the
       customer row's JSON `invoices` array.

Error Handling:
    Duplicate customer username → ValidationError (400)
    Unknown username            → NotFoundError (404)
    Other failures              → DatabaseError
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from web420.exceptions import DatabaseError, NotFoundError, ValidationError
from web420.models.customer import Customer
from web420.schemas.customer import CustomerRequest, CustomerResponse, Invoice

logger = logging.getLogger(__name__)


class CustomerService:

    async def create_customer(self, db: AsyncSession, data: CustomerRequest) -> CustomerResponse:
        """
        Create a customer with no invoices.

        Raises:
            ValidationError: Username already belongs to a customer
            DatabaseError: Insert failed
        """
        try:
            customer = Customer(
                first_name=data.first_name,
                last_name=data.last_name,
                username=data.username,
                invoices=[],
            )
            db.add(customer)
            await db.flush()
            logger.info("Customer created: %s (%s)", customer.username, customer.id)
            return CustomerResponse.model_validate(customer)
        except IntegrityError:
            raise ValidationError(
                message=f"Customer username '{data.username}' is already in use",
                field="username",
            )
        except Exception as e:
            logger.error("Database error creating customer: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the customer. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def create_invoice(
        self, db: AsyncSession, username: str, invoice: Invoice
    ) -> CustomerResponse:
        """Append an invoice to the customer's invoices and return the updated customer."""
        try:
            customer = await self._load(db, username)
            customer.invoices = [*(customer.invoices or []), invoice.model_dump(by_alias=True)]
            await db.flush()
            logger.info(
                "Invoice added for customer %s (%d invoices)", username, len(customer.invoices)
            )
            return CustomerResponse.model_validate(customer)
        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Database error adding invoice for %s: %s", username, str(e))
            raise DatabaseError(
                message="Could not create the invoice. Please try again.",
                context={"username": username},
            )

    async def list_invoices(self, db: AsyncSession, username: str) -> List[Invoice]:
        try:
            customer = await self._load(db, username)
            return [Invoice.model_validate(inv) for inv in customer.invoices or []]
        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Database error fetching invoices for %s: %s", username, str(e))
            raise DatabaseError(
                message="Could not retrieve the invoices. Please try again.",
                context={"username": username},
            )

    async def _load(self, db: AsyncSession, username: str) -> Customer:
        result = await db.execute(select(Customer).where(Customer.username == username))
        customer = result.scalar_one_or_none()
        if customer is None:
            raise NotFoundError(resource="customer", resource_id=username)
        return customer


customer_service = CustomerService()
