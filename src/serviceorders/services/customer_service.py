from __future__ import annotations

import logging
from typing import Any

from ..dtos import CreateCustomerDto, CustomerDto
from ..mappers import customer_from_create_dto, to_customer_dto
from ..repositories.base import CustomerRepository
from .errors import BadRequestError, ConflictError, NotFoundError

logger = logging.getLogger(__name__)


def _require_name(name: str) -> None:
    if not (name and name.strip()):
        raise BadRequestError("Customer name cannot be empty.")


class CustomersService:
    def __init__(self, *, customer_repo: CustomerRepository) -> None:
        self.customer_repo = customer_repo

    def get_all_customers(self, conn: Any) -> list[CustomerDto]:
        return [to_customer_dto(c) for c in self.customer_repo.get_all(conn)]

    def get_customer(self, conn: Any, customer_id: int) -> CustomerDto:
        customer = self.customer_repo.get_by_id(conn, customer_id)
        if customer is None:
            raise NotFoundError("Customer not found")
        return to_customer_dto(customer)

    def create(self, conn: Any, dto: CreateCustomerDto) -> CustomerDto:
        customer = customer_from_create_dto(dto)
        _require_name(customer.name)

        if self.customer_repo.find_user_by_email(conn, customer.email) is not None:
            logger.warning("Rejected customer with duplicate email %s", customer.email)
            raise ConflictError("Customer already exists")

        self.customer_repo.add_customer(conn, customer)
        logger.info("Created customer id=%s", customer.id)
        return to_customer_dto(customer)

    def update(self, conn: Any, customer_id: int, dto: CreateCustomerDto) -> None:
        customer = self.customer_repo.get_by_id(conn, customer_id)
        if customer is None:
            raise NotFoundError("Customer not found")
        _require_name(dto.name)

        customer.name = dto.name
        customer.email = dto.email
        customer.phone = dto.phone
        self.customer_repo.update_customer(conn, customer)
        logger.info("Updated customer id=%s", customer_id)

    def delete(self, conn: Any, customer_id: int) -> None:
        customer = self.customer_repo.get_by_id(conn, customer_id)
        if customer is None:
            raise NotFoundError("Customer not found")

        self.customer_repo.delete_customer(conn, customer)
        logger.info("Deleted customer id=%s", customer_id)
