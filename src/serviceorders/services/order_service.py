from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Any

from ..domain import ServiceOrder
from ..dtos import CreateServiceOrderDto, NewServiceOrderDto, ServiceOrderDto
from ..mappers import (
    service_order_from_create_dto,
    to_new_service_order_dto,
    to_service_order_dto,
    to_service_order_dtos,
)
from ..repositories.base import CustomerRepository, ServiceOrderRepository
from .errors import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)


class ServiceOrderService:
    """Lifecycle of service orders: create, list, get, finish, cancel.

    Finishing or cancelling an order that is already FINISHED or CANCELLED
    is passed through to the repository unchanged.
    """

    def __init__(
        self,
        *,
        order_repo: ServiceOrderRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self.order_repo = order_repo
        self.customer_repo = customer_repo

    def get_all(self, conn: Any) -> list[ServiceOrderDto]:
        return to_service_order_dtos(self.order_repo.get_all(conn))

    def get_service_order(self, conn: Any, order_id: int) -> ServiceOrderDto:
        return to_service_order_dto(self._require_order(conn, order_id))

    def create_service_order(self, conn: Any, dto: CreateServiceOrderDto) -> NewServiceOrderDto:
        if self.customer_repo.get_by_id(conn, dto.customer_id) is None:
            logger.warning("Rejected service order for unknown customer_id=%s", dto.customer_id)
            raise BadRequestError("Customer not found")
        if not (dto.description and dto.description.strip()):
            raise BadRequestError("Service order description cannot be empty.")
        if not math.isfinite(dto.price) or dto.price < 0:
            raise BadRequestError("Service order price must be a non-negative number.")

        order = service_order_from_create_dto(dto, opening_date=datetime.now(timezone.utc))
        self.order_repo.add(conn, order)
        logger.info("Opened service order id=%s customer_id=%s", order.id, order.customer_id)
        return to_new_service_order_dto(order)

    def finish_service_order(self, conn: Any, order_id: int) -> None:
        order = self._require_order(conn, order_id)
        self.order_repo.finish(conn, order)
        logger.info("Finished service order id=%s", order_id)

    def cancel_service_order(self, conn: Any, order_id: int) -> None:
        order = self._require_order(conn, order_id)
        self.order_repo.cancel(conn, order)
        logger.info("Cancelled service order id=%s", order_id)

    def _require_order(self, conn: Any, order_id: int) -> ServiceOrder:
        order = self.order_repo.get_by_id(conn, order_id)
        if order is None:
            raise NotFoundError("Service order not found")
        return order
