from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .config import AppConfig
from .db import Db
from .repositories.comment_repo import PgCommentRepository
from .repositories.customer_repo import PgCustomerRepository
from .repositories.memory import (
    MemoryCommentRepository,
    MemoryCustomerRepository,
    MemoryServiceOrderRepository,
    MemoryStore,
    NullDb,
)
from .repositories.order_repo import PgServiceOrderRepository
from .services.comment_service import CommentsService
from .services.customer_service import CustomersService
from .services.order_service import ServiceOrderService


@dataclass
class Services:
    db: Union[Db, NullDb]
    customers: CustomersService
    orders: ServiceOrderService
    comments: CommentsService


def build_services(cfg: AppConfig) -> Services:
    if cfg.storage == "memory":
        return build_memory_services(MemoryStore())

    customer_repo = PgCustomerRepository()
    order_repo = PgServiceOrderRepository()
    comment_repo = PgCommentRepository()
    return Services(
        db=Db(cfg.db),
        customers=CustomersService(customer_repo=customer_repo),
        orders=ServiceOrderService(order_repo=order_repo, customer_repo=customer_repo),
        comments=CommentsService(comment_repo=comment_repo, order_repo=order_repo),
    )


def build_memory_services(store: MemoryStore) -> Services:
    customer_repo = MemoryCustomerRepository(store)
    order_repo = MemoryServiceOrderRepository(store)
    comment_repo = MemoryCommentRepository(store)
    return Services(
        db=NullDb(),
        customers=CustomersService(customer_repo=customer_repo),
        orders=ServiceOrderService(order_repo=order_repo, customer_repo=customer_repo),
        comments=CommentsService(comment_repo=comment_repo, order_repo=order_repo),
    )
