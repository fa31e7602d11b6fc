"""In-memory repositories.

Used by the test-suite and by the ``memory`` storage mode. Entities are
kept by reference, so a service mutating an entity it fetched sees the
same object the store holds. The ``conn`` argument is accepted for
signature compatibility with the PostgreSQL repositories and ignored.
"""
from __future__ import annotations

import itertools
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Iterator, Optional

from ..domain import STATUS_CANCELLED, STATUS_FINISHED, Comment, Customer, ServiceOrder


@dataclass
class MemoryStore:
    customers: dict[int, Customer] = field(default_factory=dict)
    orders: dict[int, ServiceOrder] = field(default_factory=dict)
    comments: dict[int, Comment] = field(default_factory=dict)
    _ids: dict[str, Iterator[int]] = field(default_factory=dict, repr=False)

    def next_id(self, table: str) -> int:
        if table not in self._ids:
            self._ids[table] = itertools.count(1)
        return next(self._ids[table])


class NullDb:
    """Stand-in for ``Db`` when nothing is backed by PostgreSQL."""

    @contextmanager
    def session(self) -> Iterator[None]:
        yield None

    @contextmanager
    def transaction(self) -> Iterator[None]:
        yield None


class MemoryCustomerRepository:
    def __init__(self, store: MemoryStore) -> None:
        self.store = store

    def get_all(self, conn: Any) -> list[Customer]:
        return [self.store.customers[k] for k in sorted(self.store.customers)]

    def get_by_id(self, conn: Any, customer_id: int) -> Optional[Customer]:
        return self.store.customers.get(customer_id)

    def find_user_by_email(self, conn: Any, email: str) -> Optional[Customer]:
        for customer in self.store.customers.values():
            if customer.email == email:
                return customer
        return None

    def add_customer(self, conn: Any, customer: Customer) -> None:
        customer.id = self.store.next_id("customer")
        self.store.customers[customer.id] = customer

    def update_customer(self, conn: Any, customer: Customer) -> None:
        self.store.customers[customer.id] = customer

    def delete_customer(self, conn: Any, customer: Customer) -> None:
        self.store.customers.pop(customer.id, None)
        for order_id in [k for k, o in self.store.orders.items() if o.customer_id == customer.id]:
            del self.store.orders[order_id]
            for comment_id in [k for k, c in self.store.comments.items() if c.service_order_id == order_id]:
                del self.store.comments[comment_id]


class MemoryServiceOrderRepository:
    def __init__(self, store: MemoryStore) -> None:
        self.store = store

    def get_all(self, conn: Any) -> list[ServiceOrder]:
        return [self.store.orders[k] for k in sorted(self.store.orders)]

    def get_by_id(self, conn: Any, order_id: int) -> Optional[ServiceOrder]:
        return self.store.orders.get(order_id)

    def get_service_order_with_comments(self, conn: Any, order_id: int) -> Optional[ServiceOrder]:
        order = self.store.orders.get(order_id)
        if order is None:
            return None
        comments = [
            self.store.comments[k]
            for k in sorted(self.store.comments)
            if self.store.comments[k].service_order_id == order_id
        ]
        return replace(order, comments=comments)

    def add(self, conn: Any, order: ServiceOrder) -> None:
        order.id = self.store.next_id("service_order")
        self.store.orders[order.id] = order

    def finish(self, conn: Any, order: ServiceOrder) -> None:
        order.status = STATUS_FINISHED
        order.finish_date = datetime.now(timezone.utc)
        self.store.orders[order.id] = order

    def cancel(self, conn: Any, order: ServiceOrder) -> None:
        order.status = STATUS_CANCELLED
        self.store.orders[order.id] = order


class MemoryCommentRepository:
    def __init__(self, store: MemoryStore) -> None:
        self.store = store

    def add_comment(self, conn: Any, comment: Comment) -> None:
        comment.id = self.store.next_id("comment")
        self.store.comments[comment.id] = comment
