from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from .domain import OrderStatus


@dataclass
class CustomerDto:
    name: str
    email: str
    phone: str
    service_orders: Optional[list[Any]] = None


@dataclass
class CreateCustomerDto:
    name: str
    # accepted from clients but never stored
    password: Any
    email: str
    phone: str


@dataclass
class CommentDto:
    id: int
    description: str
    send_date: datetime
    service_order_id: int


@dataclass
class CreateCommentDto:
    description: str


@dataclass
class ServiceOrderDto:
    id: int
    description: str
    price: float
    status: OrderStatus
    opening_date: Optional[datetime]
    finish_date: Optional[datetime]
    comments: list[CommentDto] = field(default_factory=list)


@dataclass
class NewServiceOrderDto:
    id: int
    description: str
    price: float
    status: OrderStatus
    opening_date: Optional[datetime]
    finish_date: Optional[datetime]
    customer_id: int


@dataclass
class CreateServiceOrderDto:
    description: str
    price: float
    customer_id: int
