from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, Optional

OrderStatus = Literal["OPEN", "FINISHED", "CANCELLED"]

STATUS_OPEN: OrderStatus = "OPEN"
STATUS_FINISHED: OrderStatus = "FINISHED"
STATUS_CANCELLED: OrderStatus = "CANCELLED"


@dataclass
class Customer:
    id: int
    name: str
    email: str
    phone: str


@dataclass
class Comment:
    id: int
    description: str
    send_date: datetime
    service_order_id: int


@dataclass
class ServiceOrder:
    id: int
    description: str
    price: float
    status: OrderStatus
    opening_date: Optional[datetime] = None
    finish_date: Optional[datetime] = None
    customer_id: int = 0
    comments: list[Comment] = field(default_factory=list)
