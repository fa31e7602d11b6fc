from __future__ import annotations

from typing import Any, Optional, Protocol

from ..domain import Comment, Customer, ServiceOrder


class CustomerRepository(Protocol):
    def get_all(self, conn: Any) -> list[Customer]: ...

    def get_by_id(self, conn: Any, customer_id: int) -> Optional[Customer]: ...

    def find_user_by_email(self, conn: Any, email: str) -> Optional[Customer]: ...

    def add_customer(self, conn: Any, customer: Customer) -> None: ...

    def update_customer(self, conn: Any, customer: Customer) -> None: ...

    def delete_customer(self, conn: Any, customer: Customer) -> None: ...


class ServiceOrderRepository(Protocol):
    def get_all(self, conn: Any) -> list[ServiceOrder]: ...

    def get_by_id(self, conn: Any, order_id: int) -> Optional[ServiceOrder]: ...

    def get_service_order_with_comments(self, conn: Any, order_id: int) -> Optional[ServiceOrder]: ...

    def add(self, conn: Any, order: ServiceOrder) -> None: ...

    def finish(self, conn: Any, order: ServiceOrder) -> None: ...

    def cancel(self, conn: Any, order: ServiceOrder) -> None: ...


class CommentRepository(Protocol):
    def add_comment(self, conn: Any, comment: Comment) -> None: ...
