"""Entity <-> DTO conversions.

One function per (source, target) pair. Fields are copied one to one,
nested comment lists included, so a DTO always mirrors the entity it was
built from.
"""
from __future__ import annotations

from datetime import datetime

from .domain import STATUS_OPEN, Comment, Customer, ServiceOrder
from .dtos import (
    CommentDto,
    CreateCommentDto,
    CreateCustomerDto,
    CreateServiceOrderDto,
    CustomerDto,
    NewServiceOrderDto,
    ServiceOrderDto,
)


def to_customer_dto(customer: Customer) -> CustomerDto:
    return CustomerDto(name=customer.name, email=customer.email, phone=customer.phone)


def customer_from_create_dto(dto: CreateCustomerDto) -> Customer:
    return Customer(id=0, name=dto.name, email=dto.email, phone=dto.phone)


def to_comment_dto(comment: Comment) -> CommentDto:
    return CommentDto(
        id=comment.id,
        description=comment.description,
        send_date=comment.send_date,
        service_order_id=comment.service_order_id,
    )


def comment_from_create_dto(dto: CreateCommentDto, *, service_order_id: int, send_date: datetime) -> Comment:
    return Comment(id=0, description=dto.description, send_date=send_date, service_order_id=service_order_id)


def to_service_order_dto(order: ServiceOrder) -> ServiceOrderDto:
    return ServiceOrderDto(
        id=order.id,
        description=order.description,
        price=order.price,
        status=order.status,
        opening_date=order.opening_date,
        finish_date=order.finish_date,
        comments=[to_comment_dto(c) for c in order.comments],
    )


def to_service_order_dtos(orders: list[ServiceOrder]) -> list[ServiceOrderDto]:
    return [to_service_order_dto(o) for o in orders]


def to_new_service_order_dto(order: ServiceOrder) -> NewServiceOrderDto:
    return NewServiceOrderDto(
        id=order.id,
        description=order.description,
        price=order.price,
        status=order.status,
        opening_date=order.opening_date,
        finish_date=order.finish_date,
        customer_id=order.customer_id,
    )


def service_order_from_create_dto(dto: CreateServiceOrderDto, *, opening_date: datetime) -> ServiceOrder:
    return ServiceOrder(
        id=0,
        description=dto.description,
        price=float(dto.price),
        status=STATUS_OPEN,
        opening_date=opening_date,
        finish_date=None,
        customer_id=dto.customer_id,
    )
