"""Unit tests for ServiceOrderService"""

from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest

from serviceorders.domain import Customer, ServiceOrder
from serviceorders.dtos import CreateServiceOrderDto, ServiceOrderDto
from serviceorders.repositories.base import CustomerRepository, ServiceOrderRepository
from serviceorders.services.errors import BadRequestError, NotFoundError
from serviceorders.services.order_service import ServiceOrderService


@pytest.fixture
def order_repo():
    return Mock(spec=ServiceOrderRepository)


@pytest.fixture
def customer_repo():
    return Mock(spec=CustomerRepository)


@pytest.fixture
def service(order_repo, customer_repo):
    return ServiceOrderService(order_repo=order_repo, customer_repo=customer_repo)


def test_get_all_returns_orders_in_repository_order(service, order_repo):
    opened = datetime.now(timezone.utc)
    order_repo.get_all.return_value = [
        ServiceOrder(id=2, description="Service 2", price=200, status="OPEN", opening_date=opened),
        ServiceOrder(id=1, description="Service 1", price=100, status="OPEN", opening_date=opened),
    ]

    result = service.get_all(None)

    assert result == [
        ServiceOrderDto(2, "Service 2", 200, "OPEN", opened, None, []),
        ServiceOrderDto(1, "Service 1", 100, "OPEN", opened, None, []),
    ]


def test_get_service_order_returns_dto_when_exists(service, order_repo):
    order_repo.get_by_id.return_value = ServiceOrder(id=1, description="Service 1", price=100, status="OPEN")

    result = service.get_service_order(None, 1)

    assert result == ServiceOrderDto(1, "Service 1", 100, "OPEN", None, None, [])


def test_get_service_order_raises_not_found_when_missing(service, order_repo):
    order_repo.get_by_id.return_value = None

    with pytest.raises(NotFoundError):
        service.get_service_order(None, 1)


def test_create_service_order_opens_order_for_existing_customer(service, order_repo, customer_repo):
    customer_repo.get_by_id.return_value = Customer(1, "John Doe", "john.doe@example.com", "1")

    def assign_id(conn, order):
        order.id = 7

    order_repo.add.side_effect = assign_id
    before = datetime.now(timezone.utc)

    result = service.create_service_order(None, CreateServiceOrderDto("New Service", 300, 1))

    order_repo.add.assert_called_once()
    added = order_repo.add.call_args.args[1]
    assert added.status == "OPEN"
    assert added.customer_id == 1
    assert added.finish_date is None
    assert before <= added.opening_date <= datetime.now(timezone.utc) + timedelta(seconds=1)
    assert result.id == 7
    assert result.customer_id == 1
    assert result.status == "OPEN"
    assert result.description == "New Service"
    assert result.price == 300
    assert result.opening_date == added.opening_date


def test_create_service_order_raises_bad_request_for_unknown_customer(service, order_repo, customer_repo):
    customer_repo.get_by_id.return_value = None

    with pytest.raises(BadRequestError):
        service.create_service_order(None, CreateServiceOrderDto("New Service", 300, 1))

    order_repo.add.assert_not_called()


@pytest.mark.parametrize(
    "dto",
    [
        CreateServiceOrderDto("", 300, 1),
        CreateServiceOrderDto("New Service", -1, 1),
        CreateServiceOrderDto("New Service", float("nan"), 1),
        CreateServiceOrderDto("New Service", float("inf"), 1),
    ],
)
def test_create_service_order_rejects_invalid_input(service, order_repo, customer_repo, dto):
    customer_repo.get_by_id.return_value = Customer(1, "John Doe", "john.doe@example.com", "1")

    with pytest.raises(BadRequestError):
        service.create_service_order(None, dto)

    order_repo.add.assert_not_called()


def test_finish_service_order_calls_repository_once(service, order_repo):
    order = ServiceOrder(id=1, description="Service 1", price=100, status="OPEN")
    order_repo.get_by_id.return_value = order

    service.finish_service_order(None, 1)

    order_repo.finish.assert_called_once_with(None, order)


def test_finish_service_order_raises_not_found_when_missing(service, order_repo):
    order_repo.get_by_id.return_value = None

    with pytest.raises(NotFoundError):
        service.finish_service_order(None, 1)

    order_repo.finish.assert_not_called()


def test_cancel_service_order_calls_repository_once(service, order_repo):
    order = ServiceOrder(id=1, description="Service 1", price=100, status="OPEN")
    order_repo.get_by_id.return_value = order

    service.cancel_service_order(None, 1)

    order_repo.cancel.assert_called_once_with(None, order)


def test_cancel_service_order_raises_not_found_when_missing(service, order_repo):
    order_repo.get_by_id.return_value = None

    with pytest.raises(NotFoundError):
        service.cancel_service_order(None, 1)

    order_repo.cancel.assert_not_called()


def test_finishing_a_terminal_order_is_passed_through(service, order_repo):
    order = ServiceOrder(id=1, description="Service 1", price=100, status="CANCELLED")
    order_repo.get_by_id.return_value = order

    service.finish_service_order(None, 1)

    order_repo.finish.assert_called_once_with(None, order)
