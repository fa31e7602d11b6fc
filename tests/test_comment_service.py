"""Unit tests for CommentsService"""

from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest

from serviceorders.domain import Comment, ServiceOrder
from serviceorders.dtos import CreateCommentDto
from serviceorders.repositories.base import CommentRepository, ServiceOrderRepository
from serviceorders.services.comment_service import CommentsService
from serviceorders.services.errors import BadRequestError, NotFoundError


@pytest.fixture
def comment_repo():
    return Mock(spec=CommentRepository)


@pytest.fixture
def order_repo():
    return Mock(spec=ServiceOrderRepository)


@pytest.fixture
def service(comment_repo, order_repo):
    return CommentsService(comment_repo=comment_repo, order_repo=order_repo)


def test_get_service_order_with_comments_mirrors_comments(service, order_repo):
    now = datetime.now(timezone.utc)
    comments = [
        Comment(id=1, description="Test comment", send_date=now, service_order_id=1),
        Comment(id=2, description="Second comment", send_date=now + timedelta(minutes=5), service_order_id=1),
    ]
    order_repo.get_service_order_with_comments.return_value = ServiceOrder(
        id=1,
        description="Test description",
        price=100.0,
        status="OPEN",
        opening_date=now,
        finish_date=now + timedelta(days=1),
        comments=comments,
    )

    result = service.get_service_order_with_comments(None, 1)

    assert result.id == 1
    assert result.description == "Test description"
    assert result.price == 100.0
    assert result.status == "OPEN"
    assert result.opening_date == now
    assert result.finish_date == now + timedelta(days=1)
    assert len(result.comments) == len(comments)
    for expected, actual in zip(comments, result.comments):
        assert actual.id == expected.id
        assert actual.description == expected.description
        assert actual.send_date == expected.send_date
        assert actual.service_order_id == expected.service_order_id


def test_get_service_order_with_comments_raises_not_found(service, order_repo):
    order_repo.get_service_order_with_comments.return_value = None

    with pytest.raises(NotFoundError):
        service.get_service_order_with_comments(None, 1)


def test_add_comment_stores_comment_for_existing_order(service, comment_repo, order_repo):
    order_repo.get_by_id.return_value = ServiceOrder(id=3, description="Service", price=10, status="OPEN")

    def assign_id(conn, comment):
        comment.id = 11

    comment_repo.add_comment.side_effect = assign_id

    result = service.add_comment(None, 3, CreateCommentDto("Waiting for parts"))

    comment_repo.add_comment.assert_called_once()
    assert result.id == 11
    assert result.service_order_id == 3
    assert result.description == "Waiting for parts"
    assert result.send_date.tzinfo is not None


def test_add_comment_raises_not_found_for_missing_order(service, comment_repo, order_repo):
    order_repo.get_by_id.return_value = None

    with pytest.raises(NotFoundError):
        service.add_comment(None, 3, CreateCommentDto("Waiting for parts"))

    comment_repo.add_comment.assert_not_called()


def test_add_comment_rejects_blank_description(service, comment_repo, order_repo):
    order_repo.get_by_id.return_value = ServiceOrder(id=3, description="Service", price=10, status="OPEN")

    with pytest.raises(BadRequestError):
        service.add_comment(None, 3, CreateCommentDto("  "))

    comment_repo.add_comment.assert_not_called()
