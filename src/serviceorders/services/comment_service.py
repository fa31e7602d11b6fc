from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from ..dtos import CommentDto, CreateCommentDto, ServiceOrderDto
from ..mappers import comment_from_create_dto, to_comment_dto, to_service_order_dto
from ..repositories.base import CommentRepository, ServiceOrderRepository
from .errors import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)


class CommentsService:
    def __init__(
        self,
        *,
        comment_repo: CommentRepository,
        order_repo: ServiceOrderRepository,
    ) -> None:
        self.comment_repo = comment_repo
        self.order_repo = order_repo

    def get_service_order_with_comments(self, conn: Any, order_id: int) -> ServiceOrderDto:
        order = self.order_repo.get_service_order_with_comments(conn, order_id)
        if order is None:
            raise NotFoundError("Service order not found")
        return to_service_order_dto(order)

    def add_comment(self, conn: Any, order_id: int, dto: CreateCommentDto) -> CommentDto:
        if self.order_repo.get_by_id(conn, order_id) is None:
            raise NotFoundError("Service order not found")
        if not (dto.description and dto.description.strip()):
            raise BadRequestError("Comment description cannot be empty.")

        comment = comment_from_create_dto(
            dto,
            service_order_id=order_id,
            send_date=datetime.now(timezone.utc),
        )
        self.comment_repo.add_comment(conn, comment)
        logger.info("Added comment id=%s to service order id=%s", comment.id, order_id)
        return to_comment_dto(comment)
