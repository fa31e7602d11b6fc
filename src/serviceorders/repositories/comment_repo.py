from __future__ import annotations

from psycopg import Connection

from ..domain import Comment


class PgCommentRepository:
    def add_comment(self, conn: Connection, comment: Comment) -> None:
        cur = conn.execute(
            """
            INSERT INTO comment(description, send_date, service_order_id)
            VALUES (%s, %s, %s)
            RETURNING id;
            """,
            (comment.description, comment.send_date, comment.service_order_id),
        )
        comment.id = int(cur.fetchone()[0])
