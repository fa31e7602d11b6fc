from __future__ import annotations

from psycopg import Connection

from ..domain import STATUS_CANCELLED, STATUS_FINISHED, Comment, ServiceOrder

_COLUMNS = "id, description, price, status, opening_date, finish_date, customer_id"


def _row_to_order(row) -> ServiceOrder:
    return ServiceOrder(
        id=int(row[0]),
        description=row[1],
        price=float(row[2]),
        status=row[3],
        opening_date=row[4],
        finish_date=row[5],
        customer_id=int(row[6]),
    )


class PgServiceOrderRepository:
    def get_all(self, conn: Connection) -> list[ServiceOrder]:
        cur = conn.execute(f"SELECT {_COLUMNS} FROM service_order ORDER BY id;")
        return [_row_to_order(row) for row in cur.fetchall()]

    def get_by_id(self, conn: Connection, order_id: int) -> ServiceOrder | None:
        cur = conn.execute(f"SELECT {_COLUMNS} FROM service_order WHERE id = %s;", (order_id,))
        row = cur.fetchone()
        if not row:
            return None
        return _row_to_order(row)

    def get_service_order_with_comments(self, conn: Connection, order_id: int) -> ServiceOrder | None:
        cur = conn.execute(
            """
            SELECT o.id, o.description, o.price, o.status, o.opening_date, o.finish_date, o.customer_id,
                   c.id, c.description, c.send_date
            FROM service_order o
            LEFT JOIN comment c ON c.service_order_id = o.id
            WHERE o.id = %s
            ORDER BY c.id;
            """,
            (order_id,),
        )
        rows = cur.fetchall()
        if not rows:
            return None

        order = _row_to_order(rows[0])
        for row in rows:
            # LEFT JOIN yields a single all-NULL comment row for orders without comments
            if row[7] is None:
                continue
            order.comments.append(
                Comment(id=int(row[7]), description=row[8], send_date=row[9], service_order_id=order.id)
            )
        return order

    def add(self, conn: Connection, order: ServiceOrder) -> None:
        cur = conn.execute(
            """
            INSERT INTO service_order(description, price, status, opening_date, finish_date, customer_id)
            VALUES (%s, %s, %s, %s, %s, %s)
            RETURNING id;
            """,
            (
                order.description,
                order.price,
                order.status,
                order.opening_date,
                order.finish_date,
                order.customer_id,
            ),
        )
        order.id = int(cur.fetchone()[0])

    def finish(self, conn: Connection, order: ServiceOrder) -> None:
        cur = conn.execute(
            """
            UPDATE service_order
            SET status = %s, finish_date = now()
            WHERE id = %s
            RETURNING finish_date;
            """,
            (STATUS_FINISHED, order.id),
        )
        row = cur.fetchone()
        order.status = STATUS_FINISHED
        order.finish_date = row[0] if row else None

    def cancel(self, conn: Connection, order: ServiceOrder) -> None:
        conn.execute(
            "UPDATE service_order SET status = %s WHERE id = %s;",
            (STATUS_CANCELLED, order.id),
        )
        order.status = STATUS_CANCELLED
