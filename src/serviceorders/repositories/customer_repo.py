from __future__ import annotations

from psycopg import Connection

from ..domain import Customer

_COLUMNS = "id, name, email, phone"


def _row_to_customer(row) -> Customer:
    return Customer(id=int(row[0]), name=row[1], email=row[2], phone=row[3])


class PgCustomerRepository:
    def get_all(self, conn: Connection) -> list[Customer]:
        cur = conn.execute(f"SELECT {_COLUMNS} FROM customer ORDER BY id;")
        return [_row_to_customer(row) for row in cur.fetchall()]

    def get_by_id(self, conn: Connection, customer_id: int) -> Customer | None:
        cur = conn.execute(f"SELECT {_COLUMNS} FROM customer WHERE id = %s;", (customer_id,))
        row = cur.fetchone()
        if not row:
            return None
        return _row_to_customer(row)

    def find_user_by_email(self, conn: Connection, email: str) -> Customer | None:
        cur = conn.execute(f"SELECT {_COLUMNS} FROM customer WHERE email = %s;", (email,))
        row = cur.fetchone()
        if not row:
            return None
        return _row_to_customer(row)

    def add_customer(self, conn: Connection, customer: Customer) -> None:
        cur = conn.execute(
            """
            INSERT INTO customer(name, email, phone)
            VALUES (%s, %s, %s)
            RETURNING id;
            """,
            (customer.name, customer.email, customer.phone),
        )
        customer.id = int(cur.fetchone()[0])

    def update_customer(self, conn: Connection, customer: Customer) -> None:
        conn.execute(
            """
            UPDATE customer
            SET name = %s, email = %s, phone = %s
            WHERE id = %s;
            """,
            (customer.name, customer.email, customer.phone, customer.id),
        )

    def delete_customer(self, conn: Connection, customer: Customer) -> None:
        conn.execute("DELETE FROM customer WHERE id = %s;", (customer.id,))
