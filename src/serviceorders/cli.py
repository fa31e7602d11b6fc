from __future__ import annotations

from .db import DbError
from .dtos import CreateCommentDto, CreateCustomerDto, CreateServiceOrderDto
from .services.errors import BadRequestError, ConflictError, NotFoundError
from .wiring import Services


def _prompt(msg: str) -> str:
    return input(msg).strip()


def run_cli(services: Services) -> None:
    db = services.db

    while True:
        print("\n=== Service Orders CLI ===")
        print("1) List customers")
        print("2) Create customer")
        print("3) Update customer")
        print("4) Delete customer")
        print("5) List service orders")
        print("6) Open service order")
        print("7) Finish service order")
        print("8) Cancel service order")
        print("9) Show service order with comments")
        print("10) Add comment")
        print("0) Exit")

        choice = _prompt("> ")
        try:
            if choice == "0":
                return

            elif choice == "1":
                with db.session() as conn:
                    rows = services.customers.get_all_customers(conn)
                for c in rows:
                    print(f"{c.name} email={c.email} phone={c.phone}")

            elif choice in {"2", "3"}:
                customer_id = int(_prompt("customer_id: ")) if choice == "3" else None
                dto = CreateCustomerDto(
                    name=_prompt("name: "),
                    password=_prompt("password: "),
                    email=_prompt("email: "),
                    phone=_prompt("phone: "),
                )
                with db.transaction() as conn:
                    if customer_id is None:
                        services.customers.create(conn, dto)
                    else:
                        services.customers.update(conn, customer_id, dto)
                print("Saved.")

            elif choice == "4":
                customer_id = int(_prompt("customer_id: "))
                with db.transaction() as conn:
                    services.customers.delete(conn, customer_id)
                print(f"Deleted customer_id={customer_id}")

            elif choice == "5":
                with db.session() as conn:
                    rows = services.orders.get_all(conn)
                for o in rows:
                    print(
                        f"order#{o.id} status={o.status} price={o.price} "
                        f"opened={o.opening_date} finished={o.finish_date}"
                    )

            elif choice == "6":
                dto = CreateServiceOrderDto(
                    description=_prompt("description: "),
                    price=float(_prompt("price: ")),
                    customer_id=int(_prompt("customer_id: ")),
                )
                with db.transaction() as conn:
                    created = services.orders.create_service_order(conn, dto)
                print(f"Opened order_id={created.id}")

            elif choice == "7":
                order_id = int(_prompt("order_id: "))
                with db.transaction() as conn:
                    services.orders.finish_service_order(conn, order_id)
                print("Order finished.")

            elif choice == "8":
                order_id = int(_prompt("order_id: "))
                with db.transaction() as conn:
                    services.orders.cancel_service_order(conn, order_id)
                print("Order cancelled.")

            elif choice == "9":
                order_id = int(_prompt("order_id: "))
                with db.session() as conn:
                    o = services.comments.get_service_order_with_comments(conn, order_id)
                print(f"order#{o.id} {o.description} status={o.status} price={o.price}")
                for c in o.comments:
                    print(f"  [{c.send_date}] #{c.id} {c.description}")

            elif choice == "10":
                order_id = int(_prompt("order_id: "))
                dto = CreateCommentDto(description=_prompt("comment: "))
                with db.transaction() as conn:
                    comment = services.comments.add_comment(conn, order_id, dto)
                print(f"Added comment_id={comment.id}")

            else:
                print("Unknown choice.")

        except NotFoundError as e:
            print(f"[NOT FOUND] {e}")
        except ConflictError as e:
            print(f"[CONFLICT] {e}")
        except BadRequestError as e:
            print(f"[INPUT ERROR] {e}")
        except DbError as e:
            print(f"[DB ERROR] {e}")
        except ValueError as e:
            print(f"[VALUE ERROR] {e}")
        except Exception as e:
            print(f"[ERROR] {type(e).__name__}: {e}")
