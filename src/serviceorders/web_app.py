from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import datetime

import psycopg
from flask import Flask, jsonify, request

from .config import ConfigError, load_config
from .db import Db, DbError
from .dtos import CreateCommentDto, CreateCustomerDto, CreateServiceOrderDto
from .logging_config import setup_logging
from .services.errors import BadRequestError, ConflictError, NotFoundError
from .wiring import Services, build_services

logger = logging.getLogger(__name__)


def _jsonable(value):
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value


def _dto_json(dto):
    if isinstance(dto, list):
        return jsonify([_jsonable(asdict(d)) for d in dto])
    return jsonify(_jsonable(asdict(dto)))


def _body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequestError("Request body must be a JSON object")
    return data


def _text(data: dict, key: str, default: str | None = None) -> str:
    if key not in data and default is not None:
        return default
    try:
        value = data[key]
    except KeyError as e:
        raise BadRequestError(f"Missing field: {e}") from e
    if not isinstance(value, str):
        raise BadRequestError(f"Field '{key}' must be a string")
    return value.strip()


def _customer_input(data: dict) -> CreateCustomerDto:
    return CreateCustomerDto(
        name=_text(data, "name"),
        password=data.get("password"),
        email=_text(data, "email"),
        phone=_text(data, "phone", default=""),
    )


def _order_input(data: dict) -> CreateServiceOrderDto:
    description = _text(data, "description")
    try:
        return CreateServiceOrderDto(
            description=description,
            price=float(data["price"]),
            customer_id=int(data["customer_id"]),
        )
    except KeyError as e:
        raise BadRequestError(f"Missing field: {e}") from e
    except (TypeError, ValueError) as e:
        raise BadRequestError(f"Invalid field value: {e}") from e


def create_app(services: Services) -> Flask:
    app = Flask(__name__)
    db = services.db

    @app.errorhandler(NotFoundError)
    def _not_found(e):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(ConflictError)
    def _conflict(e):
        return jsonify({"error": str(e)}), 409

    @app.errorhandler(BadRequestError)
    def _bad_request(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(DbError)
    def _db_error(e):
        logger.error("Database error: %s", e)
        return jsonify({"error": str(e)}), 503

    @app.errorhandler(psycopg.Error)
    def _query_error(e):
        logger.exception("Query failed")
        return jsonify({"error": "Database operation failed"}), 500

    @app.route("/customers")
    def customers_list():
        with db.session() as conn:
            rows = services.customers.get_all_customers(conn)
        return _dto_json(rows)

    @app.route("/customers/<int:customer_id>")
    def customers_get(customer_id):
        with db.session() as conn:
            customer = services.customers.get_customer(conn, customer_id)
        return _dto_json(customer)

    @app.route("/customers", methods=["POST"])
    def customers_new():
        dto = _customer_input(_body())
        with db.transaction() as conn:
            customer = services.customers.create(conn, dto)
        return _dto_json(customer), 201

    @app.route("/customers/<int:customer_id>", methods=["PUT"])
    def customers_update(customer_id):
        dto = _customer_input(_body())
        with db.transaction() as conn:
            services.customers.update(conn, customer_id, dto)
        return "", 204

    @app.route("/customers/<int:customer_id>", methods=["DELETE"])
    def customers_delete(customer_id):
        with db.transaction() as conn:
            services.customers.delete(conn, customer_id)
        return "", 204

    @app.route("/service-orders")
    def orders_list():
        with db.session() as conn:
            rows = services.orders.get_all(conn)
        return _dto_json(rows)

    @app.route("/service-orders/<int:order_id>")
    def orders_get(order_id):
        with db.session() as conn:
            order = services.orders.get_service_order(conn, order_id)
        return _dto_json(order)

    @app.route("/service-orders", methods=["POST"])
    def orders_new():
        dto = _order_input(_body())
        with db.transaction() as conn:
            order = services.orders.create_service_order(conn, dto)
        return _dto_json(order), 201

    @app.route("/service-orders/<int:order_id>/finish", methods=["POST"])
    def orders_finish(order_id):
        with db.transaction() as conn:
            services.orders.finish_service_order(conn, order_id)
        return "", 204

    @app.route("/service-orders/<int:order_id>/cancel", methods=["POST"])
    def orders_cancel(order_id):
        with db.transaction() as conn:
            services.orders.cancel_service_order(conn, order_id)
        return "", 204

    @app.route("/service-orders/<int:order_id>/comments")
    def orders_comments(order_id):
        with db.session() as conn:
            order = services.comments.get_service_order_with_comments(conn, order_id)
        return _dto_json(order)

    @app.route("/service-orders/<int:order_id>/comments", methods=["POST"])
    def orders_comment_new(order_id):
        data = _body()
        dto = CreateCommentDto(description=_text(data, "description", default=""))
        with db.transaction() as conn:
            comment = services.comments.add_comment(conn, order_id, dto)
        return _dto_json(comment), 201

    return app


if __name__ == "__main__":
    try:
        cfg = load_config("config.toml")
        setup_logging(cfg.log_level)
        services = build_services(cfg)
        if isinstance(services.db, Db):
            services.db.apply_schema()
        create_app(services).run(debug=cfg.web.debug, host=cfg.web.host, port=cfg.web.port)
    except ConfigError as e:
        print(f"[CONFIG ERROR] {e}")
        raise SystemExit(2)
    except DbError as e:
        print(f"[DB ERROR] {e}")
        raise SystemExit(3)
