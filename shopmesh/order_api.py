"""HTTP interface of the order service."""

from __future__ import annotations

import argparse
import json
import re
from collections.abc import Sequence
from typing import Any

from flask import Flask, jsonify, request
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .domain import Order, ValidationError
from .logs import init_logger
from .repository import OrderRepository
from .usecase import OrderUsecase

DEFAULT_MONGO_URI = "mongodb://localhost:27017"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8082

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -(2**63), 2**63 - 1


def _parse_int(text: str | None) -> int:
    if text is None or not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _read_order() -> Order:
    raw = request.get_data(cache=False)
    if not raw.strip():
        raise ValidationError("empty request body")
    try:
        data: Any = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValidationError(str(exc)) from exc
    return Order.from_dict({} if data is None else data)


def create_app(usecase: OrderUsecase) -> Flask:
    """Build the Flask application serving the ``/orders`` endpoints."""
    app = Flask(__name__)

    @app.route("/orders", methods=["POST"])
    def create_order():
        try:
            order = _read_order()
        except ValidationError as exc:
            return jsonify(error=str(exc)), 400
        try:
            new_id = usecase.create_order(order)
        except Exception as exc:
            return jsonify(error=str(exc)), 500
        return jsonify(id=new_id), 201

    @app.route("/orders/<item_id>", methods=["GET"])
    def get_order(item_id: str):
        try:
            order_id = _parse_int(item_id)
        except ValueError:
            return jsonify(error="Invalid ID"), 400
        try:
            order = usecase.get_order(order_id)
        except Exception:
            return jsonify(error="Order not found"), 404
        return jsonify(order.to_dict()), 200

    @app.route("/orders/<item_id>", methods=["PATCH"])
    def update_order(item_id: str):
        try:
            order_id = _parse_int(item_id)
        except ValueError:
            return jsonify(error="Invalid ID"), 400
        try:
            order = _read_order()
        except ValidationError as exc:
            return jsonify(error=str(exc)), 400
        try:
            usecase.update_order(order_id, order)
        except Exception as exc:
            return jsonify(error=str(exc)), 500
        return jsonify(message="Order updated"), 200

    @app.route("/orders", methods=["GET"])
    def list_orders():
        try:
            user_id = _parse_int(request.args.get("user_id", ""))
        except ValueError:
            return jsonify(error="Invalid user_id"), 400
        try:
            orders = usecase.list_orders(user_id)
        except Exception as exc:
            return jsonify(error=str(exc)), 500
        return jsonify([order.to_dict() for order in orders]), 200

    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Connect to MongoDB and serve the order API."""
    parser = argparse.ArgumentParser(prog="shopmesh-orders", description="Order service")
    parser.add_argument("--mongo-uri", default=DEFAULT_MONGO_URI)
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    logger = init_logger("ORDER-SERVICE: ")
    try:
        client = MongoClient(args.mongo_uri, serverSelectionTimeoutMS=10_000)
    except PyMongoError as exc:
        raise SystemExit(f"Failed to connect to MongoDB: {exc}") from exc

    try:
        try:
            client.admin.command("ping")
        except PyMongoError as exc:
            raise SystemExit(f"Failed to ping MongoDB: {exc}") from exc
        logger.info("Connected to MongoDB")

        usecase = OrderUsecase(OrderRepository.from_client(client))
        create_app(usecase).run(host=args.host, port=args.port)
    finally:
        client.close()
    return 0