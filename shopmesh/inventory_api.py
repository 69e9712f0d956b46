"""HTTP interface of the inventory service."""

from __future__ import annotations

import argparse
import json
import re
from collections.abc import Sequence
from typing import Any

from flask import Flask, jsonify, request
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .domain import Product, ValidationError
from .logs import init_logger
from .repository import InventoryRepository
from .usecase import InventoryUsecase

DEFAULT_MONGO_URI = "mongodb://localhost:27017"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8081

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -(2**63), 2**63 - 1


def _parse_int(text: str | None) -> int:
    if text is None or not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _read_product() -> Product:
    raw = request.get_data(cache=False)
    if not raw.strip():
        raise ValidationError("empty request body")
    try:
        data: Any = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValidationError(str(exc)) from exc
    return Product.from_dict({} if data is None else data)


def create_app(usecase: InventoryUsecase) -> Flask:
    """Build the Flask application serving the ``/products`` endpoints."""
    app = Flask(__name__)

    @app.route("/products", methods=["POST"])
    def create_product():
        try:
            product = _read_product()
        except ValidationError as exc:
            return jsonify(error=str(exc)), 400
        try:
            new_id = usecase.create_product(product)
        except Exception as exc:
            return jsonify(error=str(exc)), 500
        return jsonify(id=new_id), 201

    @app.route("/products/<item_id>", methods=["GET"])
    def get_product(item_id: str):
        try:
            product_id = _parse_int(item_id)
        except ValueError:
            return jsonify(error="Invalid ID"), 400
        try:
            product = usecase.get_product(product_id)
        except Exception:
            return jsonify(error="Product not found"), 404
        return jsonify(product.to_dict()), 200

    @app.route("/products/<item_id>", methods=["PATCH"])
    def update_product(item_id: str):
        try:
            product_id = _parse_int(item_id)
        except ValueError:
            return jsonify(error="Invalid ID"), 400
        try:
            product = _read_product()
        except ValidationError as exc:
            return jsonify(error=str(exc)), 400
        try:
            usecase.update_product(product_id, product)
        except Exception as exc:
            return jsonify(error=str(exc)), 500
        return jsonify(message="Product updated"), 200

    @app.route("/products/<item_id>", methods=["DELETE"])
    def delete_product(item_id: str):
        try:
            product_id = _parse_int(item_id)
        except ValueError:
            return jsonify(error="Invalid ID"), 400
        try:
            usecase.delete_product(product_id)
        except Exception as exc:
            return jsonify(error=str(exc)), 500
        return jsonify(message="Product deleted"), 200

    @app.route("/products", methods=["GET"])
    def list_products():
        try:
            products = usecase.list_products()
        except Exception as exc:
            return jsonify(error=str(exc)), 500
        return jsonify([product.to_dict() for product in products]), 200

    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Connect to MongoDB and serve the inventory API."""
    parser = argparse.ArgumentParser(prog="shopmesh-inventory", description="Inventory service")
    parser.add_argument("--mongo-uri", default=DEFAULT_MONGO_URI)
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    logger = init_logger("INVENTORY-SERVICE: ")
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

        usecase = InventoryUsecase(InventoryRepository.from_client(client))
        create_app(usecase).run(host=args.host, port=args.port)
    finally:
        client.close()
    return 0