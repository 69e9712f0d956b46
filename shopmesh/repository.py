"""MongoDB-backed stores for products and orders."""

from __future__ import annotations

import dataclasses
from typing import Any

from .domain import Order, Product


class NotFoundError(LookupError):
    """Raised when no document matches the requested id."""


class InventoryRepository:
    """Products kept in a MongoDB collection, keyed by a numeric ``id``."""

    def __init__(self, collection: Any) -> None:
        self.collection = collection

    @classmethod
    def from_client(cls, client: Any) -> InventoryRepository:
        return cls(client["inventory_db"]["products"])

    def create_product(self, product: Product) -> int:
        """Store the product under the next id (document count plus one)."""
        new_id = self.collection.count_documents({}) + 1
        stored = dataclasses.replace(product, id=new_id)
        self.collection.insert_one(stored.to_dict())
        return new_id

    def get_product(self, product_id: int) -> Product:
        document = self.collection.find_one({"id": product_id})
        if document is None:
            raise NotFoundError(f"product {product_id} not found")
        return Product.from_dict(document)

    def update_product(self, product_id: int, product: Product) -> None:
        stored = dataclasses.replace(product, id=product_id)
        self.collection.replace_one({"id": product_id}, stored.to_dict())

    def delete_product(self, product_id: int) -> None:
        self.collection.delete_one({"id": product_id})

    def list_products(self) -> list[Product]:
        return [Product.from_dict(document) for document in self.collection.find({})]


class OrderRepository:
    """Orders kept in a MongoDB collection, keyed by a numeric ``id``."""

    def __init__(self, collection: Any) -> None:
        self.collection = collection

    @classmethod
    def from_client(cls, client: Any) -> OrderRepository:
        return cls(client["order_db"]["orders"])

    def create_order(self, order: Order) -> int:
        """Store the order under the next id (document count plus one)."""
        new_id = self.collection.count_documents({}) + 1
        stored = dataclasses.replace(order, id=new_id)
        self.collection.insert_one(stored.to_dict())
        return new_id

    def get_order(self, order_id: int) -> Order:
        document = self.collection.find_one({"id": order_id})
        if document is None:
            raise NotFoundError(f"order {order_id} not found")
        return Order.from_dict(document)

    def update_order(self, order_id: int, order: Order) -> None:
        stored = dataclasses.replace(order, id=order_id)
        self.collection.replace_one({"id": order_id}, stored.to_dict())

    def list_orders(self, user_id: int) -> list[Order]:
        return [
            Order.from_dict(document)
            for document in self.collection.find({"user_id": user_id})
        ]