"""Application services sitting between the HTTP handlers and the stores."""

from __future__ import annotations

from typing import Protocol

from .domain import Order, Product


class _InventoryStore(Protocol):
    def create_product(self, product: Product) -> int: ...
    def get_product(self, product_id: int) -> Product: ...
    def update_product(self, product_id: int, product: Product) -> None: ...
    def delete_product(self, product_id: int) -> None: ...
    def list_products(self) -> list[Product]: ...


class _OrderStore(Protocol):
    def create_order(self, order: Order) -> int: ...
    def get_order(self, order_id: int) -> Order: ...
    def update_order(self, order_id: int, order: Order) -> None: ...
    def list_orders(self, user_id: int) -> list[Order]: ...


class InventoryUsecase:
    """Product operations backed by an inventory store."""

    def __init__(self, repo: _InventoryStore) -> None:
        self.repo = repo

    def create_product(self, product: Product) -> int:
        return self.repo.create_product(product)

    def get_product(self, product_id: int) -> Product:
        return self.repo.get_product(product_id)

    def update_product(self, product_id: int, product: Product) -> None:
        self.repo.update_product(product_id, product)

    def delete_product(self, product_id: int) -> None:
        self.repo.delete_product(product_id)

    def list_products(self) -> list[Product]:
        return self.repo.list_products()


class OrderUsecase:
    """Order operations backed by an order store."""

    def __init__(self, repo: _OrderStore) -> None:
        self.repo = repo

    def create_order(self, order: Order) -> int:
        return self.repo.create_order(order)

    def get_order(self, order_id: int) -> Order:
        return self.repo.get_order(order_id)

    def update_order(self, order_id: int, order: Order) -> None:
        self.repo.update_order(order_id, order)

    def list_orders(self, user_id: int) -> list[Order]:
        return self.repo.list_orders(user_id)