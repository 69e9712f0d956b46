"""Entities shared by the inventory and order services."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


class ValidationError(ValueError):
    """Raised when a document cannot be turned into an entity."""


def _as_mapping(data: Any) -> Mapping:
    if not isinstance(data, Mapping):
        raise ValidationError("expected a JSON object")
    return data


def _int(data: Mapping, key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"field {key!r} must be an integer")
    return int(value)


def _float(data: Mapping, key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"field {key!r} must be a number")
    return float(value)


def _str(data: Mapping, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"field {key!r} must be a string")
    return value


@dataclass
class Product:
    id: int = 0
    name: str = ""
    category_id: int = 0
    stock: int = 0
    price: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category_id": self.category_id,
            "stock": self.stock,
            "price": self.price,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Product:
        data = _as_mapping(data)
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            category_id=_int(data, "category_id"),
            stock=_int(data, "stock"),
            price=_float(data, "price"),
        )


@dataclass
class Category:
    id: int = 0
    name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Any) -> Category:
        data = _as_mapping(data)
        return cls(id=_int(data, "id"), name=_str(data, "name"))


@dataclass
class OrderItem:
    product_id: int = 0
    quantity: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"product_id": self.product_id, "quantity": self.quantity}

    @classmethod
    def from_dict(cls, data: Any) -> OrderItem:
        data = _as_mapping(data)
        return cls(product_id=_int(data, "product_id"), quantity=_int(data, "quantity"))


@dataclass
class Order:
    id: int = 0
    user_id: int = 0
    status: str = ""
    items: list[OrderItem] = field(default_factory=list)
    total_price: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "status": self.status,
            "items": [item.to_dict() for item in self.items],
            "total_price": self.total_price,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Order:
        data = _as_mapping(data)
        raw_items = data.get("items")
        if raw_items is None:
            raw_items = []
        if not isinstance(raw_items, list):
            raise ValidationError("field 'items' must be an array")
        return cls(
            id=_int(data, "id"),
            user_id=_int(data, "user_id"),
            status=_str(data, "status"),
            items=[OrderItem.from_dict(item) for item in raw_items],
            total_price=_float(data, "total_price"),
        )