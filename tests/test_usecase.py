import dataclasses

import pytest

from shopmesh.domain import Order, OrderItem, Product
from shopmesh.repository import NotFoundError
from shopmesh.usecase import InventoryUsecase, OrderUsecase


class MemoryInventory:
    def __init__(self):
        self.products = {}

    def create_product(self, product):
        new_id = len(self.products) + 1
        self.products[new_id] = dataclasses.replace(product, id=new_id)
        return new_id

    def get_product(self, product_id):
        try:
            return self.products[product_id]
        except KeyError:
            raise NotFoundError(product_id) from None

    def update_product(self, product_id, product):
        self.products[product_id] = dataclasses.replace(product, id=product_id)

    def delete_product(self, product_id):
        self.products.pop(product_id, None)

    def list_products(self):
        return list(self.products.values())


class MemoryOrders:
    def __init__(self):
        self.orders = {}

    def create_order(self, order):
        new_id = len(self.orders) + 1
        self.orders[new_id] = dataclasses.replace(order, id=new_id)
        return new_id

    def get_order(self, order_id):
        try:
            return self.orders[order_id]
        except KeyError:
            raise NotFoundError(order_id) from None

    def update_order(self, order_id, order):
        self.orders[order_id] = dataclasses.replace(order, id=order_id)

    def list_orders(self, user_id):
        return [o for o in self.orders.values() if o.user_id == user_id]


@pytest.fixture
def inventory():
    return InventoryUsecase(MemoryInventory())


@pytest.fixture
def orders():
    return OrderUsecase(MemoryOrders())


def test_create_then_get_product(inventory):
    new_id = inventory.create_product(Product(name="Desk", price=80.0))
    assert inventory.get_product(new_id) == Product(id=new_id, name="Desk", price=80.0)


def test_get_missing_product_propagates(inventory):
    with pytest.raises(NotFoundError):
        inventory.get_product(12)


def test_update_product(inventory):
    new_id = inventory.create_product(Product(name="Desk"))
    inventory.update_product(new_id, Product(name="Chair", stock=3))
    assert inventory.get_product(new_id) == Product(id=new_id, name="Chair", stock=3)


def test_delete_product(inventory):
    new_id = inventory.create_product(Product(name="Desk"))
    inventory.delete_product(new_id)
    assert inventory.list_products() == []


def test_list_products(inventory):
    inventory.create_product(Product(name="A"))
    inventory.create_product(Product(name="B"))
    assert [p.name for p in inventory.list_products()] == ["A", "B"]


def test_create_then_get_order(orders):
    order = Order(user_id=2, status="new", items=[OrderItem(product_id=1, quantity=1)])
    new_id = orders.create_order(order)
    assert orders.get_order(new_id) == dataclasses.replace(order, id=new_id)


def test_get_missing_order_propagates(orders):
    with pytest.raises(NotFoundError):
        orders.get_order(3)


def test_update_order(orders):
    new_id = orders.create_order(Order(user_id=2, status="new"))
    orders.update_order(new_id, Order(user_id=2, status="paid"))
    assert orders.get_order(new_id).status == "paid"


def test_list_orders_for_user(orders):
    orders.create_order(Order(user_id=1))
    orders.create_order(Order(user_id=2))
    result = orders.list_orders(2)
    assert [o.user_id for o in result] == [2]