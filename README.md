# shopmesh

A small e-commerce backend made of three HTTP services:

| Service   | Command              | Default port | Storage                         |
|-----------|----------------------|--------------|---------------------------------|
| Gateway   | `shopmesh-gateway`   | 8080         | none; forwards requests         |
| Inventory | `shopmesh-inventory` | 8081         | MongoDB `inventory_db.products` |
| Orders    | `shopmesh-orders`    | 8082         | MongoDB `order_db.orders`       |

## Installing

```
pip install .
```

For running the test suite, install the `test` extra as well:

```
pip install ".[test]"
```

## Running

Start each service in its own terminal:

```
shopmesh-inventory
shopmesh-orders
shopmesh-gateway
```

Each command logs to standard output with a service prefix, for example
`INVENTORY-SERVICE: 2024/01/01 12:00:00 Logger initialized`.

### Inventory and order services

Options of `shopmesh-inventory` and `shopmesh-orders`:

| Option        | Default                     |
|---------------|-----------------------------|
| `--mongo-uri` | `mongodb://localhost:27017` |
| `--host`      | `0.0.0.0`                   |
| `--port`      | `8081` / `8082`             |

At start-up each service pings MongoDB and stops with
`Failed to ping MongoDB: ...` if the server cannot be reached within ten
seconds.

### Gateway

Options of `shopmesh-gateway`:

| Option     | Default                                                  |
|------------|----------------------------------------------------------|
| `--host`   | `0.0.0.0`                                                |
| `--port`   | `8080`                                                   |
| `--secret` | `$SHOPMESH_JWT_SECRET`, or `secret` when that is not set |

The gateway forwards to `http://localhost:8081/products` and
`http://localhost:8082/orders`. Clients talk to the gateway only.

Every response carries CORS headers allowing any origin, the methods
`GET, POST, PATCH, DELETE` and the headers `Authorization, Content-Type`.
`OPTIONS` requests are answered with `204` without further checks.

Every other request must carry a JWT signed with HS256, HS384 or HS512
using the gateway's secret:

```
Authorization: Bearer token
```

A missing header, a header that is not exactly `Bearer <token>`, and a token
that fails verification or has expired are answered with `401` and a JSON
body such as `{"error": "Invalid or expired token"}`.

Requests that pass are forwarded with their body and headers (except
`Host` and `Content-Length`), and the backing service's status code,
content type and body are passed back. If a backing service cannot be
reached the gateway answers `503 {"error": "Service unavailable"}`.
Paths and methods not listed below get `404` with the text
`404 page not found`.

## Endpoints

### Products (inventory service)

| Method   | Path             | Result                                   |
|----------|------------------|------------------------------------------|
| `POST`   | `/products`      | `201 {"id": <new id>}`                   |
| `GET`    | `/products`      | `200` list of all products               |
| `GET`    | `/products/<id>` | `200` the product, `404` if unknown      |
| `PATCH`  | `/products/<id>` | `200 {"message": "Product updated"}`     |
| `DELETE` | `/products/<id>` | `200 {"message": "Product deleted"}`     |

A product looks like this:

```json
{"id": 1, "name": "Desk lamp", "category_id": 2, "stock": 10, "price": 24.5}
```

### Orders (order service)

| Method  | Path                   | Result                                 |
|---------|------------------------|----------------------------------------|
| `POST`  | `/orders`              | `201 {"id": <new id>}`                 |
| `GET`   | `/orders?user_id=<n>`  | `200` the orders of that user          |
| `GET`   | `/orders/<id>`         | `200` the order, `404` if unknown      |
| `PATCH` | `/orders/<id>`         | `200 {"message": "Order updated"}`     |

An order looks like this:

```json
{
  "id": 1,
  "user_id": 7,
  "status": "pending",
  "items": [{"product_id": 1, "quantity": 2}],
  "total_price": 49.0
}
```

A non-numeric id in a path is answered with `400 {"error": "Invalid ID"}`;
listing orders without a numeric `user_id` gives
`400 {"error": "Invalid user_id"}`. An empty or malformed JSON body, or a
field of the wrong type, is answered with `400` and a description of the
problem. Missing fields take their zero value (`0`, `""`, `[]`).

New records get the id *number of stored records + 1*; any `id` in the
request body is ignored. An update replaces the stored record whole,
keeping the id from the path. Updating or deleting an id that is not
stored still answers `200`.

## Using the pieces from Python

The services are built from plain layers that can be wired up directly:

```python
from pymongo import MongoClient

from shopmesh.domain import Product
from shopmesh.inventory_api import create_app
from shopmesh.repository import InventoryRepository
from shopmesh.usecase import InventoryUsecase

client = MongoClient("mongodb://localhost:27017")
usecase = InventoryUsecase(InventoryRepository.from_client(client))

new_id = usecase.create_product(
    Product.from_dict({"name": "Desk lamp", "category_id": 2, "stock": 10, "price": 24.5})
)
print(usecase.get_product(new_id).to_dict())

app = create_app(usecase)  # a Flask application
```

- `shopmesh.domain`: the dataclasses `Product`, `Category`, `Order` and
  `OrderItem`, each with `to_dict()` and `from_dict()`; bad input raises
  `ValidationError`.
- `shopmesh.repository`: `InventoryRepository` and `OrderRepository`, built
  on a pymongo collection or with `from_client(client)`; looking up an id
  that is not stored raises `NotFoundError`.
- `shopmesh.usecase`: `InventoryUsecase` and `OrderUsecase`, taking any
  object with the repository's methods.
- `shopmesh.inventory_api.create_app(usecase)` and
  `shopmesh.order_api.create_app(usecase)`: the Flask applications.
- `shopmesh.gateway.create_app(session, secret)`: the gateway application,
  forwarding through a `requests.Session` (or any object with the same
  `request` method).
- `shopmesh.auth.authorize(header, secret)`: checks an `Authorization`
  value and returns the token's claims, or raises `AuthError`.
- `shopmesh.logs.init_logger(prefix, stream)`: the prefixed service logger.

## What it does not do

- It does not issue tokens; clients must obtain a JWT signed with the
  gateway's secret by other means.
- The gateway's upstream addresses are fixed to `localhost:8081` and
  `localhost:8082`.
- There are no category endpoints, no order deletion, and no stock or
  price checks when orders are placed.