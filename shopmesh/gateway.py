"""API gateway: checks bearer tokens and forwards calls to the services."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from typing import Any

import requests
from flask import Flask, Response, jsonify, request

from .auth import AuthError, authorize
from .logs import init_logger

INVENTORY_URL = "http://localhost:8081/products"
ORDER_URL = "http://localhost:8082/orders"
DEFAULT_SECRET = "secret"
SECRET_ENV = "SHOPMESH_JWT_SECRET"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

_ROUTES = (
    ("/products", "POST", INVENTORY_URL),
    ("/products/<item_id>", "GET", INVENTORY_URL + "/:id"),
    ("/products/<item_id>", "PATCH", INVENTORY_URL + "/:id"),
    ("/products/<item_id>", "DELETE", INVENTORY_URL + "/:id"),
    ("/products", "GET", INVENTORY_URL),
    ("/orders", "POST", ORDER_URL),
    ("/orders/<item_id>", "GET", ORDER_URL + "/:id"),
    ("/orders/<item_id>", "PATCH", ORDER_URL + "/:id"),
    ("/orders", "GET", ORDER_URL),
)

_SKIPPED_HEADERS = frozenset({"host", "content-length"})
_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PATCH, DELETE",
    "Access-Control-Allow-Headers": "Authorization, Content-Type",
}


def target_url(target: str, item_id: str | None) -> str:
    """Replace the trailing ``:id`` placeholder of ``target`` with ``item_id``."""
    if item_id:
        return target[:-3] + item_id
    return target


def _make_proxy(http: Any, target: str, method: str):
    def proxy(item_id: str | None = None):
        url = target_url(target, item_id)
        try:
            body = request.get_data(cache=False)
        except OSError:
            return jsonify(error="Failed to read request body"), 400

        headers = {
            name: value
            for name, value in request.headers.items()
            if name.lower() not in _SKIPPED_HEADERS
        }
        try:
            upstream = http.request(method, url, data=body, headers=headers, stream=True)
        except (
            requests.exceptions.InvalidURL,
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
        ):
            return jsonify(error="Failed to create request"), 500
        except requests.RequestException:
            return jsonify(error="Service unavailable"), 503

        try:
            content = upstream.content
        except requests.RequestException:
            return jsonify(error="Failed to read response"), 500
        finally:
            upstream.close()

        response = Response(content, status=upstream.status_code)
        content_type = upstream.headers.get("Content-Type")
        if content_type:
            response.headers["Content-Type"] = content_type
        else:
            response.headers.pop("Content-Type", None)
        return response

    return proxy


def create_app(session: Any = None, secret: str | bytes = DEFAULT_SECRET) -> Flask:
    """Build the gateway application forwarding requests through ``session``."""
    http = session if session is not None else requests.Session()
    app = Flask(__name__)

    @app.before_request
    def _guard():
        if request.method == "OPTIONS":
            return Response(status=204)
        try:
            authorize(request.headers.get("Authorization", ""), secret)
        except AuthError as exc:
            return jsonify(error=str(exc)), 401
        return None

    @app.after_request
    def _cors(response: Response) -> Response:
        response.headers.update(_CORS_HEADERS)
        return response

    def _not_found(_error):
        return Response("404 page not found", status=404, mimetype="text/plain")

    app.register_error_handler(404, _not_found)
    app.register_error_handler(405, _not_found)

    for rule, method, target in _ROUTES:
        endpoint = f"{method.lower()}:{rule}"
        app.add_url_rule(
            rule,
            endpoint=endpoint,
            view_func=_make_proxy(http, target, method),
            methods=[method],
        )
    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the gateway in front of the inventory and order services."""
    parser = argparse.ArgumentParser(prog="shopmesh-gateway", description="API gateway")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument(
        "--secret",
        default=os.environ.get(SECRET_ENV, DEFAULT_SECRET),
        help=f"HMAC key for bearer tokens (default: ${SECRET_ENV})",
    )
    args = parser.parse_args(argv)

    init_logger("API-GATEWAY: ")
    with requests.Session() as session:
        create_app(session, args.secret).run(host=args.host, port=args.port)
    return 0