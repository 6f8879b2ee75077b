"""Unit tests for the method override middleware."""

import asyncio

import pytest

from src.catalog.api.http.middleware.method_override import MethodOverrideMiddleware


async def _noop_receive():
    return {"type": "http.request", "body": b""}


async def _noop_send(message):
    return None


def _scope(method: str, query: bytes) -> dict:
    return {"type": "http", "method": method, "query_string": query, "path": "/books/1"}


@pytest.mark.parametrize(
    ("method", "query", "expected"),
    [
        ("POST", b"_method=PUT", "PUT"),
        ("POST", b"_method=delete", "DELETE"),
        ("POST", b"_method=PATCH&x=1", "PATCH"),
        ("POST", b"_method=GET", "POST"),
        ("POST", b"", "POST"),
        ("GET", b"_method=DELETE", "GET"),
    ],
)
def test_method_override(method, query, expected):
    seen = {}

    async def app(scope, receive, send):
        seen["method"] = scope["method"]

    middleware = MethodOverrideMiddleware(app)
    asyncio.run(middleware(_scope(method, query), _noop_receive, _noop_send))

    assert seen["method"] == expected
