from __future__ import annotations

from typing import Any

import httpx

from angler import Angler, with_header, with_url

from conftest import Item


def test_angler_applies_base_options_to_each_call(mock_client) -> None:
    captured: list[dict[str, Any]] = []

    def send_request(request: httpx.Request) -> httpx.Response:
        captured.append(
            {
                "method": request.method,
                "url": str(request.url),
                "auth": request.headers.get("Authorization"),
                "trace": request.headers.get("X-Trace"),
                "content": request.content,
            }
        )
        return httpx.Response(200, json={"name": "x", "id": 1})

    with Angler(with_header("Authorization", "Bearer t"), httpx_client=mock_client(send_request)) as client:
        got = client.get(Item, "https://api.example/items/1", with_header("X-Trace", "1"))
        created = client.post(Item, "https://api.example/items", body={"name": "x"})
        fetched = client.fetch(Item, with_url("https://api.example/items/2"))

    assert got == created == fetched == Item(name="x", id=1)
    assert captured == [
        {"method": "GET", "url": "https://api.example/items/1", "auth": "Bearer t", "trace": "1", "content": b""},
        {"method": "POST", "url": "https://api.example/items", "auth": "Bearer t", "trace": None, "content": b'{"name":"x"}'},
        {"method": "GET", "url": "https://api.example/items/2", "auth": "Bearer t", "trace": None, "content": b""},
    ]


def test_angler_shortcut_methods(mock_client) -> None:
    methods: list[str] = []

    def send_request(request: httpx.Request) -> httpx.Response:
        methods.append(request.method)
        return httpx.Response(200, json={"ok": True})

    client = Angler(httpx_client=mock_client(send_request))
    client.put(dict, "https://api.example/a", body={"a": 1})
    client.patch(dict, "https://api.example/a", body={"a": 2})
    client.delete(dict, "https://api.example/a")

    assert methods == ["PUT", "PATCH", "DELETE"]


def test_angler_leaves_external_client_open(mock_client) -> None:
    external = mock_client(lambda request: httpx.Response(200, json={}))

    Angler(httpx_client=external).close()

    assert not external.is_closed


def test_angler_closes_owned_client() -> None:
    client = Angler()
    client.close()

    assert client._httpx.is_closed
