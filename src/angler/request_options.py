"""Request configuration and the options that populate it."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Protocol

import httpx

from .codecs import json_deserialize, json_serialize
from .handlers import log_unknown_status

DEFAULT_METHOD = "GET"
DEFAULT_CONTENT_TYPE = "application/json"

StatusHandler = Callable[[httpx.Response], Any]
Serializer = Callable[[Any], bytes]
Deserializer = Callable[[bytes, Any], Any]


class HTTPClient(Protocol):
    """Anything that sends an ``httpx.Request``; ``httpx.Client`` qualifies."""

    def send(self, request: httpx.Request) -> httpx.Response:
        ...


_default_client: httpx.Client | None = None
_default_client_lock = threading.Lock()


def default_client() -> httpx.Client:
    """Shared client used when no ``with_client`` option is given."""
    global _default_client
    with _default_client_lock:
        if _default_client is None:
            _default_client = httpx.Client()
        return _default_client


@dataclass
class RequestConfig:
    method: str = DEFAULT_METHOD
    url: str = ""
    content_type: str = DEFAULT_CONTENT_TYPE
    headers: dict[str, str] = field(default_factory=dict)
    client: HTTPClient | None = None
    serialize: Serializer = json_serialize
    deserialize: Deserializer = json_deserialize
    status_handlers: dict[int, StatusHandler] = field(default_factory=dict)
    default_status_handler: StatusHandler = log_unknown_status
    body: Any = None

    def transport(self) -> HTTPClient:
        return self.client if self.client is not None else default_client()


RequestOption = Callable[[RequestConfig], None]


def build_config(*options: RequestOption) -> RequestConfig:
    """Apply ``options`` in order to a fresh default configuration."""
    config = RequestConfig()
    for option in options:
        option(config)
    return config


def _normalize_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    if not headers:
        return {}
    clean: dict[str, str] = {}
    for key, value in headers.items():
        clean[str(key)] = str(value)
    return clean


def with_method(method: str) -> RequestOption:
    def apply(config: RequestConfig) -> None:
        config.method = method

    return apply


def with_url(url: str | httpx.URL) -> RequestOption:
    def apply(config: RequestConfig) -> None:
        config.url = str(url)

    return apply


def with_content_type(content_type: str) -> RequestOption:
    """Store the content type.

    The request is still sent with ``Content-Type: application/json`` unless a
    header option sets it.
    """

    def apply(config: RequestConfig) -> None:
        config.content_type = content_type

    return apply


def with_headers(headers: Mapping[str, str]) -> RequestOption:
    """Replace every header set so far."""

    def apply(config: RequestConfig) -> None:
        config.headers = _normalize_headers(headers)

    return apply


def with_header(key: str, value: str) -> RequestOption:
    def apply(config: RequestConfig) -> None:
        config.headers[str(key)] = str(value)

    return apply


def with_client(client: HTTPClient) -> RequestOption:
    def apply(config: RequestConfig) -> None:
        config.client = client

    return apply


def with_serialize(serialize: Serializer) -> RequestOption:
    def apply(config: RequestConfig) -> None:
        config.serialize = serialize

    return apply


def with_deserialize(deserialize: Deserializer) -> RequestOption:
    def apply(config: RequestConfig) -> None:
        config.deserialize = deserialize

    return apply


def with_status_handlers(handlers: Mapping[int, StatusHandler]) -> RequestOption:
    """Replace every status handler registered so far."""

    def apply(config: RequestConfig) -> None:
        config.status_handlers = dict(handlers)

    return apply


def with_status_handler(status_code: int, handler: StatusHandler) -> RequestOption:
    def apply(config: RequestConfig) -> None:
        config.status_handlers[int(status_code)] = handler

    return apply


def with_default_status_handler(handler: StatusHandler) -> RequestOption:
    def apply(config: RequestConfig) -> None:
        config.default_status_handler = handler

    return apply


def with_body(body: Any) -> RequestOption:
    def apply(config: RequestConfig) -> None:
        config.body = body

    return apply
