"""Request execution pipeline and a reusable client wrapper."""

from __future__ import annotations

from typing import Any, TypeVar

import httpx

from .exceptions import (
    AnglerError,
    DeserializationError,
    HandlerTypeMismatchError,
    MissingMethodError,
    MissingURLError,
    SerializationError,
    TransportError,
)
from .handlers import matches_type, status_text
from .request_options import (
    RequestConfig,
    RequestOption,
    build_config,
    with_body,
    with_client,
    with_method,
    with_url,
)

T = TypeVar("T")

SUCCESS_STATUS_CODES = frozenset({200, 201})


def _serialize_body(config: RequestConfig) -> bytes | None:
    if config.body is None:
        return None
    try:
        return config.serialize(config.body)
    except AnglerError:
        raise
    except Exception as exc:
        raise SerializationError("Request body serialization failed", cause=exc) from exc


def _build_request(config: RequestConfig, content: bytes | None) -> httpx.Request:
    headers = httpx.Headers({"Content-Type": "application/json"})
    for key, value in config.headers.items():
        headers[key] = value
    return httpx.Request(config.method, config.url, headers=headers, content=content)


def _send(config: RequestConfig, request: httpx.Request) -> httpx.Response:
    try:
        return config.transport().send(request)
    except AnglerError:
        raise
    except Exception as exc:
        raise TransportError("Transport failed", cause=exc) from exc


def _decode(config: RequestConfig, response: httpx.Response, result_type: Any) -> Any:
    data = response.read()
    try:
        return config.deserialize(data, result_type)
    except AnglerError:
        raise
    except Exception as exc:
        raise DeserializationError(
            "Response body deserialization failed",
            status_code=response.status_code,
            body=data,
            cause=exc,
        ) from exc


def _handle_status(config: RequestConfig, response: httpx.Response, result_type: Any) -> Any:
    handler = config.status_handlers.get(response.status_code)
    found = handler is not None
    if handler is None:
        handler = config.default_status_handler

    value = handler(response)
    if matches_type(value, result_type):
        return value
    raise HandlerTypeMismatchError(
        handler=status_text(response) if found else "default",
        expected=result_type,
        value=value,
        status_code=response.status_code,
    )


def fetch(result_type: type[T] | Any, *options: RequestOption) -> T:
    """Build a request from ``options``, send it and return a ``result_type``.

    200 and 201 responses are deserialized. Every other status goes to the
    handler registered for it, or to the default handler, and the handler's
    return value must already be a ``result_type``.
    """
    config = build_config(*options)
    if not config.url:
        raise MissingURLError()
    if not config.method:
        raise MissingMethodError()

    content = _serialize_body(config)
    request = _build_request(config, content)
    response = _send(config, request)
    try:
        if response.status_code in SUCCESS_STATUS_CODES:
            return _decode(config, response, result_type)
        return _handle_status(config, response, result_type)
    finally:
        response.close()


class Angler:
    """Reusable set of base options with an owned ``httpx.Client``.

    ``body=None`` on the shortcuts means "no body", as it does for
    ``with_body(None)``, so a JSON ``null`` body cannot be sent this way.
    """

    def __init__(self, *options: RequestOption, httpx_client: httpx.Client | None = None) -> None:
        self._owns_client = httpx_client is None
        self._httpx = httpx_client or httpx.Client()
        self._options: tuple[RequestOption, ...] = (with_client(self._httpx), *options)

    def __enter__(self) -> "Angler":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._httpx.close()

    def fetch(self, result_type: type[T] | Any, *options: RequestOption) -> T:
        return fetch(result_type, *self._options, *options)

    def _call(self, method: str, result_type: Any, url: str, body: Any, options: tuple[RequestOption, ...]) -> Any:
        extra: list[RequestOption] = [with_method(method), with_url(url)]
        if body is not None:
            extra.append(with_body(body))
        return self.fetch(result_type, *extra, *options)

    def get(self, result_type: type[T] | Any, url: str, *options: RequestOption) -> T:
        return self._call("GET", result_type, url, None, options)

    def post(self, result_type: type[T] | Any, url: str, *options: RequestOption, body: Any = None) -> T:
        return self._call("POST", result_type, url, body, options)

    def put(self, result_type: type[T] | Any, url: str, *options: RequestOption, body: Any = None) -> T:
        return self._call("PUT", result_type, url, body, options)

    def patch(self, result_type: type[T] | Any, url: str, *options: RequestOption, body: Any = None) -> T:
        return self._call("PATCH", result_type, url, body, options)

    def delete(self, result_type: type[T] | Any, url: str, *options: RequestOption) -> T:
        return self._call("DELETE", result_type, url, None, options)
