"""Status handlers and result type matching."""

from __future__ import annotations

import logging
import types
from typing import Annotated, Any, Literal, Union, get_args, get_origin

import httpx

LOGGER = logging.getLogger("angler")


def status_text(response: httpx.Response) -> str:
    reason = response.reason_phrase
    if reason:
        return f"{response.status_code} {reason}"
    return str(response.status_code)


def _read_request_body(response: httpx.Response) -> bytes:
    try:
        return response.request.content
    except Exception:
        return b""


def _read_response_body(response: httpx.Response) -> bytes:
    try:
        return response.read()
    except Exception:
        return b""


def _request_url(response: httpx.Response) -> str:
    try:
        return str(response.request.url)
    except RuntimeError:
        return ""


def log_unknown_status(response: httpx.Response) -> None:
    """Default handler for status codes nobody registered a handler for.

    Never raises. Both bodies are read best-effort and only feed the log line.
    """
    request_body = _read_request_body(response)
    response_body = _read_response_body(response)
    LOGGER.warning(
        "handling unknown status: %r, url: %r, request body: %r, response body: %r",
        status_text(response),
        _request_url(response),
        request_body.decode("utf-8", errors="replace"),
        response_body.decode("utf-8", errors="replace"),
    )
    return None


def matches_type(value: Any, result_type: Any) -> bool:
    """Return True when ``value`` can be handed back as ``result_type``."""
    if result_type is Any or result_type is object:
        return True
    if result_type is None or result_type is type(None):
        return value is None

    supertype = getattr(result_type, "__supertype__", None)
    if supertype is not None:
        return matches_type(value, supertype)

    origin = get_origin(result_type)
    if origin is Union or origin is types.UnionType:
        return any(matches_type(value, arg) for arg in get_args(result_type))
    if origin is Literal:
        return value in get_args(result_type)
    if origin is Annotated:
        return matches_type(value, get_args(result_type)[0])
    if origin is not None:
        return isinstance(value, origin)
    if isinstance(result_type, type):
        try:
            return isinstance(value, result_type)
        except TypeError:
            # protocols without @runtime_checkable
            return False
    return False
