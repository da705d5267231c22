"""Configurable single-request HTTP helper."""

from .client import Angler, fetch
from .codecs import json_deserialize, json_serialize
from .exceptions import (
    AnglerError,
    AnglerValidationError,
    DeserializationError,
    HandlerTypeMismatchError,
    MissingMethodError,
    MissingURLError,
    SerializationError,
    TransportError,
)
from .handlers import log_unknown_status, matches_type, status_text
from .request_options import (
    HTTPClient,
    RequestConfig,
    RequestOption,
    StatusHandler,
    build_config,
    with_body,
    with_client,
    with_content_type,
    with_default_status_handler,
    with_deserialize,
    with_header,
    with_headers,
    with_method,
    with_serialize,
    with_status_handler,
    with_status_handlers,
    with_url,
)

__all__ = [
    "Angler",
    "fetch",
    "json_serialize",
    "json_deserialize",
    "AnglerError",
    "AnglerValidationError",
    "DeserializationError",
    "HandlerTypeMismatchError",
    "MissingMethodError",
    "MissingURLError",
    "SerializationError",
    "TransportError",
    "log_unknown_status",
    "matches_type",
    "status_text",
    "HTTPClient",
    "RequestConfig",
    "RequestOption",
    "StatusHandler",
    "build_config",
    "with_body",
    "with_client",
    "with_content_type",
    "with_default_status_handler",
    "with_deserialize",
    "with_header",
    "with_headers",
    "with_method",
    "with_serialize",
    "with_status_handler",
    "with_status_handlers",
    "with_url",
]
