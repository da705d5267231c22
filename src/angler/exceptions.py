"""Exceptions raised by the request pipeline."""

from __future__ import annotations

from typing import Any


class AnglerError(Exception):
    """Base exception for all angler failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: object = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.cause = cause

    def __str__(self) -> str:  # pragma: no cover - simple formatting
        if self.status_code is None:
            return str(self.args[0])
        return f"{self.status_code}: {self.args[0]}"


class AnglerValidationError(AnglerError):
    """Raised when the request configuration is incomplete."""


class MissingURLError(AnglerValidationError):
    """Raised when no URL was specified."""

    def __init__(self) -> None:
        super().__init__("no URL specified")


class MissingMethodError(AnglerValidationError):
    """Raised when no HTTP verb/method was specified."""

    def __init__(self) -> None:
        super().__init__("no HTTP verb/method specified")


class SerializationError(AnglerError):
    """Raised when the request body cannot be serialized."""


class DeserializationError(AnglerError):
    """Raised when a successful response body cannot be decoded."""


class TransportError(AnglerError):
    """Raised for failures inside the transport (DNS, TCP, TLS and so on)."""


class HandlerTypeMismatchError(AnglerError):
    """Raised when a status handler returns a value of the wrong type."""

    def __init__(
        self,
        *,
        handler: str,
        expected: Any,
        value: object = None,
        status_code: int | None = None,
    ) -> None:
        name = getattr(expected, "__name__", None) or repr(expected)
        if handler == "default":
            message = f"default HTTP status handler does not return {name} type value"
        else:
            message = f"{handler} HTTP status handler does not return {name} type value"
        super().__init__(message, status_code=status_code)
        self.handler = handler
        self.expected = expected
        self.value = value

    @property
    def is_default(self) -> bool:
        return self.handler == "default"

    def __str__(self) -> str:  # pragma: no cover - simple formatting
        return str(self.args[0])
