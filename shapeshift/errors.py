"""Error types raised by the ShapeShift client."""

from __future__ import annotations

from typing import Any


class ShapeShiftError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str, *, payload: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.payload = payload or {}


class ValidationError(ShapeShiftError):
    """Raised before any network activity when call parameters are invalid."""

    @property
    def field_errors(self) -> dict[str, list[str]]:
        return self.payload.get("field_errors", {})


class TransportError(ShapeShiftError):
    """Raised when the HTTP layer fails to produce a usable response."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        payload: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, payload=payload)
        self.status_code = status_code


def flatten_field_errors(errors: Any) -> dict[str, list[str]]:
    """Translate a nested marshmallow error tree into ``{field: [messages]}``."""

    collected: dict[str, list[str]] = {}

    def visit(node: Any, path: tuple[str, ...]) -> None:
        if isinstance(node, dict):
            for key, value in node.items():
                visit(value, path + (str(key),))
            return

        if isinstance(node, list):
            for item in node:
                visit(item, path)
            return

        if node is None:
            return

        key = ".".join(path) or "non_field_errors"
        collected.setdefault(key, []).append(node if isinstance(node, str) else str(node))

    visit(errors, tuple())
    return collected
