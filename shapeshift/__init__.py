"""Client for the ShapeShift cryptocurrency exchange HTTP API."""

from logging import NullHandler, getLogger

from .client import ShapeShiftClient
from .config import ShapeShiftClientConfig
from .errors import ShapeShiftError, TransportError, ValidationError
from .http_client import HTTPClient, HTTPClientConfig, HTTPClientError
from .logging import JSONLogFormatter, setup_logging
from .operations import OPERATIONS, Operation, PreparedRequest

getLogger(__name__).addHandler(NullHandler())

__all__ = [
    "ShapeShiftClient",
    "ShapeShiftClientConfig",
    "ShapeShiftError",
    "TransportError",
    "ValidationError",
    "HTTPClient",
    "HTTPClientConfig",
    "HTTPClientError",
    "JSONLogFormatter",
    "setup_logging",
    "OPERATIONS",
    "Operation",
    "PreparedRequest",
]
