"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://shapeshift.io"
DEFAULT_USER_AGENT = "shapeshift-client"


@dataclass(frozen=True)
class ShapeShiftClientConfig:
    """Configuration for :class:`~shapeshift.client.ShapeShiftClient`.

    Args:
        base_url: Host every operation path is resolved against.
        timeout: Seconds before the transport gives up on a request.
        user_agent: Value of the ``User-Agent`` header sent on every request.
        api_key: Optional public API key placed in POST bodies that accept
            one. Callers may still override it per call.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    api_key: str | None = field(default=None, repr=False)
