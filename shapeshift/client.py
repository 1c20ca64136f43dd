"""ShapeShift API client."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

from .config import ShapeShiftClientConfig
from .errors import TransportError
from .http_client import HTTPClient, HTTPClientConfig, HTTPClientError
from .logging import request_log_extra
from .operations import PreparedRequest, get_operation

logger = logging.getLogger(__name__)


class ShapeShiftClient:
    """Client for the ShapeShift exchange API.

    Every operation validates its parameters locally, issues exactly one HTTP
    request and returns the decoded JSON body untouched. Invalid parameters
    raise :class:`~shapeshift.errors.ValidationError` before anything is sent;
    transport failures raise :class:`~shapeshift.errors.TransportError`.
    """

    def __init__(
        self,
        config: ShapeShiftClientConfig | None = None,
        client: HTTPClient | None = None,
    ) -> None:
        self._config = config or ShapeShiftClientConfig()
        self._client = client or HTTPClient(
            HTTPClientConfig(
                base_url=self._config.base_url,
                timeout=self._config.timeout,
                headers={"User-Agent": self._config.user_agent},
            )
        )

    def prepare(self, operation: str, params: Mapping[str, Any] | None = None) -> PreparedRequest:
        """Validate ``params`` for ``operation`` and return the request that would be sent.

        ``params`` is keyed by wire names (``withdrawTo``, ``returnAddress``...).
        ``None`` values count as absent. A configured API key fills ``apiKey``
        when the caller does not supply one.
        """

        op = get_operation(operation)
        values = {key: value for key, value in (params or {}).items() if value is not None}
        if self._config.api_key and op.accepts_api_key:
            values.setdefault("apiKey", self._config.api_key)
        return op.prepare(values)

    def call(self, operation: str, params: Mapping[str, Any] | None = None) -> Any:
        """Run ``operation`` and return the decoded response payload."""

        request = self.prepare(operation, params)
        logger.debug(
            "Dispatching %s %s",
            request.method,
            request.path,
            extra=request_log_extra(
                event="request.started",
                operation=request.operation,
                method=request.method,
                path=request.path,
                status="pending",
            ),
        )

        started = time.perf_counter()
        try:
            payload = self._client.request(request.method, request.path, json=request.body)
        except HTTPClientError as exc:
            duration_ms = (time.perf_counter() - started) * 1000
            logger.warning(
                "ShapeShift %s failed: %s",
                request.operation,
                exc,
                extra=request_log_extra(
                    event="request.failed",
                    operation=request.operation,
                    method=request.method,
                    path=request.path,
                    status="error",
                    status_code=exc.status_code,
                    duration_ms=duration_ms,
                    error=str(exc),
                ),
            )
            raise TransportError(
                str(exc),
                status_code=exc.status_code,
                payload={"operation": request.operation},
            ) from exc

        duration_ms = (time.perf_counter() - started) * 1000
        logger.debug(
            "ShapeShift %s completed",
            request.operation,
            extra=request_log_extra(
                event="request.completed",
                operation=request.operation,
                method=request.method,
                path=request.path,
                status="ok",
                duration_ms=duration_ms,
            ),
        )
        return payload

    def get_rate(self, pair: str) -> Any:
        """Current rate for a currency pair, e.g. ``{"pair": "btc_ltc", "rate": "70.1234"}``."""

        return self.call("getRate", {"pair": pair})

    def get_market_info(self, pair: str) -> Any:
        """Rate, limit, minimum and miner fee for a currency pair."""

        return self.call("getMarketInfo", {"pair": pair})

    def recent_tx(self, max: int | None = None) -> Any:
        """Most recent transactions; ``max`` ranges 1-50, server default when omitted."""

        return self.call("recentTx", {"max": max})

    def get_tx_status(self, address: str) -> Any:
        """Status of the most recent deposit to ``address``."""

        return self.call("getTxStatus", {"address": address})

    def get_time_remaining(self, address: str) -> Any:
        """Seconds left on a fixed-amount transaction."""

        return self.call("getTimeRemaining", {"address": address})

    def get_coin_info(self) -> Any:
        return self.call("getCoinInfo")

    def validate_address(self, address: str, symbol: str) -> Any:
        """Ask the server whether ``address`` is valid for coin ``symbol``."""

        return self.call("validateAddress", {"address": address, "symbol": symbol})

    def post_shift(
        self,
        withdraw_to: str,
        pair: str,
        return_address: str | None = None,
        api_key: str | None = None,
    ) -> Any:
        """Start a shift; the response carries the deposit address."""

        return self.call(
            "postShift",
            {
                "withdrawTo": withdraw_to,
                "pair": pair,
                "returnAddress": return_address,
                "apiKey": api_key,
            },
        )

    def post_request_email(self, email: str, txid: str) -> Any:
        """Request an emailed receipt for a transaction."""

        return self.call("postRequestEmail", {"email": email, "txid": txid})

    def post_send_amount(
        self,
        amount: Any,
        withdrawal: str,
        pair: str,
        return_address: str | None = None,
        dest_tag: int | None = None,
        rs_address: str | None = None,
        api_key: str | None = None,
    ) -> Any:
        """Request a fixed-amount shift that delivers ``amount`` to ``withdrawal``."""

        return self.call(
            "postSendAmount",
            {
                "amount": amount,
                "withdrawal": withdrawal,
                "pair": pair,
                "returnAddress": return_address,
                "destTag": dest_tag,
                "rsAddress": rs_address,
                "apiKey": api_key,
            },
        )
