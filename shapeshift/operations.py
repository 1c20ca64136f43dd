"""Static table of ShapeShift API operations and request construction."""

from __future__ import annotations

import string
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from marshmallow import Schema
from marshmallow import ValidationError as SchemaValidationError

from .errors import ValidationError, flatten_field_errors
from .schemas import (
    AddressSchema,
    CurrencyPairSchema,
    NoParamsSchema,
    RecentTxSchema,
    RequestEmailSchema,
    SendAmountSchema,
    ShiftSchema,
    ValidateAddressSchema,
)

GET = "GET"
POST = "POST"


@dataclass(frozen=True)
class PreparedRequest:
    """A validated request ready to be handed to the transport."""

    operation: str
    method: str
    path: str
    body: dict[str, Any] | None = None


@dataclass(frozen=True)
class Operation:
    """Describes one API endpoint.

    ``path`` is a template whose ``{placeholders}`` name wire parameters of
    ``schema``. For POST operations every parameter that is not a path
    placeholder goes into the JSON body.
    """

    name: str
    method: str
    path: str
    schema: type[Schema]

    @property
    def path_params(self) -> tuple[str, ...]:
        return tuple(
            field_name
            for _, field_name, _, _ in string.Formatter().parse(self.path)
            if field_name
        )

    @property
    def accepts_api_key(self) -> bool:
        return any(
            (field.data_key or name) == "apiKey" for name, field in self.schema().fields.items()
        )

    def prepare(self, params: Mapping[str, Any] | None = None) -> PreparedRequest:
        """Validate ``params`` (keyed by wire name) and build the request.

        Raises:
            ValidationError: If a required parameter is missing or blank, a
                value is malformed, or an unknown parameter is supplied.
        """

        schema = self.schema()
        try:
            loaded = schema.load(dict(params or {}))
        except SchemaValidationError as exc:
            field_errors = flatten_field_errors(exc.messages)
            raise ValidationError(
                f"Invalid parameters for {self.name}: {_summarize(field_errors)}",
                payload={"operation": self.name, "field_errors": field_errors},
            ) from exc

        wire = schema.dump(loaded)
        path_params = self.path_params
        path = self.path.format(**{name: _path_segment(wire.get(name)) for name in path_params})

        body = None
        if self.method == POST:
            body = {key: value for key, value in wire.items() if key not in path_params}

        return PreparedRequest(operation=self.name, method=self.method, path=path, body=body)


def _path_segment(value: Any) -> str:
    if value is None:
        return ""
    return quote(str(value), safe="")


def _summarize(field_errors: dict[str, list[str]]) -> str:
    return "; ".join(f"{field}: {' '.join(messages)}" for field, messages in field_errors.items())


OPERATIONS: dict[str, Operation] = {
    operation.name: operation
    for operation in (
        Operation("getRate", GET, "/rate/{pair}", CurrencyPairSchema),
        Operation("getMarketInfo", GET, "/marketinfo/{pair}", CurrencyPairSchema),
        Operation("recentTx", GET, "/recenttx/{max}", RecentTxSchema),
        Operation("getTxStatus", GET, "/txStat/{address}", AddressSchema),
        Operation("getTimeRemaining", GET, "/timeremaining/{address}", AddressSchema),
        Operation("getCoinInfo", GET, "/getcoins", NoParamsSchema),
        Operation(
            "validateAddress", GET, "/validateAddress/{address}/{symbol}", ValidateAddressSchema
        ),
        Operation("postShift", POST, "/shift", ShiftSchema),
        Operation("postRequestEmail", POST, "/mail", RequestEmailSchema),
        Operation("postSendAmount", POST, "/sendamount", SendAmountSchema),
    )
}


def get_operation(name: str) -> Operation:
    """Look up an operation by its wire name (e.g. ``"getRate"``)."""

    try:
        return OPERATIONS[name]
    except KeyError as exc:
        raise ValidationError(
            f"Unknown operation '{name}'. Allowed values: {sorted(OPERATIONS)}",
            payload={"operation": name},
        ) from exc
