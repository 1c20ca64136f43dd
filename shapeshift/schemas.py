"""Marshmallow schemas describing the parameters of each API operation.

Attribute names are snake_case; ``data_key`` carries the name used on the
wire (path placeholder or JSON body key). Loading validates caller input and
fills optional defaults, dumping turns the result back into wire names.
"""

from __future__ import annotations

from marshmallow import Schema, fields
from marshmallow.validate import Range

from .validation import validate_currency_pair, validate_not_blank, validate_path_segment

RECENT_TX_MAX_LIMIT = 50
DEST_TAG_MAX = 2**32 - 1


def _required_string(**kwargs) -> fields.String:
    return fields.String(required=True, validate=validate_not_blank, **kwargs)


def _path_string(**kwargs) -> fields.String:
    return fields.String(
        required=True,
        validate=[validate_not_blank, validate_path_segment],
        **kwargs,
    )


def _currency_pair(**kwargs) -> fields.String:
    return fields.String(
        required=True,
        validate=[validate_not_blank, validate_currency_pair],
        **kwargs,
    )


class NoParamsSchema(Schema):
    """Operations that take no parameters."""


class CurrencyPairSchema(Schema):
    """Path parameters for ``/rate`` and ``/marketinfo``."""

    pair = _currency_pair()


class RecentTxSchema(Schema):
    # Server default applies when omitted.
    max = fields.Integer(load_default=None, validate=Range(min=1, max=RECENT_TX_MAX_LIMIT))


class AddressSchema(Schema):
    """Path parameters for ``/txStat`` and ``/timeremaining``."""

    address = _path_string()


class ValidateAddressSchema(Schema):
    address = _path_string()
    symbol = _path_string()


class ShiftSchema(Schema):
    """Body of ``POST /shift``."""

    withdraw_to = _required_string(data_key="withdrawTo")
    pair = _currency_pair()
    return_address = fields.String(load_default="", data_key="returnAddress")
    api_key = fields.String(load_default="", data_key="apiKey")


class RequestEmailSchema(Schema):
    """Body of ``POST /mail``.

    ``email`` must be a well-formed address, not merely non-empty.
    """

    email = fields.Email(required=True, validate=validate_not_blank)
    txid = _required_string()


class SendAmountSchema(Schema):
    """Body of ``POST /sendamount``.

    ``amount`` accepts strings, ints, floats or ``Decimal`` and is sent as a
    decimal string. ``destTag`` is an unsigned 32-bit integer, only meaningful
    for ledgers such as XRP; ``rsAddress`` is used for NXT.
    """

    amount = fields.Decimal(
        required=True, as_string=True, validate=Range(min=0, min_inclusive=False)
    )
    withdrawal = _required_string()
    pair = _currency_pair()
    return_address = fields.String(load_default="", data_key="returnAddress")
    dest_tag = fields.Integer(
        load_default=None, data_key="destTag", validate=Range(min=0, max=DEST_TAG_MAX)
    )
    rs_address = fields.String(load_default=None, data_key="rsAddress")
    api_key = fields.String(load_default="", data_key="apiKey")
