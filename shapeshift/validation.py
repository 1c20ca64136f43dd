"""Field validators shared by the operation parameter schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import ValidationError

PAIR_SEPARATOR = "_"


def validate_not_blank(value: Any) -> None:
    """Reject ``None`` and values that are empty once stripped."""

    if value is None or not str(value).strip():
        raise ValidationError("Field may not be blank.")


def validate_currency_pair(value: str) -> None:
    """Ensure a currency pair looks like ``<from>_<to>`` (e.g. ``btc_ltc``)."""

    if PAIR_SEPARATOR not in value:
        raise ValidationError(
            f"Invalid currency pair string '{value}'. Expected '<from>{PAIR_SEPARATOR}<to>'."
        )


def validate_path_segment(value: str) -> None:
    """Reject values that URL normalization would treat as ``.``/``..`` segments."""

    if value in {".", ".."}:
        raise ValidationError(f"'{value}' is not allowed as a path parameter.")
