"""What a send moves: an amount, all cardinals, an inscription or a sat."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional, Union

from ordkit.inscription_id import InscriptionId
from ordkit.sat_point import SatPoint

_U64_MAX = 2**64 - 1
_NUMBER_RE = re.compile(r"[0-9]+(\.[0-9]*)?|\.[0-9]+")

_DENOMINATIONS = {
    "btc": Decimal(10) ** 8,
    "cbtc": Decimal(10) ** 6,
    "mbtc": Decimal(10) ** 5,
    "ubtc": Decimal(100),
    "bit": Decimal(100),
    "bits": Decimal(100),
    "nbtc": Decimal("0.1"),
    "pbtc": Decimal("0.0001"),
    "sat": Decimal(1),
    "sats": Decimal(1),
    "satoshi": Decimal(1),
    "satoshis": Decimal(1),
    "msat": Decimal("0.001"),
    "msats": Decimal("0.001"),
}


@dataclass(frozen=True, order=True)
class Amount:
    """An amount of bitcoin, held in sats."""

    sats: int

    @classmethod
    def parse(cls, text: str) -> Amount:
        """Parse '<number> <denomination>', e.g. '1.5 btc' or '100 sat'."""
        number, sep, denomination = text.partition(" ")
        if not sep:
            raise ValueError(f"amount requires a denomination: {text!r}")
        factor = _DENOMINATIONS.get(denomination.lower())
        if factor is None:
            raise ValueError(f"unknown denomination: {denomination}")
        if not _NUMBER_RE.fullmatch(number):
            raise ValueError(f"invalid amount: {number!r}")
        try:
            value = Decimal(number) * factor
        except InvalidOperation as err:
            raise ValueError(f"invalid amount: {number!r}") from err
        if value != value.to_integral_value():
            raise ValueError("amount has too much precision")
        sats = int(value)
        if sats > _U64_MAX:
            raise ValueError("amount is too big")
        return cls(sats)

    def __str__(self) -> str:
        return f"{self.sats} sat"


class OutgoingKind(Enum):
    AMOUNT = "amount"
    ALL = "all"
    MAX = "max"
    INSCRIPTION_ID = "inscription_id"
    SATPOINT = "satpoint"


@dataclass(frozen=True)
class Outgoing:
    kind: OutgoingKind
    value: Optional[Union[Amount, InscriptionId, SatPoint]] = None

    @classmethod
    def parse(cls, text: str) -> Outgoing:
        if ":" in text:
            return cls(OutgoingKind.SATPOINT, SatPoint.parse(text))
        if len(text.encode()) >= 66:
            return cls(OutgoingKind.INSCRIPTION_ID, InscriptionId.parse(text))
        if text == "all":
            return cls(OutgoingKind.ALL)
        if text == "max":
            return cls(OutgoingKind.MAX)
        if " " not in text:
            index = next((i for i, c in enumerate(text) if c.isalpha()), None)
            if index is not None:
                text = f"{text[:index]} {text[index:]}"
        return cls(OutgoingKind.AMOUNT, Amount.parse(text))