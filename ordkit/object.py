"""Parsing any of the objects the explorer understands from text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from ordkit.inscription_id import InscriptionId
from ordkit.representation import Representation
from ordkit.sat import Sat
from ordkit.sat_point import OutPoint, SatPoint

_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_BECH32_CONST = 1
_BECH32M_CONST = 0x2BC830A3
_HRPS = ("bc", "tb", "bcrt")
_U128_MAX = 2**128 - 1


def _polymod(values) -> int:
    generators = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
    chk = 1
    for value in values:
        top = chk >> 25
        chk = (chk & 0x1FFFFFF) << 5 ^ value
        for bit, gen in enumerate(generators):
            if (top >> bit) & 1:
                chk ^= gen
    return chk


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _convert_bits(data, from_bits: int, to_bits: int, pad: bool) -> list[int]:
    acc = bits = 0
    out = []
    maxv = (1 << to_bits) - 1
    for value in data:
        acc = (acc << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            out.append((acc >> bits) & maxv)
    if pad:
        if bits:
            out.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits or (acc << (to_bits - bits)) & maxv:
        raise ValueError("invalid padding in address")
    return out


@dataclass(frozen=True)
class Address:
    """A segwit address on mainnet, testnet or regtest."""

    hrp: str
    version: int
    program: bytes

    @classmethod
    def parse(cls, text: str) -> Address:
        if text.lower() != text and text.upper() != text:
            raise ValueError("address has mixed case")
        text = text.lower()
        if len(text) > 90:
            raise ValueError("address too long")
        hrp, sep, rest = text.rpartition("1")
        if not sep or hrp not in _HRPS:
            raise ValueError(f"unknown address prefix: {hrp}")
        if len(rest) < 7 or any(c not in _CHARSET for c in rest):
            raise ValueError("invalid address data")
        data = [_CHARSET.index(c) for c in rest]
        const = _polymod(_hrp_expand(hrp) + data)
        if const not in (_BECH32_CONST, _BECH32M_CONST):
            raise ValueError("invalid address checksum")
        version = data[0]
        if version > 16:
            raise ValueError("invalid witness version")
        if (version == 0) != (const == _BECH32_CONST):
            raise ValueError("wrong checksum variant for witness version")
        program = bytes(_convert_bits(data[1:-6], 5, 8, False))
        if not 2 <= len(program) <= 40:
            raise ValueError("invalid witness program length")
        if version == 0 and len(program) not in (20, 32):
            raise ValueError("invalid segwit v0 program length")
        return cls(hrp, version, program)

    def __str__(self) -> str:
        data = [self.version] + _convert_bits(self.program, 8, 5, True)
        const = _BECH32_CONST if self.version == 0 else _BECH32M_CONST
        mod = _polymod(_hrp_expand(self.hrp) + data + [0] * 6) ^ const
        checksum = [(mod >> 5 * (5 - i)) & 31 for i in range(6)]
        return self.hrp + "1" + "".join(_CHARSET[d] for d in data + checksum)


class ObjectKind(Enum):
    ADDRESS = "address"
    HASH = "hash"
    INSCRIPTION_ID = "inscription_id"
    INTEGER = "integer"
    OUTPOINT = "outpoint"
    SAT = "sat"
    SATPOINT = "satpoint"


ObjectValue = Union[Address, bytes, InscriptionId, int, OutPoint, Sat, SatPoint]


@dataclass(frozen=True)
class Object:
    """A parsed object together with its kind."""

    kind: ObjectKind
    value: ObjectValue

    @classmethod
    def parse(cls, text: str) -> Object:
        rep = Representation.detect(text)
        if rep is Representation.ADDRESS:
            return cls(ObjectKind.ADDRESS, Address.parse(text))
        if rep in (
            Representation.DECIMAL,
            Representation.DEGREE,
            Representation.PERCENTILE,
            Representation.NAME,
        ):
            return cls(ObjectKind.SAT, Sat.parse(text))
        if rep is Representation.HASH:
            return cls(ObjectKind.HASH, bytes.fromhex(text))
        if rep is Representation.INSCRIPTION_ID:
            return cls(ObjectKind.INSCRIPTION_ID, InscriptionId.parse(text))
        if rep is Representation.INTEGER:
            if not re.fullmatch(r"[0-9]+", text) or int(text) > _U128_MAX:
                raise ValueError(f"invalid integer: {text!r}")
            return cls(ObjectKind.INTEGER, int(text))
        if rep is Representation.OUTPOINT:
            return cls(ObjectKind.OUTPOINT, OutPoint.parse(text))
        return cls(ObjectKind.SATPOINT, SatPoint.parse(text))

    def __str__(self) -> str:
        if self.kind is ObjectKind.HASH:
            return self.value.hex()
        return str(self.value)