"""Transaction outputs and positions of sats within them."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from ordkit.inscription_id import parse_txid, parse_u32
from ordkit.sat import _parse_u64

_MAX_OUTPOINT_LEN = 75
_ENCODED_LEN = 44


@dataclass(frozen=True, order=True)
class OutPoint:
    """A transaction output: txid and output index."""

    txid: str
    vout: int

    @classmethod
    def parse(cls, text: str) -> OutPoint:
        if len(text) > _MAX_OUTPOINT_LEN:
            raise ValueError("outpoint string too long")
        colon = text.find(":")
        if colon < 0 or colon != text.rfind(":"):
            raise ValueError(f"invalid outpoint: {text}")
        vout_text = text[colon + 1 :]
        if len(vout_text) > 1 and vout_text.startswith("0"):
            raise ValueError("vout should not have leading zeroes")
        return cls(parse_txid(text[:colon]), parse_u32(vout_text))

    @classmethod
    def null(cls) -> OutPoint:
        return cls("0" * 64, 0xFFFFFFFF)

    def __str__(self) -> str:
        return f"{self.txid}:{self.vout}"


@dataclass(frozen=True, order=True)
class SatPoint:
    """A sat's location: an output and an offset into it."""

    outpoint: OutPoint
    offset: int

    @classmethod
    def parse(cls, text: str) -> SatPoint:
        outpoint, found, offset = text.rpartition(":")
        if not found:
            raise ValueError(f"invalid satpoint: {text}")
        return cls(OutPoint.parse(outpoint), _parse_u64(offset))

    def encode(self) -> bytes:
        """Consensus encoding: txid in internal byte order, vout, offset."""
        txid = bytes.fromhex(self.outpoint.txid)[::-1]
        return txid + struct.pack("<IQ", self.outpoint.vout, self.offset)

    @classmethod
    def decode(cls, data: bytes) -> SatPoint:
        if len(data) != _ENCODED_LEN:
            raise ValueError(f"satpoint encoding must be {_ENCODED_LEN} bytes, got {len(data)}")
        vout, offset = struct.unpack("<IQ", data[32:])
        return cls(OutPoint(data[:32][::-1].hex(), vout), offset)

    def __str__(self) -> str:
        return f"{self.outpoint}:{self.offset}"