"""Inscription identifiers: a transaction id and an inscription index."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

TXID_LEN = 64
_HEX_RE = re.compile(r"[0-9A-Fa-f]*")
_U32_RE = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1


def parse_txid(text: str) -> str:
    """Validate a transaction id in hex and return it in lower case."""
    if len(text) != TXID_LEN:
        raise ValueError(f"invalid txid length: {len(text)}")
    if not _HEX_RE.fullmatch(text):
        raise ValueError(f"invalid hex character in txid: {text!r}")
    return text.lower()


def parse_u32(text: str) -> int:
    """Parse an unsigned 32-bit integer in decimal."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _U32_RE.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _U32_MAX:
        raise ValueError("number too large to fit in target type")
    return value


class InscriptionIdError(ValueError):
    """Raised when text is not a valid inscription id."""

    class Kind(Enum):
        CHARACTER = "character"
        LENGTH = "length"
        SEPARATOR = "separator"
        TXID = "txid"
        INDEX = "index"

    def __init__(self, kind: InscriptionIdError.Kind, detail: object) -> None:
        self.kind = kind
        self.detail = detail
        messages = {
            self.Kind.CHARACTER: f"invalid character: '{detail}'",
            self.Kind.LENGTH: f"invalid length: {detail}",
            self.Kind.SEPARATOR: f"invalid seprator: `{detail}`",
            self.Kind.TXID: f"invalid txid: {detail}",
            self.Kind.INDEX: f"invalid index: {detail}",
        }
        super().__init__(messages[kind])


@dataclass(frozen=True, order=True)
class InscriptionId:
    """An inscription, named by its reveal transaction and index within it."""

    txid: str
    index: int = 0

    @classmethod
    def parse(cls, text: str) -> InscriptionId:
        for char in text:
            if not char.isascii():
                raise InscriptionIdError(InscriptionIdError.Kind.CHARACTER, char)
        if len(text) < TXID_LEN + 2:
            raise InscriptionIdError(InscriptionIdError.Kind.LENGTH, len(text))
        separator = text[TXID_LEN]
        if separator != "i":
            raise InscriptionIdError(InscriptionIdError.Kind.SEPARATOR, separator)
        try:
            txid = parse_txid(text[:TXID_LEN])
        except ValueError as err:
            raise InscriptionIdError(InscriptionIdError.Kind.TXID, err) from err
        try:
            index = parse_u32(text[TXID_LEN + 1 :])
        except ValueError as err:
            raise InscriptionIdError(InscriptionIdError.Kind.INDEX, err) from err
        return cls(txid, index)

    @classmethod
    def from_txid(cls, txid: str) -> InscriptionId:
        return cls(parse_txid(txid), 0)

    def __str__(self) -> str:
        return f"{self.txid}i{self.index}"