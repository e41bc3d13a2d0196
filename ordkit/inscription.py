"""Inscriptions: content carried in an envelope inside a taproot script."""

from __future__ import annotations

import logging
import struct
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from ordkit.media import Media, content_type_for_path
from ordkit.sat_point import OutPoint

logger = logging.getLogger(__name__)

OP_FALSE = 0x00
OP_PUSHDATA1 = 0x4C
OP_PUSHDATA2 = 0x4D
OP_PUSHDATA4 = 0x4E
OP_IF = 0x63
OP_ENDIF = 0x68
OP_CHECKSIG = 0xAC

TAPROOT_ANNEX_PREFIX = 0x50
MAX_PUSH_CHUNK = 520

PROTOCOL_ID = b"ord"
BODY_TAG = b""
CONTENT_TYPE_TAG = b"\x01"
CURSED_TAG = b"\x42"
CURSED_ID = b"cursed"

ScriptInstruction = Union[bytes, int]


class Curse(Enum):
    NOT_IN_FIRST_INPUT = "not_in_first_input"
    NOT_AT_OFFSET_ZERO = "not_at_offset_zero"
    REINSCRIPTION = "reinscription"


class InscriptionError(ValueError):
    """Raised when a witness holds no valid inscriptions."""

    class Kind(Enum):
        EMPTY_WITNESS = "empty witness"
        INVALID_INSCRIPTION = "invalid inscription"
        KEY_PATH_SPEND = "key path spend"
        NO_INSCRIPTION = "no inscription"
        SCRIPT = "script error"
        UNRECOGNIZED_EVEN_FIELD = "unrecognized even field"

    def __init__(self, kind: InscriptionError.Kind, detail: Optional[str] = None) -> None:
        self.kind = kind
        self.detail = detail
        message = kind.value if detail is None else f"{kind.value}: {detail}"
        super().__init__(message)


def script_instructions(script: bytes) -> Iterator[ScriptInstruction]:
    """Yield each instruction of a script: bytes for pushes, ints for opcodes."""
    pos = 0
    end = len(script)
    while pos < end:
        opcode = script[pos]
        pos += 1
        if opcode < OP_PUSHDATA1:
            size = opcode
        elif opcode in (OP_PUSHDATA1, OP_PUSHDATA2, OP_PUSHDATA4):
            width = {OP_PUSHDATA1: 1, OP_PUSHDATA2: 2, OP_PUSHDATA4: 4}[opcode]
            if pos + width > end:
                raise InscriptionError(InscriptionError.Kind.SCRIPT, "early end of script")
            size = int.from_bytes(script[pos : pos + width], "little")
            pos += width
        else:
            yield opcode
            continue
        if pos + size > end:
            raise InscriptionError(InscriptionError.Kind.SCRIPT, "early end of script")
        yield bytes(script[pos : pos + size])
        pos += size


def _push(data: bytes) -> bytes:
    size = len(data)
    if size < OP_PUSHDATA1:
        prefix = bytes([size])
    elif size <= 0xFF:
        prefix = bytes([OP_PUSHDATA1, size])
    elif size <= 0xFFFF:
        prefix = bytes([OP_PUSHDATA2]) + struct.pack("<H", size)
    else:
        prefix = bytes([OP_PUSHDATA4]) + struct.pack("<I", size)
    return prefix + data


def _same(actual: ScriptInstruction, expected: ScriptInstruction) -> bool:
    return type(actual) is type(expected) and actual == expected


_UNREAD = object()


class _Parser:
    """Walks a script's instructions, pulling out inscription envelopes."""

    def __init__(self, script: bytes) -> None:
        self._instructions = script_instructions(script)
        self._peeked: object = _UNREAD

    def _peek(self) -> object:
        if self._peeked is _UNREAD:
            try:
                self._peeked = next(self._instructions)
            except StopIteration:
                self._peeked = None
            except InscriptionError as err:
                self._peeked = err
        return self._peeked

    def _advance(self) -> ScriptInstruction:
        item = self._peek()
        self._peeked = _UNREAD
        if item is None:
            raise InscriptionError(InscriptionError.Kind.NO_INSCRIPTION)
        if isinstance(item, InscriptionError):
            raise item
        return item

    def _accept(self, expected: ScriptInstruction) -> bool:
        item = self._peek()
        if isinstance(item, InscriptionError):
            raise item
        if item is None or not _same(item, expected):
            return False
        self._advance()
        return True

    def _expect_push(self) -> bytes:
        item = self._advance()
        if not isinstance(item, bytes):
            raise InscriptionError(InscriptionError.Kind.INVALID_INSCRIPTION)
        return item

    def _match(self, expected: Sequence[ScriptInstruction]) -> bool:
        return all(_same(self._advance(), instruction) for instruction in expected)

    def _enter_envelope(self) -> None:
        while not self._match((b"", OP_IF, PROTOCOL_ID)):
            pass

    def parse_one(self) -> Inscription:
        self._enter_envelope()
        fields: dict[bytes, bytes] = {}

        while True:
            item = self._advance()
            if isinstance(item, bytes) and item == BODY_TAG:
                body = bytearray()
                while not self._accept(OP_ENDIF):
                    body += self._expect_push()
                fields[BODY_TAG] = bytes(body)
                break
            if isinstance(item, bytes):
                if item in fields:
                    raise InscriptionError(InscriptionError.Kind.INVALID_INSCRIPTION)
                fields[item] = self._expect_push()
            elif item == OP_ENDIF:
                break
            else:
                raise InscriptionError(InscriptionError.Kind.INVALID_INSCRIPTION)

        body = fields.pop(BODY_TAG, None)
        content_type = fields.pop(CONTENT_TYPE_TAG, None)

        if any(tag and tag[0] % 2 == 0 for tag in fields):
            raise InscriptionError(InscriptionError.Kind.UNRECOGNIZED_EVEN_FIELD)

        return Inscription(content_type=content_type, body=body)

    def parse_all(self) -> list[Inscription]:
        inscriptions: list[Inscription] = []
        first_error: Optional[InscriptionError] = None
        while True:
            try:
                inscriptions.append(self.parse_one())
            except InscriptionError as err:
                if err.kind is InscriptionError.Kind.NO_INSCRIPTION:
                    break
                if first_error is None:
                    first_error = err
        if first_error is not None:
            raise first_error
        return inscriptions


def parse_witness(witness: Sequence[bytes]) -> list[Inscription]:
    """Every inscription in a witness's tapscript, or InscriptionError."""
    if not witness:
        raise InscriptionError(InscriptionError.Kind.EMPTY_WITNESS)
    if len(witness) == 1:
        raise InscriptionError(InscriptionError.Kind.KEY_PATH_SPEND)

    last = witness[-1]
    annex = bool(last) and last[0] == TAPROOT_ANNEX_PREFIX

    if len(witness) == 2 and annex:
        raise InscriptionError(InscriptionError.Kind.KEY_PATH_SPEND)

    script = witness[len(witness) - 1 if annex else len(witness) - 2]
    return _Parser(bytes(script)).parse_all()


@dataclass
class TxIn:
    witness: list[bytes] = field(default_factory=list)
    previous_output: OutPoint = field(default_factory=OutPoint.null)
    script_sig: bytes = b""
    sequence: int = 0


@dataclass
class Transaction:
    inputs: list[TxIn] = field(default_factory=list)
    version: int = 0
    lock_time: int = 0


@dataclass(frozen=True)
class TransactionInscription:
    inscription: Inscription
    tx_in_index: int
    tx_in_offset: int


@dataclass(frozen=True)
class Inscription:
    """Inscription content and its content type, either of which may be absent."""

    content_type: Optional[bytes] = None
    body: Optional[bytes] = None

    @classmethod
    def from_transaction(cls, tx: Transaction) -> list[TransactionInscription]:
        """Inscriptions of every input, skipping inputs that hold none."""
        result = []
        for index, tx_in in enumerate(tx.inputs):
            try:
                inscriptions = parse_witness(tx_in.witness)
            except InscriptionError:
                continue
            result.extend(
                TransactionInscription(inscription, index, offset)
                for offset, inscription in enumerate(inscriptions)
            )
        return result

    @classmethod
    def from_witness(cls, witness: Sequence[bytes]) -> list[Inscription]:
        return parse_witness(witness)

    @classmethod
    def from_file(cls, path: Union[str, Path], limit: Optional[int] = None) -> Inscription:
        """Inscription of a file's contents, typed by its extension."""
        path = Path(path)
        try:
            body = path.read_bytes()
        except OSError as err:
            raise OSError(f"io error reading {path}") from err

        if limit is not None and len(body) > limit:
            raise ValueError(f"content size of {len(body)} bytes exceeds {limit} byte limit")

        content_type = content_type_for_path(path)
        return cls(content_type=content_type.encode(), body=body)

    def append_reveal_script(self, script: bytes = b"", cursed: bool = False) -> bytes:
        """The given script followed by this inscription's envelope."""
        parts = [bytes(script), bytes([OP_FALSE, OP_IF]), _push(PROTOCOL_ID)]

        if self.content_type is not None:
            parts += [_push(CONTENT_TYPE_TAG), _push(self.content_type)]

        if cursed:
            logger.info("Appending cursed tag")
            parts += [_push(CURSED_TAG), _push(CURSED_ID)]

        if self.body is not None:
            parts.append(_push(BODY_TAG))
            parts.extend(
                _push(self.body[start : start + MAX_PUSH_CHUNK])
                for start in range(0, len(self.body), MAX_PUSH_CHUNK)
            )

        parts.append(bytes([OP_ENDIF]))
        return b"".join(parts)

    def media(self) -> Media:
        if self.body is None:
            return Media.UNKNOWN
        content_type = self.content_type_text()
        if content_type is None:
            return Media.UNKNOWN
        try:
            return Media.parse(content_type)
        except ValueError:
            return Media.UNKNOWN

    def content_length(self) -> Optional[int]:
        return None if self.body is None else len(self.body)

    def content_type_text(self) -> Optional[str]:
        """The content type as text, or None if absent or not UTF-8."""
        if self.content_type is None:
            return None
        try:
            return self.content_type.decode("utf-8")
        except UnicodeDecodeError:
            return None

    def to_witness(self) -> list[bytes]:
        return [self.append_reveal_script(b"", False), b""]