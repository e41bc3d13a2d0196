"""Satoshi ordinal numbering: sats, their notations, degrees and rarity."""

from __future__ import annotations

import math
import re
from bisect import bisect_right
from dataclasses import dataclass
from decimal import Decimal as _Decimal
from enum import Enum
from functools import total_ordering

COIN_VALUE = 100_000_000
DIFFCHANGE_INTERVAL = 2016
SUBSIDY_HALVING_INTERVAL = 210_000
CYCLE_EPOCHS = 6
FIRST_POST_SUBSIDY_EPOCH = 33

_U64_MAX = 2**64 - 1
_UINT_RE = re.compile(r"\+?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def _parse_u64(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UINT_RE.fullmatch(text):
        raise ValueError(f"invalid digit found in string: {text!r}")
    value = int(text)
    if value > _U64_MAX:
        raise ValueError(f"number too large to fit in target type: {text}")
    return value


def _parse_f64(text: str) -> float:
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(f"invalid float literal: {text!r}")
    return float(text)


def _format_f64(value: float) -> str:
    """Shortest round-tripping decimal form, never in exponent notation."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(_Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _split_once(text: str, separator: str, message: str) -> tuple[str, str]:
    head, found, tail = text.partition(separator)
    if not found:
        raise ValueError(message)
    return head, tail


def epoch_subsidy(epoch: int) -> int:
    """Block subsidy, in sats, paid during the given halving epoch."""
    if epoch < 0:
        raise ValueError(f"invalid epoch: {epoch}")
    if epoch < FIRST_POST_SUBSIDY_EPOCH:
        return (50 * COIN_VALUE) >> epoch
    return 0


def _compute_starting_sats() -> tuple[int, ...]:
    starting = [0]
    for epoch in range(FIRST_POST_SUBSIDY_EPOCH):
        starting.append(starting[-1] + epoch_subsidy(epoch) * SUBSIDY_HALVING_INTERVAL)
    return tuple(starting)


_STARTING_SATS = _compute_starting_sats()
_SUPPLY = _STARTING_SATS[-1]


def epoch_starting_sat(epoch: int) -> Sat:
    """First sat mined in the given epoch, or the supply for later epochs."""
    if epoch < 0:
        raise ValueError(f"invalid epoch: {epoch}")
    if epoch < len(_STARTING_SATS):
        return Sat(_STARTING_SATS[epoch])
    return Sat(_SUPPLY)


def _epoch_of_height(height: int) -> int:
    return height // SUBSIDY_HALVING_INTERVAL


def block_subsidy(height: int) -> int:
    """Block subsidy, in sats, of the block at the given height."""
    if height < 0:
        raise ValueError(f"invalid height: {height}")
    return epoch_subsidy(_epoch_of_height(height))


def block_starting_sat(height: int) -> Sat:
    """First sat mined in the block at the given height."""
    if height < 0:
        raise ValueError(f"invalid height: {height}")
    epoch = _epoch_of_height(height)
    start = epoch_starting_sat(epoch)
    return Sat(start + (height - epoch * SUBSIDY_HALVING_INTERVAL) * epoch_subsidy(epoch))


class Sat(int):
    """A satoshi, identified by its ordinal number."""

    SUPPLY = _SUPPLY
    LAST: Sat

    def __new__(cls, value: int = 0) -> Sat:
        value = int(value)
        if value < 0:
            raise ValueError(f"sat number cannot be negative: {value}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Sat({int(self)})"

    def __str__(self) -> str:
        return str(int(self))

    def __add__(self, other: int) -> Sat:
        if not isinstance(other, int):
            return NotImplemented
        return Sat(int(self) + int(other))

    def __hash__(self) -> int:
        return int.__hash__(self)

    @classmethod
    def parse(cls, text: str) -> Sat:
        """Parse a sat from integer, name, degree, percentile or decimal notation."""
        if any("a" <= c <= "z" for c in text):
            return cls._from_name(text)
        if "°" in text:
            return cls._from_degree(text)
        if "%" in text:
            return cls._from_percentile(text)
        if "." in text:
            return cls._from_decimal(text)
        sat = cls(_parse_u64(text))
        if sat > cls.LAST:
            raise ValueError("invalid sat")
        return sat

    @classmethod
    def _from_name(cls, text: str) -> Sat:
        x = 0
        for c in text:
            if not "a" <= c <= "z":
                raise ValueError(f"invalid character in sat name: {c}")
            x = x * 26 + ord(c) - ord("a") + 1
        if x > cls.SUPPLY:
            raise ValueError("sat name out of range")
        return cls(cls.SUPPLY - x)

    @classmethod
    def _from_degree(cls, text: str) -> Sat:
        cycle_text, rest = _split_once(text, "°", "missing degree symbol")
        cycle_number = _parse_u64(cycle_text)

        epoch_text, rest = _split_once(rest, "′", "missing minute symbol")
        epoch_offset = _parse_u64(epoch_text)
        if epoch_offset >= SUBSIDY_HALVING_INTERVAL:
            raise ValueError("invalid epoch offset")

        period_text, rest = _split_once(rest, "″", "missing second symbol")
        period_offset = _parse_u64(period_text)
        if period_offset >= DIFFCHANGE_INTERVAL:
            raise ValueError("invalid period offset")

        cycle_start_epoch = cycle_number * CYCLE_EPOCHS
        halving_increment = SUBSIDY_HALVING_INTERVAL % DIFFCHANGE_INTERVAL

        # For valid degrees the relationship between epoch offset and period
        # offset increments by 336 every halving.
        relationship = period_offset + SUBSIDY_HALVING_INTERVAL * CYCLE_EPOCHS - epoch_offset
        if relationship % halving_increment != 0:
            raise ValueError(
                "relationship between epoch offset and period offset must be multiple of 336"
            )

        epochs_since_cycle_start = relationship % DIFFCHANGE_INTERVAL // halving_increment
        epoch = cycle_start_epoch + epochs_since_cycle_start
        height = epoch * SUBSIDY_HALVING_INTERVAL + epoch_offset

        block_text, found, tail = rest.partition("‴")
        if found:
            block_offset, rest = _parse_u64(block_text), tail
        else:
            block_offset = 0

        if rest:
            raise ValueError("trailing characters")
        if block_offset >= block_subsidy(height):
            raise ValueError("invalid block offset")

        return block_starting_sat(height) + block_offset

    @classmethod
    def _from_decimal(cls, text: str) -> Sat:
        height_text, offset_text = _split_once(text, ".", "missing period")
        height = _parse_u64(height_text)
        offset = _parse_u64(offset_text)
        if offset >= block_subsidy(height):
            raise ValueError("invalid block offset")
        return block_starting_sat(height) + offset

    @classmethod
    def _from_percentile(cls, text: str) -> Sat:
        if not text.endswith("%"):
            raise ValueError(f"invalid percentile: {text}")
        percentile = _parse_f64(text[:-1])
        if percentile < 0.0:
            raise ValueError(f"invalid percentile: {_format_f64(percentile)}")

        last = float(int(cls.LAST))
        scaled = percentile / 100.0 * last
        if math.isnan(scaled):
            return cls(0)
        if scaled > last:
            raise ValueError(f"invalid percentile: {_format_f64(percentile)}")

        rounded = math.floor(scaled)
        if scaled - rounded >= 0.5:
            rounded += 1
        if rounded > last:
            raise ValueError(f"invalid percentile: {_format_f64(percentile)}")
        return cls(rounded)

    def epoch(self) -> int:
        """Halving epoch in which this sat was mined."""
        return min(bisect_right(_STARTING_SATS, int(self)) - 1, FIRST_POST_SUBSIDY_EPOCH)

    def epoch_position(self) -> int:
        return int(self) - epoch_starting_sat(self.epoch())

    def height(self) -> int:
        epoch = self.epoch()
        return epoch * SUBSIDY_HALVING_INTERVAL + self.epoch_position() // epoch_subsidy(epoch)

    def cycle(self) -> int:
        return self.epoch() // CYCLE_EPOCHS

    def period(self) -> int:
        return self.height() // DIFFCHANGE_INTERVAL

    def third(self) -> int:
        return self.epoch_position() % epoch_subsidy(self.epoch())

    def percentile(self) -> str:
        return f"{_format_f64(float(int(self)) / float(int(Sat.LAST)) * 100.0)}%"

    def degree(self) -> Degree:
        return Degree.from_sat(self)

    def decimal(self) -> str:
        """Decimal notation: block height and offset within the block."""
        return f"{self.height()}.{self.third()}"

    def rarity(self) -> Rarity:
        return Rarity.from_sat(self)

    def is_common(self) -> bool:
        """Fast check for whether this sat's rarity is common."""
        epoch = self.epoch()
        return (int(self) - epoch_starting_sat(epoch)) % epoch_subsidy(epoch) != 0

    def name(self) -> str:
        x = self.SUPPLY - int(self)
        letters = []
        while x > 0:
            letters.append(chr(ord("a") + (x - 1) % 26))
            x = (x - 1) // 26
        return "".join(reversed(letters))


Sat.LAST = Sat(Sat.SUPPLY - 1)


@dataclass(frozen=True)
class Degree:
    """Degree notation of a sat: cycle, block in epoch, block in period, offset."""

    hour: int
    minute: int
    second: int
    third: int

    @classmethod
    def from_sat(cls, sat: Sat) -> Degree:
        height = sat.height()
        return cls(
            hour=height // (CYCLE_EPOCHS * SUBSIDY_HALVING_INTERVAL),
            minute=height % SUBSIDY_HALVING_INTERVAL,
            second=height % DIFFCHANGE_INTERVAL,
            third=sat.third(),
        )

    def __str__(self) -> str:
        return f"{self.hour}°{self.minute}′{self.second}″{self.third}‴"


@total_ordering
class Rarity(Enum):
    """How rare a sat is, from common to mythic."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"
    MYTHIC = "mythic"

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rarity):
            return NotImplemented
        members = list(Rarity)
        return members.index(self) < members.index(other)

    @classmethod
    def parse(cls, text: str) -> Rarity:
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"invalid rarity: {text}") from None

    @classmethod
    def from_sat(cls, sat: Sat) -> Rarity:
        degree = Degree.from_sat(sat)
        hour, minute, second, third = degree.hour, degree.minute, degree.second, degree.third
        if hour == 0 and minute == 0 and second == 0 and third == 0:
            return cls.MYTHIC
        if minute == 0 and second == 0 and third == 0:
            return cls.LEGENDARY
        if minute == 0 and third == 0:
            return cls.EPIC
        if second == 0 and third == 0:
            return cls.RARE
        if third == 0:
            return cls.UNCOMMON
        return cls.COMMON