"""Recognising which notation a piece of text is written in."""

from __future__ import annotations

import re
from enum import Enum


class Representation(Enum):
    ADDRESS = r"^(bc|BC|tb|TB|bcrt|BCRT)1.*$"
    DECIMAL = r"^.*\..*$"
    DEGREE = r"^.*°.*′.*″(.*‴)?$"
    HASH = r"^[0-9A-Fa-f]{64}$"
    INSCRIPTION_ID = r"^[0-9A-Fa-f]{64}i\d+$"
    INTEGER = r"^[0-9]*$"
    NAME = r"^[a-z]{1,11}$"
    OUTPOINT = r"^[0-9A-Fa-f]{64}:\d+$"
    PERCENTILE = r"^.*%$"
    SATPOINT = r"^[0-9A-Fa-f]{64}:\d+:\d+$"

    @property
    def pattern(self) -> str:
        return self.value

    @classmethod
    def detect(cls, text: str) -> Representation:
        """The first representation, in declaration order, that matches text."""
        for representation in cls:
            if _COMPILED[representation].fullmatch(text):
                return representation
        raise ValueError("unrecognized object")


_COMPILED = {r: re.compile(r.value) for r in Representation}