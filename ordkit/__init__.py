"""Ordinal theory toolkit: sats, rarity, notation parsing and inscription envelopes."""

__version__ = "0.1.0"