# ordkit

Tools for working with ordinal theory: numbering individual satoshis, naming
them, judging their rarity, parsing the notations they are written in, and
reading or writing inscription envelopes in taproot witness scripts.

## Installation

```
pip install .
```

## Command line

`ordkit parse` parses an object written in ordinal notation and prints it as
JSON, in the form `{"object": "<text>"}`. The object can be a sat number, a
sat name, a decimal, degree or percentile form, an inscription id, an
outpoint, a satpoint, a 32-byte hex hash or a segwit address:

```
ordkit parse nvtdijuwxlp
ordkit parse "1°0′0″0‴"
ordkit parse 1.1
```

Text that cannot be parsed prints `error: <reason>` to standard error and
exits with status 1.

## Library

```python
from ordkit.sat import Sat

sat = Sat.parse("nvtdijuwxlp")
print(sat.name(), sat.degree(), sat.rarity())   # nvtdijuwxlp 0°0′0″0‴ mythic
print(Sat.parse("1.1").height())                # 1
```

Modules:

- `ordkit.sat`: `Sat` (an `int` subclass with `parse`, `name`, `degree`,
  `decimal`, `percentile`, `height`, `epoch`, `period`, `cycle`, `third`,
  `rarity`, `is_common`), `Degree`, `Rarity`, and the subsidy helpers
  `block_subsidy`, `block_starting_sat`, `epoch_subsidy`,
  `epoch_starting_sat`.
- `ordkit.inscription_id`: `InscriptionId`, in the form `<txid>i<index>`;
  invalid text raises `InscriptionIdError`, whose `kind` tells what was wrong.
- `ordkit.sat_point`: `OutPoint` and `SatPoint`, including the 44-byte
  `encode`/`decode` form of a satpoint.
- `ordkit.media`: `Media` kinds, `content_type_for_path` for choosing a
  content type from a file extension, and `check_mp4_codec`, which rejects
  MP4 files whose video tracks are not H.264.
- `ordkit.representation`: `Representation.detect`, which tells which
  notation a string is written in.
- `ordkit.object`: `Object.parse`, which parses any of those notations, and
  `Address` for bech32/bech32m segwit addresses on `bc`, `tb` and `bcrt`.
- `ordkit.outgoing`: `Outgoing` and `Amount`, for what a send targets: an
  amount such as `1.5 btc` or `100sat`, `all`, `max`, an inscription id or a
  satpoint.
- `ordkit.inscription`: `Inscription`, with `from_witness`,
  `from_transaction`, `from_file`, `append_reveal_script`, `to_witness`,
  `media`, `content_length` and `content_type_text`; the simple `Transaction`
  and `TxIn` records; and the lower-level `parse_witness` and
  `script_instructions`.
- `ordkit.cli`: `main`, `parse_output`, and `list_ranges`, which describes
  the sat ranges of an output as `ListOutput` records with offset, size,
  rarity and name.

### Reading inscriptions

```python
from ordkit.inscription import Inscription

inscription = Inscription(content_type=b"text/plain;charset=utf-8", body=b"hello")
witness = inscription.to_witness()
assert Inscription.from_witness(witness) == [inscription]
```

A witness that holds no script path spend, or whose script cannot be decoded
or holds an invalid envelope, raises `InscriptionError`.

## What this package does not do

ordkit works only on values you give it. It keeps no index of the chain,
does not talk to a Bitcoin node, holds no wallet, builds or sends no
transactions, and runs no explorer server. It cannot find where a sat is or
which sats an output holds; `list_ranges` only describes ranges you already
have.

## Tests

```
pip install .[test]
pytest
```