import pytest

from ordkit.inscription_id import InscriptionId
from ordkit.object import Address, Object, ObjectKind
from ordkit.sat import COIN_VALUE, Sat
from ordkit.sat_point import OutPoint, SatPoint

HEX = "0123456789abcdef" * 4


def _case(text, expected):
    actual = Object.parse(text)
    assert actual == expected
    assert Object.parse(str(actual)) == expected


def test_sats():
    assert Object.parse("nvtdijuwxlp") == Object(ObjectKind.SAT, Sat(0))
    assert Object.parse("a") == Object(ObjectKind.SAT, Sat.LAST)
    assert Object.parse("1.1") == Object(ObjectKind.SAT, Sat(50 * COIN_VALUE + 1))
    assert Object.parse("1°0′0″0‴") == Object(ObjectKind.SAT, Sat(2067187500000000))
    assert Object.parse("0%") == Object(ObjectKind.SAT, Sat(0))


def test_integer_and_ids():
    _case("0", Object(ObjectKind.INTEGER, 0))
    _case(HEX + "i1", Object(ObjectKind.INSCRIPTION_ID, InscriptionId.parse(HEX + "i1")))
    _case(HEX, Object(ObjectKind.HASH, bytes([0x01, 0x23, 0x45, 0x67, 0x89, 0xAB, 0xCD, 0xEF] * 4)))


@pytest.mark.parametrize(
    "text",
    [
        "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4",
        "BC1QW508D6QEJXTDG4Y5R3ZARVARY0C5XW7KV8F3T4",
        "tb1qqqqqp399et2xygdj5xreqhjjvcmzhxw4aywxecjdzew6hylgvsesrxh6hy",
        "TB1QQQQQP399ET2XYGDJ5XREQHJJVCMZHXW4AYWXECJDZEW6HYLGVSESRXH6HY",
        "bcrt1qs758ursh4q9z627kt3pp5yysm78ddny6txaqgw",
        "BCRT1QS758URSH4Q9Z627KT3PP5YYSM78DDNY6TXAQGW",
    ],
)
def test_addresses(text):
    _case(text, Object(ObjectKind.ADDRESS, Address.parse(text)))
    assert str(Object.parse(text)) == text.lower()


def test_outpoints_and_satpoints():
    for text in (HEX + ":123", HEX.upper() + ":123"):
        _case(text, Object(ObjectKind.OUTPOINT, OutPoint.parse(text)))
    for text in (HEX + ":123:456", HEX.upper() + ":123:456"):
        _case(text, Object(ObjectKind.SATPOINT, SatPoint.parse(text)))


def test_bad_address_checksum():
    with pytest.raises(ValueError):
        Object.parse("bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t5")


def test_unrecognized():
    with pytest.raises(ValueError):
        Object.parse("Hello!")