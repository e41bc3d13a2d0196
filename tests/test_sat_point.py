import pytest

from ordkit.sat_point import OutPoint, SatPoint

ONES = "1" * 64


def test_from_str_ok():
    assert SatPoint.parse(ONES + ":1:1") == SatPoint(OutPoint.parse(ONES + ":1"), 1)


@pytest.mark.parametrize(
    "text", ["abc", "abc:xyz", ONES + ":1", ONES + ":1:foo"]
)
def test_from_str_err(text):
    with pytest.raises(ValueError):
        SatPoint.parse(text)


def test_display_round_trip():
    point = SatPoint.parse("0123456789abcdef" * 4 + ":123:456")
    assert str(point) == "0123456789abcdef" * 4 + ":123:456"
    assert SatPoint.parse(str(point)) == point


def test_encode_decode():
    point = SatPoint(OutPoint("ab" + "00" * 31, 2), 7)
    data = point.encode()
    assert len(data) == 44
    assert data[0] == 0x00 and data[31] == 0xAB
    assert data[32:36] == b"\x02\x00\x00\x00"
    assert SatPoint.decode(data) == point


def test_decode_wrong_length():
    with pytest.raises(ValueError):
        SatPoint.decode(b"\x00" * 10)


def test_outpoint_leading_zero_rejected():
    with pytest.raises(ValueError):
        OutPoint.parse(ONES + ":01")


def test_outpoint_uppercase_normalized():
    assert OutPoint.parse("AB" * 32 + ":0").txid == "ab" * 32


def test_null():
    assert str(OutPoint.null()) == "0" * 64 + ":4294967295"