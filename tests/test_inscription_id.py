import pytest

from ordkit.inscription_id import InscriptionId, InscriptionIdError

ONES = "1" * 64


def test_display():
    assert str(InscriptionId(ONES, 1)) == ONES + "i1"
    assert str(InscriptionId(ONES, 0)) == ONES + "i0"
    assert str(InscriptionId(ONES, 0xFFFFFFFF)) == ONES + "i4294967295"


def test_from_str():
    assert InscriptionId.parse(ONES + "i1") == InscriptionId(ONES, 1)
    assert InscriptionId.parse(ONES + "i4294967295") == InscriptionId(ONES, 0xFFFFFFFF)


def test_from_txid():
    assert InscriptionId.from_txid(ONES) == InscriptionId(ONES, 0)


def test_bad_character():
    with pytest.raises(InscriptionIdError) as info:
        InscriptionId.parse("→")
    assert info.value.kind is InscriptionIdError.Kind.CHARACTER
    assert info.value.detail == "→"


def test_bad_length():
    with pytest.raises(InscriptionIdError) as info:
        InscriptionId.parse("foo")
    assert info.value.kind is InscriptionIdError.Kind.LENGTH
    assert info.value.detail == 3


def test_bad_separator():
    with pytest.raises(InscriptionIdError) as info:
        InscriptionId.parse("0" * 64 + "x0")
    assert info.value.kind is InscriptionIdError.Kind.SEPARATOR
    assert info.value.detail == "x"


def test_bad_index():
    with pytest.raises(InscriptionIdError) as info:
        InscriptionId.parse("0" * 64 + "ifoo")
    assert info.value.kind is InscriptionIdError.Kind.INDEX


def test_bad_txid():
    with pytest.raises(InscriptionIdError) as info:
        InscriptionId.parse("x" + "0" * 63 + "i0")
    assert info.value.kind is InscriptionIdError.Kind.TXID


def test_index_overflow():
    with pytest.raises(InscriptionIdError) as info:
        InscriptionId.parse(ONES + "i4294967296")
    assert info.value.kind is InscriptionIdError.Kind.INDEX