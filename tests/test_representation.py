import pytest

from ordkit.representation import Representation


def test_all_patterns_are_anchored():
    assert all(r.pattern.startswith("^") and r.pattern.endswith("$") for r in Representation)
    assert Representation.detect("0") is Representation.INTEGER
    with pytest.raises(ValueError, match="unrecognized object"):
        Representation.detect("00X")
    with pytest.raises(ValueError, match="unrecognized object"):
        Representation.detect("X" + "ab" * 32)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4", Representation.ADDRESS),
        ("1.1", Representation.DECIMAL),
        ("1°0′0″0‴", Representation.DEGREE),
        ("ab" * 32, Representation.HASH),
        ("ab" * 32 + "i1", Representation.INSCRIPTION_ID),
        ("0", Representation.INTEGER),
        ("nvtdijuwxlp", Representation.NAME),
        ("ab" * 32 + ":1", Representation.OUTPOINT),
        ("0%", Representation.PERCENTILE),
        ("ab" * 32 + ":1:2", Representation.SATPOINT),
    ],
)
def test_detect(text, expected):
    assert Representation.detect(text) is expected


def test_unrecognized():
    with pytest.raises(ValueError, match="unrecognized object"):
        Representation.detect("Hello!")