import pytest
from itertools import combinations

from enumkit import bitflag
from enumkit.core import UnknownNameError, UnknownValueError, EnumKitException
from enumkit.conversion import NameTableConversion


names = NameTableConversion("kit.Bits", ["Nil", "FlagA", "FlagB"])


def test_bit_helpers():
    assert bitflag.mask() == 0
    assert bitflag.mask(0, 2) == 0b101

    bits = bitflag.set_flags(0, 1, 3)
    assert bits == 0b1010
    assert bitflag.has(bits, 1)
    assert not bitflag.has(bits, 0)
    assert bitflag.has_any(bits, 0, 3)
    assert not bitflag.has_any(bits, 0, 2)
    assert bitflag.has_all(bits, 1, 3)
    assert not bitflag.has_all(bits, 1, 2)

    assert bitflag.clear_flags(bits, 1) == 0b1000
    assert bitflag.toggle_flags(bits, 0, 1) == 0b1001
    assert bitflag.set_state(bits, True, 2) == 0b1110
    assert bitflag.set_state(bits, False, 3) == 0b0010
    assert list(bitflag.ordinals(bits, 4)) == [1, 3]
    assert list(bitflag.ordinals(bits, 2)) == [1]


def test_bit_63_is_usable():
    bits = bitflag.set_flags(0, 63)
    assert bitflag.has(bits, 63)
    assert list(bitflag.ordinals(bits, 64)) == [63]


def test_encode_names_in_ordinal_order():
    assert bitflag.encode(0b110, 3, names.stringify) == "FlagA|FlagB"
    assert bitflag.encode(bitflag.mask(2, 0), 3, names.stringify) == "Nil|FlagB"
    assert bitflag.encode(0, 3, names.stringify) == ""


def test_encode_ignores_bits_beyond_n():
    assert bitflag.encode(0b1010, 3, names.stringify) == "FlagA"


def test_decode():
    assert bitflag.decode("FlagA|FlagB", 3, names.parse) == 0b110
    assert bitflag.decode("FlagB|FlagA", 3, names.parse) == 0b110
    assert bitflag.decode("FlagA", 3, names.parse) == 0b010
    assert bitflag.decode("", 3, names.parse) == 0


def test_decode_is_all_or_nothing():
    with pytest.raises(UnknownNameError) as e:
        bitflag.decode("FlagA|Bogus", 3, names.parse)
    assert "Bogus" in str(e.value)
    assert e.value.code == EnumKitException.ENUMKIT_UNKNOWN_NAME

    # An empty segment is not a name
    with pytest.raises(UnknownNameError):
        bitflag.decode("FlagA|", 3, names.parse)


def test_decode_rejects_ordinal_out_of_range():
    with pytest.raises(UnknownNameError):
        bitflag.decode("FlagB", 2, names.parse)


def test_encode_decode_all_subsets():
    ordinals = range(names.count())
    for k in range(len(ordinals) + 1):
        for subset in combinations(ordinals, k):
            bits = bitflag.mask(*subset)
            text = bitflag.encode(bits, names.count(), names.stringify)
            assert bitflag.decode(text, names.count(), names.parse) == bits


def test_encode_rejects_set_bit_without_name():
    gappy = NameTableConversion("kit.Gappy", ["Zero", "", "Two"])
    assert bitflag.encode(0b101, 3, gappy.stringify, gappy.is_defined) == "Zero|Two"
    with pytest.raises(UnknownValueError):
        bitflag.encode(0b010, 3, gappy.stringify, gappy.is_defined)
