import pytest
from enum import auto

from enumkit import KitEnum, make_kit_enum
from enumkit.conversion import EnumClassConversion

from support_modules import kit


class Direction(KitEnum):
    North = auto()
    East = auto()
    South = auto()
    West = auto()


def test_kit_enum_typename():
    assert kit.TestFlags.__kit_typename__ == "kit.TestFlags"
    assert kit.Color.__kit_typename__ == "kit.Colors"
    assert Direction.__kit_typename__ == "test_kitenum.Direction"
    assert repr(kit.Color) == "Color(KitEnum, typename='kit.Colors')"


def test_kit_enum_count():
    assert kit.TestFlags.__kit_count__ == 3
    assert kit.Color.__kit_count__ == 4
    assert Direction.__kit_count__ == 4
    assert isinstance(kit.TestFlags.__kit_conversion__, EnumClassConversion)


def test_kit_enum_auto_starts_at_zero():
    assert [int(d) for d in Direction] == [0, 1, 2, 3]


def test_kit_enum_str_is_name():
    assert str(kit.TestFlags.TestFlag1) == "TestFlag1"
    assert f"{kit.Color.Blue}" == "Blue"
    assert f"{kit.Color.Blue:>6}" == "  Blue"
    assert kit.Color.Blue == 3


def test_kit_enum_gap_stringifies_as_placeholder():
    assert kit.Color.__kit_conversion__.stringify(2) == "Colors(2)"


def test_kit_enum_missing_sentinel():
    with pytest.raises(TypeError):
        class Broken(KitEnum, sentinel="BrokenN"):
            A = 0


def test_make_kit_enum():
    Dyn = make_kit_enum("Dyn", {"Off": 0, "On": 1, "DynN": 2}, typename="dyn.Switch", sentinel="DynN")
    assert Dyn.__kit_typename__ == "dyn.Switch"
    assert Dyn.__kit_count__ == 2
    assert Dyn.On == 1
    assert str(Dyn(0)) == "Off"

    Other = make_kit_enum("Other", {"A": 0}, module="some.pkg.mod")
    assert Other.__kit_typename__ == "mod.Other"
    assert Other.__kit_count__ == 1
