import pytest
from enum import Enum, IntEnum

from enumkit.core import UnknownNameError, UnknownValueError
from enumkit.conversion import (SupportsConversion, EnumClassConversion, NameTableConversion,
                                conversion_for, is_defined, make_value)

from support_modules import ki, kit


class Plain(IntEnum):
    A = 0
    B = 1
    C = 4
    Alias = 1


class Textual(Enum):
    A = "a"


class Custom:
    typename = "custom.Odd"

    def stringify(self, ordinal):
        return {1: "One", 3: "Three"}.get(ordinal, f"Odd({ordinal})")

    def parse(self, name):
        if name == "One":
            return 1
        if name == "Three":
            return 3
        raise UnknownNameError(f"String: {name} is not a valid option for type: {self.typename}")

    def count(self):
        return 4


def test_flags_names():
    conv = conversion_for(ki.Flags)
    assert conv.typename == "ki.Flags"
    assert conv.count() == 16
    assert conv.stringify(0) == "IsField"
    assert conv.stringify(15) == "PropUpdated"
    assert conv.stringify(16) == "FlagsN"
    assert conv.stringify(17) == "Flags(17)"
    assert conv.parse("ChildAdded") == 10
    with pytest.raises(UnknownNameError):
        conv.parse("Flags(17)")


def test_parse_inverts_stringify():
    for datatype in (ki.Flags, kit.TestFlags, kit.Color, Plain):
        conv = conversion_for(datatype)
        for i in range(conv.count()):
            if is_defined(conv, i):
                assert conv.parse(conv.stringify(i)) == i


def test_parse_is_exact():
    conv = conversion_for(ki.Flags)
    with pytest.raises(UnknownNameError) as e:
        conv.parse("childadded")
    assert str(e.value).endswith("String: childadded is not a valid option for type: ki.Flags")

    # The error is also a ValueError
    with pytest.raises(ValueError):
        conv.parse("")


def test_enum_class_conversion_skips_aliases():
    conv = EnumClassConversion(Plain)
    assert conv.typename == "test_conversion.Plain"
    assert conv.count() == 5
    assert conv.stringify(1) == "B"
    assert conv.stringify(2) == "Plain(2)"
    with pytest.raises(UnknownNameError):
        conv.parse("Alias")
    assert [i for i in range(conv.count()) if conv.is_defined(i)] == [0, 1, 4]


def test_enum_class_conversion_make():
    conv = EnumClassConversion(Plain)
    assert conv.make(4) is Plain.C
    with pytest.raises(UnknownValueError):
        conv.make(3)


def test_enum_class_conversion_requires_int_values():
    with pytest.raises(TypeError):
        EnumClassConversion(Textual)


def test_name_table_conversion():
    conv = NameTableConversion("kit.Gappy", ["Zero", "", "Two"])
    assert conv.count() == 3
    assert conv.stringify(1) == "Gappy(1)"
    assert conv.stringify(-1) == "Gappy(-1)"
    assert conv.parse("Two") == 2
    assert not conv.is_defined(1)
    assert make_value(conv, 2) == 2
    with pytest.raises(UnknownNameError):
        conv.parse("")


def test_custom_conversion_is_a_capability():
    custom = Custom()
    assert isinstance(custom, SupportsConversion)
    assert conversion_for(custom) is custom
    assert is_defined(custom, 3)
    assert not is_defined(custom, 2)
    assert make_value(custom, 3) == 3


def test_conversion_for():
    assert conversion_for(kit.TestFlags) is kit.TestFlags.__kit_conversion__
    assert conversion_for(kit.TestFlags.TestFlag1) is kit.TestFlags.__kit_conversion__
    assert isinstance(conversion_for(Plain), EnumClassConversion)
    assert conversion_for(kit.Bits) is kit.Bits

    with pytest.raises(TypeError):
        conversion_for(3)
    with pytest.raises(TypeError):
        conversion_for(Custom)


class Loose:
    """A capability whose parse raises a plain ValueError."""
    typename = "loose.Letters"

    def stringify(self, ordinal):
        return {0: "A", 1: "B"}.get(ordinal, f"Letters({ordinal})")

    def parse(self, name):
        if name not in ("A", "B"):
            raise ValueError(f"{name} unrecognized")
        return "AB".index(name)

    def count(self):
        return 3


def test_is_defined_with_plain_value_errors(registry):
    loose = Loose()
    assert is_defined(loose, 1)
    assert not is_defined(loose, 2)

    registry.register_alt_lower(loose)
    assert dict(registry.alt_strings("loose.Letters")) == {0: "a", 1: "b"}
    assert [v.name for v in registry.values("loose.Letters")] == ["A", "B", "Letters(2)"]
