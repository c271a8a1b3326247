from enumkit import KitEnum, enums, make_kit_enum
from enumkit.conversion import NameTableConversion


class TestFlags(KitEnum, sentinel="TestFlagsN"):
    __test__ = False

    TestFlagsNil = 0
    TestFlag1 = 1
    TestFlag2 = 2
    TestFlagsN = 3


KiT_TestFlags = enums.register_alt_lower(TestFlags, False, None, "Test")


class Color(KitEnum, typename="kit.Colors", sentinel="ColorsN"):
    Red = 0
    Green = 1
    Blue = 3
    ColorsN = 4


# A stringer style name table, ordinal i is bit i when registered as bit flags
Bits = NameTableConversion("kit.Bits", ["Nil", "FlagA", "FlagB"])

KiT_Bits = enums.register(Bits, bit_flag=True)


Wide = make_kit_enum("Wide", {f"W{i}": i for i in range(64)}, module=__name__)
