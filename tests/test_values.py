import pytest
import threading

from enumkit import EnumRegistry, EnumValue
from enumkit.core import UnknownTypeError

from support_modules import ki, kit


def test_values_in_ordinal_order(registry):
    registry.register(ki.Flags, bit_flag=True)
    vals = registry.values(ki.Flags)
    assert len(vals) == 16
    assert [v.value for v in vals] == list(range(16))
    assert vals[0].name == "IsField"
    assert vals[15].name == "PropUpdated"
    assert all(v.type is registry.lookup("ki.Flags") for v in vals)
    assert str(vals[10]) == "ChildAdded"


def test_values_alt_names(registry):
    registry.register_alt_lower(kit.TestFlags, False, None, "Test")
    assert [v.name for v in registry.values(kit.TestFlags)] == ["TestFlagsNil", "TestFlag1", "TestFlag2"]
    assert [v.name for v in registry.values(kit.TestFlags, alt=True)] == ["flagsnil", "flag1", "flag2"]
    assert [v.name for v in registry.type_values("kit.TestFlags", True)] == ["flagsnil", "flag1", "flag2"]


def test_values_alt_falls_back_to_canonical(registry):
    registry.register(kit.Color, props={"AltStrings": {0: "rouge"}})
    assert [v.name for v in registry.values(kit.Color, alt=True)] == ["rouge", "Green", "Colors(2)", "Blue"]


def test_values_gap_placeholder(registry):
    registry.register(kit.Color)
    assert registry.values(kit.Color)[2] == EnumValue("Colors(2)", 2, registry.lookup("kit.Colors"))


def test_values_are_cached(registry):
    registry.register(kit.Color)
    assert registry.values(kit.Color) is registry.values("kit.Colors")
    assert registry.values(kit.Color) is not registry.values(kit.Color, alt=True)


def test_values_rebuilt_after_reregistration(registry):
    registry.register(kit.Color)
    first = registry.values(kit.Color, alt=True)
    assert first[0].name == "Red"

    registry.register_alt_lower(kit.Color)
    second = registry.values(kit.Color, alt=True)
    assert second is not first
    assert second[0].name == "red"
    assert second[0].type is registry.lookup("kit.Colors")


def test_values_rebuilt_after_alt_strings_change(registry):
    registry.register(kit.Color)
    registry.values(kit.Color, alt=True)
    registry.set_prop(kit.Color, "AltStrings", {1: "vert"})
    assert registry.values(kit.Color, alt=True)[1].name == "vert"


def test_values_unknown_type(registry):
    with pytest.raises(UnknownTypeError):
        registry.values("kit.Unknown")
    with pytest.raises(KeyError):
        registry.values(kit.Color)


def test_values_built_once_under_contention(registry, mocker):
    registry.register(ki.Flags, bit_flag=True)
    spy = mocker.spy(EnumRegistry, "_build_values")

    barrier = threading.Barrier(8)
    results = []

    def worker():
        barrier.wait()
        results.append(registry.values(ki.Flags))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert spy.call_count == 1
    assert len(results) == 8
    assert all(r is results[0] for r in results)
