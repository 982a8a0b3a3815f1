import types
from types import MappingProxyType

from conftest import Base, Box, Derived, Point, Slotted

from protokit import Descriptor, descriptors_of, keys_of, own_descriptors


def test_inherited_methods_are_merged():
    descriptors = descriptors_of(Derived("ada"))

    assert descriptors["name"].value == "ada"
    assert descriptors["greet"].value is Base.__dict__["greet"]
    assert descriptors["describe"].value is Derived.__dict__["describe"]


def test_constructor_keys_are_removed_for_inherited_chains():
    descriptors = descriptors_of(Derived("ada"))

    for key in ["__init__", "__module__", "__dict__", "__weakref__", "__doc__"]:
        assert key not in descriptors


def test_single_layer_keeps_constructor_keys():
    descriptors = descriptors_of({"__init__": 1, "a": 2})
    assert list(descriptors) == ["__init__", "a"]


def test_most_derived_layer_wins():
    obj = Derived("ada")
    assert descriptors_of(obj)["kind"].value == "derived"

    obj.kind = "own"
    assert descriptors_of(obj)["kind"].value == "own"


def test_keys_keep_base_most_position():
    keys = list(descriptors_of(Derived("ada")))
    assert keys.index("kind") < keys.index("describe")
    assert keys.index("greet") < keys.index("name")


def test_properties_are_accessors():
    descriptor = descriptors_of(Box(3))["area"]

    assert descriptor.is_accessor
    assert descriptor.value is None
    assert descriptor.getter(Box(4)) == 16
    assert not descriptor.writable


def test_data_descriptors_are_not_accessors():
    descriptor = descriptors_of(Box(3))["width"]

    assert not descriptor.is_accessor
    assert descriptor.value == 3
    assert descriptor.writable
    assert descriptor.enumerable


def test_class_layer_is_not_enumerable():
    assert not descriptors_of(Derived("ada"))["greet"].enumerable


def test_slots():
    descriptors = descriptors_of(Slotted(1))

    assert descriptors["x"].value == 1
    assert descriptors["_Slotted__hidden"].value == "secret"

    # unset slots only have the class level accessor
    assert descriptors["y"].is_accessor


def test_frozen_dataclass_is_not_writable():
    descriptors = descriptors_of(Point(1, 2))

    assert descriptors["x"] == Descriptor(value=1, writable=False)
    assert descriptors["y"].value == 2


def test_own_descriptors_of_layers():
    assert list(own_descriptors([4, 5])) == [0, 1]
    assert own_descriptors(types.SimpleNamespace(a=1))["a"].value == 1
    assert "greet" in own_descriptors(Base)
    assert "name" not in own_descriptors(Base)


def test_read_only_mapping():
    descriptor = own_descriptors(MappingProxyType({"a": 1}))["a"]

    assert descriptor.value == 1
    assert not descriptor.writable
    assert not descriptor.configurable


def test_keys_most_derived_first():
    assert keys_of(Derived("ada")) == ["name", "kind", "describe", "greet"]


def test_keys_of_plain_objects():
    assert keys_of({"b": 1, "a": 2}) == ["b", "a"]
    assert keys_of(["x", "y"]) == [0, 1]
