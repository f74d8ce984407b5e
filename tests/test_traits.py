import pytest

from drillbook.lessons.traits import (
    OtherSoftware,
    OtherStruct,
    SomeSoftware,
    SomeStruct,
    Wrapper,
    append_bar,
    compare_license_types,
    some_func,
)


def test_is_foo_bar():
    assert append_bar("Foo") == "FooBar"


def test_is_bar_bar():
    assert append_bar(append_bar("")) == "BarBar"


def test_is_vec_pop_eq_bar():
    foo = append_bar(["Foo"])
    assert foo.pop() == "Bar"
    assert foo.pop() == "Foo"


def test_append_bar_leaves_original_list():
    original = ["Foo"]
    assert append_bar(original) == ["Foo", "Bar"]
    assert original == ["Foo"]


def test_append_bar_unsupported():
    with pytest.raises(TypeError):
        append_bar(3)


def test_is_licensing_info_the_same():
    licensing_info = "Some information"
    some_software = SomeSoftware(version_number=1)
    other_software = OtherSoftware(version_number="v2.0.0")
    assert some_software.licensing_info() == licensing_info
    assert other_software.licensing_info() == licensing_info


def test_compare_license_information():
    assert compare_license_types(SomeSoftware(), OtherSoftware()) is True


def test_compare_license_information_backwards():
    assert compare_license_types(OtherSoftware(), SomeSoftware()) is True


def test_some_func():
    assert some_func(SomeStruct()) is True
    assert some_func(OtherStruct()) is True


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"