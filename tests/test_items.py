"""
Tests for item tree models.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import dataclasses

import pytest

from item_select import (
    Attribute,
    Const,
    Function,
    Impl,
    ItemKind,
    Macro,
    Module,
    Statement,
    Struct,
    Trait,
)


def test_kinds_are_tagged_per_class() -> None:
    assert Module(name="m").kind == ItemKind.MOD
    assert Trait(name="T").kind == ItemKind.TRAIT
    assert Impl(name="S").kind == ItemKind.IMPL
    assert Function(name="f").kind == ItemKind.FN
    assert Struct(name="S").kind == ItemKind.STRUCT
    assert Statement().kind == ItemKind.STMT


def test_kind_is_not_a_field() -> None:
    names = [f.name for f in dataclasses.fields(Struct)]
    assert names == ["name", "attrs", "tokens"]


def test_children_of_containers() -> None:
    s = Struct(name="S")
    assert Module(name="m", items=(s,)).children == (s,)
    assert Module(name="m").children == ()
    assert Function(name="f", body=(s,)).children == (s,)
    assert Function(name="f").children == ()
    assert Trait(name="T", items=(s,)).children == (s,)
    assert Impl(name="S", items=(s,)).children == (s,)
    assert s.children == ()


def test_only_traits_and_impls_filter_members() -> None:
    assert Trait.filters_members
    assert Impl.filters_members
    assert not Module.filters_members
    assert not Function.filters_members
    assert not Struct.filters_members


def test_with_members_is_a_shallow_copy() -> None:
    f = Function(name="f")
    g = Function(name="g")
    cfg = Attribute("cfg", "test")
    trait = Trait(name="T", attrs=(cfg,), items=(f, g))
    filtered = trait.with_members((g,))
    assert filtered.items == (g,)
    assert filtered.items[0] is g
    assert filtered.attrs == (cfg,)
    assert trait.items == (f, g)


def test_impl_with_members_keeps_trait() -> None:
    impl = Impl(name="S", trait="Display", items=(Function(name="fmt"),))
    assert impl.with_members(()).trait == "Display"


def test_leaf_has_no_members_to_filter() -> None:
    with pytest.raises(TypeError):
        Module(name="m").with_members(())


def test_cfg_attrs() -> None:
    cfg = Attribute("cfg", 'feature = "g"')
    item = Const(name="C", attrs=(Attribute("doc", '"x"'), cfg))
    assert item.cfg_attrs == (cfg,)
    assert cfg.is_cfg


def test_attribute_str() -> None:
    assert str(Attribute("cfg", "unix")) == "#[cfg(unix)]"
    assert str(Attribute("test")) == "#[test]"


def test_unnamed_items() -> None:
    assert Macro(tokens="println!();").name is None
    assert Impl().name is None
