"""
Pytest fixtures with sample item trees.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import pytest

from item_select import (
    Attribute,
    Const,
    Function,
    Impl,
    Module,
    SourceFile,
    Statement,
    Struct,
    Trait,
)


@pytest.fixture
def sample() -> SourceFile:
    """
    mod a {
        mod b {
            trait C {
                fn d() {
                    struct E;
                }
                fn f(self) {}
            }
        }
        fn b() {}
    }
    """
    trait_c = Trait(
        name="C",
        items=(
            Function(name="d", body=(Struct(name="E", tokens=";"),)),
            Function(name="f", body=()),
        ),
    )
    return SourceFile(
        items=(
            Module(
                name="a",
                items=(
                    Module(name="b", items=(trait_c,)),
                    Function(name="b", body=()),
                ),
            ),
        )
    )


@pytest.fixture
def sample_with_cfg() -> SourceFile:
    """
    #[cfg(feature = "g")]
    mod imp {
        pub struct H(u8);
    }
    #[cfg(not(feature = "g"))]
    mod imp {
        pub struct H(u16);
    }
    """
    return SourceFile(
        items=(
            Module(
                name="imp",
                attrs=(Attribute("cfg", 'feature = "g"'),),
                items=(Struct(name="H", tokens="(u8);"),),
            ),
            Module(
                name="imp",
                attrs=(Attribute("cfg", 'not(feature = "g")'),),
                items=(Struct(name="H", tokens="(u16);"),),
            ),
        )
    )


@pytest.fixture
def sample_with_impl() -> SourceFile:
    """
    struct Foo;
    impl Foo {
        fn new() -> Self {
            let x = 1;
            fn helper() {}
            Foo
        }
        fn get(&self) {}
    }
    trait Shape {
        const SIDES: u32;
        fn area(&self) -> f64;
    }
    """
    return SourceFile(
        items=(
            Struct(name="Foo", tokens=";"),
            Impl(
                name="Foo",
                items=(
                    Function(
                        name="new",
                        body=(
                            Statement(tokens="let x = 1;"),
                            Function(name="helper", body=()),
                            Statement(tokens="Foo"),
                        ),
                    ),
                    Function(name="get", body=()),
                ),
            ),
            Trait(
                name="Shape",
                items=(
                    Const(name="SIDES", tokens=": u32;"),
                    Function(name="area"),
                ),
            ),
        )
    )
