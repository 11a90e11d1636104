"""
Item tree models.

An already-parsed source file is a `SourceFile` holding a tree of items. Items
are frozen dataclasses tagged with an `ItemKind`; the search only talks to
them through `name`, `children`, `filters_members` and `with_members`.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar, Optional, Tuple


class ItemKind(str, Enum):
    """Declaration kind."""

    MOD = "mod"
    TRAIT = "trait"
    IMPL = "impl"
    FN = "fn"
    STRUCT = "struct"
    ENUM = "enum"
    UNION = "union"
    CONST = "const"
    STATIC = "static"
    TYPE = "type"
    USE = "use"
    MACRO = "macro"
    EXTERN_CRATE = "extern_crate"
    STMT = "stmt"


@dataclass(frozen=True)
class Attribute:
    """Outer attribute like #[cfg(feature = "g")]."""

    path: str
    tokens: str = ""

    @property
    def is_cfg(self) -> bool:
        return self.path == "cfg"

    def __str__(self) -> str:
        if self.tokens:
            return f"#[{self.path}({self.tokens})]"
        return f"#[{self.path}]"


@dataclass(frozen=True)
class Item:
    """Base of all declarations in the tree."""

    kind: ClassVar[ItemKind]
    filters_members: ClassVar[bool] = False

    name: Optional[str] = None
    attrs: Tuple[Attribute, ...] = ()

    @property
    def children(self) -> Tuple[Item, ...]:
        """Items addressable by the next path segment."""
        return ()

    @property
    def cfg_attrs(self) -> Tuple[Attribute, ...]:
        return tuple(a for a in self.attrs if a.is_cfg)

    def with_members(self, members: Tuple[Item, ...]) -> Item:
        raise TypeError(f"{self.kind.value} items have no members to filter")


@dataclass(frozen=True)
class Module(Item):
    """`mod name { ... }`; `items` is None for an out-of-line `mod name;`."""

    kind: ClassVar[ItemKind] = ItemKind.MOD

    items: Optional[Tuple[Item, ...]] = None

    @property
    def children(self) -> Tuple[Item, ...]:
        return self.items or ()


@dataclass(frozen=True)
class Function(Item):
    """
    Function or method.

    The body is a pseudo-container: its local items (nested functions, types)
    are reachable by further path segments. Plain statements are kept as
    `Statement` entries. `body` is None for a signature-only trait method.
    """

    kind: ClassVar[ItemKind] = ItemKind.FN

    body: Optional[Tuple[Item, ...]] = None

    @property
    def children(self) -> Tuple[Item, ...]:
        return self.body or ()


@dataclass(frozen=True)
class Trait(Item):
    """`trait Name { ... }`."""

    kind: ClassVar[ItemKind] = ItemKind.TRAIT
    filters_members: ClassVar[bool] = True

    items: Tuple[Item, ...] = ()

    @property
    def children(self) -> Tuple[Item, ...]:
        return self.items

    def with_members(self, members: Tuple[Item, ...]) -> Trait:
        return replace(self, items=tuple(members))


@dataclass(frozen=True)
class Impl(Item):
    """
    `impl [Trait for] Type { ... }`.

    `name` is the identifier of the implementing type, so `Type::method`
    reaches methods of the block. `trait` names the implemented trait, if any.
    """

    kind: ClassVar[ItemKind] = ItemKind.IMPL
    filters_members: ClassVar[bool] = True

    trait: Optional[str] = None
    items: Tuple[Item, ...] = ()

    @property
    def children(self) -> Tuple[Item, ...]:
        return self.items

    def with_members(self, members: Tuple[Item, ...]) -> Impl:
        return replace(self, items=tuple(members))


@dataclass(frozen=True)
class Declaration(Item):
    """Leaf declaration; `tokens` holds the rest of its text, unparsed."""

    tokens: str = ""


@dataclass(frozen=True)
class Struct(Declaration):
    kind: ClassVar[ItemKind] = ItemKind.STRUCT


@dataclass(frozen=True)
class Enumeration(Declaration):
    kind: ClassVar[ItemKind] = ItemKind.ENUM


@dataclass(frozen=True)
class Union(Declaration):
    kind: ClassVar[ItemKind] = ItemKind.UNION


@dataclass(frozen=True)
class Const(Declaration):
    kind: ClassVar[ItemKind] = ItemKind.CONST


@dataclass(frozen=True)
class Static(Declaration):
    kind: ClassVar[ItemKind] = ItemKind.STATIC


@dataclass(frozen=True)
class TypeAlias(Declaration):
    kind: ClassVar[ItemKind] = ItemKind.TYPE


@dataclass(frozen=True)
class Use(Declaration):
    kind: ClassVar[ItemKind] = ItemKind.USE


@dataclass(frozen=True)
class Macro(Declaration):
    """`macro_rules! name` (named) or a macro invocation (unnamed)."""

    kind: ClassVar[ItemKind] = ItemKind.MACRO


@dataclass(frozen=True)
class ExternCrate(Declaration):
    kind: ClassVar[ItemKind] = ItemKind.EXTERN_CRATE


@dataclass(frozen=True)
class Statement(Declaration):
    """Non-item statement inside a function body. Never matched by name."""

    kind: ClassVar[ItemKind] = ItemKind.STMT


@dataclass(frozen=True)
class SourceFile:
    """A parsed file: inner attributes, optional shebang and top-level items."""

    items: Tuple[Item, ...] = ()
    attrs: Tuple[Attribute, ...] = ()
    shebang: Optional[str] = None
