"""
item_select - find declarations in a parsed item tree by path.

Paths look like `a::b::C::d::E`. Every item whose nesting matches the path
exactly is returned, including same-named siblings of different kinds and
declarations duplicated under different cfg attributes.

Public API:
  - select(path: str, file) -> list[Item]
  - parse_selector(path: str) -> Selector
  - search(selector: Selector, roots) -> list[Item]
  - SelectorError, EmptyPathError, InvalidSegmentError

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .config import DEFAULT_CONFIG, SelectorConfig
from .errors import EmptyPathError, InvalidSegmentError, SelectorError
from .items import (
    Attribute,
    Const,
    Declaration,
    Enumeration,
    ExternCrate,
    Function,
    Impl,
    Item,
    ItemKind,
    Macro,
    Module,
    SourceFile,
    Statement,
    Static,
    Struct,
    Trait,
    TypeAlias,
    Union,
    Use,
)
from .selector import Selector, is_identifier, parse_selector
from .search import search, select

__all__ = [
    "DEFAULT_CONFIG",
    "SelectorConfig",
    "SelectorError",
    "EmptyPathError",
    "InvalidSegmentError",
    "Attribute",
    "Const",
    "Declaration",
    "Enumeration",
    "ExternCrate",
    "Function",
    "Impl",
    "Item",
    "ItemKind",
    "Macro",
    "Module",
    "SourceFile",
    "Statement",
    "Static",
    "Struct",
    "Trait",
    "TypeAlias",
    "Union",
    "Use",
    "Selector",
    "is_identifier",
    "parse_selector",
    "search",
    "select",
]
