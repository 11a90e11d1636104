"""
Item path search.

Walks an item tree depth-first, one selector segment per level, and collects
every item sitting exactly at the selector's path. Duplicates are kept: a
module and a function sharing a name, or one declaration repeated under
different cfg attributes, all end up in the result in document order.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence, Tuple, Union

from .config import SelectorConfig
from .items import Attribute, Item, SourceFile
from .selector import Selector, parse_selector

logger = logging.getLogger(__name__)


def select(
    path: str,
    file: Union[SourceFile, Sequence[Item]],
    *,
    config: Optional[SelectorConfig] = None,
) -> list[Item]:
    """
    Parse a path, then search a file for all items that exactly match it.

    More than one item is returned when a module and a function share the
    name, or when the same path is declared several times under different
    cfg attributes.

    Args:
        path: selector string, e.g. "a::b::C"
        file: parsed file or a sequence of top-level items
        config: selector options (separator)

    Raises:
        SelectorError: the path is malformed
    """
    selector = parse_selector(path, config=config)
    roots = file.items if isinstance(file, SourceFile) else file
    return search(selector, roots)


def search(selector: Selector, roots: Sequence[Item]) -> list[Item]:
    """
    Return all items under `roots` whose nesting path equals `selector`.

    A match nested in containers that carry cfg attributes is returned as a
    copy with those attributes (outermost first) prepended to its own, so
    each duplicate tells which branch it came from. Other matches are the
    tree's own objects.
    """
    results: list[Item] = []
    _visit(tuple(roots), selector.segments, 0, (), results)
    logger.debug(f"Selector {selector} matched {len(results)} item(s)")
    return results


def _visit(
    items: Tuple[Item, ...],
    segments: Tuple[str, ...],
    depth: int,
    cfgs: Tuple[Attribute, ...],
    results: list[Item],
) -> None:
    segment = segments[depth]
    last = len(segments) - 1
    for item in items:
        if item.name != segment:
            continue
        if depth == last:
            results.append(_with_cfgs(item, cfgs))
        elif item.filters_members and depth + 1 == last:
            # Members of traits and impls are not valid on their own: return
            # the container reduced to the matching members.
            members = tuple(m for m in item.children if m.name == segments[last])
            if members:
                results.append(_with_cfgs(item.with_members(members), cfgs))
        else:
            _visit(item.children, segments, depth + 1, cfgs + item.cfg_attrs, results)


def _with_cfgs(item: Item, cfgs: Tuple[Attribute, ...]) -> Item:
    if not cfgs:
        return item
    return replace(item, attrs=cfgs + item.attrs)
