"""
Item path selector parser (Lark).

A selector is a path like `a::b::C::d`: one or more identifiers joined by the
configured separator. Segments follow identifier rules of the item model:
a letter or underscore followed by letters, digits or underscores, an
optional raw prefix `r#`, and never a lone `_`.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Iterator, Optional, Sequence, Tuple

from lark import Lark, Token, Transformer, UnexpectedInput

from .config import DEFAULT_CONFIG, DEFAULT_SEPARATOR, SelectorConfig
from .errors import EmptyPathError, InvalidSegmentError

if TYPE_CHECKING:
    from .items import Item

logger = logging.getLogger(__name__)

IDENT_PATTERN = r"(?:r#)?(?!_\b)[^\W\d]\w*"

_IDENT_RE = re.compile(IDENT_PATTERN)

_GRAMMAR_TEMPLATE = r"""
?start: path

path: SEGMENT (_SEP SEGMENT)*

SEGMENT: /{ident}/
_SEP: {separator}
"""


def is_identifier(segment: str) -> bool:
    """Return True if `segment` is a valid path segment."""
    return bool(_IDENT_RE.fullmatch(segment))


@lru_cache(maxsize=16)
def _parser_for(separator: str) -> Lark:
    grammar = _GRAMMAR_TEMPLATE.format(
        ident=IDENT_PATTERN, separator=json.dumps(separator)
    )
    return Lark(grammar, parser="lalr", start="start")


class _ToSegments(Transformer):
    def SEGMENT(self, t: Token) -> str:  # noqa: N802
        return str(t)

    def path(self, items: list) -> Tuple[str, ...]:
        return tuple(items)


@dataclass(frozen=True)
class Selector:
    """Parsed path: an ordered, non-empty tuple of identifier segments."""

    segments: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.segments))
        if not self.segments:
            raise EmptyPathError()
        for segment in self.segments:
            if not is_identifier(segment):
                raise InvalidSegmentError(segment)

    @classmethod
    def parse(cls, path: str, *, config: Optional[SelectorConfig] = None) -> Selector:
        return parse_selector(path, config=config)

    def search(self, roots: Sequence[Item]) -> list[Item]:
        """Return all items under `roots` whose nesting path matches exactly."""
        from .search import search

        return search(self, roots)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self.segments)

    def __str__(self) -> str:
        return DEFAULT_SEPARATOR.join(self.segments)


def _offending_segment(path: str, separator: str) -> str:
    for segment in path.split(separator):
        if not is_identifier(segment):
            return segment
    return path


def parse_selector(path: str, *, config: Optional[SelectorConfig] = None) -> Selector:
    """
    Parse a path into a Selector.

    Raises:
        EmptyPathError: path is the empty string
        InvalidSegmentError: a segment is empty or not an identifier
    """
    if not path:
        raise EmptyPathError(path)
    separator = (config or DEFAULT_CONFIG).separator
    try:
        tree = _parser_for(separator).parse(path)
    except UnexpectedInput as e:
        segment = _offending_segment(path, separator)
        logger.debug(f"Rejected selector {path!r}: bad segment {segment!r}")
        raise InvalidSegmentError(segment, path=path) from e
    return Selector(segments=_ToSegments().transform(tree))
