"""
Selector configuration.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import re

from pydantic import BaseModel, Field, field_validator

DEFAULT_SEPARATOR = "::"

# '#' belongs to the raw identifier prefix r#
_IDENT_OR_SPACE = re.compile(r"[\w\s#]")


class SelectorConfig(BaseModel):
    """Options controlling how path strings are split into segments."""

    model_config = {"extra": "forbid", "frozen": True}

    separator: str = Field(
        default=DEFAULT_SEPARATOR,
        description="Token separating path segments, e.g. '::' or '.'",
    )

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Separator must be non-empty and unable to occur inside an identifier."""
        if not v:
            raise ValueError("Separator must not be empty")
        if _IDENT_OR_SPACE.search(v):
            raise ValueError(
                f"Separator must not contain identifier characters, '#' or whitespace: {v!r}"
            )
        return v


DEFAULT_CONFIG = SelectorConfig()
