"""Base models and common types for linguistic example export."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class NodeKind(str, Enum):
    """Variants of document tree nodes."""

    LIST = "list"
    ITEM = "item"
    PARAGRAPH = "paragraph"
    TEXT = "text"
    TARGET = "target"


class Convention(str, Enum):
    """Citation package conventions for example lists."""

    GB4E = "gb4e"
    LINGUEX = "linguex"
    NONE = "none"

    @classmethod
    def from_directive(cls, value: Optional[str]) -> "Convention":
        """Map a package directive to a convention.

        Only the exact strings "gb4e" and "linguex" declare a convention.
        Anything else, including None, declares nothing.
        """
        if value == cls.GB4E.value:
            return cls.GB4E
        if value == cls.LINGUEX.value:
            return cls.LINGUEX
        return cls.NONE


class SiblingPosition(str, Enum):
    """Position of a node among its parent's children."""

    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"
    ONLY = "only"

    @property
    def is_first(self) -> bool:
        return self in (SiblingPosition.FIRST, SiblingPosition.ONLY)

    @property
    def is_last(self) -> bool:
        return self in (SiblingPosition.LAST, SiblingPosition.ONLY)


class EmptyItemPolicy(str, Enum):
    """How unjudged items with empty text are aligned among judged siblings."""

    FILL = "fill"  # uniform "[ ]"
    OMIT = "omit"  # no optional argument


class ExampleOptions(BaseModel):
    """Free-form sub-options declared alongside a convention."""

    environment: Optional[str] = Field(
        None, description="Environment name override (gb4e)"
    )
    item_command: Optional[str] = Field(
        None, description="Item-introducing command override"
    )
    environment_options: str = Field(
        default="", description="Extra argument string after \\begin{ENV}"
    )


class IssueKind(str, Enum):
    """Reported, non-fatal export problems."""

    MALFORMED_ITEM = "malformed-item"
    EMPTY_ITEM = "empty-item"
