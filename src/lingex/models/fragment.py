"""Records threaded between renderers during one export pass."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, Field

from .base import Convention, ExampleOptions, IssueKind

if TYPE_CHECKING:
    from .node import ListNode


class ExtractedAnnotations(BaseModel):
    """Label, judgment and remaining text pulled from a paragraph."""

    label: Optional[str] = Field(None, description="Full \\label{KEY} command")
    judgment: Optional[str] = Field(None, description="Judgment symbols, e.g. '*' or '??'")
    proper_text: str = Field(default="", description="Text with label and judgment removed")

    model_config = {"frozen": True}

    @property
    def has_judgment(self) -> bool:
        return bool(self.judgment)

    @property
    def is_empty(self) -> bool:
        """True when nothing but annotations remains, e.g. a sub-list intro."""
        return not self.proper_text.strip()


class ExportIssue(BaseModel):
    """Problem found during export that did not abort it."""

    kind: IssueKind
    message: str
    tag: Optional[str] = Field(None, description="Tag of the affected item, if any")


class RenderedFragment(BaseModel):
    """
    Output of rendering one node.

    Ancestors consume `text` verbatim and read the flags; they never parse
    a child's text again.
    """

    text: str = ""
    has_judgment: bool = False
    annotations: Optional[ExtractedAnnotations] = None
    issues: list[ExportIssue] = Field(default_factory=list)

    @property
    def is_empty_item(self) -> bool:
        """Item whose paragraph carried no proper text."""
        return self.annotations is not None and self.annotations.is_empty


@dataclass(frozen=True)
class ConventionDeclaration:
    """Convention in force for a node, with the declaring list's options."""

    convention: Convention = Convention.NONE
    options: ExampleOptions = field(default_factory=ExampleOptions)
    declared_by: Optional["ListNode"] = field(default=None, compare=False, repr=False)

    @property
    def is_declared(self) -> bool:
        return self.convention is not Convention.NONE


NO_CONVENTION = ConventionDeclaration()
