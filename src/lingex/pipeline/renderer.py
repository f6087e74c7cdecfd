"""Uniform renderer interface shared by every convention."""

from abc import ABC, abstractmethod

from lingex.models import (
    ConventionDeclaration,
    ItemNode,
    ListNode,
    ParagraphNode,
    RenderedFragment,
)


# Reserved tokens standing in for the gb4e optional argument until the
# enclosing list knows whether any sibling is judged. U+E000 is a
# private-use character and never appears in exported text.
PLACEHOLDER_MARK = "\ue000"
JUDGMENT_PLACEHOLDER = f"{PLACEHOLDER_MARK}judgment{PLACEHOLDER_MARK}"
EMPTY_ITEM_PLACEHOLDER = f"{PLACEHOLDER_MARK}judgment:empty{PLACEHOLDER_MARK}"


def join_fragments(children: list[RenderedFragment]) -> str:
    """Concatenate children's output in order."""
    return "".join(child.text for child in children)


def ensure_newline(text: str) -> str:
    return text if text.endswith("\n") else text + "\n"


class ConventionRenderer(ABC):
    """Renders paragraphs, items and lists for one convention.

    Each method receives the node, its already-rendered content and the
    declaration resolved for it, and returns a RenderedFragment.
    """

    @abstractmethod
    def render_paragraph(
        self,
        node: ParagraphNode,
        content: str,
        declaration: ConventionDeclaration,
    ) -> RenderedFragment:
        """Render a paragraph from its concatenated inline content."""

    @abstractmethod
    def render_item(
        self,
        node: ItemNode,
        children: list[RenderedFragment],
        declaration: ConventionDeclaration,
    ) -> RenderedFragment:
        """Render a list item from its children's fragments."""

    @abstractmethod
    def render_list(
        self,
        node: ListNode,
        children: list[RenderedFragment],
        declaration: ConventionDeclaration,
    ) -> RenderedFragment:
        """Render a list from its items' fragments."""
