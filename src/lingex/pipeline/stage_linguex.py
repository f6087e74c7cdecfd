"""linguex Rendering Stage - Examples as self-terminating command runs.

Output shape for a top-level example with a sub-list:

    \\ex.Intro\\a.*First.
    \\b.Second.\\z.
    \\par

Every item emits complete output, so lists add nothing around it.
"""

from typing import Optional

from lingex.models import (
    ConventionDeclaration,
    ItemNode,
    ListNode,
    ParagraphNode,
    RenderedFragment,
)
from lingex.pipeline.renderer import ConventionRenderer, join_fragments
from lingex.pipeline.stage_context import declares_itself
from lingex.pipeline.stage_extract import AnnotationExtractor


TOP_LEVEL_COMMAND = r"\ex."
FIRST_SUBITEM_COMMAND = r"\a."
NEXT_SUBITEM_COMMAND = r"\b."

TOP_LEVEL_END = "\\par\n"
LAST_SUBITEM_END = "\\z.\n"
SUBITEM_END = "\n"


class LinguexRenderer(ConventionRenderer):
    """Renders example lists for the linguex package."""

    def __init__(self, extractor: Optional[AnnotationExtractor] = None):
        self.extractor = extractor or AnnotationExtractor()

    def render_paragraph(
        self,
        node: ParagraphNode,
        content: str,
        declaration: ConventionDeclaration,
    ) -> RenderedFragment:
        """Render judgment, label and text with nothing between them.

        The judgment must directly follow the item command for linguex to
        align it.
        """
        annotations = self.extractor.extract(content)
        text = (annotations.judgment or "") + (annotations.label or "") + annotations.proper_text
        return RenderedFragment(
            text=text,
            has_judgment=annotations.has_judgment,
            annotations=annotations,
        )

    def render_item(
        self,
        node: ItemNode,
        children: list[RenderedFragment],
        declaration: ConventionDeclaration,
    ) -> RenderedFragment:
        command, end = self.item_delimiters(node, declaration)
        tag = f"[{node.tag}]" if node.tag else ""
        return RenderedFragment(
            text=command + tag + join_fragments(children) + end,
            has_judgment=any(child.has_judgment for child in children),
        )

    def render_list(
        self,
        node: ListNode,
        children: list[RenderedFragment],
        declaration: ConventionDeclaration,
    ) -> RenderedFragment:
        return RenderedFragment(text=join_fragments(children))

    def item_delimiters(
        self,
        node: ItemNode,
        declaration: ConventionDeclaration,
    ) -> tuple[str, str]:
        """Select the opening command and the terminator for an item.

        Items of the declaring list are top-level examples (\\ex. ... \\par).
        Items of a nested list open with \\a. when first and \\b. otherwise,
        and the last one closes the sub-list with \\z.

        Returns:
            Tuple of (opening command, terminator)
        """
        parent = node.parent
        if isinstance(parent, ListNode) and declares_itself(parent, declaration):
            command = parent.item_command or TOP_LEVEL_COMMAND
            return command, TOP_LEVEL_END

        position = node.sibling_position()
        command = FIRST_SUBITEM_COMMAND if position.is_first else NEXT_SUBITEM_COMMAND
        end = LAST_SUBITEM_END if position.is_last else SUBITEM_END
        return command, end
