"""Default Rendering Stage - Generic LaTeX for content outside example lists.

Stands in for the export engine's own backend: lists become itemize or
enumerate environments, paragraphs pass their content through, and
cross-reference targets become label commands.
"""

from lingex.models import (
    ConventionDeclaration,
    DocumentNode,
    InlineText,
    ItemNode,
    ListNode,
    ParagraphNode,
    RenderedFragment,
    TargetNode,
)
from lingex.pipeline.renderer import ConventionRenderer, ensure_newline, join_fragments


class DefaultRenderer(ConventionRenderer):
    """Renders nodes no convention governs."""

    def render_inline(self, node: DocumentNode) -> RenderedFragment:
        """Render inline text and targets."""
        if isinstance(node, TargetNode):
            return RenderedFragment(text=f"\\label{{{node.key}}}")
        if isinstance(node, InlineText):
            return RenderedFragment(text=node.text)
        raise TypeError(f"Not an inline node: {node.kind}")

    def render_paragraph(
        self,
        node: ParagraphNode,
        content: str,
        declaration: ConventionDeclaration,
    ) -> RenderedFragment:
        if isinstance(node.parent, ItemNode):
            return RenderedFragment(text=content)
        return RenderedFragment(text=content + "\n\n")

    def render_item(
        self,
        node: ItemNode,
        children: list[RenderedFragment],
        declaration: ConventionDeclaration,
    ) -> RenderedFragment:
        label = f"[{node.tag}]" if node.tag else ""
        return RenderedFragment(
            text=ensure_newline(f"\\item{label} {join_fragments(children)}")
        )

    def render_list(
        self,
        node: ListNode,
        children: list[RenderedFragment],
        declaration: ConventionDeclaration,
    ) -> RenderedFragment:
        environment = "enumerate" if node.ordered else "itemize"
        return RenderedFragment(
            text=(
                f"\\begin{{{environment}}}\n"
                f"{join_fragments(children)}"
                f"\\end{{{environment}}}\n"
            )
        )
