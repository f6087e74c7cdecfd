"""gb4e Rendering Stage - Example lists as exe/xlist environments.

Output shape:

    \\begin{exe}
    \\ex[*]{\\label{s:x}This is bad.}
    \\ex[ ]{This is fine.}
    \\exi{(i)}[ ]{Tagged example.}
    \\end{exe}

Whether an unjudged item gets an empty "[ ]" argument depends on its
siblings, which an item cannot see. Items therefore emit a placeholder
token that the enclosing list resolves once all of them are rendered.
"""

import logging
from typing import Optional

from lingex.config import settings
from lingex.errors import MalformedItemError, UnresolvedPlaceholderError
from lingex.models import (
    ConventionDeclaration,
    EmptyItemPolicy,
    ExportIssue,
    ExtractedAnnotations,
    IssueKind,
    ItemNode,
    ListNode,
    ParagraphNode,
    RenderedFragment,
)
from lingex.pipeline.renderer import (
    EMPTY_ITEM_PLACEHOLDER,
    JUDGMENT_PLACEHOLDER,
    PLACEHOLDER_MARK,
    ConventionRenderer,
    ensure_newline,
    join_fragments,
)
from lingex.pipeline.stage_context import declares_itself
from lingex.pipeline.stage_extract import AnnotationExtractor

logger = logging.getLogger(__name__)

EMPTY_JUDGMENT = "[ ]"


def resolve_placeholders(
    content: str,
    any_judged: bool,
    empty_item_policy: EmptyItemPolicy = EmptyItemPolicy.FILL,
) -> str:
    """Replace judgment placeholders in a list's concatenated content.

    Args:
        content: Concatenated output of the list's items.
        any_judged: Whether any item of the list carries a judgment.
        empty_item_policy: Treatment of unjudged items with empty text.

    Returns:
        Content with "[ ]" in place of each placeholder when any item is
        judged, or with the placeholders deleted otherwise. Content without
        placeholders is returned unchanged.

    Raises:
        UnresolvedPlaceholderError: If placeholder tokens remain.
    """
    if any_judged:
        empty_replacement = (
            EMPTY_JUDGMENT if empty_item_policy == EmptyItemPolicy.FILL else ""
        )
        resolved = content.replace(JUDGMENT_PLACEHOLDER, EMPTY_JUDGMENT)
        resolved = resolved.replace(EMPTY_ITEM_PLACEHOLDER, empty_replacement)
    else:
        resolved = content.replace(JUDGMENT_PLACEHOLDER, "")
        resolved = resolved.replace(EMPTY_ITEM_PLACEHOLDER, "")

    leftover = resolved.count(PLACEHOLDER_MARK)
    if leftover:
        raise UnresolvedPlaceholderError(leftover)
    return resolved


class Gb4eRenderer(ConventionRenderer):
    """Renders example lists for the gb4e package."""

    def __init__(
        self,
        item_command: Optional[str] = None,
        tagged_item_command: Optional[str] = None,
        environment: Optional[str] = None,
        sublist_environment: Optional[str] = None,
        empty_item_policy: Optional[EmptyItemPolicy] = None,
        extractor: Optional[AnnotationExtractor] = None,
    ):
        """Initialize renderer.

        Args:
            item_command: Plain item command (default from settings, \\ex)
            tagged_item_command: Command for tagged items (default \\exi)
            environment: Top-level environment (default exe)
            sublist_environment: Nested environment (default xlist)
            empty_item_policy: Alignment policy for empty unjudged items
            extractor: Annotation extractor for paragraph text
        """
        self.item_command = item_command or settings.gb4e_item_command
        self.tagged_item_command = tagged_item_command or settings.gb4e_tagged_item_command
        self.environment = environment or settings.gb4e_environment
        self.sublist_environment = sublist_environment or settings.gb4e_sublist_environment
        self.empty_item_policy = empty_item_policy or settings.empty_item_policy
        self.extractor = extractor or AnnotationExtractor()

    def render_paragraph(
        self,
        node: ParagraphNode,
        content: str,
        declaration: ConventionDeclaration,
    ) -> RenderedFragment:
        """Render the example body.

        A paragraph with no proper text (typically one introducing a
        sub-list) emits only its label, since an empty brace group breaks
        the nested environment.
        """
        annotations = self.extractor.extract(content)
        label = annotations.label or ""
        if annotations.is_empty:
            text = label
        else:
            text = "{" + label + annotations.proper_text + "}"
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
        """Render an example item.

        Raises:
            MalformedItemError: If the item lacks exactly one paragraph.
        """
        annotations = self._paragraph_annotations(node, children)
        command = self.intro_command(node, declaration)

        if annotations.has_judgment:
            argument = f"[{annotations.judgment}]"
        elif annotations.is_empty:
            argument = EMPTY_ITEM_PLACEHOLDER
        else:
            argument = JUDGMENT_PLACEHOLDER

        return RenderedFragment(
            text=ensure_newline(command + argument + join_fragments(children)),
            has_judgment=annotations.has_judgment,
            annotations=annotations,
        )

    def render_list(
        self,
        node: ListNode,
        children: list[RenderedFragment],
        declaration: ConventionDeclaration,
    ) -> RenderedFragment:
        """Wrap items in exe (declaring list) or xlist (nested list)."""
        any_judged = any(child.has_judgment for child in children)
        issues = self._empty_item_issues(children) if any_judged else []

        content = resolve_placeholders(
            join_fragments(children),
            any_judged,
            self.empty_item_policy,
        )

        environment = node.environment or (
            self.environment if declares_itself(node, declaration) else self.sublist_environment
        )
        text = (
            f"\\begin{{{environment}}}{node.environment_options}\n"
            f"{content}"
            f"\\end{{{environment}}}\n"
        )
        return RenderedFragment(text=text, issues=issues)

    def intro_command(self, node: ItemNode, declaration: ConventionDeclaration) -> str:
        """Select the item-introducing command.

        A tagged item uses the tagged variant with the tag as argument.
        Otherwise the enclosing list's override applies, then the
        declaring list's, then the configured default.
        """
        if node.tag:
            return f"{self.tagged_item_command}{{{node.tag}}}"

        parent = node.parent
        if isinstance(parent, ListNode) and parent.item_command:
            return parent.item_command
        return declaration.options.item_command or self.item_command

    def _paragraph_annotations(
        self,
        node: ItemNode,
        children: list[RenderedFragment],
    ) -> ExtractedAnnotations:
        paragraphs = [
            fragment
            for child, fragment in zip(node.children, children)
            if isinstance(child, ParagraphNode)
        ]
        if len(paragraphs) != 1:
            raise MalformedItemError(len(paragraphs), node.tag)
        return paragraphs[0].annotations or ExtractedAnnotations()

    def _empty_item_issues(self, children: list[RenderedFragment]) -> list[ExportIssue]:
        """Report unjudged items with empty text among judged siblings."""
        issues = []
        for child in children:
            if child.has_judgment or not child.is_empty_item:
                continue
            message = (
                "Unjudged example with empty text among judged siblings; "
                f"applied empty-item policy '{self.empty_item_policy.value}'"
            )
            logger.warning(message)
            issues.append(ExportIssue(kind=IssueKind.EMPTY_ITEM, message=message))
        return issues
