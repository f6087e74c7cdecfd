"""Export driver - Walk a node tree bottom-up and render it.

Children are always rendered before their parent, so every record a
renderer consumes is complete when it runs.
"""

import logging
from typing import Iterable, Optional, Union

from pydantic import BaseModel, Field

from lingex.config import settings
from lingex.errors import MalformedItemError
from lingex.models import (
    NO_CONVENTION,
    ContainerNode,
    DocumentNode,
    ExportIssue,
    IssueKind,
    ItemNode,
    RenderedFragment,
)
from lingex.pipeline import ExampleDispatcher

logger = logging.getLogger(__name__)


class ExportResult(BaseModel):
    """Rendered output of one export pass."""

    text: str = ""
    issues: list[ExportIssue] = Field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)


class ExampleExporter:
    """Renders node trees, reporting recoverable problems as issues.

    In strict mode malformed example items abort the export; otherwise they
    are recorded, logged and rendered as ordinary list items.
    """

    def __init__(
        self,
        dispatcher: Optional[ExampleDispatcher] = None,
        strict: Optional[bool] = None,
    ):
        """Initialize exporter.

        Args:
            dispatcher: Node dispatcher (default registry if None)
            strict: Raise on malformed items (default from settings)
        """
        self.dispatcher = dispatcher or ExampleDispatcher()
        self.strict = settings.strict if strict is None else strict

    def export(self, nodes: Union[DocumentNode, Iterable[DocumentNode]]) -> ExportResult:
        """Render one node or a sequence of top-level nodes.

        Args:
            nodes: Root node(s) of the tree.

        Returns:
            ExportResult with concatenated output and collected issues.
        """
        if isinstance(nodes, DocumentNode):
            nodes = [nodes]

        issues: list[ExportIssue] = []
        parts = [self.render_node(node, issues).text for node in nodes]
        if issues:
            logger.info("Export finished with %d issue(s)", len(issues))
        return ExportResult(text="".join(parts), issues=issues)

    def export_text(self, nodes: Union[DocumentNode, Iterable[DocumentNode]]) -> str:
        """Render and return only the output text."""
        return self.export(nodes).text

    def render_node(self, node: DocumentNode, issues: list[ExportIssue]) -> RenderedFragment:
        """Render a node after all of its descendants."""
        children = []
        if isinstance(node, ContainerNode):
            children = [self.render_node(child, issues) for child in node.children]

        if isinstance(node, ItemNode):
            fragment = self._render_item(node, children, issues)
        else:
            fragment = self.dispatcher.render(node, children)

        issues.extend(fragment.issues)
        return fragment

    def _render_item(
        self,
        node: ItemNode,
        children: list[RenderedFragment],
        issues: list[ExportIssue],
    ) -> RenderedFragment:
        try:
            return self.dispatcher.render_item(node, children)
        except MalformedItemError as e:
            if self.strict:
                raise
            logger.error("Rendering item as plain list item: %s", e)
            issues.append(
                ExportIssue(kind=IssueKind.MALFORMED_ITEM, message=str(e), tag=node.tag)
            )
            return self.dispatcher.default.render_item(node, children, NO_CONVENTION)


def export_text(nodes: Union[DocumentNode, Iterable[DocumentNode]]) -> str:
    """Render nodes with a default exporter."""
    return ExampleExporter().export_text(nodes)
