"""Dispatch Stage - Route each node to the renderer of its convention.

The convention is resolved once per node and handed to the renderer.
Nodes no convention governs go to the default renderer. Supporting another
convention means registering one more ConventionRenderer.
"""

import logging
from typing import Optional

from lingex.errors import PlaceholderCollisionError, UnknownConventionError
from lingex.models import (
    Convention,
    ConventionDeclaration,
    DocumentNode,
    InlineText,
    ItemNode,
    ListNode,
    ParagraphNode,
    RenderedFragment,
    TargetNode,
)
from lingex.pipeline.renderer import PLACEHOLDER_MARK, ConventionRenderer, join_fragments
from lingex.pipeline.stage_context import resolve_convention
from lingex.pipeline.stage_default import DefaultRenderer
from lingex.pipeline.stage_gb4e import Gb4eRenderer
from lingex.pipeline.stage_linguex import LinguexRenderer

logger = logging.getLogger(__name__)


def default_registry() -> dict[Convention, ConventionRenderer]:
    """Renderers for the supported conventions."""
    return {
        Convention.GB4E: Gb4eRenderer(),
        Convention.LINGUEX: LinguexRenderer(),
    }


class ExampleDispatcher:
    """Routes list, item and paragraph nodes to convention renderers."""

    def __init__(
        self,
        renderers: Optional[dict[Convention, ConventionRenderer]] = None,
        default: Optional[DefaultRenderer] = None,
    ):
        """Initialize dispatcher.

        Args:
            renderers: Convention registry (default: gb4e and linguex)
            default: Renderer for nodes outside example lists
        """
        self.renderers = renderers if renderers is not None else default_registry()
        self.default = default or DefaultRenderer()

    def renderer_for(self, declaration: ConventionDeclaration) -> ConventionRenderer:
        """Look up the renderer for a resolved declaration.

        Raises:
            UnknownConventionError: If a declared convention has no renderer.
        """
        if not declaration.is_declared:
            return self.default
        renderer = self.renderers.get(declaration.convention)
        if renderer is None:
            raise UnknownConventionError(declaration.convention.value)
        return renderer

    def render(
        self,
        node: DocumentNode,
        children: Optional[list[RenderedFragment]] = None,
    ) -> RenderedFragment:
        """Render any node from its children's fragments."""
        children = children or []
        if isinstance(node, ListNode):
            return self.render_list(node, children)
        if isinstance(node, ItemNode):
            return self.render_item(node, children)
        if isinstance(node, ParagraphNode):
            return self.render_paragraph(node, children)
        if isinstance(node, (InlineText, TargetNode)):
            return self.render_inline(node)
        raise TypeError(f"Unsupported node kind: {node.kind}")

    def render_inline(self, node: DocumentNode) -> RenderedFragment:
        return self.default.render_inline(node)

    def render_paragraph(
        self,
        node: ParagraphNode,
        children: list[RenderedFragment],
    ) -> RenderedFragment:
        """Render a paragraph.

        Only paragraphs directly inside an item of an example list are
        example bodies; any other paragraph is rendered by default.
        """
        content = join_fragments(children)
        declaration = resolve_convention(node)
        if not declaration.is_declared or not isinstance(node.parent, ItemNode):
            return self.default.render_paragraph(node, content, declaration)

        renderer = self.renderer_for(declaration)
        if PLACEHOLDER_MARK in content:
            raise PlaceholderCollisionError(content)
        logger.debug("Rendering %s example paragraph", declaration.convention.value)
        return renderer.render_paragraph(node, content, declaration)

    def render_item(
        self,
        node: ItemNode,
        children: list[RenderedFragment],
    ) -> RenderedFragment:
        declaration = resolve_convention(node)
        return self.renderer_for(declaration).render_item(node, children, declaration)

    def render_list(
        self,
        node: ListNode,
        children: list[RenderedFragment],
    ) -> RenderedFragment:
        declaration = resolve_convention(node)
        return self.renderer_for(declaration).render_list(node, children, declaration)
