"""Document tree models.

Nodes are built by the upstream export engine (or loaded from JSON) and
live for one export pass. Containers own their children; every node keeps a
non-owning reference to its parent for upward navigation only.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, PrivateAttr

from .base import Convention, ExampleOptions, NodeKind, SiblingPosition


class DocumentNode(BaseModel):
    """Base class for all tree nodes."""

    kind: NodeKind

    _parent: Optional["ContainerNode"] = PrivateAttr(default=None)

    @property
    def parent(self) -> Optional["ContainerNode"]:
        """Enclosing node, or None for a root."""
        return self._parent

    def ancestors(self):
        """Yield enclosing nodes from the nearest outwards."""
        node = self._parent
        while node is not None:
            yield node
            node = node._parent

    def sibling_position(self) -> SiblingPosition:
        """Compute this node's position within its parent's children.

        A root node counts as the only child.
        """
        if self._parent is None:
            return SiblingPosition.ONLY

        siblings = self._parent.children
        index = next(i for i, child in enumerate(siblings) if child is self)
        if len(siblings) == 1:
            return SiblingPosition.ONLY
        if index == 0:
            return SiblingPosition.FIRST
        if index == len(siblings) - 1:
            return SiblingPosition.LAST
        return SiblingPosition.MIDDLE


class ContainerNode(DocumentNode):
    """Node owning an ordered sequence of children."""

    children: list["AnyNode"] = Field(default_factory=list)

    def model_post_init(self, __context: Any) -> None:
        for child in self.children:
            child._parent = self

    def append(self, child: "AnyNode") -> "AnyNode":
        """Attach a child at the end and return it."""
        self.children.append(child)
        child._parent = self
        return child


class InlineText(DocumentNode):
    """Run of inline text, already rendered by the upstream engine."""

    kind: Literal[NodeKind.TEXT] = NodeKind.TEXT
    text: str = ""


class TargetNode(DocumentNode):
    """Cross-reference target, rendered as a label command."""

    kind: Literal[NodeKind.TARGET] = NodeKind.TARGET
    key: str = Field(..., pattern=r"^[A-Za-z0-9_.:-]+$")


class ParagraphNode(ContainerNode):
    """Paragraph of inline content."""

    kind: Literal[NodeKind.PARAGRAPH] = NodeKind.PARAGRAPH


class ItemNode(ContainerNode):
    """
    List item.

    Example items hold exactly one paragraph, optionally followed by a
    nested example list.
    """

    kind: Literal[NodeKind.ITEM] = NodeKind.ITEM
    tag: Optional[str] = Field(
        None, description="Author-supplied identifier replacing automatic numbering"
    )


class ListNode(ContainerNode):
    """
    Ordered or unordered list.

    Carries the convention directives: a list whose `package` names a
    supported convention declares it for itself and every descendant that
    does not declare its own.
    """

    kind: Literal[NodeKind.LIST] = NodeKind.LIST
    ordered: bool = True

    # Directives
    package: Optional[str] = Field(None, description="'gb4e' or 'linguex'")
    environment: Optional[str] = None
    item_command: Optional[str] = None
    environment_options: str = ""

    @property
    def declared_convention(self) -> Convention:
        """Convention declared by this list itself."""
        return Convention.from_directive(self.package)

    @property
    def options(self) -> ExampleOptions:
        return ExampleOptions(
            environment=self.environment,
            item_command=self.item_command,
            environment_options=self.environment_options,
        )


AnyNode = Annotated[
    Union[ListNode, ItemNode, ParagraphNode, InlineText, TargetNode],
    Field(discriminator="kind"),
]

ContainerNode.model_rebuild()
ParagraphNode.model_rebuild()
ItemNode.model_rebuild()
ListNode.model_rebuild()


class NodeTree(BaseModel):
    """Top-level sequence of block nodes, as loaded from JSON."""

    blocks: list[AnyNode] = Field(default_factory=list)


def load_tree(data: Union[dict, list]) -> list[DocumentNode]:
    """Build nodes from their JSON form.

    Accepts either a list of nodes or an object with a "blocks" list.
    """
    if isinstance(data, list):
        data = {"blocks": data}
    return list(NodeTree.model_validate(data).blocks)
