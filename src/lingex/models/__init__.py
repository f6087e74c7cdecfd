"""Document tree and rendering records for linguistic example export.

This module defines the Pydantic models flowing through one export pass.
None of them outlive the pass.

Key Design Principles:
1. Upward navigation only: nodes reference their parent, never siblings' output
2. Explicit context: the resolved convention is passed into renderers
3. Record threading: renderers return fragments instead of mutating nodes

Model Hierarchy:
- ListNode -> ItemNode -> ParagraphNode -> InlineText / TargetNode
- ItemNode -> ListNode (nested sub-lists)
"""

from .base import (
    Convention,
    EmptyItemPolicy,
    IssueKind,
    ExampleOptions,
    NodeKind,
    SiblingPosition,
)
from .fragment import (
    NO_CONVENTION,
    ConventionDeclaration,
    ExportIssue,
    ExtractedAnnotations,
    RenderedFragment,
)
from .node import (
    AnyNode,
    ContainerNode,
    DocumentNode,
    InlineText,
    ItemNode,
    ListNode,
    NodeTree,
    ParagraphNode,
    TargetNode,
    load_tree,
)

__all__ = [
    # Base types
    "Convention",
    "EmptyItemPolicy",
    "IssueKind",
    "ExampleOptions",
    "NodeKind",
    "SiblingPosition",
    # Records
    "NO_CONVENTION",
    "ConventionDeclaration",
    "ExportIssue",
    "ExtractedAnnotations",
    "RenderedFragment",
    # Nodes
    "AnyNode",
    "ContainerNode",
    "DocumentNode",
    "InlineText",
    "ItemNode",
    "ListNode",
    "NodeTree",
    "ParagraphNode",
    "TargetNode",
    "load_tree",
]
