"""Context Resolution Stage - Find the convention governing a node.

A convention is declared on a list and inherited by every descendant that
does not declare its own. Resolution walks the parent chain upwards and
stops at the first declaring list.
"""

from lingex.models import (
    NO_CONVENTION,
    Convention,
    ConventionDeclaration,
    DocumentNode,
    ListNode,
)


def own_declaration(node: DocumentNode) -> ConventionDeclaration:
    """Return the declaration carried by the node itself, if any.

    Only list nodes carry declarations.
    """
    if isinstance(node, ListNode) and node.declared_convention is not Convention.NONE:
        return ConventionDeclaration(
            convention=node.declared_convention,
            options=node.options,
            declared_by=node,
        )
    return NO_CONVENTION


def resolve_convention(node: DocumentNode) -> ConventionDeclaration:
    """Resolve the convention in force at a node.

    Args:
        node: Any tree node.

    Returns:
        Declaration of the nearest declaring list among the node and its
        ancestors, or NO_CONVENTION when none declares one.
    """
    current = node
    while current is not None:
        declaration = own_declaration(current)
        if declaration.is_declared:
            return declaration
        current = current.parent
    return NO_CONVENTION


def declares_itself(node: ListNode, declaration: ConventionDeclaration) -> bool:
    """Check whether a list is the one that declared the resolved convention."""
    return declaration.declared_by is node
