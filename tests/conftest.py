"""Pytest configuration and fixtures."""

import pytest

from lingex.exporter import ExampleExporter
from lingex.models import InlineText, ItemNode, ListNode, ParagraphNode, TargetNode


def _paragraph(*parts) -> ParagraphNode:
    children = []
    for part in parts:
        if isinstance(part, str):
            children.append(InlineText(text=part))
        else:
            children.append(part)
    return ParagraphNode(children=children)


@pytest.fixture
def item():
    """Build an example item: item("* Bad.", target, tag=..., sublist=...)."""

    def make(*parts, tag=None, sublist=None):
        children = [_paragraph(*parts)]
        if sublist is not None:
            children.append(sublist)
        return ItemNode(tag=tag, children=children)

    return make


@pytest.fixture
def target():
    """Build a cross-reference target."""
    return lambda key: TargetNode(key=key)


@pytest.fixture
def example_list():
    """Build a list of items, optionally declaring a package."""

    def make(*items, package=None, **directives):
        return ListNode(package=package, children=list(items), **directives)

    return make


@pytest.fixture
def exporter():
    """Non-strict exporter with default renderers."""
    return ExampleExporter(strict=False)
