"""Tests for document tree models and context resolution."""

import pytest
from pydantic import ValidationError

from lingex.models import (
    Convention,
    InlineText,
    ItemNode,
    ListNode,
    ParagraphNode,
    SiblingPosition,
    TargetNode,
    load_tree,
)
from lingex.pipeline.stage_context import declares_itself, resolve_convention


class TestConvention:
    """Tests for package directive parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("gb4e", Convention.GB4E),
            ("linguex", Convention.LINGUEX),
            ("expex", Convention.NONE),
            ("GB4E", Convention.NONE),
            ("", Convention.NONE),
            (None, Convention.NONE),
        ],
    )
    def test_from_directive(self, value, expected):
        """Only the exact package names declare a convention."""
        assert Convention.from_directive(value) is expected


class TestTreeStructure:
    """Tests for parent wiring and sibling positions."""

    def test_parent_wired_on_construction(self, item, example_list):
        """Children point back at their container."""
        first = item("One.")
        lst = example_list(first)
        assert first.parent is lst
        assert first.children[0].parent is first
        assert lst.parent is None

    def test_append_sets_parent(self):
        """Appended children get their parent reference."""
        paragraph = ParagraphNode()
        text = paragraph.append(InlineText(text="x"))
        assert text.parent is paragraph

    def test_ancestors(self, item, example_list):
        """Ancestors are yielded nearest first."""
        inner_item = item("Inner.")
        inner = example_list(inner_item)
        outer_item = item("", sublist=inner)
        outer = example_list(outer_item)
        ancestors = list(inner_item.ancestors())
        assert len(ancestors) == 3
        assert ancestors[0] is inner
        assert ancestors[1] is outer_item
        assert ancestors[2] is outer

    def test_sibling_positions(self, item, example_list):
        """Positions are first, middle and last."""
        items = [item("A."), item("B."), item("C.")]
        example_list(*items)
        assert [i.sibling_position() for i in items] == [
            SiblingPosition.FIRST,
            SiblingPosition.MIDDLE,
            SiblingPosition.LAST,
        ]

    def test_only_child(self, item, example_list):
        """A single child is both first and last."""
        only = item("A.")
        example_list(only)
        position = only.sibling_position()
        assert position is SiblingPosition.ONLY
        assert position.is_first and position.is_last

    def test_target_key_validated(self):
        """Target keys are restricted to label characters."""
        with pytest.raises(ValidationError):
            TargetNode(key="has space")


class TestLoadTree:
    """Tests for building trees from JSON data."""

    def test_load_nested(self):
        """Nested JSON builds typed, wired nodes."""
        nodes = load_tree(
            {
                "blocks": [
                    {
                        "kind": "list",
                        "package": "gb4e",
                        "children": [
                            {
                                "kind": "item",
                                "tag": "(i)",
                                "children": [
                                    {
                                        "kind": "paragraph",
                                        "children": [
                                            {"kind": "text", "text": "* Bad. "},
                                            {"kind": "target", "key": "s:x"},
                                        ],
                                    }
                                ],
                            }
                        ],
                    }
                ]
            }
        )
        lst = nodes[0]
        assert isinstance(lst, ListNode)
        assert lst.declared_convention is Convention.GB4E
        entry = lst.children[0]
        assert isinstance(entry, ItemNode)
        assert entry.tag == "(i)"
        assert entry.parent is lst
        paragraph = entry.children[0]
        assert isinstance(paragraph.children[1], TargetNode)
        assert paragraph.children[1].parent is paragraph

    def test_load_bare_list(self):
        """A bare JSON array is accepted."""
        nodes = load_tree([{"kind": "paragraph", "children": []}])
        assert isinstance(nodes[0], ParagraphNode)

    def test_unknown_kind_rejected(self):
        """Unknown node kinds fail validation."""
        with pytest.raises(ValidationError):
            load_tree([{"kind": "table"}])


class TestResolveConvention:
    """Tests for ancestor-chain convention lookup."""

    def test_declared_on_list(self, example_list):
        """A declaring list resolves to itself."""
        lst = example_list(package="gb4e")
        declaration = resolve_convention(lst)
        assert declaration.convention is Convention.GB4E
        assert declares_itself(lst, declaration)

    def test_inherited_by_descendants(self, item, example_list):
        """Paragraphs deep inside inherit the convention."""
        entry = item("Text.")
        lst = example_list(entry, package="linguex")
        paragraph = entry.children[0]
        declaration = resolve_convention(paragraph)
        assert declaration.convention is Convention.LINGUEX
        assert declaration.declared_by is lst

    def test_sublist_inherits(self, item, example_list):
        """A nested list without a package inherits but does not declare."""
        inner = example_list(item("Inner."))
        example_list(item("", sublist=inner), package="gb4e")
        declaration = resolve_convention(inner)
        assert declaration.convention is Convention.GB4E
        assert not declares_itself(inner, declaration)

    def test_nearest_declaration_wins(self, item, example_list):
        """A nested declaration overrides the outer one."""
        inner = example_list(item("Inner."), package="linguex")
        example_list(item("", sublist=inner), package="gb4e")
        assert resolve_convention(inner.children[0]).convention is Convention.LINGUEX

    def test_unsupported_package_is_none(self, item, example_list):
        """Unknown package names do not declare anything."""
        entry = item("Text.")
        example_list(entry, package="expex")
        declaration = resolve_convention(entry)
        assert declaration.convention is Convention.NONE
        assert not declaration.is_declared

    def test_options_carried(self, example_list):
        """The declaring list's options come with the declaration."""
        lst = example_list(package="gb4e", item_command="\\exr", environment_options="[fn]")
        options = resolve_convention(lst).options
        assert options.item_command == "\\exr"
        assert options.environment_options == "[fn]"
