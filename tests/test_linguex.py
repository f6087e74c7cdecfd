"""Tests for linguex rendering stage."""

import pytest


class TestLinguexTopLevel:
    """Tests for top-level linguex examples."""

    def test_judged_example_with_label(self, exporter, item, target, example_list):
        """Judgment directly follows \\ex., then label, then text."""
        lst = example_list(item("* This is bad. ", target("s:x")), package="linguex")
        assert exporter.export_text(lst) == "\\ex.*\\label{s:x}This is bad.\\par\n"

    def test_plain_examples(self, exporter, item, example_list):
        """The list adds nothing around its items."""
        lst = example_list(item("One."), item("Two."), package="linguex")
        assert exporter.export_text(lst) == "\\ex.One.\\par\n\\ex.Two.\\par\n"

    def test_tag_after_command(self, exporter, item, example_list):
        """Tags are bracketed right after the command."""
        lst = example_list(item("? Odd.", tag="(7)"), package="linguex")
        assert exporter.export_text(lst) == "\\ex.[(7)]?Odd.\\par\n"


class TestLinguexSublists:
    """Tests for nested linguex lists."""

    @pytest.mark.parametrize("count", [2, 3, 5])
    def test_sublist_commands(self, exporter, item, example_list, count):
        """First item opens with \\a., later ones with \\b., last closes with \\z."""
        inner = example_list(*[item(f"S{i}.") for i in range(count)])
        text = exporter.export_text(example_list(item("Intro", sublist=inner), package="linguex"))

        middle = "".join(f"\\b.S{i}.\n" for i in range(1, count - 1))
        expected = f"\\ex.Intro\\a.S0.\n{middle}\\b.S{count - 1}.\\z.\n\\par\n"
        assert text == expected

    def test_single_item_sublist(self, exporter, item, example_list):
        """A lone sub-item both opens and closes the sub-list."""
        inner = example_list(item("Only."))
        text = exporter.export_text(example_list(item("Intro", sublist=inner), package="linguex"))
        assert text == "\\ex.Intro\\a.Only.\\z.\n\\par\n"

    def test_full_nested_example(self, exporter, item, example_list):
        """Top-level example with a tagged, judged sub-list."""
        inner = example_list(item("First.", tag="\\alpha)"), item("* Second."))
        text = exporter.export_text(example_list(item("Intro", sublist=inner), package="linguex"))
        assert text == "\\ex.Intro\\a.[\\alpha)]First.\n\\b.*Second.\\z.\n\\par\n"

    def test_item_command_override_top_level_only(self, exporter, item, example_list):
        """An item command override replaces \\ex. but not \\a. or \\b."""
        inner = example_list(item("A."), item("B."))
        lst = example_list(item("Intro", sublist=inner), package="linguex", item_command="\\exg.")
        assert exporter.export_text(lst) == "\\exg.Intro\\a.A.\n\\b.B.\\z.\n\\par\n"


    def test_judged_intro_with_label(self, exporter, item, target, example_list):
        """A judgment followed only by a label stays before the label."""
        inner = example_list(item("Sub."))
        lst = example_list(item("* ", target("set"), sublist=inner), package="linguex")
        assert exporter.export_text(lst) == "\\ex.*\\label{set}\\a.Sub.\\z.\n\\par\n"
