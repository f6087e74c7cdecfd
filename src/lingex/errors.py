"""Errors raised while exporting example lists."""

from typing import Optional


class ExampleExportError(Exception):
    """Base class for example export failures."""


class UnknownConventionError(ExampleExportError):
    """No renderer is registered for the convention resolved at a paragraph.

    Dispatch only routes registered conventions, so this signals a broken
    invariant rather than bad input.
    """

    def __init__(self, convention: str):
        self.convention = convention
        super().__init__(f"No renderer registered for convention: {convention}")


class MalformedItemError(ExampleExportError):
    """An example item does not hold exactly one paragraph."""

    def __init__(self, paragraph_count: int, tag: Optional[str] = None):
        self.paragraph_count = paragraph_count
        self.tag = tag
        where = f" (tag {tag!r})" if tag else ""
        super().__init__(
            f"Example item{where} has {paragraph_count} paragraph children, expected 1"
        )


class UnresolvedPlaceholderError(ExampleExportError):
    """Placeholder tokens survived list-level resolution."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"{count} judgment placeholder(s) left unresolved in list output")


class PlaceholderCollisionError(ExampleExportError):
    """Paragraph content contains the reserved placeholder token."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Content contains a reserved placeholder token: {text!r}")
