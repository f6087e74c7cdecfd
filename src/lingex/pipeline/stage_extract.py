"""Annotation Extraction Stage - Split example text into its annotations.

Pulls two optional annotations out of an item's rendered paragraph text:
- a label command (\\label{KEY}) anywhere in the text
- a judgment marker (*, ??, %, #, ...) at the very start

Labels are removed first, so a label written before the judgment does not
hide it. Judgments are only recognised at the start so that a question mark
ending a sentence is never mistaken for one.
"""

import re
from typing import Optional

from lingex.models import ExtractedAnnotations


# Label command with the whitespace around it
LABEL_PATTERN = r"\s*(\\label\{[A-Za-z0-9_.:-]+\})\s*"

# Run of judgment symbols followed by at least one whitespace character
JUDGMENT_PATTERN = r"^\s*([*?%#\\]+)\s+"

# Same run, which may also end the text once a label has been removed
JUDGMENT_BEFORE_LABEL_PATTERN = r"^\s*([*?%#\\]+)(?:\s+|$)"


class AnnotationExtractor:
    """Extracts label and judgment annotations from rendered text."""

    def __init__(self):
        self.label_pattern = re.compile(LABEL_PATTERN)
        self.judgment_pattern = re.compile(JUDGMENT_PATTERN)
        self.judgment_before_label_pattern = re.compile(JUDGMENT_BEFORE_LABEL_PATTERN)

    def extract(self, text: str) -> ExtractedAnnotations:
        """Split rendered text into label, judgment and proper text.

        Args:
            text: Rendered inline content of a paragraph.

        Returns:
            ExtractedAnnotations. With neither annotation present,
            proper_text is the input unchanged.
        """
        label, remainder = self.split_label(text)
        judgment, proper_text = self.split_judgment(remainder, label_removed=label is not None)
        return ExtractedAnnotations(
            label=label,
            judgment=judgment,
            proper_text=proper_text,
        )

    def split_label(self, text: str) -> tuple[Optional[str], str]:
        """Remove the first label command from text.

        Returns:
            Tuple of (label or None, text without the label)
        """
        match = self.label_pattern.search(text)
        if match is None:
            return None, text

        before = text[: match.start()]
        after = text[match.end() :]
        # Keep the words on either side of the label apart
        separator = " " if before.strip() and after.strip() else ""
        return match.group(1), (before + separator + after).strip()

    def split_judgment(
        self,
        text: str,
        label_removed: bool = False,
    ) -> tuple[Optional[str], str]:
        """Remove a leading judgment marker from text.

        Args:
            text: Text with any label already removed.
            label_removed: Whether a label was removed, in which case the
                judgment may be all that is left (e.g. "* \\label{set}").

        Returns:
            Tuple of (judgment or None, remaining text)
        """
        pattern = self.judgment_before_label_pattern if label_removed else self.judgment_pattern
        match = pattern.match(text)
        if match is None:
            return None, text
        return match.group(1), text[match.end() :]


_default_extractor = AnnotationExtractor()


def extract(text: str) -> ExtractedAnnotations:
    """Extract annotations with the default extractor."""
    return _default_extractor.extract(text)
