"""
Creative title convention

Generated descriptions embed a model-chosen title in double asterisks,
e.g. "**Golden Hour**\\nA warm gradient...". This module turns that free
text into a title and a body. It never raises on arbitrary input.
"""

import re
from dataclasses import dataclass
from typing import Optional


# First **...** span whose content is not blank
_TITLE_PATTERN = re.compile(r"\*\*(?!\s*\*\*)(.+?)\*\*", re.DOTALL)

# Punctuation left dangling once an inline title is cut out
_PUNCTUATION = ",.;:!?"


@dataclass(frozen=True)
class ParsedDescription:
    """
    Description split along the creative title convention.

    Attributes:
        title: Title found between double asterisks, or None
        body: Remaining description text
    """
    title: Optional[str]
    body: str

    @property
    def has_title(self) -> bool:
        return self.title is not None


def parse_description(text: str) -> ParsedDescription:
    """
    Split a generated description into its creative title and body.

    An inline title is cut out of the sentence it sits in. Punctuation that
    followed it is attached to the preceding text, or dropped when that text
    already ends in punctuation, so "This piece, **X**, shows" becomes
    "This piece, shows".

    Args:
        text: Description as returned by the model

    Returns:
        ParsedDescription; title is None when no delimited title exists
    """
    text = text or ""
    for match in _TITLE_PATTERN.finditer(text):
        title = match.group(1).strip()
        if not title:
            continue
        head, tail = text[:match.start()], text[match.end():]
        before, after = head.rstrip(), tail.lstrip()
        gap = head[len(before):] + tail[:len(tail) - len(after)]
        if after[:1] and after[0] in _PUNCTUATION and (not before or before[-1] in _PUNCTUATION):
            after = after[1:].lstrip()
        if after[:1] and after[0] in _PUNCTUATION:
            joiner = ""
        else:
            joiner = ("\n" if "\n" in gap else " ") if before and after else ""
        body = f"{before}{joiner}{after}".strip()
        return ParsedDescription(title=title, body=body)

    return ParsedDescription(title=None, body=text.strip())


def extract_title(text: str) -> Optional[str]:
    """Return only the creative title of a description, if any."""
    return parse_description(text).title
