"""Whitespace collapsing on printed source text."""

import re

# String and rune literals are matched first so the rules never touch their contents.
_LITERAL = r"\"(?:\\.|[^\"\\\n])*\"|`[^`]*`|'(?:\\.|[^'\\\n])*'"

# Applied in order; each pattern's first group is a literal to pass through.
RULES = (
    (re.compile(rf"({_LITERAL})|\s+"), " "),
    (re.compile(rf"({_LITERAL})|\{{\s+"), "{"),
    (re.compile(rf"({_LITERAL})|\s+\}}"), "}"),
    (re.compile(rf"({_LITERAL})|;\s*"), ";"),
)


class TextCompactor:
    """Remove the cosmetic whitespace the printer leaves behind.

    1. collapse each whitespace run to one space
    2. drop the space after ``{``
    3. drop the space before ``}``
    4. drop whitespace after ``;``
    """

    def __init__(self, rules=RULES):
        self.rules = rules

    def compact(self, text: str) -> str:
        for pattern, replacement in self.rules:
            text = pattern.sub(lambda m, r=replacement: m.group(1) or r, text)
        return text.strip()
