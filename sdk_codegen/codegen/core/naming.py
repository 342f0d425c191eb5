"""
Naming utilities for safe code generation.

Handles capitalization, word splitting and keyword conflicts for
identifiers derived from model element names.
"""

import re
from typing import FrozenSet, Iterable, Optional


_WORD_BOUNDARY = re.compile(r"(?<=[a-z])([A-Z])")


def capitalize_name(name: str) -> str:
    """Upper-case the first character of a name, leaving the rest untouched."""
    if not name:
        return name
    return name[0].upper() + name[1:]


def split_name(name: str) -> str:
    """
    Split a camel cased name into lower cased words.

    Example:
        "displayName" -> "display name"
    """
    return _WORD_BOUNDARY.sub(r" \1", name).lower()


class NameSanitizer:
    """Resolves identifier conflicts with a fixed set of reserved words.

    The sanitizer holds no state besides its keyword set, so the same
    instance can be shared freely between generation runs.
    """

    def __init__(self, reserved_words: Optional[Iterable[str]] = None, suffix: str = "_"):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Language reserved words (matched case-sensitively)
            suffix: Suffix appended to a conflicting name
        """
        self.reserved_words: FrozenSet[str] = frozenset(reserved_words or ())
        self.suffix = suffix

    def is_reserved(self, name: str) -> bool:
        return name in self.reserved_words

    def sanitize_name(self, name: str) -> str:
        """
        Sanitize a name for safe use in the target language.

        Args:
            name: Identifier to check

        Returns:
            The name itself, or the name with the conflict suffix appended
        """
        if self.is_reserved(name):
            return f"{name}{self.suffix}"
        return name

    def capitalized(self, name: str) -> str:
        """Capitalize and then sanitize a name."""
        return self.sanitize_name(capitalize_name(name))
