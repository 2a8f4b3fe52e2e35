"""Name validation and normalization for catalog entries."""

from enum import Enum
import re
from typing import Optional

from megastore.domain.errors import (
    InvalidFormatError,
    MissingNameError,
    invalid_alphanumeric_format,
    invalid_letters_format,
    missing_name,
)

# Words joined by exactly one space; what a word may contain is checked per character
SINGLE_SPACED = re.compile(r"\S+(?: \S+)*")
WHITESPACE_RUN = re.compile(r"\s+")


class NameRule(str, Enum):
    """Format rule applied to an entity's names.

    STRICT names are letters only and get no repair. RELAXED names may also
    contain digits and get one spacing repair before being re-checked.
    """

    STRICT = "strict"
    RELAXED = "relaxed"


def is_present(name: Optional[str]) -> bool:
    """Return True if name is neither missing, empty nor blank."""
    return name is not None and name.strip() != ""


def _is_letter(char: str) -> bool:
    # isalpha() is false for numeric letters such as "²", "½" or "Ⅻ"
    return char.isalpha()


def _is_letter_or_digit(char: str) -> bool:
    return char.isalpha() or char.isdecimal()


def _single_spaced_words(name: str, allowed) -> bool:
    if SINGLE_SPACED.fullmatch(name) is None:
        return False
    return all(allowed(char) for char in name if char != " ")


def matches_letters_and_spaces(name: str) -> bool:
    """Check that name is letter words separated by exactly one space.

    Examples:
        "Juan Carlos" -> True
        " Juan" -> False
        "Juan  Carlos" -> False
        "Juan2" -> False
    """
    return _single_spaced_words(name, _is_letter)


def matches_alphanumeric(name: str) -> bool:
    """Same spacing rule as matches_letters_and_spaces, decimal digits allowed."""
    return _single_spaced_words(name, _is_letter_or_digit)


def normalize_spacing(name: str) -> str:
    """Collapse whitespace runs to a single space and trim the ends."""
    return WHITESPACE_RUN.sub(" ", name).strip()


def capitalize(name: str) -> str:
    """Capitalize each word: first character upper-case, rest lower-case.

    Words are re-joined with single spaces, so the result is stable under a
    second application.
    """
    return " ".join(word.capitalize() for word in name.split())


def validate_name(name: Optional[str], rule: NameRule, label: str) -> str:
    """Validate a candidate name and return its normalized form.

    The capitalized result is checked against the rule again: case mapping
    can turn a letter into several code points (e.g. "İ" lower-cases to "i"
    plus a combining dot), and such a name could never be saved again.

    Args:
        name: Candidate name as received
        rule: Format rule of the entity the name belongs to
        label: Entity label used in error messages (e.g., "branch")

    Returns:
        Capitalized name

    Raises:
        MissingNameError: If name is absent or blank
        InvalidFormatError: If name does not satisfy the rule
    """
    if not is_present(name):
        raise MissingNameError(missing_name(label))

    if rule is NameRule.STRICT:
        if not matches_letters_and_spaces(name):
            raise InvalidFormatError(invalid_letters_format(name))
        normalized = capitalize(name)
        if not matches_letters_and_spaces(normalized):
            raise InvalidFormatError(invalid_letters_format(name))
        return normalized

    candidate = name
    if not matches_alphanumeric(candidate):
        candidate = normalize_spacing(candidate)
        if candidate == "" or not matches_alphanumeric(candidate):
            raise InvalidFormatError(invalid_alphanumeric_format(name))
    normalized = capitalize(candidate)
    if not matches_alphanumeric(normalized):
        raise InvalidFormatError(invalid_alphanumeric_format(name))
    return normalized
