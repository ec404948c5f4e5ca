"""
Character classes — ASCII predicates used by the transition functions.

Every predicate takes a single character and returns False for anything
else (empty strings, longer strings, non-ASCII characters).
"""

LOCAL_EMAIL_SYMBOLS = frozenset("._%+-")


def _code(ch: str) -> int:
    if len(ch) != 1:
        return -1
    return ord(ch)


def is_uppercase(ch: str) -> bool:
    """ASCII A-Z."""
    return 65 <= _code(ch) <= 90


def is_lowercase(ch: str) -> bool:
    """ASCII a-z."""
    return 97 <= _code(ch) <= 122


def is_letter(ch: str) -> bool:
    return is_uppercase(ch) or is_lowercase(ch)


def is_digit(ch: str) -> bool:
    """ASCII 0-9."""
    return 48 <= _code(ch) <= 57


def is_alphanumeric(ch: str) -> bool:
    return is_letter(ch) or is_digit(ch)


def is_local_email_char(ch: str) -> bool:
    """Characters allowed before the @: alphanumerics and ._%+-"""
    return is_alphanumeric(ch) or ch in LOCAL_EMAIL_SYMBOLS


def is_domain_char(ch: str) -> bool:
    """Characters allowed anywhere after the @."""
    return is_alphanumeric(ch) or ch == "." or ch == "-"


def is_domain_label_char(ch: str) -> bool:
    """Characters allowed inside one dot-separated domain label."""
    return is_alphanumeric(ch) or ch == "-"
