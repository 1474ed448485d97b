"""Element naming helpers."""

import re
from functools import cmp_to_key

_HYPHEN_LOWER = re.compile(r"-([a-z])")
_DIGITS = re.compile(r"[0-9]+")
_ASCII_DIGITS = "0123456789"


def camel_case(name: str) -> str:
    """Convert a hyphenated element name to camelCase.

    >>> camel_case("the-things")
    'theThings'
    """
    return _HYPHEN_LOWER.sub(lambda m: m.group(1).upper(), name)


def singular(list_name: str) -> str:
    """Guess the singular form of a plural list name.

    English heuristic only: ``statuses`` -> ``status``,
    ``categories`` -> ``category``, ``things`` -> ``thing``.
    """
    if list_name.endswith("ses"):
        return list_name[:-2]
    if list_name.endswith("ies"):
        return list_name[:-3] + "y"
    if list_name.endswith("s"):
        return list_name[:-1]
    return list_name


def name_compare(a: str | None, b: str | None) -> int:
    """Compare two names in natural order.

    Letters compare case-insensitively and embedded digit runs compare as
    whole numbers, so ``"F10"`` sorts after ``"F9"``. Empty names sort first.

    Unlike the ordering of the older site, a name sorts before any longer
    name it is a prefix of, and names whose digit runs are equal fall back
    to comparing the full lowered text.

    Returns:
        A negative number, zero or a positive number
    """
    if not a and not b:
        return 0
    if not a:
        return -1
    if not b:
        return 1

    a = a.lower()
    b = b.lower()
    if a == b:
        return 0

    # Skip the common prefix
    i = 0
    for ca, cb in zip(a, b, strict=False):
        if ca != cb:
            break
        i += 1
    if i >= len(a):
        return -1
    if i >= len(b):
        return 1

    # Back up to the start of a digit run split by the prefix
    while i > 0 and a[i - 1] in _ASCII_DIGITS:
        i -= 1

    a_digits = _DIGITS.match(a, i)
    b_digits = _DIGITS.match(b, i)
    if a_digits and b_digits:
        an = int(a_digits.group())
        bn = int(b_digits.group())
        if an != bn:
            return an - bn

    return (a > b) - (a < b)


name_sort_key = cmp_to_key(name_compare)
