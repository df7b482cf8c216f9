"""Modulus 10 "double-add-double" checksum, in two independent strategies.

Scanning left to right and counting from one, every even position's value
is doubled; every value (doubled or not) is folded to one digit by adding
its tens and ones digits; the folded values are summed mod 10 and the check
digit is (10 - sum) % 10.

checksum_simple() computes this directly. checksum_table() walks right to
left over two precomputed tables. Both must agree on every input: the
redundancy is how the algorithm is verified, so neither replaces the other.

The running sum is kept within one byte, reducing it mod 10 early whenever
another step could push it past ACCUMULATOR_MAX.
"""

from __future__ import annotations

from typing import Final

_DIGITS: Final[str] = "0123456789"
_LETTERS: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

ALPHABET: Final[str] = _DIGITS + _LETTERS
"""The 36 symbols a CUSIP Payload may contain, in character-value order."""

ACCUMULATOR_MAX: Final[int] = 0xFF


def char_value(c: str) -> int:
    """Numeric value of one character: '0'-'9' -> 0-9, 'A'-'Z' -> 10-35.

    Callers must have format-validated the input already. Anything outside
    the alphabet is a contract violation and raises ValueError rather than
    yielding a wrong checksum.
    """
    if len(c) == 1 and "0" <= c <= "9":
        return ord(c) - ord("0")
    if len(c) == 1 and "A" <= c <= "Z":
        return ord(c) - ord("A") + 10
    raise ValueError(f"character {c!r} is not an uppercase ASCII alphanumeric")


def _fold(v: int) -> int:
    return v // 10 + v % 10


# Largest single-step addition for checksum_simple: 'Y' (34) doubled is 68,
# which folds to 6 + 8 = 14.
_MAX_STEP_SIMPLE: Final[int] = max(
    max(_fold(v), _fold(v * 2)) for v in range(len(ALPHABET))
)
MAX_ACCUM_SIMPLE: Final[int] = ACCUMULATOR_MAX - _MAX_STEP_SIMPLE

# Table entries are folded and reduced mod 10, so a step adds at most 9.
DOUBLED_FOLDED: Final[tuple[int, ...]] = tuple(
    _fold(v * 2) % 10 for v in range(len(ALPHABET))
)
PLAIN_FOLDED: Final[tuple[int, ...]] = tuple(_fold(v) % 10 for v in range(len(ALPHABET)))

_MAX_STEP_TABLE: Final[int] = max(DOUBLED_FOLDED + PLAIN_FOLDED)
MAX_ACCUM_TABLE: Final[int] = ACCUMULATOR_MAX - _MAX_STEP_TABLE


def checksum_simple(s: str) -> int:
    """Check digit value 0-9 for s, computed directly left to right.

    No attempt is made to check that s is a Payload in length or shape.
    """
    total = 0
    for i, c in enumerate(s):
        v = char_value(c)
        vv = v * 2 if (i + 1) % 2 == 0 else v
        # Cannot trigger on input shorter than 19 characters.
        if total > MAX_ACCUM_SIMPLE:
            total %= 10
        total += _fold(vv)
    total %= 10
    return (10 - total) % 10


def checksum_table(s: str) -> int:
    """Check digit value 0-9 for s, computed right to left from the tables.

    Counting from zero at the right, a position is doubled when its index
    has the same parity as len(s). For even-length input (every 8-character
    Payload) that is simply every even index, the same walk ISIN uses.
    """
    total = 0
    doubled_parity = len(s) & 1
    for i, c in enumerate(reversed(s)):
        v = char_value(c)
        step = DOUBLED_FOLDED[v] if (i & 1) == doubled_parity else PLAIN_FOLDED[v]
        # Cannot trigger on input shorter than 29 characters.
        if total > MAX_ACCUM_TABLE:
            total %= 10
        total += step
    total %= 10
    return (10 - total) % 10


def compute_check_digit(payload: str) -> str:
    """The Check Digit character '0'-'9' for payload.

    Any length is accepted; every character must be in ALPHABET or
    ValueError is raised.
    """
    return _DIGITS[checksum_table(payload)]
