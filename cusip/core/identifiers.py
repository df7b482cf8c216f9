"""Validated CUSIP identifier and its CINS view.

A CUSIP is 9 ASCII bytes: a 6-character Issuer Number, a 2-character
Issue Number (both uppercase alphanumeric) and a 1-digit Check Digit over
the first 8 (the Payload), per ANSI X9.6.

Checks run in a fixed order and the first failure is reported: overall
length, then Issuer Number format, Issue Number format, Check Digit format,
and finally the Check Digit value. A string both too short and containing
bad characters therefore reports only the length.

Uppercase is required for parse() and validate(). parse_loose() accepts
mixed case and surrounding whitespace. There is deliberately no loose
validate: two different raw strings could loose-parse to the same CUSIP,
so counting loosely valid strings can overcount distinct identifiers.

The private-placement characters '*', '@' and '#' are not supported and
fail the format checks like any other symbol.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, final

from cusip.core.checksum import ALPHABET, compute_check_digit
from cusip.core.errors import (
    CUSIPError,
    IncorrectCheckDigit,
    InvalidCheckDigit,
    InvalidCUSIPLength,
    InvalidIssueNum,
    InvalidIssueNumLength,
    InvalidIssuerNum,
    InvalidIssuerNumLength,
    InvalidPayloadLength,
)
from cusip.core.result import Err, Ok

CUSIP_LENGTH: Final[int] = 9
PAYLOAD_LENGTH: Final[int] = 8
ISSUER_NUM_LENGTH: Final[int] = 6
ISSUE_NUM_LENGTH: Final[int] = 2

_ALNUM: Final[frozenset[int]] = frozenset(ALPHABET.encode("ascii"))
_DIGIT_BYTES: Final[frozenset[int]] = frozenset(b"0123456789")
_DIGITS: Final[frozenset[str]] = frozenset("0123456789")

# CINS country codes the standard leaves unassigned.
_CINS_EXTENDED: Final[frozenset[str]] = frozenset("IOZ")

_ASCII_UPPER: Final[dict[int, int]] = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
)


# ---------------------------------------------------------------------------
# Format validators
# ---------------------------------------------------------------------------
#
# Checks work on the UTF-8 bytes of the input, so every length is a byte
# count and any non-ASCII character fails the format checks.


def _utf8(text: str) -> bytes:
    # Lone surrogates encode too, so parsing never raises on str input.
    return text.encode("utf-8", errors="surrogatepass")


def _shown(raw: bytes) -> str:
    """Raw bytes as text for error values; undecodable bytes as \\xNN."""
    return raw.decode("utf-8", errors="backslashreplace")


def _validate_issuer_num_format(num: bytes) -> Ok[bytes] | Err[CUSIPError]:
    if len(num) != ISSUER_NUM_LENGTH or not all(b in _ALNUM for b in num):
        return Err(InvalidIssuerNum(was=_shown(num)))
    return Ok(num)


def _validate_issue_num_format(num: bytes) -> Ok[bytes] | Err[CUSIPError]:
    if len(num) != ISSUE_NUM_LENGTH or not all(b in _ALNUM for b in num):
        return Err(InvalidIssueNum(was=_shown(num)))
    return Ok(num)


def _validate_check_digit_format(cd: bytes) -> Ok[bytes] | Err[CUSIPError]:
    # Letters are valid elsewhere but never as a Check Digit.
    if len(cd) != 1 or cd[0] not in _DIGIT_BYTES:
        return Err(InvalidCheckDigit(was=_shown(cd)))
    return Ok(cd)


def _check_payload(payload: bytes) -> Ok[bytes] | Err[CUSIPError]:
    """Issuer then Issue Number format, on a Payload of known length 8."""
    match _validate_issuer_num_format(payload[0:6]):
        case Err(e):
            return Err(e)
    match _validate_issue_num_format(payload[6:8]):
        case Err(e):
            return Err(e)
    return Ok(payload)


def _check_cusip(value: bytes) -> Ok[str] | Err[CUSIPError]:
    """Run every check in order; Ok carries the value as text."""
    if len(value) != CUSIP_LENGTH:
        return Err(InvalidCUSIPLength(was=len(value)))
    match _check_payload(value[0:8]):
        case Err(e):
            return Err(e)
    match _validate_check_digit_format(value[8:9]):
        case Err(e):
            return Err(e)
    text = value.decode("ascii")
    expected = compute_check_digit(text[0:8])
    if text[8] != expected:
        return Err(IncorrectCheckDigit(was=text[8], expected=expected))
    return Ok(text)


def validate(value: str) -> bool:
    """True iff CUSIP.parse(value) would succeed. Never raises for str input."""
    return isinstance(_check_cusip(_utf8(value)), Ok)


# ---------------------------------------------------------------------------
# CUSIP
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True, order=True)
class CUSIP:
    """A CUSIP in confirmed valid format.

    Obtain one through parse(), parse_loose(), from_bytes(),
    build_from_payload() or build_from_parts(). Constructing directly with
    an invalid value raises TypeError, so no invalid instance can exist.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or isinstance(_check_cusip(_utf8(self.value)), Err):
            raise TypeError(f"CUSIP requires a valid 9-character CUSIP, got {self.value!r}")

    def __str__(self) -> str:
        return self.value

    # --- Entry points ---

    @staticmethod
    def parse(raw: str) -> Ok[CUSIP] | Err[CUSIPError]:
        """Strict parse: exactly 9 uppercase ASCII characters, no surrounding whitespace.

        Lengths count UTF-8 bytes, so parse(s) == from_bytes(s.encode()).
        """
        return CUSIP.from_bytes(_utf8(raw))

    @staticmethod
    def parse_loose(raw: str) -> Ok[CUSIP] | Err[CUSIPError]:
        """Upper-case ASCII letters and strip surrounding whitespace, then parse()."""
        return CUSIP.parse(raw.translate(_ASCII_UPPER).strip())

    @staticmethod
    def from_bytes(raw: bytes) -> Ok[CUSIP] | Err[CUSIPError]:
        """Strict parse of raw bytes.

        Non-ASCII bytes are reported by the format checks rather than as a
        decoding failure.
        """
        return _check_cusip(bytes(raw)).map(lambda v: CUSIP(value=v))

    @staticmethod
    def build_from_payload(payload: str) -> Ok[CUSIP] | Err[CUSIPError]:
        """Build from an 8-byte Payload, computing the Check Digit."""
        raw = _utf8(payload)
        if len(raw) != PAYLOAD_LENGTH:
            return Err(InvalidPayloadLength(was=len(raw)))
        match _check_payload(raw):
            case Err(e):
                return Err(e)
        return Ok(CUSIP(value=payload + compute_check_digit(payload)))

    @staticmethod
    def build_from_parts(issuer_num: str, issue_num: str) -> Ok[CUSIP] | Err[CUSIPError]:
        """Build from a 6-byte Issuer Number and 2-byte Issue Number."""
        issuer = _utf8(issuer_num)
        if len(issuer) != ISSUER_NUM_LENGTH:
            return Err(InvalidIssuerNumLength(was=len(issuer)))
        match _validate_issuer_num_format(issuer):
            case Err(e):
                return Err(e)
        issue = _utf8(issue_num)
        if len(issue) != ISSUE_NUM_LENGTH:
            return Err(InvalidIssueNumLength(was=len(issue)))
        match _validate_issue_num_format(issue):
            case Err(e):
                return Err(e)
        payload = issuer_num + issue_num
        return Ok(CUSIP(value=payload + compute_check_digit(payload)))

    # --- Accessors ---

    def issuer_num(self) -> str:
        return self.value[0:6]

    def issue_num(self) -> str:
        return self.value[6:8]

    def payload(self) -> str:
        """Everything except the Check Digit."""
        return self.value[0:8]

    def check_digit(self) -> str:
        return self.value[8]

    # --- CINS ---

    def is_cins(self) -> bool:
        """True if the first character is a letter, i.e. this is a CINS.

        Unassigned country codes 'I', 'O' and 'Z' still count here; see
        is_cins_base() and is_cins_extended() for the narrower tests.
        """
        return self.value[0] not in _DIGITS

    def is_cins_base(self) -> bool:
        """CINS with an assigned country code (not 'I', 'O' or 'Z')."""
        return self.is_cins() and self.value[0] not in _CINS_EXTENDED

    def is_cins_extended(self) -> bool:
        """CINS using one of the unassigned country codes 'I', 'O' or 'Z'."""
        return self.value[0] in _CINS_EXTENDED

    def cins_country_code(self) -> str | None:
        return self.value[0] if self.is_cins() else None

    def as_cins(self) -> CINS | None:
        return CINS.new(self)

    # --- Private use ---

    def has_private_issuer(self) -> bool:
        """True if the Issuer Number is reserved for private use.

        Either "???99?" (positions 4 and 5 both '9') or an all-digit Issuer
        Number in 990000-999999. This is narrower than the "99000A-99999Z"
        reading, which also accepts a letter in position 6: "99123A" is not
        private here. A reserved 'Z' in positions 5-6 is not treated as
        private: the standard's wording of that rule is ambiguous.
        """
        issuer = self.issuer_num()
        nines_in_middle = issuer[3] == "9" and issuer[4] == "9"
        numeric_99_block = issuer.startswith("99") and all(c in _DIGITS for c in issuer)
        return nines_in_middle or numeric_99_block

    def is_private_issue(self) -> bool:
        """True if the Issue Number is '90'-'99' or '9A'-'9Y' ('9Z' excluded)."""
        tens, ones = self.issue_num()
        return tens == "9" and (ones in _DIGITS or "A" <= ones <= "Y")

    def is_private_use(self) -> bool:
        return self.has_private_issuer() or self.is_private_issue()


# ---------------------------------------------------------------------------
# CINS
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class CINS:
    """CUSIP International Numbering System view of a CUSIP.

    A CUSIP whose first character is a letter (the country code). The view
    holds a reference to its CUSIP and copies nothing; it is built on
    demand by CUSIP.as_cins() or CINS.new().
    """

    cusip: CUSIP

    def __post_init__(self) -> None:
        if not isinstance(self.cusip, CUSIP) or not self.cusip.is_cins():
            raise TypeError(f"CINS requires a CUSIP starting with a letter, got {self.cusip!r}")

    def __str__(self) -> str:
        return self.cusip.value

    @staticmethod
    def new(cusip: CUSIP) -> CINS | None:
        """The CINS view of cusip, or None if it starts with a digit."""
        if not cusip.is_cins():
            return None
        return CINS(cusip=cusip)

    def as_cusip(self) -> CUSIP:
        return self.cusip

    def country_code(self) -> str:
        return self.cusip.value[0]

    def issuer_num(self) -> str:
        """The 5 characters following the country code."""
        return self.cusip.value[1:6]

    def issue_num(self) -> str:
        return self.cusip.value[6:8]

    def is_base(self) -> bool:
        return self.cusip.is_cins_base()

    def is_extended(self) -> bool:
        return self.cusip.is_cins_extended()
