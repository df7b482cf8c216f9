"""Error value hierarchy — no parse or build function raises exceptions.

Every error is a frozen dataclass value that can be pattern-matched,
compared, hashed and serialized. Base class CUSIPError, eight @final
subclasses, one per way parsing or building can fail. Each carries the
offending raw value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, final


@dataclass(frozen=True, slots=True)
class CUSIPError:
    """Base error value. NOT @final: has subclasses."""

    code: ClassVar[str] = "CUSIP_ERROR"

    @property
    def message(self) -> str:
        return "invalid CUSIP"

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, object]:
        """Serialize to dict with stable keys: code, message, then variant fields."""
        return {"code": self.code, "message": self.message}


# ---------------------------------------------------------------------------
# Length errors (checked before any character is inspected)
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class InvalidCUSIPLength(CUSIPError):
    """The CUSIP is not exactly 9 bytes (parse)."""

    code: ClassVar[str] = "INVALID_CUSIP_LENGTH"

    was: int

    @property
    def message(self) -> str:
        return f"CUSIP must be 9 bytes, got {self.was}"

    def to_dict(self) -> dict[str, object]:
        return {**CUSIPError.to_dict(self), "was": self.was}


@final
@dataclass(frozen=True, slots=True)
class InvalidPayloadLength(CUSIPError):
    """The Payload is not exactly 8 bytes (build from payload)."""

    code: ClassVar[str] = "INVALID_PAYLOAD_LENGTH"

    was: int

    @property
    def message(self) -> str:
        return f"Payload must be 8 bytes, got {self.was}"

    def to_dict(self) -> dict[str, object]:
        return {**CUSIPError.to_dict(self), "was": self.was}


@final
@dataclass(frozen=True, slots=True)
class InvalidIssuerNumLength(CUSIPError):
    """The Issuer Number is not exactly 6 bytes (build from parts)."""

    code: ClassVar[str] = "INVALID_ISSUER_NUM_LENGTH"

    was: int

    @property
    def message(self) -> str:
        return f"Issuer Number must be 6 bytes, got {self.was}"

    def to_dict(self) -> dict[str, object]:
        return {**CUSIPError.to_dict(self), "was": self.was}


@final
@dataclass(frozen=True, slots=True)
class InvalidIssueNumLength(CUSIPError):
    """The Issue Number is not exactly 2 bytes (build from parts)."""

    code: ClassVar[str] = "INVALID_ISSUE_NUM_LENGTH"

    was: int

    @property
    def message(self) -> str:
        return f"Issue Number must be 2 bytes, got {self.was}"

    def to_dict(self) -> dict[str, object]:
        return {**CUSIPError.to_dict(self), "was": self.was}


# ---------------------------------------------------------------------------
# Format errors
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class InvalidIssuerNum(CUSIPError):
    """The Issuer Number is not six uppercase ASCII alphanumerics."""

    code: ClassVar[str] = "INVALID_ISSUER_NUM"

    was: str

    @property
    def message(self) -> str:
        return f"Issuer Number {self.was!r} is not six uppercase ASCII alphanumeric characters"

    def to_dict(self) -> dict[str, object]:
        return {**CUSIPError.to_dict(self), "was": self.was}


@final
@dataclass(frozen=True, slots=True)
class InvalidIssueNum(CUSIPError):
    """The Issue Number is not two uppercase ASCII alphanumerics."""

    code: ClassVar[str] = "INVALID_ISSUE_NUM"

    was: str

    @property
    def message(self) -> str:
        return f"Issue Number {self.was!r} is not two uppercase ASCII alphanumeric characters"

    def to_dict(self) -> dict[str, object]:
        return {**CUSIPError.to_dict(self), "was": self.was}


@final
@dataclass(frozen=True, slots=True)
class InvalidCheckDigit(CUSIPError):
    """The Check Digit is not one ASCII decimal digit."""

    code: ClassVar[str] = "INVALID_CHECK_DIGIT"

    was: str

    @property
    def message(self) -> str:
        return f"Check Digit {self.was!r} is not one ASCII decimal digit"

    def to_dict(self) -> dict[str, object]:
        return {**CUSIPError.to_dict(self), "was": self.was}


# ---------------------------------------------------------------------------
# Checksum error
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class IncorrectCheckDigit(CUSIPError):
    """The Check Digit is well-formed but does not match the Payload."""

    code: ClassVar[str] = "INCORRECT_CHECK_DIGIT"

    was: str
    expected: str

    @property
    def message(self) -> str:
        return f"incorrect Check Digit {self.was!r}, expected {self.expected!r}"

    def to_dict(self) -> dict[str, object]:
        return {**CUSIPError.to_dict(self), "was": self.was, "expected": self.expected}
