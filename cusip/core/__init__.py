"""cusip.core — public API for the checksum, error values and identifier types."""

from cusip.core.checksum import (
    checksum_simple as checksum_simple,
)
from cusip.core.checksum import (
    checksum_table as checksum_table,
)
from cusip.core.checksum import (
    compute_check_digit as compute_check_digit,
)
from cusip.core.errors import (
    CUSIPError as CUSIPError,
)
from cusip.core.errors import (
    IncorrectCheckDigit as IncorrectCheckDigit,
)
from cusip.core.errors import (
    InvalidCheckDigit as InvalidCheckDigit,
)
from cusip.core.errors import (
    InvalidCUSIPLength as InvalidCUSIPLength,
)
from cusip.core.errors import (
    InvalidIssueNum as InvalidIssueNum,
)
from cusip.core.errors import (
    InvalidIssueNumLength as InvalidIssueNumLength,
)
from cusip.core.errors import (
    InvalidIssuerNum as InvalidIssuerNum,
)
from cusip.core.errors import (
    InvalidIssuerNumLength as InvalidIssuerNumLength,
)
from cusip.core.errors import (
    InvalidPayloadLength as InvalidPayloadLength,
)
from cusip.core.identifiers import (
    CINS as CINS,
)
from cusip.core.identifiers import (
    CUSIP as CUSIP,
)
from cusip.core.identifiers import (
    validate as validate,
)
from cusip.core.result import (
    Err as Err,
)
from cusip.core.result import (
    Ok as Ok,
)
from cusip.core.result import (
    Result as Result,
)
from cusip.core.result import (
    unwrap as unwrap,
)
