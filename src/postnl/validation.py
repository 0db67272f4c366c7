"""Field-level validators shared by the request entities.

Every check accepts ``None`` and hands it back untouched so a field can
always be cleared. Any other value is either returned in normalized form or
rejected with :class:`~postnl.exceptions.InvalidArgumentError`.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Any, Optional

from .exceptions import InvalidArgumentError

DATE_PATTERN = r"(?:0[1-9]|[1-2][0-9]|3[0-1])-(?:0[1-9]|1[0-2])-[0-9]{4}"
TIME_PATTERN = r"(?:2[0-3]|[01]?[0-9]):(?:[0-5]?[0-9]):(?:[0-5]?[0-9])"
STRICT_TIME_PATTERN = r"(?:2[0-3]|[01][0-9]):[0-5][0-9]:[0-5][0-9]"

_DATE_RE = re.compile(DATE_PATTERN)
_TIME_RE = re.compile(TIME_PATTERN)
_DATE_TIME_RE = re.compile(f"{DATE_PATTERN} {STRICT_TIME_PATTERN}")
_COORDINATE_RE = re.compile(r"\d{1,2}\.\d{1,15}")
_INTEGER_RE = re.compile(r"\d+")

POSTCODE_MIN_LENGTH = 1
POSTCODE_MAX_LENGTH = 10
CITY_MAX_LENGTH = 35
STREET_MAX_LENGTH = 95
INTEGER_MAX_DIGITS = 10
NL_BE_COUNTRY_CODES = frozenset({"NL", "BE"})

logger = logging.getLogger(__name__)


def _reject(label: str, value: Any, reason: str) -> InvalidArgumentError:
    logger.debug(f"Rejected {label} {value!r}: {reason}")
    return InvalidArgumentError(f"Invalid {label} {value!r}: {reason}")


def _require_text(label: str, value: Any) -> str:
    if not isinstance(value, str):
        raise _reject(label, value, f"expected a string, got {type(value).__name__}")
    return value


def postcode(value: Optional[str]) -> Optional[str]:
    """Validate a postal code: between 1 and 10 characters."""

    if value is None:
        return None
    text = _require_text("postal code", value)
    if not POSTCODE_MIN_LENGTH <= len(text) <= POSTCODE_MAX_LENGTH:
        raise _reject(
            "postal code",
            value,
            f"length must be between {POSTCODE_MIN_LENGTH} and {POSTCODE_MAX_LENGTH} characters",
        )
    return text


def city(value: Optional[str]) -> Optional[str]:
    """Validate a city name: at most 35 characters."""

    if value is None:
        return None
    text = _require_text("city", value)
    if len(text) > CITY_MAX_LENGTH:
        raise _reject("city", value, f"longer than {CITY_MAX_LENGTH} characters")
    return text


def street(value: Optional[str]) -> Optional[str]:
    """Validate a street name: at most 95 characters."""

    if value is None:
        return None
    text = _require_text("street", value)
    if len(text) > STREET_MAX_LENGTH:
        raise _reject("street", value, f"longer than {STREET_MAX_LENGTH} characters")
    return text


def integer(value: Any) -> Optional[int]:
    """Coerce ``value`` to an integer of at most 10 digits.

    Accepts non-negative ints, integral floats and digit strings (surrounding
    whitespace is ignored). Booleans are rejected even though they subclass
    ``int``.
    """

    if value is None:
        return None
    if isinstance(value, bool):
        raise _reject("integer", value, "booleans are not integers")
    if isinstance(value, float):
        if not value.is_integer():
            raise _reject("integer", value, "not a whole number")
        value = int(value)
    if isinstance(value, int):
        text = str(value)
    elif isinstance(value, str):
        text = value.strip()
    else:
        raise _reject("integer", value, f"expected a number, got {type(value).__name__}")

    if _INTEGER_RE.fullmatch(text) is None:
        raise _reject("integer", value, "not numeric")
    if len(text) > INTEGER_MAX_DIGITS:
        raise _reject("integer", value, f"more than {INTEGER_MAX_DIGITS} digits")
    return int(text)


def date(value: Optional[str]) -> Optional[str]:
    """Validate a ``DD-MM-YYYY`` date.

    Only the pattern is checked, so ``31-02-2020`` is accepted.
    """

    if value is None:
        return None
    text = _require_text("date", value)
    if _DATE_RE.fullmatch(text) is None:
        raise _reject("date", value, "expected DD-MM-YYYY")
    return text


def time(value: Optional[str]) -> Optional[str]:
    """Validate an ``HH:MM:SS`` time with hours 00-23."""

    if value is None:
        return None
    text = _require_text("time", value)
    if _TIME_RE.fullmatch(text) is None:
        raise _reject("time", value, "expected HH:MM:SS")
    return text


def date_time(value: Optional[str]) -> Optional[str]:
    """Validate a ``DD-MM-YYYY HH:MM:SS`` timestamp."""

    if value is None:
        return None
    text = _require_text("date-time", value)
    if _DATE_TIME_RE.fullmatch(text) is None:
        raise _reject("date-time", value, "expected DD-MM-YYYY HH:MM:SS")
    return text


def coordinate(value: Any) -> Optional[float]:
    """Validate a decimal-degree coordinate and return it as a float.

    The textual form must have one or two integer digits and one to fifteen
    fractional digits, e.g. ``52.156439``. Numbers are rendered with 14
    significant digits first, so ``52`` is rejected just like ``"52"``.
    """

    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise _reject("coordinate", value, f"expected a number, got {type(value).__name__}")
    text = value.strip() if isinstance(value, str) else f"{float(value):.14g}"
    if _COORDINATE_RE.fullmatch(text) is None:
        raise _reject("coordinate", value, "expected 1-2 integer digits and 1-15 decimals")
    return float(text)


def iso_alpha2_country_code_nl_be(value: Optional[str]) -> Optional[str]:
    """Validate a country code that must be exactly ``NL`` or ``BE``."""

    if value is None:
        return None
    text = _require_text("country code", value)
    if text not in NL_BE_COUNTRY_CODES:
        raise _reject("country code", value, "only NL and BE are supported")
    return text


def delivery_options(value: Any) -> Optional[list[str]]:
    """Normalize delivery options to a list of option codes.

    A single code is wrapped in a list. Enum members contribute their value.
    """

    if value is None:
        return None
    items = [value] if isinstance(value, (str, Enum)) else value
    try:
        items = list(items)
    except TypeError:
        raise _reject("delivery options", value, "expected a code or a sequence of codes") from None

    codes: list[str] = []
    for item in items:
        code = item.value if isinstance(item, Enum) else item
        if not isinstance(code, str) or not code.strip():
            raise _reject("delivery options", value, f"invalid option code {item!r}")
        codes.append(code.strip())
    return codes
