"""Per-type validation and normalisation of ADIF field values.

`validate_and_normalize` looks the type up in `_VALIDATORS` and then in
`_NORMALISERS`; supporting a new type means adding an entry to one or both
tables. Types with no validator are accepted as they are (the ADIF rules for
many of them are too loose to be worth checking).
"""

from __future__ import annotations

import logging
import string
from typing import Callable, Dict

from .catalogue import (
    BANDS,
    DXCC_ENTITIES,
    MODES,
    POSITIVE_INTEGER_RANGES,
    QSL_RECEIVED,
    UPPERCASE_FIELDS,
    SemanticType,
)
from .errors import EmptyValue, InvalidCharacter, InvalidLength, InvalidValue

logger = logging.getLogger(__name__)

DIGITS = frozenset("0123456789")

Validator = Callable[[str, str], None]
Normaliser = Callable[[str], str]

# Case folding is ASCII only; str.upper would turn "\xdf" into "SS".
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _upper(value: str) -> str:
    return value.translate(_TO_UPPER)


def _lower(value: str) -> str:
    return value.translate(_TO_LOWER)


def _all_digits(value: str) -> bool:
    """True if every character is an ASCII digit (vacuously true for "")."""
    return all(c in DIGITS for c in value)


def _days_in_month(year: int, month: int) -> int:
    if month in (4, 6, 9, 11):
        return 30
    if month == 2:
        # Every fourth year is a leap year; 2100 is (wrongly) treated as one.
        return 29 if year % 4 == 0 else 28
    return 31


# Validators. Each takes (name, value) and raises on failure.

def _check_date(name: str, value: str) -> None:
    """YYYYMMDD, no earlier than 1930."""
    if not _all_digits(value):
        raise InvalidCharacter("Invalid character", name, value)
    if len(value) != 8:
        raise InvalidLength("Invalid length", name, value)
    year = int(value[0:4])
    if year < 1930:
        raise InvalidValue("Invalid year", name, value)
    month = int(value[4:6])
    if month < 1 or month > 12:
        raise InvalidValue("Invalid month", name, value)
    day = int(value[6:8])
    if day < 1 or day > _days_in_month(year, month):
        raise InvalidValue("Invalid day number", name, value)


def _check_time(name: str, value: str) -> None:
    """HHMM or HHMMSS."""
    if not _all_digits(value):
        raise InvalidCharacter("Invalid character", name, value)
    if len(value) not in (4, 6):
        raise InvalidLength("Invalid length", name, value)
    if int(value[0:2]) > 23:
        raise InvalidValue("Invalid hours value", name, value)
    if int(value[2:4]) > 59:
        raise InvalidValue("Invalid minutes value", name, value)
    if len(value) == 6 and int(value[4:6]) > 59:
        raise InvalidValue("Invalid seconds value", name, value)


def _check_grid_square(name: str, value: str) -> None:
    """Maidenhead locator of 2, 4, 6 or 8 characters.

    Field pair A-R, square pair 0-9, subsquare pair A-X, extended square
    pair 0-9. Letters are case-insensitive.
    """
    if len(value) not in (2, 4, 6, 8):
        raise InvalidLength("Invalid length", name, value)

    uc = _upper(value)
    legal = ("AR", "09", "AX", "09")
    for posn, c in enumerate(uc):
        lo, hi = legal[posn // 2]
        if c < lo or c > hi:
            raise InvalidValue("Invalid value", name, value)


def _check_band(name: str, value: str) -> None:
    if _lower(value) not in BANDS:
        raise InvalidValue("Invalid value", name, value)


def _check_mode(name: str, value: str) -> None:
    if _upper(value) not in MODES:
        raise InvalidValue("Invalid value", name, value)


def _check_qsl_received(name: str, value: str) -> None:
    if _upper(value) not in QSL_RECEIVED:
        raise InvalidValue("Invalid value", name, value)


def _check_dxcc_entity_code(name: str, value: str) -> None:
    if not value or not _all_digits(value):
        raise InvalidValue("Invalid character", name, value)
    if int(value) not in DXCC_ENTITIES:
        raise InvalidValue("Invalid DXCC entity code", name, value)


def _check_positive_integer(name: str, value: str) -> None:
    """Unsigned digits, leading zeroes allowed; some fields have a narrower range."""
    if not value:
        raise EmptyValue("Empty value", name, value)
    if not _all_digits(value):
        raise InvalidCharacter("Invalid character", name, value)

    limits = POSITIVE_INTEGER_RANGES.get(name)
    if limits is not None:
        lo, hi = limits
        if not lo <= int(value) <= hi:
            raise InvalidValue("Invalid value", name, value)


def _check_number(name: str, value: str) -> None:
    """Decimal number with optional leading minus sign and at most one point."""
    if not value:
        raise EmptyValue("Empty value", name, value)
    first = value[0]
    if first not in DIGITS and first not in "-.":
        raise InvalidCharacter("Invalid initial character", name, value)
    if value.count(".") > 1:
        raise InvalidValue("More than one decimal point", name, value)
    if any(c not in DIGITS and c != "." for c in value[1:]):
        raise InvalidCharacter("Invalid character", name, value)


def _check_string(name: str, value: str) -> None:
    """ASCII 32 to 126 only."""
    if any(ord(c) < 32 or ord(c) > 126 for c in value):
        raise InvalidCharacter("Invalid character", name, value)


_VALIDATORS: Dict[SemanticType, Validator] = {
    SemanticType.DATE: _check_date,
    SemanticType.ENUMERATION_BAND: _check_band,
    SemanticType.ENUMERATION_DXCC_ENTITY_CODE: _check_dxcc_entity_code,
    SemanticType.ENUMERATION_MODE: _check_mode,
    SemanticType.ENUMERATION_QSL_RECEIVED: _check_qsl_received,
    SemanticType.GRID_SQUARE: _check_grid_square,
    SemanticType.NUMBER: _check_number,
    SemanticType.POSITIVE_INTEGER: _check_positive_integer,
    SemanticType.STRING: _check_string,
    SemanticType.TIME: _check_time,
}


# Normalisers. Each takes an already-validated value.

def _normalise_grid_square(value: str) -> str:
    # AAnnaann
    return _upper(value[0:2]) + value[2:4] + _lower(value[4:6]) + value[6:]


def _normalise_time(value: str) -> str:
    return value + "00" if len(value) == 4 else value


_NORMALISERS: Dict[SemanticType, Normaliser] = {
    SemanticType.ENUMERATION_BAND: _lower,
    SemanticType.ENUMERATION_QSL_RECEIVED: _upper,
    SemanticType.GRID_SQUARE: _normalise_grid_square,
    SemanticType.TIME: _normalise_time,
}


def validate(field_type: SemanticType, name: str, value: str) -> None:
    """Raise a ValidationError subclass if `value` is not legal for `field_type`."""
    check = _VALIDATORS.get(field_type)
    if check is None:
        logger.debug("No checking for field %s (%s) with value: %s", name, field_type.value, value)
        return
    check(name, value)


def normalize(field_type: SemanticType, name: str, value: str) -> str:
    """Put a valid value into its canonical form."""
    normalise = _NORMALISERS.get(field_type)
    if normalise is not None:
        return normalise(value)
    if name in UPPERCASE_FIELDS:
        return _upper(value)
    return value


def validate_and_normalize(field_type: SemanticType, name: str, value: str) -> str:
    """Validate `value` for a field called `name`, returning its canonical form.

    `name` must already be upper case.
    """
    validate(field_type, name, value)
    return normalize(field_type, name, value)
