"""Exceptions raised while validating, parsing and loading ADIF data.

Every error carries a numeric `code` along with the offending field name and
value (when known), so that a problem deep inside a large log file can be
reported precisely.
"""

from __future__ import annotations

from typing import Optional

INVALID_VALUE = -1
INVALID_CHARACTER = -2
INVALID_LENGTH = -3
EMPTY_VALUE = -4
UNKNOWN_FIELD_TYPE = -5
DUPLICATE_FIELD_NAME = -6
MALFORMED_DESCRIPTOR = -7
RESOURCE_UNREADABLE = -8


class AdifError(Exception):
    """Base class for all ADIF errors."""

    code: int = 0

    def __init__(
        self,
        message: str,
        *,
        field_name: Optional[str] = None,
        value: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field_name = field_name
        self.value = value

    def __str__(self) -> str:
        return self.message


class ValidationError(AdifError):
    """A field value breaks the rules of its semantic type."""

    def __init__(self, reason: str, field_name: str, value: str) -> None:
        super().__init__(f"{reason} in {field_name}: {value}", field_name=field_name, value=value)
        self.reason = reason


class InvalidValue(ValidationError):
    code = INVALID_VALUE


class InvalidCharacter(ValidationError):
    code = INVALID_CHARACTER


class InvalidLength(ValidationError):
    code = INVALID_LENGTH


class EmptyValue(ValidationError):
    code = EMPTY_VALUE


class UnknownFieldType(AdifError):
    """The field name is not in the type catalogue."""

    code = UNKNOWN_FIELD_TYPE

    def __init__(self, field_name: str, value: Optional[str] = None) -> None:
        msg = f"Cannot find type for element: {field_name}"
        if value is not None:
            msg += f" with value: {value}"
        super().__init__(msg, field_name=field_name, value=value)


class DuplicateFieldName(AdifError):
    code = DUPLICATE_FIELD_NAME

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Duplicated field name: {field_name}", field_name=field_name)


class MalformedDescriptor(AdifError):
    """A `<...>` tag that is neither a field descriptor nor the end-of-record marker."""

    code = MALFORMED_DESCRIPTOR

    def __init__(self, descriptor: str, offset: int, reason: str = "Malformed descriptor") -> None:
        super().__init__(f"{reason} at offset {offset}: <{descriptor}>", value=descriptor)
        self.descriptor = descriptor
        self.offset = offset


class ResourceUnreadable(AdifError):
    code = RESOURCE_UNREADABLE

    def __init__(self, resource: str, reason: str) -> None:
        super().__init__(f"Unable to read {resource}: {reason}", value=resource)
        self.resource = resource
