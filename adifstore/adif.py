"""ADI text scanning: fields, records and whole files.

A record is a run of <NAME:LEN[:TYPE]>VALUE fields ended by <EOR>. VALUE is
exactly LEN characters and may itself contain '<' and '>', so the scanner
always jumps over a value by its declared length and never searches inside
it for delimiters.

Errors are not recovered from: a bad field aborts the record, and a bad
record aborts the load.

ADIF spec: https://www.adif.org/
"""

from __future__ import annotations

import logging
import re
from typing import AbstractSet, Iterable, Iterator, List, NamedTuple, Optional, Tuple

from .catalogue import type_of
from .errors import MalformedDescriptor, UnknownFieldType
from .models import EOR, Field, Record
from .validation import validate_and_normalize

logger = logging.getLogger(__name__)

EOH = "<EOH>"

ADIF_VERSION = "3.1.0"
PROGRAM_ID = "adifstore"


class ScanResult(NamedTuple):
    """Outcome of scanning one tag.

    - offset: one past the consumed text; where the next scan starts.
    - field: the field read, or None if it was skipped or void.
    - end_of_record: True if the tag was the record terminator.
    """

    offset: int
    field: Optional[Field]
    end_of_record: bool = False


_MARKERS = {
    EOH: re.compile(re.escape(EOH), re.IGNORECASE),
    EOR: re.compile(re.escape(EOR), re.IGNORECASE),
}


def find_marker(text: str, marker: str, start: int = 0) -> int:
    """Case-insensitive search for `marker` (EOH or EOR); -1 if absent."""
    m = _MARKERS[marker].search(text, start)
    return m.start() if m else -1


def skip_header(text: str) -> int:
    """Return the offset at which the body of an ADI file starts.

    That is the first '<' after <EOH>, or 0 if there is no header.
    """
    posn = find_marker(text, EOH)
    if posn == -1:
        return 0
    body = text.find("<", posn + 1)
    return body if body != -1 else len(text)


def scan_field(
    text: str,
    start: int,
    record_end: int,
    accept: AbstractSet[str] = frozenset(),
) -> Optional[ScanResult]:
    """Read one tag from `text`, starting at `start`.

    `record_end` is the offset of the '<' of the <EOR> that ends the current
    record; an EOR tag there is the terminator. If `accept` is non-empty,
    fields whose names are not in it are skipped without being validated.

    Returns None when there is no further complete tag in `text`.
    """
    posn_1 = text.find("<", start)
    if posn_1 == -1:
        return None
    posn_2 = text.find(">", posn_1)
    if posn_2 == -1:
        return None

    descriptor = text[posn_1 + 1 : posn_2]
    if posn_1 == record_end and descriptor.upper() == EOR[1:-1]:
        return ScanResult(posn_2 + 1, None, True)

    parts = descriptor.split(":")
    if len(parts) not in (2, 3):
        raise MalformedDescriptor(descriptor, posn_1)
    # parts[2], if present, is a data type indicator; the catalogue decides the type
    name = parts[0].strip().upper()
    length_str = parts[1].strip()
    # ASCII digits only; str.isdigit also accepts superscripts such as '\xb2'
    if not name or not (length_str.isascii() and length_str.isdigit()):
        raise MalformedDescriptor(descriptor, posn_1)

    length = int(length_str)
    value_start = posn_2 + 1
    value_end = value_start + length
    if value_end > len(text):
        raise MalformedDescriptor(descriptor, posn_1, "Value runs past end of input")

    if (accept and name not in accept) or length == 0:
        return ScanResult(value_end, None)

    value = text[value_start:value_end]
    field_type = type_of(name)
    if field_type is None:
        raise UnknownFieldType(name, value)
    return ScanResult(value_end, Field(name, field_type, validate_and_normalize(field_type, name, value)))


def assemble_record(
    text: str,
    start: int,
    accept: AbstractSet[str] = frozenset(),
) -> Optional[Tuple[Record, int]]:
    """Read one record starting at `start`.

    Returns (record, offset one past the record), or None if nothing but
    trailing text remains. A record may be empty.
    """
    rec = Record()
    offset = start
    consumed = False
    record_end = find_marker(text, EOR, offset)

    while True:
        # Search again once the terminator has been passed: an <EOR> inside a
        # value that has already been jumped over must not end the record.
        if record_end != -1 and record_end < offset:
            record_end = find_marker(text, EOR, offset)
        result = scan_field(text, offset, record_end, accept)
        if result is None:
            break
        consumed = True
        offset = result.offset
        if result.end_of_record:
            break
        if result.field is not None:
            rec.add(result.field)

    if not consumed:
        return None
    return rec, offset


def iter_records(text: str, accept: AbstractSet[str] = frozenset()) -> Iterator[Record]:
    """Yield the non-empty records of ADI text in file order."""
    posn = skip_header(text)
    while True:
        result = assemble_record(text, posn, accept)
        if result is None:
            return
        rec, posn = result
        if rec.empty():
            logger.debug("Skipping empty record ending at offset %d", posn)
            continue
        yield rec


def load_adif(text: str, accept: Iterable[str] = ()) -> List[Record]:
    """Parse ADI text into a list of records.

    Raises an AdifError subclass describing the first problem found.
    """
    return list(iter_records(text, frozenset(name.upper() for name in accept)))


def dump_adif(records: Iterable[Record], program_id: str = PROGRAM_ID) -> str:
    """Serialise records to ADI text with a minimal header."""
    header = [
        f"<ADIF_VER:{len(ADIF_VERSION)}>{ADIF_VERSION}",
        f"<PROGRAMID:{len(program_id)}>{program_id}",
        EOH,
    ]
    lines: List[str] = ["\n".join(header) + "\n"]
    lines.extend(rec.to_adif() for rec in records)
    return "".join(lines)
