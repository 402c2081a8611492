"""Data models: a single ADIF field, and a record (one contact) built from fields.

Field names are always stored in upper case. A record keeps its fields keyed
by name, and writes them out in name order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from .catalogue import IMPORT_ONLY_TYPES, SemanticType, type_of
from .errors import DuplicateFieldName, UnknownFieldType
from .validation import validate_and_normalize

EOR = "<EOR>"


@dataclass(frozen=True)
class Field:
    """A named, typed ADIF value.

    Attributes
    - name: upper-case field name, e.g. "QSO_DATE".
    - type: the field's SemanticType from the catalogue.
    - value: the validated value, in canonical form.
    """

    name: str
    type: SemanticType
    value: str

    @classmethod
    def create(cls, name: str, value: str) -> "Field":
        """Build a field from a name and raw value, validating and normalising it.

        Raises UnknownFieldType if the name is not in the catalogue, and a
        ValidationError subclass if the value is not legal for its type.
        """
        uc_name = name.upper()
        field_type = type_of(uc_name)
        if field_type is None:
            raise UnknownFieldType(uc_name, value)
        return cls(uc_name, field_type, validate_and_normalize(field_type, uc_name, value))

    @property
    def void(self) -> bool:
        """Whether the field has nothing to say (empty name or value)."""
        return not self.name or not self.value

    def to_adif(self, append: str = "\n") -> str:
        """Render as <NAME:LEN>VALUE; void fields render as the empty string."""
        if self.void:
            return ""
        return f"<{self.name}:{len(self.value)}>{self.value}{append}"


class Record:
    """One ADIF record: a collection of uniquely-named fields."""

    def __init__(self, fields: Optional[Dict[str, Field]] = None) -> None:
        self._fields: Dict[str, Field] = {
            k: f for k, f in (fields or {}).items() if not f.void
        }

    def add(self, field: Field) -> None:
        """Insert a field during assembly; a name may appear only once.

        Void fields are not stored.
        """
        if field.void:
            return
        if field.name in self._fields:
            raise DuplicateFieldName(field.name)
        self._fields[field.name] = field

    def value(self, name: str) -> str:
        """Return the value of a field, or "" if the record does not have it."""
        f = self._fields.get(name.upper())
        return f.value if f is not None else ""

    def set_value(self, name: str, value: str) -> bool:
        """Validate and store a field value, replacing any existing one.

        Returns True if the field did not exist before. An empty value is
        still validated, but then removes the field instead of storing it.
        """
        f = Field.create(name, value)
        if f.void:
            self._fields.pop(f.name, None)
            return False
        created = f.name not in self._fields
        self._fields[f.name] = f
        return created

    def field(self, name: str) -> Optional[Field]:
        return self._fields.get(name.upper())

    def fields(self) -> List[Field]:
        """All fields, sorted by name."""
        return [self._fields[k] for k in sorted(self._fields)]

    # Well-known fields

    @property
    def callsign(self) -> str:
        return self.value("CALL")

    @property
    def band(self) -> str:
        return self.value("BAND")

    @property
    def mode(self) -> str:
        return self.value("MODE")

    @property
    def date(self) -> str:
        """QSO date as YYYYMMDD."""
        return self.value("QSO_DATE")

    @property
    def time(self) -> str:
        """QSO start time as HHMMSS."""
        return self.value("TIME_ON")

    @property
    def idate(self) -> int:
        """QSO date as an int (YYYYMMDD), 0 if absent."""
        d = self.date
        return int(d) if d else 0

    @property
    def confirmed(self) -> bool:
        """Whether a QSL card is known to have been received."""
        return self.value("QSL_RCVD") == "Y"

    def empty(self) -> bool:
        return not self._fields

    def to_adif(self) -> str:
        """Render the record, fields in name order, ending with <EOR> and a newline.

        Fields of import-only types are not written.
        """
        parts = [f.to_adif() for f in self.fields() if f.type not in IMPORT_ONLY_TYPES]
        parts.append(EOR + "\n")
        return "".join(parts)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.upper() in self._fields

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields())

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self._fields == other._fields

    def __repr__(self) -> str:
        body = ", ".join(f"{f.name}={f.value!r}" for f in self.fields())
        return f"Record({body})"

    def __str__(self) -> str:
        return self.to_adif()


def chronological_order(rec1: Record, rec2: Record) -> bool:
    """Whether `rec1` is chronologically earlier than `rec2`.

    Dates (YYYYMMDD) and times (HHMMSS) are fixed width, so string comparison
    is enough.
    """
    if rec1.date != rec2.date:
        return rec1.date < rec2.date
    return rec1.time < rec2.time
