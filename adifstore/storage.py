"""In-memory store of ADIF records: file loading, call-sign index and queries.

An AdifFile holds the records of one ADI file in file order, plus an index
from call-sign to records. It is built once and never changed afterwards, so
it can be shared freely between threads.

Files may be located by searching a list of directories. The list comes from
the ADIFSTORE_PATH environment variable (os.pathsep separated) or, failing
that, the current directory followed by the user's data directory.
"""

from __future__ import annotations

import logging
import os
from collections import defaultdict
from functools import cmp_to_key
from pathlib import Path
from typing import AbstractSet, Dict, Iterable, Iterator, List, Optional, Sequence, Union

from platformdirs import user_data_dir

from .adif import iter_records
from .errors import AdifError, ResourceUnreadable
from .models import Record, chronological_order

logger = logging.getLogger(__name__)

APP_NAME = "adifstore"
PATH_ENV_VAR = "ADIFSTORE_PATH"

# ADI lengths count bytes; latin-1 maps each byte to exactly one character.
FILE_ENCODING = "latin-1"

PathLike = Union[str, Path]


def _default_search_path() -> List[Path]:
    """Current directory, then the per-user data directory."""
    return [Path.cwd(), Path(user_data_dir(appname=APP_NAME, appauthor=False))]


def get_search_path() -> List[Path]:
    """Resolve the directories in which to look for ADI files, honouring ADIFSTORE_PATH."""
    env = os.getenv(PATH_ENV_VAR)
    if env:
        return [Path(p).expanduser() for p in env.split(os.pathsep) if p]
    return _default_search_path()


def read_resource(path: PathLike) -> str:
    """Return the raw text of a file.

    Raises ResourceUnreadable if the file is missing or cannot be read.
    """
    try:
        return Path(path).read_text(encoding=FILE_ENCODING)
    except OSError as e:
        raise ResourceUnreadable(str(path), e.strerror or str(e)) from e


def _accept_set(accept: Iterable[str]) -> AbstractSet[str]:
    return frozenset(name.upper() for name in accept)


class AdifFile:
    """All the records of one ADI file."""

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: List[Record] = []
        self._by_call: Dict[str, List[Record]] = defaultdict(list)
        for rec in records:
            self._append(rec)

    def _append(self, rec: Record) -> None:
        # The list and the index must always be updated together
        self._records.append(rec)
        self._by_call[rec.callsign].append(rec)

    # Construction

    @classmethod
    def from_text(cls, text: str, accept: Iterable[str] = ()) -> "AdifFile":
        """Parse ADI text. If `accept` is given, only those fields are kept.

        Raises an AdifError subclass on the first bad field or record.
        """
        return cls(iter_records(text, _accept_set(accept)))

    @classmethod
    def from_file(cls, path: PathLike, accept: Iterable[str] = ()) -> "AdifFile":
        """Read and parse an ADI file.

        Raises ResourceUnreadable if the file cannot be read, or another
        AdifError subclass if its contents are bad.
        """
        text = read_resource(path)
        adif_file = cls.from_text(text, accept)
        logger.debug("Loaded %d records from %s", len(adif_file), path)
        return adif_file

    @classmethod
    def from_search_path(
        cls,
        filename: str,
        directories: Optional[Sequence[PathLike]] = None,
        accept: Iterable[str] = (),
    ) -> "AdifFile":
        """Load `filename` from the first directory where that succeeds.

        Failures are logged and the next directory is tried. If none succeeds
        the result is an empty AdifFile rather than an error.
        """
        dirs = get_search_path() if directories is None else list(directories)
        accept = _accept_set(accept)
        for directory in dirs:
            path = Path(directory) / filename
            try:
                return cls.from_file(path, accept)
            except (AdifError, OSError) as e:
                logger.debug("Unable to load %s: %s", path, e)
        logger.debug("%s not loaded from any of %d directories", filename, len(dirs))
        return cls()

    # Sequence behaviour

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, index: int) -> Record:
        return self._records[index]

    def __bool__(self) -> bool:
        return bool(self._records)

    @property
    def records(self) -> List[Record]:
        """A copy of the records, in file order."""
        return list(self._records)

    def callsigns(self) -> List[str]:
        """Distinct call-signs in the file (including "" if some records lack CALL)."""
        return list(self._by_call)

    # Queries

    def is_present(self, probe: Record) -> Optional[int]:
        """Return the position of the first record equal to `probe`, or None."""
        return next((i for i, rec in enumerate(self._records) if rec == probe), None)

    def matching_qsos(
        self,
        callsign: str,
        band: Optional[str] = None,
        mode: Optional[str] = None,
    ) -> List[Record]:
        """Records for `callsign`, optionally restricted to a band and mode.

        `band` and `mode` must be in canonical form ("20m", "CW"); the
        order of the result is not significant.
        """
        out: List[Record] = []
        for rec in self._by_call.get(callsign, ()):
            if band is not None and rec.band != band:
                continue
            if mode is not None and rec.mode != mode:
                continue
            out.append(rec)
        return out

    def sorted_records(self) -> List[Record]:
        """Records in chronological order (stable for equal date/time)."""
        return sorted(self._records, key=cmp_to_key(_compare_records))


def _compare_records(rec1: Record, rec2: Record) -> int:
    if chronological_order(rec1, rec2):
        return -1
    if chronological_order(rec2, rec1):
        return 1
    return 0
