"""Awards logic: QSO/QSL tallies, summary counts, configurable thresholds, suggestions.

- `QslTally` counts QSOs and QSLs per call and per call/band/mode, answering
  "have I worked / confirmed this station here before?".
- `compute_summary` builds the counts used for DXCC and VUCC.
- `get_award_thresholds` reads optional JSON config to override defaults.
- `suggest_awards` produces simple, readable recommendations.
- `filtered_records` applies band/mode filters before computing.
"""

from __future__ import annotations

import json
import logging
import os
from collections import Counter, defaultdict
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple, TypedDict

from platformdirs import user_config_dir

from .catalogue import dxcc_entity
from .models import Record
from .storage import APP_NAME

logger = logging.getLogger(__name__)

BandMode = Tuple[str, str]


class QslTally:
    """QSO and QSL counts from a log of earlier contacts."""

    def __init__(self) -> None:
        self._qsos: Counter[str] = Counter()
        self._qsls: Counter[str] = Counter()
        self._qsos_band_mode: Counter[Tuple[str, str, str]] = Counter()
        self._confirmed: Dict[str, Set[BandMode]] = defaultdict(set)

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> "QslTally":
        tally = cls()
        for rec in records:
            tally.add(rec)
        return tally

    def add(self, rec: Record) -> None:
        call = rec.callsign
        self._qsos[call] += 1
        self._qsos_band_mode[(call, rec.band, rec.mode)] += 1
        if rec.confirmed:
            self._qsls[call] += 1
            self._confirmed[call].add((rec.band, rec.mode))

    def n_qsos(self, call: str, band: Optional[str] = None, mode: Optional[str] = None) -> int:
        """QSOs with `call`; on a particular band and mode if both are given.

        Raises TypeError if only one of `band` and `mode` is given.
        """
        if (band is None) != (mode is None):
            raise TypeError("n_qsos() needs both band and mode, or neither")
        if band is None:
            return self._qsos[call]
        return self._qsos_band_mode[(call, band, mode)]

    def n_qsls(self, call: str) -> int:
        return self._qsls[call]

    def confirmed(self, call: str, band: str, mode: str) -> bool:
        """Whether a QSL has been received from `call` on this band and mode."""
        return (band, mode) in self._confirmed.get(call, set())


class AwardsSummary(TypedDict):
    """Type definition for awards summary dictionary."""
    total_qsos: int
    confirmed_qsos: int
    unique_calls: int
    unique_bands: int
    unique_modes: int
    unique_grids: int
    unique_entities: int
    confirmed_entities: int
    deleted_entities: int
    grids_per_band: Dict[str, int]


def _norm(s: Optional[str]) -> Optional[str]:
    """Uppercase and strip a value; return None if the result is empty or not a str."""
    return s.strip().upper() if isinstance(s, str) and s.strip() else None


def _grid_square(rec: Record) -> Optional[str]:
    """The four-character grid square of a record, as counted for VUCC."""
    grid = _norm(rec.value("GRIDSQUARE"))
    return grid[:4] if grid and len(grid) >= 4 else None


def _entity(rec: Record) -> Optional[int]:
    code = rec.value("DXCC")
    return int(code) if code else None


def unique_values(records: Iterable[Record], field_name: str) -> Set[str]:
    """Return the set of normalized values of one field across records."""
    out: Set[str] = set()
    for rec in records:
        nv = _norm(rec.value(field_name))
        if nv:
            out.add(nv)
    return out


def grids_by_band(records: Iterable[Record]) -> Dict[str, Set[str]]:
    """Group unique grid squares by band."""
    out: Dict[str, Set[str]] = defaultdict(set)
    for rec in records:
        grid = _grid_square(rec)
        if grid:
            out[rec.band].add(grid)
    return out


def compute_summary(records: Iterable[Record]) -> AwardsSummary:
    """Compute counts commonly used for awards.

    Entities are DXCC entity codes; grids are four-character squares.
    """
    records = list(records)

    entities: Set[int] = set()
    confirmed_entities: Set[int] = set()
    grids: Set[str] = set()
    confirmed_qsos = 0
    for rec in records:
        code = _entity(rec)
        if code is not None:
            entities.add(code)
            if rec.confirmed:
                confirmed_entities.add(code)
        grid = _grid_square(rec)
        if grid:
            grids.add(grid)
        if rec.confirmed:
            confirmed_qsos += 1

    deleted = sum(1 for code in entities if (e := dxcc_entity(code)) is not None and e.deleted)

    return {
        "total_qsos": len(records),
        "confirmed_qsos": confirmed_qsos,
        "unique_calls": len(unique_values(records, "CALL")),
        "unique_bands": len(unique_values(records, "BAND")),
        "unique_modes": len(unique_values(records, "MODE")),
        "unique_grids": len(grids),
        "unique_entities": len(entities),
        "confirmed_entities": len(confirmed_entities),
        "deleted_entities": deleted,
        "grids_per_band": {b: len(vs) for b, vs in grids_by_band(records).items()},
    }


# Default thresholds; can be overridden via config
DEFAULT_AWARD_THRESHOLDS: Dict[str, int] = {
    "DXCC": 100,  # confirmed entities
    "VUCC": 100,  # unique grids (band-specific often)
}

CONFIG_ENV_VAR = "ADIFSTORE_AWARDS_CONFIG"
CONFIG_FILENAME = "awards.json"


def _config_path() -> Path:
    """Resolve the JSON file path for award thresholds, honoring env override."""
    env = os.getenv(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    cfg_dir = Path(user_config_dir(appname=APP_NAME, appauthor=False))
    return cfg_dir / CONFIG_FILENAME


def get_award_thresholds() -> Dict[str, int]:
    """Load thresholds from JSON, overriding defaults.

    JSON shape example:
    { "DXCC": 125, "VUCC": 75, "MY_CUSTOM": 50 }
    Unknown keys are preserved for future use.

    Returns defaults if config file cannot be read or parsed.
    """
    p = _config_path()
    data: Dict[str, int] = dict(DEFAULT_AWARD_THRESHOLDS)
    try:
        if p.exists():
            with p.open("r", encoding="utf-8") as f:
                raw = json.load(f)
                if isinstance(raw, dict):
                    for key, val in raw.items():
                        if isinstance(key, str) and isinstance(val, int) and val > 0:
                            data[key.upper()] = val
    except (OSError, json.JSONDecodeError, ValueError, TypeError) as e:
        logger.warning("Ignoring unreadable awards config %s: %s", p, e)
    return data


def suggest_awards(summary: AwardsSummary) -> List[str]:
    """Generate simple, readable suggestions based on thresholds and current counts."""
    thresholds = get_award_thresholds()
    suggestions: List[str] = []
    entities = summary.get("confirmed_entities", 0)
    grids = summary.get("unique_grids", 0)

    dxcc_needed = thresholds.get("DXCC", DEFAULT_AWARD_THRESHOLDS["DXCC"])
    vucc_needed = thresholds.get("VUCC", DEFAULT_AWARD_THRESHOLDS["VUCC"])

    if entities >= dxcc_needed:
        suggestions.append(f"DXCC achieved: {entities} confirmed entities")
    elif entities >= int(0.9 * dxcc_needed):
        remaining = dxcc_needed - entities
        suggestions.append(f"DXCC close: {entities} confirmed entities (need {remaining} more)")

    worked = summary.get("unique_entities", 0)
    if worked > entities:
        suggestions.append(f"{worked - entities} worked entities still need a QSL")

    if grids >= vucc_needed:
        suggestions.append(f"VUCC achieved: {grids} unique grids")
    elif grids >= int(0.9 * vucc_needed):
        remaining = vucc_needed - grids
        suggestions.append(f"VUCC close: {grids} grids (need {remaining} more)")

    # Band-specific VUCC hints
    gpb = summary.get("grids_per_band", {})
    for band, count in sorted(gpb.items()):
        if count >= 50:
            suggestions.append(f"Strong grid count on {band or 'unknown'}: {count}")
    return suggestions


def filtered_records(
    records: Iterable[Record],
    *,
    band: Optional[str] = None,
    mode: Optional[str] = None,
) -> List[Record]:
    """Return records filtered by normalized band/mode (if provided)."""
    b = _norm(band) if band else None
    m = _norm(mode) if mode else None
    out: List[Record] = []
    for rec in records:
        if b and _norm(rec.band) != b:
            continue
        if m and _norm(rec.mode) != m:
            continue
        out.append(rec)
    return out
