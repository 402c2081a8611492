import pytest

from adifstore.awards import (
    QslTally,
    compute_summary,
    filtered_records,
    get_award_thresholds,
    suggest_awards,
)
from adifstore.storage import AdifFile


def test_compute_summary(sample_adi):
    """Test basic awards summary computation."""
    summary = compute_summary(AdifFile.from_text(sample_adi))

    assert summary["total_qsos"] == 3
    assert summary["confirmed_qsos"] == 1
    assert summary["unique_calls"] == 2
    assert summary["unique_bands"] == 2
    assert summary["unique_modes"] == 2
    assert summary["unique_entities"] == 2
    assert summary["confirmed_entities"] == 1
    assert summary["deleted_entities"] == 0
    assert summary["unique_grids"] == 2
    assert summary["grids_per_band"] == {"20m": 1, "40m": 1}


def test_summary_counts_deleted_entities(make_record):
    records = [
        make_record(CALL="W1AW", DXCC="291"),
        make_record(CALL="XX1X", DXCC="2"),
    ]
    summary = compute_summary(records)
    assert summary["unique_entities"] == 2
    assert summary["deleted_entities"] == 1


def test_summary_empty():
    summary = compute_summary([])
    assert summary["total_qsos"] == 0
    assert summary["grids_per_band"] == {}


def test_filtered_records(sample_adi):
    """Test record filtering by band and mode."""
    records = AdifFile.from_text(sample_adi).records

    filtered_40m = filtered_records(records, band="40M")
    assert len(filtered_40m) == 2
    assert all(r.band == "40m" for r in filtered_40m)

    filtered_cw = filtered_records(records, mode="cw")
    assert len(filtered_cw) == 2

    filtered_both = filtered_records(records, band="40m", mode="SSB")
    assert len(filtered_both) == 1
    assert filtered_both[0].callsign == "G0XYZ"


def test_qsl_tally(sample_adi):
    tally = QslTally.from_records(AdifFile.from_text(sample_adi))

    assert tally.n_qsos("W1AW") == 2
    assert tally.n_qsos("W1AW", "20m", "CW") == 1
    assert tally.n_qsos("W1AW", "80m", "CW") == 0
    assert tally.n_qsls("W1AW") == 1
    assert tally.confirmed("W1AW", "20m", "CW")
    assert not tally.confirmed("W1AW", "40m", "CW")

    # QSL_RCVD=N is not a confirmation
    assert tally.n_qsos("G0XYZ") == 1
    assert tally.n_qsls("G0XYZ") == 0
    assert not tally.confirmed("G0XYZ", "40m", "SSB")

    assert tally.n_qsos("K1AB") == 0


def test_qsl_tally_needs_band_and_mode_together(sample_adi):
    tally = QslTally.from_records(AdifFile.from_text(sample_adi))
    with pytest.raises(TypeError):
        tally.n_qsos("W1AW", band="20m")
    with pytest.raises(TypeError):
        tally.n_qsos("W1AW", mode="CW")


def test_suggest_awards():
    """Test award suggestions."""
    summary = {
        "total_qsos": 150,
        "confirmed_qsos": 120,
        "unique_calls": 140,
        "unique_bands": 5,
        "unique_modes": 4,
        "unique_grids": 50,
        "unique_entities": 110,
        "confirmed_entities": 105,
        "deleted_entities": 0,
        "grids_per_band": {"20m": 60, "40m": 45},
    }

    suggestions = suggest_awards(summary)
    assert any("DXCC achieved" in s for s in suggestions)
    assert any("5 worked entities still need a QSL" in s for s in suggestions)
    assert any("Strong grid count on 20m" in s for s in suggestions)
    assert not any("40m" in s for s in suggestions)


def test_suggest_awards_close():
    summary = compute_summary([])
    summary["confirmed_entities"] = 95
    summary["unique_entities"] = 95
    assert suggest_awards(summary) == ["DXCC close: 95 confirmed entities (need 5 more)"]


def test_get_award_thresholds():
    """Test award thresholds loading."""
    thresholds = get_award_thresholds()
    assert isinstance(thresholds, dict)
    assert "DXCC" in thresholds
    assert "VUCC" in thresholds
    assert thresholds["DXCC"] > 0
    assert thresholds["VUCC"] > 0
