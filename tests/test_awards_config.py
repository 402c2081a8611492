import json

from adifstore.awards import get_award_thresholds


def test_default_thresholds():
    """Test that default award thresholds are loaded when no config exists."""
    thresholds = get_award_thresholds()
    assert thresholds["DXCC"] == 100
    assert thresholds["VUCC"] == 100


def test_custom_thresholds(tmp_path, monkeypatch):
    """Test loading custom thresholds from config file."""
    config_path = tmp_path / "awards.json"
    custom_config = {
        "DXCC": 150,
        "vucc": 75,
        "CUSTOM_AWARD": 50,
        "IGNORED_NEGATIVE": -3,
    }
    config_path.write_text(json.dumps(custom_config), encoding="utf-8")
    monkeypatch.setenv("ADIFSTORE_AWARDS_CONFIG", str(config_path))

    thresholds = get_award_thresholds()

    assert thresholds["DXCC"] == 150
    assert thresholds["VUCC"] == 75
    assert thresholds["CUSTOM_AWARD"] == 50
    assert "IGNORED_NEGATIVE" not in thresholds


def test_malformed_config_fallback(tmp_path, monkeypatch, caplog):
    """Test that malformed config files fall back to defaults."""
    config_path = tmp_path / "bad_awards.json"
    config_path.write_text("{ invalid json }", encoding="utf-8")
    monkeypatch.setenv("ADIFSTORE_AWARDS_CONFIG", str(config_path))

    thresholds = get_award_thresholds()

    assert thresholds["DXCC"] == 100
    assert thresholds["VUCC"] == 100
    assert any("Ignoring unreadable awards config" in r.getMessage() for r in caplog.records)
