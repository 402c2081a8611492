import logging

import pytest

from adifstore.catalogue import SemanticType
from adifstore.errors import EmptyValue, InvalidCharacter, InvalidLength, InvalidValue
from adifstore.validation import normalize, validate_and_normalize

T = SemanticType


@pytest.mark.parametrize(
    "value",
    ["19300101", "20230615", "20240229", "20231231", "20230430", "21000229"],
)
def test_valid_dates(value):
    """Dates from 1930 on with a legal day for the month are accepted unchanged."""
    assert validate_and_normalize(T.DATE, "QSO_DATE", value) == value


@pytest.mark.parametrize(
    "value, error",
    [
        ("2023061a", InvalidCharacter),
        ("2023-06-15", InvalidCharacter),
        ("2023061", InvalidLength),
        ("", InvalidLength),
        ("19291231", InvalidValue),
        ("20230015", InvalidValue),
        ("20231315", InvalidValue),
        ("20230600", InvalidValue),
        ("20230431", InvalidValue),
        ("20230229", InvalidValue),
        ("20230132", InvalidValue),
    ],
)
def test_invalid_dates(value, error):
    """Each broken rule is reported with its own error kind."""
    with pytest.raises(error):
        validate_and_normalize(T.DATE, "QSO_DATE", value)


def test_leap_year_rule_is_divisible_by_four():
    """Known quirk: every year divisible by four has 29 February, including 2100.

    The Gregorian calendar says 2100 is not a leap year; this is intentional.
    """
    assert validate_and_normalize(T.DATE, "QSO_DATE", "21000229") == "21000229"
    assert validate_and_normalize(T.DATE, "QSO_DATE", "20000229") == "20000229"
    with pytest.raises(InvalidValue):
        validate_and_normalize(T.DATE, "QSO_DATE", "21010229")


@pytest.mark.parametrize("hh", [0, 9, 12, 23])
@pytest.mark.parametrize("mm", [0, 30, 59])
def test_four_digit_times_gain_seconds(hh, mm):
    """HHMM becomes HHMM00, and the result is itself valid."""
    value = f"{hh:02d}{mm:02d}"
    normalised = validate_and_normalize(T.TIME, "TIME_ON", value)
    assert normalised == value + "00"
    assert validate_and_normalize(T.TIME, "TIME_ON", normalised) == normalised


@pytest.mark.parametrize(
    "value, error",
    [
        ("12a0", InvalidCharacter),
        ("123", InvalidLength),
        ("12300", InvalidLength),
        ("2400", InvalidValue),
        ("1260", InvalidValue),
        ("123060", InvalidValue),
    ],
)
def test_invalid_times(value, error):
    with pytest.raises(error):
        validate_and_normalize(T.TIME, "TIME_ON", value)


def test_six_digit_time_unchanged():
    assert validate_and_normalize(T.TIME, "TIME_OFF", "235959") == "235959"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("fn", "FN"),
        ("fn31", "FN31"),
        ("fn31PR", "FN31pr"),
        ("Io91wM", "IO91wm"),
        ("fn31pr45", "FN31pr45"),
        ("RR99XX99", "RR99xx99"),
    ],
)
def test_grid_square_normalisation(value, expected):
    """Field pair upper case, subsquare lower case, and the result re-validates."""
    normalised = validate_and_normalize(T.GRID_SQUARE, "GRIDSQUARE", value)
    assert normalised == expected
    assert validate_and_normalize(T.GRID_SQUARE, "GRIDSQUARE", normalised) == expected


@pytest.mark.parametrize("value", ["SS", "FNA1", "FN3A", "FN31YA", "FN31AY", "FN31AA1X"])
def test_grid_square_bad_characters(value):
    with pytest.raises(InvalidValue):
        validate_and_normalize(T.GRID_SQUARE, "GRIDSQUARE", value)


@pytest.mark.parametrize("value", ["", "F", "FN3", "FN31P", "FN31PR456"])
def test_grid_square_bad_length(value):
    with pytest.raises(InvalidLength):
        validate_and_normalize(T.GRID_SQUARE, "GRIDSQUARE", value)


def test_band_is_lower_cased():
    assert validate_and_normalize(T.ENUMERATION_BAND, "BAND", "20M") == "20m"
    assert validate_and_normalize(T.ENUMERATION_BAND, "BAND", "70CM") == "70cm"
    with pytest.raises(InvalidValue):
        validate_and_normalize(T.ENUMERATION_BAND, "BAND", "21m")


def test_mode_is_upper_cased():
    assert validate_and_normalize(T.ENUMERATION_MODE, "MODE", "ft8") == "FT8"
    with pytest.raises(InvalidValue):
        validate_and_normalize(T.ENUMERATION_MODE, "MODE", "CWX")


def test_case_folding_is_ascii_only():
    # "\xdf".upper() is "SS", "\u017f".upper() is "S" and "\u0131".upper() is "I"
    with pytest.raises(InvalidValue):
        validate_and_normalize(T.ENUMERATION_MODE, "MODE", "\xdfb")
    with pytest.raises(InvalidValue):
        validate_and_normalize(T.ENUMERATION_MODE, "MODE", "\u017fsb")
    with pytest.raises(InvalidValue):
        validate_and_normalize(T.GRID_SQUARE, "GRIDSQUARE", "FN31pr4\xdf")
    with pytest.raises(InvalidValue):
        validate_and_normalize(T.ENUMERATION_QSL_RECEIVED, "QSL_RCVD", "\u0131")
    assert validate_and_normalize(T.ENUMERATION_MODE, "MODE", "ssb") == "SSB"


def test_qsl_received():
    assert validate_and_normalize(T.ENUMERATION_QSL_RECEIVED, "QSL_RCVD", "y") == "Y"
    assert validate_and_normalize(T.ENUMERATION_QSL_RECEIVED, "LOTW_QSL_RCVD", "V") == "V"
    with pytest.raises(InvalidValue):
        validate_and_normalize(T.ENUMERATION_QSL_RECEIVED, "QSL_RCVD", "X")


def test_dxcc_entity_codes():
    assert validate_and_normalize(T.ENUMERATION_DXCC_ENTITY_CODE, "DXCC", "291") == "291"
    # deleted entity: still a legal value
    assert validate_and_normalize(T.ENUMERATION_DXCC_ENTITY_CODE, "DXCC", "2") == "2"
    for bad in ("", "29a", "-1", "999"):
        with pytest.raises(InvalidValue):
            validate_and_normalize(T.ENUMERATION_DXCC_ENTITY_CODE, "DXCC", bad)


def test_positive_integer_with_range():
    """CQZ is limited to 1..40; other positive integers are not."""
    assert validate_and_normalize(T.POSITIVE_INTEGER, "CQZ", "05") == "05"
    assert validate_and_normalize(T.POSITIVE_INTEGER, "CQZ", "40") == "40"
    assert validate_and_normalize(T.POSITIVE_INTEGER, "ITUZ", "90") == "90"
    for bad in ("0", "41"):
        with pytest.raises(InvalidValue):
            validate_and_normalize(T.POSITIVE_INTEGER, "CQZ", bad)
    with pytest.raises(InvalidCharacter):
        validate_and_normalize(T.POSITIVE_INTEGER, "ITUZ", "+5")
    with pytest.raises(EmptyValue):
        validate_and_normalize(T.POSITIVE_INTEGER, "ITUZ", "")


@pytest.mark.parametrize("value", ["14.074", "-3", ".5", "7", "0.", "-.25"])
def test_valid_numbers(value):
    assert validate_and_normalize(T.NUMBER, "FREQ", value) == value


@pytest.mark.parametrize(
    "value, error",
    [
        ("", EmptyValue),
        ("+1", InvalidCharacter),
        ("a1", InvalidCharacter),
        ("1.2.3", InvalidValue),
        ("1-2", InvalidCharacter),
        ("14 074", InvalidCharacter),
    ],
)
def test_invalid_numbers(value, error):
    with pytest.raises(error):
        validate_and_normalize(T.NUMBER, "FREQ", value)


def test_string_must_be_printable_ascii():
    assert validate_and_normalize(T.STRING, "COMMENT", "Hello <world> ~") == "Hello <world> ~"
    for bad in ("café", "tab\there", "line\nbreak", "\x7f"):
        with pytest.raises(InvalidCharacter):
            validate_and_normalize(T.STRING, "COMMENT", bad)


def test_identifier_fields_upper_cased():
    assert validate_and_normalize(T.STRING, "CALL", "w1aw") == "W1AW"
    assert validate_and_normalize(T.STRING, "STATION_CALLSIGN", "n7dr") == "N7DR"
    assert validate_and_normalize(T.STRING, "NAME", "Hiram") == "Hiram"


def test_unchecked_types_pass_through(caplog):
    """Types without a rule are accepted verbatim, with a debug message."""
    with caplog.at_level(logging.DEBUG, logger="adifstore.validation"):
        value = validate_and_normalize(T.LOCATION, "LAT", "N040 30.000")
    assert value == "N040 30.000"
    assert any("No checking" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize(
    "field_type, name, value",
    [
        (T.TIME, "TIME_ON", "1230"),
        (T.GRID_SQUARE, "GRIDSQUARE", "fn31PR"),
        (T.ENUMERATION_BAND, "BAND", "20M"),
        (T.ENUMERATION_MODE, "MODE", "cw"),
        (T.ENUMERATION_QSL_RECEIVED, "QSL_RCVD", "r"),
        (T.STRING, "CALL", "k1ab"),
    ],
)
def test_normalisation_is_idempotent(field_type, name, value):
    once = normalize(field_type, name, value)
    assert normalize(field_type, name, once) == once
