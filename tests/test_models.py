import pytest

from adifstore.catalogue import SemanticType
from adifstore.errors import DuplicateFieldName, InvalidValue, UnknownFieldType
from adifstore.models import Field, Record, chronological_order


def test_field_create_validates_and_normalises():
    f = Field.create("time_on", "1230")
    assert f.name == "TIME_ON"
    assert f.type is SemanticType.TIME
    assert f.value == "123000"
    assert f.to_adif() == "<TIME_ON:6>123000\n"


def test_field_create_rejects_unknown_name():
    with pytest.raises(UnknownFieldType) as exc:
        Field.create("MY_FAVOURITE_COLOUR", "blue")
    assert exc.value.field_name == "MY_FAVOURITE_COLOUR"


def test_field_create_reports_field_and_value():
    with pytest.raises(InvalidValue) as exc:
        Field.create("BAND", "21m")
    assert exc.value.field_name == "BAND"
    assert exc.value.value == "21m"
    assert "BAND" in str(exc.value)


def test_void_field_renders_nothing():
    assert Field("COMMENT", SemanticType.STRING, "").to_adif() == ""
    assert Field("", SemanticType.STRING, "x").to_adif() == ""


def test_set_value_insert_or_replace():
    rec = Record()
    assert rec.set_value("call", "w1aw") is True
    assert rec.callsign == "W1AW"
    assert rec.set_value("CALL", "K1AB") is False
    assert rec.callsign == "K1AB"
    assert len(rec) == 1


def test_empty_value_is_not_stored():
    rec = Record()
    assert rec.set_value("COMMENT", "") is False
    assert "COMMENT" not in rec
    assert rec.empty()
    assert rec == Record()

    # An empty value removes a field that was there
    rec.set_value("COMMENT", "hello")
    assert len(rec) == 1
    rec.set_value("COMMENT", "")
    assert "COMMENT" not in rec
    assert rec.empty()


def test_add_ignores_void_fields():
    rec = Record()
    rec.add(Field("COMMENT", SemanticType.STRING, ""))
    assert len(rec) == 0
    rec = Record({"COMMENT": Field("COMMENT", SemanticType.STRING, "")})
    assert rec.empty()


def test_add_refuses_duplicate_names():
    rec = Record()
    rec.add(Field.create("CALL", "W1AW"))
    with pytest.raises(DuplicateFieldName):
        rec.add(Field.create("CALL", "K1AB"))
    assert rec.callsign == "W1AW"


def test_accessors(make_record):
    rec = make_record(CALL="W1AW", QSO_DATE="20230615", TIME_ON="1230", BAND="20M", MODE="cw", QSL_RCVD="y")
    assert rec.callsign == "W1AW"
    assert rec.date == "20230615"
    assert rec.idate == 20230615
    assert rec.time == "123000"
    assert rec.band == "20m"
    assert rec.mode == "CW"
    assert rec.confirmed
    assert rec.value("gridsquare") == ""
    assert "call" in rec


def test_missing_fields_are_empty():
    rec = Record()
    assert rec.empty()
    assert rec.callsign == ""
    assert rec.idate == 0
    assert not rec.confirmed


def test_to_adif_sorted_and_terminated(make_record):
    rec = make_record(MODE="CW", CALL="W1AW", BAND="20m")
    assert rec.to_adif() == "<BAND:3>20m\n<CALL:4>W1AW\n<MODE:2>CW\n<EOR>\n"


def test_empty_record_is_just_terminator():
    assert Record().to_adif() == "<EOR>\n"


def test_import_only_fields_not_written():
    rec = Record()
    rec.add(Field.create("CALL", "W1AW"))
    rec.add(Field("AWARD", SemanticType.AWARD_LIST, "DXCC"))
    assert rec.value("AWARD") == "DXCC"
    assert rec.to_adif() == "<CALL:4>W1AW\n<EOR>\n"


def test_record_equality(make_record):
    a = make_record(CALL="W1AW", BAND="20m")
    b = make_record(BAND="20M", CALL="w1aw")
    assert a == b
    assert a != make_record(CALL="W1AW", BAND="40m")


def test_chronological_order_by_date_then_time(make_record):
    early = make_record(QSO_DATE="20230101", TIME_ON="2359")
    late = make_record(QSO_DATE="20230102", TIME_ON="0001")
    assert chronological_order(early, late)
    assert not chronological_order(late, early)

    morning = make_record(QSO_DATE="20230101", TIME_ON="0800")
    evening = make_record(QSO_DATE="20230101", TIME_ON="200000")
    assert chronological_order(morning, evening)
    assert not chronological_order(evening, morning)
    assert not chronological_order(morning, morning)
