import pytest

SAMPLE_ADI = (
    "Generated by a logger\n"
    "<ADIF_VER:5>3.1.0 <PROGRAMID:4>TEST\n"
    "<EOH>\n"
    "<CALL:4>W1AW<QSO_DATE:8>20230615<TIME_ON:4>1230<BAND:3>20m<MODE:2>CW"
    "<DXCC:3>291<GRIDSQUARE:4>FN31<QSL_RCVD:1>Y<EOR>\n"
    "<CALL:5>g0xyz<QSO_DATE:8>20230101<TIME_ON:6>080000<BAND:3>40M<MODE:3>ssb"
    "<DXCC:3>223<GRIDSQUARE:6>io91WM<QSL_RCVD:1>n<EOR>\n"
    "<CALL:4>W1AW<QSO_DATE:8>20230616<TIME_ON:4>0100<BAND:3>40m<MODE:2>CW"
    "<DXCC:3>291<COMMENT:11>a <b> <EOR><EOR>\n"
)


@pytest.fixture
def sample_adi():
    """Three QSOs with a header: two with W1AW, one with G0XYZ."""
    return SAMPLE_ADI


@pytest.fixture
def sample_file(tmp_path):
    """SAMPLE_ADI written to a temporary directory as log.adi."""
    path = tmp_path / "log.adi"
    path.write_text(SAMPLE_ADI, encoding="latin-1")
    return path


@pytest.fixture
def make_record():
    """Build a Record from keyword field values, e.g. make_record(CALL="W1AW")."""
    from adifstore.models import Record

    def _make(**fields):
        rec = Record()
        for name, value in fields.items():
            rec.set_value(name, value)
        return rec

    return _make


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep the user's own configuration out of the tests."""
    monkeypatch.delenv("ADIFSTORE_PATH", raising=False)
    monkeypatch.setenv("ADIFSTORE_AWARDS_CONFIG", str(tmp_path / "no-such-awards.json"))
