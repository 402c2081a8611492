from adifstore.catalogue import (
    BANDS,
    DXCC_ENTITIES,
    FIELD_TYPES,
    MODES,
    POSITIVE_INTEGER_RANGES,
    EntityStatus,
    SemanticType,
    dxcc_entity,
    type_of,
)


def test_type_lookup_is_case_insensitive():
    assert type_of("QSO_DATE") is SemanticType.DATE
    assert type_of("qso_date") is SemanticType.DATE
    assert type_of("Gridsquare") is SemanticType.GRID_SQUARE
    assert type_of("CALL") is SemanticType.STRING


def test_unknown_field_has_no_type():
    assert type_of("NOT_A_FIELD") is None
    assert type_of("") is None


def test_field_names_are_upper_case():
    assert all(name == name.upper() for name in FIELD_TYPES)


def test_enumeration_tables_are_canonical():
    assert "20m" in BANDS and "70cm" in BANDS
    assert all(b == b.lower() for b in BANDS)
    assert {"CW", "SSB", "FT8"} <= MODES
    assert all(m == m.upper() for m in MODES)


def test_dxcc_table():
    usa = dxcc_entity(291)
    assert usa is not None
    assert usa.name == "UNITED STATES OF AMERICA"
    assert usa.prefix == "K"
    assert not usa.deleted

    # retired entity: still present, flagged deleted
    abu_ail = dxcc_entity(2)
    assert abu_ail is not None
    assert abu_ail.status is EntityStatus.DELETED
    assert abu_ail.deleted

    # codes are sparse
    assert dxcc_entity(0) is None
    assert 1 in DXCC_ENTITIES and 522 in DXCC_ENTITIES


def test_range_table_keyed_by_field_name():
    assert POSITIVE_INTEGER_RANGES["CQZ"] == (1, 40)
    assert type_of("CQZ") is SemanticType.POSITIVE_INTEGER
    assert "ITUZ" not in POSITIVE_INTEGER_RANGES
