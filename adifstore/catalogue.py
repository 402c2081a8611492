"""The ADIF 3 type catalogue.

Static data only: which semantic type each field carries, and the tables of
legal values used by the validators. Everything here is built once at import
time and treated as read-only.

ADIF specification: https://adif.org/310/ADIF_310.htm
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, NamedTuple, Optional, Tuple


class SemanticType(Enum):
    """ADIF 3 data types.

    The Intl* types are listed for completeness; they cannot legally appear
    in ADI files.
    """

    AWARD_LIST = "AwardList"
    BOOLEAN = "Boolean"
    CHARACTER = "Character"
    CREDIT_LIST = "CreditList"
    DATE = "Date"
    DIGIT = "Digit"
    ENUMERATION = "Enumeration"
    ENUMERATION_ANT_PATH = "Enumeration[Ant Path]"
    ENUMERATION_ARRL_SECT = "Enumeration[ARRL Section]"
    ENUMERATION_BAND = "Enumeration[Band]"
    ENUMERATION_CONTINENT = "Enumeration[Continent]"
    ENUMERATION_DARC_DOK = "Enumeration[DARC DOK]"
    ENUMERATION_DXCC_ENTITY_CODE = "Enumeration[DXCC Entity Code]"
    ENUMERATION_MODE = "Enumeration[Mode]"
    ENUMERATION_PRIMARY_ADMINISTRATIVE_SUBDIVISION = "Enumeration[Primary Administrative Subdivision]"
    ENUMERATION_PROPAGATION_MODE = "Enumeration[Propagation Mode]"
    ENUMERATION_QSL_RECEIVED = "Enumeration[QSL Rcvd]"
    ENUMERATION_QSL_SENT = "Enumeration[QSL Sent]"
    ENUMERATION_QSL_VIA = "Enumeration[QSL Via]"
    ENUMERATION_QSO_COMPLETE = "Enumeration[QSO Complete]"
    ENUMERATION_QSO_UPLOAD_STATUS = "Enumeration[QSO Upload Status]"
    ENUMERATION_REGION = "Enumeration[Region]"
    ENUMERATION_SECONDARY_ADMINISTRATIVE_SUBDIVISION = "Enumeration[Secondary Administrative Subdivision]"
    GRID_SQUARE = "GridSquare"
    GRID_SQUARE_LIST = "GridSquareList"
    INTEGER = "Integer"
    INTERNATIONAL_CHARACTER = "IntlCharacter"
    INTERNATIONAL_MULTILINE_STRING = "IntlMultilineString"
    INTERNATIONAL_STRING = "IntlString"
    IOTA_REFERENCE_NUMBER = "IOTARefNo"
    LOCATION = "Location"
    MULTILINE_STRING = "MultilineString"
    NUMBER = "Number"
    POSITIVE_INTEGER = "PositiveInteger"
    SECONDARY_SUBDIVISION_LIST = "SecondarySubdivisionList"
    SOTA_REFERENCE = "SOTARef"
    SPONSORED_AWARD_LIST = "SponsoredAwardList"
    STRING = "String"
    TIME = "Time"


class EntityStatus(Enum):
    CURRENT = "current"
    DELETED = "deleted"


class DxccEntity(NamedTuple):
    """One row of the DXCC entity table."""

    name: str
    prefix: str
    status: EntityStatus

    @property
    def deleted(self) -> bool:
        return self.status is EntityStatus.DELETED


# Field name -> type. Several of these are odd (CALL is a plain String, SRX an
# Integer) but they are what the ADIF specification says.
FIELD_TYPES: Dict[str, SemanticType] = {
    "ADDRESS": SemanticType.MULTILINE_STRING,
    "AGE": SemanticType.NUMBER,
    "A_INDEX": SemanticType.NUMBER,
    "ANT_AZ": SemanticType.NUMBER,
    "ANT_EL": SemanticType.NUMBER,
    "ANT_PATH": SemanticType.ENUMERATION_ANT_PATH,
    "ARRL_SECT": SemanticType.ENUMERATION_ARRL_SECT,
    "AWARD_SUBMITTED": SemanticType.SPONSORED_AWARD_LIST,
    "AWARD_GRANTED": SemanticType.SPONSORED_AWARD_LIST,
    "BAND": SemanticType.ENUMERATION_BAND,
    "BAND_RX": SemanticType.ENUMERATION_BAND,
    "CALL": SemanticType.STRING,
    "CHECK": SemanticType.STRING,
    "CLASS": SemanticType.STRING,
    "CLUBLOG_QSO_UPLOAD_DATE": SemanticType.DATE,
    "CLUBLOG_QSO_UPLOAD_STATUS": SemanticType.ENUMERATION_QSO_UPLOAD_STATUS,
    "CNTY": SemanticType.ENUMERATION_SECONDARY_ADMINISTRATIVE_SUBDIVISION,
    "COMMENT": SemanticType.STRING,
    "COMMENT_INTL": SemanticType.INTERNATIONAL_STRING,
    "CONT": SemanticType.ENUMERATION_CONTINENT,
    "CONTACTED_OP": SemanticType.STRING,
    "CONTEST_ID": SemanticType.STRING,
    "COUNTRY": SemanticType.STRING,
    "COUNTRY_INTL": SemanticType.INTERNATIONAL_STRING,
    "CQZ": SemanticType.POSITIVE_INTEGER,
    "CREDIT_SUBMITTED": SemanticType.CREDIT_LIST,
    "CREDIT_GRANTED": SemanticType.CREDIT_LIST,
    "DARC_DOK": SemanticType.ENUMERATION_DARC_DOK,
    "DISTANCE": SemanticType.NUMBER,
    "DXCC": SemanticType.ENUMERATION_DXCC_ENTITY_CODE,
    "EMAIL": SemanticType.STRING,
    "EQ_CALL": SemanticType.STRING,
    "EQSL_QSLRDATE": SemanticType.DATE,
    "EQSL_QSLSDATE": SemanticType.DATE,
    "EQSL_QSL_RCVD": SemanticType.ENUMERATION_QSL_RECEIVED,
    "EQSL_QSL_SENT": SemanticType.ENUMERATION_QSL_SENT,
    "FISTS": SemanticType.POSITIVE_INTEGER,
    "FISTS_CC": SemanticType.POSITIVE_INTEGER,
    "FORCE_INIT": SemanticType.BOOLEAN,
    "FREQ": SemanticType.NUMBER,
    "FREQ_RX": SemanticType.NUMBER,
    "GRIDSQUARE": SemanticType.GRID_SQUARE,
    "GUEST_OP": SemanticType.STRING,
    "HRDLOG_QSO_UPLOAD_DATE": SemanticType.DATE,
    "HRDLOG_QSO_UPLOAD_STATUS": SemanticType.ENUMERATION_QSO_UPLOAD_STATUS,
    "IOTA": SemanticType.IOTA_REFERENCE_NUMBER,
    "IOTA_ISLAND_ID": SemanticType.POSITIVE_INTEGER,
    "ITUZ": SemanticType.POSITIVE_INTEGER,
    "K_INDEX": SemanticType.INTEGER,
    "LAT": SemanticType.LOCATION,
    "LON": SemanticType.LOCATION,
    "LOTW_QSLRDATE": SemanticType.DATE,
    "LOTW_QSLSDATE": SemanticType.DATE,
    "LOTW_QSL_RCVD": SemanticType.ENUMERATION_QSL_RECEIVED,
    "LOTW_QSL_SENT": SemanticType.ENUMERATION_QSL_SENT,
    "MAX_BURSTS": SemanticType.NUMBER,
    "MODE": SemanticType.ENUMERATION_MODE,
    "MS_SHOWER": SemanticType.STRING,
    "MY_ANTENNA": SemanticType.STRING,
    "MY_ANTENNA_INTL": SemanticType.INTERNATIONAL_STRING,
    "MY_CITY": SemanticType.STRING,
    "MY_CITY_INTL": SemanticType.INTERNATIONAL_STRING,
    "MY_CNTY": SemanticType.ENUMERATION_SECONDARY_ADMINISTRATIVE_SUBDIVISION,
    "MY_COUNTRY": SemanticType.STRING,
    "MY_COUNTRY_INTL": SemanticType.INTERNATIONAL_STRING,
    "MY_CQ_ZONE": SemanticType.POSITIVE_INTEGER,
    "MY_DXCC": SemanticType.ENUMERATION_DXCC_ENTITY_CODE,
    "MY_FISTS": SemanticType.POSITIVE_INTEGER,
    "MY_GRIDSQUARE": SemanticType.GRID_SQUARE,
    "MY_IOTA": SemanticType.IOTA_REFERENCE_NUMBER,
    "MY_IOTA_ISLAND_ID": SemanticType.POSITIVE_INTEGER,
    "MY_ITU_ZONE": SemanticType.POSITIVE_INTEGER,
    "MY_LAT": SemanticType.LOCATION,
    "MY_LON": SemanticType.LOCATION,
    "MY_NAME": SemanticType.STRING,
    "MY_NAME_INTL": SemanticType.INTERNATIONAL_STRING,
    "MY_POSTAL_CODE": SemanticType.STRING,
    "MY_POSTAL_CODE_INTL": SemanticType.INTERNATIONAL_STRING,
    "MY_RIG": SemanticType.STRING,
    "MY_RIG_INTL": SemanticType.INTERNATIONAL_STRING,
    "MY_SIG": SemanticType.STRING,
    "MY_SIG_INTL": SemanticType.INTERNATIONAL_STRING,
    "MY_SIG_INFO": SemanticType.STRING,
    "MY_SIG_INFO_INTL": SemanticType.INTERNATIONAL_STRING,
    "MY_SOTA_REF": SemanticType.SOTA_REFERENCE,
    "MY_STATE": SemanticType.ENUMERATION_PRIMARY_ADMINISTRATIVE_SUBDIVISION,
    "MY_STREET": SemanticType.STRING,
    "MY_STREET_INTL": SemanticType.INTERNATIONAL_STRING,
    "MY_USACA_COUNTIES": SemanticType.SECONDARY_SUBDIVISION_LIST,
    "MY_VUCC_GRIDS": SemanticType.GRID_SQUARE_LIST,
    "NAME": SemanticType.STRING,
    "NAME_INTL": SemanticType.INTERNATIONAL_STRING,
    "NOTES": SemanticType.MULTILINE_STRING,
    "NOTES_INTL": SemanticType.INTERNATIONAL_MULTILINE_STRING,
    "NR_BURSTS": SemanticType.INTEGER,
    "NR_PINGS": SemanticType.INTEGER,
    "OPERATOR": SemanticType.STRING,
    "OWNER_CALLSIGN": SemanticType.STRING,
    "PFX": SemanticType.STRING,
    "PRECEDENCE": SemanticType.STRING,
    "PROP_MODE": SemanticType.ENUMERATION_PROPAGATION_MODE,
    "PUBLIC_KEY": SemanticType.STRING,
    "QRZCOM_QSO_UPLOAD_DATE": SemanticType.DATE,
    "QRZCOM_QSO_UPLOAD_STATUS": SemanticType.ENUMERATION_QSO_UPLOAD_STATUS,
    "QSLMSG": SemanticType.MULTILINE_STRING,
    "QSLRDATE": SemanticType.DATE,
    "QSLSDATE": SemanticType.DATE,
    "QSL_RCVD": SemanticType.ENUMERATION_QSL_RECEIVED,
    "QSL_RCVD_VIA": SemanticType.ENUMERATION_QSL_VIA,
    "QSL_SENT": SemanticType.ENUMERATION_QSL_SENT,
    "QSL_SENT_VIA": SemanticType.ENUMERATION_QSL_VIA,
    "QSL_VIA": SemanticType.STRING,
    "QSO_COMPLETE": SemanticType.ENUMERATION_QSO_COMPLETE,
    "QSO_DATE": SemanticType.DATE,
    "QSO_DATE_OFF": SemanticType.DATE,
    "QSO_RANDOM": SemanticType.BOOLEAN,
    "QTH": SemanticType.STRING,
    "QTH_INTL": SemanticType.INTERNATIONAL_STRING,
    "REGION": SemanticType.ENUMERATION_REGION,
    "RIG": SemanticType.MULTILINE_STRING,
    "RIG_INTL": SemanticType.INTERNATIONAL_MULTILINE_STRING,
    "RST_RCVD": SemanticType.STRING,
    "RST_SENT": SemanticType.STRING,
    "RX_PWR": SemanticType.NUMBER,
    "SAT_MODE": SemanticType.STRING,
    "SAT_NAME": SemanticType.STRING,
    "SFI_NAME": SemanticType.INTEGER,
    "SIG": SemanticType.STRING,
    "SIG_INTL": SemanticType.INTERNATIONAL_STRING,
    "SIG_INFO": SemanticType.STRING,
    "SIG_INFO_INTL": SemanticType.INTERNATIONAL_STRING,
    "SILENT_KEY": SemanticType.BOOLEAN,
    "SKCC": SemanticType.STRING,
    "SOTA_REF": SemanticType.SOTA_REFERENCE,
    "SRX": SemanticType.INTEGER,
    "SRX_STRING": SemanticType.STRING,
    "STATE": SemanticType.ENUMERATION_PRIMARY_ADMINISTRATIVE_SUBDIVISION,
    "STATION_CALLSIGN": SemanticType.STRING,
    "STX": SemanticType.INTEGER,
    "STX_STRING": SemanticType.STRING,
    "SUBMODE": SemanticType.STRING,
    "SWL": SemanticType.BOOLEAN,
    "TEN_TEN": SemanticType.POSITIVE_INTEGER,
    "TIME_OFF": SemanticType.TIME,
    "TIME_ON": SemanticType.TIME,
    "TX_PWR": SemanticType.NUMBER,
    "UKSMG": SemanticType.POSITIVE_INTEGER,
    "USACA_COUNTIES": SemanticType.SECONDARY_SUBDIVISION_LIST,
    "VE_PROV": SemanticType.STRING,
    "VUCC_GRIDS": SemanticType.GRID_SQUARE_LIST,
    "WEB": SemanticType.STRING,
}

# Some fields have a narrower range than "positive integer" alone implies.
POSITIVE_INTEGER_RANGES: Dict[str, Tuple[int, int]] = {
    "CQZ": (1, 40),
}

# Fields of these types are read but never written back out.
IMPORT_ONLY_TYPES: FrozenSet[SemanticType] = frozenset({SemanticType.AWARD_LIST})

# Fields whose values are always stored in upper case.
UPPERCASE_FIELDS: FrozenSet[str] = frozenset({"CALL", "MODE", "STATION_CALLSIGN"})

BANDS: FrozenSet[str] = frozenset({
    "2190m", "630m", "560m", "160m", "80m", "60m", "40m", "30m", "20m", "17m",
    "15m", "12m", "10m", "6m", "4m", "2m", "1.25m", "70cm", "33cm", "23cm",
    "13cm", "9cm", "6cm", "3cm", "1.25cm", "6mm", "4mm", "2.5mm", "2mm", "1mm",
})

MODES: FrozenSet[str] = frozenset({
    "AM", "ARDOP", "ATV", "C4FM", "CHIP", "CLO", "CONTESTI", "CW", "DIGITALVOICE", "DOMINO",
    "DSTAR", "FAX", "FM", "FSK441", "FT8", "HELL", "ISCAT", "JT4", "JT6M", "JT9",
    "JT44", "JT65", "MFSK", "MSK144", "MT63", "OLIVIA", "OPERA", "PAC", "PAX", "PKT",
    "PSK", "PSK2K", "Q15", "QRA64", "ROS", "RTTY", "RTTYM", "SSB", "SSTV", "T10",
    "THOR", "THRB", "TOR", "V4", "VOI", "WINMOR", "WSPR",
    # import-only modes
    "AMTORFEC", "ASCI", "CHIP64", "CHIP128", "DOMINOF", "FMHELL", "FSK31", "GTOR", "HELL80", "HFSK",
    "JT4A", "JT4B", "JT4C", "JT4D", "JT4E", "JT4F", "JT4G", "JT65A", "JT65B", "JT65C",
    "MFSK8", "MFSK16", "PAC2", "PAC3", "PAX2", "PCW", "PSK10", "PSK31", "PSK63", "PSK63F",
    "PSK125", "PSKAM10", "PSKAM31", "PSKAM50", "PSKFEC31", "PSKHELL", "QPSK31", "QPSK63", "QPSK125", "THRBX",
})

QSL_RECEIVED: FrozenSet[str] = frozenset({"Y", "N", "R", "I", "V"})

# Codes are sparse, and deleted entities are still legal values.
DXCC_ENTITIES: Dict[int, DxccEntity] = {
    1: DxccEntity("CANADA", "VE", EntityStatus.CURRENT),
    2: DxccEntity("ABU AIL IS.", "", EntityStatus.DELETED),
    3: DxccEntity("AFGHANISTAN", "YA", EntityStatus.CURRENT),
    4: DxccEntity("AGALEGA & ST. BRANDON IS.", "3B6", EntityStatus.CURRENT),
    5: DxccEntity("ALAND IS.", "OH0", EntityStatus.CURRENT),
    6: DxccEntity("ALASKA", "KL", EntityStatus.CURRENT),
    7: DxccEntity("ALBANIA", "ZA", EntityStatus.CURRENT),
    8: DxccEntity("ALDABRA", "", EntityStatus.DELETED),
    9: DxccEntity("AMERICAN SAMOA", "KH8", EntityStatus.CURRENT),
    10: DxccEntity("AMSTERDAM & ST. PAUL IS.", "FT5Z", EntityStatus.CURRENT),
    11: DxccEntity("ANDAMAN & NICOBAR IS.", "VU4", EntityStatus.CURRENT),
    12: DxccEntity("ANGUILLA", "VP2E", EntityStatus.CURRENT),
    13: DxccEntity("ANTARCTICA", "CE9", EntityStatus.CURRENT),
    14: DxccEntity("ARMENIA", "EK", EntityStatus.CURRENT),
    15: DxccEntity("ASIATIC RUSSIA", "UA9", EntityStatus.CURRENT),
    16: DxccEntity("NEW ZEALAND SUBANTARCTIC ISLANDS", "ZL9", EntityStatus.CURRENT),
    17: DxccEntity("AVES I.", "YV0", EntityStatus.CURRENT),
    18: DxccEntity("AZERBAIJAN", "4J", EntityStatus.CURRENT),
    19: DxccEntity("BAJO NUEVO", "", EntityStatus.DELETED),
    20: DxccEntity("BAKER & HOWLAND IS.", "KH1", EntityStatus.CURRENT),
    21: DxccEntity("BALEARIC IS.", "EA6", EntityStatus.CURRENT),
    22: DxccEntity("PALAU", "T8", EntityStatus.CURRENT),
    23: DxccEntity("BLENHEIM REEF", "", EntityStatus.DELETED),
    24: DxccEntity("BOUVET", "3Y/b", EntityStatus.CURRENT),
    25: DxccEntity("BRITISH NORTH BORNEO", "", EntityStatus.DELETED),
    26: DxccEntity("BRITISH SOMALILAND", "", EntityStatus.DELETED),
    27: DxccEntity("BELARUS", "EU", EntityStatus.CURRENT),
    28: DxccEntity("CANAL ZONE", "", EntityStatus.DELETED),
    29: DxccEntity("CANARY IS.", "EA8", EntityStatus.CURRENT),
    30: DxccEntity("CELEBE & MOLUCCA IS.", "", EntityStatus.DELETED),
    31: DxccEntity("C. KIRIBATI (BRITISH PHOENIX IS.)", "EA9", EntityStatus.CURRENT),
    32: DxccEntity("CEUTA & MELILLA", "T31", EntityStatus.CURRENT),
    33: DxccEntity("CHAGOS IS.", "VQ9", EntityStatus.CURRENT),
    34: DxccEntity("CHATHAM IS.", "ZL7", EntityStatus.CURRENT),
    35: DxccEntity("CHRISTMAS I.", "VK9X", EntityStatus.CURRENT),
    36: DxccEntity("CLIPPERTON I.", "FO/c", EntityStatus.CURRENT),
    37: DxccEntity("COCOS I.", "TI9", EntityStatus.CURRENT),
    38: DxccEntity("COCOS (KEELING) IS.", "VK9C", EntityStatus.CURRENT),
    39: DxccEntity("COMOROS", "", EntityStatus.DELETED),
    40: DxccEntity("CRETE", "SV9", EntityStatus.CURRENT),
    41: DxccEntity("CROZET I.", "FT5W", EntityStatus.CURRENT),
    42: DxccEntity("DAMAO, DIU", "", EntityStatus.DELETED),
    43: DxccEntity("DESECHEO I.", "KP5", EntityStatus.CURRENT),
    44: DxccEntity("DESROCHES", "", EntityStatus.DELETED),
    45: DxccEntity("DODECANESE", "SV5", EntityStatus.CURRENT),
    46: DxccEntity("EAST MALAYSIA", "9M6", EntityStatus.CURRENT),
    47: DxccEntity("EASTER I.", "CE0Y", EntityStatus.CURRENT),
    48: DxccEntity("E. KIRIBATI (LINE IS.)", "T32", EntityStatus.CURRENT),
    49: DxccEntity("EQUATORIAL GUINEA", "3C", EntityStatus.CURRENT),
    50: DxccEntity("MEXICO", "XE", EntityStatus.CURRENT),
    51: DxccEntity("ERITREA", "E3", EntityStatus.CURRENT),
    52: DxccEntity("ESTONIA", "ES", EntityStatus.CURRENT),
    53: DxccEntity("ETHIOPIA", "ET", EntityStatus.CURRENT),
    54: DxccEntity("EUROPEAN RUSSIA", "UA", EntityStatus.CURRENT),
    55: DxccEntity("FARQUHAR", "", EntityStatus.DELETED),
    56: DxccEntity("FERNANDO DE NORONHA", "PY0F", EntityStatus.CURRENT),
    57: DxccEntity("FRENCH EQUATORIAL AFRICA", "", EntityStatus.DELETED),
    58: DxccEntity("FRENCH INDO-CHINA", "", EntityStatus.DELETED),
    59: DxccEntity("FRENCH WEST AFRICA", "", EntityStatus.DELETED),
    60: DxccEntity("BAHAMAS", "C6", EntityStatus.CURRENT),
    61: DxccEntity("FRANZ JOSEF LAND", "R1FJ", EntityStatus.CURRENT),
    62: DxccEntity("BARBADOS", "8P", EntityStatus.CURRENT),
    63: DxccEntity("FRENCH GUIANA", "FY", EntityStatus.CURRENT),
    64: DxccEntity("BERMUDA", "VP9", EntityStatus.CURRENT),
    65: DxccEntity("BRITISH VIRGIN IS.", "VP2V", EntityStatus.CURRENT),
    66: DxccEntity("BELIZE", "V3", EntityStatus.CURRENT),
    67: DxccEntity("FRENCH INDIA", "", EntityStatus.DELETED),
    68: DxccEntity("KUWAIT/SAUDI ARABIA NEUTRAL ZONE", "", EntityStatus.DELETED),
    69: DxccEntity("CAYMAN IS.", "ZF", EntityStatus.CURRENT),
    70: DxccEntity("CUBA", "CM", EntityStatus.CURRENT),
    71: DxccEntity("GALAPAGOS IS.", "HC8", EntityStatus.CURRENT),
    72: DxccEntity("DOMINICAN REPUBLIC", "HI", EntityStatus.CURRENT),
    74: DxccEntity("EL SALVADOR", "YS", EntityStatus.CURRENT),
    75: DxccEntity("GEORGIA", "4L", EntityStatus.CURRENT),
    76: DxccEntity("GUATEMALA", "TG", EntityStatus.CURRENT),
    77: DxccEntity("GRENADA", "J3", EntityStatus.CURRENT),
    78: DxccEntity("HAITI", "HH", EntityStatus.CURRENT),
    79: DxccEntity("GUADELOUPE", "FG", EntityStatus.CURRENT),
    80: DxccEntity("HONDURAS", "HR", EntityStatus.CURRENT),
    81: DxccEntity("GERMANY", "", EntityStatus.DELETED),
    82: DxccEntity("JAMAICA", "6Y", EntityStatus.CURRENT),
    84: DxccEntity("MARTINIQUE", "FM", EntityStatus.CURRENT),
    85: DxccEntity("BONAIRE, CURACAO", "", EntityStatus.DELETED),
    86: DxccEntity("NICARAGUA", "YN", EntityStatus.CURRENT),
    88: DxccEntity("PANAMA", "HP", EntityStatus.CURRENT),
    89: DxccEntity("TURKS & CAICOS IS.", "VP5", EntityStatus.CURRENT),
    90: DxccEntity("TRINIDAD & TOBAGO", "9Y", EntityStatus.CURRENT),
    91: DxccEntity("ARUBA", "P4", EntityStatus.CURRENT),
    93: DxccEntity("GEYSER REEF", "", EntityStatus.DELETED),
    94: DxccEntity("ANTIGUA & BARBUDA", "V2", EntityStatus.CURRENT),
    95: DxccEntity("DOMINICA", "J7", EntityStatus.CURRENT),
    96: DxccEntity("MONTSERRAT", "VP2M", EntityStatus.CURRENT),
    97: DxccEntity("ST. LUCIA", "J6", EntityStatus.CURRENT),
    98: DxccEntity("ST. VINCENT", "J8", EntityStatus.CURRENT),
    99: DxccEntity("GLORIOSO IS.", "FR/g", EntityStatus.CURRENT),
    100: DxccEntity("ARGENTINA", "LU", EntityStatus.CURRENT),
    101: DxccEntity("GOA", "", EntityStatus.DELETED),
    102: DxccEntity("GOLD COAST, TOGOLAND", "", EntityStatus.DELETED),
    103: DxccEntity("GUAM", "KH2", EntityStatus.CURRENT),
    104: DxccEntity("BOLIVIA", "CP", EntityStatus.CURRENT),
    105: DxccEntity("GUANTANAMO BAY", "KG4", EntityStatus.CURRENT),
    106: DxccEntity("GUERNSEY", "GU", EntityStatus.CURRENT),
    107: DxccEntity("GUINEA", "3X", EntityStatus.CURRENT),
    108: DxccEntity("BRAZIL", "PY", EntityStatus.CURRENT),
    109: DxccEntity("GUINEA-BISSAU", "J5", EntityStatus.CURRENT),
    110: DxccEntity("HAWAII", "KH6", EntityStatus.CURRENT),
    111: DxccEntity("HEARD I.", "VK0H", EntityStatus.CURRENT),
    112: DxccEntity("CHILE", "CE", EntityStatus.CURRENT),
    113: DxccEntity("IFNI", "", EntityStatus.DELETED),
    114: DxccEntity("ISLE OF MAN", "GD", EntityStatus.CURRENT),
    115: DxccEntity("ITALIAN SOMALILAND", "", EntityStatus.DELETED),
    116: DxccEntity("COLOMBIA", "HK", EntityStatus.CURRENT),
    117: DxccEntity("ITU HQ", "4U1I", EntityStatus.CURRENT),
    118: DxccEntity("JAN MAYEN", "JX", EntityStatus.CURRENT),
    119: DxccEntity("JAVA", "", EntityStatus.DELETED),
    120: DxccEntity("ECUADOR", "HC", EntityStatus.CURRENT),
    122: DxccEntity("JERSEY", "GJ", EntityStatus.CURRENT),
    123: DxccEntity("JOHNSTON I.", "KH3", EntityStatus.CURRENT),
    124: DxccEntity("JUAN DE NOVA, EUROPA", "FR/j", EntityStatus.CURRENT),
    125: DxccEntity("JUAN FERNANDEZ IS.", "CE0Z", EntityStatus.CURRENT),
    126: DxccEntity("KALININGRAD", "UA2", EntityStatus.CURRENT),
    127: DxccEntity("KAMARAN IS.", "", EntityStatus.DELETED),
    128: DxccEntity("KARELO-FINNISH REPUBLIC", "", EntityStatus.DELETED),
    129: DxccEntity("GUYANA", "8R", EntityStatus.CURRENT),
    130: DxccEntity("KAZAKHSTAN", "UN", EntityStatus.CURRENT),
    131: DxccEntity("KERGUELEN IS.", "FT5X", EntityStatus.CURRENT),
    132: DxccEntity("PARAGUAY", "ZP", EntityStatus.CURRENT),
    133: DxccEntity("KERMADEC IS.", "ZL8", EntityStatus.CURRENT),
    134: DxccEntity("KINGMAN REEF", "KH5K", EntityStatus.CURRENT),
    135: DxccEntity("KYRGYZSTAN", "EX", EntityStatus.CURRENT),
    136: DxccEntity("PERU", "OA", EntityStatus.CURRENT),
    137: DxccEntity("REPUBLIC OF KOREA", "HK", EntityStatus.CURRENT),
    138: DxccEntity("KURE I.", "KH7K", EntityStatus.CURRENT),
    139: DxccEntity("KURIA MURIA I.", "", EntityStatus.DELETED),
    140: DxccEntity("SURINAME", "PZ", EntityStatus.CURRENT),
    141: DxccEntity("FALKLAND IS.", "VP8", EntityStatus.CURRENT),
    142: DxccEntity("LAKSHADWEEP IS.", "VU7", EntityStatus.CURRENT),
    143: DxccEntity("LAOS", "XW", EntityStatus.CURRENT),
    144: DxccEntity("URUGUAY", "CX", EntityStatus.CURRENT),
    145: DxccEntity("LATVIA", "YL", EntityStatus.CURRENT),
    146: DxccEntity("LITHUANIA", "LY", EntityStatus.CURRENT),
    147: DxccEntity("LORD HOWE I.", "VK9L", EntityStatus.CURRENT),
    148: DxccEntity("VENEZUELA", "YV", EntityStatus.CURRENT),
    149: DxccEntity("AZORES", "CU", EntityStatus.CURRENT),
    150: DxccEntity("AUSTRALIA", "VK", EntityStatus.CURRENT),
    151: DxccEntity("MALYJ VYSOTSKIJ I.", "R1MV", EntityStatus.CURRENT),
    152: DxccEntity("MACAO", "XX9", EntityStatus.CURRENT),
    153: DxccEntity("MACQUARIE I.", "VK0M", EntityStatus.CURRENT),
    154: DxccEntity("YEMEN ARAB REPUBLIC", "", EntityStatus.DELETED),
    155: DxccEntity("MALAYA", "", EntityStatus.DELETED),
    157: DxccEntity("NAURU", "C2", EntityStatus.CURRENT),
    158: DxccEntity("VANUATU", "YJ", EntityStatus.CURRENT),
    159: DxccEntity("MALDIVES", "8Q", EntityStatus.CURRENT),
    160: DxccEntity("TONGA", "A3", EntityStatus.CURRENT),
    161: DxccEntity("MALPELO I.", "HK0/m", EntityStatus.CURRENT),
    162: DxccEntity("NEW CALEDONIA", "FK", EntityStatus.CURRENT),
    163: DxccEntity("PAPUA NEW GUINEA", "P2", EntityStatus.CURRENT),
    164: DxccEntity("MANCHURIA", "", EntityStatus.DELETED),
    165: DxccEntity("MAURITIUS", "3B8", EntityStatus.CURRENT),
    166: DxccEntity("MARIANA IS.", "KH0", EntityStatus.CURRENT),
    167: DxccEntity("MARKET REEF", "OJ0", EntityStatus.CURRENT),
    168: DxccEntity("MARSHALL IS.", "V7", EntityStatus.CURRENT),
    169: DxccEntity("MAYOTTE", "FH", EntityStatus.CURRENT),
    170: DxccEntity("NEW ZEALAND", "ZL", EntityStatus.CURRENT),
    171: DxccEntity("MELLISH REEF", "VK9M", EntityStatus.CURRENT),
    172: DxccEntity("PITCAIRN I.", "VP6", EntityStatus.CURRENT),
    173: DxccEntity("MICRONESIA", "V6", EntityStatus.CURRENT),
    174: DxccEntity("MIDWAY I.", "KH4", EntityStatus.CURRENT),
    175: DxccEntity("FRENCH POLYNESIA", "FO", EntityStatus.CURRENT),
    176: DxccEntity("FIJI", "3D", EntityStatus.CURRENT),
    177: DxccEntity("MINAMI TORISHIMA", "JD/m", EntityStatus.CURRENT),
    178: DxccEntity("MINERVA REEF", "", EntityStatus.DELETED),
    179: DxccEntity("MOLDOVA", "ER", EntityStatus.CURRENT),
    180: DxccEntity("MOUNT ATHOS", "SV/a", EntityStatus.CURRENT),
    181: DxccEntity("MOZAMBIQUE", "C9", EntityStatus.CURRENT),
    182: DxccEntity("NAVASSA I.", "KP1", EntityStatus.CURRENT),
    183: DxccEntity("NETHERLANDS BORNEO", "", EntityStatus.DELETED),
    184: DxccEntity("NETHERLANDS NEW GUINEA", "", EntityStatus.DELETED),
    185: DxccEntity("SOLOMON IS.", "H4", EntityStatus.CURRENT),
    186: DxccEntity("NEWFOUNDLAND, LABRADOR", "", EntityStatus.DELETED),
    187: DxccEntity("NIGER", "5U", EntityStatus.CURRENT),
    188: DxccEntity("NIUE", "ZK2", EntityStatus.CURRENT),
    189: DxccEntity("NORFOLK I.", "VK9N", EntityStatus.CURRENT),
    190: DxccEntity("SAMOA", "E5/n", EntityStatus.CURRENT),
    191: DxccEntity("NORTH COOK IS.", "E5/n", EntityStatus.CURRENT),
    192: DxccEntity("OGASAWARA", "JD/o", EntityStatus.CURRENT),
    193: DxccEntity("OKINAWA (RYUKYU IS.)", "", EntityStatus.DELETED),
    194: DxccEntity("OKINO TORI-SHIMA", "", EntityStatus.DELETED),
    195: DxccEntity("ANNOBON I.", "3C0", EntityStatus.CURRENT),
    196: DxccEntity("PALESTINE", "", EntityStatus.DELETED),
    197: DxccEntity("PALMYRA & JARVIS IS.", "KH5", EntityStatus.CURRENT),
    198: DxccEntity("PAPUA TERRITORY", "", EntityStatus.DELETED),
    199: DxccEntity("PETER 1 I.", "3Y/p", EntityStatus.CURRENT),
    200: DxccEntity("PORTUGUESE TIMOR", "", EntityStatus.DELETED),
    201: DxccEntity("PRINCE EDWARD & MARION IS.", "ZS8", EntityStatus.CURRENT),
    202: DxccEntity("PUERTO RICO", "KP4", EntityStatus.CURRENT),
    203: DxccEntity("ANDORRA", "C3", EntityStatus.CURRENT),
    204: DxccEntity("REVILLAGIGEDO", "XF4", EntityStatus.CURRENT),
    205: DxccEntity("ASCENSION I.", "ZD8", EntityStatus.CURRENT),
    206: DxccEntity("AUSTRIA", "OE", EntityStatus.CURRENT),
    207: DxccEntity("RODRIGUEZ I.", "3B9", EntityStatus.CURRENT),
    208: DxccEntity("RUANDA-URUNDI", "", EntityStatus.DELETED),
    209: DxccEntity("BELGIUM", "ON", EntityStatus.CURRENT),
    210: DxccEntity("SAAR", "", EntityStatus.DELETED),
    211: DxccEntity("SABLE I.", "CY0", EntityStatus.CURRENT),
    212: DxccEntity("BULGARIA", "LZ", EntityStatus.CURRENT),
    213: DxccEntity("SAINT MARTIN", "FS", EntityStatus.CURRENT),
    214: DxccEntity("CORSICA", "TK", EntityStatus.CURRENT),
    215: DxccEntity("CYPRUS", "5B", EntityStatus.CURRENT),
    216: DxccEntity("SAN ANDRES & PROVIDENCIA", "HK0/a", EntityStatus.CURRENT),
    217: DxccEntity("SAN FELIX & SAN AMBROSIO", "CE0X", EntityStatus.CURRENT),
    218: DxccEntity("CZECHOSLOVAKIA", "", EntityStatus.DELETED),
    219: DxccEntity("SAO TOME & PRINCIPE", "S9", EntityStatus.CURRENT),
    220: DxccEntity("SARAWAK", "", EntityStatus.DELETED),
    221: DxccEntity("DENMARK", "OZ", EntityStatus.CURRENT),
    222: DxccEntity("FAROE IS.", "OY", EntityStatus.CURRENT),
    223: DxccEntity("ENGLAND", "G", EntityStatus.CURRENT),
    224: DxccEntity("FINLAND", "OH", EntityStatus.CURRENT),
    225: DxccEntity("SARDINIA", "IS", EntityStatus.CURRENT),
    226: DxccEntity("SAUDI ARABIA/IRAQ NEUTRAL ZONE", "", EntityStatus.DELETED),
    227: DxccEntity("FRANCE", "F", EntityStatus.CURRENT),
    228: DxccEntity("SERRANA BANK & RONCADOR CAY", "", EntityStatus.DELETED),
    229: DxccEntity("GERMAN DEMOCRATIC REPUBLIC", "", EntityStatus.DELETED),
    230: DxccEntity("FEDERAL REPUBLIC OF GERMANY", "DL", EntityStatus.CURRENT),
    231: DxccEntity("SIKKIM", "", EntityStatus.DELETED),
    232: DxccEntity("SOMALIA", "T5", EntityStatus.CURRENT),
    233: DxccEntity("GIBRALTAR", "ZB", EntityStatus.CURRENT),
    234: DxccEntity("SOUTH COOK IS.", "E5/s", EntityStatus.CURRENT),
    235: DxccEntity("SOUTH GEORGIA I.", "VP8/g", EntityStatus.CURRENT),
    236: DxccEntity("GREECE", "SV", EntityStatus.CURRENT),
    237: DxccEntity("GREENLAND", "OX", EntityStatus.CURRENT),
    238: DxccEntity("SOUTH ORKNEY IS.", "VP8/o", EntityStatus.CURRENT),
    239: DxccEntity("HUNGARY", "HA", EntityStatus.CURRENT),
    240: DxccEntity("SOUTH SANDWICH IS.", "VP8/s", EntityStatus.CURRENT),
    241: DxccEntity("SOUTH SHETLAND IS.", "VP8/h", EntityStatus.CURRENT),
    242: DxccEntity("ICELAND", "TF", EntityStatus.CURRENT),
    243: DxccEntity("PEOPLE'S DEMOCRATIC REP. OF YEMEN", "", EntityStatus.DELETED),
    244: DxccEntity("SOUTHERN SUDAN", "", EntityStatus.DELETED),
    245: DxccEntity("IRELAND", "EI", EntityStatus.CURRENT),
    246: DxccEntity("SOVEREIGN MILITARY ORDER OF MALTA", "1A", EntityStatus.CURRENT),
    247: DxccEntity("SPRATLY IS.", "1S", EntityStatus.CURRENT),
    248: DxccEntity("ITALY", "I", EntityStatus.CURRENT),
    249: DxccEntity("ST. KITTS & NEVIS", "V4", EntityStatus.CURRENT),
    250: DxccEntity("ST. HELENA", "ZD7", EntityStatus.CURRENT),
    251: DxccEntity("LIECHTENSTEIN", "HB0", EntityStatus.CURRENT),
    252: DxccEntity("ST. PAUL I.", "CY9", EntityStatus.CURRENT),
    253: DxccEntity("ST. PETER & ST. PAUL ROCKS", "PY0S", EntityStatus.CURRENT),
    254: DxccEntity("LUXEMBOURG", "LX", EntityStatus.CURRENT),
    255: DxccEntity("ST. MAARTEN, SABA, ST. EUSTATIUS", "", EntityStatus.DELETED),
    256: DxccEntity("MADEIRA IS.", "CT3", EntityStatus.CURRENT),
    257: DxccEntity("MALTA", "9H", EntityStatus.CURRENT),
    258: DxccEntity("SUMATRA", "", EntityStatus.DELETED),
    259: DxccEntity("SVALBARD", "JW", EntityStatus.CURRENT),
    260: DxccEntity("MONACO", "3A", EntityStatus.CURRENT),
    261: DxccEntity("SWAN IS.", "", EntityStatus.DELETED),
    262: DxccEntity("TAJIKISTAN", "EY", EntityStatus.CURRENT),
    263: DxccEntity("NETHERLANDS", "PA", EntityStatus.CURRENT),
    264: DxccEntity("TANGIER", "", EntityStatus.DELETED),
    265: DxccEntity("NORTHERN IRELAND", "GI", EntityStatus.CURRENT),
    266: DxccEntity("NORWAY", "LA", EntityStatus.CURRENT),
    267: DxccEntity("TERRITORY OF NEW GUINEA", "", EntityStatus.DELETED),
    268: DxccEntity("TIBET", "", EntityStatus.DELETED),
    269: DxccEntity("POLAND", "SP", EntityStatus.CURRENT),
    270: DxccEntity("TOKELAU IS.", "ZK3", EntityStatus.CURRENT),
    271: DxccEntity("TRIESTE", "", EntityStatus.DELETED),
    272: DxccEntity("PORTUGAL", "CT", EntityStatus.CURRENT),
    273: DxccEntity("TRINDADE & MARTIM VAZ IS.", "PY0T", EntityStatus.CURRENT),
    274: DxccEntity("TRISTAN DA CUNHA & GOUGH I.", "ZD9", EntityStatus.CURRENT),
    275: DxccEntity("ROMANIA", "YO", EntityStatus.CURRENT),
    276: DxccEntity("TROMELIN I.", "FR/t", EntityStatus.CURRENT),
    277: DxccEntity("ST. PIERRE & MIQUELON", "FP", EntityStatus.CURRENT),
    278: DxccEntity("SAN MARINO", "T7", EntityStatus.CURRENT),
    279: DxccEntity("SCOTLAND", "GM", EntityStatus.CURRENT),
    280: DxccEntity("TURKMENISTAN", "EZ", EntityStatus.CURRENT),
    281: DxccEntity("SPAIN", "EA", EntityStatus.CURRENT),
    282: DxccEntity("TUVALU", "T2", EntityStatus.CURRENT),
    283: DxccEntity("UK SOVEREIGN BASE AREAS ON CYPRUS", "ZC4", EntityStatus.CURRENT),
    284: DxccEntity("SWEDEN", "SM", EntityStatus.CURRENT),
    285: DxccEntity("VIRGIN IS.", "KP2", EntityStatus.CURRENT),
    286: DxccEntity("UGANDA", "5X", EntityStatus.CURRENT),
    287: DxccEntity("SWITZERLAND", "HB", EntityStatus.CURRENT),
    288: DxccEntity("UKRAINE", "UR", EntityStatus.CURRENT),
    289: DxccEntity("UNITED NATIONS HQ", "4U1U", EntityStatus.CURRENT),
    291: DxccEntity("UNITED STATES OF AMERICA", "K", EntityStatus.CURRENT),
    292: DxccEntity("UZBEKISTAN", "UK", EntityStatus.CURRENT),
    293: DxccEntity("VIET NAM", "3W", EntityStatus.CURRENT),
    294: DxccEntity("WALES", "GW", EntityStatus.CURRENT),
    295: DxccEntity("VATICAN", "HV", EntityStatus.CURRENT),
    296: DxccEntity("SERBIA", "YU", EntityStatus.CURRENT),
    297: DxccEntity("WAKE I.", "KH9", EntityStatus.CURRENT),
    298: DxccEntity("WALLIS & FUTUNA IS.", "FW", EntityStatus.CURRENT),
    299: DxccEntity("WEST MALAYSIA", "9M2", EntityStatus.CURRENT),
    301: DxccEntity("W. KIRIBATI (GILBERT IS. )", "T30", EntityStatus.CURRENT),
    302: DxccEntity("WESTERN SAHARA", "S0", EntityStatus.CURRENT),
    303: DxccEntity("WILLIS I.", "VK9W", EntityStatus.CURRENT),
    304: DxccEntity("BAHRAIN", "A9", EntityStatus.CURRENT),
    305: DxccEntity("BANGLADESH", "S2", EntityStatus.CURRENT),
    306: DxccEntity("BHUTAN", "A5", EntityStatus.CURRENT),
    307: DxccEntity("ZANZIBAR", "", EntityStatus.DELETED),
    308: DxccEntity("COSTA RICA", "TI", EntityStatus.CURRENT),
    309: DxccEntity("MYANMAR", "XZ", EntityStatus.CURRENT),
    312: DxccEntity("CAMBODIA", "XU", EntityStatus.CURRENT),
    315: DxccEntity("SRI LANKA", "4S", EntityStatus.CURRENT),
    318: DxccEntity("CHINA", "BY", EntityStatus.CURRENT),
    321: DxccEntity("HONG KONG", "VR", EntityStatus.CURRENT),
    324: DxccEntity("INDIA", "VU", EntityStatus.CURRENT),
    327: DxccEntity("INDONESIA", "YB", EntityStatus.CURRENT),
    330: DxccEntity("IRAN", "EP", EntityStatus.CURRENT),
    333: DxccEntity("IRAQ", "YI", EntityStatus.CURRENT),
    336: DxccEntity("ISRAEL", "4X", EntityStatus.CURRENT),
    339: DxccEntity("JAPAN", "JA", EntityStatus.CURRENT),
    342: DxccEntity("JORDAN", "JY", EntityStatus.CURRENT),
    344: DxccEntity("DEMOCRATIC PEOPLE'S REP. OF KOREA", "HM", EntityStatus.CURRENT),
    345: DxccEntity("BRUNEI DARUSSALAM", "V8", EntityStatus.CURRENT),
    348: DxccEntity("KUWAIT", "9K", EntityStatus.CURRENT),
    354: DxccEntity("LEBANON", "OD", EntityStatus.CURRENT),
    363: DxccEntity("MONGOLIA", "JT", EntityStatus.CURRENT),
    369: DxccEntity("NEPAL", "9N", EntityStatus.CURRENT),
    370: DxccEntity("OMAN", "A4", EntityStatus.CURRENT),
    372: DxccEntity("PAKISTAN", "AP", EntityStatus.CURRENT),
    375: DxccEntity("PHILIPPINES", "DU", EntityStatus.CURRENT),
    376: DxccEntity("QATAR", "A7", EntityStatus.CURRENT),
    378: DxccEntity("SAUDI ARABIA", "HZ", EntityStatus.CURRENT),
    379: DxccEntity("SEYCHELLES", "S7", EntityStatus.CURRENT),
    381: DxccEntity("SINGAPORE", "9V", EntityStatus.CURRENT),
    382: DxccEntity("DJIBOUTI", "J2", EntityStatus.CURRENT),
    384: DxccEntity("SYRIA", "YK", EntityStatus.CURRENT),
    386: DxccEntity("TAIWAN", "BV", EntityStatus.CURRENT),
    387: DxccEntity("THAILAND", "HS", EntityStatus.CURRENT),
    390: DxccEntity("TURKEY", "TA", EntityStatus.CURRENT),
    391: DxccEntity("UNITED ARAB EMIRATES", "A6", EntityStatus.CURRENT),
    400: DxccEntity("ALGERIA", "7X", EntityStatus.CURRENT),
    401: DxccEntity("ANGOLA", "D2", EntityStatus.CURRENT),
    402: DxccEntity("BOTSWANA", "A2", EntityStatus.CURRENT),
    404: DxccEntity("BURUNDI", "9U", EntityStatus.CURRENT),
    406: DxccEntity("CAMEROON", "TJ", EntityStatus.CURRENT),
    408: DxccEntity("CENTRAL AFRICA", "TL", EntityStatus.CURRENT),
    409: DxccEntity("CAPE VERDE", "D4", EntityStatus.CURRENT),
    410: DxccEntity("CHAD", "TT", EntityStatus.CURRENT),
    411: DxccEntity("COMOROS", "D6", EntityStatus.CURRENT),
    412: DxccEntity("REPUBLIC OF THE CONGO", "9Q", EntityStatus.CURRENT),
    414: DxccEntity("DEMOCRATIC REPUBLIC OF THE CONGO", "TN", EntityStatus.CURRENT),
    416: DxccEntity("BENIN", "TY", EntityStatus.CURRENT),
    420: DxccEntity("GABON", "TR", EntityStatus.CURRENT),
    422: DxccEntity("THE GAMBIA", "C5", EntityStatus.CURRENT),
    424: DxccEntity("GHANA", "9G", EntityStatus.CURRENT),
    428: DxccEntity("COTE D'IVOIRE", "TU", EntityStatus.CURRENT),
    430: DxccEntity("KENYA", "5Z", EntityStatus.CURRENT),
    432: DxccEntity("LESOTHO", "7P", EntityStatus.CURRENT),
    434: DxccEntity("LIBERIA", "EL", EntityStatus.CURRENT),
    436: DxccEntity("LIBYA", "5A", EntityStatus.CURRENT),
    438: DxccEntity("MADAGASCAR", "5R", EntityStatus.CURRENT),
    440: DxccEntity("MALAWI", "7Q", EntityStatus.CURRENT),
    442: DxccEntity("MALI", "TZ", EntityStatus.CURRENT),
    444: DxccEntity("MAURITANIA", "5T", EntityStatus.CURRENT),
    446: DxccEntity("MOROCCO", "CN", EntityStatus.CURRENT),
    450: DxccEntity("NIGERIA", "5N", EntityStatus.CURRENT),
    452: DxccEntity("ZIMBABWE", "Z2", EntityStatus.CURRENT),
    453: DxccEntity("REUNION I.", "FR", EntityStatus.CURRENT),
    454: DxccEntity("RWANDA", "9X", EntityStatus.CURRENT),
    456: DxccEntity("SENEGAL", "6W", EntityStatus.CURRENT),
    458: DxccEntity("SIERRA LEONE", "9L", EntityStatus.CURRENT),
    460: DxccEntity("ROTUMA I.", "3D2/r", EntityStatus.CURRENT),
    462: DxccEntity("SOUTH AFRICA", "ZS", EntityStatus.CURRENT),
    464: DxccEntity("NAMIBIA", "V5", EntityStatus.CURRENT),
    466: DxccEntity("SUDAN", "ST", EntityStatus.CURRENT),
    468: DxccEntity("SWAZILAND", "3DA", EntityStatus.CURRENT),
    470: DxccEntity("TANZANIA", "5H", EntityStatus.CURRENT),
    474: DxccEntity("TUNISIA", "3V", EntityStatus.CURRENT),
    478: DxccEntity("EGYPT", "SU", EntityStatus.CURRENT),
    480: DxccEntity("BURKINA FASO", "XT", EntityStatus.CURRENT),
    482: DxccEntity("ZAMBIA", "9J", EntityStatus.CURRENT),
    483: DxccEntity("TOGO", "5V", EntityStatus.CURRENT),
    488: DxccEntity("WALVIS BAY", "", EntityStatus.DELETED),
    489: DxccEntity("CONWAY REEF", "3D2/c", EntityStatus.CURRENT),
    490: DxccEntity("BANABA I. (OCEAN I.)", "T33", EntityStatus.CURRENT),
    492: DxccEntity("YEMEN", "7O", EntityStatus.CURRENT),
    493: DxccEntity("PENGUIN IS.", "", EntityStatus.DELETED),
    497: DxccEntity("CROATIA", "9A", EntityStatus.CURRENT),
    499: DxccEntity("SLOVENIA", "S5", EntityStatus.CURRENT),
    501: DxccEntity("BOSNIA-HERZEGOVINA", "E7", EntityStatus.CURRENT),
    502: DxccEntity("MACEDONIA", "Z3", EntityStatus.CURRENT),
    503: DxccEntity("CZECH REPUBLIC", "OK", EntityStatus.CURRENT),
    504: DxccEntity("SLOVAK REPUBLIC", "OM", EntityStatus.CURRENT),
    505: DxccEntity("PRATAS I.", "BV9P", EntityStatus.CURRENT),
    506: DxccEntity("SCARBOROUGH REEF", "BS7", EntityStatus.CURRENT),
    507: DxccEntity("TEMOTU PROVINCE", "H40", EntityStatus.CURRENT),
    508: DxccEntity("AUSTRAL I.", "FO/a", EntityStatus.CURRENT),
    509: DxccEntity("MARQUESAS IS.", "FO/m", EntityStatus.CURRENT),
    510: DxccEntity("PALESTINE", "E4", EntityStatus.CURRENT),
    511: DxccEntity("TIMOR-LESTE", "4W", EntityStatus.CURRENT),
    512: DxccEntity("CHESTERFIELD IS.", "FK/c", EntityStatus.CURRENT),
    513: DxccEntity("DUCIE I.", "VP6/d", EntityStatus.CURRENT),
    514: DxccEntity("MONTENEGRO", "4O", EntityStatus.CURRENT),
    515: DxccEntity("SWAINS I.", "KH8/s", EntityStatus.CURRENT),
    516: DxccEntity("SAINT BARTHELEMY", "FJ", EntityStatus.CURRENT),
    517: DxccEntity("CURACAO", "PJ2", EntityStatus.CURRENT),
    518: DxccEntity("ST MAARTEN", "PJ7", EntityStatus.CURRENT),
    519: DxccEntity("SABA & ST. EUSTATIUS", "PJ5", EntityStatus.CURRENT),
    520: DxccEntity("BONAIRE", "PJ4", EntityStatus.CURRENT),
    521: DxccEntity("SOUTH SUDAN (REPUBLIC OF)", "Z8", EntityStatus.CURRENT),
    522: DxccEntity("REPUBLIC OF KOSOVO", "Z6", EntityStatus.CURRENT),
}


def type_of(field_name: str) -> Optional[SemanticType]:
    """Return the type of a field (any case), or None if the name is unknown."""
    return FIELD_TYPES.get(field_name.upper())


def dxcc_entity(code: int) -> Optional[DxccEntity]:
    """Look up a DXCC entity by its numeric code."""
    return DXCC_ENTITIES.get(code)
