import numpy as np
import pandas as pd

# Raw survey answers arrive as text labels from the decoder. Each retained attribute has its own
# mapping table from the exact raw label to an ordinal code. The order of the codes matters because
# the regional means computed downstream treat them as numbers.

# Electoral region: raw upper-case labels are mapped onto the twelve canonical region names.
# These canonical names are the join key against the event log.
REGION_CODES = {
    "BELFAST EAST": "Belfast East",
    "BELFAST NORTH": "Belfast North",
    "BELFAST SOUTH": "Belfast South",
    "BELFAST WEST": "Belfast West",
    "EAST ANTRIM": "East Antrim",
    "EAST LONDONDERRY": "East Londonderry",
    "FERMANAGH AND SOUTH TYRONE": "Fermanagh and South Tyrone",
    "FOYLE": "Foyle",
    "LAGAN VALLEY": "Lagan Valley",
    "MID ULSTER": "Mid Ulster",
    "NEWRY AND ARMAGH": "Newry and Armagh",
    "NORTH ANTRIM": "North Antrim",
}

CANONICAL_REGIONS = sorted(REGION_CODES.values())

# Community background: the regional mean of this code is the Protestant share of respondents.
RELIGION_CODES = {
    "Catholic": 0,
    "Protestant": 1,
}

GOVERNANCE_CODES = {
    "Strongly disapprove": 1,
    "Disapprove": 2,
    "Approve": 3,
    "Strongly approve": 4,
}

# How difficult it would be to find a comparable job
EMPLOYMENT_CODES = {
    "Very easy": 1,
    "Fairly easy": 2,
    "Fairly difficult": 3,
    "Very difficult": 4,
}

STD_LIVING_CODES = {
    "Much worse": 1,
    "Worse": 2,
    "About the same": 3,
    "Better": 4,
    "Much better": 5,
}

# One table per retained column. Affiliation columns are not recoded: their raw labels are
# only counted, never averaged.
SURVEY_RECODES = {
    "region": REGION_CODES,
    "religion": RELIGION_CODES,
    "governance": GOVERNANCE_CODES,
    "employment": EMPLOYMENT_CODES,
    "stdLiving": STD_LIVING_CODES,
}


def recode(raw_value: object, mapping: dict, default: object = np.nan) -> object:
    """
    Returns the code for raw_value, or default when the value is not a key of mapping.
    Lookup is exact and case-sensitive. Recoding never fails.
    """
    try:
        return mapping.get(raw_value, default)
    except TypeError:
        # Unhashable values cannot be keys of the mapping
        return default


def _is_numeric_mapping(mapping) -> bool:
    return all(isinstance(v, (int, float, np.integer, np.floating)) for v in mapping.values())


def recode_column(series: pd.Series, mapping: dict, default=np.nan) -> pd.Series:
    out = series.map(lambda v: recode(v, mapping, default))

    # Numeric tables are coerced so that a bad default or stray value becomes missing instead of raising
    if _is_numeric_mapping(mapping):
        out = pd.to_numeric(out, errors="coerce")
    return out


def recode_survey(df: pd.DataFrame, recodes: dict | None = None, default=np.nan) -> pd.DataFrame:
    # Works on a copy: the decoded survey stays untouched for any other consumer
    recodes = SURVEY_RECODES if recodes is None else recodes
    out = df.copy()

    missing = [c for c in recodes if c not in out.columns]
    if missing:
        raise KeyError(f"Missing columns. Looked for: {missing}. Available: {list(out.columns)}")

    for col, mapping in recodes.items():
        out[col] = recode_column(out[col], mapping, default)

    return out
