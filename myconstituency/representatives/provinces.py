from typing import Optional

from myconstituency.text import norm

PROVINCE_NAME_BY_CODE = {
    "AB": "Alberta",
    "BC": "British Columbia",
    "MB": "Manitoba",
    "NB": "New Brunswick",
    "NL": "Newfoundland and Labrador",
    "NS": "Nova Scotia",
    "NT": "Northwest Territories",
    "NU": "Nunavut",
    "ON": "Ontario",
    "PE": "Prince Edward Island",
    "QC": "Quebec",
    "SK": "Saskatchewan",
    "YT": "Yukon",
}

# Names of the representative sets on Represent (https://represent.opennorth.ca/representative-sets/).
LEGISLATURE_SET_NAME_BY_CODE = {
    "AB": "Legislative Assembly of Alberta",
    "BC": "Legislative Assembly of British Columbia",
    "MB": "Legislative Assembly of Manitoba",
    "NB": "Legislative Assembly of New Brunswick",
    "NL": "Newfoundland and Labrador House of Assembly",
    "NS": "Nova Scotia House of Assembly",
    "NT": "Legislative Assembly of the Northwest Territories",
    "NU": "Legislative Assembly of Nunavut",
    "ON": "Legislative Assembly of Ontario",
    "PE": "Legislative Assembly of Prince Edward Island",
    "QC": "Assemblée nationale du Québec",
    "SK": "Legislative Assembly of Saskatchewan",
    "YT": "Legislative Assembly of Yukon",
}

PROVINCE_CODE_ALIASES = dict(
    [(code, code) for code in PROVINCE_NAME_BY_CODE]
    + [(name.upper(), code) for code, name in PROVINCE_NAME_BY_CODE.items()]
    + [("QUÉBEC", "QC")]
)


def normalize_province_code(province) -> Optional[str]:
    key = norm(province).upper()
    if not key:
        return None
    return PROVINCE_CODE_ALIASES.get(key)


def province_name(code: Optional[str]) -> Optional[str]:
    return PROVINCE_NAME_BY_CODE.get(normalize_province_code(code) or "")
