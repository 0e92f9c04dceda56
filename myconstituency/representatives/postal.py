import re
from typing import Optional

from myconstituency.errors import ValidationError

# Canada Post: no D, F, I, O, Q, U anywhere, and no W or Z in the first position.
CANADIAN_POSTAL = re.compile(r"^[ABCEGHJ-NPRSTVXY]\d[ABCEGHJ-NPRSTV-Z]\d[ABCEGHJ-NPRSTV-Z]\d$")
MIN_POSTAL_LENGTH = 3

# Forward sortation area first letter -> province. X covers both NT and NU, so it maps to nothing.
PROVINCE_BY_FSA_LETTER = {
    "A": "NL",
    "B": "NS",
    "C": "PE",
    "E": "NB",
    "G": "QC",
    "H": "QC",
    "J": "QC",
    "K": "ON",
    "L": "ON",
    "M": "ON",
    "N": "ON",
    "P": "ON",
    "R": "MB",
    "S": "SK",
    "T": "AB",
    "V": "BC",
    "Y": "YT",
}


def normalize_postal(postal) -> str:
    return re.sub("\\s+", "", postal or "").upper()


def is_likely_canadian_postal(postal: str) -> bool:
    return CANADIAN_POSTAL.match(postal or "") is not None


def spaced_postal(postal: str) -> str:
    postal = normalize_postal(postal)
    return f"{postal[:3]} {postal[3:]}" if len(postal) == 6 else postal


def province_from_postal(postal: str) -> Optional[str]:
    postal = normalize_postal(postal)
    return PROVINCE_BY_FSA_LETTER.get(postal[:1])


def validate_postal(raw) -> str:
    """@return the normalized postal code, or raises ValidationError"""
    if raw is None or len(str(raw).strip()) < MIN_POSTAL_LENGTH:
        raise ValidationError("Missing postal")

    postal = normalize_postal(str(raw))
    if not is_likely_canadian_postal(postal):
        raise ValidationError("That doesn't look like a Canadian postal code (format: A1A1A1).")
    return postal
