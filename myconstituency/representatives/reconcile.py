"""
Turn the representatives returned by Represent into the municipal / provincial / federal buckets shown
for a postal code, adding the premier and prime minister, who are not tied to the postal code's districts.
"""
import dataclasses
import logging
import re
from typing import Iterable, List, Optional

from myconstituency.model import Buckets, Representative
from myconstituency.representatives.overrides import Overrides
from myconstituency.representatives.provinces import normalize_province_code, province_name
from myconstituency.text import norm_lower

logger = logging.getLogger(__name__)

MUNICIPAL_OFFICE = re.compile(r"mayor|councillor|alderman", re.IGNORECASE)
PROVINCIAL_OFFICE = re.compile(r"\b(mla|mpp|mna|mha)\b|legislative assembly|assemblée nationale", re.IGNORECASE)
# \b keeps "MPP" out of the federal bucket
FEDERAL_OFFICE = re.compile(r"\bmp\b|member of parliament", re.IGNORECASE)

DENIED_ROLE_FRAGMENTS = (
    "parliamentary secretary",
    "to the premier",
    "to the prime minister",
    "premier's",
    "chief of staff",
    "principal secretary",
    "press secretary",
    "communications",
    "assistant",
    "advisor",
    "adviser",
    "staff",
)
DENIED_ROLE_PREFIXES = ("deputy premier", "deputy prime minister")

PREMIER_OFFICE_POSTAL = re.compile(r"premier'?s office|bureau du premier ministre", re.IGNORECASE)

PREMIER = "Premier"
PRIME_MINISTER = "Prime Minister"
CANADA = "Canada"


def dedupe(reps: Iterable[Representative]) -> List[Representative]:
    seen = set()
    result = []
    for rep in reps:
        if rep.key not in seen:
            seen.add(rep.key)
            result.append(rep)
    return result


def is_municipal(rep: Representative) -> bool:
    return MUNICIPAL_OFFICE.search(rep.elected_office or "") is not None


def is_provincial(rep: Representative) -> bool:
    return PROVINCIAL_OFFICE.search(rep.elected_office or "") is not None


def is_federal(rep: Representative) -> bool:
    return FEDERAL_OFFICE.search(rep.elected_office or "") is not None


def bucket(reps: Iterable[Representative]) -> Buckets:
    buckets = Buckets()
    for rep in reps:
        matched = False
        if is_municipal(rep):
            buckets.municipal.append(rep)
            matched = True
        if is_provincial(rep):
            buckets.provincial.append(rep)
            matched = True
        if is_federal(rep):
            buckets.federal.append(rep)
            matched = True
        if not matched:
            logger.info("no bucket for office %r (%s)", rep.elected_office, rep.name)
            buckets.unclassified.append(rep)
    return buckets


def _is_denied_role(role: str) -> bool:
    return role.startswith(DENIED_ROLE_PREFIXES) or any(fragment in role for fragment in DENIED_ROLE_FRAGMENTS)


def is_premier_role(role: str) -> bool:
    role = norm_lower(role)
    if not role or _is_denied_role(role):
        return False
    return role == "premier" or role.startswith("premier of ") or role.startswith("premier ministre")


def is_prime_minister_role(role: str) -> bool:
    role = norm_lower(role)
    if not role or _is_denied_role(role):
        return False
    return role.startswith("prime minister")


def find_premier(roster: List[Representative]) -> Optional[Representative]:
    by_role = next((rep for rep in roster if any(is_premier_role(role) for role in rep.roles)), None)
    if by_role:
        return by_role

    # some legislatures only mark it on the office address
    return next((rep for rep in roster
                 if any(PREMIER_OFFICE_POSTAL.search(str(office.get("postal") or "")) for office in rep.offices)),
                None)


def find_prime_minister(roster: List[Representative]) -> Optional[Representative]:
    return next((rep for rep in roster if any(is_prime_minister_role(role) for role in rep.roles)), None)


def _has_name(reps: List[Representative], name: str) -> bool:
    name = norm_lower(name)
    return any(norm_lower(rep.name) == name for rep in reps)


def inject_officeholder(reps: List[Representative], officeholder: Representative,
                        elected_office: str, district_name: Optional[str]) -> bool:
    """
    Add a province- or country-wide officeholder to a bucket, unless someone with that name is already in it.
    @return whether the officeholder was added
    """
    if _has_name(reps, officeholder.name):
        return False
    reps.append(dataclasses.replace(officeholder, elected_office=elected_office, district_name=district_name))
    return True


def apply_overrides(buckets: Buckets, postal: Optional[str], province_code: Optional[str],
                    overrides: Optional[Overrides]) -> None:
    if overrides is None:
        return

    for override in overrides.for_province(province_code) + overrides.for_postal(postal):
        target = buckets.bucket(override.bucket)
        if not _has_name(target, override.representative.name):
            target.append(override.representative)


def reconcile(reps: Iterable[Representative],
              province_code: Optional[str] = None,
              postal: Optional[str] = None,
              premier: Optional[Representative] = None,
              prime_minister: Optional[Representative] = None,
              overrides: Optional[Overrides] = None) -> Buckets:
    buckets = bucket(dedupe(reps))

    if premier:
        code = normalize_province_code(province_code)
        inject_officeholder(buckets.provincial, premier, PREMIER, province_name(code) or code or province_code)
    if prime_minister:
        inject_officeholder(buckets.federal, prime_minister, PRIME_MINISTER, CANADA)

    apply_overrides(buckets, postal, province_code, overrides)
    return buckets
