"""
The data model behind myconstituency.

It is split into two parts, matching the two pipelines:
- votes: one member's recorded votes, extracted from the latest Alberta Votes & Proceedings PDF.
- representatives: elected officials for a postal code, bucketed by level of government.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


# Classes related to the Votes & Proceedings extraction:

class VoteType(Enum):
    YES = "Yes"
    NO = "No"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class DivisionBlock:
    start: int  # offset of "For the motion" in the normalized document text.
    for_block: str
    against_block: str


@dataclass(frozen=True)
class VoteRecord:
    title: str
    date: Optional[str]  # example: "Tuesday, May 14, 2024", one per sitting.
    vote: VoteType
    passed: Optional[bool]  # None when the document gives no lexical cue.
    official_url: Optional[str] = None


# Classes related to representatives:

@dataclass
class Representative:
    name: str
    elected_office: str
    district_name: Optional[str] = None
    party_name: Optional[str] = None
    email: Optional[str] = None
    url: Optional[str] = None
    photo_url: Optional[str] = None
    offices: List[Dict] = field(default_factory=list)
    source_url: Optional[str] = None
    roles: List[str] = field(default_factory=list)  # from "extra.roles", only used to spot premiers and prime ministers.

    @property
    def key(self):
        return (self.name or "").lower(), (self.elected_office or "").lower()


@dataclass
class Buckets:
    municipal: List[Representative] = field(default_factory=list)
    provincial: List[Representative] = field(default_factory=list)
    federal: List[Representative] = field(default_factory=list)
    unclassified: List[Representative] = field(default_factory=list)

    def bucket(self, level: str) -> List[Representative]:
        return getattr(self, level)


@dataclass
class LookupResult:
    postal: str
    reps: Buckets
    city: Optional[str] = None
    province: Optional[str] = None
    note: Optional[str] = None
