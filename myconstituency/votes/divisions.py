"""
Extract one member's recorded votes from the flattened text of an Alberta Votes & Proceedings PDF.

A recorded division in these documents reads like:

    ... Bill 12 Fiscal Measures and Taxation Act, 2024 ... the motion was agreed to.
    For the motion: Boitchenko Cyr Ellis Smith (Brooks-Medicine Hat) ...
    Against the motion: Ceci Eggen Ganley ...

Everything here is heuristic: titles, dates and outcomes are located by proximity to the division,
so each one is found by its own small function and may come back as None / a default.
"""
import logging
import re
from typing import List, Optional, Pattern

from myconstituency.model import DivisionBlock, VoteRecord, VoteType
from myconstituency.text import last_name_of, norm, norm_lower

logger = logging.getLogger(__name__)

DIVISION = re.compile(
    r"For the motion:?\s*(.*?)\s*Against the motion:?\s*(.*?)(?=For the motion|\Z)",
    re.IGNORECASE | re.DOTALL)

TITLE_HEADER = re.compile(
    r"Bill\s+[A-Z]-?\d+"
    r"|Bill\s+\d+"
    r"|Opposition Motion"
    r"|Government Motion"
    r"|(?<!for the )(?<!against the )Motion"
    r"|Second Reading"
    r"|Third Reading",
    re.IGNORECASE)
DEFAULT_TITLE = "Vote"
TITLE_LOOKBACK = 900

SITTING_DATE = re.compile(
    r"(Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday),\s+[A-Za-z]+\s+\d{1,2},\s+\d{4}")
DATE_HEAD = 2500

PASSED_WINDOW = 600
PASSED_CUES = ("motion was agreed", "carried")
FAILED_CUES = ("motion was defeated", "negatived", "not agreed")


def member_pattern(full_name: str, riding: Optional[str] = None) -> Optional[Pattern]:
    """
    Match a member by surname. Same-surname members are written "Surname (Riding)" in the source, so a
    riding narrows the match to that parenthetical. Without a riding every occurrence of the surname
    counts, which gives false positives for common surnames.
    """
    surname = norm_lower(last_name_of(full_name))
    if not surname:
        return None

    riding = norm_lower(riding)
    if riding:
        return re.compile(rf"\b{re.escape(surname)}\b\s*\([^)]*{re.escape(riding)}[^)]*\)", re.IGNORECASE)
    return re.compile(rf"\b{re.escape(surname)}\b", re.IGNORECASE)


def find_division_blocks(text: str) -> List[DivisionBlock]:
    return [
        DivisionBlock(match.start(), norm(match.group(1)), norm(match.group(2)))
        for match in DIVISION.finditer(text)
    ]


def classify_vote(pattern: Pattern, division: DivisionBlock) -> VoteType:
    voted_yes = pattern.search(norm_lower(division.for_block)) is not None
    voted_no = pattern.search(norm_lower(division.against_block)) is not None

    if voted_yes and not voted_no:
        return VoteType.YES
    if voted_no and not voted_yes:
        return VoteType.NO
    return VoteType.UNKNOWN


def find_motion_title(text: str, start: int, lookback: int = TITLE_LOOKBACK,
                      max_length: Optional[int] = None) -> str:
    before = text[max(0, start - lookback):start]
    match = TITLE_HEADER.search(before)
    if not match:
        return DEFAULT_TITLE

    title = norm(before[match.start():])
    if max_length and len(title) > max_length:
        title = title[:max_length].rsplit(" ", 1)[0]
    return title or DEFAULT_TITLE


def find_sitting_date(text: str, head: int = DATE_HEAD) -> Optional[str]:
    match = SITTING_DATE.search(text[:head])
    return match.group(0) if match else None


def find_passed(text: str, start: int, window: int = PASSED_WINDOW) -> Optional[bool]:
    around = text[max(0, start - window):min(len(text), start + window)].lower()

    passed = None
    if any(cue in around for cue in PASSED_CUES):
        passed = True
    # "not agreed" contains "agreed", so negative cues are checked last
    if any(cue in around for cue in FAILED_CUES):
        passed = False
    return passed


def extract_votes_for_member(pdf_text: str, full_name: str, riding: Optional[str] = None,
                             max_title_length: Optional[int] = None) -> List[VoteRecord]:
    text = norm(pdf_text)
    divisions = find_division_blocks(text)
    logger.debug("found %d divisions", len(divisions))
    return votes_in_divisions(text, divisions, full_name, riding, max_title_length)


def votes_in_divisions(text: str, divisions: List[DivisionBlock], full_name: str, riding: Optional[str] = None,
                       max_title_length: Optional[int] = None) -> List[VoteRecord]:
    """
    @param text: normalized document text, the one the divisions were found in
    """
    pattern = member_pattern(full_name, riding)
    if pattern is None:
        return []

    sitting_date = find_sitting_date(text)

    records = []
    for division in divisions:
        vote = classify_vote(pattern, division)
        if vote is VoteType.UNKNOWN:
            continue

        records.append(VoteRecord(
            title=find_motion_title(text, division.start, max_length=max_title_length),
            date=sitting_date,
            vote=vote,
            passed=find_passed(text, division.start),
        ))

    return records
