import unittest

from myconstituency.model import DivisionBlock, VoteType
from myconstituency.text import norm
from myconstituency.votes.divisions import (
    classify_vote,
    extract_votes_for_member,
    find_division_blocks,
    find_motion_title,
    find_passed,
    find_sitting_date,
    member_pattern,
    votes_in_divisions,
)

TABLING = "Hon. Mr. Nally, Minister of Service Alberta and Red Tape Reduction: annual report. " * 12

SITTING = f"""Legislative Assembly of Alberta Votes and Proceedings Tuesday, May 14, 2024
Government Bills and Orders Second Reading
Bill 12 Fiscal Measures and Taxation Act, 2024 The question being put, the motion was agreed to.
For the motion: Boitchenko Cyr Ellis Smith (Brooks-Medicine Hat)
Against the motion: Ceci Eggen Ganley
Tabling Returns and Reports {TABLING}
Opposition Motion 507 Ms Hoffman moved that the Assembly urge the Government. The motion was defeated.
For the motion: Ceci Eggen Ganley
Against the motion: Boitchenko Cyr Ellis Smith (Brooks-Medicine Hat)
"""


class VotesForMemberTest(unittest.TestCase):

    def test_yes_no_and_absent(self):
        text = "For the motion: Smith, Lee Against the motion: Jones"

        smith = extract_votes_for_member(text, "Smith")
        self.assertEqual(1, len(smith))
        self.assertEqual(VoteType.YES, smith[0].vote)

        jones = extract_votes_for_member(text, "Jones")
        self.assertEqual(1, len(jones))
        self.assertEqual(VoteType.NO, jones[0].vote)

        self.assertEqual([], extract_votes_for_member(text, "Taylor"))

    def test_full_name_matches_on_surname(self):
        text = "For the motion: Smith, Lee Against the motion: Jones"

        self.assertEqual(VoteType.NO, extract_votes_for_member(text, "Jennifer  Jones")[0].vote)

    def test_riding_disambiguates_same_surname(self):
        text = "For the motion: Smith (Calgary-Centre) Against the motion: Smith (Edmonton-West)"

        calgary = extract_votes_for_member(text, "Smith", "Calgary-Centre")
        edmonton = extract_votes_for_member(text, "Smith", "Edmonton-West")

        self.assertEqual([VoteType.YES], [r.vote for r in calgary])
        self.assertEqual([VoteType.NO], [r.vote for r in edmonton])

    def test_without_riding_same_surname_on_both_sides_is_dropped(self):
        text = "For the motion: Smith (Calgary-Centre) Against the motion: Smith (Edmonton-West)"

        self.assertEqual([], extract_votes_for_member(text, "Smith"))

    def test_riding_stays_inside_one_parenthetical(self):
        text = "For the motion: Smith (Edmonton-West), Jones (Calgary-Centre) Against the motion: Lee"

        self.assertEqual([], extract_votes_for_member(text, "Smith", "Calgary-Centre"))

    def test_no_divisions(self):
        self.assertEqual([], extract_votes_for_member("Prayers. The Assembly adjourned at 5:59 p.m.", "Smith"))

    def test_empty_name(self):
        self.assertEqual([], extract_votes_for_member(SITTING, "  "))

    def test_empty_against_segment_is_still_scanned(self):
        records = extract_votes_for_member("For the motion: Smith Against the motion:", "Smith")

        self.assertEqual([VoteType.YES], [r.vote for r in records])

    def test_sitting(self):
        records = extract_votes_for_member(SITTING, "Danielle Smith", "Brooks-Medicine Hat")

        self.assertEqual([VoteType.YES, VoteType.NO], [r.vote for r in records])
        self.assertEqual(["Tuesday, May 14, 2024"] * 2, [r.date for r in records])
        self.assertTrue(records[0].title.startswith("Second Reading Bill 12 Fiscal Measures"))
        self.assertTrue(records[1].title.startswith("Opposition Motion 507"))
        self.assertEqual([True, False], [r.passed for r in records])
        self.assertIsNone(records[0].official_url)

    def test_title_is_trimmed(self):
        records = extract_votes_for_member(SITTING, "Ceci", max_title_length=40)

        for record in records:
            self.assertLessEqual(len(record.title), 40)

    def test_divisions_found_once_serve_every_member(self):
        text = norm(SITTING)
        divisions = find_division_blocks(text)

        self.assertEqual(2, len(divisions))
        self.assertEqual([VoteType.NO, VoteType.YES], [r.vote for r in votes_in_divisions(text, divisions, "Ceci")])
        self.assertEqual(extract_votes_for_member(SITTING, "Smith", "Brooks-Medicine Hat"),
                         votes_in_divisions(text, divisions, "Smith", "Brooks-Medicine Hat"))


class DivisionBlockTest(unittest.TestCase):

    def test_blocks_run_to_next_marker(self):
        text = "For the motion: A B Against the motion: C Division 2 For the motion: D Against the motion: E"

        blocks = find_division_blocks(text)

        self.assertEqual([
            DivisionBlock(0, "A B", "C Division 2"),
            DivisionBlock(text.index("For the motion: D"), "D", "E"),
        ], blocks)

    def test_colon_is_optional(self):
        self.assertEqual([DivisionBlock(0, "A", "B")], find_division_blocks("For the motion A Against the motion B"))

    def test_classify_both_sides_is_unknown(self):
        division = DivisionBlock(0, "Smith Lee", "Smith Jones")

        self.assertEqual(VoteType.UNKNOWN, classify_vote(member_pattern("Smith"), division))

    def test_surname_is_word_bounded(self):
        division = DivisionBlock(0, "Smithers", "Smith")

        self.assertEqual(VoteType.NO, classify_vote(member_pattern("Smith"), division))


class HeuristicsTest(unittest.TestCase):

    def test_title_defaults_to_vote(self):
        text = "Prayers. For the motion: Smith Against the motion: Jones"

        self.assertEqual("Vote", find_motion_title(text, text.index("For the motion")))

    def test_previous_division_labels_are_not_titles(self):
        text = "For the motion: A Against the motion: B For the motion: Smith Against the motion: Jones"

        self.assertEqual("Vote", find_motion_title(text, text.rindex("For the motion")))

    def test_bill_title(self):
        text = "Bill 2 Appropriation Act For the motion: Smith Against the motion: Jones"

        self.assertEqual("Bill 2 Appropriation Act", find_motion_title(text, text.index("For the motion")))

    def test_lettered_bill_title(self):
        text = "Bill C-3 Calgary Jewish Centre Amendment Act For the motion: Smith"

        self.assertEqual("Bill C-3 Calgary Jewish Centre Amendment Act", find_motion_title(text, text.index("For the motion")))

    def test_title_lookback_is_bounded(self):
        text = "Bill 2 Appropriation Act " + "x " * 500 + "For the motion: Smith"

        self.assertEqual("Vote", find_motion_title(text, text.index("For the motion")))

    def test_date_only_near_the_top(self):
        self.assertEqual("Monday, March 4, 2024", find_sitting_date("Votes and Proceedings Monday, March 4, 2024"))
        self.assertIsNone(find_sitting_date("x" * 2500 + " Monday, March 4, 2024"))

    def test_passed_cues(self):
        self.assertTrue(find_passed("the motion was agreed to. For the motion: A", 27))
        self.assertTrue(find_passed("The motion was carried. For the motion: A", 24))
        self.assertFalse(find_passed("the motion was defeated. For the motion: A", 25))
        self.assertFalse(find_passed("the amendment was negatived. For the motion: A", 29))
        self.assertFalse(find_passed("the motion was not agreed to. For the motion: A", 30))
        self.assertIsNone(find_passed("For the motion: A Against the motion: B", 0))
