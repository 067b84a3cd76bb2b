import unittest
import sys
import os

# Add the 'src' directory to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from idea_validation.data_models import ExistingIdea, Submission
from idea_validation.duplicates import (
    DuplicateDetector,
    calculate_similarity,
    check_duplicates,
    comparison_text,
    similarity_scores,
)
from idea_validation.text import normalize_text
from sample_submissions import UNRELATED_IDEA, draft_one

FORTY_WORD_IDEA = (
    "A neighborhood tool library where residents borrow drills, ladders, pressure "
    "washers and garden equipment through a phone booking system, with volunteers "
    "checking items back in, members rating condition, and small monthly fees "
    "covering repairs, insurance and storage space rented from local churches."
)


class TestNormalization(unittest.TestCase):

    def test_normalize_text(self):
        self.assertEqual(normalize_text("  Hello,   WORLD!\nIt's  fine. "), "hello world its fine")

    def test_comparison_text_uses_core_fields_only(self):
        submission = Submission.from_dict({
            "ideal_customer_profile": "Profile",
            "product_idea": "Idea!",
            "pain_points": "Pain",
            "alternatives": "ignored",
            "category": ["ignored"],
        })
        self.assertEqual(comparison_text(submission), "profile idea pain")

    def test_existing_idea_preview_fallback(self):
        idea = ExistingIdea.from_dict({"preview": "Short preview", "pain_points": "pain"})
        self.assertEqual(comparison_text(idea), "short preview pain")


class TestSimilarity(unittest.TestCase):

    def test_identical_texts(self):
        text = normalize_text(FORTY_WORD_IDEA)
        self.assertEqual(calculate_similarity(text, text), 1.0)

    def test_identical_short_texts(self):
        """Identical texts score 1.0 even without words longer than three letters."""
        self.assertEqual(calculate_similarity("a cat on a mat", "a cat on a mat"), 1.0)

    def test_empty_text(self):
        self.assertEqual(calculate_similarity("", "anything here"), 0.0)
        self.assertEqual(calculate_similarity("anything here", ""), 0.0)

    def test_blend_of_word_and_bigram_jaccard(self):
        # Words longer than three letters: {abcd, efgh} vs {abcd, ijkl} -> 1/3.
        # Bigrams of "abcd efgh" and "abcd ijkl": 4 shared of 12 -> 1/3.
        similarity = calculate_similarity("abcd efgh", "abcd ijkl")
        self.assertAlmostEqual(similarity, 0.7 * (1 / 3) + 0.3 * (4 / 12))

    def test_similarity_is_symmetric(self):
        a = normalize_text(FORTY_WORD_IDEA)
        b = normalize_text(UNRELATED_IDEA["product_idea"])
        self.assertAlmostEqual(calculate_similarity(a, b), calculate_similarity(b, a))

    def test_scores_for_whole_corpus(self):
        text = normalize_text(FORTY_WORD_IDEA)
        scores = similarity_scores(text, [text, normalize_text(UNRELATED_IDEA["product_idea"]), ""])
        self.assertEqual(len(scores), 3)
        self.assertEqual(scores[0], 1.0)
        self.assertLess(scores[1], 0.5)
        self.assertEqual(scores[2], 0.0)


class TestDuplicateDetector(unittest.TestCase):
    """Test suite for the DuplicateDetector class."""

    def setUp(self):
        self.detector = DuplicateDetector()

    def test_empty_corpus(self):
        check = self.detector.check(Submission.from_dict(draft_one()), [])
        self.assertFalse(check.is_duplicate)
        check = self.detector.check(Submission.from_dict(draft_one()), None)
        self.assertFalse(check.is_duplicate)

    def test_near_identical_descriptions(self):
        """Two forty-word descriptions differing in two words are duplicates."""
        original = {"product_idea": FORTY_WORD_IDEA}
        candidate = Submission.from_dict({
            "product_idea": FORTY_WORD_IDEA.replace("drills", "saws").replace("churches", "schools"),
        })
        check = self.detector.check(candidate, [UNRELATED_IDEA, original])
        self.assertTrue(check.is_duplicate)
        self.assertGreater(check.similarity, 0.70)
        self.assertEqual(check.matched_index, 1)
        self.assertRegex(check.reason, r"^Very similar idea already exists \(\d+% similarity\)$")

    def test_unrelated_ideas(self):
        check = self.detector.check(Submission.from_dict(draft_one()), [UNRELATED_IDEA])
        self.assertFalse(check.is_duplicate)
        self.assertIsNone(check.similarity)

    def test_first_match_wins(self):
        idea = ExistingIdea.from_dict(draft_one())
        check = self.detector.check(Submission.from_dict(draft_one()), [UNRELATED_IDEA, idea, idea])
        self.assertTrue(check.is_duplicate)
        self.assertEqual(check.matched_index, 1)
        self.assertEqual(check.reason, "Very similar idea already exists (100% similarity)")

    def test_accepts_form_mapping(self):
        check = check_duplicates(draft_one(), [UNRELATED_IDEA, draft_one()])
        self.assertTrue(check.is_duplicate)
        self.assertEqual(check.matched_index, 1)

    def test_custom_threshold(self):
        detector = DuplicateDetector(threshold=0.99)
        candidate = Submission.from_dict({"product_idea": FORTY_WORD_IDEA.replace("drills", "saws")})
        check = detector.check(candidate, [{"product_idea": FORTY_WORD_IDEA}])
        self.assertFalse(check.is_duplicate)


if __name__ == '__main__':
    unittest.main()
