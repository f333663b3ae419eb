"""Tests for label normalization"""

import unittest

from linkedin_autofill.reasoning.normalize import (
    is_question_shaped,
    normalize_label,
    normalize_text,
)


class TestNormalizeLabel(unittest.TestCase):
    def test_strips_duplicated_question_caption(self):
        self.assertEqual(
            normalize_label("Years of experience? Years of experience?"),
            "Years of experience?",
        )

    def test_strips_duplicated_caption_without_question_mark(self):
        self.assertEqual(normalize_label("Mobile phone number Mobile phone number"), "Mobile phone number")

    def test_strips_duplicate_with_no_separator(self):
        self.assertEqual(normalize_label("Email addressEmail address"), "Email address")

    def test_collapses_whitespace_before_deduplicating(self):
        self.assertEqual(
            normalize_label("  How many years\n  of Python?\n\n How many years of   Python? "),
            "How many years of Python?",
        )

    def test_repeated_question_fallback(self):
        self.assertEqual(
            normalize_label("Are you authorized to work? Required. Are you authorized to work?"),
            "Are you authorized to work?",
        )

    def test_repeat_inside_a_longer_sentence_is_kept(self):
        for label in ["Java? Do you know Java?", "Python? Years of Python?"]:
            self.assertEqual(normalize_label(label), label)

    def test_leaves_ordinary_labels_alone(self):
        for label in ["What is your phone number?", "City", "Are you sure? Really?", "Notice period (weeks)"]:
            self.assertEqual(normalize_label(label), label)

    def test_preserves_case(self):
        self.assertEqual(normalize_label("LinkedIn Profile LinkedIn Profile"), "LinkedIn Profile")

    def test_is_idempotent(self):
        labels = [
            "Years of experience? Years of experience?",
            "A A A A",
            "Question? Required. Question?",
            "  spaced   out  ",
            "What is your phone number?",
            "",
        ]
        for label in labels:
            once = normalize_label(label)
            self.assertEqual(normalize_label(once), once, label)

    def test_empty_and_none(self):
        self.assertEqual(normalize_label(""), "")
        self.assertEqual(normalize_label(None), "")


class TestNormalizeText(unittest.TestCase):
    def test_lowercases_and_strips_punctuation(self):
        self.assertEqual(normalize_text("What's your E-mail?"), "whats your email")

    def test_question_shaped(self):
        self.assertTrue(is_question_shaped("Are you willing to relocate?"))
        self.assertFalse(is_question_shaped("City"))
        self.assertFalse(is_question_shaped(None))


if __name__ == "__main__":
    unittest.main()
