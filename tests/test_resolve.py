"""Tests for the answer resolver"""

import unittest

from linkedin_autofill.data.knowledge import KnowledgeEntry, KnowledgeTables
from linkedin_autofill.reasoning.resolve import (
    find_technology,
    format_text_answer,
    is_duration_question,
    is_numeric_answer,
    needs_curation,
    resolve_answer,
)


class TestResolveAnswer(unittest.TestCase):
    def setUp(self):
        self.profile = {
            "phone": "555-0100",
            "email": "jordan@example.com",
            "full_name": "Jordan Example",
            "work_auth": "Yes",
            "legally_authorized": True,
            "salary_expectation": 120000,
            "location": "Detroit, MI",
            "links": {"github": "https://github.com/jordan-example"},
            "experience_years": {"Python": 5, "React": 2},
        }
        self.tables = KnowledgeTables(
            tech_keywords={"Python": ["python"], "React": ["react", "reactjs"], "JavaScript": ["javascript"]},
        )

    def test_curated_exact_outranks_category(self):
        self.tables.questions = [KnowledgeEntry("What is your phone number?", "555-9999")]
        answer, key = resolve_answer("What is your phone number?", self.profile, self.tables)
        self.assertEqual(answer, "555-9999")
        self.assertEqual(key, "curated_exact")

    def test_curated_exact_outranks_substring(self):
        self.tables.questions = [
            KnowledgeEntry("phone number", "substring"),
            KnowledgeEntry("What is your phone number?", "exact"),
        ]
        self.assertEqual(resolve_answer("What is your phone number?", self.profile, self.tables)[0], "exact")

    def test_curated_substring_matches_in_either_direction(self):
        self.tables.questions = [KnowledgeEntry("How did you hear about this position?", "LinkedIn")]
        self.assertEqual(
            resolve_answer("How did you hear about this position? (optional)", {}, self.tables),
            ("LinkedIn", "curated_substring"),
        )
        self.assertEqual(
            resolve_answer("hear about this position", {}, self.tables),
            ("LinkedIn", "curated_substring"),
        )

    def test_curated_booleans_are_not_stringified(self):
        self.tables.questions = [KnowledgeEntry("Do you have a valid driver's license?", True)]
        answer, _ = resolve_answer("Do you have a valid driver's license?", {}, self.tables)
        self.assertIs(answer, True)

    def test_curated_numbers_become_strings(self):
        self.tables.questions = [KnowledgeEntry("Notice period in weeks", 2)]
        self.assertEqual(resolve_answer("Notice period in weeks", {}, self.tables)[0], "2")

    def test_curated_null_answer_falls_through(self):
        self.tables.questions = [KnowledgeEntry("What is your phone number?", None)]
        self.assertEqual(
            resolve_answer("What is your phone number?", self.profile, self.tables),
            ("555-0100", "phone"),
        )

    def test_category_matches(self):
        cases = {
            "Mobile phone number": ("555-0100", "phone"),
            "Email address": ("jordan@example.com", "email"),
            "Full name": ("Jordan Example", "full_name"),
            "First name": ("Jordan Example", "full_name"),
            "Are you legally authorized to work in the United States?": ("Yes", "legally_authorized"),
            "Do you have work authorization?": ("Yes", "work_authorization"),
            "Desired salary": ("120000", "salary"),
            "Where do you currently reside?": ("Detroit, MI", "location"),
            "GitHub profile": ("https://github.com/jordan-example", "github_url"),
        }
        for label, expected in cases.items():
            self.assertEqual(resolve_answer(label, self.profile, self.tables), expected, label)

    def test_legally_authorized_renders_no(self):
        self.profile["legally_authorized"] = False
        answer, _ = resolve_answer("Are you legally authorized to work here?", self.profile, self.tables)
        self.assertEqual(answer, "No")

    def test_missing_profile_field_is_unknown(self):
        answer, _ = resolve_answer("Are you willing to relocate?", self.profile, self.tables)
        self.assertIsNone(answer)

    def test_unqualified_name_of_something_else_is_unknown(self):
        self.assertIsNone(resolve_answer("What is the name of your school?", self.profile, self.tables)[0])

    def test_duration_from_technology_lexicon(self):
        self.assertEqual(
            resolve_answer("Years of experience with Python?", self.profile, self.tables),
            ("5", "duration_Python"),
        )

    def test_first_technology_in_lexicon_order_wins(self):
        answer, key = resolve_answer(
            "How many years of JavaScript and React experience do you have?", self.profile, self.tables
        )
        self.assertEqual((answer, key), ("2", "duration_React"))

    def test_duration_without_technology(self):
        self.assertEqual(
            resolve_answer("How many years have you used Django?", self.profile, self.tables),
            (None, "duration_no_technology"),
        )

    def test_duration_without_fact(self):
        self.assertEqual(
            resolve_answer("Years of experience with JavaScript?", self.profile, self.tables),
            (None, "duration_no_fact"),
        )

    def test_custom_path_consults_duration_table(self):
        self.tables.duration_questions = [KnowledgeEntry("How many years of work experience do you have?", 4)]
        label = "How many years of work experience do you have?"
        self.assertEqual(resolve_answer(label, {}, self.tables, custom=True), ("4", "duration_table_exact"))
        self.assertEqual(resolve_answer(label, {}, self.tables), (None, "duration_no_technology"))

    def test_empty_label(self):
        self.assertEqual(resolve_answer("", self.profile, self.tables), (None, None))


class TestResolveHelpers(unittest.TestCase):
    def test_is_duration_question(self):
        self.assertTrue(is_duration_question("Years of experience with AWS"))
        self.assertTrue(is_duration_question("How many years have you managed teams?"))
        self.assertFalse(is_duration_question("Describe your experience"))

    def test_alias_matching_respects_word_boundaries(self):
        lexicon = {"Java": ["java"], "C++": ["c++"], "Go": ["go"]}
        self.assertIsNone(find_technology("years of experience with javascript", lexicon))
        self.assertEqual(find_technology("years of c++ experience", lexicon), "C++")
        self.assertIsNone(find_technology("years of good experience", lexicon))

    def test_needs_curation(self):
        self.assertTrue(needs_curation("Are you willing to relocate?"))
        self.assertTrue(needs_curation("Years of experience with Rust"))
        self.assertFalse(needs_curation("City"))

    def test_format_text_answer(self):
        self.assertEqual(format_text_answer(True), "Yes")
        self.assertEqual(format_text_answer(False), "No")
        self.assertEqual(format_text_answer("5"), "5")

    def test_is_numeric_answer(self):
        self.assertTrue(is_numeric_answer("5"))
        self.assertTrue(is_numeric_answer("3.5"))
        self.assertFalse(is_numeric_answer("Yes"))


if __name__ == "__main__":
    unittest.main()
