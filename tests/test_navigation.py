"""Tests for job listing navigation"""

import os
import tempfile
import unittest
from unittest.mock import MagicMock

from fakes import FakeDriver, FakeElement
from linkedin_autofill.navigation.jobs import apply_to_card, load_all_job_cards, process_job_listings
from linkedin_autofill.recovery.policy import AbortPolicy, RecoveryPolicy
from linkedin_autofill.state.errors import ValidationError
from linkedin_autofill.state.stepper import (
    OUTCOME_NO_CONTROL,
    OUTCOME_SUBMITTED,
    StepperSession,
)
from linkedin_autofill.utils.logging import read_jsonl

PROFILE = {"phone": "555-0100"}


class NavigationTestCase(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.result_log = os.path.join(self.tmp.name, "log.jsonl")
        self.driver = FakeDriver(url="https://www.linkedin.com/jobs/view/1/")
        self.stepper = MagicMock()
        self.stepper.process_modal.return_value = StepperSession(outcome=OUTCOME_SUBMITTED, current_step_index=2)

    def tearDown(self):
        self.tmp.cleanup()

    def add_cards(self, count, easy_apply=True):
        self.driver.add("job_list", FakeElement())
        self.driver.add("job_cards", *[FakeElement() for _ in range(count)])
        self.driver.add("job_card_clickable", *[FakeElement() for _ in range(count)])
        if easy_apply:
            self.driver.button("easy_apply_button")


class TestLoadAllJobCards(NavigationTestCase):
    def test_counts_cards(self):
        self.add_cards(3)
        self.assertEqual(load_all_job_cards(self.driver), 3)

    def test_missing_list(self):
        self.assertEqual(load_all_job_cards(self.driver), 0)


class TestApplyToCard(NavigationTestCase):
    def test_submitted(self):
        self.add_cards(1)

        status = apply_to_card(self.driver, self.stepper, PROFILE, 0, self.result_log)

        self.assertEqual(status, "SUBMITTED")
        self.stepper.process_modal.assert_called_once_with(PROFILE)
        entry = read_jsonl(self.result_log)[0]
        self.assertEqual(entry["status"], "SUBMITTED")
        self.assertEqual(entry["steps_completed"], 3)

    def test_no_easy_apply(self):
        self.add_cards(1, easy_apply=False)
        status = apply_to_card(self.driver, self.stepper, PROFILE, 0, self.result_log)
        self.assertEqual(status, "NO_EASY_APPLY")
        self.stepper.process_modal.assert_not_called()

    def test_missing_card(self):
        self.add_cards(1)
        self.assertEqual(apply_to_card(self.driver, self.stepper, PROFILE, 5, self.result_log), "MISSING")

    def test_incomplete_modal_discarded(self):
        self.add_cards(1)
        dismiss = self.driver.button("dismiss_button")
        discard = self.driver.button("discard_button")
        self.stepper.process_modal.return_value = StepperSession(outcome=OUTCOME_NO_CONTROL)

        status = apply_to_card(self.driver, self.stepper, PROFILE, 0, self.result_log)

        self.assertEqual(status, "INCOMPLETE")
        self.assertEqual(dismiss.clicks, 1)
        self.assertEqual(discard.clicks, 1)
        self.assertEqual(read_jsonl(self.result_log)[0]["failure_reason"], OUTCOME_NO_CONTROL)

    def test_unexpected_error_discards_and_reports(self):
        self.add_cards(1)
        dismiss = self.driver.button("dismiss_button")
        self.stepper.process_modal.side_effect = RuntimeError("element detached")

        status = apply_to_card(self.driver, self.stepper, PROFILE, 0, self.result_log)

        self.assertEqual(status, "ERROR")
        self.assertEqual(dismiss.clicks, 1)
        self.assertEqual(read_jsonl(self.result_log)[0]["status"], "ERROR")

    def test_validation_error_logged_and_reraised(self):
        self.add_cards(1)
        self.stepper.process_modal.side_effect = ValidationError(1, ["Required"])

        with self.assertRaises(ValidationError):
            apply_to_card(self.driver, self.stepper, PROFILE, 0, self.result_log)

        entry = read_jsonl(self.result_log)[0]
        self.assertEqual(entry["status"], "FAILED")
        self.assertEqual(entry["steps_completed"], 2)


class TestProcessJobListings(NavigationTestCase):
    def test_summary_counts(self):
        self.add_cards(2)
        summary = process_job_listings(self.driver, self.stepper, PROFILE, RecoveryPolicy(), result_log=self.result_log)
        self.assertEqual(summary, {"SUBMITTED": 2})
        self.assertEqual(len(read_jsonl(self.result_log)), 2)

    def test_validation_failure_continues(self):
        self.add_cards(2)
        self.stepper.process_modal.side_effect = [ValidationError(0, ["Required"]), self.stepper.process_modal.return_value]

        summary = process_job_listings(self.driver, self.stepper, PROFILE, RecoveryPolicy(), result_log=self.result_log)

        self.assertEqual(summary, {"FAILED": 1, "SUBMITTED": 1})

    def test_abort_policy_stops_batch(self):
        self.add_cards(2)
        self.stepper.process_modal.side_effect = ValidationError(0, ["Required"])

        summary = process_job_listings(self.driver, self.stepper, PROFILE, AbortPolicy(), result_log=self.result_log)

        self.assertEqual(summary, {"FAILED": 1})
        self.assertEqual(self.stepper.process_modal.call_count, 1)

    def test_pagination_follows_next_until_max_pages(self):
        self.add_cards(1)
        next_page = self.driver.button("pagination_next")

        summary = process_job_listings(
            self.driver, self.stepper, PROFILE, RecoveryPolicy(), max_pages=3, result_log=self.result_log
        )

        self.assertEqual(next_page.clicks, 2)
        self.assertEqual(summary, {"SUBMITTED": 3})

    def test_stops_without_next_page(self):
        self.add_cards(1)
        summary = process_job_listings(
            self.driver, self.stepper, PROFILE, RecoveryPolicy(), max_pages=3, result_log=self.result_log
        )
        self.assertEqual(summary, {"SUBMITTED": 1})


if __name__ == "__main__":
    unittest.main()
