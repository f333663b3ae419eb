"""
Form stepper - drives one Easy Apply modal session to completion

States:
    AWAITING_STEP -> FILLING_STEP -> ADVANCING -> AWAITING_STEP ...
                                  -> SUBMITTING -> DONE
                                  -> DONE (no step control)
                  -> VALIDATION_FAILED -> DONE (ValidationError raised)

Each step re-discovers its controls from the live DOM; element handles from a
previous step are never reused. Page interactions are strictly sequential.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

import linkedin_autofill.config as config
from linkedin_autofill.debug.question_logger import QuestionLogger
from linkedin_autofill.interaction.controls import (
    activate_control,
    click_radio,
    dismiss_submission_confirmation,
    fill_text,
    select_dropdown,
    uncheck_follow_company,
)
from linkedin_autofill.perception.controls import (
    StepControl,
    detect_step_control,
    detect_validation_errors,
)
from linkedin_autofill.perception.fields import FieldKind, discover_fields
from linkedin_autofill.perception.job_context import current_job_context
from linkedin_autofill.reasoning.normalize import is_question_shaped
from linkedin_autofill.reasoning.options import match_option
from linkedin_autofill.reasoning.resolve import (
    format_text_answer,
    is_numeric_answer,
    needs_curation,
    resolve_answer,
)
from linkedin_autofill.recovery.failure_handler import FailureHandler
from linkedin_autofill.state.errors import ValidationError


class StepperState(Enum):
    AWAITING_STEP = "AwaitingStep"
    FILLING_STEP = "FillingStep"
    ADVANCING = "Advancing"
    SUBMITTING = "Submitting"
    VALIDATION_FAILED = "ValidationFailed"
    DONE = "Done"


class StepResult(Enum):
    FILLED = "filled"
    VALIDATION_FAILED = "validation_failed"


# Session outcomes
OUTCOME_SUBMITTED = "submitted"
OUTCOME_NO_CONTROL = "no_control"
OUTCOME_REVIEW_STOP = "review_stop"
OUTCOME_BUDGET_EXHAUSTED = "budget_exhausted"
OUTCOME_VALIDATION_FAILED = "validation_failed"


@dataclass
class StepperSession:
    step_budget: int = config.STEP_BUDGET
    current_step_index: int = 0
    state: StepperState = StepperState.AWAITING_STEP
    outcome: str = ""
    transitions: List[StepperState] = field(default_factory=list)

    def enter(self, state):
        self.state = state
        self.transitions.append(state)


class FormStepper:
    def __init__(
        self,
        driver,
        tables,
        question_logger=None,
        failure_handler=None,
        step_budget=None,
        review_policy=None,
    ):
        self.driver = driver
        self.tables = tables
        self.question_logger = question_logger or QuestionLogger()
        self.failure_handler = failure_handler or FailureHandler()
        self.step_budget = config.STEP_BUDGET if step_budget is None else step_budget
        self.review_policy = review_policy or config.REVIEW_POLICY

    def process_modal(self, application_data):
        """
        Fill and advance the open modal until it is submitted, runs out of
        step controls, or exhausts the step budget.

        Args:
            application_data: applicant profile dict

        Returns: the finished StepperSession
        Raises: ValidationError after the failure handler has run
        """
        session = StepperSession(step_budget=self.step_budget)
        job_context = current_job_context(self.driver)

        while session.current_step_index < session.step_budget:
            session.enter(StepperState.AWAITING_STEP)
            print(f"\n--- Step {session.current_step_index + 1} ---")

            if session.current_step_index == 0:
                uncheck_follow_company(self.driver)

            session.enter(StepperState.FILLING_STEP)
            result, errors = self.fill_step(application_data, job_context)

            if result is StepResult.VALIDATION_FAILED:
                session.enter(StepperState.VALIDATION_FAILED)
                error = ValidationError(session.current_step_index, errors)
                print(f"  ❌ {error}")
                self.failure_handler.handle(self.driver, error)
                session.outcome = OUTCOME_VALIDATION_FAILED
                session.enter(StepperState.DONE)
                raise error

            control, element = detect_step_control(self.driver)

            if control is StepControl.SUBMIT:
                session.enter(StepperState.SUBMITTING)
                activate_control(self.driver, element, "Submit application")
                dismiss_submission_confirmation(self.driver)
                session.outcome = OUTCOME_SUBMITTED
                session.enter(StepperState.DONE)
                print("✅ Application submitted")
                return session

            if control is StepControl.REVIEW and self.review_policy == "stop":
                print("  ⏭️  Review step reached - stopping (review policy: stop)")
                session.outcome = OUTCOME_REVIEW_STOP
                session.enter(StepperState.DONE)
                return session

            if control in (StepControl.NEXT, StepControl.REVIEW):
                session.enter(StepperState.ADVANCING)
                activate_control(self.driver, element, control.value.capitalize())
                session.current_step_index += 1
                continue

            print("  ⏭️  No next/review/submit control - ending modal process")
            session.outcome = OUTCOME_NO_CONTROL
            session.enter(StepperState.DONE)
            return session

        print(f"  ⏭️  Step budget of {session.step_budget} exhausted - ending modal process")
        session.outcome = OUTCOME_BUDGET_EXHAUSTED
        session.enter(StepperState.DONE)
        return session

    def fill_step(self, profile, job_context):
        """
        Fill every control on the current step, then check for inline errors.

        Returns: (StepResult, error_texts)
        """
        fields = discover_fields(self.driver)
        print(f"  Found {len(fields)} field(s)")

        for form_field in fields:
            try:
                self.fill_field(form_field, profile, job_context)
            except Exception as e:
                print(f"  ⚠️ Error filling '{form_field.label}': {e}")

        errors = detect_validation_errors(self.driver)
        if errors:
            return (StepResult.VALIDATION_FAILED, errors)
        return (StepResult.FILLED, [])

    def fill_field(self, form_field, profile, job_context):
        if form_field.is_filled():
            print(f"  ⏭️  Already filled: {form_field.label or form_field.kind.value}")
            return

        answer, matched_key = resolve_answer(
            form_field.label, profile, self.tables, custom=form_field.custom
        )

        if form_field.kind in (FieldKind.TEXT, FieldKind.NUMBER):
            self._fill_input(form_field, answer, matched_key, job_context)
        elif form_field.kind in (FieldKind.DROPDOWN, FieldKind.RADIO):
            self._fill_choice(form_field, answer, matched_key, job_context)
        else:
            raise ValueError(f"Unhandled field kind: {form_field.kind}")

    def _fill_input(self, form_field, answer, matched_key, job_context):
        if answer is None:
            self._record_unanswered(form_field, job_context)
            return

        value = format_text_answer(answer)
        if form_field.kind is FieldKind.NUMBER and not is_numeric_answer(value):
            print(f"  ⚠️ Numeric field '{form_field.label}' matched non-numeric answer ({matched_key})")
            self._record_unanswered(form_field, job_context)
            return

        fill_text(self.driver, form_field, value)

    def _fill_choice(self, form_field, answer, matched_key, job_context):
        if answer is None:
            self._record_unanswered(form_field, job_context)
            return

        option = match_option(answer, form_field.options)
        if option is None:
            print(f"  ⚠️ No option of '{form_field.label}' matches '{answer}' ({matched_key})")
            if is_question_shaped(form_field.label):
                self.question_logger.log(
                    job_context, form_field.label, form_field.answer_type, form_field.options
                )
            return

        if form_field.kind is FieldKind.DROPDOWN:
            select_dropdown(self.driver, form_field, option)
        else:
            click_radio(self.driver, form_field, option)

    def _record_unanswered(self, form_field, job_context):
        if not needs_curation(form_field.label):
            print(f"  ⏭️  No answer for '{form_field.label or form_field.kind.value}'")
            return

        options = None
        if form_field.kind in (FieldKind.DROPDOWN, FieldKind.RADIO):
            options = form_field.options
        self.question_logger.log(job_context, form_field.label, form_field.answer_type, options)
