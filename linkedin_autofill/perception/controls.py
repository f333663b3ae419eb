"""Step control and validation detection - NO ACTIONS, only detection"""

from enum import Enum

import linkedin_autofill.config as config


class StepControl(Enum):
    SUBMIT = "submit"
    NEXT = "next"
    REVIEW = "review"
    NONE = "none"


def detect_step_control(driver):
    """
    Find the control that ends the current step.

    Priority: Submit > Next > Review. Returns (StepControl, element);
    (StepControl.NONE, None) when none of the three is present.
    """
    selectors = config.SELECTORS
    for control, key in (
        (StepControl.SUBMIT, "submit_button"),
        (StepControl.NEXT, "next_button"),
        (StepControl.REVIEW, "review_button"),
    ):
        element = driver.locate_one(selectors[key])
        if element is not None:
            return (control, element)

    return (StepControl.NONE, None)


def detect_validation_errors(driver):
    """Inline error texts visible in the modal; empty list when the step is valid"""
    errors = []
    for element in driver.locate_all(config.SELECTORS["inline_errors"]):
        text = driver.text(element)
        errors.append(text or "Validation error (no error text found)")
    return errors
