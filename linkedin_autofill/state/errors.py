"""Stepper errors"""


class ValidationError(Exception):
    """Host-side validation rejected one or more fields after a fill attempt."""

    def __init__(self, step_index, messages):
        self.step_index = step_index
        self.messages = list(messages)
        super().__init__(f"Validation failed on step {step_index + 1}: {'; '.join(self.messages)}")
