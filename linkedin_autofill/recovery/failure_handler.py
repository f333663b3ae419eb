"""Validation failure recovery - record the failure, then dismiss and save the draft"""

import linkedin_autofill.config as config
from linkedin_autofill.interaction.controls import close_modal
from linkedin_autofill.perception.job_context import current_job_context
from linkedin_autofill.recovery.policy import ContinuePolicy
from linkedin_autofill.utils.logging import append_jsonl, now_iso


class FailureHandler:
    """
    Best-effort recovery. handle() never raises: every stage catches its own
    errors and reports them, so the outer job loop is never blocked.
    """

    def __init__(self, log_path=None, policy=None):
        self.log_path = log_path or config.FAILURE_LOG_PATH
        self.policy = policy or ContinuePolicy()

    def _capture_context(self, driver):
        try:
            return current_job_context(driver)
        except Exception as e:
            print(f"  ⚠️ Could not read job context: {e}")
        try:
            url = driver.url
        except Exception:
            url = ""
        return {"job_id": "unknown", "url": url}

    def record_failure(self, context, error):
        append_jsonl(
            self.log_path,
            {
                "job_id": context.get("job_id", "unknown"),
                "url": context.get("url", ""),
                "error": str(error),
                "timestamp": now_iso(),
            },
        )
        print(f"  📝 Failure recorded for job {context.get('job_id', 'unknown')}")

    def handle(self, driver, error=""):
        context = self._capture_context(driver)

        try:
            self.record_failure(context, error)
        except Exception as e:
            print(f"  ⚠️ Could not write failure log: {e}")

        try:
            # Save keeps the partially-completed draft on the host side
            close_modal(driver, confirm_selector_key="save_button")
        except Exception as e:
            print(f"  ⚠️ Recovery failed while dismissing modal: {e}")

        try:
            self.policy.pause(driver, context)
        except Exception as e:
            print(f"  ⚠️ Recovery policy error: {e}")
