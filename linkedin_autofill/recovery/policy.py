"""What to do after a validation failure has been recovered from"""

import linkedin_autofill.config as config


class RecoveryPolicy:
    """Base policy: carry on immediately."""

    should_abort = False

    def pause(self, driver, context):
        pass


class ContinuePolicy(RecoveryPolicy):
    """Auto-continue with the next job after a short delay"""

    def __init__(self, delay_ms=None):
        self.delay_ms = config.RECOVERY_CONTINUE_DELAY_MS if delay_ms is None else delay_ms

    def pause(self, driver, context):
        print(f"  ⏭️  Continuing in {self.delay_ms}ms")
        driver.wait(self.delay_ms)


class OperatorPolicy(RecoveryPolicy):
    """Wait for an operator to inspect the page and press Enter"""

    def __init__(self, prompt=input):
        self.prompt = prompt

    def pause(self, driver, context):
        print(f"\n⏸️  PAUSED - validation failed for job {context.get('job_id', 'unknown')}")
        self.prompt("   Press Enter to continue with the next job")


class AbortPolicy(RecoveryPolicy):
    """Stop the batch after the first validation failure"""

    should_abort = True

    def pause(self, driver, context):
        print("  ❌ Aborting batch after validation failure")


POLICIES = {
    "continue": ContinuePolicy,
    "operator": OperatorPolicy,
    "abort": AbortPolicy,
}


def build_policy(name=None):
    name = name or config.RECOVERY_POLICY
    if name not in POLICIES:
        raise ValueError(f"Unknown recovery policy '{name}' (choose from {', '.join(POLICIES)})")
    return POLICIES[name]()
