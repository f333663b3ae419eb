"""Job listing navigation - opens each Easy Apply modal and hands it to the form stepper"""

import linkedin_autofill.config as config
from linkedin_autofill.interaction.controls import close_modal
from linkedin_autofill.state.errors import ValidationError
from linkedin_autofill.state.stepper import OUTCOME_SUBMITTED
from linkedin_autofill.utils.logging import log_result
from linkedin_autofill.utils.timing import random_wait, timed_delay


def load_all_job_cards(driver, max_scrolls=20):
    """Scroll the results list until no more cards lazy-load. Returns the card count."""
    if driver.locate_one(config.SELECTORS["job_list"]) is None:
        print("⚠️ Job results list not found")
        return 0

    previous_count = 0
    for _ in range(max_scrolls):
        cards = driver.locate_all(config.SELECTORS["job_cards"])
        if len(cards) == previous_count:
            break
        previous_count = len(cards)
        driver.scroll_into_view(cards[-1])
        timed_delay(driver, "job_card_render")

    print(f"Job cards loaded: {previous_count}")
    return previous_count


def _discard_open_modal(driver):
    try:
        close_modal(driver, confirm_selector_key="discard_button")
    except Exception as e:
        print(f"  ⚠️ Could not close modal: {e}")


def apply_to_card(driver, stepper, profile, index, result_log=None):
    """
    Open the card at `index` and run the modal.

    Returns: status string (SUBMITTED, INCOMPLETE, NO_EASY_APPLY, MISSING, FAILED, ERROR)
    Raises: ValidationError from the stepper
    """
    # Fresh query every time - earlier handles go stale after each click
    cards = driver.locate_all(config.SELECTORS["job_card_clickable"])
    if index >= len(cards):
        print(f"⚠️ Card {index + 1} missing, skipping")
        return "MISSING"

    card = cards[index]
    driver.scroll_into_view(card)
    driver.click(card)
    timed_delay(driver, "job_card_render")

    easy_apply = driver.locate_one(config.SELECTORS["easy_apply_button"])
    if easy_apply is None:
        print(f"⏭️  No Easy Apply for job #{index + 1}")
        return "NO_EASY_APPLY"

    print(f"Easy Apply available for job #{index + 1}")
    driver.click(easy_apply)
    timed_delay(driver, "modal_transition")
    job_url = driver.url

    try:
        session = stepper.process_modal(profile)
    except ValidationError as e:
        log_result(job_url, "FAILED", str(e), e.step_index + 1, path=result_log)
        raise
    except Exception as e:
        print(f"❌ Error processing job #{index + 1}: {e}")
        _discard_open_modal(driver)
        log_result(job_url, "ERROR", str(e), path=result_log)
        return "ERROR"

    steps = session.current_step_index + 1
    if session.outcome == OUTCOME_SUBMITTED:
        log_result(job_url, "SUBMITTED", steps_completed=steps, path=result_log)
        return "SUBMITTED"

    # Modal is still open; leave nothing half-done behind for the next card
    _discard_open_modal(driver)
    log_result(job_url, "INCOMPLETE", session.outcome, steps, path=result_log)
    return "INCOMPLETE"


def process_job_listings(driver, stepper, profile, policy, max_pages=1, result_log=None):
    """
    Apply to every Easy Apply job on the current search page, then follow
    pagination for up to `max_pages` pages.

    Returns: dict of status -> count
    """
    summary = {}

    for page_number in range(1, max_pages + 1):
        print(f"\n{'=' * 60}\nRESULTS PAGE {page_number}\n{'=' * 60}")
        card_count = load_all_job_cards(driver)

        for index in range(card_count):
            try:
                status = apply_to_card(driver, stepper, profile, index, result_log)
            except ValidationError:
                status = "FAILED"
                if policy.should_abort:
                    summary[status] = summary.get(status, 0) + 1
                    return summary
            summary[status] = summary.get(status, 0) + 1
            random_wait(driver)

        if page_number == max_pages:
            break

        next_button = driver.locate_one(config.SELECTORS["pagination_next"])
        if next_button is None:
            print("No more pages.")
            break

        print("Next page available → clicking.")
        driver.click(next_button)
        timed_delay(driver, "job_card_render")

    return summary
