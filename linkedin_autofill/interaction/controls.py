"""Field and button interactions - every page mutation goes through here, one at a time"""

import linkedin_autofill.config as config
from linkedin_autofill.utils.timing import timed_delay


def fill_text(driver, field, value):
    driver.fill(field.element, value)
    timed_delay(driver, "field_fill")
    print(f"  ✓ Filled '{field.label}': {value}")


def select_dropdown(driver, field, option):
    driver.select_option(field.element, option.value)
    timed_delay(driver, "dropdown_select")
    print(f"  ✓ Selected '{field.label}': {option.text}")


def click_radio(driver, field, option):
    """Click the chosen radio via its label when it has one"""
    for choice in field.choices:
        if choice.option == option:
            driver.click(choice.label if choice.label is not None else choice.input)
            timed_delay(driver, "radio_click")
            print(f"  ✓ Chose '{field.label}': {option.text}")
            return True

    print(f"  ⚠️ Option '{option.text}' not found in radio group '{field.label}'")
    return False


def uncheck_follow_company(driver):
    """Clear the follow-company opt-in. Toggled via its label; clicking the box directly is unreliable."""
    checkbox = driver.locate_one(config.SELECTORS["follow_company_checkbox"])
    if checkbox is None or not driver.is_checked(checkbox):
        return False

    label = driver.locate_one(config.SELECTORS["follow_company_label"])
    driver.click(label if label is not None else checkbox)
    timed_delay(driver, "radio_click")
    print("  ✓ Unchecked follow company")
    return True


def activate_control(driver, element, name):
    """Click a step control and let the modal settle before anything is re-queried"""
    driver.click(element)
    timed_delay(driver, "modal_transition")
    print(f"  ✓ Activated '{name}'")


def dismiss_submission_confirmation(driver, timeout_ms=3000):
    selector = config.SELECTORS["confirmation_dismiss"]
    if not driver.wait_until(lambda: driver.locate_one(selector) is not None, timeout_ms):
        return False

    button = driver.locate_one(selector)
    if button is None:
        return False
    driver.click(button)
    print("  ✓ Dismissed submission confirmation")
    return True


def close_modal(driver, confirm_selector_key="discard_button"):
    """
    Dismiss the modal. If the host asks what to do with the draft, answer with
    `confirm_selector_key` ("discard_button" or "save_button").

    Returns True if the modal was dismissed.
    """
    dismiss = driver.locate_one(config.SELECTORS["dismiss_button"])
    if dismiss is None:
        print("  ⚠️ Dismiss button not found")
        return False

    driver.click(dismiss)
    timed_delay(driver, "dismiss_settle")

    confirm = driver.locate_one(config.SELECTORS[confirm_selector_key])
    if confirm is not None:
        driver.click(confirm)
        print(f"  ✓ Dismissed modal ({confirm_selector_key.replace('_button', '')})")
    else:
        print("  ✓ Dismissed modal")
    return True
