"""Configuration, selectors and timing profiles for Easy Apply form filling"""

# ========================================
# SPEED MODE CONFIGURATION
# ========================================
# Choose one mode (set all others to False):
# - DEV_TEST_SPEED: 40-50% faster
# - SUPER_DEV_SPEED: 70-80% faster - maximum safe speed
# - Production: All False (default, safest)

DEV_TEST_SPEED = False
SUPER_DEV_SPEED = False

# ========================================
# TIMING PROFILES
# ========================================
# All delays are in milliseconds (ms)
# Each delay is randomized via human_delay() for human pacing

TIMING_PROFILES = {
    "default": {
        "field_fill_min": 300,  # Pause after filling a text input
        "field_fill_max": 600,
        "dropdown_select_min": 300,  # Pause after selecting a dropdown option
        "dropdown_select_max": 600,
        "radio_click_min": 200,
        "radio_click_max": 400,
        "modal_transition_min": 1500,  # Settle time after Next/Submit
        "modal_transition_max": 2500,
        "dismiss_settle_min": 800,  # Wait for the save/discard prompt
        "dismiss_settle_max": 1200,
        "job_card_render_min": 1500,  # Right-hand panel render after card click
        "job_card_render_max": 2500,
        "random_wait_min": 500,  # Pacing between jobs
        "random_wait_max": 2000,
    },
    "dev_test": {
        "field_fill_min": 180,
        "field_fill_max": 360,
        "dropdown_select_min": 180,
        "dropdown_select_max": 360,
        "radio_click_min": 120,
        "radio_click_max": 240,
        "modal_transition_min": 900,
        "modal_transition_max": 1500,
        "dismiss_settle_min": 500,
        "dismiss_settle_max": 700,
        "job_card_render_min": 900,
        "job_card_render_max": 1500,
        "random_wait_min": 300,
        "random_wait_max": 1200,
    },
    "super_dev": {
        "field_fill_min": 60,
        "field_fill_max": 120,
        "dropdown_select_min": 60,
        "dropdown_select_max": 120,
        "radio_click_min": 40,
        "radio_click_max": 80,
        "modal_transition_min": 400,  # Cannot go lower without breaking
        "modal_transition_max": 450,
        "dismiss_settle_min": 400,
        "dismiss_settle_max": 450,
        "job_card_render_min": 400,
        "job_card_render_max": 600,
        "random_wait_min": 100,
        "random_wait_max": 300,
    },
}

# Host UI transitions are asynchronous; re-querying sooner than this reads a stale DOM
_MIN_MODAL_TRANSITION_MS = 400


def get_active_timing():
    """Get the active timing profile based on current speed mode settings"""
    if SUPER_DEV_SPEED:
        profile = TIMING_PROFILES["super_dev"]
    elif DEV_TEST_SPEED:
        profile = TIMING_PROFILES["dev_test"]
    else:
        profile = TIMING_PROFILES["default"]

    violations = [
        f"{key}={value}ms < {_MIN_MODAL_TRANSITION_MS}ms minimum"
        for key, value in profile.items()
        if "modal" in key and value < _MIN_MODAL_TRANSITION_MS
    ]
    if violations:
        print("⚠️ TIMING PROFILE VIOLATIONS - Falling back to default profile:")
        for violation in violations:
            print(f"  - {violation}")
        return TIMING_PROFILES["default"]

    return profile


TIMING = get_active_timing()

# ========================================
# FORM STEPPER
# ========================================
# Hard cap on modal steps before giving up without error
STEP_BUDGET = 12

# What a Review control means when no Submit/Next is present:
# - "advance": treat it like Next (click and continue)
# - "stop": terminal, end the session without clicking
REVIEW_POLICY = "advance"

# Recovery after a validation failure: "continue", "operator" or "abort"
RECOVERY_POLICY = "continue"
RECOVERY_CONTINUE_DELAY_MS = 1000

DROPDOWN_PLACEHOLDER = "Select an option"

# ========================================
# FILES
# ========================================
KNOWLEDGE_DIR = "knowledge"
QUESTION_LOG_PATH = "custom_questions.jsonl"
FAILURE_LOG_PATH = "failures.jsonl"
RESULT_LOG_PATH = "log.jsonl"
BROWSER_DATA_DIR = "./browser_data"
TIMEZONE = "America/Detroit"

# ========================================
# SELECTORS
# ========================================
MODAL = '[role="dialog"]'

SELECTORS = {
    "modal": MODAL,
    # Standard form-builder controls
    "text_inputs": f"{MODAL} input.artdeco-text-input--input",
    "dropdowns": f"{MODAL} select.fb-dash-form-element__select-dropdown",
    "radio_fieldsets": f"{MODAL} fieldset",
    "radio_inputs": 'input[type="radio"]',
    "legend": "legend",
    "options": "option",
    # Controls outside the standard form-builder classes
    "custom_text_inputs": f'{MODAL} textarea, {MODAL} input[type="text"]:not(.artdeco-text-input--input)',
    "custom_number_inputs": f'{MODAL} input[type="number"]:not(.artdeco-text-input--input)',
    "custom_dropdowns": f"{MODAL} select:not(.fb-dash-form-element__select-dropdown)",
    # Follow-company opt-in on the first step
    "follow_company_checkbox": "#follow-company-checkbox",
    "follow_company_label": 'label[for="follow-company-checkbox"]',
    # Step controls
    "submit_button": (
        f"{MODAL} button[data-live-test-easy-apply-submit-button], "
        f'{MODAL} button[aria-label="Submit application"]'
    ),
    "next_button": (
        f"{MODAL} button[data-easy-apply-next-button], "
        f'{MODAL} button[aria-label="Continue to next step"]'
    ),
    "review_button": (
        f"{MODAL} button[data-live-test-easy-apply-review-button], "
        f'{MODAL} button[aria-label="Review your application"]'
    ),
    "inline_errors": (
        f"{MODAL} .artdeco-inline-feedback--error, "
        f'{MODAL} [data-test-form-element-error-messages]'
    ),
    # Dismissal / recovery
    "dismiss_button": f"{MODAL} button.artdeco-modal__dismiss",
    # Save/discard prompt shown after dismissing a started application
    "save_button": (
        '[role="alertdialog"] button[data-control-name="save_application_btn"], '
        '[role="dialog"] button[data-control-name="save_application_btn"], '
        '[role="alertdialog"] button:has-text("Save")'
    ),
    "discard_button": (
        '[role="alertdialog"] button[data-control-name="discard_application_confirm_btn"], '
        '[role="dialog"] button[data-control-name="discard_application_confirm_btn"], '
        '[role="alertdialog"] button:has-text("Discard")'
    ),
    "confirmation_dismiss": 'button[aria-label="Dismiss"]',
    # Job listing
    "job_list": "ul:has(li[data-occludable-job-id])",
    "job_cards": "li[data-occludable-job-id]",
    "job_card_clickable": "div.job-card-container--clickable",
    "active_job_card": "div.job-card-container--clickable.jobs-search-results-list__list-item--active",
    "easy_apply_button": 'button:has(span:has-text("Easy Apply"))',
    "pagination_next": 'button[aria-label="View next page"]:not([disabled]), button[aria-label="Next"]:not([disabled])',
}

ACTIVE_JOB_ID_ATTRIBUTE = "data-job-id"
