"""Browser session management"""

from playwright.sync_api import sync_playwright

import linkedin_autofill.config as config
from linkedin_autofill.browser.driver import PageDriver

USER_AGENT = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"


def launch_browser(user_data_dir=None):
    """
    Launch persistent browser context and return (playwright, context, driver).
    Reuses the login session saved in the browser profile directory.
    """
    print("Launching browser...")

    p = sync_playwright().start()

    context = p.chromium.launch_persistent_context(
        user_data_dir=user_data_dir or config.BROWSER_DATA_DIR,
        headless=False,
        viewport={"width": 1920, "height": 1080},
        user_agent=USER_AGENT,
        locale="en-US",
    )

    page = context.pages[0] if context.pages else context.new_page()

    return p, context, PageDriver(page)
