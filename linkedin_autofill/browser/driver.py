"""Page driver - the capability set the form stepper needs from a browser page"""

import time


class PageDriver:
    """
    Thin adapter over a Playwright sync `Page`.

    The stepper never touches Playwright directly: it locates elements, reads
    and sets values, clicks and waits through this object. Element handles are
    only valid until the next re-render, so callers re-query before use.
    """

    def __init__(self, page):
        self.page = page

    @property
    def url(self):
        return self.page.url

    def locate_one(self, selector, root=None):
        """First element matching `selector` (within `root` if given), or None"""
        return (root or self.page).query_selector(selector)

    def locate_all(self, selector, root=None):
        return (root or self.page).query_selector_all(selector)

    def attribute(self, element, name):
        return element.get_attribute(name)

    def text(self, element):
        return (element.inner_text() or "").strip()

    def value(self, element):
        return element.input_value()

    def is_checked(self, element):
        return element.is_checked()

    def is_visible(self, element):
        return element.is_visible()

    def is_disabled(self, element):
        return element.is_disabled()

    def fill(self, element, value):
        element.fill(value)

    def click(self, element):
        element.click()

    def select_option(self, element, value):
        element.select_option(value=value)

    def scroll_into_view(self, element):
        element.scroll_into_view_if_needed()

    def wait(self, ms):
        self.page.wait_for_timeout(ms)

    def wait_until(self, predicate, timeout_ms=5000, poll_ms=250):
        """Poll `predicate` until it returns truthy or the timeout elapses."""
        deadline = time.monotonic() + timeout_ms / 1000
        while True:
            if predicate():
                return True
            if time.monotonic() >= deadline:
                return False
            self.wait(poll_ms)
