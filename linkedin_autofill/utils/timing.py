"""Timing utilities"""

import random

import linkedin_autofill.config as config


def human_delay(driver, min_ms=300, max_ms=800):
    """Random human-like delay, waited out through the page driver"""
    driver.wait(random.randint(min_ms, max_ms))


def timed_delay(driver, name):
    """Delay using the active timing profile's `<name>_min`/`<name>_max` pair"""
    timing = config.TIMING
    human_delay(driver, timing[f"{name}_min"], timing[f"{name}_max"])


def random_wait(driver):
    """Pacing pause between jobs"""
    timed_delay(driver, "random_wait")
