"""Active job identification"""

import linkedin_autofill.config as config


def current_job_context(driver):
    """Job id from the active job card's data attribute ("unknown" if absent) and the page URL"""
    job_id = None
    card = driver.locate_one(config.SELECTORS["active_job_card"])
    if card is not None:
        job_id = driver.attribute(card, config.ACTIVE_JOB_ID_ATTRIBUTE)

    return {"job_id": job_id or "unknown", "url": driver.url}
