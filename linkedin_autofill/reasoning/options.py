"""Dropdown / radio option matching"""

import re
from dataclasses import dataclass

import linkedin_autofill.config as config

YES_TERMS = ["Yes", "True", "true", "1"]
NO_TERMS = ["No", "False", "false", "0"]


@dataclass
class Option:
    text: str
    value: str


def is_placeholder(option):
    placeholder = config.DROPDOWN_PLACEHOLDER.lower()
    return option.text.strip().lower() == placeholder or option.value.strip().lower() in ("", placeholder)


def real_options(options):
    return [opt for opt in options if not is_placeholder(opt)]


def _as_boolean(answer):
    """bool answers, and "Yes"/"No" strings rendered from booleans"""
    if isinstance(answer, bool):
        return answer
    lowered = str(answer).strip().lower()
    if lowered == "yes":
        return True
    if lowered == "no":
        return False
    return None


def _term_matches(term, option):
    # "Yes" must not match "Yesterday", "1" must not match "10+"
    pattern = re.compile(r"^" + re.escape(term.lower()) + r"(?![a-z0-9])")
    return any(pattern.match(s.strip().lower()) for s in (option.text, option.value))


def match_option(answer, options):
    """
    Pick the option to select for a resolved answer, or None.

    Boolean answers expand to a search-term list and take the first option (in
    DOM order) matching any term. Other answers take the first option whose
    display text or value contains the answer, case-insensitively.
    Placeholder options are never chosen.
    """
    if answer is None:
        return None

    candidates = real_options(options)

    boolean = _as_boolean(answer)
    if boolean is not None:
        terms = YES_TERMS if boolean else NO_TERMS
        for option in candidates:
            if any(_term_matches(term, option) for term in terms):
                return option
        return None

    needle = str(answer).strip().lower()
    if not needle:
        return None
    for option in candidates:
        if needle in option.text.lower() or needle in option.value.lower():
            return option
    return None
