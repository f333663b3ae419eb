"""Answer resolution for form field labels

Sources are consulted in a fixed trust order, first non-null answer wins:

1. Curated question table (exact match, then substring match either direction)
2. Applicant profile fields recognized by keyword category
3. Technology duration heuristic (lexicon alias + years-of-experience fact)

Returns: (answer, matched_key). answer is a str, a bool, or None for "no knowledge".
Booleans from the curated table are returned as-is; callers decide formatting.
"""

import re

from linkedin_autofill.reasoning.normalize import normalize_text, is_question_shaped


def _as_answer(value):
    """Curated/profile value -> Answer. Empty strings count as no knowledge."""
    if value is None or isinstance(value, bool):
        return value
    text = str(value).strip()
    return text or None


def _yes_no(value):
    if value is None:
        return None
    return "Yes" if value else "No"


def find_table_answer(label, entries, source="curated"):
    """Exact match over the whole table first, then substring match in either direction."""
    key = normalize_text(label)
    if not key:
        return (None, None)

    candidates = [(entry, normalize_text(entry.question)) for entry in entries]

    for entry, question in candidates:
        if question == key:
            answer = _as_answer(entry.answer)
            if answer is not None:
                return (answer, f"{source}_exact")

    for entry, question in candidates:
        if question and (question in key or key in question):
            answer = _as_answer(entry.answer)
            if answer is not None:
                return (answer, f"{source}_substring")

    return (None, None)


def _is_name_label(text):
    words = text.split()
    if "name" not in words:
        return False
    return any(q in words for q in ("full", "first", "last")) or "your name" in text or text == "name"


# (matched_key, predicate over normalized label, profile field, formatter)
# More specific phrasings sit above the generic rule they would otherwise fall into.
CATEGORY_RULES = [
    ("phone", lambda t: "phone" in t or "mobile" in t, "phone", _as_answer),
    ("email", lambda t: "email" in t, "email", _as_answer),
    ("full_name", _is_name_label, "full_name", _as_answer),
    ("legally_authorized", lambda t: "legally authorized to work" in t, "legally_authorized", _yes_no),
    ("work_authorization", lambda t: "work" in t and "author" in t, "work_auth", _as_answer),
    ("location", lambda t: "relocating" in t or "reside" in t, "location", _as_answer),
    ("relocation", lambda t: "relocat" in t, "relocation", _as_answer),
    ("salary", lambda t: "salary" in t or "compensation" in t, "salary_expectation", _as_answer),
]

LINK_RULES = [
    ("linkedin_url", ("linkedin",), "linkedin"),
    ("github_url", ("github",), "github"),
    ("portfolio_url", ("portfolio", "website"), "portfolio"),
]


def find_profile_answer(label, profile):
    """Map recognized label tokens to an applicant profile field."""
    text = normalize_text(label)
    if not text or not profile:
        return (None, None)

    for matched_key, predicate, profile_field, formatter in CATEGORY_RULES:
        if predicate(text):
            answer = formatter(profile.get(profile_field))
            if answer is not None:
                return (answer, matched_key)

    links = profile.get("links") or {}
    for matched_key, keywords, link_key in LINK_RULES:
        if any(kw in text for kw in keywords):
            answer = _as_answer(links.get(link_key))
            if answer is not None:
                return (answer, matched_key)

    return (None, None)


def is_duration_question(label):
    text = (label or "").lower()
    return ("experience" in text and "years" in text) or "how many years" in text


def _alias_pattern(alias):
    # Alphanumeric boundaries rather than \b so aliases like "c++" and "c#" still match
    return re.compile(r"(?<![a-z0-9])" + re.escape(alias) + r"(?![a-z0-9])")


def find_technology(label, tech_keywords):
    """First technology (in lexicon order) with an alias present in the label."""
    text = (label or "").lower()
    for tech, aliases in tech_keywords.items():
        if any(_alias_pattern(alias).search(text) for alias in aliases if alias):
            return tech
    return None


def _years_for(profile, tech):
    years = (profile or {}).get("experience_years") or {}
    if tech in years:
        return years[tech]
    for name, value in years.items():
        if name.lower() == tech.lower():
            return value
    return None


def find_duration_answer(label, profile, tech_keywords):
    """Years of experience for the technology named in a duration question."""
    if not is_duration_question(label):
        return (None, None)

    tech = find_technology(label, tech_keywords)
    if tech is None:
        return (None, "duration_no_technology")

    years = _years_for(profile, tech)
    if years is None:
        return (None, "duration_no_fact")

    return (str(years), f"duration_{tech}")


def resolve_answer(label, profile, tables, custom=False):
    """
    Resolve a normalized field label to an answer.

    custom=True is the path for controls outside the standard form-builder
    classes: the duration question table is consulted right after the curated
    table.

    Returns: (answer: str|bool|None, matched_key: str|None)
    """
    if not label:
        return (None, None)

    answer, matched_key = find_table_answer(label, tables.questions)
    if answer is not None:
        return (answer, matched_key)

    if custom:
        answer, matched_key = find_table_answer(label, tables.duration_questions, source="duration_table")
        if answer is not None:
            return (answer, matched_key)

    answer, matched_key = find_profile_answer(label, profile)
    if answer is not None:
        return (answer, matched_key)

    return find_duration_answer(label, profile, tables.tech_keywords)


def needs_curation(label):
    """Unanswered labels worth recording for a human: question-shaped or a duration question."""
    return is_question_shaped(label) or is_duration_question(label)


def format_text_answer(answer):
    if isinstance(answer, bool):
        return "Yes" if answer else "No"
    return str(answer)


def is_numeric_answer(value):
    return bool(re.fullmatch(r"\d+(\.\d+)?", str(value).strip()))
