"""Text normalization utilities"""

import re
import string

# "X? <sentences>. X?" - the first question repeated as the caption's last sentence
_REPEATED_QUESTION = re.compile(r"^(?P<q>[^?]+\?)(?:\s+|.*[.?!]\s+)(?P=q)$", re.DOTALL)


def collapse_whitespace(text):
    return " ".join(text.split())


def _strip_duplicate(text):
    """Return `text` with one level of self-repetition removed, or unchanged.

    Exact half split first ("Q Q", "QQ"), then the repeated-question fallback.
    """
    half = len(text) // 2
    first, second = text[:half].strip(), text[half:].strip()
    if first and first == second:
        return first

    match = _REPEATED_QUESTION.match(text)
    if match and len(match.group("q")) < len(text):
        return match.group("q").strip()

    return text


def normalize_label(text):
    """
    Normalize a caption read from the DOM into a field label.

    Collapses whitespace and strips self-duplicated captions such as
    "Years of experience? Years of experience?" -> "Years of experience?".
    Case is preserved. Runs to a fixpoint, so normalize_label is idempotent.
    """
    if not text:
        return ""
    current = collapse_whitespace(text)
    while True:
        deduped = collapse_whitespace(_strip_duplicate(current))
        if deduped == current:
            return current
        current = deduped


def normalize_text(text):
    """Normalize text for keyword matching - lowercase, strip punctuation"""
    if not text:
        return ""
    text = text.lower()
    text = text.translate(str.maketrans("", "", string.punctuation))
    return collapse_whitespace(text)


def is_question_shaped(label):
    return "?" in (label or "")
