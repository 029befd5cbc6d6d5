"""Telegraph operator persona transforms

These keep any reply inside the house style of a telegram: uppercase only,
periods spoken as STOP, and charged by the word.
"""

import re

MAX_WORDS = 20

_SENTENCE_PERIOD = re.compile(r"\.\s+")
_TRAILING_PERIOD = re.compile(r"\.$")


def enforce_uppercase(text) -> str:
    if not isinstance(text, str):
        return ""
    return text.upper()


def replace_periods(text) -> str:
    """Replace sentence-ending periods with STOP

    Only periods followed by whitespace or closing the text count, so
    decimals and dotted abbreviations mid-word are left alone.
    """
    if not isinstance(text, str):
        return ""
    text = _SENTENCE_PERIOD.sub(" STOP ", text)
    text = _TRAILING_PERIOD.sub(" STOP", text)
    return text.strip()


def count_words(text) -> int:
    if not isinstance(text, str):
        return 0
    return len(text.split())


def check_brevity(text, limit: int = MAX_WORDS) -> bool:
    """True if text fits within the word limit"""
    if not isinstance(text, str):
        return True
    return count_words(text) <= limit


def truncate_words(text, limit: int = MAX_WORDS) -> str:
    """Cut text to the word limit, closing it with STOP"""
    if not isinstance(text, str):
        return ""
    words = text.split()
    if len(words) > limit:
        return " ".join(words[:limit]) + " STOP"
    return text


def apply_operator_persona(text) -> str:
    if not isinstance(text, str):
        return ""
    return replace_periods(enforce_uppercase(text))


def fallback_reply(message: str) -> str:
    """Acknowledge a message without the language model"""
    reply = apply_operator_persona(f"RECEIVED YOUR MESSAGE STOP {message} STOP")
    return truncate_words(reply)
