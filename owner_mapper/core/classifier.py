import re
from functools import lru_cache

from .keywords import COMPANY_KEYWORDS, PLACEHOLDER_PATTERNS, compile_keywords
from .models import (
    CONTAINS_DIGITS,
    INSUFFICIENT_TOKENS,
    PLACEHOLDER,
    UNCLASSIFIED,
    Classification,
    Company,
)
from .person import name_tokens, parse_person
from .text import clean_candidate, has_digits, has_letters

_PLACEHOLDER_RE = [re.compile(p, re.IGNORECASE) for p in PLACEHOLDER_PATTERNS]
# Ownership share or sequence number printed after a company name
_TRAILING_NUMBER_RE = re.compile(r"\s+\d{1,3}%?$")


@lru_cache(maxsize=32)
def _keyword_pattern(keywords):
    return compile_keywords(keywords)


def company_pattern(keywords=None):
    return _keyword_pattern(tuple(keywords) if keywords else tuple(COMPANY_KEYWORDS))


def is_company(name, keywords=None):
    """True if any company keyword appears in the name as a whole word"""
    if not name:
        return False
    return bool(company_pattern(keywords).search(name))


def is_placeholder(name):
    return any(p.match(name) for p in _PLACEHOLDER_RE)


def classify(candidate, keywords=None):
    """Decide whether a candidate names a company, a person, or neither"""
    text = clean_candidate(candidate)
    if not text or not has_letters(text) or is_placeholder(text):
        return Classification("invalid", reason=PLACEHOLDER)

    if is_company(text, keywords):
        name = _TRAILING_NUMBER_RE.sub("", text).strip()
        if has_digits(name):
            return Classification("invalid", reason=CONTAINS_DIGITS)
        return Classification("company", owner=Company(name=name))

    if has_digits(text):
        return Classification("invalid", reason=CONTAINS_DIGITS)
    if len(name_tokens(text)) < 2:
        return Classification("invalid", reason=INSUFFICIENT_TOKENS)

    person = parse_person(text)
    if person is None:
        return Classification("invalid", reason=UNCLASSIFIED)
    return Classification("person", owner=person)
