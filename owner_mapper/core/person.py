"""Person-name parsing.

Token order is a heuristic with no ground truth:

* ``LAST, FIRST MIDDLE`` when the name carries a comma
* ``LAST FIRST MIDDLE`` when the name is entirely upper-case, the way most
  county CAD/GIS exports print owners
* ``FIRST MIDDLE LAST`` otherwise

Surname particles (VAN, DE LA, MC) stay with the surname. Misreads of
two-token names are expected noise.
"""

from .keywords import (
    PERSON_PREFIXES,
    PERSON_SUFFIXES,
    SINGLE_NAME_COMMA_PATTERN,
    SURNAME_PARTICLES,
    UPPERCASE_TOKENS,
    normalize_affix_token,
)
from .models import Person
from .text import clean_candidate, has_digits, is_upper_case, word_tokens

FIRST_LAST = "first_last"
LAST_FIRST = "last_first"


def split_affixes(tokens):
    """Strip a leading prefix and a trailing suffix"""
    tokens = list(tokens)
    prefix = suffix = None
    if tokens:
        key = normalize_affix_token(tokens[0])
        if key in PERSON_PREFIXES:
            prefix = PERSON_PREFIXES[key]
            tokens = tokens[1:]
    if tokens:
        key = normalize_affix_token(tokens[-1])
        if key in PERSON_SUFFIXES:
            suffix = PERSON_SUFFIXES[key]
            tokens = tokens[:-1]
    return prefix, tokens, suffix


def name_tokens(text):
    """Name tokens left once a prefix and suffix are removed"""
    return split_affixes(word_tokens(text))[1]


def is_affix(text):
    """True for a bare honorific or generational suffix ("MRS", "JR")"""
    tokens = word_tokens(text)
    if len(tokens) != 1:
        return False
    key = normalize_affix_token(tokens[0])
    return key in PERSON_PREFIXES or key in PERSON_SUFFIXES


def _is_particle(token):
    return normalize_affix_token(token) in SURNAME_PARTICLES


def _capitalize(part):
    return part[:1].upper() + part[1:].lower()


def recase(token, preserve_upper=False):
    if token.upper() in UPPERCASE_TOKENS:
        return token.upper()
    if preserve_upper and token.isupper() and len(token) <= 4:
        return token
    if token.isupper() or token.islower():
        return "-".join(
            "'".join(_capitalize(p) for p in piece.split("'"))
            for piece in token.split("-")
        )
    # Already mixed case (McDonald, DeLuca): keep as written
    return token


def _join(tokens, preserve_upper):
    return " ".join(recase(t, preserve_upper) for t in tokens)


def _tokens_for_comma_form(text):
    last_part, _, rest = text.partition(",")
    last_tokens = word_tokens(last_part)
    suffix = None
    if len(last_tokens) > 1:
        key = normalize_affix_token(last_tokens[-1])
        if key in PERSON_SUFFIXES:
            suffix = PERSON_SUFFIXES[key]
            last_tokens = last_tokens[:-1]
    prefix, rest_tokens, rest_suffix = split_affixes(word_tokens(rest))
    if not last_tokens or not rest_tokens:
        return None
    return prefix, last_tokens, rest_tokens[0], rest_tokens[1:], suffix or rest_suffix


def _tokens_for_plain_form(text, order):
    prefix, tokens, suffix = split_affixes(word_tokens(text))
    if len(tokens) < 2:
        return None
    if order is None:
        order = LAST_FIRST if is_upper_case(text) else FIRST_LAST
    if order == LAST_FIRST:
        # "SMITH JR JOHN": generational suffix printed after the surname
        if suffix is None and len(tokens) > 2:
            key = normalize_affix_token(tokens[1])
            if key in PERSON_SUFFIXES and len(key) > 1:
                suffix = PERSON_SUFFIXES[key]
                tokens = tokens[:1] + tokens[2:]
        # "VAN DYKE DICK", "DE LA CRUZ MARIA"
        end = 0
        while end < len(tokens) - 2 and _is_particle(tokens[end]):
            end += 1
        return prefix, tokens[:end + 1], tokens[end + 1], tokens[end + 2:], suffix
    start = len(tokens) - 1
    while start > 1 and _is_particle(tokens[start - 1]):
        start -= 1
    return prefix, tokens[start:], tokens[0], tokens[1:start], suffix


def parse_person(candidate, order=None):
    """Parse a candidate into a Person, or None when it cannot be a person name.

    `order` forces FIRST_LAST or LAST_FIRST for comma-free names; by default
    it is chosen from the casing of the candidate.
    """
    text = clean_candidate(candidate)
    if not text or has_digits(text):
        return None
    text = SINGLE_NAME_COMMA_PATTERN.sub(lambda m: " " + m.group(0).lstrip(", "), text)

    if "," in text:
        parts = _tokens_for_comma_form(text)
    else:
        parts = _tokens_for_plain_form(text, order)
    if parts is None:
        return None

    prefix, last_tokens, first, middle_tokens, suffix = parts
    preserve_upper = not is_upper_case(text)
    first_name = recase(first, preserve_upper)
    last_name = _join(last_tokens, preserve_upper)
    if not first_name or not last_name:
        return None
    return Person(
        first_name=first_name,
        last_name=last_name,
        middle_name=_join(middle_tokens, preserve_upper) or None,
        prefix=prefix,
        suffix=suffix,
    )
