import re
import html

from .keywords import NOISE_PATTERNS

_NOISE_RE = [re.compile(p, re.IGNORECASE) for p in NOISE_PATTERNS]
_PARENS_RE = re.compile(r"\([^)]*\)")
_EDGE_CHARS = " ,;:-/&.'"


def normalize_space(text):
    """Collapse every kind of whitespace (NBSP included) to single spaces"""
    if not text:
        return ""
    return re.sub(r"\s+", " ", str(text).replace("\u00a0", " ")).strip()


def decode_entities(text):
    return html.unescape(text or "").replace("\u00a0", " ")


def strip_noise(text):
    """Remove parenthesized content and ownership annotations (ET AL, JTROS...)"""
    text = _PARENS_RE.sub(" ", text)
    for pattern in _NOISE_RE:
        text = pattern.sub(" ", text)
    return normalize_space(text)


def strip_edges(text):
    # Separators cannot start or end a name; a trailing period may close an abbreviation
    text = text.lstrip(_EDGE_CHARS)
    while text and text[-1] in _EDGE_CHARS and text[-1] != ".":
        text = text[:-1]
    return text.strip()


def clean_candidate(text):
    return strip_edges(strip_noise(normalize_space(text)))


def has_digits(text):
    return any(ch.isdigit() for ch in text or "")


def has_letters(text):
    return any(ch.isalpha() for ch in text or "")


def is_upper_case(text):
    """True when the text has letters and none of them are lower-case"""
    return has_letters(text) and text == text.upper()


def word_tokens(text):
    """Name tokens: letters, apostrophes and hyphens only"""
    cleaned = re.sub(r"[^\w'\- ]|[\d_]", " ", text.replace(".", " "))
    tokens = []
    for token in cleaned.split():
        token = token.strip("'-")
        if token:
            tokens.append(token)
    return tokens
