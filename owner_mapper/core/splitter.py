import re

from .classifier import classify, is_company
from .keywords import PERSON_PREFIXES, PERSON_SUFFIXES, SINGLE_NAME_COMMA_PATTERN, normalize_affix_token
from .models import AMBIGUOUS_AMPERSAND, InvalidOwnerRecord, Person
from .person import FIRST_LAST, is_affix, parse_person, recase
from .text import clean_candidate, decode_entities, has_digits, is_upper_case, normalize_space, word_tokens

_LINE_SEPARATORS = re.compile(r"[\r\n;]+")
_OWNER_SEPARATORS = re.compile(r"&|\band\b", re.IGNORECASE)
_COMMA_PLACEHOLDER = "\x00"


def split_lines(raw):
    """Break a raw blob on newlines and semicolons"""
    text = decode_entities(raw)
    return [normalize_space(line) for line in _LINE_SEPARATORS.split(text) if normalize_space(line)]


def _split_commas(segment):
    # "Last, First" keeps its comma; only real lists of names are split
    if SINGLE_NAME_COMMA_PATTERN.sub("", segment).count(",") < 2:
        return [segment]
    protected = SINGLE_NAME_COMMA_PATTERN.sub(
        lambda m: m.group(0).replace(",", _COMMA_PLACEHOLDER), segment
    )
    return [part.replace(_COMMA_PLACEHOLDER, ",") for part in protected.split(",")]


def split(raw):
    """Split a raw owner blob into cleaned, non-empty candidate strings"""
    candidates = []
    for line in split_lines(raw):
        for segment in _OWNER_SEPARATORS.split(line):
            for part in _split_commas(segment):
                cleaned = clean_candidate(part)
                if cleaned:
                    candidates.append(cleaned)
    return candidates


def _is_single_given_name(segment, keywords):
    return (
        not is_company(segment, keywords)
        and not has_digits(segment)
        and "," not in segment
        and not is_affix(segment)
        and len(word_tokens(segment)) == 1
    )


def _given_name_person(segment, surname):
    token = word_tokens(segment)[0]
    return Person(first_name=recase(token, not is_upper_case(segment)), last_name=surname)


def resolve_co_owners(segments, keywords=None):
    """Classify the segments of one owner line, sharing surnames across '&'.

    "SMITH JOHN & JANE" gives Jane the surname parsed from the segment
    before her; "JOHN & JANE SMITH" gives John the last token of the segment
    after him. Lone given names with no surname to borrow are invalid.
    Bare honorifics ("MR & MRS JOHN SMITH") are dropped and the name after
    them is read first-name first.
    """
    results = [None] * len(segments)
    pending = []
    honorific = False
    surname = None

    if len(segments) == 1:
        results[0] = classify(segments[0], keywords)
    else:
        for i, segment in enumerate(segments):
            if is_affix(segment):
                honorific = True
                continue
            if _is_single_given_name(segment, keywords):
                if surname:
                    results[i] = _given_name_person(segment, surname)
                else:
                    pending.append(i)
                continue

            person = None
            if (pending or honorific) and not is_company(segment, keywords) and not has_digits(segment):
                person = parse_person(segment, order=FIRST_LAST)
                if person is not None:
                    for j in pending:
                        results[j] = _given_name_person(segments[j], person.last_name)
                    pending = []
                    results[i] = person
            honorific = False
            if person is None:
                outcome = classify(segment, keywords)
                results[i] = outcome
                person = outcome.owner if outcome.kind == "person" else None
            surname = person.last_name if person is not None else None

        for j in pending:
            results[j] = InvalidOwnerRecord(raw=segments[j], reason=AMBIGUOUS_AMPERSAND)

    owners, invalids = [], []
    for segment, result in zip(segments, results):
        if result is None:
            continue
        if isinstance(result, InvalidOwnerRecord):
            invalids.append(result)
        elif isinstance(result, Person):
            owners.append(result)
        elif result.is_valid:
            owners.append(result.owner)
        else:
            invalids.append(InvalidOwnerRecord(raw=segment, reason=result.reason))
    return owners, invalids


def _has_person_signal(segment):
    # A comma, an initial or an honorific only shows up in a person's name
    if "," in segment:
        return True
    for token in word_tokens(segment):
        key = normalize_affix_token(token)
        if len(key) == 1 or key in PERSON_PREFIXES or key in PERSON_SUFFIXES:
            return True
    return False


def _is_firm_name(segments, keywords):
    loose = [s for s in segments if not is_company(s, keywords)]
    if not loose or any(has_digits(s) for s in loose):
        return False
    # "SMITH & SONS INC": the non-company pieces are bare words of the firm name
    if all(len(word_tokens(s)) == 1 for s in loose):
        return True
    # "FLORIDA POWER & LIGHT CO": only the last piece names the entity type
    head = segments[:-1]
    return is_company(segments[-1], keywords) and len(loose) == len(head) and not any(
        _has_person_signal(s) for s in head
    )


def split_owner_line(line, keywords=None):
    """Candidates for one line; company names written with '&' stay whole"""
    segments = split(line)
    if len(segments) > 1 and is_company(line, keywords) and _is_firm_name(segments, keywords):
        whole = clean_candidate(line)
        return [whole] if whole else []
    return segments
