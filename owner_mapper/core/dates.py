import re
from datetime import datetime

from .dedupe import dedupe
from .text import normalize_space

CURRENT_KEY = "current"
UNKNOWN_DATE_PREFIX = "unknown_date_"

DATE_FORMATS = [
    "%m/%d/%Y",
    "%Y-%m-%d",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%m/%Y",
]

# Dates embedded in longer text ("Sale Date: 3/14/2019 Book 12")
_EMBEDDED_DATES = [
    (re.compile(r"\b(\d{1,2})/(\d{1,2})/(\d{4})\b"), ("month", "day", "year")),
    (re.compile(r"\b(\d{4})-(\d{2})-(\d{2})\b"), ("year", "month", "day")),
    (re.compile(r"\b(\d{1,2})/(\d{4})\b"), ("month", "year")),
]


def _from_parts(parts):
    try:
        return datetime(
            int(parts["year"]), int(parts["month"]), int(parts.get("day", 1))
        ).strftime("%Y-%m-%d")
    except ValueError:
        return None


def to_iso_date(value):
    """Normalize a sale/deed date to YYYY-MM-DD, or None if it cannot be read"""
    text = normalize_space(value)
    if not text:
        return None
    # "Sept. 5, 2020" -> "Sep 5, 2020"
    text = re.sub(r"(?<=[A-Za-z])\.", "", text)
    text = re.sub(r"^Sept\b", "Sep", text, flags=re.IGNORECASE)

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).strftime("%Y-%m-%d")
        except ValueError:
            continue

    for pattern, names in _EMBEDDED_DATES:
        match = pattern.search(text)
        if match:
            iso = _from_parts(dict(zip(names, match.groups())))
            if iso:
                return iso
    return None


def _unpack(entry):
    if isinstance(entry, dict):
        return entry.get("date"), entry.get("owners") or []
    date, owners = entry
    return date, owners or []


def aggregate(dated, current=None):
    """Group owners under ISO dates, unknown_date_N placeholders and "current".

    Keys come out as: dates ascending, then unknown dates in the order they
    were met, then "current" (always present).
    """
    by_date = {}
    unknown = []
    for entry in dated or []:
        date, owners = _unpack(entry)
        if not owners:
            continue
        iso = to_iso_date(date) if date else None
        if iso:
            by_date.setdefault(iso, []).extend(owners)
        else:
            unknown.append(list(owners))

    owners_by_date = {}
    for iso in sorted(by_date):
        owners_by_date[iso] = dedupe(by_date[iso])
    for index, owners in enumerate(unknown, start=1):
        owners_by_date[f"{UNKNOWN_DATE_PREFIX}{index}"] = dedupe(owners)
    owners_by_date[CURRENT_KEY] = dedupe(current or [])
    return owners_by_date


def serialize_owners_by_date(owners_by_date):
    return {key: [owner.to_dict() for owner in owners] for key, owners in owners_by_date.items()}
