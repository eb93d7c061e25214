from .models import Company
from .text import normalize_space


def owner_key(owner):
    """Comparison key: kind plus the lower-cased, whitespace-collapsed name"""
    if isinstance(owner, Company):
        return ("company", normalize_space(owner.name).lower())
    parts = [owner.first_name, owner.middle_name, owner.last_name]
    return ("person", normalize_space(" ".join(p for p in parts if p)).lower())


def dedupe(owners):
    """Remove duplicate owners, keeping the first occurrence of each"""
    seen = set()
    unique_owners = []
    for owner in owners:
        key = owner_key(owner)
        if key in seen:
            continue
        seen.add(key)
        unique_owners.append(owner)
    return unique_owners


def dedupe_invalid(records):
    seen = set()
    out = []
    for record in records:
        key = (normalize_space(record.raw).lower(), record.reason)
        if key not in seen:
            seen.add(key)
            out.append(record)
    return out
