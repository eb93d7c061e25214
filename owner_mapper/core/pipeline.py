import logging

from ..exceptions import PropertyIdNotFoundError
from ..utils import is_empty_value
from .dates import aggregate, serialize_owners_by_date
from .dedupe import dedupe, dedupe_invalid
from .keywords import STATUS_TERMS
from .splitter import resolve_co_owners, split_lines, split_owner_line

logger = logging.getLogger(__name__)


def resolve_owners(raw_strings, keywords=None):
    """Turn raw owner strings into (owners, invalid records)"""
    owners = []
    invalids = []
    for raw in raw_strings:
        for line in split_lines(raw or ""):
            if line.lower() in STATUS_TERMS:
                logger.debug(f"Skipping property status text in owner field: {line}")
                continue
            segments = split_owner_line(line, keywords)
            if not segments:
                continue
            found, rejected = resolve_co_owners(segments, keywords)
            owners.extend(found)
            invalids.extend(rejected)
    return dedupe(owners), invalids


def group_candidates(candidates):
    """Current owner strings, and sale strings grouped by raw date in encounter order"""
    current = []
    sales = []
    positions = {}
    for candidate in candidates:
        if candidate.source == "current":
            current.append(candidate.raw)
            continue
        if candidate.date not in positions:
            positions[candidate.date] = len(sales)
            sales.append((candidate.date, []))
        sales[positions[candidate.date]][1].append(candidate.raw)
    return current, sales


def build_owner_data(property_id, candidates, keywords=None):
    """Build the owner_data.json mapping for one property"""
    if is_empty_value(property_id):
        raise PropertyIdNotFoundError("Property identifier not found in the input document")

    current_raw, sales = group_candidates(candidates)
    invalid_owners = []

    dated = []
    for date, raw_names in sales:
        owners, rejected = resolve_owners(raw_names, keywords)
        invalid_owners.extend(rejected)
        dated.append({"date": date, "owners": owners})

    current, rejected = resolve_owners(current_raw, keywords)
    invalid_owners.extend(rejected)

    owners_by_date = aggregate(dated, current)
    invalid_owners = dedupe_invalid(invalid_owners)

    logger.info(
        f"property_{property_id}: {len(current)} current owner(s), "
        f"{len(owners_by_date) - 1} historical bucket(s), {len(invalid_owners)} invalid name(s)"
    )
    return {
        f"property_{property_id}": {
            "owners_by_date": serialize_owners_by_date(owners_by_date),
            "invalid_owners": [record.to_dict() for record in invalid_owners],
        }
    }
