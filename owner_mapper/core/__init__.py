"""Owner-name classification and canonicalization"""

from .classifier import classify, is_company
from .dates import aggregate, to_iso_date
from .dedupe import dedupe, owner_key
from .models import (
    Classification,
    Company,
    InvalidOwnerRecord,
    OwnerCandidate,
    Person,
)
from .person import parse_person
from .pipeline import build_owner_data, resolve_owners
from .splitter import split

__all__ = [
    "split",
    "classify",
    "parse_person",
    "dedupe",
    "aggregate",
    "is_company",
    "to_iso_date",
    "owner_key",
    "resolve_owners",
    "build_owner_data",
    "Classification",
    "Company",
    "Person",
    "InvalidOwnerRecord",
    "OwnerCandidate",
]
