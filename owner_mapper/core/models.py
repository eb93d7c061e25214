from dataclasses import dataclass
from typing import Optional, Union

# Reasons attached to invalid owner records
INSUFFICIENT_TOKENS = "insufficient_tokens"
AMBIGUOUS_AMPERSAND = "ambiguous_ampersand"
UNCLASSIFIED = "unclassified"
CONTAINS_DIGITS = "contains_digits"
PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class Company:
    name: str

    def to_dict(self):
        return {"type": "company", "name": self.name}


@dataclass(frozen=True)
class Person:
    first_name: str
    last_name: str
    middle_name: Optional[str] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None

    def to_dict(self):
        # Optional fields are always emitted so null and absent stay distinguishable
        return {
            "type": "person",
            "first_name": self.first_name,
            "last_name": self.last_name,
            "middle_name": self.middle_name,
            "prefix_name": self.prefix,
            "suffix_name": self.suffix,
        }


Owner = Union[Company, Person]


@dataclass(frozen=True)
class InvalidOwnerRecord:
    raw: str
    reason: str

    def to_dict(self):
        return {"raw": self.raw, "reason": self.reason}


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one candidate"""
    kind: str  # 'company', 'person' or 'invalid'
    owner: Optional[Owner] = None
    reason: Optional[str] = None

    @property
    def is_valid(self):
        return self.kind != "invalid"


def owner_from_dict(data):
    """Rebuild an Owner from its serialized form"""
    if data.get("type") == "company":
        return Company(name=data["name"])
    return Person(
        first_name=data["first_name"],
        last_name=data["last_name"],
        middle_name=data.get("middle_name"),
        prefix=data.get("prefix_name"),
        suffix=data.get("suffix_name"),
    )


@dataclass(frozen=True)
class OwnerCandidate:
    """A raw owner string pulled out of a source document"""
    raw: str
    source: str = "current"  # 'current' or 'sale'
    date: Optional[str] = None
