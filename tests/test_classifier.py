import pytest

from owner_mapper.core.classifier import classify, is_company
from owner_mapper.core.keywords import build_keyword_set
from owner_mapper.core.models import (
    CONTAINS_DIGITS,
    INSUFFICIENT_TOKENS,
    PLACEHOLDER,
    Company,
    Person,
)


@pytest.mark.parametrize("keyword", [
    "inc", "llc", "ltd", "corp", "co", "company", "trust", "trustee", "foundation",
    "alliance", "solutions", "services", "association", "partners", "holdings",
    "properties", "management", "bank", "church", "university", "lp", "llp", "pllc",
    "plc", "realty",
])
def test_company_keywords_any_case(keyword):
    assert is_company(f"Acme {keyword}")
    assert is_company(f"ACME {keyword.upper()}")


def test_keyword_must_be_whole_word():
    assert not is_company("Anderson Coleman")
    assert not is_company("Cobb Lincoln")
    assert is_company("ACME L.L.C.")
    assert is_company("CITY  OF NAPLES")


def test_company_name_kept_as_written():
    result = classify("ABC PROPERTIES LLC")
    assert result.kind == "company"
    assert result.owner == Company("ABC PROPERTIES LLC")


def test_company_with_trailing_period():
    assert classify("ACME CORP.").owner == Company("ACME CORP.")


def test_company_trailing_number_removed():
    assert classify("ACME HOLDINGS 2").owner == Company("ACME HOLDINGS")


def test_company_with_digits_is_invalid():
    result = classify("21ST CENTURY HOLDINGS LLC")
    assert result.kind == "invalid"
    assert result.reason == CONTAINS_DIGITS


def test_person():
    result = classify("John Smith")
    assert result.kind == "person"
    assert result.is_valid
    assert result.owner == Person("John", "Smith")


@pytest.mark.parametrize("candidate, reason", [
    ("123 Main St", CONTAINS_DIGITS),
    ("Smith", INSUFFICIENT_TOKENS),
    ("", PLACEHOLDER),
    ("ESTATE OF", PLACEHOLDER),
    ("Unknown Owner", PLACEHOLDER),
    ("---", PLACEHOLDER),
])
def test_invalid(candidate, reason):
    result = classify(candidate)
    assert result.kind == "invalid"
    assert not result.is_valid
    assert result.reason == reason
    assert result.owner is None


def test_extra_keywords():
    assert classify("SUNNY ACRES RANCH").kind == "person"
    keywords = build_keyword_set(["ranch"])
    assert classify("SUNNY ACRES RANCH", keywords).owner == Company("SUNNY ACRES RANCH")


@pytest.mark.parametrize("candidate", ["MR SMITH", "SMITH JR", "Jr Sr"])
def test_affix_only_names_are_insufficient(candidate):
    result = classify(candidate)
    assert result.kind == "invalid"
    assert result.reason == INSUFFICIENT_TOKENS


@pytest.mark.parametrize("candidate", ["ESTATE OF SMITH JOHN", "SMITH JOHN EST", "SMITH JOHN EST."])
def test_estate_annotation_removed(candidate):
    assert classify(candidate).owner == Person("John", "Smith")
