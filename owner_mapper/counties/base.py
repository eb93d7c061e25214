import re

from bs4 import BeautifulSoup

from ..core.keywords import build_keyword_set
from ..core.text import normalize_space


class CountyAdapter:
    """Pulls owner candidates out of one county's property record.

    Subclasses set `name`, `input_format` and optionally
    `company_keywords`, and implement `property_id` and `owner_candidates`.
    """

    name = None
    input_format = "html"
    company_keywords = ()

    def keywords(self, extra=None):
        return build_keyword_set(list(self.company_keywords) + list(extra or []))

    def parse(self, content):
        """Turn raw file content into the object the extraction methods receive"""
        if self.input_format == "html":
            return BeautifulSoup(content, "html.parser")
        return content

    def property_id(self, document):
        raise NotImplementedError

    def owner_candidates(self, document):
        """Yield OwnerCandidate objects in document order"""
        raise NotImplementedError


def cell_text(element):
    if element is None:
        return ""
    return normalize_space(element.get_text(" ", strip=True))


def lines_of(element):
    """Text lines of an element, with <br> treated as a line break"""
    if element is None:
        return []
    markup = re.sub(r"<br\s*/?\s*>", "\n", str(element), flags=re.IGNORECASE)
    text = BeautifulSoup(markup, "html.parser").get_text()
    return [normalize_space(line) for line in text.split("\n") if normalize_space(line)]
