import re

from ..core.models import OwnerCandidate
from ..core.text import normalize_space
from .base import CountyAdapter, cell_text, lines_of

RECORD_TITLE_PATTERN = re.compile(r"Property\s+Record\s+Information\s+for\s+([A-Za-z0-9_-]+)", re.IGNORECASE)
LABELLED_ID_PATTERN = re.compile(
    r"\b(?:Property\s*ID|Account|Parcel|Property\s*Number)\s*[:#]?\s*((?=[A-Za-z0-9_-]*\d)[A-Za-z0-9_-]{6,})", re.IGNORECASE
)
OWNER_LABEL_PATTERN = re.compile(r"^owner\s*:?", re.IGNORECASE)


class CharlotteAdapter(CountyAdapter):
    """Charlotte County Property Appraiser record page"""

    name = "charlotte"
    input_format = "html"

    def property_id(self, soup):
        for element in soup.find_all(["h1", "h2", "h3", "td", "div", "span", "p"]):
            match = RECORD_TITLE_PATTERN.search(element.get_text(" "))
            if match:
                return match.group(1)
        body = soup.body or soup
        match = LABELLED_ID_PATTERN.search(body.get_text(" "))
        return match.group(1) if match else None

    def owner_candidates(self, soup):
        found = []
        # The box after an "Owner" header holds the name on its first line, then the address
        for header in soup.find_all("h2"):
            if "owner" not in cell_text(header).lower():
                continue
            box = header.find_next_sibling("div")
            lines = lines_of(box)
            if lines:
                found.append(lines[0])

        for label in soup.find_all("strong"):
            if not cell_text(label).lower().startswith("owner"):
                continue
            parent = label.find_parent("div")
            text = OWNER_LABEL_PATTERN.sub("", cell_text(parent)).strip()
            if text and len(text) < 200:
                found.append(text)

        seen = set()
        for raw in found:
            key = normalize_space(raw).lower()
            if key and key not in seen:
                seen.add(key)
                yield OwnerCandidate(raw=raw)
