import re
import logging

from ..core.models import OwnerCandidate
from ..core.text import decode_entities, normalize_space
from .base import CountyAdapter, cell_text, lines_of

logger = logging.getLogger(__name__)

# Street line that follows the owner names in the owner panel ("1418 SE 12TH TER")
ADDRESS_PATTERN = re.compile(r"^\d+\s+[A-Z]")
SALE_DATE_PATTERN = re.compile(r"Sale Date.*?(\d{1,2}/\d{1,2}/\d{4})", re.DOTALL)
FOLIO_PATTERNS = [
    re.compile(r"FolioID=(\d+)", re.IGNORECASE),
    re.compile(r"Folio\s*ID\s*:?\s*(\d+)", re.IGNORECASE),
]
STRAP_PATTERN = re.compile(r"STRAP:\s*([\w\.\-]+)")


class LeeAdapter(CountyAdapter):
    """Lee County Property Appraiser parcel display page"""

    name = "lee"
    input_format = "html"

    def property_id(self, soup):
        markup = str(soup)
        for pattern in FOLIO_PATTERNS:
            match = pattern.search(markup)
            if match:
                return match.group(1)
        match = STRAP_PATTERN.search(soup.get_text(" "))
        if match:
            return match.group(1).replace("-", "").replace(".", "")
        return None

    def _panel_owners(self, soup):
        names = []
        owner_section = soup.find("div", id="divDisplayParcelOwner")
        if owner_section is None:
            logger.info("No divDisplayParcelOwner found in Lee County HTML")
            return names
        text_panel = owner_section.find("div", class_="textPanel")
        if text_panel is None:
            logger.info("No textPanel found in Lee County divDisplayParcelOwner")
            return names
        # The owner names come first; everything from the street line on is the mailing address
        for line in lines_of(text_panel):
            if ADDRESS_PATTERN.match(line.upper()):
                break
            names.append(line)
        return names

    def _ownership_list(self, soup):
        names = []
        ownership_div = soup.find("div", id="ownershipDiv")
        if ownership_div is None:
            return names
        for ul in ownership_div.find_all("ul", class_="genericList"):
            for li in ul.find_all("li"):
                name = cell_text(li)
                if name:
                    names.append(decode_entities(name))
        return names

    def owner_candidates(self, soup):
        seen = set()
        names = []
        for name in self._panel_owners(soup) + self._ownership_list(soup):
            key = normalize_space(name).upper()
            if key and key not in seen:
                seen.add(key)
                names.append(name)

        for name in names:
            yield OwnerCandidate(raw=name)

        # The owners of record are the grantees of the most recent sale
        sale_match = SALE_DATE_PATTERN.search(soup.get_text(" "))
        if sale_match:
            for name in names:
                yield OwnerCandidate(raw=name, source="sale", date=sale_match.group(1))
