import re

from ..core.models import OwnerCandidate
from .base import CountyAdapter, cell_text

PROPERTY_ID_PATTERN = re.compile(r"(?:Property|Quick\s*Ref)\s*ID\s*:?\s*([A-Z]?\d+)", re.IGNORECASE)


class FortBendAdapter(CountyAdapter):
    """Fort Bend CAD property details page"""

    name = "fort bend"
    input_format = "html"

    def property_id(self, soup):
        for cell in soup.find_all(["th", "td"]):
            label = cell_text(cell).rstrip(":").lower()
            if label in ("property id", "quick ref id"):
                value = cell_text(cell.find_next_sibling(["td", "th"]))
                if value:
                    return value
        match = PROPERTY_ID_PATTERN.search(soup.get_text(" "))
        return match.group(1) if match else None

    def _january_owner(self, soup):
        # Table with a 'January 1 Owner' header, then the row whose first cell is 'Name:'
        for table in soup.find_all("table"):
            if not any("January 1 Owner" in th.get_text() for th in table.find_all("th")):
                continue
            for row in table.find_all("tr"):
                cells = row.find_all(["th", "td"])
                if len(cells) >= 2 and "Name:" in cells[0].get_text():
                    return cell_text(cells[1])
        return None

    def _deed_history(self, soup):
        for table in soup.find_all("table"):
            heading = table.find_previous("div", class_="panel-heading")
            if not heading or "Deed History" not in heading.get_text():
                continue
            for row in table.find_all("tr")[1:]:
                cols = row.find_all("td")
                if len(cols) < 5:
                    continue
                grantee = cell_text(cols[4])
                if grantee:
                    yield cell_text(cols[0]) or None, grantee

    def owner_candidates(self, soup):
        current_owner = self._january_owner(soup)
        if current_owner:
            yield OwnerCandidate(raw=current_owner)
        for deed_date, grantee in self._deed_history(soup):
            yield OwnerCandidate(raw=grantee, source="sale", date=deed_date)
