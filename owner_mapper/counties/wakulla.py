import re
import logging

from ..core.models import OwnerCandidate
from ..core.text import normalize_space
from .base import CountyAdapter, cell_text

logger = logging.getLogger(__name__)

PARCEL_SELECTOR = "#ctlBodyPane_ctl01_ctl01_dynamicSummaryData_rptrDynamicColumns_ctl00_pnlSingleValue"
SALES_ROW_SELECTOR = "#ctlBodyPane_ctl08_ctl01_grdSales tbody tr"
CURRENT_OWNER_SELECTOR = "[id*='rptOwner'][id*='lnkUpmSearchLinkSuppressed_lblSearch']"
SALE_DATE_PATTERN = re.compile(r"\d{1,2}/\d{1,2}/\d{4}")

# Column positions in the sales grid
DATE_COLUMN = 0
GRANTOR_COLUMN = 7
GRANTEE_COLUMN = 8


class WakullaAdapter(CountyAdapter):
    """Wakulla County (qPublic / Schneider) parcel report"""

    name = "wakulla"
    input_format = "html"
    # Timber, farm and building-trade owners common in the county rolls
    company_keywords = (
        "timber", "timberlands", "plantation", "farms", "builders", "construction",
        "contractors", "associates", "investment", "real estate", "ministry",
    )

    def property_id(self, soup):
        parcel = soup.select_one(PARCEL_SELECTOR)
        return cell_text(parcel) or None

    def _sales(self, soup):
        for row in soup.select(SALES_ROW_SELECTOR):
            cols = row.find_all("td")
            if len(cols) <= GRANTEE_COLUMN:
                continue
            match = SALE_DATE_PATTERN.search(cell_text(cols[DATE_COLUMN]))
            if not match:
                continue
            yield match.group(0), cell_text(cols[GRANTOR_COLUMN]), cell_text(cols[GRANTEE_COLUMN])

    def owner_candidates(self, soup):
        for element in soup.select(CURRENT_OWNER_SELECTOR):
            name = cell_text(element)
            if name:
                yield OwnerCandidate(raw=name)

        sales = list(self._sales(soup))
        grantees = set()
        for sale_date, _, grantee in sales:
            if grantee:
                grantees.add(normalize_space(grantee).lower())
                yield OwnerCandidate(raw=grantee, source="sale", date=sale_date)

        # Sellers never recorded as buyers owned the parcel at some unknown date
        prior = []
        for _, grantor, _ in sales:
            key = normalize_space(grantor).lower()
            if key and key not in grantees and key not in prior:
                prior.append(key)
                yield OwnerCandidate(raw=grantor, source="sale", date=None)
        if prior:
            logger.info(f"{len(prior)} grantor(s) without a matching grantee placed under an unknown date")
