from ..core.models import OwnerCandidate
from ..utils import is_empty_value
from .base import CountyAdapter

GRANTEE_KEYS = ["GranteeName1", "GranteeName2"]


def find_property_record(data):
    """The dict holding OwnerInfos/SalesInfos; sometimes nested one level down"""
    if not isinstance(data, dict):
        return {}
    if "OwnerInfos" in data or "SalesInfos" in data:
        return data
    for value in data.values():
        if isinstance(value, dict) and ("OwnerInfos" in value or "SalesInfos" in value):
            return value
    return {}


class MiamiDadeAdapter(CountyAdapter):
    """Miami-Dade Property Appraiser JSON API response"""

    name = "miami dade"
    input_format = "json"

    def property_id(self, data):
        record = find_property_record(data)
        for source in (record.get("PropertyInfo") or {}, record, data if isinstance(data, dict) else {}):
            folio = source.get("FolioNumber")
            if not is_empty_value(folio):
                return str(folio).strip()
        return None

    def owner_candidates(self, data):
        record = find_property_record(data)
        for owner in record.get("OwnerInfos") or []:
            name = owner.get("Name")
            if not is_empty_value(name):
                yield OwnerCandidate(raw=name)
        # Grantees are the buyers who became owners on the sale date
        for sale in record.get("SalesInfos") or []:
            for key in GRANTEE_KEYS:
                name = sale.get(key)
                if not is_empty_value(name):
                    yield OwnerCandidate(raw=name, source="sale", date=sale.get("DateOfSale"))
