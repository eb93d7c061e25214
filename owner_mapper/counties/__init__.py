import re
import logging

from ..exceptions import UnknownCountyError
from .base import CountyAdapter
from .charlotte import CharlotteAdapter
from .fort_bend import FortBendAdapter
from .lee import LeeAdapter
from .miami_dade import MiamiDadeAdapter
from .wakulla import WakullaAdapter

logger = logging.getLogger(__name__)

ADAPTERS = {
    adapter.name: adapter
    for adapter in (CharlotteAdapter, FortBendAdapter, LeeAdapter, MiamiDadeAdapter, WakullaAdapter)
}


def _normalize_county(name):
    # "Miami-Dade", "miami_dade", "MiamiDade" and "miami dade" are the same county
    name = re.sub(r"\s+county$", "", str(name).strip(), flags=re.IGNORECASE)
    return re.sub(r"[\s_\-.]+", "", name.lower())


def available_counties():
    return sorted(ADAPTERS)


def get_adapter(county_name):
    """Instantiate the adapter registered for a county name"""
    if not county_name or not str(county_name).strip():
        raise UnknownCountyError("County name is required")
    wanted = _normalize_county(county_name)
    for name, adapter_class in ADAPTERS.items():
        if _normalize_county(name) == wanted:
            logger.info(f"Using {name} adapter for '{county_name}'")
            return adapter_class()
    raise UnknownCountyError(
        f"Could not find county adapter for '{county_name}' (available: {', '.join(available_counties())})"
    )


__all__ = ["CountyAdapter", "ADAPTERS", "available_counties", "get_adapter"]
