"""
Extension methods attached to generated service wrappers.

Each extension is a plain function taking the service wrapper as its first
argument. ExtensionConfig tells the generator which wrappers get which
extensions and with which parameters.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from adsapi.utils.naming import snake_case

logger = logging.getLogger(__name__)

PAGE_SIZE = 500


def _paging_key(service, name: str) -> str:
    """Property key for the selector/result names used by the service's converter."""
    if getattr(service, "use_snake_case_names", True):
        return snake_case(name)
    return name


def get_all_entries(service, selector: dict[str, Any], page_size: int = PAGE_SIZE) -> list[Any]:
    """Page through ``service.get(selector)`` and return every entry.

    Args:
        service: wrapper of a service with a ``get(serviceSelector)`` method
        selector: selector property map; its paging settings are overwritten
        page_size: number of results requested per page

    Returns:
        List of entry property maps
    """
    start_key = _paging_key(service, "startIndex")
    count_key = _paging_key(service, "numberResults")
    total_key = _paging_key(service, "totalNumEntries")

    entries: list[Any] = []
    offset = 0

    while True:
        page_selector = dict(selector, paging={start_key: offset, count_key: page_size})
        page = service.get(page_selector) or {}
        page_entries = page.get("entries") or []
        entries.extend(page_entries)

        total = int(page.get(total_key) or 0)
        offset += page_size
        logger.debug(f"{service.service}: fetched {len(entries)} of {total} entries")
        if not page_entries or offset >= total:
            break

    return entries


def get_all_by_statement(
    service, method_name: str, query: str = "", page_size: int = PAGE_SIZE
) -> list[Any]:
    """Page through a ``get*ByStatement`` method with LIMIT/OFFSET.

    Args:
        service: wrapper of a service with statement-based getters
        method_name: e.g. ``getOrdersByStatement``
        query: PQL filter without LIMIT/OFFSET clauses
        page_size: LIMIT used for each page

    Returns:
        List of result property maps
    """
    method = getattr(service, method_name)
    results: list[Any] = []
    offset = 0

    while True:
        statement = {"query": f"{query} LIMIT {page_size} OFFSET {offset}".strip()}
        page = method(statement) or {}
        page_results = page.get("results") or []
        if not page_results:
            break
        results.extend(page_results)
        offset += len(page_results)

    logger.debug(f"{service.service}.{method_name}: fetched {len(results)} results")
    return results


# Parameters of the generated wrapper methods; defaults are evaluated in the generated module
EXTENSION_METHODS: dict[str, list[str]] = {
    "get_all_entries": ["selector", "page_size=extensions.PAGE_SIZE"],
    "get_all_by_statement": ["method_name", "query=''", "page_size=extensions.PAGE_SIZE"],
}


@dataclass
class ExtensionConfig:
    """Which extensions are attached to which (version, service) wrappers."""

    extensions: dict[tuple[str, str], list[str]] = field(default_factory=dict)
    methods: dict[str, list[str]] = field(default_factory=lambda: dict(EXTENSION_METHODS))

    def for_service(self, version: str, service: str) -> list[str]:
        return list(self.extensions.get((version, service), []))


_SELECTOR_SERVICES = [
    "AdGroupAdService",
    "AdGroupCriterionService",
    "AdGroupService",
    "BudgetService",
    "CampaignCriterionService",
    "CampaignService",
    "FeedItemService",
    "FeedService",
    "ManagedCustomerService",
]

_STATEMENT_SERVICES = [
    "CompanyService",
    "CreativeService",
    "InventoryService",
    "LineItemService",
    "OrderService",
    "PlacementService",
    "UserService",
]


def default_extension_config(api_config) -> ExtensionConfig:
    """Extensions for every supported version of the given API."""
    if api_config.key == "adwords":
        names, extension = _SELECTOR_SERVICES, "get_all_entries"
    else:
        names, extension = _STATEMENT_SERVICES, "get_all_by_statement"

    extensions = {}
    for version in api_config.versions():
        for name in names:
            if api_config.is_supported(version, name):
                extensions[(version, name)] = [extension]
    return ExtensionConfig(extensions=extensions)
