"""
dmv.directory
=============

An in-memory registry that stores :class:`dmv.facility.Facility`
objects keyed by a slugified version of their name.

The directory only holds references; every facility keeps its own
services, registrations and fee total.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from .facility import Facility

logger = logging.getLogger(__name__)


class FacilityDirectory:
    """
    Dictionary-backed registry of facilities.

    Example
    -------
    >>> fd = FacilityDirectory()
    >>> fd.add(Facility("Ashland DMV Office", "600 Tolman Creek Rd Ashland OR 97520", "541-776-6092"))
    >>> fd.get("ashland-dmv-office").phone
    '541-776-6092'
    """

    def __init__(self) -> None:
        self._facilities: Dict[str, Facility] = {}

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _slug(name: str) -> str:
        """lower-cased, dash-separated key used as unique identifier."""
        return name.lower().replace(" ", "-")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def add(self, facility: Facility) -> None:
        """Insert or overwrite a facility in the directory."""
        slug = self._slug(facility.name)
        if slug in self._facilities:
            logger.warning(f"Replacing facility {slug!r}")
        self._facilities[slug] = facility

    def get(self, slug: str) -> Facility:
        """Retrieve by slug (raise KeyError if not present)."""
        return self._facilities[slug]

    def find_offering(self, service: str) -> List[Facility]:
        """Return all facilities currently offering *service*."""
        return [f for f in self._facilities.values() if f.offers(service)]

    def total_fees(self) -> int:
        """Fees collected across every facility in the directory."""
        return sum(f.collected_fees for f in self._facilities.values())

    # ------------------------------------------------------------------
    # Dunder helpers for convenience
    # ------------------------------------------------------------------
    def __iter__(self):
        return iter(self._facilities.values())

    def __len__(self) -> int:
        return len(self._facilities)
