"""
dmv.facility
============

A licensing office: the services it offers, the vehicles it registered,
the fees it collected, and the gated tests it administers.

Every gate follows the same policy.  When a precondition is not met the
call is a silent no-op: nothing is mutated and the method returns
``False`` (or ``0`` for :pymeth:`Facility.collect_fee`).  That includes
being handed the wrong kind of participant.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, List, Optional

from .lifecycle import advance_stage
from .models import LicenseStage, ParticipantKind, PlateType, Registrant, Vehicle
from .settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------
# Service names a facility can offer
# ---------------------------------------------------------------------
VEHICLE_REGISTRATION = "Vehicle Registration"
WRITTEN_TEST = "Written Test"
ROAD_TEST = "Road Test"
RENEW_LICENSE = "Renew License"


def _is_vehicle(obj: Any) -> bool:
    return getattr(obj, "kind", None) is ParticipantKind.VEHICLE


def _is_registrant(obj: Any) -> bool:
    return getattr(obj, "kind", None) is ParticipantKind.REGISTRANT


class Facility:
    """
    One licensing office.

    Example
    -------
    >>> f = Facility("Albany DMV Office", "2242 Santiam Hwy SE Albany OR 97321", "541-967-2014")
    >>> f.add_service(VEHICLE_REGISTRATION)
    >>> f.register_vehicle(Vehicle("123456789abcdefgh", 2012, "Chevrolet", "Cruz", "ice"))
    True
    >>> f.collected_fees
    100
    """

    def __init__(
        self,
        name: str,
        address: str,
        phone: str,
        settings: Optional[Settings] = None,
    ) -> None:
        self.name = name
        self.address = address
        self.phone = phone
        self.services: List[str] = []
        self.registered_vehicles: List[Vehicle] = []
        self.collected_fees = 0
        self._settings = settings or default_settings

    def __repr__(self) -> str:
        return f"Facility(name={self.name!r}, services={self.services!r})"

    # ------------------------------------------------------------------
    # Services
    # ------------------------------------------------------------------
    def add_service(self, service: str) -> None:
        """Append *service*; order is kept and duplicates are allowed."""
        self.services.append(service)

    def offers(self, service: str) -> bool:
        """True if *service* is among this facility's services."""
        return service in self.services

    # ------------------------------------------------------------------
    # Vehicles and fees
    # ------------------------------------------------------------------
    def register_vehicle(self, vehicle: Vehicle, today: Optional[date] = None) -> bool:
        """
        Register *vehicle*, stamp its date and plate type, and charge the fee.

        Returns ``False`` without touching anything if this facility does
        not offer vehicle registration, *vehicle* is not a Vehicle, or
        *vehicle* was already registered here or elsewhere.
        """
        if not self.offers(VEHICLE_REGISTRATION):
            logger.debug(f"{self.name}: registration not offered, skipping {vehicle!r}")
            return False
        if not _is_vehicle(vehicle):
            logger.debug(f"{self.name}: refusing to register non-vehicle {vehicle!r}")
            return False
        if vehicle.is_registered:
            logger.debug(f"{self.name}: {vehicle.vin} already registered on {vehicle.registration_date}")
            return False

        today = today or date.today()
        antique = vehicle.is_antique(today, self._settings.antique_age_years)

        self.registered_vehicles.append(vehicle)
        vehicle.registration_date = today
        vehicle.plate_type = PlateType.ANTIQUE if antique else PlateType.REGULAR
        fee = self.collect_fee(vehicle, today)
        logger.info(
            f"{self.name}: registered {vehicle.vin} ({vehicle.plate_type}) for ${fee}"
        )
        return True

    def fee_for(self, vehicle: Vehicle, today: Optional[date] = None) -> int:
        """Registration fee for *vehicle* under this facility's schedule."""
        cfg = self._settings
        if vehicle.plate_type is not None:
            antique = vehicle.plate_type is PlateType.ANTIQUE
        else:
            antique = vehicle.is_antique(today, cfg.antique_age_years)

        if antique:
            return cfg.antique_fee
        if vehicle.is_electric:
            return cfg.ev_fee
        return cfg.regular_fee

    def collect_fee(self, vehicle: Vehicle, today: Optional[date] = None) -> int:
        """
        Charge the registration fee for *vehicle* and return the amount.

        Each call charges again; it does not check registration status or
        whether registration is offered.
        """
        if not _is_vehicle(vehicle):
            logger.debug(f"{self.name}: no fee for non-vehicle {vehicle!r}")
            return 0
        fee = self.fee_for(vehicle, today)
        self.collected_fees += fee
        return fee

    # ------------------------------------------------------------------
    # Driver licensing
    # ------------------------------------------------------------------
    def administer_written_test(self, registrant: Registrant) -> bool:
        """Pass *registrant* if they hold a permit and meet the age floor."""
        if not self._admits(WRITTEN_TEST, registrant):
            return False
        if not registrant.permit:
            logger.debug(f"{self.name}: {registrant.name} has no permit")
            return False
        if registrant.age < self._settings.written_test_min_age:
            logger.debug(f"{self.name}: {registrant.name} is under age ({registrant.age})")
            return False
        return self._pass(registrant, LicenseStage.WRITTEN)

    def administer_road_test(self, registrant: Registrant) -> bool:
        """Pass *registrant* if they already passed the written test."""
        if not self._admits(ROAD_TEST, registrant):
            return False
        if not registrant.reached(LicenseStage.WRITTEN):
            logger.debug(f"{self.name}: {registrant.name} has not passed the written test")
            return False
        return self._pass(registrant, LicenseStage.LICENSED)

    def renew_drivers_license(self, registrant: Registrant) -> bool:
        """Renew the license of *registrant* if they hold one."""
        if not self._admits(RENEW_LICENSE, registrant):
            return False
        if not registrant.reached(LicenseStage.LICENSED):
            logger.debug(f"{self.name}: {registrant.name} holds no license to renew")
            return False
        return self._pass(registrant, LicenseStage.RENEWED)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _admits(self, service: str, registrant: Any) -> bool:
        if not self.offers(service):
            logger.debug(f"{self.name}: {service!r} not offered")
            return False
        if not _is_registrant(registrant):
            logger.debug(f"{self.name}: {service!r} refused for non-registrant {registrant!r}")
            return False
        return True

    def _pass(self, registrant: Registrant, stage: LicenseStage) -> bool:
        if advance_stage(registrant, stage):
            logger.info(f"{self.name}: {registrant.name} advanced to {stage}")
        return True
