"""
dmv.models
==========

Dataclasses and enums for the two participants a facility deals with:
a :class:`Vehicle` brought in for registration and a :class:`Registrant`
working towards a driver's license.  These objects only hold state; the
rules that change that state live in :pymod:`dmv.facility` and
:pymod:`dmv.lifecycle`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum, auto
from typing import ClassVar, Dict, Optional, Union

from .settings import settings


class Engine(Enum):
    """Drive-train type; EVs pay a higher registration fee."""
    ICE = "ice"
    EV = "ev"

    def __str__(self) -> str:
        return self.value


class PlateType(Enum):
    """Plate classification assigned at registration."""
    REGULAR = "regular"
    ANTIQUE = "antique"

    def __str__(self) -> str:
        return self.value


class ParticipantKind(Enum):
    """Tag carried by every participant so a facility can tell them apart."""
    VEHICLE = auto()
    REGISTRANT = auto()


class LicenseStage(Enum):
    """Forward-only progress of a registrant towards a renewed license."""
    UNSTARTED = 0
    WRITTEN = 1
    LICENSED = 2
    RENEWED = 3

    def __str__(self) -> str:
        return self.name


@dataclass
class Vehicle:
    """
    A vehicle that can be registered at a facility.

    Parameters
    ----------
    vin : str
        Vehicle identification number.
    year : int
        Model year; drives the antique classification.
    make, model : str
        Manufacturer and model name (e.g. "Chevrolet", "Bolt").
    engine : Engine or str
        ``Engine.ICE`` / ``Engine.EV``, or their string values.
    registration_date : datetime.date | None, default=None
        Stamped by the first successful registration.
    plate_type : PlateType | None, default=None
        Assigned by the first successful registration.
    """
    kind: ClassVar[ParticipantKind] = ParticipantKind.VEHICLE

    vin: str
    year: int
    make: str
    model: str
    engine: Union[Engine, str]
    registration_date: Optional[date] = None
    plate_type: Optional[PlateType] = None

    def __post_init__(self):
        # raises ValueError for anything that is not "ice" / "ev"
        self.engine = Engine(self.engine)

    # Convenience helpers -------------------------------------------------
    def is_antique(
        self,
        today: Optional[date] = None,
        threshold_years: Optional[int] = None,
    ) -> bool:
        """Return True if the vehicle is old enough for an antique plate."""
        if threshold_years is None:
            threshold_years = settings.antique_age_years
        today = today or date.today()
        return self.year <= today.year - threshold_years

    @property
    def is_electric(self) -> bool:
        return self.engine is Engine.EV

    @property
    def is_registered(self) -> bool:
        return self.registration_date is not None


@dataclass
class Registrant:
    """
    A person progressing through the written test, road test and renewal.

    ``stage`` is not a constructor argument: it starts at
    ``LicenseStage.UNSTARTED`` and is only ever moved forward by
    :pyfunc:`dmv.lifecycle.advance_stage`.
    """
    kind: ClassVar[ParticipantKind] = ParticipantKind.REGISTRANT

    name: str
    age: int
    permit: bool = False
    stage: LicenseStage = field(default=LicenseStage.UNSTARTED, init=False)

    def earn_permit(self) -> None:
        """Grant a learner's permit; there are no preconditions."""
        self.permit = True

    @property
    def has_permit(self) -> bool:
        return self.permit

    def reached(self, stage: LicenseStage) -> bool:
        """True once the registrant is at *stage* or any later one."""
        return self.stage.value >= stage.value

    @property
    def license_data(self) -> Dict[str, bool]:
        """Snapshot of the three progress flags, derived from ``stage``."""
        return {
            "written": self.reached(LicenseStage.WRITTEN),
            "license": self.reached(LicenseStage.LICENSED),
            "renewed": self.reached(LicenseStage.RENEWED),
        }
