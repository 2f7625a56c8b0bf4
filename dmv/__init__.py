"""
dmv
===

A small in-memory model of a vehicle-licensing facility: offered
services, vehicle registration with tiered fees, and the gated
written test → road test → license → renewal progression.

Sub-modules
~~~~~~~~~~~
- :pymod:`dmv.models`     – ``Vehicle`` / ``Registrant`` dataclasses + enums
- :pymod:`dmv.lifecycle`  – forward-only license-stage guard (`advance_stage`)
- :pymod:`dmv.facility`   – ``Facility`` service, fee and test gate
- :pymod:`dmv.directory`  – ``FacilityDirectory`` in-memory registry
- :pymod:`dmv.settings`   – fee schedule and thresholds (pydantic-settings)

Quick start
-----------
>>> from dmv.facility import Facility, WRITTEN_TEST
>>> from dmv.models import Registrant
>>> office = Facility("Albany DMV Office", "2242 Santiam Hwy SE Albany OR 97321", "541-967-2014")
>>> office.add_service(WRITTEN_TEST)
>>> office.administer_written_test(Registrant("Bruce", 18, True))
True
"""

__all__ = [
    "models",
    "lifecycle",
    "facility",
    "directory",
    "settings",
]

__version__ = "0.1.0"
