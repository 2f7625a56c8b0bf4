"""
tests/test_models.py
====================

Unit tests for the dataclasses and enums defined in dmv.models.

Run:  pytest -q
"""

from datetime import date

import pytest

from dmv.models import Engine, LicenseStage, PlateType, Registrant, Vehicle


def test_vehicle_defaults(cruz):
    """A new vehicle has no registration date or plate type."""
    assert cruz.registration_date is None
    assert cruz.plate_type is None
    assert not cruz.is_registered


def test_engine_accepts_string_value():
    v = Vehicle("1a2b3c", 2019, "Chevrolet", "Bolt", "ev")
    assert v.engine is Engine.EV
    assert v.is_electric


def test_unknown_engine_raises():
    with pytest.raises(ValueError):
        Vehicle("1a2b3c", 2019, "Chevrolet", "Bolt", "steam")


def test_str_on_enums():
    """Enum __str__ returns a readable value."""
    assert str(Engine.ICE) == "ice"
    assert str(PlateType.ANTIQUE) == "antique"
    assert str(LicenseStage.LICENSED) == "LICENSED"


def test_is_antique_by_age(camaro, cruz, bolt):
    assert camaro.is_antique()
    assert not cruz.is_antique()
    assert not bolt.is_antique()


def test_is_antique_boundary():
    """The threshold year itself counts as antique."""
    v = Vehicle("x", 2000, "Ford", "Focus", Engine.ICE)
    assert v.is_antique(today=date(2025, 6, 1), threshold_years=25)
    assert not v.is_antique(today=date(2024, 12, 31), threshold_years=25)


def test_registrant_defaults():
    r = Registrant("Penny", 16)
    assert r.permit is False
    assert r.stage is LicenseStage.UNSTARTED
    assert r.license_data == {"written": False, "license": False, "renewed": False}


def test_registrant_with_permit():
    r = Registrant("Bruce", 18, True)
    assert r.has_permit


def test_earn_permit():
    r = Registrant("Penny", 16)
    r.earn_permit()
    assert r.has_permit


def test_stage_is_not_a_constructor_argument():
    with pytest.raises(TypeError):
        Registrant("Bruce", 18, True, LicenseStage.RENEWED)


def test_license_data_follows_stage():
    r = Registrant("Bruce", 18, True)
    r.stage = LicenseStage.LICENSED
    assert r.license_data == {"written": True, "license": True, "renewed": False}


def test_license_data_is_a_snapshot():
    """Editing the returned dict does not touch the registrant."""
    r = Registrant("Bruce", 18, True)
    data = r.license_data
    data["written"] = True
    assert r.license_data["written"] is False


def test_is_antique_default_threshold_follows_settings(monkeypatch, cruz):
    """Without an explicit threshold the package settings decide."""
    from dmv.settings import settings

    monkeypatch.setattr(settings, "antique_age_years", 10)
    assert cruz.is_antique(today=date(2023, 1, 1))
    monkeypatch.setattr(settings, "antique_age_years", 25)
    assert not cruz.is_antique(today=date(2023, 1, 1))
