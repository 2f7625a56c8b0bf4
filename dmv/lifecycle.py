"""
dmv.lifecycle
=============

State-transition guard for a :class:`dmv.models.Registrant`.

Each license stage has exactly one legal successor, so a registrant can
only move forward one step at a time and never back.  The helper
:pyfunc:`advance_stage` mutates a registrant **in-place** after
validating the transition.
"""

from __future__ import annotations

from .models import LicenseStage, Registrant

# ---------------------------------------------------------------------
# Allowed transitions: source stage → the only valid next stage
# ---------------------------------------------------------------------
RULES = {
    LicenseStage.UNSTARTED: LicenseStage.WRITTEN,
    LicenseStage.WRITTEN:   LicenseStage.LICENSED,
    LicenseStage.LICENSED:  LicenseStage.RENEWED,
}


def advance_stage(registrant: Registrant, target: LicenseStage) -> bool:
    """
    Move :pyattr:`registrant.stage` forward to *target*.

    Returns ``True`` if the stage changed and ``False`` if the registrant
    was already at or past *target* (a retake never demotes anyone).
    Skipping a stage raises :class:`ValueError`.

    Examples
    --------
    >>> r = Registrant("Bruce", 18, True)
    >>> advance_stage(r, LicenseStage.WRITTEN)
    True
    >>> advance_stage(r, LicenseStage.RENEWED)
    Traceback (most recent call last):
        ...
    ValueError: illegal transition WRITTEN → RENEWED
    """
    current = registrant.stage
    if registrant.reached(target):
        return False
    if RULES.get(current) is not target:
        raise ValueError(f"illegal transition {current.name} → {target.name}")
    registrant.stage = target
    return True
