"""User offset applied symmetrically to a diurnal arc."""

from __future__ import annotations

from sunwait.contracts import ArcClass, SunArc


def apply_offset(arc: SunArc, offset_hour: float) -> float:
    """Return the diurnal arc narrowed by `offset_hour` at both ends, clamped to [0, 24].

    A positive offset moves sunrise later and sunset earlier; a negative
    offset widens the window.
    """
    adjusted = arc.diurnal_arc - 2.0 * offset_hour
    if adjusted >= 24.0:
        return 24.0
    if adjusted <= 0.0:
        return 0.0
    return adjusted


def classify_arc(diurnal_arc: float) -> ArcClass:
    """Classify an (already clamped) arc as normal, midnight sun or polar night."""
    if diurnal_arc >= 24.0:
        return ArcClass.MIDNIGHT_SUN
    if diurnal_arc <= 0.0:
        return ArcClass.POLAR_NIGHT
    return ArcClass.NORMAL


def offset_rise_hour_utc(arc: SunArc, offset_hour: float = 0.0) -> float:
    """Hour (UTC axis of the arc) of the offset-adjusted rise."""
    return arc.transit_hour_utc - apply_offset(arc, offset_hour) / 2.0


def offset_set_hour_utc(arc: SunArc, offset_hour: float = 0.0) -> float:
    """Hour (UTC axis of the arc) of the offset-adjusted set."""
    return arc.transit_hour_utc + apply_offset(arc, offset_hour) / 2.0
