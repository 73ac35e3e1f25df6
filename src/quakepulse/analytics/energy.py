"""
Seismic Energy
==============

Energy released by an event and human-scale comparisons.

Gutenberg-Richter energy-magnitude relation:
    log10(E) = 1.5 * M + 4.8        (E in joules)

Each magnitude unit is ~31.6x more energy.
"""

from typing import List

from quakepulse.models.summary import EnergyComparison, EnergyReference
from quakepulse.numeric import finite_or, safe_pow10


# Reference energies in joules
LIGHTNING_J = 1e9
DYNAMITE_STICK_J = 4.184e6
TNT_TON_J = 4.184e9
HIROSHIMA_J = 6.3e13
KRAKATOA_J = 8.4e17
US_ANNUAL_J = 1.08e20


def magnitude_to_joules(magnitude: float) -> float:
    """Energy in joules; non-finite magnitudes count as 0."""
    return safe_pow10(1.5 * finite_or(magnitude) + 4.8)


def format_energy(joules: float) -> str:
    for scale, unit in ((1e18, "EJ"), (1e15, "PJ"), (1e12, "TJ"), (1e9, "GJ"), (1e6, "MJ"), (1e3, "kJ")):
        if joules >= scale:
            return f"{joules / scale:.1f} {unit}"
    return f"{joules:.0f} J"


def format_count(n: float) -> str:
    if n >= 1e9:
        return f"{n / 1e9:.1f} billion"
    if n >= 1e6:
        return f"{n / 1e6:.1f} million"
    if n >= 1e3:
        return f"{n / 1e3:.0f}k"
    if n >= 10:
        return f"{n:.0f}"
    return f"{n:.1f}"


def energy_comparison(magnitude: float) -> EnergyComparison:
    """
    Energy of ``magnitude`` with the comparisons that make sense at its scale.

    Small events compare to dynamite, mid-range to tons of TNT, large ones to
    Hiroshima, Krakatoa and annual US electricity use.
    """
    magnitude = finite_or(magnitude)
    joules = magnitude_to_joules(magnitude)
    tnt_tons = joules / TNT_TON_J
    refs: List[EnergyReference] = []

    lightning = joules / LIGHTNING_J
    if lightning >= 1:
        refs.append(EnergyReference(
            icon="lightning",
            label=f"{format_count(lightning)} lightning bolts",
            detail=f"{format_energy(joules)} of seismic energy",
        ))

    dynamite = joules / DYNAMITE_STICK_J
    if magnitude < 5 and dynamite >= 1:
        tnt = f"{tnt_tons * 1000:.0f} kg" if tnt_tons < 1 else f"{tnt_tons:.1f} tons"
        refs.append(EnergyReference(
            icon="dynamite",
            label=f"{format_count(dynamite)} sticks of dynamite",
            detail=f"{tnt} of TNT",
        ))

    if 3 <= magnitude < 7 and tnt_tons >= 1:
        detail = f"{tnt_tons / 1000:.1f} kilotons" if tnt_tons >= 1000 else "Pure explosive energy"
        refs.append(EnergyReference(
            icon="explosion",
            label=f"{format_count(tnt_tons)} tons of TNT",
            detail=detail,
        ))

    hiroshima = joules / HIROSHIMA_J
    if 0.01 <= hiroshima < 1:
        refs.append(EnergyReference(
            icon="radiation",
            label=f"{hiroshima * 100:.0f}% of Hiroshima bomb",
            detail=f"{tnt_tons / 1000:.2f} kilotons equivalent",
        ))
    elif hiroshima >= 1:
        refs.append(EnergyReference(
            icon="radiation",
            label=f"{format_count(hiroshima)} Hiroshima bombs",
            detail=f"{format_count(tnt_tons / 1000)} kilotons TNT",
        ))

    krakatoa = joules / KRAKATOA_J
    if 0.01 <= krakatoa < 1:
        refs.append(EnergyReference(
            icon="volcano",
            label=f"{krakatoa * 100:.0f}% of Krakatoa eruption",
            detail="1883 volcanic explosion equivalent",
        ))
    elif krakatoa >= 1:
        refs.append(EnergyReference(
            icon="volcano",
            label=f"{format_count(krakatoa)}x Krakatoa eruption",
            detail="Extraordinary planetary energy release",
        ))

    us_fraction = joules / US_ANNUAL_J
    if us_fraction >= 0.001:
        digits = 0 if us_fraction >= 0.1 else 1
        refs.append(EnergyReference(
            icon="factory",
            label=f"{us_fraction * 100:.{digits}f}% of US annual energy",
            detail="Total US electricity for a year",
        ))

    if magnitude >= 2:
        refs.append(EnergyReference(
            icon="ruler",
            label=f"31.6x more energy than M{magnitude - 1:.1f}",
            detail="Each magnitude unit = 31.6x energy increase",
        ))

    return EnergyComparison(
        magnitude=magnitude,
        joules=joules,
        tnt_tons=tnt_tons,
        comparisons=refs,
    )
