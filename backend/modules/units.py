"""
Unit Conversion Primitives
==========================
Head/pressure conversions for water at standard conditions.

- 1 ft of elevation = 0.433 PSI
- 1 PSI = 2.31 ft of head

The two constants are kept exactly as the reference spreadsheet uses them.
`feet_to_psi` and `psi_to_feet` share 2.31 and are exact inverses;
`elevation_to_pressure` uses 0.433, which is close to but not 1/2.31.
"""

from __future__ import annotations


PSI_PER_FOOT = 0.433
FEET_PER_PSI = 2.31


def elevation_to_pressure(elevation_ft: float) -> float:
    """
    Convert an elevation change to a pressure contribution.

    Negative elevation (downhill) gives a negative contribution.

    Example:
        >>> round(elevation_to_pressure(5), 3)
        2.165
    """
    return elevation_ft * PSI_PER_FOOT


def feet_to_psi(feet: float) -> float:
    """Convert feet of head to PSI (ft / 2.31)."""
    return feet / FEET_PER_PSI


def psi_to_feet(psi: float) -> float:
    """Convert PSI to feet of head (PSI × 2.31)."""
    return psi * FEET_PER_PSI
