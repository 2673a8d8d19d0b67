"""
Unit Registry and Display-Unit Conversion for the Cyclogenesis Model.

The physics is evaluated in SI units. Results are reported in the units
used by synoptic meteorologists: vertical velocity in cm/s and relative
vorticity in multiples of 10⁻⁵ s⁻¹. Conversions go through a single
`pint` registry so that an incompatible unit raises instead of silently
producing a wrong number.

Example Usage
-------------
>>> from common.units import Q_
>>> Q_(0.05, 'm/s').to('cm/s')
<Quantity(5.0, 'centimeter / second')>
"""

from dataclasses import dataclass
from typing import Dict, Union

import numpy as np
import pint
from numpy.typing import NDArray

# Create the global unit registry
ureg = pint.UnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

# Synoptic-scale vorticity unit
ureg.define("vorticity_unit = 1e-5 / second")

ArrayLike = Union[float, NDArray[np.float64]]


@dataclass(frozen=True)
class DisplayUnit:
    """How a model quantity is reported.

    Attributes
    ----------
    unit : str
        pint unit of the reported magnitude.
    dimensionality : str
        Expected pint dimensionality (e.g., '[velocity]').
    attribute : str
        Unit string written to dataset `units` attributes.
    """
    unit: str
    dimensionality: str
    attribute: str


# Units of the quantities reported by the model
DISPLAY_UNITS: Dict[str, DisplayUnit] = {
    "vertical_velocity": DisplayUnit("centimeter / second", "[velocity]", "cm s**-1"),
    "relative_vorticity": DisplayUnit("vorticity_unit", "[frequency]", "1e-5 s**-1"),
    "hour": DisplayUnit("hour", "[time]", "hours"),
    "latitude": DisplayUnit("degree", "", "degrees_north"),
}


def validate_dimensionality(quantity: pint.Quantity, expected_dim: str) -> bool:
    """Check if a quantity has the expected dimensionality.

    Parameters
    ----------
    quantity : pint.Quantity
        The quantity to check.
    expected_dim : str
        The expected dimensionality (e.g., '[velocity]', '[length] / [time]').

    Returns
    -------
    bool
        True if dimensionality matches.

    Raises
    ------
    pint.DimensionalityError
        If dimensionality does not match.
    """
    if not quantity.check(expected_dim):
        raise pint.DimensionalityError(
            quantity.units,
            expected_dim,
            quantity.dimensionality,
            expected_dim
        )
    return True


def convert(value: ArrayLike, from_unit: str, to_unit: str) -> pint.Quantity:
    """Convert a bare magnitude between two compatible units.

    Parameters
    ----------
    value : float or ndarray
        The magnitude in `from_unit`.
    from_unit : str
        Unit of the input.
    to_unit : str
        Target unit.

    Returns
    -------
    pint.Quantity
        The value expressed in `to_unit`.

    Raises
    ------
    pint.DimensionalityError
        If the units are not compatible.
    """
    return Q_(value, from_unit).to(to_unit)


def to_display(value: ArrayLike, from_unit: str, quantity_name: str) -> ArrayLike:
    """Convert an SI magnitude to the display unit of a model quantity.

    The converted quantity is checked against the dimensionality
    registered in `DISPLAY_UNITS`, so a value passed with the wrong SI
    unit raises instead of being reported.
    """
    display = DISPLAY_UNITS[quantity_name]
    quantity = convert(value, from_unit, display.unit)
    validate_dimensionality(quantity, display.dimensionality)
    return quantity.magnitude


def vertical_velocity_to_display(w_ms: ArrayLike) -> ArrayLike:
    """Convert vertical velocity from m/s to cm/s."""
    return to_display(w_ms, "meter / second", "vertical_velocity")


def vorticity_to_display(zeta_s: ArrayLike) -> ArrayLike:
    """Convert relative vorticity from s⁻¹ to 10⁻⁵ s⁻¹."""
    return to_display(zeta_s, "1 / second", "relative_vorticity")
