"""
Validation errors for the cyclogenesis model.

Every rejected input is reported through a subclass of `MeteoError`,
which records the offending value and the range it should have been in.
Callers that need to know which bound failed catch the specific subclass.
"""

from typing import Tuple


class MeteoError(ValueError):
    """Base class for out-of-range meteorological inputs.

    Attributes
    ----------
    value : float
        The rejected value.
    valid_range : Tuple[float, float]
        Inclusive (min, max) bounds.
    """

    quantity: str = "value"
    unit: str = ""

    def __init__(self, value: float, valid_range: Tuple[float, float]):
        self.value = value
        self.valid_range = valid_range
        super().__init__(
            f"Invalid {self.quantity}: {value}{self.unit} "
            f"(valid range [{valid_range[0]}, {valid_range[1]}])"
        )


class InvalidLatitude(MeteoError):
    """Latitude outside [-90, 90] degrees."""
    quantity = "latitude"
    unit = "°"


class InvalidAltitude(MeteoError):
    """Altitude outside [-400, 20000] meters."""
    quantity = "altitude"
    unit = " m"


class InvalidPressure(MeteoError):
    """Pressure outside [100, 1100] hPa."""
    quantity = "pressure"
    unit = " hPa"


class InvalidTemperatureAnomaly(MeteoError):
    """Temperature anomaly outside [-50, 50] K."""
    quantity = "temperature anomaly"
    unit = " K"
