"""Conversions between temperature and resistance for platinum RTD sensors.

The Callendar–Van Dusen equation is used with the IEC 60751 coefficients.
The supported temperature range is -200 °C to +850 °C.
"""

from __future__ import annotations

import math
from enum import IntEnum

A_COEFFICIENT = 3.908302087e-3
B_COEFFICIENT = -5.775000000e-7
C_COEFFICIENT = -4.183010000e-12  # used only below 0 °C

MIN_TEMPERATURE = -200.5
MAX_TEMPERATURE = 850.5

MAX_ITERATIONS = 1000
TOLERANCE = 1e-8

_RESISTANCE_LIMITS = {
    50: (9.2, 195.3),
    100: (18.3, 390.6),
    200: (36.5, 781.3),
    500: (91.5, 1953.0),
    1000: (182.5, 3906.5),
}


class ConversionError(ValueError):
    """Raised when an input cannot be converted."""


class ConvergenceError(ConversionError):
    """Raised when the iterative solver does not converge."""


class SensorType(IntEnum):
    """Supported platinum RTD sensors, valued by their resistance at 0 °C."""

    PT50 = 50
    PT100 = 100
    PT200 = 200
    PT500 = 500
    PT1000 = 1000

    @property
    def nominal_resistance(self) -> float:
        """Resistance in ohms at 0 °C."""
        return float(self.value)

    @property
    def resistance_limits(self) -> tuple[float, float]:
        """Lowest and highest resistance accepted for temperature conversion."""
        return _RESISTANCE_LIMITS[self.value]


def _sensor(sensor_type: int) -> SensorType:
    try:
        return SensorType(sensor_type)
    except ValueError:
        raise ConversionError(f"unsupported sensor type: {sensor_type!r}") from None


def _equation(r0: float, t: float) -> float:
    value = 1.0 + A_COEFFICIENT * t + B_COEFFICIENT * t * t
    if t < 0.0:
        value += C_COEFFICIENT * (t - 100.0) * t * t * t
    return r0 * value


def _slope(r0: float, t: float) -> float:
    slope = A_COEFFICIENT + 2.0 * B_COEFFICIENT * t
    if t < 0.0:
        t_squared = t * t
        slope += (
            3.0 * C_COEFFICIENT * t_squared
            - 200.0 * C_COEFFICIENT * t
            + 300.0 * C_COEFFICIENT * t_squared
        )
    return r0 * slope


def calculate_resistance(sensor_type: int, temperature: float) -> float:
    """Return the resistance in ohms of the sensor at ``temperature`` °C."""
    if temperature < MIN_TEMPERATURE or temperature > MAX_TEMPERATURE:
        raise ConversionError(f"temperature out of range: {temperature}")
    sensor = _sensor(sensor_type)
    return _equation(sensor.nominal_resistance, temperature)


def calculate_temperature(
    sensor_type: int, resistance: float, initial_estimate: float
) -> float:
    """Return the temperature in °C for a measured ``resistance`` in ohms.

    The equation is solved by Newton–Raphson iteration starting at
    ``initial_estimate``.
    """
    sensor = _sensor(sensor_type)
    low, high = sensor.resistance_limits
    if resistance < low or resistance > high:
        raise ConversionError(
            f"resistance {resistance} outside {low}..{high} for {sensor.name}"
        )

    r0 = sensor.nominal_resistance
    estimate = initial_estimate
    for _ in range(MAX_ITERATIONS):
        slope = _slope(r0, estimate)
        if slope == 0.0:
            raise ConvergenceError("zero derivative during iteration")
        new_estimate = estimate - (_equation(r0, estimate) - resistance) / slope
        if not math.isfinite(new_estimate):
            raise ConvergenceError("iteration diverged")
        if abs(new_estimate - estimate) < TOLERANCE:
            return new_estimate
        estimate = new_estimate
    raise ConvergenceError(f"no convergence after {MAX_ITERATIONS} iterations")