# platinumrtd

Conversions between temperature and resistance for platinum RTD sensors
(PT50, PT100, PT200, PT500 and PT1000). The package uses the Callendar–Van Dusen
equation with the IEC 60751 coefficients. It covers temperatures from -200 °C
to +850 °C, and accepts values from -200.5 °C to +850.5 °C inclusive.

## Installation

```
pip install .
```

## Usage

```python
from platinumrtd.sensor import SensorType, calculate_resistance, calculate_temperature

# Resistance of a PT500 at 438 °C
ohms = calculate_resistance(SensorType.PT500, 438)

# Temperature of a PT100 reading 268.5 Ω, starting the search at 25 °C
celsius = calculate_temperature(SensorType.PT100, 268.5, 25)
```

`calculate_resistance` applies the Callendar–Van Dusen equation directly. The
C coefficient term is used only below 0 °C. `calculate_temperature` inverts the
equation with Newton–Raphson iteration. It starts from the estimate you give and
stops when a step is smaller than `TOLERANCE` (1e-8), trying at most
`MAX_ITERATIONS` (1000) steps.

`SensorType` is an `IntEnum` whose values are the resistances at 0 °C, so a plain
integer such as `100` works in place of `SensorType.PT100`. Each member has two
properties:

- `nominal_resistance` gives the resistance in ohms at 0 °C.
- `resistance_limits` gives the `(low, high)` range of resistance that
  `calculate_temperature` accepts.

The coefficients are available as `A_COEFFICIENT`, `B_COEFFICIENT` and
`C_COEFFICIENT` in `platinumrtd.sensor`.

## Errors

`ConversionError` is a subclass of `ValueError`. It is raised in these cases:

- an unknown sensor type,
- a temperature outside the accepted range,
- a resistance outside the sensor's limits.

`ConvergenceError` is a subclass of `ConversionError`. It is raised when the
iteration meets a zero derivative, diverges, or does not converge within the
iteration limit.

## Command line

```
platinumrtd
```

This prints a fixed worked example. It shows the temperature of a PT100 at
268.5 Ω and the resistance of a PT500 at 438 °C, both to two decimal places. The
command takes no options apart from `--help`. To convert your own values, use
the functions above.