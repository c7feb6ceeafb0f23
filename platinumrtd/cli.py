"""Command that demonstrates both conversions."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from platinumrtd.sensor import SensorType, calculate_resistance, calculate_temperature


def main(argv: Sequence[str] | None = None) -> int:
    """Print a PT100 temperature and a PT500 resistance."""
    parser = argparse.ArgumentParser(
        prog="platinumrtd",
        description="Convert between platinum RTD resistance and temperature.",
    )
    parser.parse_args(argv)

    # Temperature (°C) of a PT100 at 268.5 Ω, starting from a 25 °C guess.
    temperature = calculate_temperature(SensorType.PT100, 268.5, 25)
    print(f"Temperature is {temperature:0.2f}")

    # Resistance (Ω) of a PT500 at 438 °C.
    resistance = calculate_resistance(SensorType.PT500, 438)
    print(f"Resistance is {resistance:0.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())