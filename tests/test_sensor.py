import pytest

from platinumrtd.sensor import (
    ConversionError,
    ConvergenceError,
    SensorType,
    calculate_resistance,
    calculate_temperature,
)


@pytest.mark.parametrize("sensor", list(SensorType))
def test_resistance_at_zero_is_nominal(sensor):
    assert calculate_resistance(sensor, 0.0) == pytest.approx(sensor.nominal_resistance)


def test_nominal_resistance_matches_value():
    assert SensorType.PT1000.nominal_resistance == 1000.0
    assert SensorType.PT50.nominal_resistance == 50.0
    assert calculate_resistance(SensorType.PT1000, 0.0) == pytest.approx(1000.0)
    assert calculate_resistance(SensorType.PT50, 0.0) == pytest.approx(50.0)


def test_resistance_limits_from_table():
    assert SensorType.PT100.resistance_limits == (18.3, 390.6)
    assert SensorType.PT1000.resistance_limits == (182.5, 3906.5)
    low, high = SensorType.PT100.resistance_limits
    assert calculate_temperature(SensorType.PT100, low, 25.0) < 0.0
    assert calculate_temperature(SensorType.PT100, high, 25.0) > 0.0
    with pytest.raises(ConversionError):
        calculate_temperature(SensorType.PT1000, 182.4, 25.0)
    with pytest.raises(ConversionError):
        calculate_temperature(SensorType.PT1000, 3906.6, 25.0)


def test_plain_int_sensor_type_accepted():
    assert calculate_resistance(500, 438) == calculate_resistance(SensorType.PT500, 438)


@pytest.mark.parametrize("sensor", list(SensorType))
@pytest.mark.parametrize("temperature", [-200.0, -100.0, -20.0, 0.5, 25.0, 438.0, 850.0])
def test_round_trip(sensor, temperature):
    resistance = calculate_resistance(sensor, temperature)
    result = calculate_temperature(sensor, resistance, 25.0)
    assert result == pytest.approx(temperature, abs=1e-6)


def test_resistance_scales_with_nominal():
    r100 = calculate_resistance(SensorType.PT100, 300.0)
    r1000 = calculate_resistance(SensorType.PT1000, 300.0)
    assert r1000 == pytest.approx(10 * r100)


def test_resistance_increases_with_temperature():
    values = [calculate_resistance(SensorType.PT100, t) for t in range(-200, 851, 50)]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


@pytest.mark.parametrize("temperature", [-200.6, 850.6, -1000.0])
def test_resistance_temperature_out_of_range(temperature):
    with pytest.raises(ConversionError):
        calculate_resistance(SensorType.PT100, temperature)


def test_resistance_boundaries_accepted():
    low = calculate_resistance(SensorType.PT100, -200.5)
    high = calculate_resistance(SensorType.PT100, 850.5)
    assert low < 100.0 < high


def test_invalid_sensor_type():
    with pytest.raises(ConversionError):
        calculate_resistance(150, 25.0)
    with pytest.raises(ConversionError):
        calculate_temperature(150, 100.0, 25.0)


@pytest.mark.parametrize("resistance", [18.2, 390.7])
def test_temperature_resistance_out_of_range(resistance):
    with pytest.raises(ConversionError):
        calculate_temperature(SensorType.PT100, resistance, 25.0)


def test_temperature_of_nominal_is_zero():
    assert calculate_temperature(SensorType.PT200, 200.0, 25.0) == pytest.approx(0.0, abs=1e-6)


def test_convergence_error_is_conversion_error():
    assert issubclass(ConvergenceError, ConversionError)
    with pytest.raises(ValueError):
        calculate_resistance(150, 25.0)
    with pytest.raises(ValueError):
        calculate_temperature(SensorType.PT100, 1000.0, 25.0)