import random

import pytest

from carsim.sensor import (
    ROTATION_FACTOR,
    generate_rotation,
    generate_temperature,
    generate_velocity,
    read_sensors,
)
from carsim.state import CarData


@pytest.mark.parametrize("seed", range(20))
def test_velocity_in_range(seed):
    value = generate_velocity(random.Random(seed))
    assert 0 <= value <= 200


@pytest.mark.parametrize("seed", range(20))
def test_temperature_in_range(seed):
    value = generate_temperature(random.Random(seed))
    assert 55 <= value <= 145


def test_rotation_of_known_velocity():
    assert generate_rotation(100) == 3700
    assert generate_rotation(0) == 0


def test_read_sensors_keeps_rotation_consistent():
    car = CarData()
    read_sensors(car, random.Random(3))
    assert car.en_rotation == car.car_velocity * ROTATION_FACTOR
    assert 55 <= car.en_temp <= 145


def test_read_sensors_is_deterministic_for_a_seed():
    first, second = CarData(), CarData()
    read_sensors(first, random.Random(42))
    read_sensors(second, random.Random(42))
    assert first == second


def test_read_sensors_stops_when_exiting():
    car = CarData(car_velocity=80, exit_flag=True)
    messages = read_sensors(car, random.Random(1))
    assert car == CarData(car_velocity=80, exit_flag=True)
    assert not any("gerada" in message for message in messages)