"""Sensor stage: generates velocity, engine rotation and engine temperature."""

from __future__ import annotations

import random

from .state import CarData

ROTATION_FACTOR = 37


def generate_velocity(rng: random.Random) -> int:
    """Return a random velocity between 0 and 200 inclusive."""
    return rng.randrange(201)


def generate_rotation(velocity: int) -> int:
    """Return the engine rotation derived from the velocity."""
    return velocity * ROTATION_FACTOR


def generate_temperature(rng: random.Random) -> int:
    """Return a random engine temperature between 55 and 145 inclusive."""
    return rng.randrange(91) + 55


def read_sensors(car: CarData, rng: random.Random) -> list[str]:
    """Refresh the sensor readings in order, stopping early once exit is requested."""
    messages = ["(Sensor) Processo Sensor executando..."]

    messages.append("(Sensor) Gerando Velocidade...")
    if car.exit_flag:
        return messages
    car.car_velocity = generate_velocity(rng)
    messages.append(f"(Sensor) Velocidade gerada: {car.car_velocity}")

    if not car.exit_flag:
        messages.append("(Sensor) Gerando Rotação...")
        car.en_rotation = generate_rotation(car.car_velocity)
        messages.append(f"(Sensor) Rotação gerada: {car.en_rotation}")

    if not car.exit_flag:
        messages.append("(Sensor) Gerando Temperatura...")
        car.en_temp = generate_temperature(rng)
        messages.append(f"(Sensor) Temperatura gerada: {car.en_temp}")

    messages.append("(Sensor) Todas as threads concluíram a execução.")
    return messages