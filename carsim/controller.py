"""Controller stage: applies ADAS limits and executes panel commands."""

from __future__ import annotations

from collections.abc import Iterable

from .state import CarData

MAX_VELOCITY = 120
MIN_VELOCITY = 60
VELOCITY_STEP = 10

_COMMAND_MESSAGES = {
    "1": "(Controller) Acelerando o veículo...",
    "2": "(Controller) Freio acionado!",
    "3": "(Controller) Seta para a esquerda ligada.",
    "4": "(Controller) Seta para a direita ligada.",
    "5": "(Controller) Farol alto ligado.",
    "6": "(Controller) Farol baixo ligado.",
}


def adas(car: CarData) -> str | None:
    """Clamp the velocity into the allowed band; return a message when it acted."""
    if car.car_velocity > MAX_VELOCITY:
        car.car_velocity = MAX_VELOCITY
        car.adas_count += 1
        return (
            "(Controller) (ADAS) Veiculo ultrapassou a velocidade maxima! "
            "desacelerando o carro..."
        )
    if car.car_velocity < MIN_VELOCITY:
        car.car_velocity = MIN_VELOCITY
        car.adas_count += 1
        return (
            "(Controller) (ADAS) veiculo ultrapassou o limite minimo de velocidade! "
            "Acelerando o veiculo..."
        )
    return None


def execute_command(car: CarData, command: str) -> list[str]:
    """Execute one single-character panel command and return the messages produced.

    Unknown commands (including the end-of-batch marker) are ignored.
    """
    message = _COMMAND_MESSAGES.get(command)
    if message is None:
        return []
    messages = [message]
    car.actuator_count += 1
    if command in ("1", "2"):
        delta = VELOCITY_STEP if command == "1" else -VELOCITY_STEP
        # The velocity is stored in a single unsigned byte.
        car.car_velocity = (car.car_velocity + delta) % 256
        adas_message = adas(car)
        if adas_message is not None:
            messages.append(adas_message)
    return messages


def controller_cycle(car: CarData, commands: Iterable[str]) -> list[str]:
    """Run one controller cycle over the queued commands and return its log lines."""
    messages = [
        "(Controller) Dados da memoria compartilhada antes da manipulacao do controlador:",
        f"(Controller) Velocidade: {car.car_velocity} | "
        f"Rotação do motor: {car.en_rotation} | "
        f"Temperatura do motor: {car.en_temp}",
    ]
    adas_message = adas(car)
    if adas_message is not None:
        messages.append(adas_message)
    for command in commands:
        messages.extend(execute_command(car, command))
    return messages