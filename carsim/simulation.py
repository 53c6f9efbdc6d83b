"""The sensor → panel → controller cycle and the command that runs it."""

from __future__ import annotations

import argparse
import random
import signal
import sys
from typing import TextIO

from .controller import controller_cycle
from .panel import END_OF_BATCH, MENU, PROMPT, PanelAction, parse_commands
from .sensor import read_sensors
from .state import CarData


class Simulation:
    """Runs the stages in turn until the panel or a signal requests exit."""

    def __init__(
        self,
        car: CarData | None = None,
        input_stream: TextIO | None = None,
        output: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.car = car if car is not None else CarData()
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output if output is not None else sys.stdout
        self._rng = rng if rng is not None else random.Random()

    def _emit(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self._output)

    def request_stop(self) -> None:
        """Ask every stage to finish, as the stop signal does."""
        self._emit(
            "(Signal) Recebido sinal SIGUSR2. "
            "Limpando recursos e encerrando processos..."
        )
        self.car.request_exit()

    def _pause(self) -> None:
        self._emit("(Signal) Recebido sinal SIGUSR1. Pressione enter para continuar...")
        self._input.readline()

    def _panel_step(self) -> list[str]:
        self._emit(MENU)
        self._output.write(PROMPT)
        self._output.flush()
        line = self._input.readline()
        if not line:
            # End of input: nothing more can be asked of the user.
            self._emit("")
            self.request_stop()
            return [END_OF_BATCH]
        queue: list[str] = []
        for request in parse_commands(line):
            if request.action is PanelAction.STOP:
                self.request_stop()
                break
            if request.action is PanelAction.PAUSE:
                self._pause()
                break
            queue.append(request.command)
        queue.append(END_OF_BATCH)
        return queue

    def run(self) -> CarData:
        """Run cycles until exit is requested, print the final report and return the state."""
        self._emit("(main) Processo Controlador iniciado.", "")
        while not self.car.exit_flag:
            self._emit(*read_sensors(self.car, self._rng))
            if self.car.exit_flag:
                break
            queue = self._panel_step()
            if self.car.exit_flag:
                break
            self._emit(*controller_cycle(self.car, queue), "")
        self._emit(
            f"(Relatorio final) Quantidade de vezes que o ADAS atuou: {self.car.adas_count}",
            "(Relatorio final) Quantidade de vezes que os Atuadores foram usados: "
            f"{self.car.actuator_count}",
            "Recursos limpos com sucesso.",
        )
        return self.car


def main(argv: list[str] | None = None) -> int:
    """Run the interactive vehicle simulation on standard input and output."""
    parser = argparse.ArgumentParser(description="Interactive vehicle simulation.")
    parser.add_argument("--seed", type=int, default=None, help="random seed for the sensors")
    args = parser.parse_args(argv)

    simulation = Simulation(rng=random.Random(args.seed))
    stop_signal = getattr(signal, "SIGUSR2", None)
    previous = None
    if stop_signal is not None:
        previous = signal.signal(stop_signal, lambda _sig, _frame: simulation.request_stop())
    try:
        simulation.run()
    finally:
        if stop_signal is not None:
            signal.signal(stop_signal, previous)
    return 0