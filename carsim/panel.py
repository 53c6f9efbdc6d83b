"""Panel stage: turns a line of user input into commands for the controller."""

from __future__ import annotations

import enum
from dataclasses import dataclass

MAX_COMMANDS = 9
END_OF_BATCH = "t"

MENU = (
    "(Panel) 1- Acelerar veiculo;\n"
    "(Panel) 2- Acionar freio;\n"
    "(Panel) 3- Ligar seta para esquerda;\n"
    "(Panel) 4- Ligar seta para direita;\n"
    "(Panel) 5- Ligar farol alto;\n"
    "(Panel) 6- Ligar farol baixo;\n"
    "(Panel) 7- Pausar aplicacao;\n"
    "(Panel) 0- Sair;"
)
PROMPT = "(Panel) Conjunto de opcoes separadas por espacos: "


class PanelAction(enum.Enum):
    """What the panel asks for."""

    COMMAND = "command"
    STOP = "stop"
    PAUSE = "pause"


@dataclass(frozen=True)
class PanelRequest:
    """A single request from the panel; ``command`` is set for COMMAND only."""

    action: PanelAction
    command: str | None = None


def parse_commands(line: str) -> list[PanelRequest]:
    """Parse a space-separated option line into panel requests.

    At most nine tokens are considered and only the first character of each
    counts. A ``0`` (stop) or ``7`` (pause) ends the line.
    """
    line = line.split("\n", 1)[0]
    tokens = [token for token in line.split(" ") if token][:MAX_COMMANDS]
    requests: list[PanelRequest] = []
    for token in tokens:
        first = token[0]
        if first == "0":
            requests.append(PanelRequest(PanelAction.STOP))
            break
        if first == "7":
            requests.append(PanelRequest(PanelAction.PAUSE))
            break
        requests.append(PanelRequest(PanelAction.COMMAND, first))
    return requests