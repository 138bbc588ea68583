"""User input handling for the terminal UI."""

from dataclasses import dataclass
from enum import Enum

from rich.console import Console

from machi.ui.i18n import t


class CommandType(Enum):
    EVALUATE = "evaluate"
    RANDOM = "random"
    QUIT = "quit"
    EMPTY = "empty"


@dataclass(frozen=True)
class Command:
    command_type: CommandType
    text: str = ""


RANDOM_KEYS = ("r", "random")
QUIT_KEYS = ("q", "quit", "exit")


def parse_command(line: str) -> Command:
    """Map one line of user input to a command."""
    text = line.strip()
    key = text.lower()
    if not text:
        return Command(CommandType.EMPTY)
    if key in RANDOM_KEYS:
        return Command(CommandType.RANDOM)
    if key in QUIT_KEYS:
        return Command(CommandType.QUIT)
    return Command(CommandType.EVALUATE, text)


def read_command(console: Console) -> Command:
    """Prompt for the next command. Raises EOFError when input ends."""
    console.print(f"\n  {t('prompt.hand')}")
    return parse_command(console.input("  > "))
