"""Command-line interface loop for the todo list.

Commands form a closed set (add, list, toggle, delete, exit) matched
exactly and case-sensitively. The loop runs until the last recognized
command was exit.
"""
import logging
from enum import Enum
from typing import Callable, Dict, Optional

import click

from manager import TodoManager, INVALID_NUMBER_MSG
from theme import color, ERROR, HEADER

WELCOME_MSG = "\U0001F31F Welcome to Todo CLI \U0001F31F"
FAREWELL_MSG = "\U0001F44B Thanks for using Todo CLI. See you next time!"
INVALID_COMMAND_MSG = "❗ Invalid command. Please try again"
COMMAND_PROMPT = "\nWhat would you like to do? (add, list, toggle, delete, exit): "
TITLE_PROMPT = "\nEnter todo title: "
NUMBER_PROMPT = "\nEnter the number of todo to {action}: "

ReadLine = Callable[[str], Optional[str]]

log = logging.getLogger(__name__)


def read_stdin_line(prompt: str) -> Optional[str]:
    """Prompt and read one line; None at end of input."""
    try:
        return input(prompt)
    except EOFError:
        return None


def _parse_number(raw: Optional[str]) -> Optional[int]:
    """Accept an optionally signed run of ASCII digits, nothing else."""
    if raw is None:
        return None
    digits = raw[1:] if raw[:1] in ('+', '-') else raw
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(raw)


class App:
    class Command(str, Enum):
        ADD = "add"
        LIST = "list"
        TOGGLE = "toggle"
        DELETE = "delete"
        EXIT = "exit"

        @classmethod
        def parse(cls, raw: Optional[str]) -> Optional["App.Command"]:
            if raw is None:
                return None
            try:
                return cls(raw)
            except ValueError:
                return None

    def __init__(self, manager: TodoManager, read_line: Optional[ReadLine] = None):
        self.manager: TodoManager = manager
        self.read_line: ReadLine = read_line or read_stdin_line
        self._handlers: Dict[App.Command, Callable[[], None]] = {
            App.Command.ADD: self._add,
            App.Command.LIST: self._list,
            App.Command.TOGGLE: self._toggle,
            App.Command.DELETE: self._delete,
            App.Command.EXIT: self._exit,
        }

    def run(self) -> None:
        """Main REPL loop; stops once exit has been handled.

        End of input or Ctrl-C at the command prompt runs the exit handler
        and ends the loop. A plain read loop would instead re-prompt forever
        on a closed stdin, so this deliberately departs from "only exit
        leaves the loop".
        """
        state: Optional[App.Command] = None
        click.echo(color(WELCOME_MSG, HEADER))
        while state is not App.Command.EXIT:
            try:
                line = self.read_line(COMMAND_PROMPT)
            except KeyboardInterrupt:
                line = None
            if line is None:
                log.debug("Input closed; leaving command loop")
                line = App.Command.EXIT.value
            command = App.Command.parse(line)
            if command is None:
                click.echo("\n" + color(INVALID_COMMAND_MSG, ERROR))
                continue
            self._handlers[command]()
            state = command

    # -------------------- command handlers --------------------
    def _list(self) -> None:
        self.manager.list_todos()

    def _add(self) -> None:
        title = self.read_line(TITLE_PROMPT)
        if title is not None:
            self.manager.add_todo(title)

    def _toggle(self) -> None:
        number = self._pick_number("toggle")
        if number is not None:
            self.manager.toggle_completion(number)

    def _delete(self) -> None:
        number = self._pick_number("delete")
        if number is not None:
            self.manager.delete_todo(number)

    def _exit(self) -> None:
        click.echo("\n" + FAREWELL_MSG + "\n")

    def _pick_number(self, action: str) -> Optional[int]:
        """Show the list, then ask for a todo number.

        Returns None without prompting when there is nothing to pick, and
        reports unparseable input before returning None.
        """
        self.manager.list_todos()
        if self.manager.is_empty:
            return None
        number = _parse_number(self.read_line(NUMBER_PROMPT.format(action=action)))
        if number is None:
            click.echo("\n" + color(INVALID_NUMBER_MSG, ERROR))
        return number
