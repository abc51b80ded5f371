"""
Command Interpreter
===================

Turns lines of a command script into calls against one InstallationTracker.

Script format (one command per line, whitespace separated):
- DEPEND <component> <dep1> [dep2 ...]
- INSTALL <component>
- REMOVE <component>
- LIST
- END

Blank lines are ignored. Keywords are matched exactly. An unrecognized
keyword is fatal for the script; the engine itself has no such concept.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from depgraph_common.constants import Commands
from depgraph_common.errors import CommandSyntaxError, NotFoundError, UnknownCommandError
from depgraph_common.logger import get_logger

from .events import Event
from .tracker import InstallationTracker

logger = get_logger(__name__)


@dataclass(frozen=True)
class Command:
    """A tokenized script line."""

    keyword: str
    args: Tuple[str, ...]
    line: str
    line_number: Optional[int] = None


@dataclass
class CommandResult:
    """
    Outcome of one command.

    Attributes:
        command: The command that ran
        events: Tracker events, cascade included
        output: Status lines (or component names for LIST)
    """

    command: Command
    events: List[Event] = field(default_factory=list)
    output: List[str] = field(default_factory=list)


def parse_line(line: str, line_number: Optional[int] = None) -> Optional[Command]:
    """
    Tokenize and validate a single line.

    Returns:
        Command, or None for a blank line

    Raises:
        UnknownCommandError: Leading token is not a command keyword
        CommandSyntaxError: Required arguments are missing
    """
    tokens = line.split()
    if not tokens:
        return None

    keyword, args = tokens[0], tuple(tokens[1:])
    text = line.rstrip("\r\n")

    if keyword not in Commands.ALL:
        raise UnknownCommandError(keyword, line=text, line_number=line_number)

    if keyword == Commands.DEPEND and len(args) < 2:
        raise CommandSyntaxError(
            "DEPEND requires a component and at least one dependency",
            line=text,
            line_number=line_number,
        )
    if keyword in (Commands.INSTALL, Commands.REMOVE) and len(args) != 1:
        raise CommandSyntaxError(
            f"{keyword} requires exactly one component",
            line=text,
            line_number=line_number,
        )

    return Command(keyword=keyword, args=args, line=text, line_number=line_number)


def parse_lines(lines: Iterable[str]) -> Iterator[Command]:
    """Parse every non-blank line, numbering lines from 1."""
    for number, line in enumerate(lines, start=1):
        command = parse_line(line, line_number=number)
        if command is not None:
            yield command


class CommandInterpreter:
    """
    Executes parsed commands against a tracker.

    A fresh tracker is created when none is supplied, so each interpreter is
    an isolated session.
    """

    def __init__(self, tracker: Optional[InstallationTracker] = None):
        self.tracker = tracker if tracker is not None else InstallationTracker()

    def execute(self, command: Command) -> CommandResult:
        result = CommandResult(command=command)
        keyword, args = command.keyword, command.args

        if keyword == Commands.DEPEND:
            self.tracker.declare(args[0], args[1:])
        elif keyword == Commands.INSTALL:
            result.events = self.tracker.install(args[0], False)
        elif keyword == Commands.REMOVE:
            result.events = self.tracker.remove(args[0], False)
        elif keyword == Commands.LIST:
            result.output = self.tracker.list()
        # END: nothing to do

        if result.events:
            result.output = [event.message for event in result.events if event.message]
        return result

    def execute_line(self, line: str, line_number: Optional[int] = None) -> Optional[CommandResult]:
        """Parse and run one line. Returns None for blank lines."""
        command = parse_line(line, line_number=line_number)
        if command is None:
            return None
        return self.execute(command)

    def run_lines(self, lines: Iterable[str]) -> Iterator[CommandResult]:
        """
        Run a script line by line.

        Results are yielded as each command completes. The first fatal error
        propagates and stops the script; earlier commands stay applied.
        """
        for number, line in enumerate(lines, start=1):
            result = self.execute_line(line, line_number=number)
            if result is not None:
                yield result

    def run_file(self, path: Path) -> Iterator[CommandResult]:
        """
        Run a script file.

        Raises:
            NotFoundError: If the file does not exist or is not a regular file
        """
        path = Path(path)
        if not path.is_file():
            raise NotFoundError(f"Invalid input file: {path.absolute()}")

        logger.info("Running script", path=str(path))
        with path.open("r", encoding="utf-8") as handle:
            yield from self.run_lines(handle)
