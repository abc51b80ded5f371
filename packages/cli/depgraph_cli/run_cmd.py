"""Run commands - Execute or check a dependency command script."""
import sys
import uuid
from pathlib import Path
from typing import List, Optional

import typer

from depgraph_common.config import get_settings
from depgraph_common.constants import Defaults, ExitCodes
from depgraph_common.errors import (
    CommandError,
    DependencyCycleError,
    ManifestError,
    NotFoundError,
)
from depgraph_common.logger import configure_logging, get_logger, set_session_id
from depgraph_core import (
    CommandInterpreter,
    InstallationTracker,
    TrackerSettings,
    load_manifest,
    parse_lines,
)

from .utils import console, error, handle_error, info, plain, success, warning

logger = get_logger(__name__)


def _script_path(script: str) -> Path:
    path = Path(script)
    if not path.is_file():
        error(f"Invalid input file: {path.absolute()}")
        raise typer.Exit(ExitCodes.INVALID_INPUT)
    return path


def _read_script(script: str) -> List[str]:
    """Read script lines, splitting on newlines only."""
    if script == Defaults.STDIN_PATH:
        return sys.stdin.readlines()
    with _script_path(script).open("r", encoding="utf-8") as handle:
        return handle.readlines()


def run(
    script: str = typer.Argument(..., help="Command script to execute ('-' reads stdin)"),
    manifest: Optional[str] = typer.Option(
        None, "--manifest", "-m", help="YAML manifest of declarations to load first"
    ),
    detect_cycles: bool = typer.Option(
        False, "--detect-cycles", help="Reject install/remove calls that can reach a cycle"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Do not echo commands, print only their output"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Execute a dependency command script.

    Each line is one of DEPEND, INSTALL, REMOVE, LIST or END. Commands are
    echoed as they run, followed by their output.

    Examples:
        depgraph run commands.txt
        depgraph run commands.txt --manifest deps.yaml
        cat commands.txt | depgraph run -
    """
    try:
        settings = get_settings()
        configure_logging("debug" if verbose else settings.log_level, settings.log_format)
        set_session_id(uuid.uuid4().hex[:8])

        tracker = InstallationTracker(
            settings=TrackerSettings(detect_cycles=detect_cycles or settings.detect_cycles)
        )

        if manifest:
            try:
                count = load_manifest(manifest).apply(tracker)
            except ManifestError as e:
                error(e.message)
                raise typer.Exit(ExitCodes.INVALID_INPUT)
            if verbose:
                info(f"Loaded {count} declarations from {manifest}")

        echo = settings.echo_commands and not quiet
        interpreter = CommandInterpreter(tracker)
        if script == Defaults.STDIN_PATH:
            results = interpreter.run_lines(sys.stdin)
        else:
            results = interpreter.run_file(_script_path(script))

        try:
            for result in results:
                if echo:
                    plain(result.command.line)
                for line in result.output:
                    plain(line)
        except CommandError as e:
            where = f" (line {e.line_number})" if e.line_number else ""
            error(f"{e.message}{where}")
            raise typer.Exit(ExitCodes.COMMAND_FAILED)
        except DependencyCycleError as e:
            error(e.message)
            raise typer.Exit(ExitCodes.COMMAND_FAILED)
        except NotFoundError as e:
            error(e.message)
            raise typer.Exit(ExitCodes.INVALID_INPUT)
        except RecursionError:
            logger.error("Recursion limit reached", installed=len(tracker))
            error("Dependency chain is too deep; installed state reflects a partial cascade")
            raise typer.Exit(ExitCodes.COMMAND_FAILED)

        logger.debug("Script finished", installed=len(tracker))

    except typer.Exit:
        raise
    except KeyboardInterrupt:
        info("\nRun cancelled by user")
        raise typer.Exit(130)
    except Exception as e:
        logger.exception("Run failed unexpectedly", script=script)
        handle_error(e, verbose)
        raise typer.Exit(ExitCodes.USAGE)


def check(
    script: str = typer.Argument(..., help="Command script to check ('-' reads stdin)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show each parsed command"),
):
    """
    Check a command script for syntax errors without running it.

    Examples:
        depgraph check commands.txt
    """
    try:
        commands = list(parse_lines(_read_script(script)))
    except CommandError as e:
        where = f"line {e.line_number}: " if e.line_number else ""
        error(f"{where}{e.message}")
        raise typer.Exit(ExitCodes.COMMAND_FAILED)

    if verbose:
        for command in commands:
            console.print(f"  [dim]{command.line_number}:[/dim] ", end="")
            plain(command.line)
    if not commands:
        warning("Script contains no commands")
        return
    success(f"Script is valid ({len(commands)} commands)")
