"""Console helpers shared by CLI commands."""
from rich.console import Console
from rich.markup import escape

from depgraph_common.errors import DepgraphError

console = Console()


def success(message: str) -> None:
    console.print(f"[bold green]✅ {escape(message)}[/bold green]")


def error(message: str) -> None:
    console.print(f"[bold red]❌ {escape(message)}[/bold red]")


def warning(message: str) -> None:
    console.print(f"[yellow]⚠️  {escape(message)}[/yellow]")


def info(message: str) -> None:
    console.print(f"[cyan]ℹ️  {escape(message)}[/cyan]")


def plain(line: str) -> None:
    """Print script output verbatim (component names may contain markup characters)."""
    console.print(line, markup=False, highlight=False, soft_wrap=True)


def handle_error(e: Exception, verbose: bool = False) -> None:
    """Report an unexpected exception, with a traceback in verbose mode."""
    if isinstance(e, DepgraphError):
        error(f"{e.message} [{e.code}]")
    else:
        error(f"Unexpected error: {type(e).__name__}: {e}")
    if verbose:
        console.print_exception()
