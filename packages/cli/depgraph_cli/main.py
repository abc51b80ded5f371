"""depgraph CLI - Main entry point."""
import typer

from . import info_cmd, run_cmd

app = typer.Typer(
    name="depgraph",
    help="depgraph - Install and remove components along declared dependencies",
    no_args_is_help=True,
    add_completion=False,
)

# Register all commands
app.command()(run_cmd.run)
app.command()(run_cmd.check)
app.command()(info_cmd.version)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
