"""
SCI2FB - Convert Sierra SCI0 FB-01 patch resources to FB-01 bank files.

A modern CLI tool for converting, inspecting and sending FB-01 voice banks.
"""

import typer
from rich.console import Console

from cli.commands.convert import convert
from cli.commands.dump import dump
from cli.commands.info import info
from cli.commands.send import send

__version__ = "1.0.0"

console = Console()

# Main app
app = typer.Typer(
    name="sci2fb",
    help="Convert Sierra SCI0 FB-01 patch resources to Yamaha FB-01 bank files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="convert")(convert)
app.command(name="info")(info)
app.command(name="dump")(dump)
app.command(name="send")(send)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]sci2fb[/bold] version {__version__}")
    console.print("[dim]Sierra SCI0 patch resource to Yamaha FB-01 bank converter[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
) -> None:
    """
    SCI2FB - Convert Sierra SCI0 patch resources for the Yamaha FB-01.

    Converts a [cyan]SCI0 patch resource[/cyan] (PATCH.002) holding one or two
    banks of 48 voices into [cyan]FB-01 bank SysEx[/cyan] files (.syx).

    [bold]Quick Start:[/bold]

        sci2fb convert PATCH.002 game1.syx game2.syx

    [bold]Inspection Commands:[/bold]

        sci2fb info PATCH.002         # Patch resource summary
        sci2fb info game1.syx         # Bank name and checksums
        sci2fb dump game1.syx         # Annotated hex dump

    [bold]Device Commands:[/bold]

        sci2fb send game1.syx         # Send bank to the FB-01

    Use --help with any command for more details.
    """
    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
