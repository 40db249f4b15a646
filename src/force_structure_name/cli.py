"""Command-line interface for renaming structures in a drawing snapshot."""

import os
import sys
from contextlib import nullcontext
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

try:
    __version__ = version("force-structure-name")
except PackageNotFoundError:
    __version__ = "unknown"

from force_structure_name.analyzers import analyze_duplicate_names
from force_structure_name.command import force_structure_name
from force_structure_name.drawing import DrawingFormatError, DrawingSnapshotHost
from force_structure_name.utils.constants import DEFAULT_CONFIG, STRUCTURE_CLASS
from force_structure_name.utils.logging import (
    format_count,
    log_detail,
    log_ok,
    log_rename,
    log_warn,
    print_header,
    suppress_stdout,
)

app = typer.Typer(
    name="force-structure-name",
    help="Rename a structure, even if another structure already has that name",
    add_completion=False,
    rich_markup_mode="rich",
    suggest_commands=True,
    no_args_is_help=True,
)
console = Console()

COMMANDS = ("rename", "duplicates")


def version_callback(value: bool) -> None:
    if value:
        print(f"force-structure-name {__version__}")
        raise typer.Exit()


def _open_drawing(
    drawing: str, structure_class: str, **kwargs: object
) -> DrawingSnapshotHost:
    abs_path = os.path.abspath(drawing)
    if not os.path.isfile(abs_path):
        console.print(f"[bold red][ERROR][/] File not found: {abs_path}")
        raise typer.Exit(code=1)
    try:
        return DrawingSnapshotHost(
            abs_path, structure_class=structure_class, **kwargs
        )
    except DrawingFormatError as e:
        console.print(f"[bold red][ERROR][/] {e}")
        raise typer.Exit(code=1) from e


@app.callback()
def callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = None,
) -> None:
    """
    Rename Civil3D structures, moving conflicting names out of the way.
    """


@app.command()
def rename(
    drawing: Annotated[
        str,
        typer.Argument(
            help="Drawing snapshot ([bold green].json[/])",
            metavar="DRAWING",
        ),
    ],
    structure: Annotated[
        str,
        typer.Option(
            "--structure",
            "-s",
            prompt="Select a STRUCTURE",
            help="Id of the structure to rename",
            rich_help_panel="Core Options",
        ),
    ],
    name: Annotated[
        str,
        typer.Option(
            "--name",
            "-n",
            prompt="Enter a new name",
            help="New name for the structure",
            rich_help_panel="Core Options",
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the updated drawing here (default: [italic]overwrite DRAWING[/])",
            rich_help_panel="Core Options",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Show the planned renames without writing anything",
            rich_help_panel="Core Options",
        ),
    ] = DEFAULT_CONFIG["dry_run"],
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print errors",
            rich_help_panel="Output",
        ),
    ] = False,
    structure_class: Annotated[
        str,
        typer.Option(
            help="Object class name treated as a structure",
            rich_help_panel="Advanced",
        ),
    ] = STRUCTURE_CLASS,
) -> None:
    """
    Rename a structure. A structure already using the name gets a
    numbered suffix, e.g. [bold]S10[/] becomes [bold]S10 (2)[/].
    """
    host = _open_drawing(
        drawing,
        structure_class,
        output_path=output,
        persist=not dry_run,
    )

    config = DEFAULT_CONFIG.copy()
    config["dry_run"] = dry_run

    with suppress_stdout() if quiet else nullcontext():
        print_header("Force Structure Name")
        outcome = force_structure_name(host, structure, name, config)

        if outcome.status == "planned":
            for assignment in outcome.plan:
                log_rename(
                    assignment.entity_id,
                    outcome.previous_names[assignment.entity_id],
                    assignment.new_name,
                )
            log_ok(f"Dry run: {format_count(len(outcome.plan), 'rename')} planned")
        elif outcome.status == "renamed":
            log_ok(f"Saved {host.output_path}")

    if not outcome.ok:
        if quiet and outcome.messages:
            console.print(f"[bold red][ERROR][/] {outcome.messages[-1]}")
        raise typer.Exit(code=1)


@app.command()
def duplicates(
    drawing: Annotated[
        str,
        typer.Argument(
            help="Drawing snapshot ([bold green].json[/])",
            metavar="DRAWING",
        ),
    ],
    structure_class: Annotated[
        str,
        typer.Option(
            help="Object class name treated as a structure",
            rich_help_panel="Advanced",
        ),
    ] = STRUCTURE_CLASS,
) -> None:
    """
    List structure names held by more than one structure.
    """
    host = _open_drawing(drawing, structure_class, persist=False)
    entities = host.list_entities()
    found = analyze_duplicate_names(entities)

    print_header("Duplicate Structure Names")
    if not found:
        log_ok(f"No duplicates among {format_count(len(entities), 'structure')}")
        return

    for dup in found:
        log_warn(f"{dup['name']} is used by {format_count(dup['count'], 'structure')}")
        log_detail(", ".join(str(entity_id) for entity_id in dup["entity_ids"]))


def main() -> None:
    """Entry point: ``force-structure-name DRAWING ...`` runs ``rename``."""
    args = sys.argv[1:]

    if not args:
        # Show the rename help on stderr, the command users almost always want
        old_stdout = sys.stdout
        sys.stdout = sys.stderr
        try:
            app(args=["rename", "--help"], standalone_mode=False)
        except (SystemExit, typer.Exit):
            pass
        finally:
            sys.stdout = old_stdout
        sys.exit(1)

    # Make 'rename' the default command by prepending it
    if args[0] not in COMMANDS and args[0] not in ("--help", "--version", "-v"):
        args = ["rename"] + args
    app(args=args, standalone_mode=True)


if __name__ == "__main__":
    main()
