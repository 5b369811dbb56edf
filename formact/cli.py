"""CLI for the formact form state engine."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from formact import __version__
from formact.config import get_config_path, load_global_config, write_default_config
from formact.core.errors import FormactError, FormDefinitionError
from formact.definition import build_field_props, load_definition
from formact.io import write_jsonl
from formact.replay import ScenarioRunner
from formact.validation import create_registry

app = typer.Typer(
    name="formact",
    help="Form state engine: validate form definitions and replay field interactions.",
    no_args_is_help=True,
)
console = Console()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    if value:
        console.print(f"formact version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log at DEBUG level"),
    ] = False,
) -> None:
    """formact: Form state engine."""
    settings = load_global_config()
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def init(
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite an existing config file",
    ),
) -> None:
    """Write a default config.yaml into the formact home directory."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        console.print(f"[yellow]Warning:[/yellow] Config already exists at {config_path}")
        console.print("Use --force to overwrite")
        raise typer.Exit(1)

    write_default_config(config_path)
    console.print(f"[green]✓[/green] Created config at {config_path}")


@app.command()
def validate(
    definition_path: Annotated[
        Path,
        typer.Argument(help="Path to a form definition (.json, .yaml, .yml)"),
    ],
    schema_path: Annotated[
        Path | None,
        typer.Option("--schema", "-s", help="Path to an alternative JSON Schema"),
    ] = None,
) -> None:
    """Validate a form definition and build each of its validators."""
    try:
        definition = load_definition(definition_path, schema_path=schema_path)
    except FormactError as e:
        console.print(f"[red]Invalid:[/red] {e}")
        raise typer.Exit(1)

    registry = create_registry()
    unknown = [
        f"{field.name}: {spec.name}"
        for field in definition.fields
        for spec in field.validator_specs()
        if not registry.has(spec.name)
    ]
    if unknown:
        console.print("[red]Invalid:[/red] unknown validators")
        for entry in unknown:
            console.print(f"  {entry}")
        raise typer.Exit(1)

    rejected = []
    for field in definition.fields:
        try:
            build_field_props(field, registry)
        except FormDefinitionError as e:
            rejected.append(str(e))
    if rejected:
        console.print("[red]Invalid:[/red] validator parameters")
        for entry in rejected:
            console.print(f"  {entry}", markup=False)
        raise typer.Exit(1)

    table = Table(title=f"{definition.form_id}")
    table.add_column("Field")
    table.add_column("Required")
    table.add_column("Validators")
    for field in definition.fields:
        table.add_row(
            field.name,
            "yes" if field.required else "",
            ", ".join(spec.name for spec in field.validator_specs()),
        )
    console.print(table)
    console.print(f"[green]Valid:[/green] {definition_path}")


@app.command()
def replay(
    form_path: Annotated[
        Path,
        typer.Option("--form", "-f", help="Form definition path"),
    ],
    events_path: Annotated[
        Path,
        typer.Option("--events", "-e", help="JSONL event script"),
    ],
    output_path: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Write every snapshot to this JSONL file"),
    ] = None,
) -> None:
    """Replay field interactions against a form and report the outcome."""
    if not events_path.exists():
        console.print(f"[red]Error:[/red] Event script not found: {events_path}")
        raise typer.Exit(1)

    settings = load_global_config()
    try:
        definition = load_definition(form_path)
        runner = ScenarioRunner(definition, required_message=settings.required_message)
        result = runner.run_file(events_path)
    except FormactError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if output_path:
        written = write_jsonl(output_path, result.snapshots)
        console.print(f"  Snapshots written: {written}")

    console.print(f"[bold]{result.form_id}[/bold]")
    console.print(f"  Events applied: {result.events_applied}")
    console.print(f"  Snapshots emitted: {len(result.snapshots)}")

    if result.final is not None:
        table = Table()
        table.add_column("Field")
        table.add_column("Value")
        table.add_column("Error")
        for name, value in result.final.fields.items():
            table.add_row(name, repr(value), result.final.errors.get(name, ""))
        console.print(table)

    for index, submission in enumerate(result.submissions, 1):
        if submission.payload.valid:
            console.print(f"  Submission {index}: [green]allowed[/green]")
        else:
            console.print(f"  Submission {index}: [red]blocked[/red]")

    if result.valid:
        console.print("[green]Form is valid[/green]")
    else:
        console.print("[yellow]Form is invalid[/yellow]")


if __name__ == "__main__":
    app()
