"""Typer-based CLI for matcher generation options."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .config import ConfigError, ConfiguredDataSource, example_config, load_config, save_config
from .models import GeneratorOptions
from .options import OptionsModel, OptionsValidationError
from .recents import RecentPackages

app = typer.Typer(help="Collect and validate options for generating matcher classes.")
console = Console()


def _configure_logging(level: str, log_file: Path | None) -> None:
    logger.remove()
    logger.add(console.print, level=level)
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level=level)


def _load_model(config_path: Path) -> OptionsModel:
    config = load_config(config_path)
    return OptionsModel(ConfiguredDataSource(config))


def _options_table(options: GeneratorOptions) -> Table:
    table = Table(title="Matcher options")
    table.add_column("Option")
    table.add_column("Value")
    table.add_row("Class name", options.class_name)
    table.add_row("Package", options.package_name or "(default package)")
    table.add_row("Source root", f"{options.source_root.label} ({options.source_root.kind.value})")
    table.add_row("Extensible", "yes" if options.extensible else "no")
    table.add_row("Article", "an" if options.uses_an else "a")
    table.add_row("Superclass", options.super_class_name if options.super_class_name is not None else "(none)")
    return table


@app.command()
def validate(
    config: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    class_name: Optional[str] = typer.Option(None, "--class-name", help="Matcher class name"),
    package: Optional[str] = typer.Option(None, "--package", help="Destination package"),
    root: Optional[str] = typer.Option(None, "--root", help="Destination source root label"),
    extensible: Optional[bool] = typer.Option(None, "--extensible/--no-extensible", help="Generate an extensible matcher"),
    extends: Optional[str] = typer.Option(None, "--extends", help="Superclass for the generated matcher"),
    an: Optional[bool] = typer.Option(None, "--an/--no-an", help="Use 'an' in factory method names"),
    recents: Optional[Path] = typer.Option(None, "--recents", help="Recent packages file to update"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
) -> None:
    """Apply overrides to the configured defaults and validate the result."""

    _configure_logging(log_level.upper(), None)
    try:
        model = _load_model(config)
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=4)

    if class_name is not None:
        model.class_name = class_name
    if package is not None:
        model.package_name = package
    if extensible is not None:
        model.extensible = extensible
    if extends is not None:
        model.extends_superclass = True
        model.super_class_text = extends
    if an is not None:
        if not model.article_choice_enabled:
            console.print("[red]ERROR:[/red] The article cannot be chosen for an abstract class")
            raise typer.Exit(code=3)
        model.uses_an = an
    if root is not None:
        matches = [candidate for candidate in model.candidate_roots if candidate.label == root]
        if not matches:
            console.print(f"[red]ERROR:[/red] Unknown source root {root!r}")
            raise typer.Exit(code=3)
        model.select_root(matches[0])

    try:
        options = model.finalize()
    except OptionsValidationError as failure:
        console.print(f"[red]ERROR:[/red] {failure.info.message} ({failure.info.field.value})")
        raise typer.Exit(code=3)

    if recents is not None:
        try:
            history = RecentPackages(recents)
        except ConfigError as exc:
            console.print(f"[red]Configuration error:[/red] {exc}")
            raise typer.Exit(code=4)
        history.record(str(model.data_source.recents_key), options.package_name)
        history.save()

    console.print(_options_table(options))
    console.print("[green]Options are valid.[/green]")


@app.command()
def show(config: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True)) -> None:
    """Show the defaults the panel would start with."""

    _configure_logging("WARNING", None)
    try:
        model = _load_model(config)
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=4)

    matched = model.matched_class
    console.print(f"Matching [bold]{matched.name}[/bold]{' (abstract)' if matched.is_abstract else ''}")
    console.print(f"Class name: {model.class_name}")
    console.print(f"Package: {model.package_name}")
    console.print(f"Extensible: {'yes' if model.extensible else 'no'}")
    if model.article_choice_enabled:
        a_choice, an_choice = model.article_choices()
        console.print(f"Factory prefix: {an_choice if model.uses_an else a_choice}")
    else:
        console.print("Factory prefix: not applicable")

    roots = Table(title="Source roots")
    roots.add_column("")
    roots.add_column("Root")
    roots.add_column("Kind")
    for candidate in model.candidate_roots:
        marker = "*" if candidate is model.selected_root else ""
        roots.add_row(marker, candidate.label, candidate.kind.value)
    console.print(roots)


@app.command("init-config")
def init_config(path: Path = typer.Argument(..., writable=True, resolve_path=True)) -> None:
    """Write an example configuration file to PATH."""

    save_config(example_config(), path)
    console.print(f"[green]Wrote configuration to {path}[/green]")


if __name__ == "__main__":
    app()
