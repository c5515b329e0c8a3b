"""
classforge command line.

Renders class strings from the string-driven builder surface, for
checking what a template call will produce:

    classforge button --variant primary --size lg
    classforge --theme jupiter card --elevation floating
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from classforge import __version__
from classforge.builders import (
    button_classes_from_strings,
    card_classes_from_strings,
    state_classes_from_strings,
    text_classes_from_strings,
    text_element_from_hierarchy,
)
from classforge.colors import Color
from classforge.errors import ThemeError
from classforge.themes import (
    DEFAULT_THEME_KEY,
    THEME_ENV_VAR,
    THEME_PRESETS,
    Theme,
    get_theme,
    load_theme_file,
    resolve_theme,
)

app = typer.Typer(
    help="Generate utility CSS classes from design tokens.",
    no_args_is_help=True,
)

console = Console()

# Set by the callback
_theme: Theme | None = None


def version_callback(value: bool) -> None:
    if value:
        console.print(f"classforge {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    theme: Annotated[
        str,
        typer.Option("--theme", "-t", envvar=THEME_ENV_VAR, help="Theme preset key"),
    ] = DEFAULT_THEME_KEY,
    theme_file: Annotated[
        Path | None,
        typer.Option("--theme-file", help="Load the theme from a classforge.yaml file"),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version"),
    ] = None,
) -> None:
    """Generate utility CSS classes from design tokens."""
    global _theme
    try:
        _theme = load_theme_file(theme_file) if theme_file else resolve_theme(theme)
    except ThemeError as e:
        console.print(f"[red]Theme error:[/red] {e}")
        raise typer.Exit(code=1) from e


def _current_theme() -> Theme:
    return _theme if _theme is not None else resolve_theme()


# =============================================================================
# Commands
# =============================================================================


@app.command()
def themes() -> None:
    """List the built-in theme presets."""
    table = Table(title="Theme presets")
    table.add_column("Key", style="cyan")
    table.add_column("Name")
    table.add_column("Primary")
    table.add_column("Description", style="dim")

    for key, preset in THEME_PRESETS.items():
        table.add_row(key, preset.name, preset.resolve(Color.PRIMARY), preset.description or "")

    console.print(table)


@app.command()
def palette(
    name: Annotated[
        str | None, typer.Argument(help="Preset key; defaults to the active theme")
    ] = None,
) -> None:
    """Show a theme's palette."""
    if name is None:
        theme = _current_theme()
    else:
        found = get_theme(name)
        if found is None:
            console.print(f"[red]Unknown theme preset: {name}[/red]")
            console.print(f"Available: {', '.join(THEME_PRESETS)}")
            raise typer.Exit(code=1)
        theme = found

    table = Table(title=f"{theme.name} palette")
    table.add_column("Color", style="cyan")
    table.add_column("Token")
    table.add_column("Hex", style="dim")

    for color in Color:
        table.add_row(color.value, theme.resolve(color), theme.hex_color(color))

    console.print(table)


@app.command()
def button(
    variant: Annotated[str, typer.Option("--variant", "-v", help="Button variant")] = "primary",
    size: Annotated[str, typer.Option("--size", "-s", help="xs, sm, md, lg or xl")] = "md",
    disabled: Annotated[bool, typer.Option("--disabled", help="Disabled state")] = False,
    loading: Annotated[bool, typer.Option("--loading", help="Loading state")] = False,
    full_width: Annotated[bool, typer.Option("--full-width", help="Stretch to container")] = False,
) -> None:
    """Render button classes."""
    typer.echo(
        button_classes_from_strings(
            _current_theme(),
            variant,
            size,
            disabled=disabled,
            loading=loading,
            full_width=full_width,
        )
    )


@app.command()
def card(
    surface: Annotated[str, typer.Option("--surface", help="Card surface")] = "standard",
    elevation: Annotated[str, typer.Option("--elevation", help="Card elevation")] = "subtle",
    spacing: Annotated[str, typer.Option("--spacing", help="Card padding")] = "standard",
    interaction: Annotated[str, typer.Option("--interaction", help="Interaction type")] = "static",
    selected: Annotated[bool, typer.Option("--selected", help="Selected state")] = False,
) -> None:
    """Render card classes."""
    typer.echo(
        card_classes_from_strings(
            _current_theme(), surface, elevation, spacing, interaction, selected=selected
        )
    )


@app.command()
def text(
    hierarchy: Annotated[str, typer.Argument(help="Hierarchy, e.g. title or body")] = "body",
    size: Annotated[str | None, typer.Option("--size", help="Size override")] = None,
    weight: Annotated[str | None, typer.Option("--weight", help="Weight override")] = None,
    color: Annotated[str | None, typer.Option("--color", help="Color override")] = None,
    alignment: Annotated[str | None, typer.Option("--align", help="Text alignment")] = None,
    truncate: Annotated[bool, typer.Option("--truncate", help="Single-line truncate")] = False,
    clamp: Annotated[int | None, typer.Option("--clamp", help="Clamp to N lines")] = None,
    show_element: Annotated[
        bool, typer.Option("--element", help="Also print the suggested HTML tag")
    ] = False,
) -> None:
    """Render text classes."""
    classes = text_classes_from_strings(
        _current_theme(),
        hierarchy,
        size=size,
        weight=weight,
        color=color,
        alignment=alignment,
        truncate=truncate,
        clamp_lines=clamp,
    )
    if show_element:
        console.print(f"[dim]<{text_element_from_hierarchy(hierarchy)}>[/dim]")
    typer.echo(classes)


@app.command()
def state(
    intent: Annotated[str, typer.Argument(help="loading, empty, error, success, warning, info")],
    prominence: Annotated[str, typer.Option("--prominence", help="Prominence")] = "standard",
    size: Annotated[str, typer.Option("--size", help="xs, sm, md, lg or xl")] = "md",
    alignment: Annotated[str, typer.Option("--align", help="left, center or right")] = "center",
    loading_variant: Annotated[
        str | None, typer.Option("--loading-variant", help="spinner, dots, pulse, bars, skeleton")
    ] = None,
    fullscreen: Annotated[bool, typer.Option("--fullscreen", help="Cover the viewport")] = False,
) -> None:
    """Render state (loading, empty, error...) classes."""
    typer.echo(
        state_classes_from_strings(
            _current_theme(),
            intent,
            prominence=prominence,
            size=size,
            alignment=alignment,
            loading_variant=loading_variant,
            fullscreen=fullscreen,
        )
    )


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
