"""Layout commands for splitpane.

Every command loads a layout (by name or from a YAML file), lays it out in a
container of the given size, applies one operation and prints the resulting
pane sizes.
"""

import math
from pathlib import Path
from typing import Any, Dict, List

import typer
from rich.table import Table

from splitpane.layout import LayoutManager, SplitController, SplitLayoutSpec
from splitpane.exceptions import InvalidIndexError, LayoutConfigError
from splitpane.utils.error_handling import handle_cli_error
from splitpane.utils.output import console, print_json

app = typer.Typer(help="Inspect and exercise split layouts")

SIZE_OPTION = typer.Option(1200, "--size", "-s", help="Container size along the layout axis")
JSON_OPTION = typer.Option(False, "--json", help="Output pane sizes as JSON")


def _load_spec(layout: str) -> SplitLayoutSpec:
    """Load a layout by name, or from a file when given a path."""
    manager = LayoutManager()
    path = Path(layout)
    if path.suffix in (".yaml", ".yml") or path.exists():
        if not path.exists():
            raise FileNotFoundError(f"Layout file not found: {layout}")
        return manager.load_layout_file(path)
    return manager.load_layout(layout)


def _build(layout: str, size: float) -> SplitController:
    controller = SplitController(_load_spec(layout))
    controller.layout(size)
    return controller


def _resolve_pane(controller: SplitController, pane: str) -> int:
    """Pane index from an index or a pane id."""
    if pane.isdigit():
        index = int(pane)
        count = len(controller.pane_ids)
        if index >= count:
            raise InvalidIndexError(index=index, length=count)
        return index
    return controller.index_of(pane)


def _pane_rows(controller: SplitController) -> List[Dict[str, Any]]:
    split_view = controller.split_view
    rows = []
    for index, pane_id in enumerate(controller.pane_ids):
        pane = split_view.get_view(index)
        rows.append(
            {
                "index": index,
                "id": pane_id,
                "size": split_view.get_view_size(index),
                "offset": pane.offset,
                "min_size": pane.minimum_size,
                "max_size": pane.maximum_size,
                "priority": pane.priority.value,
                "snap": pane.snap,
                "visible": split_view.is_view_visible(index),
            }
        )
    return rows


def _render(controller: SplitController, json_output: bool, note: str = "") -> None:
    rows = _pane_rows(controller)

    if json_output:
        print_json(
            {
                "layout": controller.spec.name,
                "size": controller.split_view.size,
                "orientation": controller.split_view.orientation.value,
                "panes": rows,
            }
        )
        return

    spec = controller.spec
    title = f"{spec.name} ({controller.split_view.orientation.value}, {controller.split_view.size:g})"
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=3)
    table.add_column("Pane", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Offset", justify="right", style="dim")
    table.add_column("Min", justify="right")
    table.add_column("Max", justify="right")
    table.add_column("Priority")
    table.add_column("Snap")
    table.add_column("Visible")

    for row in rows:
        table.add_row(
            str(row["index"]),
            row["id"],
            f"{row['size']:g}",
            f"{row['offset']:g}",
            f"{row['min_size']:g}",
            "∞" if math.isinf(row["max_size"]) else f"{row['max_size']:g}",
            row["priority"],
            "yes" if row["snap"] else "",
            "[green]yes[/green]" if row["visible"] else "[yellow]hidden[/yellow]",
        )

    console.print(table)
    if note:
        console.print(f"[dim]{note}[/dim]")


@app.command()
@handle_cli_error("showing layout")
def show(
    layout: str = typer.Argument(..., help="Layout name or path to a YAML file"),
    size: float = SIZE_OPTION,
    json_output: bool = JSON_OPTION,
):
    """Show the pane sizes of a layout at a container size."""
    controller = _build(layout, size)
    _render(controller, json_output)


@app.command()
@handle_cli_error("dragging sash")
def drag(
    layout: str = typer.Argument(..., help="Layout name or path to a YAML file"),
    sash: int = typer.Option(..., "--sash", help="Sash index (the pane before it)"),
    delta: float = typer.Option(..., "--delta", "-d", help="Distance to drag; positive grows the pane before the sash"),
    size: float = SIZE_OPTION,
    json_output: bool = JSON_OPTION,
):
    """Drag a sash and show the redistributed sizes."""
    controller = _build(layout, size)
    applied = controller.split_view.move_sash(sash, delta)
    _render(controller, json_output, note=f"Sash {sash} moved by {applied:g} (requested {delta:g})")


@app.command()
@handle_cli_error("resizing pane")
def resize(
    layout: str = typer.Argument(..., help="Layout name or path to a YAML file"),
    pane: str = typer.Option(..., "--pane", "-p", help="Pane index or id"),
    to: float = typer.Option(..., "--to", help="Requested pane size"),
    size: float = SIZE_OPTION,
    json_output: bool = JSON_OPTION,
):
    """Resize one pane, cascading the difference to its neighbours."""
    controller = _build(layout, size)
    index = _resolve_pane(controller, pane)
    controller.split_view.resize_view(index, to)
    _render(controller, json_output)


@app.command()
@handle_cli_error("distributing sizes")
def distribute(
    layout: str = typer.Argument(..., help="Layout name or path to a YAML file"),
    size: float = SIZE_OPTION,
    json_output: bool = JSON_OPTION,
):
    """Give every visible pane an equal share of the container."""
    controller = _build(layout, size)
    controller.split_view.distribute_view_sizes()
    _render(controller, json_output)


@app.command("hide-pane")
@handle_cli_error("hiding pane")
def hide_pane(
    layout: str = typer.Argument(..., help="Layout name or path to a YAML file"),
    pane: str = typer.Option(..., "--pane", "-p", help="Pane index or id"),
    size: float = SIZE_OPTION,
    json_output: bool = JSON_OPTION,
):
    """Collapse a snap pane."""
    controller = _build(layout, size)
    controller.split_view.set_view_visible(_resolve_pane(controller, pane), False)
    _render(controller, json_output)


@app.command("show-pane")
@handle_cli_error("showing pane")
def show_pane(
    layout: str = typer.Argument(..., help="Layout name or path to a YAML file"),
    pane: str = typer.Option(..., "--pane", "-p", help="Pane index or id"),
    size: float = SIZE_OPTION,
    json_output: bool = JSON_OPTION,
):
    """Restore a collapsed snap pane."""
    controller = _build(layout, size)
    controller.split_view.set_view_visible(_resolve_pane(controller, pane), True)
    _render(controller, json_output)


@app.command()
@handle_cli_error("listing layouts")
def layouts(
    validate: bool = typer.Option(False, "--validate", help="Validate each layout"),
):
    """List available layouts."""
    manager = LayoutManager()
    available = manager.list_layouts()

    if not available:
        console.print("[yellow]No layouts found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Name", style="cyan")
    table.add_column("Source")
    table.add_column("Panes", justify="right")
    table.add_column("Description")
    if validate:
        table.add_column("Status")

    for name, location in available:
        try:
            spec = manager.load_layout(name)
        except LayoutConfigError as e:
            table.add_row(name, location, "", f"[red]{e}[/red]", *([""] if validate else []))
            continue
        row = [name, location, str(len(spec.panes)), spec.description]
        if validate:
            errors = manager.validate_layout(spec)
            row.append("[green]ok[/green]" if not errors else f"[red]{'; '.join(errors)}[/red]")
        table.add_row(*row)

    console.print(table)
