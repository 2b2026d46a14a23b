"""ada-outline categories command - list the known outline categories."""

import click
from rich.console import Console
from rich.table import Table

from adaoutline.outline import CATEGORIES


@click.command()
def categories_command() -> None:
    """List outline category ids and their display names."""
    table = Table(show_header=True, box=None, padding=(0, 2), pad_edge=False)
    table.add_column("ID", style="cyan")
    table.add_column("Display name")
    for category_id, spec in CATEGORIES.items():
        table.add_row(category_id, spec.display_name)
    Console().print(table)
