"""ada-outline show command - print the outline of an Ada file."""

import json
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError
from rich.console import Console

from adaoutline.config import load_config
from adaoutline.config.constants import DEFAULT_CATEGORIES
from adaoutline.config.models import OutlineConfig
from adaoutline.core.errors import AdaOutlineError
from adaoutline.core.logging import configure_logging
from adaoutline.outline import OutlineBuilder
from adaoutline.render import outline_to_dict, outline_tree


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--nesting",
    type=click.Choice(["before", "within"]),
    default=None,
    help="Placement of a container's own entry (default: from config)",
)
@click.option(
    "--sort",
    type=click.Choice(["none", "alphabetical"]),
    default=None,
    help="Sibling ordering (default: from config)",
)
@click.option(
    "--category",
    "categories",
    multiple=True,
    metavar="ID",
    help=f"Category to include, repeatable, in display order ({', '.join(DEFAULT_CATEGORIES)})",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def show_command(
    ctx: click.Context,
    path: Path,
    nesting: str | None,
    sort: str | None,
    categories: tuple[str, ...],
    as_json: bool,
) -> None:
    """Show the navigation outline of an Ada file.

    PATH is an .adb, .ads or .ada source file.
    """
    try:
        config = load_config(Path.cwd())
    except AdaOutlineError as e:
        raise click.ClickException(str(e)) from e

    configure_logging(config.logging, verbose=bool(ctx.obj and ctx.obj.get("verbose")))

    overrides: dict[str, Any] = {}
    if nesting is not None:
        overrides["nesting_strategy"] = nesting
    if sort is not None:
        overrides["sort"] = sort
    if categories:
        overrides["categories"] = list(categories)
    try:
        outline_config = OutlineConfig.model_validate({**config.outline.model_dump(), **overrides})
    except ValidationError as e:
        raise click.ClickException(f"Invalid options: {e}") from e

    source = path.read_bytes()
    try:
        outline = OutlineBuilder(outline_config).build_file(path, source)
    except AdaOutlineError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps(outline_to_dict(outline), indent=2))
        return

    console = Console()
    if not outline:
        console.print(f"[yellow]No outline entries[/yellow] in {path}")
        return
    console.print(outline_tree(outline, title=str(path), source=source))
