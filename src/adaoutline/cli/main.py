"""adaoutline CLI - ada-outline command."""

import click

from adaoutline import __version__
from adaoutline.cli.categories import categories_command
from adaoutline.cli.grammar import install_grammar_command
from adaoutline.cli.show import show_command


@click.group()
@click.version_option(version=__version__, prog_name="ada-outline")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Navigation outlines for Ada source files."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


cli.add_command(show_command, name="show")
cli.add_command(categories_command, name="categories")
cli.add_command(install_grammar_command, name="install-grammar")


if __name__ == "__main__":
    cli()
