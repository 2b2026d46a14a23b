"""ada-outline install-grammar command - install the tree-sitter Ada grammar."""

import click

from adaoutline.config.constants import GRAMMAR_MODULE, GRAMMAR_PACKAGE
from adaoutline.parsing import install_grammar, is_grammar_installed


@click.command()
@click.option("--force", is_flag=True, help="Reinstall even if already importable")
def install_grammar_command(force: bool) -> None:
    """Install the tree-sitter-ada grammar into this environment."""
    if is_grammar_installed(GRAMMAR_MODULE) and not force:
        click.echo(f"{GRAMMAR_PACKAGE} is already installed.")
        return
    click.echo(f"Installing {GRAMMAR_PACKAGE}...")
    if not install_grammar(GRAMMAR_PACKAGE):
        raise click.ClickException(f"Failed to install {GRAMMAR_PACKAGE}")
    click.echo("Done.")
