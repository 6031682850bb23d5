import click

from patterns.infrastructure.bootstrap import configure_logging
from patterns.infrastructure.cli.catalog_commands import catalog
from patterns.infrastructure.cli.document_commands import document


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Verbosity of diagnostic messages on stderr.",
)
def cli(log_level: str) -> None:
    """Design patterns exercises"""
    configure_logging(log_level)


# Register subcommands
cli.add_command(catalog)
cli.add_command(document)
