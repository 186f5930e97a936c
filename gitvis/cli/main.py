"""Main CLI entry point for gitvis."""

import click
from colorama import init

from gitvis import __version__
from gitvis.cli.output import BANNER
from gitvis.cli.commands import shell_cmd, run_cmd, config_cmd

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class GitVisGroup(click.Group):
    """Custom Group class to display banner before help."""
    
    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=GitVisGroup)
@click.version_option(version=__version__)
def cli():
    pass


# Register commands
cli.add_command(shell_cmd)
cli.add_command(run_cmd)
cli.add_command(config_cmd)

def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
