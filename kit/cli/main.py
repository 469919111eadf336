"""Main CLI entry point for Kit."""

import logging

import click
from colorama import init

from kit import __version__
from kit.cli.commands import init_cmd, cat_file_cmd, hash_object_cmd

# Initialize colorama for cross-platform colored output
init(autoreset=True)


@click.group()
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Log debug output to stderr')
def cli(verbose):
    """Kit - a Git-like version control system."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )


# Register commands
cli.add_command(init_cmd)
cli.add_command(cat_file_cmd)
cli.add_command(hash_object_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
