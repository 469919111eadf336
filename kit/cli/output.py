"""CLI output utilities and formatting."""

import click
from colorama import Fore, Style

# Marker and colour for each message level
MARKERS = {
    'success': (Fore.GREEN, '✓'),
    'info': (Fore.CYAN, '→'),
    'error': (Fore.RED, '✗'),
}


def styled(level: str, message: str) -> str:
    """Prefix message with the marker for level and colour the whole line."""
    colour, marker = MARKERS[level]
    return f"{colour}{marker} {message}{Style.RESET_ALL}"


def success(message: str) -> str:
    return styled('success', message)


def info(message: str) -> str:
    return styled('info', message)


def fail(message: str):
    """Print an error on stderr and abort the command with a non-zero exit."""
    click.echo(styled('error', message), err=True)
    raise click.Abort()
