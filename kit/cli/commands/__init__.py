"""CLI commands for Kit."""

from kit.cli.commands.init import init_cmd
from kit.cli.commands.objects import cat_file_cmd, hash_object_cmd

__all__ = ['init_cmd', 'cat_file_cmd', 'hash_object_cmd']
