"""Initialize a new Kit repository."""

import click
from kit.core.errors import KitError
from kit.core.repository import Repository
from kit.cli.output import success, info, fail


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new Kit repository.

    Creates a .kit directory with the object database, refs and config.
    PATH must not exist yet or be an empty directory.

    Examples:
        kit init                    # Initialize in current directory
        kit init my-project         # Initialize in my-project directory
    """
    try:
        repo = Repository.create(path)
    except PermissionError:
        fail(f"Permission denied: Cannot create repository at {path}")
    except (KitError, OSError) as e:
        fail(f"Failed to initialize repository: {e}")

    click.echo(success(f"Initialized empty Kit repository in {repo.kit_dir}"))
    click.echo(info("  .kit/objects/     - Object database"))
    click.echo(info("  .kit/refs/        - Branch and tag references"))
    click.echo(info("  .kit/HEAD         - Current branch pointer"))
    click.echo(info("  .kit/config       - Repository configuration"))
