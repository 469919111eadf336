"""Object plumbing commands - read and hash raw objects."""

import click
from kit.core.errors import KitError, NotAKitRepository, RepositoryRequiredForWrite
from kit.core.objects import ObjectKind
from kit.core.repository import Repository
from kit.core.store import hash_file
from kit.cli.output import fail


@click.command('cat-file')
@click.option('-t', '--type', 'show_type', is_flag=True, help='Show object type')
@click.option('-s', '--size', 'show_size', is_flag=True, help='Show object size')
@click.argument('object_hash')
def cat_file_cmd(show_type, show_size, object_hash):
    """
    Show the content of an object.

    OBJECT must be the full 40-character id. The repository is found by
    searching upwards from the current directory.

    Examples:
        kit cat-file <id>          # Print object content
        kit cat-file -t <id>       # Show object type
        kit cat-file -s <id>       # Show object size
    """
    try:
        repo = Repository.find()
        obj = repo.read_object(object_hash)
    except (KitError, OSError) as e:
        fail(f"cat-file failed: {e}")

    if show_type:
        click.echo(obj.type)
        return

    if show_size:
        click.echo(len(obj.serialize()))
        return

    click.echo(obj.serialize(), nl=False)


@click.command('hash-object')
@click.option('-t', '--type', 'kind_name', type=click.Choice(ObjectKind.names()),
              default=ObjectKind.BLOB.value, show_default=True, help='Object type')
@click.option('-w', '--write', is_flag=True, help='Write the object into the object database')
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def hash_object_cmd(kind_name, write, file):
    """
    Compute the object id of a file.

    Treats the contents of FILE as an object of the given type and prints
    its id. With --write the object is also stored in the enclosing
    repository.

    Examples:
        kit hash-object notes.txt             # Hash as a blob
        kit hash-object -t tree listing       # Hash as a tree
        kit hash-object -w notes.txt          # Hash and store
    """
    kind = ObjectKind.parse(kind_name)

    try:
        repo = None
        if write:
            try:
                repo = Repository.find()
            except NotAKitRepository as e:
                raise RepositoryRequiredForWrite() from e
        sha = hash_file(file, kind, repo=repo, write=write)
    except (KitError, OSError) as e:
        fail(f"hash-object failed: {e}")

    click.echo(sha)
