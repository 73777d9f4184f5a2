"""Commit command - create a commit from staged changes."""

import click
from rift.core.repository import Repository
from rift.core.errors import NothingToCommitError, RiftError
from rift.cli.output import success, error, info, short_hash


@click.command('commit')
@click.option('-m', '--message', required=True, help='Commit message')
def commit_cmd(message):
    """
    Record changes to the repository.
    
    Creates a commit from the staged changes in the index, points HEAD
    at it and empties the staging area.
    
    Examples:
        rift commit -m "Initial commit"
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a rift repository"))
        raise click.Abort()
    
    try:
        commit_hash = repo.commit(message)
        commit = repo.read_commit(commit_hash)
    except NothingToCommitError as e:
        click.echo(error(str(e)))
        click.echo(info("Use 'rift add <file>' to stage changes"))
        raise click.Abort()
    except RiftError as e:
        click.echo(error(f"Failed to create commit: {e}"))
        raise click.Abort()
    
    click.echo(success(f"Created commit {short_hash(commit_hash)}"))
    click.echo(info(f"Message: {message}"))
    click.echo(info(f"Files: {len(commit.files)}"))
