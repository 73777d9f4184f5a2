"""Status command - show staged files."""

import click
from rift.core.repository import Repository
from rift.core.errors import RiftError
from rift.cli.output import error, info, staged


@click.command('status')
def status_cmd():
    """
    Show the files staged for the next commit.
    
    Examples:
        rift status
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a rift repository"))
        raise click.Abort()
    
    try:
        report = repo.status()
        head = repo.read_head()
    except RiftError as e:
        click.echo(error(f"Failed to read status: {e}"))
        raise click.Abort()
    
    click.echo(info(f"HEAD: {head}"))
    
    if report.nothing_staged:
        click.echo("Nothing staged for commit")
        return
    
    click.echo("Changes to be committed:")
    for path in report.paths:
        click.echo(staged(path))
