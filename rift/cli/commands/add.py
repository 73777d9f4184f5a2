"""Add command - stage files for commit."""

import click
from pathlib import Path
from rift.core.repository import Repository
from rift.core.errors import IgnoredError, RiftError
from rift.cli.output import success, error, info, warning


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
def add_cmd(paths):
    """
    Add file contents to the staging area.
    
    Stage files for the next commit. Modified files must be added
    again to stage the new changes. Use '.' to stage every file that
    is not ignored.
    
    Examples:
        rift add file.txt
        rift add src/main.py README.md
        rift add .
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a rift repository"))
        raise click.Abort()
    
    added_files = []
    
    try:
        for path in paths:
            if path == '.':
                added_files.extend(repo.add_all_files())
                continue
            
            # Paths on the command line are relative to the working directory
            resolved = Path(path)
            if not resolved.is_absolute():
                resolved = Path.cwd() / resolved
            repo.add_file(resolved)
            added_files.append(repo.relative_path(resolved))
    except IgnoredError as e:
        click.echo(warning(f"{e.path} is ignored by {repo.config.get('core', 'ignorefile', '.riftignore')}"))
        raise click.Abort()
    except RiftError as e:
        click.echo(error(f"Failed to add files: {e}"))
        raise click.Abort()
    finally:
        if added_files:
            click.echo(success(f"Added {len(added_files)} file(s) to staging area"))
            for file in added_files:
                click.echo(info(f"  {file}"))
    
    if not added_files:
        click.echo(warning("No files added"))
