"""Initialize a new Rift repository."""

import click
from pathlib import Path
from rift.core.repository import Repository
from rift.core.errors import RiftError
from rift.cli.output import success, error, info


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new Rift repository.
    
    Creates a .rift directory with the necessary structure for version
    control. Running it in an existing repository resets HEAD and keeps
    staged files.
    
    Examples:
        rift init                    # Initialize in current directory
        rift init my-project         # Initialize in my-project directory
    """
    repo_path = Path(path).resolve()
    reinit = (repo_path / '.rift').is_dir()
    
    try:
        if not repo_path.exists():
            repo_path.mkdir(parents=True)
            click.echo(info(f"Created directory {repo_path}"))
        
        repo = Repository(str(repo_path))
        repo.init()
    except OSError as e:
        click.echo(error(f"Cannot create repository at {path}: {e.strerror}"))
        raise click.Abort()
    except RiftError as e:
        click.echo(error(f"Failed to initialize repository: {e}"))
        raise click.Abort()
    
    if reinit:
        click.echo(success(f"Reinitialized existing Rift repository in {repo.rift_dir}"))
        return
    
    click.echo(success(f"Initialized empty Rift repository in {repo.rift_dir}"))
    click.echo()
    click.echo(info("You can now start tracking files with:"))
    click.echo(info("  rift add <file>"))
    click.echo(info("  rift commit -m 'message'"))
