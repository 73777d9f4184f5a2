"""Config command - manage repository configuration."""

import click
from rift.core.config import Config
from rift.core.errors import RiftError
from rift.core.repository import Repository
from rift.cli.output import success, error, info


def _split_key(key):
    return key.split('.', 1) if '.' in key else ('core', key)


def _load_config(is_global):
    if is_global:
        return Config()
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a rift repository (use --global for global config)"))
        raise click.Abort()
    return repo.config


@click.group('config')
def config_cmd():
    """Get and set repository or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
def config_set(key, value, is_global):
    """
    Set a config value.
    
    Examples:
        rift config set core.ignorefile .gitignore
    """
    config = _load_config(is_global)
    section, option = _split_key(key)
    try:
        config.set(section, option, value, global_config=is_global)
    except RiftError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    
    scope = "global" if is_global else "repository"
    click.echo(success(f"Set {scope} config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
def config_get(key):
    """
    Get a config value.
    
    Environment variables (RIFT_<SECTION>_<KEY>) override files.
    
    Examples:
        rift config get core.ignorefile
    """
    repo = Repository.find_repository()
    config = repo.config if repo else Config()
    section, option = _split_key(key)
    
    value = config.get(section, option)
    if value is None:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Unset global config')
def config_unset(key, is_global):
    """Remove a config value."""
    config = _load_config(is_global)
    section, option = _split_key(key)
    
    try:
        removed = config.unset(section, option, global_config=is_global)
    except RiftError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    
    if not removed:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(success(f"Removed {key}"))


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
def config_list(is_global):
    """List all config values."""
    repo = None if is_global else Repository.find_repository()
    config = repo.config if repo else Config()
    
    values = config.list_all(global_only=is_global)
    if not values:
        click.echo(info("No configuration set"))
        return
    
    for section, items in values.items():
        for key, value in items.items():
            click.echo(f"{section}.{key}={value}")
