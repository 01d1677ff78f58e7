"""Config command - manage pathignore configuration."""

import click
from pathignore.core.config import get_config
from pathignore.cli.output import success, error, info
from colorama import Fore, Style


def split_key(key):
    """Split ``section.option`` into its parts, defaulting to ``core``."""
    return key.split('.', 1) if '.' in key else ('core', key)


@click.group('config')
def config_cmd():
    """Get and set local or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
def config_set(key, value, is_global):
    """
    Set a config value.

    Examples:
        pathignore config set core.ignorefile .dockerignore
        pathignore config set --global core.excludesfile ~/.config/ignore
    """
    config = get_config()
    section, option = split_key(key)
    config.set(section, option, value, global_config=is_global)

    scope = "global" if is_global else "local"
    click.echo(success(f"Set {scope} config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
def config_get(key):
    """
    Get a config value.

    Examples:
        pathignore config get core.ignorefile
    """
    section, option = split_key(key)
    value = get_config().get(section, option)
    if value is None:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Unset global config')
def config_unset(key, is_global):
    """Remove a config value."""
    section, option = split_key(key)
    if not get_config().unset(section, option, global_config=is_global):
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(success(f"Unset {key}"))


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
def config_list(is_global):
    """
    List all config values.

    Examples:
        pathignore config list
        pathignore config list --global
    """
    values = get_config().list_all(global_only=is_global)
    if not values:
        click.echo(info("No configuration set"))
        return

    for section in sorted(values):
        for key, value in sorted(values[section].items()):
            click.echo(f"{Fore.CYAN}{section}.{key}{Style.RESET_ALL}={value}")
