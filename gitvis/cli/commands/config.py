"""Config command - manage simulation configuration."""

import click

from gitvis.core.config import get_config
from gitvis.core.errors import ConfigError
from gitvis.cli.output import success, error, info


def split_key(key: str):
    """Split 'section.option' into its parts; bare keys belong to 'session'."""
    return key.split('.', 1) if '.' in key else ('session', key)


@click.group('config')
def config_cmd():
    """Get and set simulation options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
@click.option('--file', 'config_path', type=click.Path(dir_okay=False), help='Config file to write')
def config_set(key, value, is_global, config_path):
    """
    Set a config value.
    
    Examples:
        gitvis config set --global modify.max_insertions 20
        gitvis config set --file lesson.ini session.seed 7
    """
    if not is_global and not config_path:
        click.echo(error("Use --global or --file to choose where to write"))
        raise click.Abort()

    section, option = split_key(key)

    try:
        get_config(config_path).set(section, option, value, global_config=is_global)
    except ConfigError as e:
        click.echo(error(e.message))
        raise click.Abort()

    scope = "global" if is_global else config_path
    click.echo(success(f"Set {scope} config: {section}.{option} = {value}"))


@config_cmd.command('get')
@click.argument('key')
@click.option('--file', 'config_path', type=click.Path(dir_okay=False), help='Config file to read')
def config_get(key, config_path):
    """
    Get a config value.
    
    Examples:
        gitvis config get modify.max_insertions
    """
    section, option = split_key(key)
    value = get_config(config_path).get(section, option)

    if value is None:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()

    click.echo(value)


@config_cmd.command('list')
@click.option('--file', 'config_path', type=click.Path(dir_okay=False), help='Config file to read')
def config_list(config_path):
    """
    List all config values.
    
    Examples:
        gitvis config list
    """
    values = get_config(config_path).list_all()

    if not values:
        click.echo(info("No configuration set"))
        return

    for section, options in values.items():
        for key, value in options.items():
            click.echo(f"  {section}.{key}={value}")
