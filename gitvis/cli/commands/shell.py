"""Shell and run commands - drive a tutorial session from the terminal."""

import shlex
from typing import Iterable, Optional

import click

from gitvis.core.config import get_config
from gitvis.core.errors import ConfigError
from gitvis.operations.session import ERROR, Session
from gitvis.cli.output import error, info, success
from gitvis.cli.render import render_log, render_status

HELP_TEXT = """Commands:
  add                        create a new file
  modify <file> [ins del]    edit a file (random size if omitted)
  delete <file>              delete a file
  stage <file>               add a file's changes to the staging area
  stage-all                  stage every changed file
  unstage <file>             take a file out of the staging area
  commit                     store the staged changes as a new commit
  revert <commit>            restore the working directory to a commit
  status                     show working directory and staging area
  log                        show the commit history
  help                       show this help
  quit                       leave the shell"""

FILE_COMMANDS = ('modify', 'delete', 'stage', 'unstage')


def build_session(config_path: Optional[str], seed: Optional[int]) -> Session:
    """Create a session configured from the config files and environment."""
    try:
        config = get_config(config_path)
        return Session(config.modification_generator(seed))
    except ConfigError as e:
        click.echo(error(e.message))
        raise click.Abort()


def execute(session: Session, line: str) -> bool:
    """
    Execute one command line against a session.

    Args:
        session: Session to drive
        line: Raw command line

    Returns:
        bool: False when the learner asked to quit
    """
    try:
        parts = shlex.split(line)
    except ValueError as e:
        click.echo(error(f"Cannot parse command: {e}"))
        return True

    if not parts:
        return True

    name, args = parts[0].lower(), parts[1:]

    if name in ('quit', 'exit'):
        return False

    if name == 'help':
        click.echo(HELP_TEXT)
        return True

    if name == 'status':
        render_status(session.repo)
        return True

    if name == 'log':
        render_log(session.repo)
        return True

    action = _build_action(session, name, args)
    if action is None:
        return True

    session.dispatch(action)

    entry = session.log.last()
    if entry is not None and entry.action is action:
        click.echo(error(entry.message) if entry.level == ERROR else success(entry.message))

    return True


def _build_action(session: Session, name: str, args: list):
    if name in FILE_COMMANDS and not args:
        click.echo(error(f"Usage: {name} <file>"))
        return None

    if name == 'add':
        return session.add_file()

    if name == 'modify':
        if len(args) not in (1, 3):
            click.echo(error("Usage: modify <file> [insertions deletions]"))
            return None
        if len(args) == 3:
            try:
                return session.modify_file(args[0], int(args[1]), int(args[2]))
            except ValueError:
                click.echo(error("Insertions and deletions must be integers"))
                return None
        return session.modify_file(args[0])

    if name == 'delete':
        return session.delete_file(args[0])

    if name == 'stage':
        return session.stage_file(args[0])

    if name == 'stage-all':
        return session.stage_all_files()

    if name == 'unstage':
        return session.unstage_file(args[0])

    if name == 'commit':
        return session.create_commit()

    if name == 'revert':
        if not args:
            click.echo(error("Usage: revert <commit>"))
            return None
        return session.revert_commit(args[0])

    click.echo(error(f"Unknown command: {name} (type 'help')"))
    return None


def split_commands(chunks: Iterable[str]) -> list:
    """Split ';'-separated command chunks into single command lines."""
    lines = []

    for chunk in chunks:
        for line in chunk.split(';'):
            line = line.strip()
            if line and not line.startswith('#'):
                lines.append(line)

    return lines


@click.command('shell')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), help='Config file to use')
@click.option('--seed', type=int, help='Seed for random modifications')
def shell_cmd(config_path, seed):
    """
    Start an interactive tutorial session.
    
    Examples:
        gitvis shell
        gitvis shell --seed 42
    """
    session = build_session(config_path, seed)

    click.echo(info("Type 'help' for a list of commands."))

    while True:
        try:
            line = click.prompt('gitvis', default='', show_default=False, prompt_suffix='> ')
        except (EOFError, click.Abort):
            click.echo()
            break

        if not execute(session, line):
            break


@click.command('run')
@click.argument('commands', nargs=-1)
@click.option('-s', '--script', type=click.File('r'), help='File with one command per line')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), help='Config file to use')
@click.option('--seed', type=int, help='Seed for random modifications')
@click.option('--strict', is_flag=True, help='Fail if any command is rejected')
@click.option('--log', 'show_log', is_flag=True, help='Show the commit history at the end')
def run_cmd(commands, script, config_path, seed, strict, show_log):
    """
    Run a sequence of commands and show the resulting state.
    
    Commands are separated by ';' or given one per line in a script.
    
    Examples:
        gitvis run "add; modify file1 3 1; stage file1; commit"
        gitvis run --script lesson.txt --log
    """
    chunks = list(commands)
    if script is not None:
        chunks.extend(script.read().splitlines())

    lines = split_commands(chunks)
    if not lines:
        click.echo(error("No commands given"))
        raise click.Abort()

    session = build_session(config_path, seed)

    for line in lines:
        if not execute(session, line):
            break

    click.echo()
    render_status(session.repo)

    if show_log:
        click.echo()
        render_log(session.repo)

    if strict and session.log.errors():
        click.echo(error(f"{len(session.log.errors())} command(s) were rejected"))
        raise click.Abort()
