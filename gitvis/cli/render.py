"""Terminal rendering of the three areas and the commit history."""

from typing import List

import click
from colorama import Fore, Style

from gitvis.core.repository import Repository
from gitvis.operations.status import FileStatus, StatusResolver, max_changes
from gitvis.cli.output import change_bar, info, status_label


def format_file(file_status: FileStatus, scale: int) -> str:
    """Format one file line: name, status, counts and change bar."""
    diff = file_status.diff
    counts = f"+{diff.insertions} -{diff.deletions}"
    bar = change_bar(diff.insertions, diff.deletions, scale)
    return f"    {file_status.file.name:<12} {status_label(file_status.status)} {counts:<8} {bar}"


def render_files(title: str, files: List[FileStatus], scale: int) -> None:
    click.echo(f"{Style.BRIGHT}{title}{Style.RESET_ALL}")

    if not files:
        click.echo(f"    {Style.DIM}(empty){Style.RESET_ALL}")
        return

    for file_status in files:
        click.echo(format_file(file_status, scale))


def render_status(repo: Repository) -> None:
    """Show working directory and staging area with derived statuses."""
    resolver = StatusResolver(repo)
    working = resolver.working_directory()
    staged = resolver.staging_area()

    # Both areas share one scale so bars are comparable.
    scale = max_changes(working + staged)

    render_files("Working Directory", working, scale)
    click.echo()
    render_files("Staging Area", staged, scale)
    click.echo()

    head = repo.head
    if head is None:
        click.echo(info("No commits yet"))
    else:
        click.echo(info(f"HEAD is at {Fore.YELLOW}{head.short_checksum}{Fore.CYAN} ({len(repo.commits)} commit(s))"))


def render_log(repo: Repository) -> None:
    """Show commits newest first, each with its file statuses."""
    resolver = StatusResolver(repo)
    log = resolver.log()

    if not log:
        click.echo(info("No commits yet"))
        return

    head = repo.head
    for number, entry in reversed(list(enumerate(log, start=1))):
        marker = f" {Fore.CYAN}(HEAD){Style.RESET_ALL}" if entry.commit is head else ""
        click.echo(f"{Fore.YELLOW}commit {entry.commit.short_checksum}{Style.RESET_ALL} #{number}{marker}")

        scale = max_changes(entry.files)
        for file_status in entry.files:
            click.echo(format_file(file_status, scale))

        click.echo()
