"""CLI output utilities and formatting."""

from colorama import Fore, Style

from gitvis.core.objects import Status

# ASCII art banner for the gitvis CLI
BANNER = f"""
{Fore.YELLOW}╔════════════════════════════════════════════════╗{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}                                                {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT}git{Fore.GREEN}vis{Style.RESET_ALL}                                       {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}                                                {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.WHITE}{Style.BRIGHT}Learn Git by watching it work{Style.RESET_ALL}                {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.GREEN}working directory → staging area → repo{Style.RESET_ALL}      {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}                                                {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}╚════════════════════════════════════════════════╝{Style.RESET_ALL}
"""

STATUS_COLORS = {
    Status.ADDED: Fore.GREEN,
    Status.MODIFIED: Fore.YELLOW,
    Status.DELETED: Fore.RED,
    Status.UNMODIFIED: Style.DIM,
}

BAR_WIDTH = 10


def success(message: str) -> str:
    """Format success message in green."""
    return f"{Fore.GREEN}✓ {message}{Style.RESET_ALL}"


def info(message: str) -> str:
    """Format info message in cyan."""
    return f"{Fore.CYAN}→ {message}{Style.RESET_ALL}"


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return f"{Fore.YELLOW}⚠ {message}{Style.RESET_ALL}"


def error(message: str) -> str:
    """Format error message in red."""
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"


def status_label(status: Status) -> str:
    """Format a status name in its colour, padded for alignment."""
    return f"{STATUS_COLORS[status]}{str(status):<10}{Style.RESET_ALL}"


def change_bar(insertions: int, deletions: int, max_changes: int) -> str:
    """
    Draw a +/- bar scaled against the largest change on screen.

    Args:
        insertions: Inserted lines
        deletions: Deleted lines
        max_changes: Largest change count among the displayed files

    Returns:
        Coloured bar of at most BAR_WIDTH characters
    """
    if max_changes <= 0:
        return ''

    plus = round(abs(insertions) * BAR_WIDTH / max_changes)
    minus = round(abs(deletions) * BAR_WIDTH / max_changes)
    return f"{Fore.GREEN}{'+' * plus}{Fore.RED}{'-' * minus}{Style.RESET_ALL}"
