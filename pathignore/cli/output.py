"""CLI output utilities and formatting."""

from colorama import Fore, Style

BANNER = f"""
{Fore.CYAN}{Style.BRIGHT}pathignore{Style.RESET_ALL} {Fore.WHITE}- gitignore-style path matching{Style.RESET_ALL}
"""


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


def format_flags(pattern) -> str:
    """Short flag column for a compiled pattern: negated, dir-only, anchored."""
    negated = f"{Fore.MAGENTA}!{Style.RESET_ALL}" if pattern.negated else '-'
    directory = f"{Fore.BLUE}d{Style.RESET_ALL}" if pattern.directory_only else '-'
    anchored = f"{Fore.YELLOW}a{Style.RESET_ALL}" if pattern.anchored else '-'
    return f"{negated}{directory}{anchored}"
