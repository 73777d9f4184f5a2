"""CLI output utilities and formatting."""

from colorama import Fore, Style


def _paint(color: str, symbol: str, message: str) -> str:
    return f"{color}{symbol} {message}{Style.RESET_ALL}"


def success(message: str) -> str:
    """Format success message in green."""
    return _paint(Fore.GREEN, '✓', message)


def info(message: str) -> str:
    """Format info message in cyan."""
    return _paint(Fore.CYAN, '→', message)


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return _paint(Fore.YELLOW, '⚠', message)


def error(message: str) -> str:
    """Format error message in red."""
    return _paint(Fore.RED, '✗', message)


def staged(path: str) -> str:
    """Format a staged path for status output."""
    return f"  {Fore.GREEN}staged:{Style.RESET_ALL} {path}"


def short_hash(digest: str) -> str:
    """Abbreviate a digest for display."""
    return f"{Fore.YELLOW}{digest[:8]}{Style.RESET_ALL}"
