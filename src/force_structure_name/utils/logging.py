"""Colored console output for force-structure-name."""

import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager


# ANSI color codes
class Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    CYAN = "\033[36m"
    MAGENTA = "\033[35m"

    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"


def _supports_color() -> bool:
    """Check if terminal supports color output."""
    if os.environ.get("NO_COLOR"):
        return False
    if not hasattr(sys.stdout, "isatty"):
        return False
    return sys.stdout.isatty()


_USE_COLOR = _supports_color()


def _c(color: str, text: str) -> str:
    """Apply color to text if supported."""
    if not _USE_COLOR:
        return text
    return f"{color}{text}{Colors.RESET}"


def bold(text: str) -> str:
    """Make text bold."""
    return _c(Colors.BOLD, text)


def dim(text: str) -> str:
    """Make text dim."""
    return _c(Colors.DIM, text)


def cyan(text: str) -> str:
    """Color text cyan."""
    return _c(Colors.CYAN, text)


def magenta(text: str) -> str:
    """Color text magenta."""
    return _c(Colors.MAGENTA, text)


def bright_green(text: str) -> str:
    """Color text bright green."""
    return _c(Colors.BRIGHT_GREEN, text)


def bright_yellow(text: str) -> str:
    """Color text bright yellow."""
    return _c(Colors.BRIGHT_YELLOW, text)


# Log level formatting
def log_info(msg: str) -> None:
    """Print info message."""
    print(f"  {cyan('INFO')}  {msg}")


def log_ok(msg: str) -> None:
    """Print success message."""
    print(f"    {bright_green('OK')}  {msg}")


def log_warn(msg: str) -> None:
    """Print warning message."""
    print(f"  {bright_yellow('WARN')}  {msg}")


def log_detail(msg: str, indent: int = 6) -> None:
    """Print indented detail message."""
    print(f"{' ' * indent}{msg}")


def log_rename(entity_id: object, old: str, new: str) -> None:
    """Print a single planned name assignment."""
    print(f"{' ' * 6}{dim(str(entity_id))}  {old} {dim('->')} {magenta(new)}")


def print_header(title: str, char: str = "=", width: int = 60) -> None:
    """Print a header with decorative borders."""
    border = char * width
    print(f"\n{cyan(border)}")
    print(f"  {bold(title)}")
    print(f"{cyan(border)}")


def format_count(count: int, singular: str, plural: str | None = None) -> str:
    """Format count with proper singular/plural form."""
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count:,} {word}"


@contextmanager
def suppress_stdout() -> Iterator[None]:
    """Completely suppress stdout (redirect to /dev/null)."""
    with open(os.devnull, "w") as devnull:
        old_stdout = sys.stdout
        sys.stdout = devnull
        try:
            yield
        finally:
            sys.stdout = old_stdout
