"""
Utilities module for the damage engine.

Console printing helpers with rich formatting.
"""

from typing import Any

from rich.console import Console
from rich.rule import Rule

# Initialize the rich console.
_console = Console(markup=True, width=120, force_terminal=True, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def ccapture(content: Any) -> str:
    """
    Captures console output as a plain string, markup removed.

    Args:
        content (Any): The content to capture.

    Returns:
        str: The captured output as a string.

    """
    console = Console(markup=True, width=120, no_color=True, force_terminal=False)
    with console.capture() as capture:
        console.print(content, markup=True, end="")
    return capture.get()
