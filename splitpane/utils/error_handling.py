"""Error handling decorator for CLI commands.

Engine errors surface as a short red message and a non-zero exit code;
unexpected errors are additionally logged with their traceback.
"""

import functools
import logging
from typing import Any, Callable, Optional, TypeVar

import typer
from rich.console import Console

from ..exceptions import (
    InvalidIndexError,
    LayoutConfigError,
    SplitPaneError,
)
from .output import console as default_console

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_cli_error(
    operation: str,
    console: Optional[Console] = None,
    exit_code: int = 1,
    log_traceback: bool = True,
) -> Callable[[F], F]:
    """Decorator for consistent CLI command error handling.

    Args:
        operation: Description of the operation for error messages
        console: Rich Console instance for output (defaults to the shared one)
        exit_code: Exit code to use on error (default: 1)
        log_traceback: Whether to log the full traceback of unexpected errors

    Usage:
        @app.command()
        @handle_cli_error("dragging sash")
        def drag(layout: str):
            ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            _console = console or default_console
            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except typer.Abort:
                _console.print(f"[yellow]{operation.capitalize()} cancelled[/yellow]")
                raise typer.Exit(0) from None
            except FileNotFoundError as e:
                _console.print(f"[red]Error: {e}[/red]")
                raise typer.Exit(exit_code) from e
            except InvalidIndexError as e:
                _console.print(f"[red]Invalid index: {e}[/red]")
                raise typer.Exit(exit_code) from e
            except LayoutConfigError as e:
                _console.print(f"[red]Layout error: {e}[/red]")
                raise typer.Exit(exit_code) from e
            except SplitPaneError as e:
                _console.print(f"[red]Error {operation}: {e}[/red]")
                raise typer.Exit(exit_code) from e
            except Exception as e:
                _console.print(f"[red]Error {operation}: {e}[/red]")
                if log_traceback:
                    logger.error(f"Unexpected error during {operation}: {e}", exc_info=True)
                raise typer.Exit(exit_code) from e

        return wrapper  # type: ignore[return-value]

    return decorator
