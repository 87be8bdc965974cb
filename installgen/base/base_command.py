"""
Base Command Class

Abstract base for installgen CLI commands.
Provides common functionality and structure.
"""

from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console
from rich.markup import escape

from installgen.config import Settings, load_settings
from installgen.exceptions import InstallGenError
from installgen.logger import GenerateLogger
from installgen.ui_components import show_header


class BaseCommand(ABC):
    """
    Abstract base command class.

    Provides:
    - Logger initialization
    - Header display
    - Error handling at the command boundary
    """

    def __init__(self, verbose: bool = False, settings: Optional[Settings] = None):
        self.verbose = verbose
        self.settings = settings or load_settings()
        self.console = Console()
        self.err_console = Console(stderr=True)
        self.logger: Optional[GenerateLogger] = None

    def init_logger(self, command_name: str) -> GenerateLogger:
        """
        Initialize command logger.

        Args:
            command_name: Command name, used in the log file name

        Returns:
            GenerateLogger instance
        """
        self.logger = GenerateLogger(
            command_name, log_dir=self.settings.log_dir, verbose=self.verbose
        )
        return self.logger

    def show_header(
        self,
        title: str,
        subtitle: Optional[str] = None,
        details: Optional[dict] = None,
    ) -> None:
        """Show command header (skip in verbose mode)."""
        if not self.verbose:
            show_header(
                title=title,
                subtitle=subtitle,
                details=details,
                console=self.console,
            )

    def print_success(self, message: str) -> None:
        self.console.print(f"[green]✓ {escape(message)}[/green]")

    def handle_error(self, message: str, context: Optional[str] = None) -> None:
        """
        Report an error with consistent formatting on stderr.

        Args:
            message: Error message
            context: Optional context line
        """
        if self.logger:
            self.logger.log_error(message, context=context)
        else:
            self.err_console.print(
                f"[bold red]✗ {escape(message)}[/bold red]", soft_wrap=True
            )
            if context:
                self.err_console.print(f"  [dim]{escape(context)}[/dim]", soft_wrap=True)

    def _show_log_path(self) -> None:
        if self.logger and self.logger.log_path:
            self.err_console.print(
                f"[dim]Logs saved to:[/dim] {self.logger.log_path}", soft_wrap=True
            )

    @abstractmethod
    def execute(self) -> None:
        """
        Execute command logic.

        Must be implemented by subclasses.
        """
        pass

    def run(self) -> None:
        """
        Run command with error handling.

        Every failure is terminal: it is reported once and turned into a
        non-zero exit status.
        """
        try:
            self.execute()
        except KeyboardInterrupt:
            if self.logger:
                self.logger.has_errors = True
            self.err_console.print("\n[yellow]⚠️  Operation cancelled by user[/yellow]")
            self._show_log_path()
            raise SystemExit(130)
        except SystemExit:
            raise
        except InstallGenError as e:
            self.handle_error(e.message, context=e.context)
            self._show_log_path()
            raise SystemExit(e.exit_code)
        except PermissionError as e:
            self.handle_error(
                f"Permission denied: {e}",
                context="Check that the output directory is writable",
            )
            self._show_log_path()
            raise SystemExit(1)
        except OSError as e:
            self.handle_error(f"File system error: {e}")
            self._show_log_path()
            raise SystemExit(1)
        except Exception as e:
            error_type = type(e).__name__
            self.handle_error(f"{error_type}: {e}")
            self._show_log_path()
            raise SystemExit(1)
        finally:
            if self.logger:
                self.logger.close()
