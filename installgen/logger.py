"""
Logging system for installgen
Provides real-time logging to files with clean console output
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from rich.console import Console
from rich.markup import escape

from installgen.constants import LOG_DATE_FORMAT, LOG_TIME_FORMAT

console = Console()
err_console = Console(stderr=True)


class GenerateLogger:
    """
    Manages logging for a generation run
    - Writes all output to a log file in real-time
    - Shows clean progress UI in console (unless verbose)
    - Captures errors with context on stderr
    """

    def __init__(
        self, operation: str, log_dir: Optional[Path] = None, verbose: bool = False
    ):
        """
        Initialize logger

        Args:
            operation: Operation name (e.g., 'generate')
            log_dir: Root of the log tree; None disables the log file
            verbose: If True, show all log lines in console
        """
        self.operation = operation
        self.verbose = verbose
        self.log_file: Optional[TextIO] = None
        self.log_path: Optional[Path] = None
        self.has_errors = False

        if log_dir is not None:
            # Structure: {log_dir}/{date}/{time}_{operation}.log
            now = datetime.now()
            day_dir = log_dir / now.strftime(LOG_DATE_FORMAT)
            day_dir.mkdir(parents=True, exist_ok=True)

            self.log_path = day_dir / f"{now.strftime(LOG_TIME_FORMAT)}_{operation}.log"
            self.log_file = open(self.log_path, "w", buffering=1, encoding="utf-8")
            self._write_log_header()

    def _write_log_header(self):
        """Write log file header"""
        header = f"""
{"=" * 80}
installgen Log
{"=" * 80}
Operation: {self.operation}
Started: {datetime.now().isoformat()}
{"=" * 80}

"""
        self.log_file.write(header)
        self.log_file.flush()

    def log(self, message: str, level: str = "INFO"):
        """
        Log a message to file and optionally console

        Args:
            message: Message to log
            level: Log level (INFO, WARNING, ERROR, DEBUG)
        """
        timestamp = datetime.now().strftime("%H:%M:%S")

        if self.log_file:
            self.log_file.write(f"[{timestamp}] [{level}] {message}\n")
            self.log_file.flush()

        if self.verbose:
            text = escape(message)
            if level == "ERROR":
                err_console.print(f"[red]{text}[/red]")
            elif level == "WARNING":
                console.print(f"[yellow]{text}[/yellow]")
            elif level == "DEBUG":
                console.print(f"[dim]{text}[/dim]")
            else:
                console.print(text)

    def debug(self, message: str):
        self.log(message, "DEBUG")

    def log_error(self, error: str, context: Optional[str] = None):
        """
        Log an error with context

        Args:
            error: Error message
            context: Additional context (e.g., paths that were tried)
        """
        self.has_errors = True

        if self.log_file:
            error_block = f"""
{"!" * 80}
ERROR OCCURRED
{"!" * 80}
{error}
"""
            if context:
                error_block += f"\nContext: {context}\n"
            error_block += f"{'!' * 80}\n\n"
            self.log_file.write(error_block)
            self.log_file.flush()

        err_console.print(f"[bold red]✗ {escape(error)}[/bold red]", soft_wrap=True)
        if context:
            err_console.print(
                f"  [color(208)]{escape(context)}[/color(208)]", soft_wrap=True
            )

    def step(self, step_name: str):
        """
        Start a new step

        Args:
            step_name: Name of the step
        """
        self.log(f"Step: {step_name}", "INFO")

        if not self.verbose:
            console.print(f"[color(214)]▶[/color(214)] [white]{escape(step_name)}[/white]")

    def success(self, message: str):
        """Log a success message"""
        self.log(message, "INFO")

        if not self.verbose:
            console.print(f"  [dim]✓ {escape(message)}[/dim]")

    def warning(self, message: str):
        """Log a warning message"""
        self.log(message, "WARNING")

        if not self.verbose:
            console.print(f"  [yellow]⚠[/yellow] [dim]{escape(message)}[/dim]")

    def close(self):
        """Close log file"""
        if self.log_file:
            footer = f"""
{"=" * 80}
Completed: {datetime.now().isoformat()}
Status: {"FAILED" if self.has_errors else "SUCCESS"}
{"=" * 80}
"""
            self.log_file.write(footer)
            self.log_file.close()
            self.log_file = None
