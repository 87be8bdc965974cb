#!/usr/bin/env python3
"""installgen CLI - Main entry point"""

import functools
import os
import sys

import click
from click.exceptions import Abort, ClickException, MissingParameter, UsageError
from rich.console import Console
from rich.markup import escape

from installgen import __version__
from installgen.commands import generate
from installgen.config import load_env_file

console = Console()
err_console = Console(stderr=True)

BANNER = """
[bold cyan]╔═══════════════════════════════════════════════════════════╗[/bold cyan]
[bold cyan]║[/bold cyan]  [bold white]installgen[/bold white] - Windows cell install script generator  [bold cyan]║[/bold cyan]
[bold cyan]╚═══════════════════════════════════════════════════════════╝[/bold cyan]
"""


def _print_usage(error: UsageError) -> None:
    if error.ctx is None:
        return
    err_console.print(escape(error.ctx.get_usage()), soft_wrap=True)
    err_console.print(
        f"\n[dim]Run[/dim] [cyan]{escape(error.ctx.command_path)} --help[/cyan] "
        "[dim]for usage information[/dim]\n",
        soft_wrap=True,
    )


def handle_cli_errors(func):
    """Decorator to handle CLI errors gracefully."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except MissingParameter as e:
            err_console.print(
                f"\n[bold red]✗ Error:[/bold red] {escape(e.format_message())}\n",
                soft_wrap=True,
            )
            _print_usage(e)
            sys.exit(1)
        except UsageError as e:
            err_console.print(
                f"\n[bold red]✗ Error:[/bold red] {escape(e.format_message())}\n",
                soft_wrap=True,
            )
            _print_usage(e)
            sys.exit(1)
        except ClickException as e:
            e.show()
            sys.exit(e.exit_code)
        except Abort:
            err_console.print("\n\n[yellow]⚠️  Operation cancelled by user[/yellow]")
            sys.exit(130)
        except KeyboardInterrupt:
            err_console.print("\n\n[yellow]⚠️  Operation cancelled by user[/yellow]")
            sys.exit(130)
        except Exception as e:
            err_console.print(
                f"\n[bold red]✗ Unexpected error:[/bold red] {escape(str(e))}\n",
                soft_wrap=True,
            )
            if os.environ.get("DEBUG") or os.environ.get("VERBOSE"):
                import traceback

                err_console.print("[dim]Traceback:[/dim]")
                traceback.print_exc()
            sys.exit(1)

    return wrapper


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="installgen")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """
    installgen - Generate Windows cell install scripts from a BOSH director.

    \b
    Quick Start:
      installgen generate --bosh-url https://admin:pw@10.0.0.6:25555 --output-dir out

    \b
    Environment (also read from ./.env or ~/.installgen/.env):
      INSTALLGEN_BOSH_URL, INSTALLGEN_OUTPUT_DIR
      INSTALLGEN_BOSH_USERNAME, INSTALLGEN_BOSH_PASSWORD
      INSTALLGEN_LOG_DIR (or "off"), INSTALLGEN_TIMEOUT
    """
    if ctx.invoked_subcommand is None:
        console.print(BANNER)
        console.print("[yellow]Run 'installgen --help' for usage[/yellow]\n")


cli.add_command(generate.generate)


@handle_cli_errors
def main(argv=None):
    """Console entry point; returns the process exit status."""
    load_env_file()
    result = cli.main(args=argv, prog_name="installgen", standalone_mode=False)
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    sys.exit(main())
