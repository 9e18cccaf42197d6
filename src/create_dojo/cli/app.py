"""Typer CLI application for create-dojo."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from typer import Exit, Option, Typer

import create_dojo
from create_dojo.cli._prompts import TerminalPrompter
from create_dojo.config import DEFAULT_CONFIG, TemplateChoice
from create_dojo.fetch import DegitFetcher
from create_dojo.scaffold import ScaffoldResult, collect_selections, scaffold

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


@app.callback()
def main() -> None:
    """create-dojo — scaffolding tool for Dojo projects."""


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_time=False, show_path=False)],
        force=True,
    )


def _print_templates() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available templates")
    _console.print("[dim]│[/]")
    for t in DEFAULT_CONFIG.templates:
        _console.print(f"[dim]│[/]  [bold cyan]{t.value:<22}[/] [dim]{t.description}[/]")
    _console.print("[dim]│[/]")
    _console.print()


def _list_templates_callback(value: bool) -> None:
    if value:
        _print_templates()
        raise Exit()


def _report(line: str) -> None:
    _console.print(f"[dim]│[/]  {escape(line)}")


def _print_summary(result: ScaffoldResult, project_name: str) -> None:
    paths = result.paths
    _console.print("[dim]│[/]")
    _console.print(f"[bold green]◇[/]  Project initialized at {escape(str(paths.root))}")
    _console.print(
        f"[dim]│[/]  {DEFAULT_CONFIG.client_dir_name}/ [dim]— {escape(result.template.description)}[/]"
    )
    if result.rewritten:
        pinned = ", ".join(result.rewritten)
        _console.print(f"[dim]│[/]    [dim]pinned {escape(pinned)}[/]")
    if result.starter_error is None:
        _console.print(f"[dim]│[/]  {DEFAULT_CONFIG.starter_dir_name}/ [dim]— starter kit[/]")
    else:
        _console.print(
            f"[dim]│[/]  [bold yellow]▲[/] {DEFAULT_CONFIG.starter_dir_name}/ could not be "
            f"downloaded [dim](exit status {result.starter_error.status})[/]"
        )
    _console.print("[dim]│[/]")
    _console.print("[bold cyan]●[/]  Congrats! Your new project has been set up successfully.")
    _console.print()
    _console.print(f"Navigate into your project directory with:\n  cd {escape(project_name)}\n")
    _console.print("You can then build the starter and run the client.\n")
    _console.print("For detailed instructions, follow the README here:\n")
    _console.print(DEFAULT_CONFIG.docs_url)


@app.command()
def start(
    cwd: Annotated[
        Path,
        Option("--cwd", "-c", help="The working directory", show_default="current directory"),
    ] = Path("."),
    template_str: Annotated[
        str | None,
        Option(
            "--template",
            "-t",
            help="Client template. Run with --list-templates / -l to see all options.",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Show debug logs")] = False,
    list_templates: Annotated[
        bool,
        Option(
            "--list-templates",
            "-l",
            help="List all available templates and exit.",
            callback=_list_templates_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Initialize a new project with a selected template."""
    _configure_logging(verbose)

    template: TemplateChoice | None = None
    if template_str is not None:
        try:
            template = DEFAULT_CONFIG.find_template(template_str)
        except KeyError:
            valid = ", ".join(f"'{t.value}'" for t in DEFAULT_CONFIG.templates)
            _console.print()
            _console.print(
                f"[bold red]Error:[/] [bold]{escape(repr(template_str))}[/] is not a valid template."
            )
            _console.print(f"[dim]Valid values:[/] {valid}")
            _print_templates()
            raise Exit(code=2) from None

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  create-dojo v{create_dojo.__version__}")
    _console.print("[dim]│[/]")

    if template is not None:
        _console.print("[bold green]◇[/]  Select a template")
        _console.print(f"[dim]│[/]  {escape(template.label)}")
        _console.print("[dim]│[/]")

    try:
        template, project_name = collect_selections(DEFAULT_CONFIG, TerminalPrompter(), template)
        result = scaffold(
            DEFAULT_CONFIG,
            cwd.resolve(),
            template,
            project_name,
            DegitFetcher(),
            report=_report,
        )
    except EOFError:
        _err_console.print("[bold red]Aborted:[/] input closed before a project name was given.")
        raise Exit(code=1) from None
    except Exception as e:
        logger.debug("Pipeline failed", exc_info=True)
        _err_console.print(f"[bold red]An error occurred:[/] {escape(str(e) or repr(e))}")
        raise Exit(code=1) from None

    _print_summary(result, project_name)
