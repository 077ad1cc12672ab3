"""
Command-line interface for the question wizard.

``qwizard demo`` walks through every question kind on the terminal;
``qwizard table`` prints an option table the way the questions lay it out.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from qw_common.errors import QWError
from qw_common.logging import configure_logging
from qw_ui.flows import questions as flows
from qw_ui.flows.errors import UIFlowError
from qw_ui.flows.validators import is_integer
from qw_ui.settings import EngineSettings
from qw_ui.tui.core.protocols import QuestionAsker
from qw_ui.tui.system.components.table_layout import render_option_table
from qw_ui.tui.system.facade import TerminalAsker

logger = logging.getLogger(__name__)

app = typer.Typer(help="Ask interactive wizard questions on the terminal.", no_args_is_help=True)
console = Console()


@app.callback(invoke_without_command=True)
def entry(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level for diagnostics written to stderr (default from QW_LOG_LEVEL).",
    ),
    debug: bool = typer.Option(False, "--debug", help="Shortcut for --log-level DEBUG."),
) -> None:
    """Configure logging and settings before any command runs."""
    settings = EngineSettings.from_env()
    configure_logging(
        level=log_level or settings.log_level,
        debug=debug,
        json=settings.log_json,
        force=True,
    )
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def run_demo(asker: QuestionAsker, settings: EngineSettings) -> dict[str, object]:
    """Ask the sample series of questions and return the collected answers."""
    answers: dict[str, object] = {}
    answers["region"] = flows.ask_choice(
        asker,
        "Region",
        [["us-east-1", "N. Virginia"], ["eu-west-1", "Ireland"], ["ap-south-1", "Mumbai"]],
        ["us-east-1", "eu-west-1", "ap-south-1"],
        headers=["Region", "Description"],
        default="eu-west-1",
        settings=settings,
    )
    answers["groups"] = flows.ask_many(
        asker,
        "Security groups",
        [["sg-web", "HTTP and HTTPS"], ["sg-ssh", "SSH"], ["sg-db", "Postgres"]],
        ["sg-web", "sg-ssh", "sg-db"],
        headers=["Group", "Rules"],
        defaults=["sg-ssh"],
        settings=settings,
    )
    answers["timer"] = flows.ask_text(
        asker,
        "Auto-termination timer in minutes",
        default="60",
        validators=[is_integer],
        context=settings,
    )
    if flows.ask_yes_no(asker, "Would you like to add tags?", settings=settings) == "Yes":
        answers["tags"] = flows.ask_user_tags(
            asker, default_tags={"owner": "me"}, settings=settings
        )
    rows = [[key.capitalize(), str(value)] for key, value in answers.items()]
    rows.append(["Instance type", "t2.micro"])
    values = [*answers.keys(), ""]
    answers["confirmed"] = flows.ask_confirmation(
        asker, rows, values, allow_edit=True, settings=settings
    )
    logger.debug(f"Demo answered {len(answers)} questions")
    return answers


@app.command("demo")
def demo(ctx: typer.Context) -> None:
    """Walk through every question kind interactively."""
    settings: EngineSettings = ctx.obj or EngineSettings()
    try:
        answers = run_demo(TerminalAsker(), settings)
    except QWError as exc:
        error = UIFlowError.from_error(exc)
        console.print(f"[red]{error}[/red]")
        raise typer.Exit(error.exit_code) from None
    for key, value in answers.items():
        console.print(f"[bold]{key}[/bold]: {escape(str(value))}")


@app.command("table")
def table(
    ctx: typer.Context,
    rows: List[str] = typer.Argument(..., help="Rows as comma-separated cells."),
    headers: Optional[str] = typer.Option(None, "--headers", help="Comma-separated headers."),
) -> None:
    """Print rows as an option table."""
    settings: EngineSettings = ctx.obj or EngineSettings()
    parsed = [[cell.strip() for cell in row.split(",")] for row in rows]
    header_cells = [cell.strip() for cell in headers.split(",")] if headers else []
    try:
        rendered = render_option_table(parsed, header_cells, width=settings.table_width)
    except QWError as exc:
        error = UIFlowError.from_error(exc)
        console.print(f"[red]{error}[/red]")
        raise typer.Exit(error.exit_code) from None
    if rendered.header:
        typer.echo(rendered.header)
    for item in rendered.items:
        typer.echo(item.text)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
