from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Optional

import typer

from .app import analyze, URLValidationError
from .passwords import PasswordOptionsError, calculate_strength, generate_for_user

app = typer.Typer(add_completion=False, no_args_is_help=True)

MARKS = {"safe": "+", "warning": "!", "danger": "x"}


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@app.callback()
def main(
    log_level: LogLevel = typer.Option(LogLevel.WARNING, "--log-level", help="Log level", case_sensitive=False),
):
    """Heuristic URL risk scoring and password tools."""
    logging.basicConfig(level=log_level.value)


@app.command("analyze")
def analyze_command(
    url: str = typer.Argument(..., help="URL to score, scheme optional"),
    json_output: bool = typer.Option(False, "--json", help="Output result as JSON"),
):
    """Score a URL and list the indicators behind the score."""
    try:
        result = analyze(url)
    except URLValidationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    if json_output:
        typer.echo(json.dumps(result.model_dump(mode="json"), indent=2))
        return

    typer.echo(f"URL:   {result.normalized_url}")
    typer.echo(f"Score: {result.score}/100 ({result.risk_label})")
    typer.echo(result.recommendation)
    for ind in result.indicators:
        typer.echo(f"  [{MARKS[ind.category]}] {ind.title}: {ind.description}")


@app.command("password")
def password_command(
    length: int = typer.Option(16, "--length", "-l", help="Password length"),
    uppercase: bool = typer.Option(True, "--uppercase/--no-uppercase"),
    lowercase: bool = typer.Option(True, "--lowercase/--no-lowercase"),
    numbers: bool = typer.Option(True, "--numbers/--no-numbers"),
    symbols: bool = typer.Option(True, "--symbols/--no-symbols"),
    name: Optional[str] = typer.Option(None, "--name", help="Your name, kept out of the password"),
    birthday: Optional[str] = typer.Option(None, "--birthday", help="Birth date as YYYY-MM-DD"),
    phone: Optional[str] = typer.Option(None, "--phone", help="Phone number"),
):
    """Generate a password that avoids your personal data."""
    try:
        password, warnings = generate_for_user(
            length, name=name, birthday=birthday, phone=phone,
            uppercase=uppercase, lowercase=lowercase, numbers=numbers, symbols=symbols,
        )
    except PasswordOptionsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    typer.echo(password)
    typer.echo(f"Strength: {calculate_strength(password)['text']}")
    for w in warnings:
        typer.echo(f"Warning: {w}", err=True)


if __name__ == "__main__":
    app()
