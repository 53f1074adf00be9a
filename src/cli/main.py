"""CLI del juego (Typer).

Un único comando sin flags: la ronda entera se juega al invocar el script.
Aquí vive la única traducción de errores del Core a códigos de salida.
"""

from __future__ import annotations

import logging

import typer
from pydantic import ValidationError

from adapters.random_source import build_random_source
from adapters.stdin_reader import build_line_reader
from cli.ui_components import build_console, configure_logging, print_line
from core.config import AppSettings, describe_settings_errors
from core.errors import GuessRoundError
from core.services.guess_round import play_round

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Guess a secret number between 1 and 100.")

_console = build_console()
_err_console = build_console(stderr=True)


@app.command()
def play() -> None:
    """Play one round: read a single guess from stdin and report the result."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        for line in describe_settings_errors(exc):
            print_line(_err_console, line)
        raise typer.Exit(code=1) from exc
    configure_logging(settings.log_level)

    try:
        play_round(
            random_source=build_random_source(),
            line_reader=build_line_reader(),
            emit=lambda line: print_line(_console, line),
            reveal_secret=settings.reveal_secret,
        )
    except GuessRoundError as exc:
        logger.debug("Round aborted: %s", type(exc).__name__, exc_info=exc.__cause__ is not None)
        print_line(_err_console, exc.message)
        raise typer.Exit(code=1) from exc


def run() -> None:
    app()


if __name__ == "__main__":
    run()
