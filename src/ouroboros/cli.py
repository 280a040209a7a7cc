from pathlib import Path
import pickle
from typing import Any

import typer

from .config import Settings
from .logging import get_logger
from .structural import structural_eq, structural_hash, structural_repr

app = typer.Typer(
    help=(
        "OUROBOROS – inspect pickled, possibly self-referential data. "
        "Unpickling runs code: only load files you trust."
    ),
    no_args_is_help=True,
)


class DataLoadError(Exception):
    """Raised when a data file cannot be unpickled."""


def load_data(path: Path) -> Any:
    logger = get_logger(__name__)
    logger.info(f"Loading {path}")
    try:
        with path.open("rb") as handle:
            return pickle.load(handle)
    except (OSError, pickle.UnpicklingError, EOFError, AttributeError, ImportError, ValueError) as exc:
        raise DataLoadError(f"Failed to load {path}: {exc}") from exc


def _load_or_exit(path: Path) -> Any:
    try:
        return load_data(path)
    except DataLoadError as exc:
        get_logger(__name__).error(str(exc))
        raise typer.Exit(code=2) from exc


@app.command()
def show(
    path: Path = typer.Argument(..., exists=True, readable=True, help="Pickle file to render"),
    placeholder: str = typer.Option("...", help="Text shown where a container refers back to itself"),
) -> None:
    """Print a recursion-safe representation of the pickled value."""
    try:
        settings = Settings(placeholder=placeholder)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--placeholder") from exc
    typer.echo(structural_repr(_load_or_exit(path), settings))


@app.command("hash")
def hash_command(
    path: Path = typer.Argument(..., exists=True, readable=True, help="Pickle file to hash"),
) -> None:
    """Print the structural hash of the pickled value."""
    typer.echo(str(structural_hash(_load_or_exit(path))))


@app.command()
def compare(
    first: Path = typer.Argument(..., exists=True, readable=True, help="First pickle file"),
    second: Path = typer.Argument(..., exists=True, readable=True, help="Second pickle file"),
    assume_equal_on_cycle: bool = typer.Option(
        True,
        "--assume-equal-on-cycle/--strict-cycles",
        help="Treat a pair revisited during comparison as equal",
    ),
) -> None:
    """
    Compare two pickled values structurally.

    Prints 'equal' and exits 0, or prints 'different' and exits 1.
    """
    logger = get_logger(__name__)
    settings = Settings(equal_on_recursion=assume_equal_on_cycle)
    left = _load_or_exit(first)
    right = _load_or_exit(second)

    if structural_eq(left, right, settings):
        typer.echo("equal")
        return
    logger.info(f"{first} and {second} differ")
    typer.echo("different")
    raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
